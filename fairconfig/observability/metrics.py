"""Prometheus metrics for configuration loading and lookups."""

from prometheus_client import Counter, Gauge, Histogram

# Startup metrics
CONFIGURATION_LOADS = Counter(
    "fairconfig_configuration_loads_total",
    "Total number of configuration registrations by outcome",
    labelnames=["format", "status"],
)

CONFIGURATION_LOAD_LATENCY = Histogram(
    "fairconfig_configuration_load_latency_seconds",
    "Time spent resolving and parsing a configuration file",
    labelnames=["format"],
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
)

CONFIGURATIONS_REGISTERED = Gauge(
    "fairconfig_configurations_registered",
    "Number of registered configurations by status",
    labelnames=["status"],
)

# Request metrics
CONFIGURATION_LOOKUPS = Counter(
    "fairconfig_configuration_lookups_total",
    "Total number of request-time configuration lookups",
    labelnames=["name", "status"],
)
