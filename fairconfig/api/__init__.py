"""FastAPI integration: startup fairing, per-name dependencies, error handling."""
