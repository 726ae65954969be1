"""Unit tests for the Configuration value wrapper."""

from pathlib import Path

import pytest

from fairconfig.formats import ConfigFormat
from fairconfig.models import CacheEntry, Configuration, EntryStatus, index_segments

DOCUMENT = {
    "parameters": {
        "env(DATABASE_URL)": "",
        "inital_id": 0,
        "limit_id": -1,
    },
    "diesel": {
        "dbal": {
            "driver": "mysql",
            "server_version": 5.7,
            "charset": "utf8",
            "default_table_options": {"charset": "utf8", "collate": "utf8_unicode_ci"},
            "url": "%env(resolve:DATABASE_URL)%",
        }
    },
    "servers": [{"host": "a.example"}, {"host": "b.example"}],
    "ports": {"80": "http"},
}


@pytest.fixture
def configuration() -> Configuration:
    return Configuration("diesel", DOCUMENT, ConfigFormat.JSON, Path("config/diesel.json"))


class TestIndexSegments:
    """Tests for index_segments function."""

    def test_dotted_path(self) -> None:
        """Dotted parts stay strings; list indices are resolved while walking."""
        assert index_segments("servers.0.host") == ["servers", "0", "host"]

    def test_single_int(self) -> None:
        assert index_segments(3) == [3]

    def test_sequence(self) -> None:
        assert index_segments(["a.b", 1]) == ["a.b", 1]


class TestConfigurationGet:
    """Tests for Configuration.get."""

    def test_top_level_key(self, configuration: Configuration) -> None:
        """Top-level keys return their subtree."""
        assert configuration.get("parameters") == DOCUMENT["parameters"]

    def test_key_with_parentheses(self, configuration: Configuration) -> None:
        """Keys like env(DATABASE_URL) are looked up verbatim."""
        assert configuration.get(["parameters", "env(DATABASE_URL)"]) == ""
        assert configuration.get("parameters.env(DATABASE_URL)") == ""

    def test_dotted_path(self, configuration: Configuration) -> None:
        """Dotted paths walk nested mappings."""
        assert configuration.get("diesel.dbal.driver") == "mysql"
        assert configuration.get("diesel.dbal.server_version") == 5.7

    def test_list_index(self, configuration: Configuration) -> None:
        """Integer segments index into lists."""
        assert configuration.get("servers.1.host") == "b.example"
        assert configuration.get(["servers", -1, "host"]) == "b.example"

    def test_numeric_string_key(self, configuration: Configuration) -> None:
        """Numeric path parts match string keys in mappings."""
        assert configuration.get("ports.80") == "http"

    def test_zero_padded_key(self) -> None:
        """Digit-only keys are matched verbatim before any integer reading."""
        configuration = Configuration(
            "agents", {"codes": {"007": "bond", "7": "seven"}}, ConfigFormat.JSON, Path("agents.json")
        )

        assert configuration.get("codes.007") == "bond"
        assert configuration.get("codes.7") == "seven"

    def test_integer_keys_from_yaml(self) -> None:
        """YAML turns bare numeric keys into ints; dotted paths still reach them."""
        configuration = Configuration(
            "ports", {"ports": {80: "http"}}, ConfigFormat.YAML, Path("ports.yaml")
        )

        assert configuration.get("ports.80") == "http"

    def test_non_ascii_digit_key(self) -> None:
        """Unicode digits are ordinary keys and never list indices."""
        configuration = Configuration(
            "units", {"a": {"²": 1}, "b": [10, 20, 30]}, ConfigFormat.JSON, Path("units.json")
        )

        assert configuration.get("a.²") == 1
        assert configuration.get("b.²") is None
        assert configuration.get("b.٢", "none") == "none"

    def test_missing_returns_default(self, configuration: Configuration) -> None:
        """Any missing segment returns the default."""
        assert configuration.get("invalid_index") is None
        assert configuration.get("diesel.orm.driver", "sqlite") == "sqlite"
        assert configuration.get("servers.5.host") is None
        assert configuration.get("diesel.dbal.driver.name") is None

    def test_returned_values_are_copies(self, configuration: Configuration) -> None:
        """Mutating a returned value does not change the cached document."""
        parameters = configuration.get("parameters")
        parameters["inital_id"] = 42

        assert configuration.get("parameters.inital_id") == 0


class TestConfigurationMapping:
    """Tests for mapping-style access."""

    def test_getitem(self, configuration: Configuration) -> None:
        assert configuration["diesel"]["dbal"]["charset"] == "utf8"

    def test_getitem_missing_raises(self, configuration: Configuration) -> None:
        with pytest.raises(KeyError):
            configuration["missing"]

    def test_contains_and_keys(self, configuration: Configuration) -> None:
        assert "diesel" in configuration
        assert "missing" not in configuration
        assert configuration.keys() == ["parameters", "diesel", "servers", "ports"]

    def test_equality_with_document(self, configuration: Configuration) -> None:
        """A configuration equals its source document field for field."""
        assert configuration == DOCUMENT
        assert configuration.as_dict() == DOCUMENT

    def test_as_dict_is_a_copy(self, configuration: Configuration) -> None:
        data = configuration.as_dict()
        data["diesel"]["dbal"]["driver"] = "sqlite"

        assert configuration.get("diesel.dbal.driver") == "mysql"

    def test_repr_omits_values(self, configuration: Configuration) -> None:
        assert "mysql" not in repr(configuration)


class TestCacheEntry:
    """Tests for CacheEntry."""

    def test_is_present(self) -> None:
        assert CacheEntry(name="a", status=EntryStatus.PRESENT).is_present
        assert not CacheEntry(name="a", status=EntryStatus.NOT_FOUND).is_present

    def test_is_immutable(self) -> None:
        entry = CacheEntry(name="a", status=EntryStatus.NOT_FOUND)
        with pytest.raises(AttributeError):
            entry.status = EntryStatus.PRESENT  # type: ignore[misc]
