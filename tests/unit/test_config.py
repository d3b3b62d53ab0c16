"""Tests for configuration loading and default resolution."""

from pathlib import Path

import pytest

from pro.core.config import ConfigLoader


class TestLoadConfig:
    def test_missing_file_returns_empty_defaults(self) -> None:
        config = ConfigLoader().load_config("/nonexistent/path/pro.yaml")
        assert config == {"defaults": {}}

    def test_reads_path_from_env(self, write_config) -> None:
        write_config({"defaults": {"region": "nyc3"}})

        config = ConfigLoader().load_config()

        assert config["defaults"]["region"] == "nyc3"

    def test_vars_are_interpolated(self, write_config) -> None:
        write_config(
            {
                "vars": {"team": "search"},
                "digitalocean": {"tags": "${team},web", "name": "${team}-box"},
            }
        )

        config = ConfigLoader().load_config()

        assert config["digitalocean"]["tags"] == "search,web"
        assert config["digitalocean"]["name"] == "search-box"

    def test_undefined_variable_raises_value_error(self, write_config) -> None:
        write_config({"defaults": {"region": "${nowhere}"}})

        with pytest.raises(ValueError, match="Configuration variable resolution error"):
            ConfigLoader().load_config()

    def test_invalid_yaml_raises_value_error(self, isolated_config: Path) -> None:
        isolated_config.write_text("defaults: [unclosed\n")

        with pytest.raises(ValueError, match="Invalid YAML"):
            ConfigLoader().load_config()



class TestGetProviderConfig:
    def test_built_in_defaults(self) -> None:
        merged = ConfigLoader().get_provider_config({"defaults": {}}, "digitalocean")

        assert merged == {
            "repo": "",
            "branch": "main",
            "playbook_path": "src/pro",
            "name": "QuickSearch",
            "region": "sfo3",
            "size": "s-1vcpu-1gb",
            "tags": "",
        }

    def test_provider_section_overrides_defaults(self) -> None:
        config = {
            "defaults": {"region": "nyc3", "size": "s-2vcpu-2gb"},
            "digitalocean": {"region": "ams3"},
        }

        merged = ConfigLoader().get_provider_config(config, "digitalocean")

        assert merged["region"] == "ams3"
        assert merged["size"] == "s-2vcpu-2gb"

    def test_values_rendered_as_strings(self) -> None:
        config = {"defaults": {"branch": 2024, "tags": ["web", "db"]}}

        merged = ConfigLoader().get_provider_config(config, "digitalocean")

        assert merged["branch"] == "2024"
        assert merged["tags"] == "web,db"

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown keys in 'defaults' section"):
            ConfigLoader().get_provider_config(
                {"defaults": {"instance_type": "t3.medium"}}, "digitalocean"
            )

    def test_non_mapping_section_rejected(self) -> None:
        with pytest.raises(ValueError, match="must be a mapping"):
            ConfigLoader().get_provider_config({"digitalocean": ["sfo3"]}, "digitalocean")

    def test_does_not_mutate_built_in_defaults(self) -> None:
        loader = ConfigLoader()
        loader.get_provider_config({"defaults": {"region": "lon1"}}, "digitalocean")
        assert ConfigLoader.BUILT_IN_DEFAULTS["region"] == "sfo3"
