"""Configuration file loading and default resolution."""

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import InterpolationResolutionError

from pro.constants import CONFIG_ENV_VAR, DEFAULT_CONFIG_FILE

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Load YAML configuration and merge it with built-in defaults."""

    BUILT_IN_DEFAULTS: dict[str, str] = {
        "repo": "",
        "branch": "main",
        "playbook_path": "src/pro",
        "name": "QuickSearch",
        "region": "sfo3",
        "size": "s-1vcpu-1gb",
        "tags": "",
    }

    def load_config(self, config_path: str | None = None) -> dict[str, Any]:
        """Load configuration from YAML file.

        Parameters
        ----------
        config_path : str | None
            Path to YAML config file. If None, checks PRO_CONFIG env var,
            then falls back to pro.yaml

        Returns
        -------
        dict[str, Any]
            Parsed configuration with all variable interpolations resolved,
            or ``{"defaults": {}}`` when the file does not exist

        Raises
        ------
        ValueError
            If the file is not valid YAML or variables cannot be resolved
        RuntimeError
            If the file exists but cannot be read
        """
        if config_path is None:
            config_path = os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_FILE)

        config_file = Path(config_path)

        if not config_file.exists():
            logger.debug("No config file at %s, using built-in defaults", config_file)
            return {"defaults": {}}

        try:
            cfg = OmegaConf.load(config_file)
        except yaml.YAMLError as e:
            logger.error("Failed to parse YAML config file %s: %s", config_file, e)
            raise ValueError(f"Invalid YAML in {config_file}: {e}") from e
        except OSError as e:
            logger.error("Failed to read config file %s: %s", config_file, e)
            raise RuntimeError(f"Failed to read config file {config_file}: {e}") from e

        if cfg is None or not OmegaConf.is_dict(cfg):
            return {"defaults": {}}

        if "vars" in cfg:
            vars_dict = OmegaConf.to_container(cfg.vars, resolve=False)
            for key, value in vars_dict.items():
                if key not in cfg:
                    cfg[key] = value

        try:
            config = OmegaConf.to_container(cfg, resolve=True, throw_on_missing=True)
        except InterpolationResolutionError as e:
            logger.error("Failed to resolve configuration variables: %s", e)
            raise ValueError(f"Configuration variable resolution error: {e}") from e
        except (ValueError, KeyError, AttributeError) as e:
            logger.error("Failed to resolve configuration variables: %s", e)
            raise ValueError(f"Configuration variable resolution error: {e}") from e

        if not config:
            return {"defaults": {}}

        return config

    def get_provider_config(
        self, config: dict[str, Any], provider: str
    ) -> dict[str, str]:
        """Merge built-in defaults, file defaults and a provider section.

        Parameters
        ----------
        config : dict[str, Any]
            Full configuration from YAML
        provider : str
            Provider section to apply on top of the defaults

        Returns
        -------
        dict[str, str]
            Merged settings, every value rendered as a string

        Raises
        ------
        ValueError
            If a section is not a mapping or names an unknown key
        """
        merged = copy.deepcopy(self.BUILT_IN_DEFAULTS)

        for section_name in ("defaults", provider):
            section = config.get(section_name) or {}

            if not isinstance(section, dict):
                raise ValueError(f"'{section_name}' section must be a mapping")

            self.validate_section(section_name, section)

            for key, value in section.items():
                merged[key] = self._to_flag_value(value)

        return merged

    def validate_section(self, section_name: str, section: dict[str, Any]) -> None:
        """Reject keys that do not correspond to a create option.

        Parameters
        ----------
        section_name : str
            Section name for error messages
        section : dict[str, Any]
            Section contents

        Raises
        ------
        ValueError
            If an unknown key is present
        """
        unknown = sorted(set(section) - set(self.BUILT_IN_DEFAULTS))

        if unknown:
            raise ValueError(
                f"Unknown keys in '{section_name}' section: {unknown}. "
                f"Allowed keys: {sorted(self.BUILT_IN_DEFAULTS)}"
            )

    @staticmethod
    def _to_flag_value(value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, (list, tuple)):
            return ",".join(str(item) for item in value)
        return str(value)
