"""Configuration loading and schema.

- YAML-first configuration under configs/*.yaml
- Strict ${ENV_VAR} expansion (missing/empty env vars are errors)
"""

from __future__ import annotations

from snippetkit.config.errors import ConfigError
from snippetkit.config.loader import load_config, resolve_profile_configs
from snippetkit.config.model import AppConfig

__all__ = ["AppConfig", "ConfigError", "load_config", "resolve_profile_configs"]
