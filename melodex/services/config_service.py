#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from defaults, YAML files, overrides and env vars
#  - Caches composed config
#  - Provides reload() for runtime changes
# ======================================================================

from __future__ import annotations

import contextlib
import logging
import os
from typing import TYPE_CHECKING, Any

import yaml

if TYPE_CHECKING:
    from melodex.services.analytics_svc import AnalyticsConfig

ENV_PREFIX = "MELODEX_"
ENV_CONFIG_PATH = "MELODEX_CONFIG_PATH"


class ConfigService:
    """
    Service for loading and caching application configuration.

    Loads config from multiple sources (defaults → YAML → overrides → env),
    caches the result, and provides reload capability.
    """

    def __init__(self, overrides: dict[str, Any] | None = None, search_dir: str | None = None) -> None:
        """
        Initialize ConfigService with empty cache.

        Args:
            overrides: Values merged over every file source (env vars still win)
            search_dir: Directory holding ``config/config.yaml``; defaults to the cwd
        """
        self._config: dict[str, Any] | None = None
        self._overrides = overrides or {}
        self._search_dir = search_dir
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> dict[str, Any]:
        """
        Get the composed configuration.

        Args:
            force_reload: If True, bypass cache and reload from sources

        Returns:
            Complete configuration dict
        """
        if self._config is None or force_reload:
            self._config = self._compose(self._overrides)
        return self._config

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dotted path.

        Example:
            >>> service.get("analytics.default_top_n")
            10
            >>> service.get("missing.key", 5)
            5
        """
        node: Any = self.get_config()
        for part in key_path.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def reload(self) -> dict[str, Any]:
        """Force reload configuration from all sources."""
        self._logger.info("Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    def make_analytics_config(self) -> AnalyticsConfig:
        """
        Build an AnalyticsConfig from the current configuration.

        This is the boundary where raw config values are coerced and
        validated before reaching the analytics service.
        """
        from melodex.services.analytics_svc import AnalyticsConfig

        default_top_n = int(self.get("analytics.default_top_n", 10))
        if default_top_n < 0:
            raise ValueError(f"analytics.default_top_n must be non-negative, got {default_top_n}")

        seed = self.get("analytics.shuffle_seed")
        return AnalyticsConfig(
            default_top_n=default_top_n,
            shuffle_seed=int(seed) if seed is not None else None,
        )

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Load final configuration from:
          1) Built-in defaults
          2) ./config/config.yaml (relative to search_dir or cwd)
          3) $MELODEX_CONFIG_PATH (if set)
          4) overrides dict passed in
          5) Environment variables (MELODEX_<SECTION>_<KEY>)

        Returns merged config as dict.
        """
        cfg = self._default_config()

        base_dir = self._search_dir or os.getcwd()
        self._deep_merge(cfg, self._load_yaml(os.path.join(base_dir, "config", "config.yaml")))

        env_path = os.getenv(ENV_CONFIG_PATH)
        if env_path:
            self._deep_merge(cfg, self._load_yaml(env_path))

        if overrides:
            self._deep_merge(cfg, overrides)

        self._apply_env_overrides(cfg)

        with contextlib.suppress(Exception):
            self._logger.debug("compose() loaded config; keys: %s", list(cfg.keys()))

        return cfg

    def _default_config(self) -> dict[str, Any]:
        """
        Base defaults; all fields present so no KeyErrors downstream.
        """
        return {
            "analytics": {
                "default_top_n": 10,  # n for top_n_songs_by_play_count when the caller omits it
                "shuffle_seed": None,  # seed for high-variety playlist shuffles; None = nondeterministic
            },
            "logging": {
                "level": "INFO",
            },
        }

    def _deep_merge(self, a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
        """
        Recursively merge dict b into dict a (mutates a, returns it).
        """
        for k, v in b.items():
            if isinstance(v, dict) and isinstance(a.get(k), dict):
                self._deep_merge(a[k], v)
            else:
                a[k] = v
        return a

    def _load_yaml(self, path: str) -> dict[str, Any]:
        """
        Load a YAML file; returns {} if not found or invalid.
        """
        if not path or not os.path.exists(path):
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self._logger.warning(f"Ignoring unreadable config file {path}: {e}")
            return {}
        if not isinstance(loaded, dict):
            self._logger.warning(f"Ignoring config file {path}: top level is not a mapping")
            return {}
        return loaded

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Support environment overrides of the form:
          MELODEX_ANALYTICS_DEFAULT_TOP_N=25
          MELODEX_LOGGING_LEVEL=DEBUG
        The first segment after the prefix must name an existing section.
        """
        for k, v in os.environ.items():
            if not k.startswith(ENV_PREFIX) or k == ENV_CONFIG_PATH:
                continue

            parts = k[len(ENV_PREFIX) :].lower().split("_", 1)
            if len(parts) == 1:
                continue
            section, field = parts
            if not isinstance(cfg.get(section), dict):
                continue

            cfg[section][field] = self._parse_env_value(v)

    @staticmethod
    def _parse_env_value(value: str) -> Any:
        lowered = value.lower()
        if lowered in ("true", "false"):
            return lowered == "true"
        if lowered in ("none", "null"):
            return None
        if value.lstrip("-").isdigit():
            return int(value)
        try:
            return float(value)
        except ValueError:
            return value
