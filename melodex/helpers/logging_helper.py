"""
Logging helpers for consistent, role-tagged log output.

MelodexLogFilter derives an [Identity] and [Role] tag from the module name
of each logger, so a record from ``melodex.components.analytics.catalog_analytics_comp``
renders as ``[Catalog Analytics] [Component]``.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(melodex_identity_tag)s %(melodex_role_tag)s%(message)s"

# Module-name suffix -> role label
_ROLE_SUFFIXES: dict[str, str] = {
    "_comp": "Component",
    "_svc": "Service",
    "_helper": "Helper",
    "_dto": "DTO",
    "_types": "Interface",
}


class MelodexLogFilter(logging.Filter):
    """Attach identity/role tags to every record passing through a handler."""

    def filter(self, record: logging.LogRecord) -> bool:
        identity, role = _derive_tags(record.name)
        record.melodex_identity_tag = f"[{identity}]"
        record.melodex_role_tag = f"[{role}] " if role else ""
        return True


def _derive_tags(logger_name: str) -> tuple[str, str]:
    module = logger_name.rsplit(".", 1)[-1]
    for suffix, role in _ROLE_SUFFIXES.items():
        stem = module[: -len(suffix)]
        if module.endswith(suffix) and stem.strip("_"):
            return _title(stem), role
    return _title(module) or logger_name, ""


def _title(name: str) -> str:
    return " ".join(part.capitalize() for part in name.split("_") if part)


def configure_logging(level: str | int = logging.INFO) -> logging.Handler:
    """
    Install a tagged console handler on the ``melodex`` logger.

    Calling this more than once replaces the previously installed handler.

    Args:
        level: Logging level name (e.g. "DEBUG"), numeric level, or numeric string (e.g. "10")

    Returns:
        The installed handler
    """
    if isinstance(level, str):
        text = level.strip()
        level = int(text) if text.isdigit() else logging.getLevelName(text.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger("melodex")
    for existing in list(root.handlers):
        if getattr(existing, "_melodex_handler", False):
            root.removeHandler(existing)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(MelodexLogFilter())
    handler._melodex_handler = True  # type: ignore[attr-defined]

    root.addHandler(handler)
    root.setLevel(level)
    return handler
