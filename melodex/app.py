"""
Application composition root.

Owns configuration, logging setup and the analytics service so callers get a
ready-to-use service from one place:

    from melodex.app import Application
    app = Application()
    service = app.analytics
"""

from __future__ import annotations

import logging
from typing import Any

from melodex.helpers.logging_helper import configure_logging
from melodex.services.analytics_svc import AnalyticsService
from melodex.services.config_service import ConfigService

logger = logging.getLogger(__name__)


class Application:
    """
    Composition root for Melodex.

    All configuration-derived values are computed in __init__; nothing here
    holds analytics state between calls.
    """

    def __init__(
        self,
        overrides: dict[str, Any] | None = None,
        search_dir: str | None = None,
        setup_logging: bool = True,
    ) -> None:
        self.config = ConfigService(overrides=overrides, search_dir=search_dir)
        self.log_level = self.config.get("logging.level", "INFO")
        if setup_logging:
            configure_logging(self.log_level)

        self.analytics = AnalyticsService.from_config_service(self.config)
        logger.info(
            "[Application] Analytics ready: default_top_n=%d shuffle_seed=%s",
            self.analytics.cfg.default_top_n,
            self.analytics.cfg.shuffle_seed,
        )
