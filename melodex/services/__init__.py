"""Services: configuration and the analytics facade."""

from .analytics_svc import AnalyticsConfig, AnalyticsService
from .config_service import ConfigService

__all__ = [
    "AnalyticsConfig",
    "AnalyticsService",
    "ConfigService",
]
