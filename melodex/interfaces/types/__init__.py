"""Pydantic response models for analytics results."""

from .analytics_types import (
    AlbumSummaryResponse,
    ArtistCollaborationResponse,
    PlayStatisticsResponse,
    PremiumPlayStatisticsResponse,
    SongResponse,
    SongSummaryResponse,
    UserStatisticsResponse,
)

__all__ = [
    "AlbumSummaryResponse",
    "ArtistCollaborationResponse",
    "PlayStatisticsResponse",
    "PremiumPlayStatisticsResponse",
    "SongResponse",
    "SongSummaryResponse",
    "UserStatisticsResponse",
]
