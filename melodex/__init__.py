"""
Melodex - in-memory analytics over a music catalog.

Layers:
- melodex.domain: entity model (Genre, Song, Album, Playlist, User)
- melodex.helpers: exceptions, logging, time helpers and result DTOs
- melodex.components.analytics: pure computation routines
- melodex.services: configuration and the AnalyticsService facade
- melodex.interfaces: pydantic response models for presentation layers
"""

from melodex.__version__ import __version__

__all__ = ["__version__"]
