"""Version information for Melodex."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to the analytics API or result records
# MINOR: New analytics routines, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.1.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.1.0 - Initial release
#         - Entity model: Genre, Song, Album, Playlist, User
#         - Fifteen analytics routines (genre stats, rankings, album filters,
#           user statistics, recommendations, affinity, dynamic playlists,
#           listening transitions)
#         - AnalyticsService facade with YAML/env configuration
#         - Pydantic response models for presentation layers
