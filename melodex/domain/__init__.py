"""
Domain entity model.

Passive data holders with derived read-only accessors. Collections returned
by accessors are snapshots or read-only views; mutation goes through the
entity's own methods.
"""

from .album import Album
from .genre import Genre
from .playlist import Playlist
from .song import Song
from .user import User

__all__ = [
    "Album",
    "Genre",
    "Playlist",
    "Song",
    "User",
]
