# flake8: noqa F401
__all__ = [
    'AlbumManager',
    'ArtistManager',
    'BaseManager',
    'EpisodeManager',
    'PlaylistManager',
    'ShowManager',
    'TrackManager',
    'UserManager'
]

from .album import AlbumManager
from .artist import ArtistManager
from .base import BaseManager
from .episode import EpisodeManager
from .playlist import PlaylistManager
from .show import ShowManager
from .track import TrackManager
from .user import UserManager
