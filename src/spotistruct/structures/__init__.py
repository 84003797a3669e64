# flake8: noqa F401
__all__ = [
    'Album',
    'Artist',
    'AudioFeatures',
    'Copyright',
    'Episode',
    'Image',
    'LinkedTrack',
    'Playlist',
    'PlaylistTrack',
    'ResumePoint',
    'Show',
    'Structure',
    'Track',
    'User'
]

from .album import Album
from .artist import Artist
from .base import Structure
from .common import AudioFeatures, Copyright, Image, LinkedTrack, ResumePoint
from .episode import Episode
from .playlist import Playlist, PlaylistTrack
from .show import Show
from .track import Track
from .user import User
