__all__ = ['Playlist', 'PlaylistTrack']

from typing import Any, Optional

from attr import attrs

from spotistruct.cache import (
    create_cache_struct,
    create_cached_playlist_tracks,
    register_structure
)
from spotistruct.structures.base import Structure


@attrs(frozen=True, auto_attribs=True)
class PlaylistTrack:
    """
    An item of a playlist. ``track`` is a Track or an Episode (``None`` when Spotify
    doesn't return the item, e.g. when it is no longer available).
    """
    added_at: Optional[str]
    added_by: Optional[Any]
    is_local: bool
    track: Optional[Any]

    @staticmethod
    def from_data(client, data) -> 'PlaylistTrack':
        added_by = data.get('added_by')
        if added_by:
            added_by = create_cache_struct('users', client, added_by, overwrite=False)

        item = data.get('track')
        if item:
            key = 'episodes' if item.get('type') == 'episode' else 'tracks'
            item = create_cache_struct(key, client, item, overwrite=False)

        return PlaylistTrack(added_at=data.get('added_at'), added_by=added_by or None,
                             is_local=data.get('is_local', False), track=item or None)


@register_structure('playlists')
class Playlist(Structure):
    """
    Spotify playlist. Full playlists carry the first page of their items in ``tracks``;
    simplified ones (e.g. the playlists of a user) only carry ``total_tracks``.
    Use :meth:`get_tracks` for the other pages.
    """
    CACHE_KEY = 'playlists'

    def __init__(self, client, data):
        super().__init__(client, data)
        self.collaborative = data.get('collaborative', False)
        self.description = data.get('description')
        self.public = data.get('public')
        self.snapshot_id = data.get('snapshot_id')
        followers = data.get('followers')
        self.followers = followers['total'] if followers else None

        owner = data.get('owner')
        self.owner = create_cache_struct('users', client, owner, overwrite=False) if owner else None

        tracks = data.get('tracks') or {}
        self.total_tracks = tracks.get('total')
        self.tracks = create_cached_playlist_tracks(client, tracks.get('items'))

    def get_tracks(self, **kwargs):
        return self.manager.get_tracks(self.id, **kwargs)

    def add_items(self, uris, position=None):
        return self.manager.add_items(self.id, uris, position)

    def edit(self, **details):
        return self.manager.edit(self.id, **details)
