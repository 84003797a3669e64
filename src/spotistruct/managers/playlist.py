__all__ = ['PlaylistManager']

from spotistruct.cache import create_cached_playlist_tracks
from spotistruct.managers.base import BaseManager


def _uri_of(item):
    """ Accepts both URI strings and structures """
    return getattr(item, 'uri', item)


class PlaylistManager(BaseManager):
    CACHE_KEY = 'playlists'
    RESOURCE_TYPE = 'playlist'

    def get(self, playlist_id, market='US', force=None):
        """
        Get a playlist, including the first page of its items.
        https://developer.spotify.com/documentation/web-api/reference/get-playlist

        Args:
            playlist_id: Spotify ID, URI or URL of the playlist
            market:
                Only the items available in that market are returned. Default: "US".
            force:
                if True, the playlist is fetched even if it is cached; if None, it is fetched
                only when caching of playlists is disabled.
        """
        playlist_id = self._resolve_id(playlist_id)
        cached = self._from_cache(playlist_id, force)
        if cached is not None:
            return cached
        return self._create(self.client.fetch('/playlists/{id}'.format(id=playlist_id),
                                              params=dict(market=market)))

    def get_tracks(self, playlist_id, market=None, limit=None, offset=None):
        """
        Get a page of the items of a playlist as a list of
        :class:`~spotistruct.structures.PlaylistTrack`.
        https://developer.spotify.com/documentation/web-api/reference/get-playlists-tracks

        Args:
            limit: *Optional*. Default: 100. Minimum: 1. Maximum: 100.
            offset: *Optional*. The index of the first item to return. Default: 0.
        """
        playlist_id = self._resolve_id(playlist_id)
        data = self.client.fetch('/playlists/{id}/tracks'.format(id=playlist_id),
                                 params=dict(market=market, limit=limit, offset=offset))
        return create_cached_playlist_tracks(self.client, data['items']) if data else []

    def create(self, user_id, name, public=True, collaborative=False, description=None):
        """
        Create an (empty) playlist for a Spotify user. Requires a user token.
        https://developer.spotify.com/documentation/web-api/reference/create-playlist

        Relevant authorization scopes: playlist-modify-public, playlist-modify-private

        Args:
            collaborative:
                to create a collaborative playlist, ``public`` must be False.
        """
        self.client.ensure_scope('playlist-modify-', public=public)
        data = self.client.fetch('/users/{user_id}/playlists'.format(user_id=user_id),
                                 method='POST',
                                 json_data=dict(name=name, public=public,
                                                collaborative=collaborative,
                                                description=description))
        return self._create(data)

    def edit(self, playlist_id, name=None, public=None, collaborative=None, description=None):
        """
        Change the details of a playlist owned by the current user. Only the arguments that
        are not None are changed. Requires a user token.
        https://developer.spotify.com/documentation/web-api/reference/change-playlist-details
        """
        self.client.ensure_scope('playlist-modify-', public=public)
        playlist_id = self._resolve_id(playlist_id)
        self.client.fetch('/playlists/{id}'.format(id=playlist_id), method='PUT',
                          json_data=dict(name=name, public=public, collaborative=collaborative,
                                         description=description))

    def add_items(self, playlist_id, uris, position=None):
        """
        Add tracks or episodes to a playlist and return the new snapshot ID of the playlist
        (an empty string if Spotify doesn't return it). Requires a user token.
        https://developer.spotify.com/documentation/web-api/reference/add-tracks-to-playlist

        Args:
            uris: Spotify URIs of tracks/episodes or the structures themselves (maximum: 100)
            position:
                zero-based index where the items are inserted; if omitted, they're appended.
        """
        playlist_id = self._resolve_id(playlist_id)
        data = self.client.fetch('/playlists/{id}/tracks'.format(id=playlist_id),
                                 method='POST',
                                 json_data=dict(uris=[_uri_of(uri) for uri in uris],
                                                position=position))
        return data['snapshot_id'] if data else ''

    def remove_items(self, playlist_id, uris, snapshot_id=None):
        """
        Remove all the occurrences of the given tracks/episodes from a playlist and return
        the new snapshot ID. Requires a user token.
        https://developer.spotify.com/documentation/web-api/reference/remove-tracks-playlist

        Args:
            snapshot_id:
                *Optional*. The version of the playlist the removal is applied to.
        """
        playlist_id = self._resolve_id(playlist_id)
        data = self.client.fetch('/playlists/{id}/tracks'.format(id=playlist_id),
                                 method='DELETE',
                                 json_data=dict(tracks=[dict(uri=_uri_of(uri)) for uri in uris],
                                                snapshot_id=snapshot_id))
        return data['snapshot_id'] if data else ''
