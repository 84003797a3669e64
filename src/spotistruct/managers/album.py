__all__ = ['AlbumManager']

from spotistruct.managers.base import BaseManager


class AlbumManager(BaseManager):
    CACHE_KEY = 'albums'
    RESOURCE_TYPE = 'album'

    def get(self, album_id, market=None, force=None):
        """
        Get Spotify catalog information for a single album, including the first page of its
        tracks.
        https://developer.spotify.com/documentation/web-api/reference/get-an-album
        """
        album_id = self._resolve_id(album_id)
        cached = self._from_cache(album_id, force)
        if cached is not None:
            return cached
        return self._create(self.client.fetch('/albums/{id}'.format(id=album_id),
                                              params=dict(market=market)))

    def get_multiple(self, album_ids, market=None):
        """ Get several albums (maximum: 20 IDs). """
        data = self.client.fetch('/albums', params=dict(ids=self._resolve_ids(album_ids),
                                                        market=market))
        return self._create_several(data['albums']) if data else []

    def get_tracks(self, album_id, market=None, limit=None, offset=None):
        """
        Get a page of the (simplified) tracks of an album.
        https://developer.spotify.com/documentation/web-api/reference/get-an-albums-tracks

        Args:
            limit: *Optional*. Default: 20. Minimum: 1. Maximum: 50.
            offset: *Optional*. The index of the first track to return. Default: 0.
        """
        album_id = self._resolve_id(album_id)
        data = self.client.fetch('/albums/{id}/tracks'.format(id=album_id),
                                 params=dict(market=market, limit=limit, offset=offset))
        if not data:
            return []

        tracks = self._create_array(data['items'], key='tracks', overwrite=False)
        album = self.client.cache.get(self.CACHE_KEY, album_id)
        if album is not None:
            for track in tracks:
                if track.album is None:
                    track.album = album
        return tracks
