__all__ = ['ArtistManager']

from spotistruct.managers.base import BaseManager


class ArtistManager(BaseManager):
    CACHE_KEY = 'artists'
    RESOURCE_TYPE = 'artist'

    def get(self, artist_id, force=None):
        """
        Get Spotify catalog information for a single artist.
        https://developer.spotify.com/documentation/web-api/reference/get-an-artist
        """
        artist_id = self._resolve_id(artist_id)
        cached = self._from_cache(artist_id, force)
        if cached is not None:
            return cached
        return self._create(self.client.fetch('/artists/{id}'.format(id=artist_id)))

    def get_multiple(self, artist_ids):
        """ Get several artists (maximum: 50 IDs). """
        data = self.client.fetch('/artists', params=dict(ids=self._resolve_ids(artist_ids)))
        return self._create_several(data['artists']) if data else []

    def get_albums(self, artist_id, include_groups=None, market=None, limit=None, offset=None):
        """
        Get a page of the (simplified) albums of an artist.
        https://developer.spotify.com/documentation/web-api/reference/get-an-artists-albums

        Args:
            include_groups:
                *Optional*. A list of keywords used to filter the response: ``album``,
                ``single``, ``appears_on``, ``compilation``. If not supplied, all album types
                are returned.
            market:
                *Optional*. If not given, you are likely to get duplicate results, one for each
                market in which the album is available.
            limit: *Optional*. Default: 20. Minimum: 1. Maximum: 50.
            offset: *Optional*. Default: 0.
        """
        artist_id = self._resolve_id(artist_id)
        data = self.client.fetch('/artists/{id}/albums'.format(id=artist_id),
                                 params=dict(include_groups=include_groups, market=market,
                                             limit=limit, offset=offset))
        return self._create_array(data['items'], key='albums', overwrite=False) if data else []

    def get_top_tracks(self, artist_id, market='US'):
        """
        Get the top tracks of an artist by country.
        https://developer.spotify.com/documentation/web-api/reference/get-an-artists-top-tracks
        """
        artist_id = self._resolve_id(artist_id)
        data = self.client.fetch('/artists/{id}/top-tracks'.format(id=artist_id),
                                 params=dict(market=market))
        return self._create_array(data['tracks'], key='tracks') if data else []

    def get_related_artists(self, artist_id):
        """
        Get artists similar to a given artist, based on the listening history of the Spotify
        community.
        https://developer.spotify.com/documentation/web-api/reference/get-an-artists-related-artists
        """
        artist_id = self._resolve_id(artist_id)
        data = self.client.fetch('/artists/{id}/related-artists'.format(id=artist_id))
        return self._create_array(data['artists']) if data else []
