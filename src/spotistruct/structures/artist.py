__all__ = ['Artist']

from spotistruct.cache import register_structure
from spotistruct.structures.base import Structure


@register_structure('artists')
class Artist(Structure):
    """
    Spotify artist. Artists nested in tracks and albums are "simplified": ``genres``,
    ``popularity`` and ``followers`` are only available on artists fetched directly.
    """
    CACHE_KEY = 'artists'

    def __init__(self, client, data):
        super().__init__(client, data)
        self.genres = data.get('genres', [])
        self.popularity = data.get('popularity')
        followers = data.get('followers')
        self.followers = followers['total'] if followers else None

    def get_top_tracks(self, market='US'):
        return self.manager.get_top_tracks(self.id, market=market)

    def get_albums(self, **kwargs):
        return self.manager.get_albums(self.id, **kwargs)
