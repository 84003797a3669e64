__all__ = ['ShowManager']

from spotistruct.managers.base import BaseManager


class ShowManager(BaseManager):
    CACHE_KEY = 'shows'
    RESOURCE_TYPE = 'show'

    def get(self, show_id, market='US', force=None):
        """
        Get Spotify catalog information for a single show, including the first page of its
        episodes.
        https://developer.spotify.com/documentation/web-api/reference/get-a-show
        """
        show_id = self._resolve_id(show_id)
        cached = self._from_cache(show_id, force)
        if cached is not None:
            return cached
        return self._create(self.client.fetch('/shows/{id}'.format(id=show_id),
                                              params=dict(market=market)))

    def get_multiple(self, show_ids, market='US'):
        """ Get several (simplified) shows (maximum: 50 IDs). """
        data = self.client.fetch('/shows', params=dict(ids=self._resolve_ids(show_ids),
                                                       market=market))
        return self._create_several(data['shows']) if data else []

    def get_episodes(self, show_id, market='US', limit=None, offset=None):
        """
        Get a page of the (simplified) episodes of a show.
        https://developer.spotify.com/documentation/web-api/reference/get-a-shows-episodes

        Args:
            limit: *Optional*. Default: 20. Minimum: 1. Maximum: 50.
            offset: *Optional*. The index of the first episode to return. Default: 0.
        """
        show_id = self._resolve_id(show_id)
        data = self.client.fetch('/shows/{id}/episodes'.format(id=show_id),
                                 params=dict(market=market, limit=limit, offset=offset))
        if not data:
            return []

        episodes = self._create_array(data['items'], key='episodes', overwrite=False)
        show = self.client.cache.get(self.CACHE_KEY, show_id)
        if show is not None:
            for episode in episodes:
                if episode._show is None:
                    episode._show = show
        return episodes
