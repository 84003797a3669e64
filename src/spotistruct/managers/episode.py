__all__ = ['EpisodeManager']

from spotistruct.managers.base import BaseManager


class EpisodeManager(BaseManager):
    CACHE_KEY = 'episodes'
    RESOURCE_TYPE = 'episode'

    def get(self, episode_id, market='US', force=None):
        """
        Get Spotify catalog information for a single episode. With a client credentials token
        the episode is found only if ``market`` is given.
        https://developer.spotify.com/documentation/web-api/reference/get-an-episode
        """
        episode_id = self._resolve_id(episode_id)
        cached = self._from_cache(episode_id, force)
        if cached is not None:
            return cached
        return self._create(self.client.fetch('/episodes/{id}'.format(id=episode_id),
                                              params=dict(market=market)))

    def get_multiple(self, episode_ids, market='US'):
        """ Get several episodes (maximum: 50 IDs). """
        data = self.client.fetch('/episodes', params=dict(ids=self._resolve_ids(episode_ids),
                                                          market=market))
        return self._create_several(data['episodes']) if data else []
