__all__ = ['Show']

from spotistruct.cache import create_cache_struct_array, register_structure
from spotistruct.structures.base import Structure
from spotistruct.structures.common import Copyright, from_data_list


@register_structure('shows')
class Show(Structure):
    CACHE_KEY = 'shows'

    def __init__(self, client, data):
        super().__init__(client, data)
        self.available_markets = data.get('available_markets', [])
        self.copyrights = from_data_list(Copyright, data.get('copyrights'))
        self.description = data.get('description')
        self.html_description = data.get('html_description')
        self.explicit = data.get('explicit', False)
        self.is_externally_hosted = data.get('is_externally_hosted', False)
        self.languages = data.get('languages', [])
        self.media_type = data.get('media_type')
        self.publisher = data.get('publisher')
        self.total_episodes = data.get('total_episodes')

        episodes = data.get('episodes')
        self.episodes = []
        if episodes:
            self.episodes = create_cache_struct_array('episodes', client, episodes.get('items'))
            for episode in self.episodes:
                if episode._show is None:
                    episode._show = self

    def get_episodes(self, **kwargs):
        return self.manager.get_episodes(self.id, **kwargs)
