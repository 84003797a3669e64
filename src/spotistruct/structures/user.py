__all__ = ['User']

from spotistruct.cache import register_structure
from spotistruct.structures.base import Structure


@register_structure('users')
class User(Structure):
    CACHE_KEY = 'users'

    def __init__(self, client, data):
        super().__init__(client, data)
        self.display_name = data.get('display_name')
        self.name = self.display_name or self.id
        followers = data.get('followers')
        self.followers = followers['total'] if followers else None

    def get_playlists(self, **kwargs):
        return self.manager.get_playlists(self.id, **kwargs)
