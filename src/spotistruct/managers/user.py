__all__ = ['UserManager']

from spotistruct.managers.base import BaseManager


class UserManager(BaseManager):
    CACHE_KEY = 'users'
    RESOURCE_TYPE = 'user'

    def _resolve_id(self, identifier: str) -> str:
        # usernames are not base-62: "john.doe" is a valid ID
        if ':' not in identifier and '/' not in identifier:
            return identifier
        return super()._resolve_id(identifier)

    def get(self, user_id, force=None):
        """
        Get the public profile of a Spotify user.
        https://developer.spotify.com/documentation/web-api/reference/get-users-profile
        """
        user_id = self._resolve_id(user_id)
        cached = self._from_cache(user_id, force)
        if cached is not None:
            return cached
        return self._create(self.client.fetch('/users/{id}'.format(id=user_id)))

    def get_current(self):
        """
        Get the profile of the user who authorized the session. Always fetched.

        Relevant authorization scopes: user-read-email, user-read-private
        """
        return self._create(self.client.fetch('/me'))

    def get_playlists(self, user_id, limit=None, offset=None):
        """
        Get a page of the (simplified) public playlists of a user.
        https://developer.spotify.com/documentation/web-api/reference/get-list-users-playlists

        Args:
            limit: *Optional*. Default: 20. Minimum: 1. Maximum: 50.
            offset: *Optional*. Default: 0. Maximum: 100000.
        """
        user_id = self._resolve_id(user_id)
        data = self.client.fetch('/users/{id}/playlists'.format(id=user_id),
                                 params=dict(limit=limit, offset=offset))
        return self._create_array(data['items'], key='playlists', overwrite=False) if data else []
