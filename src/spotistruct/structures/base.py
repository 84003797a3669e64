__all__ = ['Structure']

from typing import Any, Dict

from spotistruct.structures.common import Image, from_data_list
from spotistruct.utils import code_image_url


class Structure(object):
    """
    Base class of the objects hydrated from a Spotify API response. ``CACHE_KEY`` is both the
    cache mapping the objects are stored in and the name of the client attribute holding
    the manager of the resource type.
    """
    CACHE_KEY: str

    def __init__(self, client, data: Dict[str, Any]):
        self.client = client
        self.id = data.get('id')
        self.name = data.get('name')
        self.type = data.get('type')
        self.uri = data.get('uri')
        self.href = data.get('href')
        self.external_urls = data.get('external_urls') or {}
        self.images = from_data_list(Image, data.get('images'))

    @property
    def manager(self):
        return getattr(self.client, self.CACHE_KEY)

    def make_code_image(self, color: str = '1DB954') -> str:
        """
        Returns the URL of the Spotify code image of this object.

        Args:
            color: hex code of the background color
        """
        return code_image_url(self.uri, color)

    def fetch(self):
        """
        Fetches the object bypassing the cache, refreshes the cache and returns the result.

        Raises:
            ValueError: if the object has no ID (e.g. a local track)
        """
        if not self.id:
            raise ValueError('%s without an ID cannot be fetched' % self.__class__.__name__)
        return self.manager.get(self.id, force=True)

    def __repr__(self):
        return '%s(id=%r, name=%r)' % (self.__class__.__name__, self.id, self.name)
