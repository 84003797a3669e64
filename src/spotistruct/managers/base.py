__all__ = ['BaseManager']

import logging
from typing import Any, Dict, Iterable, List, Optional

from spotistruct.cache import create_cache_struct, create_cache_struct_array
from spotistruct.utils import get_id

logger = logging.getLogger(__name__)


class BaseManager(object):
    """
    Base class of the managers. A manager groups the endpoints of one resource type and turns
    their responses into structures, going through the cache of the client.

    Attributes:
        CACHE_KEY: cache mapping of the resource type (e.g. "tracks")
        RESOURCE_TYPE: Spotify type of the resource (e.g. "track")
    """
    CACHE_KEY: str
    RESOURCE_TYPE: str

    def __init__(self, client):
        self.client = client

    def _resolve_id(self, identifier: str) -> str:
        """
        Accepts a Spotify ID, URI or URL of the managed resource type. Raises ``ValueError``
        for anything else.
        """
        return get_id(identifier, self.RESOURCE_TYPE)

    def _resolve_ids(self, identifiers: Iterable[str]) -> List[str]:
        return [self._resolve_id(identifier) for identifier in identifiers]

    def _from_cache(self, object_id: str, force: Optional[bool]):
        """
        Returns the cached object or ``None`` if the object has to be fetched. If ``force`` is
        None, the object is fetched only when caching is disabled for the resource type.
        """
        if force is None:
            force = not self.client.cache_settings.is_enabled(self.CACHE_KEY)
        if force:
            return None

        cached = self.client.cache.get(self.CACHE_KEY, object_id)
        if cached is not None:
            logger.debug('Cache hit: %s %s', self.RESOURCE_TYPE, object_id)
        else:
            logger.debug('Cache miss: %s %s', self.RESOURCE_TYPE, object_id)
        return cached

    def _create(self, data: Optional[Dict[str, Any]], key: Optional[str] = None,
                overwrite: bool = True):
        if not data:
            return None
        return create_cache_struct(key or self.CACHE_KEY, self.client, data, overwrite=overwrite)

    def _create_array(self, items: Optional[Iterable[Dict[str, Any]]], key: Optional[str] = None,
                      overwrite: bool = True) -> List[Any]:
        return create_cache_struct_array(key or self.CACHE_KEY, self.client, items,
                                         overwrite=overwrite)

    def _create_several(self, items: Optional[Iterable[Optional[Dict[str, Any]]]]) -> List[Any]:
        """ Like _create_array but keeps a ``None`` for each ID Spotify didn't recognize """
        return [self._create(data) for data in items or ()]

    def __repr__(self):
        return '%s()' % self.__class__.__name__
