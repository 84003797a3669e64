"""
Identity cache of the hydrated structures, one ``id -> structure`` mapping per resource type.

Managers look into the cache before issuing a request (unless forced) and store what they
fetch; structures store the nested objects they hydrate (e.g. the artists of a track) so that
related structures can reference one another without fetching them again. Entries are never
evicted: a refetch overwrites them.
"""
__all__ = [
    'CACHE', 'CACHE_KEYS', 'CacheSettings', 'ObjectCache', 'create_cache_struct',
    'create_cache_struct_array', 'create_cached_playlist_tracks', 'register_structure'
]

import logging
import os
from typing import Any, Callable, Dict, Iterable, List, Optional

from attr import attrs

logger = logging.getLogger(__name__)

CACHE_KEYS = ('artists', 'albums', 'tracks', 'playlists', 'episodes', 'shows', 'users')

_STRUCTURE_CLASSES: Dict[str, type] = {}


def register_structure(key: str) -> Callable[[type], type]:
    """ Class decorator binding a structure class to a cache key """
    _check_key(key)

    def decorator(cls):
        _STRUCTURE_CLASSES[key] = cls
        return cls

    return decorator


def _check_key(key):
    if key not in CACHE_KEYS:
        raise ValueError('invalid cache key: %r' % key)


@attrs(auto_attribs=True)
class CacheSettings:
    """ Tells, for each resource type, if fetched structures are cached """
    artists: bool = True
    albums: bool = True
    tracks: bool = True
    playlists: bool = True
    episodes: bool = True
    shows: bool = True
    users: bool = True

    @staticmethod
    def disabled() -> 'CacheSettings':
        return CacheSettings(**{key: False for key in CACHE_KEYS})

    @staticmethod
    def from_environment(prefix: str = 'SPOTISTRUCT') -> 'CacheSettings':
        """
        Reads the variable ``{prefix}_CACHE``: either "all", "none" or a comma-separated list of
        the resource types to cache (e.g. "tracks,artists"). All types are cached if the
        variable is not defined.
        """
        value = os.getenv(prefix + '_CACHE', 'all').strip().lower()
        if value == 'all':
            return CacheSettings()
        if value in ('none', ''):
            return CacheSettings.disabled()
        keys = {key.strip() for key in value.split(',') if key.strip()}
        for key in keys:
            _check_key(key)
        return CacheSettings(**{key: key in keys for key in CACHE_KEYS})

    def is_enabled(self, key: str) -> bool:
        _check_key(key)
        return getattr(self, key)


class ObjectCache(object):
    """ Unbounded mappings from Spotify ID to structure, one per resource type """

    def __init__(self):
        self._mappings: Dict[str, Dict[str, Any]] = {key: {} for key in CACHE_KEYS}

    def mapping(self, key: str) -> Dict[str, Any]:
        _check_key(key)
        return self._mappings[key]

    def get(self, key: str, id: str) -> Optional[Any]:
        return self.mapping(key).get(id)

    def has(self, key: str, id: str) -> bool:
        return id in self.mapping(key)

    def put(self, key: str, structure) -> None:
        self.mapping(key)[structure.id] = structure

    def clear(self, key: Optional[str] = None) -> None:
        keys = CACHE_KEYS if key is None else [key]
        for k in keys:
            self.mapping(k).clear()

    def __getattr__(self, name):
        # cache.tracks, cache.playlists, ...
        if name in CACHE_KEYS:
            return self._mappings[name]
        raise AttributeError(name)

    def __len__(self):
        return sum(len(mapping) for mapping in self._mappings.values())

    def __repr__(self):
        sizes = ', '.join('%s=%d' % (key, len(self._mappings[key])) for key in CACHE_KEYS)
        return '%s(%s)' % (self.__class__.__name__, sizes)


CACHE = ObjectCache()


def create_cache_struct(key: str, client, data: Dict[str, Any], overwrite: bool = True):
    """
    Hydrates the structure registered for ``key`` and stores it in the cache of the client if
    caching is enabled for that resource type.

    Args:
        overwrite:
            if False and an object with the same ID is already cached, the cached object is
            returned and ``data`` is ignored. Nested (simplified) objects are created this way
            so that they never replace a fully fetched object.
    """
    _check_key(key)
    enabled = client.cache_settings.is_enabled(key)
    object_id = data.get('id')

    if not overwrite and enabled and object_id and client.cache.has(key, object_id):
        return client.cache.get(key, object_id)

    structure = _STRUCTURE_CLASSES[key](client, data)
    # local tracks and some playlist items have no ID
    if enabled and object_id:
        client.cache.put(key, structure)
        logger.debug('Cached %s %s', key, object_id)
    return structure


def create_cache_struct_array(key: str, client, items: Optional[Iterable[Dict[str, Any]]],
                              overwrite: bool = False) -> List[Any]:
    return [create_cache_struct(key, client, data, overwrite=overwrite)
            for data in items or () if data is not None]


def create_cached_playlist_tracks(client, items: Optional[Iterable[Dict[str, Any]]]) -> List[Any]:
    """ Hydrates the items of a playlist page into PlaylistTrack records """
    from spotistruct.structures.playlist import PlaylistTrack
    return [PlaylistTrack.from_data(client, item) for item in items or ()]
