__all__ = ['Client']

import logging
from typing import Any, Dict, Optional

from spotistruct.cache import CACHE, CacheSettings, ObjectCache
from spotistruct.exceptions import HttpError, InsufficientScope
from spotistruct.managers import (
    AlbumManager,
    ArtistManager,
    EpisodeManager,
    PlaylistManager,
    ShowManager,
    TrackManager,
    UserManager
)
from spotistruct.utils import ResourceInfo, get_default_http_adapter, normalize_scope

logger = logging.getLogger(__name__)


class Client(object):
    API_BASE_URL = 'https://api.spotify.com/v1'
    TYPE_TO_MANAGER_NAME = dict(
        track='tracks', album='albums', artist='artists', playlist='playlists',
        episode='episodes', show='shows', user='users'
    )

    def __init__(self, session, cache_settings: Optional[CacheSettings] = None,
                 cache: Optional[ObjectCache] = None, mount_default_adapter: bool = True):
        """
        Spotify web API client returning structures (Track, Playlist, ...) rather than
        dictionaries. The endpoints are grouped by resource type in managers::

            client = Client(session)
            track = client.tracks.get('3Fcfwhm8oRrBvBZ8KGhtea')
            track.artists[0].name

        Args:
            session:
                an authorized session, e.g. :class:`~spotistruct.auth.ClientCredentialsSession`
            cache_settings:
                resource types whose structures are cached; by default, all of them
            cache:
                the cache to use; by default, the process-wide one
            mount_default_adapter:
                mount an adapter retrying failed requests and caching HTTP responses (see
                :func:`~spotistruct.utils.get_default_http_adapter`)
        """
        self.session = session
        self.cache_settings = cache_settings if cache_settings is not None else CacheSettings()
        self.cache = cache if cache is not None else CACHE

        if mount_default_adapter:
            session.mount(self.API_BASE_URL, get_default_http_adapter())

        self.albums = AlbumManager(self)
        self.artists = ArtistManager(self)
        self.episodes = EpisodeManager(self)
        self.playlists = PlaylistManager(self)
        self.shows = ShowManager(self)
        self.tracks = TrackManager(self)
        self.users = UserManager(self)

    def fetch(self, url: str, method: str = 'GET', params: Optional[Dict[str, Any]] = None,
              json_data: Optional[Dict[str, Any]] = None,
              content_type: Optional[str] = None) -> Any:
        """
        Makes a request to the Web API and returns the decoded JSON body, or None if the body is
        empty.

        Args:
            url:
                endpoint path relative to ``API_BASE_URL`` (e.g. "/tracks/{id}") or absolute URL
            method:
                http method (GET, POST, PUT, DELETE)
            params:
                query parameters; None values are dropped and sequences are converted to strings
                of comma-separated values
            json_data:
                object to be serialized to JSON and sent as the body of the request; None values
                are dropped

        Raises:
            HttpError: if the response status is 400 or more
        """
        if not url.startswith('http'):
            url = self.API_BASE_URL + url

        headers = {}
        if json_data is not None:
            headers['Content-Type'] = content_type or 'application/json'
        elif content_type:
            headers['Content-Type'] = content_type

        processed_params = dict()
        for key, value in (params or {}).items():
            if value is None:
                continue
            if isinstance(value, (tuple, list)):
                processed_params[key] = ','.join(map(str, value))
            else:
                processed_params[key] = value

        if json_data:
            json_data = {key: value for key, value in json_data.items() if value is not None}
        json_data = json_data or None

        logger.debug('%s %s %s', method, url, processed_params)
        response = self.session.request(method, url, headers=headers,
                                        params=processed_params, json=json_data)

        if response.status_code >= 400:
            response.close()
            raise HttpError(response)

        if response.text and response.text != 'null':
            return response.json()
        return None

    def ensure_scope(self, needed_scope: str, public: Optional[bool] = None) -> None:
        """
        Raises :class:`InsufficientScope` if the scope of the session is not sufficient to carry
        out a request.

        Args:
            needed_scope: space-separated scope strings
            public:
                scope strings ending with ``"-"`` are completed with "public" or "private"
                according to this argument, e.g. ``ensure_scope('playlist-modify-', public=False)``
                checks for "playlist-modify-private". If None, either of the two is enough.
        """
        current_scope = set(normalize_scope(self.session.scope))
        needed = set()
        for scope_string in needed_scope.split():
            if not scope_string.endswith('-'):
                needed.add(scope_string)
            elif public is not None:
                needed.add(scope_string + ('public' if public else 'private'))
            elif not {scope_string + 'public', scope_string + 'private'} & current_scope:
                needed.add(scope_string + 'public')

        if not current_scope >= needed:
            raise InsufficientScope(needed, current_scope)

    def get(self, uri_or_url: str, **kwargs):
        """
        Returns the structure (track, album, artist, playlist, episode, show or user) given
        its Spotify URI or URL.
        """
        resource = ResourceInfo.parse(uri_or_url)
        manager = getattr(self, self.TYPE_TO_MANAGER_NAME[resource.type])
        return manager.get(resource.id, **kwargs)

    def __repr__(self):
        return '%s(session=%r, cache=%r)' % (self.__class__.__name__, self.session, self.cache)
