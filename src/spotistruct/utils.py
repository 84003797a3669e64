__all__ = [
    'get_default_http_adapter', 'ResourceInfo', 'normalize_scope', 'get_id',
    'format_uri', 'format_url', 'parse_release_date', 'code_image_url', 'RESOURCE_TYPES',
]

import datetime
from typing import Iterable, Optional, Tuple

import urllib3
from attr import attrib, attrs
from cachecontrol import CacheControlAdapter

from spotistruct.exceptions import ResourceTypeMismatch

OPEN_SPOTIFY_URL = 'https://open.spotify.com'
SCANNABLES_URL = 'https://scannables.scdn.co/uri/plain/jpeg'
RESOURCE_TYPES = frozenset(['track', 'album', 'artist', 'playlist', 'user', 'episode', 'show'])


def format_uri(obj_type, obj_id, owner_id=None):
    if owner_id:
        return 'spotify:user:{}:{}:{}'.format(owner_id, obj_type, obj_id)
    return 'spotify:{}:{}'.format(obj_type, obj_id)


def format_url(obj_type, obj_id, owner_id=None):
    if owner_id:
        return '/'.join([OPEN_SPOTIFY_URL, 'user', owner_id, obj_type, obj_id])
    return '/'.join([OPEN_SPOTIFY_URL, obj_type, obj_id])


@attrs(frozen=True, eq=False, repr=False)
class ResourceInfo:
    """
    Immutable object storing type and ID of a Spotify resource. The ``owner_id`` is an
    optional field and can be provided only for playlists: legacy playlist URIs and URLs
    included the owner.

    It can be constructed from Spotify URIs and open.spotify.com URLs.
    """
    type = attrib()
    id = attrib()
    owner_id = attrib(default=None)

    def __attrs_post_init__(self):
        if self.type not in RESOURCE_TYPES:
            raise ValueError('invalid resource type: %r' % self.type)

        if not self.id.isalnum():
            raise ValueError('invalid resource id: %r' % self.id)

        if self.owner_id:
            if self.type != 'playlist':
                raise ValueError('you provided owner_id but the object is not a playlist, it is: %r'
                                 % self.type)
            if not self.owner_id.isalnum():
                raise ValueError('invalid owner id (not alphanumeric): %r' % self.owner_id)

    @staticmethod
    def _from_tokens(tokens, uri_or_url):
        if len(tokens) == 2:
            obj_type, obj_id = tokens
            return ResourceInfo(obj_type, obj_id)

        elif len(tokens) == 4:
            # legacy playlist URI/URL: spotify:user:{owner}:playlist:{id} and analogous URL
            user, owner_id, playlist, obj_id = tokens
            if user != 'user':
                raise ValueError('invalid Spotify URI/URL: ' + uri_or_url)
            return ResourceInfo(playlist, obj_id, owner_id)

        else:
            raise ValueError('invalid Spotify URI/URL: ' + uri_or_url)

    @staticmethod
    def from_uri(uri):
        tokens = uri.split(':')
        if tokens[0] == 'spotify':   # "spotify:" part is optional
            tokens.pop(0)
        return ResourceInfo._from_tokens(tokens, uri)

    @staticmethod
    def from_url(url):
        if not url.startswith(OPEN_SPOTIFY_URL):
            raise ValueError('invalid URL: ' + url)
        path = url[len(OPEN_SPOTIFY_URL):].split('?')[0].split('#')[0]
        tokens = [token for token in path.split('/') if token]
        return ResourceInfo._from_tokens(tokens, url)

    @staticmethod
    def parse(uri_or_url: str) -> 'ResourceInfo':
        if uri_or_url.startswith('https'):
            return ResourceInfo.from_url(uri_or_url)
        return ResourceInfo.from_uri(uri_or_url)

    @property
    def url(self):
        return format_url(self.type, self.id, self.owner_id)

    @property
    def uri(self):
        return format_uri(self.type, self.id, self.owner_id)

    def __repr__(self):
        if self.owner_id:
            return '%s(type=%r, id=%r, owner_id=%r)' % (self.__class__.__name__,
                                                        self.type, self.id, self.owner_id)
        return '%s(type=%r, id=%r)' % (self.__class__.__name__, self.type, self.id)

    def __eq__(self, other):
        """ Note: owner_id is not used """
        return isinstance(other, ResourceInfo) and other.type == self.type and other.id == self.id

    def __hash__(self):
        """ Note: owner_id is not used """
        return hash((self.type, self.id))


def get_id(identifier: str, expected_type: Optional[str] = None) -> str:
    """ Returns the base-62 ID of a Spotify resource given a Spotify URI, a Spotify URL or
    the ID itself.

    May raise:
        * :exc:`ValueError` - if either ``identifier`` or ``expected_type`` are not valid;
        * :exc:`~spotistruct.exceptions.ResourceTypeMismatch` - if ``identifier`` refers to a
          resource whose type is not ``expected_type``.
    """
    if identifier.isalnum():
        return identifier

    resource = ResourceInfo.parse(identifier)

    if expected_type and resource.type != expected_type:
        if expected_type not in RESOURCE_TYPES:
            raise ValueError('Invalid expected_type argument: ' + expected_type)
        raise ResourceTypeMismatch(expected_type, actual_type=resource.type)

    return resource.id


def parse_release_date(release_date: Optional[str],
                       precision: Optional[str] = 'day') -> Optional[datetime.date]:
    """
    Converts a Spotify release date to a :class:`datetime.date`. Spotify truncates the date
    according to ``release_date_precision``: "1998" (year), "1998-03" (month) or "1998-03-21"
    (day); missing parts default to 1. Returns None for unknown dates ("0000").
    """
    if not release_date:
        return None
    parts = [int(part) for part in release_date.split('-')]
    if precision == 'year':
        parts = parts[:1]
    elif precision == 'month':
        parts = parts[:2]
    parts += [1] * (3 - len(parts))
    year, month, day = parts[:3]
    if year == 0:
        return None
    return datetime.date(year, month or 1, day or 1)


def _normalize_hex_color(color: str) -> str:
    color = color.lstrip('#').upper()
    if len(color) == 3:
        color = ''.join(ch * 2 for ch in color)
    if len(color) != 6:
        raise ValueError('invalid hex color: %r' % color)
    return color


def code_image_url(uri: str, color: str = '1DB954', size: int = 1080) -> str:
    """
    Returns the URL of the Spotify code image of a resource. Bars are black on light
    backgrounds and white on dark ones.
    """
    color = _normalize_hex_color(color)
    red, green, blue = (int(color[i:i + 2], 16) for i in (0, 2, 4))
    brightness = 0.299 * red + 0.587 * green + 0.114 * blue
    bar_color = 'black' if brightness > 150 else 'white'
    return '{}/{}/{}/{}/{}'.format(SCANNABLES_URL, color, bar_color, size, uri)


def normalize_scope(scope) -> Tuple[str, ...]:
    if not scope:
        return tuple()
    elif isinstance(scope, str):
        return tuple(sorted(scope.split()))
    elif isinstance(scope, Iterable):
        return tuple(sorted(list(scope)))
    else:
        raise TypeError('scope must be str or Iterable[str]')


def get_default_http_adapter(adapter_class=CacheControlAdapter):
    """
    Returns an HTTPAdapter that resends a request when it fails with a 500, 502 or 504.
    By default, a CacheControlAdapter is returned, which adds HTTP caching to the session.
    Pass :class:`~requests.adapters.HTTPAdapter` if you don't want it.
    """
    return adapter_class(
        max_retries=urllib3.Retry(
            total=10,
            backoff_factor=0.3,
            status_forcelist=(500, 502, 504)
        ))
