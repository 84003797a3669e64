"""
Session classes wrapping :class:`requests_oauthlib.OAuth2Session`. The client only needs
``request``, ``scope`` and ``mount``, so any of these (or an equivalent object) can be passed
to :class:`~spotistruct.client.Client`.

- :class:`BaseOAuth2Session`
    - :class:`ClientCredentialsSession`: app-only token, refreshed by fetching a new one;
    - :class:`AuthorizationCodeSession`: user token, refreshed with the refresh token.
"""
__all__ = [
    'BaseOAuth2Session', 'AuthorizationCodeSession', 'ClientCredentialsSession', 'Credentials'
]

import abc
import logging
import os
from typing import Dict, Optional, Tuple
from urllib.parse import parse_qs, urlparse

import requests
from attr import attrs
from oauthlib.oauth2 import BackendApplicationClient
from requests.auth import HTTPBasicAuth
from requests_oauthlib import OAuth2Session

from spotistruct.auth._token import OAuth2Token, TokenType
from spotistruct.exceptions import AccessDenied, AuthorizationException
from spotistruct.utils import normalize_scope

logger = logging.getLogger(__name__)

AUTH_URL = 'https://accounts.spotify.com/authorize'
TOKEN_URL = 'https://accounts.spotify.com/api/token'


@attrs(frozen=True, auto_attribs=True)
class Credentials:
    client_id: str
    client_secret: Optional[str]
    redirect_uri: Optional[str] = None

    @staticmethod
    def from_environment(prefix: str = 'SPOTISTRUCT') -> 'Credentials':
        """
        Reads Spotify OAuth2 credentials from the following environment variables:
        ``{prefix}_CLIENT_ID, {prefix}_CLIENT_SECRET, {prefix}_REDIRECT_URI``.

        Raises:
            ``KeyError``: if ``{prefix}_CLIENT_ID`` is not defined.
        """
        return Credentials(os.environ[prefix + '_CLIENT_ID'],
                           os.getenv(prefix + '_CLIENT_SECRET'),
                           os.getenv(prefix + '_REDIRECT_URI'))


class BaseOAuth2Session(abc.ABC):
    """
    Base class of the session wrappers. The wrapped :class:`requests_oauthlib.OAuth2Session`
    is accessible through the ``session`` property.

    When the token is expired, it is refreshed before the request is sent.
    """

    def __init__(self, session: OAuth2Session, client_secret: Optional[str]):
        self._session = session
        self._client_secret = client_secret
        self._token: Optional[OAuth2Token] = None

    @property
    def session(self) -> requests.Session:
        return self._session

    @property
    def client_id(self) -> str:
        return self._session.client_id

    @property
    def client_secret(self) -> Optional[str]:
        return self._client_secret

    @property
    def is_authorized(self) -> bool:
        return self._session.authorized

    @property
    def token(self) -> Optional[OAuth2Token]:
        return self._token

    @token.setter
    def token(self, token: TokenType):
        self.set_token(token)

    def set_token(self, token: TokenType) -> None:
        """
        Args:
            token: an OAuth2Token or an equivalent dictionary
        """
        if isinstance(token, dict):
            token = dict(token)
            if 'scope' not in token:
                token['scope'] = self.scope
            token = OAuth2Token.from_dict(token, ignore_unknown_keys=True)
        elif not isinstance(token, OAuth2Token):
            raise TypeError('token must either be a dict or an OAuth2Token')

        self._token = token
        token_dict = token.to_dict()
        del token_dict['scope']
        self._session.token = token_dict

    @property
    def scope(self) -> Tuple[str, ...]:
        if self._token:
            return self._token.scope
        return normalize_scope(self._session.scope)

    @abc.abstractmethod
    def _refresh_token(self, timeout=None) -> Dict:
        pass

    def refresh_token(self, timeout=None) -> OAuth2Token:
        """ Obtains a new token, stores it in the session and returns it. """
        logger.debug('Obtaining a new token')
        self.set_token(self._refresh_token(timeout=timeout))
        return self._token

    def request(self, method, url, params=None, data=None, headers=None, **kwargs):
        if self._token and self._token.is_expired():
            self.refresh_token()
        return self._session.request(method=method, url=url, params=params, data=data,
                                     headers=headers, **kwargs)

    def mount(self, prefix, adapter):
        self._session.mount(prefix, adapter)


class ClientCredentialsSession(BaseOAuth2Session):
    """ Session for the client credentials flow (no user data can be accessed) """

    def __init__(self, client_id, client_secret, **kwargs):
        session = OAuth2Session(client=BackendApplicationClient(client_id=client_id), **kwargs)
        super().__init__(session, client_secret)

    def fetch_token(self, timeout=None) -> OAuth2Token:
        token = self._session.fetch_token(TOKEN_URL, client_id=self.client_id,
                                          client_secret=self._client_secret, timeout=timeout)
        self.set_token(token)
        return self._token

    def _refresh_token(self, timeout=None):
        return self._session.fetch_token(TOKEN_URL, client_id=self.client_id,
                                         client_secret=self._client_secret, timeout=timeout)


class AuthorizationCodeSession(BaseOAuth2Session):
    """ Session for the authorization code flow """

    def __init__(self, client_id, client_secret, redirect_uri, scope=None, **kwargs):
        session = OAuth2Session(client_id=client_id, redirect_uri=redirect_uri, scope=scope,
                                **kwargs)
        super().__init__(session, client_secret)

    def authorization_url(self, force_dialog=False, **kwargs) -> Tuple[str, str]:
        """
        Returns the URL the user has to visit in order to authorize the app, together with the
        generated "state" parameter.

        Args:
            force_dialog (bool):
                if True, a user who already approved the app has to approve it again instead
                of being redirected automatically.
        """
        return self._session.authorization_url(AUTH_URL, show_dialog=force_dialog, **kwargs)

    def fetch_token(self, callback_url, timeout=None) -> OAuth2Token:
        """
        Exchanges the authorization code contained in the callback URL for an access token.

        Raises:
            ``AccessDenied``: if the user decided to not grant access
            ``AuthorizationException``: if the callback URL has any other ``error`` argument
        """
        params = parse_qs(urlparse(callback_url).query)
        if 'error' in params:
            error = params['error'][0]
            if error == 'access_denied':
                raise AccessDenied
            raise AuthorizationException(error)

        token = self._session.fetch_token(TOKEN_URL, authorization_response=callback_url,
                                          client_secret=self._client_secret, timeout=timeout)
        self.set_token(token)
        return self._token

    def _refresh_token(self, timeout=None):
        return self._session.refresh_token(
            TOKEN_URL, timeout=timeout,
            auth=HTTPBasicAuth(self.client_id, self._client_secret))
