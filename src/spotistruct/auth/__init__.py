# flake8: noqa F401
__all__ = [
    'AuthorizationCodeSession',
    'BaseOAuth2Session',
    'ClientCredentialsSession',
    'Credentials',
    'OAuth2Token'
]

from ._token import OAuth2Token
from .sessions import (
    AuthorizationCodeSession,
    BaseOAuth2Session,
    ClientCredentialsSession,
    Credentials
)
