# flake8: noqa F401
__version__ = '0.1.0'
__all__ = [
    'Client',
    'AuthorizationCodeSession',
    'CACHE',
    'CacheSettings',
    'ClientCredentialsSession',
    'Credentials'
]

from .auth import AuthorizationCodeSession, ClientCredentialsSession, Credentials
from .cache import CACHE, CacheSettings
from .client import Client
