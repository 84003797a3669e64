import json
from unittest.mock import Mock

import pytest

from payloads import API
from spotistruct import CacheSettings, Client
from spotistruct.cache import ObjectCache


def make_response(status_code=200, payload=None, url=API):
    response = Mock()
    response.status_code = status_code
    response.url = url
    response.text = json.dumps(payload) if payload is not None else ''
    response.json.return_value = payload
    return response


class FakeSession:
    """ Stands for an authorized OAuth2 session: answers with the payloads registered by path """

    def __init__(self, scope=()):
        self.scope = tuple(scope)
        self.routes = {}
        self.requests = []
        self.mounted = []

    def add(self, method, path, payload=None, status_code=200):
        self.routes[(method, API + path)] = (status_code, payload)

    def request(self, method, url, headers=None, params=None, json=None):
        self.requests.append(dict(method=method, url=url, headers=headers, params=params,
                                  json=json))
        status_code, payload = self.routes[(method, url)]
        return make_response(status_code, payload, url)

    def mount(self, prefix, adapter):
        self.mounted.append((prefix, adapter))


@pytest.fixture
def session():
    return FakeSession(scope=['playlist-modify-public', 'user-read-private'])


@pytest.fixture
def cache():
    return ObjectCache()


@pytest.fixture
def client(session, cache):
    return Client(session, cache=cache)


@pytest.fixture
def uncached_client(session, cache):
    return Client(session, cache_settings=CacheSettings.disabled(), cache=cache)
