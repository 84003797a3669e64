import pytest

import payloads
from spotistruct.cache import (
    CACHE,
    CACHE_KEYS,
    CacheSettings,
    ObjectCache,
    create_cache_struct,
    create_cache_struct_array,
    create_cached_playlist_tracks
)
from spotistruct.structures import Artist, Episode, Track


def test_object_cache_has_one_mapping_per_resource_type(cache):
    for key in CACHE_KEYS:
        assert cache.mapping(key) == {}
        assert getattr(cache, key) is cache.mapping(key)


def test_object_cache_raises_for_unknown_key(cache):
    with pytest.raises(ValueError):
        cache.mapping('podcasts')
    with pytest.raises(AttributeError):
        cache.podcasts


def test_object_cache_put_get_and_clear(client, cache):
    artist = Artist(client, payloads.artist())
    cache.put('artists', artist)
    assert cache.has('artists', payloads.ARTIST_ID)
    assert cache.get('artists', payloads.ARTIST_ID) is artist
    assert cache.get('tracks', payloads.ARTIST_ID) is None
    assert len(cache) == 1

    cache.clear('tracks')
    assert len(cache) == 1
    cache.clear()
    assert len(cache) == 0


def test_process_wide_cache_is_default():
    assert isinstance(CACHE, ObjectCache)


def test_create_cache_struct_stores_the_structure(client, cache):
    track = create_cache_struct('tracks', client, payloads.track())
    assert isinstance(track, Track)
    assert cache.tracks[payloads.TRACK_ID] is track


def test_create_cache_struct_overwrites_on_refetch(client, cache):
    first = create_cache_struct('tracks', client, payloads.track(name='Old'))
    second = create_cache_struct('tracks', client, payloads.track(name='New'))
    assert first is not second
    assert cache.tracks[payloads.TRACK_ID] is second
    assert cache.tracks[payloads.TRACK_ID].name == 'New'


def test_nested_objects_never_replace_cached_ones(client, cache):
    full_artist = create_cache_struct('artists', client, payloads.artist(full=True))
    track = create_cache_struct('tracks', client, payloads.track())
    assert track.artists[0] is full_artist
    assert cache.artists[payloads.ARTIST_ID].genres == ['jazz', 'cool jazz']


def test_create_cache_struct_does_not_store_when_disabled(uncached_client, cache):
    track = create_cache_struct('tracks', uncached_client, payloads.track())
    assert track.id == payloads.TRACK_ID
    assert len(cache) == 0


def test_create_cache_struct_does_not_store_objects_without_id(client, cache):
    data = payloads.track()
    data['id'] = None
    data['is_local'] = True
    track = create_cache_struct('tracks', client, data)
    assert track.is_local
    assert payloads.TRACK_ID not in cache.tracks


def test_create_cache_struct_raises_for_unknown_key(client):
    with pytest.raises(ValueError):
        create_cache_struct('podcasts', client, {'id': 'abc'})


def test_create_cache_struct_array_skips_null_items(client):
    artists = create_cache_struct_array('artists', client, [payloads.artist(), None])
    assert [artist.id for artist in artists] == [payloads.ARTIST_ID]
    assert create_cache_struct_array('artists', client, None) == []


def test_create_cached_playlist_tracks(client, cache):
    items = [
        payloads.playlist_item(payloads.track(), added_by=payloads.user()),
        payloads.playlist_item(payloads.episode()),
        payloads.playlist_item(None),
    ]
    tracks = create_cached_playlist_tracks(client, items)
    assert isinstance(tracks[0].track, Track)
    assert tracks[0].added_by is cache.users[payloads.USER_ID]
    assert tracks[0].added_at == '2020-01-01T10:00:00Z'
    assert isinstance(tracks[1].track, Episode)
    assert tracks[1].added_by is None
    assert tracks[2].track is None
    assert cache.episodes[payloads.EPISODE_ID] is tracks[1].track


def test_cache_settings_default_to_all_enabled():
    settings = CacheSettings()
    assert all(settings.is_enabled(key) for key in CACHE_KEYS)
    assert not any(CacheSettings.disabled().is_enabled(key) for key in CACHE_KEYS)


@pytest.mark.parametrize(
    'value, enabled', [
        ('all', set(CACHE_KEYS)),
        ('none', set()),
        ('tracks, artists', {'tracks', 'artists'}),
        ('PLAYLISTS', {'playlists'}),
    ])
def test_cache_settings_from_environment(monkeypatch, value, enabled):
    monkeypatch.setenv('SPOTISTRUCT_CACHE', value)
    settings = CacheSettings.from_environment()
    assert {key for key in CACHE_KEYS if settings.is_enabled(key)} == enabled


def test_cache_settings_from_environment_defaults_to_all(monkeypatch):
    monkeypatch.delenv('SPOTISTRUCT_CACHE', raising=False)
    assert CacheSettings.from_environment() == CacheSettings()


def test_cache_settings_from_environment_raises_for_unknown_key(monkeypatch):
    monkeypatch.setenv('MYAPP_CACHE', 'tracks,podcasts')
    with pytest.raises(ValueError):
        CacheSettings.from_environment('MYAPP')
