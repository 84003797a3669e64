import datetime

import pytest

import payloads
from spotistruct.structures import (
    Album,
    Artist,
    Copyright,
    Episode,
    Image,
    LinkedTrack,
    Playlist,
    ResumePoint,
    Show,
    Track,
    User
)


def test_track_from_full_object(client, cache):
    track = Track(client, payloads.track())

    assert track.id == payloads.TRACK_ID
    assert track.name == 'So What'
    assert track.duration == 562640
    assert track.track_number == 1
    assert track.popularity == 66
    assert track.external_ids == {'isrc': 'USSM15900113'}
    assert track.is_playable is None and track.linked_from is None

    assert isinstance(track.album, Album)
    assert track.album is cache.albums[payloads.ALBUM_ID]
    assert [artist.name for artist in track.artists] == ['Miles Davis']
    assert track.artists[0] is cache.artists[payloads.ARTIST_ID]


def test_simplified_track_has_no_album(client):
    track = Track(client, payloads.track(full=False))
    assert track.album is None
    assert track.popularity is None
    assert track.external_ids is None


def test_relinked_track(client):
    linked_from = {'id': payloads.OTHER_TRACK_ID, 'type': 'track',
                   'uri': 'spotify:track:' + payloads.OTHER_TRACK_ID,
                   'href': payloads.API + '/tracks/' + payloads.OTHER_TRACK_ID,
                   'external_urls': {}}
    track = Track(client, payloads.track(linked_from=linked_from))
    assert track.is_playable is True
    assert track.linked_from == LinkedTrack(id=payloads.OTHER_TRACK_ID,
                                            uri='spotify:track:' + payloads.OTHER_TRACK_ID,
                                            href=linked_from['href'])


def test_tracks_share_the_cached_artist(client):
    first = Track(client, payloads.track())
    second = Track(client, payloads.track(track_id=payloads.OTHER_TRACK_ID, name='Blue in Green'))
    assert first.artists[0] is second.artists[0]


def test_full_artist(client):
    artist = Artist(client, payloads.artist(full=True))
    assert artist.genres == ['jazz', 'cool jazz']
    assert artist.popularity == 70
    assert artist.followers == 1234
    assert artist.images == [Image(url='https://i.scdn.co/image/a', height=640, width=640)]


def test_album_tracks_reference_the_album(client, cache):
    album = Album(client, payloads.album(tracks=[payloads.track(full=False)]))
    assert album.label == 'Columbia'
    assert album.copyrights == [Copyright(text='1959 Columbia', type='C')]
    assert len(album.tracks) == 1
    assert album.tracks[0].album is album
    assert album.tracks[0] is cache.tracks[payloads.TRACK_ID]


def test_album_released_at(client):
    assert Album(client, payloads.album()).released_at == datetime.date(1959, 8, 17)
    album = Album(client, payloads.album(release_date='1959', precision='year'))
    assert album.released_at == datetime.date(1959, 1, 1)


def test_playlist_with_items(client, cache):
    items = [payloads.playlist_item(payloads.track(), added_by=payloads.user())]
    playlist = Playlist(client, payloads.playlist(items=items))

    assert playlist.total_tracks == 1
    assert playlist.followers == 42
    assert playlist.snapshot_id == 'MTY4NzQ5'
    assert isinstance(playlist.owner, User)
    assert playlist.owner.name == 'Spotify'
    assert playlist.tracks[0].track is cache.tracks[payloads.TRACK_ID]
    assert playlist.tracks[0].added_by is playlist.owner


def test_simplified_playlist(client):
    playlist = Playlist(client, payloads.playlist())
    assert playlist.total_tracks == 3
    assert playlist.tracks == []


def test_episode(client):
    episode = Episode(client, payloads.episode(release_date='2021-03', precision='month'))
    assert episode.duration == 1800000
    assert episode.languages == ['en']
    assert episode.resume_point == ResumePoint(fully_played=False, resume_position_ms=1000)
    assert episode.released_at == datetime.date(2021, 3, 1)


def test_episode_show_from_embedded_object(client, cache):
    episode = Episode(client, payloads.episode(show=payloads.show()))
    assert isinstance(episode.show, Show)
    assert episode.show is cache.shows[payloads.SHOW_ID]


def test_episode_show_prefers_the_cached_show(client, cache):
    episode = Episode(client, payloads.episode(show=payloads.show()))
    full_show = Show(client, payloads.show(episodes=[]))
    cache.put('shows', full_show)
    assert episode.show is full_show


def test_episode_show_found_in_cache(client, cache):
    episode = Episode(client, payloads.episode())
    assert episode.show is None

    show = Show(client, payloads.show(episodes=[payloads.episode()]))
    cache.put('shows', show)
    assert episode.show is show


def test_show_episodes_reference_the_show(client):
    show = Show(client, payloads.show(episodes=[payloads.episode()]))
    assert show.publisher == 'Jazz Inc.'
    assert show.episodes[0].show is show


def test_make_code_image(client):
    track = Track(client, payloads.track())
    assert track.make_code_image() == (
        'https://scannables.scdn.co/uri/plain/jpeg/1DB954/white/1080/spotify:track:'
        + payloads.TRACK_ID)
    assert '/FFFFFF/black/' in track.make_code_image('ffffff')


def test_fetch_refreshes_the_cache(client, session, cache):
    track = Track(client, payloads.track(name='Old name'))
    cache.put('tracks', track)
    session.add('GET', '/tracks/' + payloads.TRACK_ID, payloads.track(name='New name'))

    fetched = track.fetch()

    assert fetched is not track
    assert fetched.name == 'New name'
    assert cache.tracks[payloads.TRACK_ID] is fetched
    assert len(session.requests) == 1


def test_repr(client):
    assert repr(Artist(client, payloads.artist())) == (
        "Artist(id='%s', name='Miles Davis')" % payloads.ARTIST_ID)


def test_released_at_of_unknown_year(client):
    album = Album(client, payloads.album(release_date='0000', precision='year'))
    assert album.released_at is None


def test_fetch_of_local_track_raises(client, session):
    data = payloads.track(full=False)
    data.update(id=None, uri='spotify:local:Miles+Davis:Kind+of+Blue:So+What:562',
                is_local=True)
    track = Track(client, data)

    with pytest.raises(ValueError):
        track.fetch()
    assert session.requests == []
