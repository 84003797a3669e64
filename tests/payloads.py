"""
Builders of (trimmed) Web API JSON objects used by the tests.
"""
TRACK_ID = '3Fcfwhm8oRrBvBZ8KGhtea'
OTHER_TRACK_ID = '0aWMVrwxPNYkKmFthzmpRi'
ALBUM_ID = '66nX0SGMQ7DrGiMrZlMkqS'
ARTIST_ID = '7ENzCHnmJUr20nUjoZ0zZ1'
PLAYLIST_ID = '37i9dQZF1DWWEJlAGA9gs0'
EPISODE_ID = '512ojhOuo1ktJprKbVcKyQ'
SHOW_ID = '38bS44xjbVVZ3No3ByF1dJ'
USER_ID = 'spotify'

API = 'https://api.spotify.com/v1'


def _common(obj_type, obj_id, name):
    return {
        'id': obj_id,
        'name': name,
        'type': obj_type,
        'uri': 'spotify:{}:{}'.format(obj_type, obj_id),
        'href': '{}/{}s/{}'.format(API, obj_type, obj_id),
        'external_urls': {'spotify': 'https://open.spotify.com/{}/{}'.format(obj_type, obj_id)},
    }


def artist(artist_id=ARTIST_ID, name='Miles Davis', full=False):
    data = _common('artist', artist_id, name)
    if full:
        data.update(genres=['jazz', 'cool jazz'], popularity=70,
                    followers={'href': None, 'total': 1234},
                    images=[{'url': 'https://i.scdn.co/image/a', 'height': 640, 'width': 640}])
    return data


def album(album_id=ALBUM_ID, name='Kind of Blue', tracks=None, release_date='1959-08-17',
          precision='day'):
    data = _common('album', album_id, name)
    data.update(album_type='album', total_tracks=5, available_markets=['US'],
                release_date=release_date, release_date_precision=precision,
                artists=[artist()],
                images=[{'url': 'https://i.scdn.co/image/b', 'height': 300, 'width': 300}])
    if tracks is not None:
        data.update(tracks={'href': data['href'] + '/tracks', 'items': tracks, 'limit': 50,
                            'next': None, 'offset': 0, 'previous': None, 'total': len(tracks)},
                    copyrights=[{'text': '1959 Columbia', 'type': 'C'}],
                    label='Columbia', popularity=80, genres=[],
                    external_ids={'upc': '886445457286'})
    return data


def track(track_id=TRACK_ID, name='So What', full=True, linked_from=None):
    data = _common('track', track_id, name)
    data.update(artists=[artist()], available_markets=['US'], disc_number=1,
                duration_ms=562640, explicit=False, is_local=False,
                preview_url=None, track_number=1)
    if full:
        data.update(album=album(), external_ids={'isrc': 'USSM15900113'}, popularity=66)
    if linked_from:
        data.update(is_playable=True, linked_from=linked_from)
    return data


def user(user_id=USER_ID, display_name='Spotify'):
    data = _common('user', user_id, None)
    del data['name']
    data.update(display_name=display_name)
    return data


def playlist(playlist_id=PLAYLIST_ID, name='Jazz Classics', items=None):
    data = _common('playlist', playlist_id, name)
    data.update(collaborative=False, description='The essential tracks', public=True,
                snapshot_id='MTY4NzQ5', owner=user(), followers={'href': None, 'total': 42})
    if items is None:
        data['tracks'] = {'href': data['href'] + '/tracks', 'total': 3}
    else:
        data['tracks'] = {'href': data['href'] + '/tracks', 'items': items, 'limit': 100,
                          'next': None, 'offset': 0, 'previous': None, 'total': len(items)}
    return data


def playlist_item(item, added_by=None):
    return {'added_at': '2020-01-01T10:00:00Z', 'added_by': added_by, 'is_local': False,
            'track': item}


def episode(episode_id=EPISODE_ID, name='Episode 1', show=None, release_date='2021-03-04',
            precision='day'):
    data = _common('episode', episode_id, name)
    data.update(audio_preview_url='https://p.scdn.co/mp3-preview/x', description='About jazz',
                html_description='<p>About jazz</p>', duration_ms=1800000, explicit=False,
                is_externally_hosted=False, is_playable=True, languages=['en'],
                release_date=release_date, release_date_precision=precision,
                resume_point={'fully_played': False, 'resume_position_ms': 1000})
    if show is not None:
        data['show'] = show
    return data


def show(show_id=SHOW_ID, name='Jazz Talks', episodes=None):
    data = _common('show', show_id, name)
    data.update(available_markets=['US'], copyrights=[], description='Talks about jazz',
                explicit=False, is_externally_hosted=False, languages=['en'],
                media_type='audio', publisher='Jazz Inc.', total_episodes=2)
    if episodes is not None:
        data['episodes'] = {'href': data['href'] + '/episodes', 'items': episodes, 'limit': 50,
                            'next': None, 'offset': 0, 'previous': None,
                            'total': len(episodes)}
    return data
