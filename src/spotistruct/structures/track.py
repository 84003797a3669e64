__all__ = ['Track']

from spotistruct.cache import (
    create_cache_struct,
    create_cache_struct_array,
    register_structure
)
from spotistruct.structures.base import Structure
from spotistruct.structures.common import LinkedTrack, from_data


@register_structure('tracks')
class Track(Structure):
    """
    Spotify track, either full or simplified (tracks of an album). ``album``, ``external_ids``
    and ``popularity`` are only set for full track objects; ``is_playable`` and ``linked_from``
    only when track relinking was applied.
    """
    CACHE_KEY = 'tracks'

    def __init__(self, client, data):
        super().__init__(client, data)
        self.artists = create_cache_struct_array('artists', client, data.get('artists'))
        self.available_markets = data.get('available_markets', [])
        self.disc_number = data.get('disc_number')
        self.duration = data.get('duration_ms')
        self.explicit = data.get('explicit', False)
        self.is_local = data.get('is_local', False)
        self.preview_url = data.get('preview_url')
        self.restrictions = data.get('restrictions')
        self.track_number = data.get('track_number')

        self.is_playable = None
        self.linked_from = None
        if data.get('linked_from'):
            self.is_playable = data.get('is_playable')
            self.linked_from = from_data(LinkedTrack, data['linked_from'])

        self.album = None
        self.external_ids = None
        self.popularity = None
        if 'album' in data:
            self.album = create_cache_struct('albums', client, data['album'], overwrite=False)
            self.external_ids = data.get('external_ids')
            self.popularity = data.get('popularity')

    def get_audio_features(self):
        return self.manager.get_audio_features(self.id)

    def get_audio_analysis(self):
        return self.manager.get_audio_analysis(self.id)
