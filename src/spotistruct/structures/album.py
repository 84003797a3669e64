__all__ = ['Album']

import datetime
from typing import Optional

from spotistruct.cache import create_cache_struct_array, register_structure
from spotistruct.structures.base import Structure
from spotistruct.structures.common import Copyright, from_data_list
from spotistruct.utils import parse_release_date


@register_structure('albums')
class Album(Structure):
    CACHE_KEY = 'albums'

    def __init__(self, client, data):
        super().__init__(client, data)
        self.album_type = data.get('album_type')
        self.total_tracks = data.get('total_tracks')
        self.available_markets = data.get('available_markets', [])
        self.release_date = data.get('release_date')
        self.release_date_precision = data.get('release_date_precision')
        self.restrictions = data.get('restrictions')
        self.artists = create_cache_struct_array('artists', client, data.get('artists'))

        # full album objects only
        self.copyrights = from_data_list(Copyright, data.get('copyrights'))
        self.external_ids = data.get('external_ids')
        self.genres = data.get('genres', [])
        self.label = data.get('label')
        self.popularity = data.get('popularity')

        tracks = data.get('tracks')
        self.tracks = []
        if tracks:
            self.tracks = create_cache_struct_array('tracks', client, tracks.get('items'))
            for track in self.tracks:
                if track.album is None:
                    track.album = self

    @property
    def released_at(self) -> Optional[datetime.date]:
        return parse_release_date(self.release_date, self.release_date_precision)

    def get_tracks(self, **kwargs):
        return self.manager.get_tracks(self.id, **kwargs)
