__all__ = ['Episode']

import datetime
from typing import Optional

from spotistruct.cache import create_cache_struct, register_structure
from spotistruct.structures.base import Structure
from spotistruct.structures.common import ResumePoint, from_data
from spotistruct.utils import parse_release_date


@register_structure('episodes')
class Episode(Structure):
    CACHE_KEY = 'episodes'

    def __init__(self, client, data):
        super().__init__(client, data)
        self.audio_preview_url = data.get('audio_preview_url')
        self.description = data.get('description')
        self.html_description = data.get('html_description')
        self.duration = data.get('duration_ms')
        self.explicit = data.get('explicit', False)
        self.is_externally_hosted = data.get('is_externally_hosted', False)
        self.is_playable = data.get('is_playable')
        self.languages = data.get('languages', [])
        self.release_date = data.get('release_date')
        self.release_date_precision = data.get('release_date_precision')
        self.resume_point = from_data(ResumePoint, data.get('resume_point'))
        self.restrictions = data.get('restrictions')

        show = data.get('show')
        self._show = create_cache_struct('shows', client, show, overwrite=False) if show else None

    @property
    def show(self):
        """
        The show the episode belongs to: the one embedded in the API response if any, otherwise
        a cached show listing this episode. ``None`` if it can't be found without a request.
        """
        if self._show is not None:
            return self.client.cache.get('shows', self._show.id) or self._show

        for show in self.client.cache.shows.values():
            if any(episode.id == self.id for episode in show.episodes):
                return show
        return None

    @property
    def released_at(self) -> Optional[datetime.date]:
        return parse_release_date(self.release_date, self.release_date_precision)
