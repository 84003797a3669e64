__all__ = ['TrackManager']

from spotistruct.managers.base import BaseManager
from spotistruct.structures.common import AudioFeatures, from_data


class TrackManager(BaseManager):
    CACHE_KEY = 'tracks'
    RESOURCE_TYPE = 'track'

    def get(self, track_id, market=None, force=None):
        """
        Get Spotify catalog information for a single track.
        https://developer.spotify.com/documentation/web-api/reference/get-track

        Args:
            track_id: Spotify ID, URI or URL of the track
            market:
                *Optional*. An `ISO 3166-1 alpha-2 country code
                <http://en.wikipedia.org/wiki/ISO_3166-1_alpha-2>`__ or the string ``from_token``.
                Provide this parameter if you want to apply `Track Relinking
                <https://developer.spotify.com/documentation/general/guides/track-relinking-guide/>`__.
            force:
                if True, the track is fetched even if it is cached; if None, it is fetched
                only when caching of tracks is disabled.
        """
        track_id = self._resolve_id(track_id)
        cached = self._from_cache(track_id, force)
        if cached is not None:
            return cached
        return self._create(self.client.fetch('/tracks/{id}'.format(id=track_id),
                                              params=dict(market=market)))

    def get_multiple(self, track_ids, market=None):
        """
        Get several tracks (maximum: 50 IDs). The result contains ``None`` for each ID
        Spotify doesn't recognize.
        https://developer.spotify.com/documentation/web-api/reference/get-several-tracks
        """
        data = self.client.fetch('/tracks', params=dict(ids=self._resolve_ids(track_ids),
                                                        market=market))
        return self._create_several(data['tracks']) if data else []

    def get_audio_features(self, track_id):
        """
        Get audio feature information for a single track.
        https://developer.spotify.com/documentation/web-api/reference/get-audio-features
        """
        track_id = self._resolve_id(track_id)
        return from_data(AudioFeatures,
                         self.client.fetch('/audio-features/{id}'.format(id=track_id)))

    def get_audio_analysis(self, track_id):
        """
        Get the low-level audio analysis of a track (bars, beats, sections, segments, tatums).
        It is returned as it comes from the API.
        https://developer.spotify.com/documentation/web-api/reference/get-audio-analysis
        """
        track_id = self._resolve_id(track_id)
        return self.client.fetch('/audio-analysis/{id}'.format(id=track_id))
