import logging

from spotistruct import (
    CacheSettings,
    Client,
    ClientCredentialsSession,
    Credentials
)

logging.basicConfig(level=logging.DEBUG)

# Load OAuth2 credentials from environment variables:
# {prefix}_CLIENT_ID, {prefix}_CLIENT_SECRET. The default prefix is SPOTISTRUCT.
credentials = Credentials.from_environment(prefix='SPOTIFY')

# Create a session and fetch a token
session = ClientCredentialsSession(credentials.client_id, credentials.client_secret)
session.fetch_token()

# Wrap the session; SPOTISTRUCT_CACHE=tracks,artists caches only tracks and artists
client = Client(session, cache_settings=CacheSettings.from_environment())

track = client.tracks.get('3Fcfwhm8oRrBvBZ8KGhtea')
print(track.name, 'by', ', '.join(artist.name for artist in track.artists))
print('Released on', track.album.released_at)
print('Spotify code:', track.make_code_image())

# The artist was cached together with the track: no request is made here
artist = client.artists.get(track.artists[0].id)
print(artist is track.artists[0])

# Bypass the cache to get the full artist object
artist = artist.fetch()
print(artist.genres)
