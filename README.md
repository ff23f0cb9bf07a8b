# tupy

Plain Python models for a music streaming Web API. The package builds JSON
request bodies for playback and playlist commands, and turns decoded JSON
responses into dataclasses holding real `datetime`, `date` and `timedelta`
values.

It has no runtime dependencies.

## Installation

```
pip install .
```

## Request bodies

`tupy.commands` builds the bodies and parameters that commands send:

```python
from tupy.commands import Play, PlaylistDetails, Reorder, ReplaceUris, Timestamp, uri_body

Play.album("album-id", offset=2, position=30).to_dict()
# {'context_uri': 'spotify:album:album-id', 'position': 30, 'offset': {'position': 2}}

Play.artist("spotify:artist:artist-id").to_dict()
# {'context_uri': 'spotify:artist:artist-id', 'position': 0}

Play.queue(["spotify:track:a", "spotify:track:b"]).to_dict()
# {'uris': ['spotify:track:a', 'spotify:track:b'], 'position': 0}

Play.resume().to_dict()                          # {}

Reorder(start=0, length=1, insert=5).to_dict()
# {'range_start': 0, 'range_length': 1, 'insert_before': 5}

ReplaceUris(["spotify:track:a"]).to_dict()       # {'uris': ['spotify:track:a']}
uri_body("spotify:track:a")                      # {'uri': 'spotify:track:a'}

PlaylistDetails(name="Road trip", public=False).to_dict()
```

`Play.artist`, `Play.album`, `Play.show`, `Play.playlist` and
`Play.collection` accept a bare ID or a `spotify:...` URI. A position is passed
through `to_duration`: a `timedelta` is kept, an integer is read as
milliseconds and a float as seconds (truncated to whole milliseconds).

`Timestamp.before_now()` and `Timestamp.after_now()` give a point in time;
`name()` is the query parameter name (`before` or `after`) and `to_param()`
the moment as Unix milliseconds.

## Reading responses

Every response class has a `from_dict` class method that takes decoded JSON:

```python
import json

from tupy.music import Track
from tupy.user import Profile, TopItems
from tupy.music import Artist

track = Track.from_dict(json.loads(payload))
print(track.name, track.duration, track.album.release)

top = TopItems.from_dict(json.loads(top_payload), Artist.from_dict)
```

The modules are:

- `tupy.common`: shared objects (`ExternalUrls`, `Followers`, `Image`,
  `Restrictions`, `ReleaseDate`, `ExternalIds`, `Cursors`, `CopyRight`,
  `ResumePoint`, `Category`, `Categories`), the `Paged` base class, the
  `AlbumType`, `DatePrecision` and `RestrictionReason` enums, and the value
  parsers (`parse_duration`, `parse_added_at`, `parse_timestamp`, ...).
- `tupy.music`: `Album`, `SimplifiedAlbum`, `AlbumGroup`, `AlbumTracks`,
  `SavedAlbum`, `SavedAlbums`, `NewReleases`, `Artist`, `SimplifiedArtist`,
  `FollowedArtists`, `ArtistAlbums`, `Track`, `SimplifiedTrack`, `SavedTrack`,
  `SavedTracks`.
- `tupy.shows`: `Show`, `Episode`, `SimplifiedEpisode`, `SavedEpisode`,
  `SavedEpisodes`, `ShowEpisodes`, `SavedShow`, `SavedShows`.
- `tupy.user`: `Profile`, `ExplicitContent`, `TopItems`.
- `tupy.analysis`: `AudioAnalysisMeta`, `AudioAnalysisTrack`.
- `tupy.features`: `AudioFeatures`, `RecommendationSeed`, `Recommendations`.

Paged results expose `items`, `limit`, `offset`, `total`, `next` and
`previous`, plus `page()` (1-based) and `max_page()` (at least 1).
`TopItems` counts pages from 0 instead, and `FollowedArtists`, which is
cursor-paged, always reports page 1.

Timestamps in responses are read as UTC and returned in local time. A
`ReleaseDate` keeps its precision, and `str()` of it prints only the known
part (`1981`, `1981-12` or `1981-12-15`).

Malformed input raises `tupy.common.ResponseError`, a subclass of
`ValueError`.

## What the package does not do

- It sends nothing over the network: there is no HTTP client, no sign-in or
  token handling, and no helper that follows `next`/`previous` links.
- It has no builders for search queries or recommendation parameters.
- It has no models for playlists, playback state and devices, the play
  queue, search results, audiobooks and chapters, or the bar/beat/section/
  segment level of an audio analysis.

## Running the tests

```
pip install .[test]
pytest
```