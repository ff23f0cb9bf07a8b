from datetime import date, datetime, timedelta, timezone

import pytest

from tupy.common import AlbumType, DatePrecision, ResponseError, RestrictionReason
from tupy.music import (
    Album,
    AlbumGroup,
    AlbumTracks,
    Artist,
    ArtistAlbums,
    FollowedArtists,
    NewReleases,
    SavedAlbum,
    SavedAlbums,
    SavedTrack,
    SavedTracks,
    SimplifiedAlbum,
    SimplifiedArtist,
    SimplifiedTrack,
    Track,
)


def simplified_artist(artist_id="a1"):
    return {
        "external_urls": {"spotify": f"https://example.com/artist/{artist_id}"},
        "href": f"https://example.com/v1/artists/{artist_id}",
        "id": artist_id,
        "name": "Band",
        "uri": f"spotify:artist:{artist_id}",
    }


def album_dict(**extra):
    data = {
        "album_type": "album",
        "total_tracks": 10,
        "external_urls": {"spotify": "https://example.com/album/al1"},
        "href": "https://example.com/v1/albums/al1",
        "id": "al1",
        "images": [{"url": "https://example.com/img.png", "height": 640, "width": 640}],
        "name": "Record",
        "release_date": "1981-12-15",
        "release_date_precision": "day",
        "uri": "spotify:album:al1",
        "artists": [simplified_artist()],
        "label": "Label",
    }
    data.update(extra)
    return data


def simplified_track_dict(track_id="t1", **extra):
    data = {
        "artists": [simplified_artist()],
        "disc_number": 1,
        "duration_ms": 210000,
        "explicit": False,
        "external_urls": {"spotify": f"https://example.com/track/{track_id}"},
        "href": f"https://example.com/v1/tracks/{track_id}",
        "id": track_id,
        "name": "Song",
        "preview_url": None,
        "track_number": 3,
        "uri": f"spotify:track:{track_id}",
        "is_local": False,
    }
    data.update(extra)
    return data


def track_dict(track_id="t1", **extra):
    data = simplified_track_dict(track_id)
    data["album"] = album_dict()
    data["external_ids"] = {"isrc": "XXABC0000001"}
    data.update(extra)
    return data


def artist_dict(artist_id="a1", **extra):
    data = simplified_artist(artist_id)
    data["followers"] = {"total": 42}
    data["popularity"] = 77
    data.update(extra)
    return data


def page(items, limit=20, offset=0, total=None, **extra):
    data = {
        "href": "https://example.com/v1/page",
        "limit": limit,
        "offset": offset,
        "total": len(items) if total is None else total,
        "next": None,
        "previous": None,
        "items": items,
    }
    data.update(extra)
    return data


def test_simplified_artist_fields():
    artist = SimplifiedArtist.from_dict(simplified_artist("xyz"))
    assert artist.id == "xyz"
    assert artist.uri == "spotify:artist:xyz"
    assert artist.external_urls.spotify == "https://example.com/artist/xyz"


def test_album_parses_fields_and_defaults():
    album = Album.from_dict(album_dict())
    assert album.album_type is AlbumType.ALBUM
    assert album.total_tracks == 10
    assert album.available_markets == []
    assert album.release.date == date(1981, 12, 15)
    assert album.release.precision is DatePrecision.DAY
    assert album.restrictions is None
    assert album.label == "Label"
    assert [a.id for a in album.artists] == ["a1"]
    assert album.images[0].width == 640


def test_album_type_is_case_insensitive():
    album = Album.from_dict(album_dict(album_type="Compilation"))
    assert album.album_type is AlbumType.COMPILATION


def test_album_invalid_type_raises():
    with pytest.raises(ResponseError):
        Album.from_dict(album_dict(album_type="mixtape"))


def test_album_month_release_and_restriction():
    album = Album.from_dict(
        album_dict(
            release_date="1981-12",
            release_date_precision="month",
            restrictions={"reason": "market"},
        )
    )
    assert album.release.date == date(1981, 12, 1)
    assert str(album.release) == "1981-12"
    assert album.restrictions.reason is RestrictionReason.MARKET


def test_album_missing_images_raises():
    data = album_dict()
    del data["images"]
    with pytest.raises(ResponseError):
        Album.from_dict(data)


def test_simplified_album_requires_markets():
    with pytest.raises(ResponseError):
        SimplifiedAlbum.from_dict(album_dict(album_group="album"))


def test_simplified_album_group():
    album = SimplifiedAlbum.from_dict(
        album_dict(album_group="appears_on", available_markets=["SE", "DE"])
    )
    assert album.album_group is AlbumGroup.APPEARS_ON
    assert album.available_markets == ["SE", "DE"]


def test_simplified_album_bad_group_raises():
    with pytest.raises(ResponseError):
        SimplifiedAlbum.from_dict(album_dict(album_group="remix", available_markets=[]))


def test_track_parses_fields():
    track = Track.from_dict(track_dict())
    assert track.duration == timedelta(milliseconds=210000)
    assert track.album.id == "al1"
    assert track.external_ids.isrc == "XXABC0000001"
    assert track.external_ids.upc is None
    assert track.is_playable is False
    assert track.linked_from is None
    assert track.track_number == 3


def test_track_linked_from_is_a_track():
    track = Track.from_dict(track_dict(linked_from=track_dict("t0"), is_playable=True))
    assert isinstance(track.linked_from, Track)
    assert track.linked_from.id == "t0"
    assert track.is_playable is True


@pytest.mark.parametrize("key", ["disc_number", "track_number"])
def test_track_u8_fields_bounded(key):
    with pytest.raises(ResponseError):
        Track.from_dict(track_dict(**{key: 256}))


def test_track_missing_album_raises():
    data = track_dict()
    del data["album"]
    with pytest.raises(ResponseError):
        Track.from_dict(data)


def test_top_item_types():
    assert Track.top_item_type() == "tracks"
    assert Artist.top_item_type() == "artists"


def test_simplified_track_without_album():
    track = SimplifiedTrack.from_dict(simplified_track_dict("s9"))
    assert track.id == "s9"
    assert track.duration == timedelta(milliseconds=210000)


def test_simplified_track_missing_artists_raises():
    data = simplified_track_dict()
    del data["artists"]
    with pytest.raises(ResponseError):
        SimplifiedTrack.from_dict(data)


def test_saved_track_added_at():
    saved = SavedTrack.from_dict({"added_at": "2023-01-02T03:04:05Z", "track": track_dict()})
    assert saved.added_at == datetime(2023, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert saved.track.id == "t1"


def test_saved_track_bad_added_at_raises():
    with pytest.raises(ResponseError):
        SavedTrack.from_dict({"added_at": "yesterday", "track": track_dict()})


@pytest.mark.parametrize("k", [1, 2, 3])
def test_saved_tracks_page_number(k):
    items = [{"added_at": "2023-01-02T03:04:05Z", "track": track_dict()}]
    saved = SavedTracks.from_dict(page(items, limit=10, offset=10 * k, total=100))
    assert saved.page() == k + 1
    assert isinstance(saved.items[0], SavedTrack)


def test_album_tracks_page():
    tracks = AlbumTracks.from_dict(
        page([simplified_track_dict("x"), simplified_track_dict("y")], next="https://example.com/n")
    )
    assert [t.id for t in tracks.items] == ["x", "y"]
    assert tracks.next == "https://example.com/n"
    assert tracks.previous is None


def test_saved_albums_and_new_releases():
    saved = SavedAlbums.from_dict(page([{"added_at": "2020-05-06T07:08:09Z", "album": album_dict()}]))
    assert isinstance(saved.items[0], SavedAlbum)
    assert saved.items[0].album.name == "Record"
    releases = NewReleases.from_dict(page([album_dict(), album_dict()]))
    assert len(releases.items) == 2
    assert all(isinstance(a, Album) for a in releases.items)


def test_artist_albums_page():
    albums = ArtistAlbums.from_dict(page([album_dict(album_group="single", available_markets=[])]))
    assert albums.items[0].album_group is AlbumGroup.SINGLE


def test_artist_defaults_and_fields():
    artist = Artist.from_dict(artist_dict())
    assert artist.genres == []
    assert artist.images == []
    assert artist.followers.total == 42
    assert artist.popularity == 77


def test_artist_popularity_bounded():
    with pytest.raises(ResponseError):
        Artist.from_dict(artist_dict(popularity=1000))


def test_artist_missing_followers_raises():
    data = artist_dict()
    del data["followers"]
    with pytest.raises(ResponseError):
        Artist.from_dict(data)


def followed(total, limit=20):
    return FollowedArtists.from_dict(
        {
            "href": "https://example.com/v1/following",
            "limit": limit,
            "next": None,
            "cursors": {"after": "cursor-a", "before": None},
            "total": total,
            "items": [artist_dict("f1")],
        }
    )


def test_followed_artists_fields():
    result = followed(total=5)
    assert result.cursors.after == "cursor-a"
    assert result.cursors.before is None
    assert result.items[0].id == "f1"
    assert result.page() == 1


def test_followed_artists_empty_has_one_page():
    assert followed(total=0).max_page() == 1


@pytest.mark.parametrize("k", [1, 2, 5])
def test_followed_artists_max_page_truncates(k):
    assert followed(total=20 * k + 1).max_page() == k
    assert followed(total=20 * k).max_page() == k