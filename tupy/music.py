"""Albums, artists and tracks."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Callable, Mapping, TypeVar

from tupy.common import (
    AlbumType,
    Cursors,
    ExternalIds,
    ExternalUrls,
    Followers,
    Image,
    Paged,
    ReleaseDate,
    ResponseError,
    Restrictions,
    _as_bool,
    _as_list,
    _as_str,
    _bool,
    _items,
    _mapping,
    _opt_str,
    _require,
    _str,
    _uint,
    parse_added_at,
    parse_duration,
)

_T = TypeVar("_T")

_U8_MAX = 255


def _default_list(data: Mapping[str, Any], key: str, parse: Callable[[Any], _T]) -> list[_T]:
    if key not in data:
        return []
    return [parse(item) for item in _as_list(data[key], key)]


def _strings(data: Mapping[str, Any], key: str, required: bool = False) -> list[str]:
    def parse(value: Any) -> str:
        return _as_str(value, key)

    return _items(data, key, parse) if required else _default_list(data, key, parse)


def _opt(data: Mapping[str, Any], key: str, parse: Callable[[Any], _T]) -> _T | None:
    value = data.get(key)
    return None if value is None else parse(value)


def _u8(data: Mapping[str, Any], key: str) -> int:
    value = _uint(data, key)
    if value > _U8_MAX:
        raise ResponseError(f"field `{key}` must be at most {_U8_MAX}")
    return value


def _default_bool(data: Mapping[str, Any], key: str) -> bool:
    return _as_bool(data[key], key) if key in data else False


class AlbumGroup(Enum):
    """How an artist relates to an album."""

    ALBUM = "album"
    SINGLE = "single"
    COMPILATION = "compilation"
    APPEARS_ON = "appears_on"


def _album_group(value: Any) -> AlbumGroup:
    text = _as_str(value, "album_group")
    try:
        return AlbumGroup(text)
    except ValueError:
        raise ResponseError(f"unknown album group {text!r}") from None


@dataclass
class SimplifiedArtist:
    """An artist with only the identifying fields."""

    external_urls: ExternalUrls
    href: str
    id: str
    name: str
    uri: str

    @classmethod
    def from_dict(cls, data: Any) -> SimplifiedArtist:
        data = _mapping(data)
        return cls(
            external_urls=ExternalUrls.from_dict(_require(data, "external_urls")),
            href=_str(data, "href"),
            id=_str(data, "id"),
            name=_str(data, "name"),
            uri=_str(data, "uri"),
        )


def _album_fields(data: Mapping[str, Any], markets_required: bool) -> dict[str, Any]:
    return {
        "album_type": AlbumType.parse(_require(data, "album_type")),
        "total_tracks": _uint(data, "total_tracks"),
        "available_markets": _strings(data, "available_markets", required=markets_required),
        "external_urls": ExternalUrls.from_dict(_require(data, "external_urls")),
        "href": _str(data, "href"),
        "id": _str(data, "id"),
        "images": _items(data, "images", Image.from_dict),
        "name": _str(data, "name"),
        "release": ReleaseDate.from_dict(data),
        "restrictions": _opt(data, "restrictions", Restrictions.from_dict),
        "uri": _str(data, "uri"),
        "artists": _items(data, "artists", SimplifiedArtist.from_dict),
        "label": _opt_str(data, "label"),
    }


@dataclass
class Album:
    """An album."""

    album_type: AlbumType
    total_tracks: int
    available_markets: list[str]
    external_urls: ExternalUrls
    href: str
    id: str
    images: list[Image]
    name: str
    release: ReleaseDate
    restrictions: Restrictions | None
    uri: str
    artists: list[SimplifiedArtist]
    label: str | None

    @classmethod
    def from_dict(cls, data: Any) -> Album:
        return cls(**_album_fields(_mapping(data), markets_required=False))


@dataclass
class SimplifiedAlbum:
    """An album as listed for an artist, with its album group."""

    album_type: AlbumType
    total_tracks: int
    available_markets: list[str]
    external_urls: ExternalUrls
    href: str
    id: str
    images: list[Image]
    name: str
    release: ReleaseDate
    restrictions: Restrictions | None
    uri: str
    artists: list[SimplifiedArtist]
    album_group: AlbumGroup
    label: str | None

    @classmethod
    def from_dict(cls, data: Any) -> SimplifiedAlbum:
        data = _mapping(data)
        return cls(
            **_album_fields(data, markets_required=True),
            album_group=_album_group(_require(data, "album_group")),
        )


def _track_fields(data: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "artists": _items(data, "artists", SimplifiedArtist.from_dict),
        "available_markets": _strings(data, "available_markets"),
        "disc_number": _u8(data, "disc_number"),
        "duration": parse_duration(_require(data, "duration_ms")),
        "explicit": _bool(data, "explicit"),
        "external_urls": ExternalUrls.from_dict(_require(data, "external_urls")),
        "href": _str(data, "href"),
        "id": _str(data, "id"),
        "is_playable": _default_bool(data, "is_playable"),
        "linked_from": _opt(data, "linked_from", Track.from_dict),
        "restrictions": _opt(data, "restrictions", Restrictions.from_dict),
        "name": _str(data, "name"),
        "preview_url": _opt_str(data, "preview_url"),
        "track_number": _u8(data, "track_number"),
        "uri": _str(data, "uri"),
        "is_local": _bool(data, "is_local"),
    }


@dataclass
class Track:
    """A track together with its album."""

    album: Album
    artists: list[SimplifiedArtist]
    available_markets: list[str]
    disc_number: int
    duration: timedelta
    explicit: bool
    external_ids: ExternalIds
    external_urls: ExternalUrls
    href: str
    id: str
    is_playable: bool
    linked_from: Track | None
    restrictions: Restrictions | None
    name: str
    preview_url: str | None
    track_number: int
    uri: str
    is_local: bool

    @classmethod
    def from_dict(cls, data: Any) -> Track:
        data = _mapping(data)
        return cls(
            album=Album.from_dict(_require(data, "album")),
            external_ids=ExternalIds.from_dict(_require(data, "external_ids")),
            **_track_fields(data),
        )

    @classmethod
    def top_item_type(cls) -> str:
        """The path segment used when asking for the user's top tracks."""
        return "tracks"


@dataclass
class SimplifiedTrack:
    """A track without its album."""

    artists: list[SimplifiedArtist]
    available_markets: list[str]
    disc_number: int
    duration: timedelta
    explicit: bool
    external_urls: ExternalUrls
    href: str
    id: str
    is_playable: bool
    linked_from: Track | None
    restrictions: Restrictions | None
    name: str
    preview_url: str | None
    track_number: int
    uri: str
    is_local: bool

    @classmethod
    def from_dict(cls, data: Any) -> SimplifiedTrack:
        return cls(**_track_fields(_mapping(data)))


@dataclass
class AlbumTracks(Paged):
    """A page of an album's tracks."""

    items: list[SimplifiedTrack]

    @classmethod
    def from_dict(cls, data: Any) -> AlbumTracks:
        return cls._from_page(data, SimplifiedTrack.from_dict)


@dataclass
class SavedAlbum:
    """An album in the user's library, with when it was saved."""

    added_at: datetime
    album: Album

    @classmethod
    def from_dict(cls, data: Any) -> SavedAlbum:
        data = _mapping(data)
        return cls(
            added_at=parse_added_at(_require(data, "added_at")),
            album=Album.from_dict(_require(data, "album")),
        )


@dataclass
class SavedAlbums(Paged):
    """A page of the user's saved albums."""

    items: list[SavedAlbum]

    @classmethod
    def from_dict(cls, data: Any) -> SavedAlbums:
        return cls._from_page(data, SavedAlbum.from_dict)


@dataclass
class NewReleases(Paged):
    """A page of newly released albums."""

    items: list[Album]

    @classmethod
    def from_dict(cls, data: Any) -> NewReleases:
        return cls._from_page(data, Album.from_dict)


@dataclass
class Artist:
    """An artist."""

    external_urls: ExternalUrls
    followers: Followers
    genres: list[str]
    href: str
    id: str
    images: list[Image]
    name: str
    popularity: int
    uri: str

    @classmethod
    def from_dict(cls, data: Any) -> Artist:
        data = _mapping(data)
        return cls(
            external_urls=ExternalUrls.from_dict(_require(data, "external_urls")),
            followers=Followers.from_dict(_require(data, "followers")),
            genres=_strings(data, "genres"),
            href=_str(data, "href"),
            id=_str(data, "id"),
            images=_default_list(data, "images", Image.from_dict),
            name=_str(data, "name"),
            popularity=_u8(data, "popularity"),
            uri=_str(data, "uri"),
        )

    @classmethod
    def top_item_type(cls) -> str:
        """The path segment used when asking for the user's top artists."""
        return "artists"


@dataclass
class FollowedArtists:
    """A cursor-paged list of artists the user follows."""

    href: str
    limit: int
    next: str | None
    cursors: Cursors
    total: int
    items: list[Artist]

    @classmethod
    def from_dict(cls, data: Any) -> FollowedArtists:
        data = _mapping(data)
        return cls(
            href=_str(data, "href"),
            limit=_uint(data, "limit"),
            next=_opt_str(data, "next"),
            cursors=Cursors.from_dict(_require(data, "cursors")),
            total=_uint(data, "total"),
            items=_items(data, "items", Artist.from_dict),
        )

    def page(self) -> int:
        """Cursor paging has no page numbers; always 1."""
        return 1

    def max_page(self) -> int:
        """The number of full pages (at least 1)."""
        if self.total == 0:
            return 1
        return self.total // self.limit


@dataclass
class ArtistAlbums(Paged):
    """A page of an artist's albums."""

    items: list[SimplifiedAlbum]

    @classmethod
    def from_dict(cls, data: Any) -> ArtistAlbums:
        return cls._from_page(data, SimplifiedAlbum.from_dict)


@dataclass
class SavedTrack:
    """A track in the user's library, with when it was saved."""

    added_at: datetime
    track: Track

    @classmethod
    def from_dict(cls, data: Any) -> SavedTrack:
        data = _mapping(data)
        return cls(
            added_at=parse_added_at(_require(data, "added_at")),
            track=Track.from_dict(_require(data, "track")),
        )


@dataclass
class SavedTracks(Paged):
    """A page of the user's saved tracks."""

    items: list[SavedTrack]

    @classmethod
    def from_dict(cls, data: Any) -> SavedTracks:
        return cls._from_page(data, SavedTrack.from_dict)