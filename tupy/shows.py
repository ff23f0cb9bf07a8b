"""Shows (podcasts) and their episodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Callable, Mapping, TypeVar

from tupy.common import (
    CopyRight,
    ExternalUrls,
    Image,
    Paged,
    ReleaseDate,
    ResponseError,
    Restrictions,
    ResumePoint,
    _as_bool,
    _as_list,
    _as_str,
    _as_uint,
    _bool,
    _items,
    _mapping,
    _opt_str,
    _require,
    _str,
    parse_added_at,
    parse_duration,
)

_T = TypeVar("_T")


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


def _opt_bool(data: Mapping[str, Any], key: str) -> bool | None:
    return _opt(data, key, lambda v: _as_bool(v, key))


def _default_bool(data: Mapping[str, Any], key: str) -> bool:
    return _as_bool(data[key], key) if key in data else False


def _resume_point(data: Mapping[str, Any]) -> ResumePoint:
    if "resume_point" not in data:
        return ResumePoint()
    return ResumePoint.from_dict(data["resume_point"])


def _optional_release(data: Mapping[str, Any]) -> ReleaseDate | None:
    try:
        return ReleaseDate.from_dict(data)
    except ResponseError:
        return None


@dataclass
class Show:
    """A show (podcast)."""

    available_markets: list[str]
    copyrights: list[CopyRight]
    description: str | None
    html_description: str | None
    explicit: bool
    external_urls: ExternalUrls
    href: str
    id: str
    media_type: str
    name: str
    publisher: str | None
    uri: str
    images: list[Image] = field(default_factory=list)
    is_externally_hosted: bool | None = None
    languages: list[str] = field(default_factory=list)
    total_episodes: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> Show:
        data = _mapping(data)
        return cls(
            available_markets=_strings(data, "available_markets", required=True),
            copyrights=_items(data, "copyrights", CopyRight.from_dict),
            description=_opt_str(data, "description"),
            html_description=_opt_str(data, "html_description"),
            explicit=_bool(data, "explicit"),
            external_urls=ExternalUrls.from_dict(_require(data, "external_urls")),
            href=_str(data, "href"),
            id=_str(data, "id"),
            media_type=_str(data, "media_type"),
            name=_str(data, "name"),
            publisher=_opt_str(data, "publisher"),
            uri=_str(data, "uri"),
            images=_default_list(data, "images", Image.from_dict),
            is_externally_hosted=_opt_bool(data, "is_externally_hosted"),
            languages=_strings(data, "languages"),
            total_episodes=(
                _as_uint(data["total_episodes"], "total_episodes")
                if "total_episodes" in data
                else 0
            ),
        )


@dataclass
class Episode:
    """An episode of a show, with the show when it is known."""

    preview_url: str | None
    description: str | None
    html_description: str | None
    duration: timedelta
    explicit: bool
    external_urls: ExternalUrls
    href: str
    id: str
    images: list[Image]
    is_playable: bool
    is_externally_hosted: bool | None
    languages: list[str]
    name: str
    release: ReleaseDate | None
    resume_point: ResumePoint
    uri: str
    restrictions: Restrictions | None
    show: Show | None

    @classmethod
    def from_dict(cls, data: Any) -> Episode:
        data = _mapping(data)
        return cls(
            preview_url=_opt_str(data, "audio_preview_url"),
            description=_opt_str(data, "description"),
            html_description=_opt_str(data, "html_description"),
            duration=parse_duration(_require(data, "duration_ms")),
            explicit=_bool(data, "explicit"),
            external_urls=ExternalUrls.from_dict(_require(data, "external_urls")),
            href=_str(data, "href"),
            id=_str(data, "id"),
            images=_default_list(data, "images", Image.from_dict),
            is_playable=_default_bool(data, "is_playable"),
            is_externally_hosted=_opt_bool(data, "is_externally_hosted"),
            languages=_strings(data, "languages"),
            name=_str(data, "name"),
            release=_optional_release(data),
            resume_point=_resume_point(data),
            uri=_str(data, "uri"),
            restrictions=_opt(data, "restrictions", Restrictions.from_dict),
            show=_opt(data, "show", Show.from_dict),
        )


@dataclass
class SimplifiedEpisode:
    """An episode without its show."""

    preview_url: str | None
    description: str
    html_description: str
    duration: timedelta
    explicit: bool
    external_urls: ExternalUrls
    href: str
    id: str
    images: list[Image]
    is_playable: bool
    is_externally_hosted: bool | None
    languages: list[str]
    name: str
    release: ReleaseDate
    resume_point: ResumePoint
    uri: str
    restrictions: Restrictions | None

    @classmethod
    def from_dict(cls, data: Any) -> SimplifiedEpisode:
        data = _mapping(data)
        return cls(
            preview_url=_opt_str(data, "audio_preview_url"),
            description=_str(data, "description"),
            html_description=_str(data, "html_description"),
            duration=parse_duration(_require(data, "duration_ms")),
            explicit=_bool(data, "explicit"),
            external_urls=ExternalUrls.from_dict(_require(data, "external_urls")),
            href=_str(data, "href"),
            id=_str(data, "id"),
            images=_items(data, "images", Image.from_dict),
            is_playable=_default_bool(data, "is_playable"),
            is_externally_hosted=_opt_bool(data, "is_externally_hosted"),
            languages=_strings(data, "languages"),
            name=_str(data, "name"),
            release=ReleaseDate.from_dict(data),
            resume_point=_resume_point(data),
            uri=_str(data, "uri"),
            restrictions=_opt(data, "restrictions", Restrictions.from_dict),
        )


@dataclass
class SavedEpisode:
    """An episode in the user's library, with when it was saved."""

    added_at: datetime
    episode: Episode

    @classmethod
    def from_dict(cls, data: Any) -> SavedEpisode:
        data = _mapping(data)
        return cls(
            added_at=parse_added_at(_require(data, "added_at")),
            episode=Episode.from_dict(_require(data, "episode")),
        )


@dataclass
class SavedEpisodes(Paged):
    """A page of the user's saved episodes."""

    items: list[SavedEpisode]

    @classmethod
    def from_dict(cls, data: Any) -> SavedEpisodes:
        return cls._from_page(data, SavedEpisode.from_dict)


@dataclass
class ShowEpisodes(Paged):
    """A page of a show's episodes."""

    items: list[SimplifiedEpisode]

    @classmethod
    def from_dict(cls, data: Any) -> ShowEpisodes:
        return cls._from_page(data, SimplifiedEpisode.from_dict)


@dataclass
class SavedShow:
    """A show in the user's library, with when it was saved."""

    added_at: datetime
    show: Show

    @classmethod
    def from_dict(cls, data: Any) -> SavedShow:
        data = _mapping(data)
        return cls(
            added_at=parse_added_at(_require(data, "added_at")),
            show=Show.from_dict(_require(data, "show")),
        )


@dataclass
class SavedShows(Paged):
    """A page of the user's saved shows."""

    items: list[SavedShow]

    @classmethod
    def from_dict(cls, data: Any) -> SavedShows:
        return cls._from_page(data, SavedShow.from_dict)