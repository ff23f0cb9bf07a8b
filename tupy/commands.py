"""Request bodies and parameters for playback and playlist commands."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Iterable

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MILLISECOND = timedelta(milliseconds=1)
_URI_PREFIX = "spotify:"


def _spotify_id(value: Any) -> str:
    """Accept a bare ID or a URI and return the ID part."""
    text = str(value)
    if text.startswith(_URI_PREFIX):
        return text.rsplit(":", 1)[-1]
    return text


def _millis(duration: timedelta) -> int:
    """Whole milliseconds in a duration, truncated toward zero."""
    micros = (duration.days * 86400 + duration.seconds) * 1_000_000 + duration.microseconds
    whole = abs(micros) // 1000
    return whole if micros >= 0 else -whole


def _context_uri(kind: str, spotify_id: str) -> str:
    if kind == "collection":
        return f"spotify:user:{spotify_id}:collection"
    return f"spotify:{kind}:{spotify_id}"


def to_duration(value: Any) -> timedelta:
    """Turn a duration, integer milliseconds or float seconds into a duration."""
    if isinstance(value, timedelta):
        return value
    if isinstance(value, bool):
        raise TypeError("a boolean is not a duration")
    if isinstance(value, int):
        return timedelta(milliseconds=value)
    if isinstance(value, float):
        whole = math.trunc(value)
        millis = math.trunc((value - whole) * 1000.0)
        return timedelta(seconds=whole) + timedelta(milliseconds=millis)
    raise TypeError(f"cannot use {type(value).__name__} as a duration")


@dataclass
class PlaylistDetails:
    """Details to set when creating or changing a playlist."""

    name: str | None = None
    public: bool | None = None
    collaborative: bool | None = None
    description: str | None = None

    def __post_init__(self) -> None:
        if self.name is not None:
            self.name = str(self.name)
        if self.description is not None:
            self.description = str(self.description)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "public": self.public,
            "collaborative": self.collaborative,
            "description": self.description,
        }


@dataclass(frozen=True)
class Reorder:
    """Move `length` items starting at `start` to before index `insert`."""

    start: int
    length: int
    insert: int

    def to_dict(self) -> dict[str, int]:
        return {
            "range_start": self.start,
            "range_length": self.length,
            "insert_before": self.insert,
        }


@dataclass
class ReplaceUris:
    """Replace every item of a playlist with the given URIs."""

    uris: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, list[str]]:
        return {"uris": [str(uri) for uri in self.uris]}


def uri_body(uri: Any) -> dict[str, str]:
    """Wrap a URI in the `{"uri": ...}` object the API expects."""
    return {"uri": str(uri)}


_CONTEXT_KINDS = ("album", "show", "playlist", "collection")
_PLAY_KINDS = ("artist", "queue", "resume") + _CONTEXT_KINDS


@dataclass(frozen=True)
class Play:
    """What to start playing, and from where."""

    kind: str
    id: str | None = None
    offset: int | None = None
    position: timedelta = timedelta(0)
    uris: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.kind not in _PLAY_KINDS:
            raise ValueError(f"unknown play kind {self.kind!r}")

    @classmethod
    def artist(cls, id: Any) -> Play:
        return cls("artist", _spotify_id(id))

    @classmethod
    def album(cls, id: Any, offset: int | None = None, position: Any = 0) -> Play:
        return cls("album", _spotify_id(id), offset, to_duration(position))

    @classmethod
    def collection(cls, id: Any, offset: int | None = None, position: Any = 0) -> Play:
        return cls("collection", _spotify_id(id), offset, to_duration(position))

    @classmethod
    def show(cls, id: Any, offset: int | None = None, position: Any = 0) -> Play:
        return cls("show", _spotify_id(id), offset, to_duration(position))

    @classmethod
    def playlist(cls, id: Any, offset: int | None = None, position: Any = 0) -> Play:
        return cls("playlist", _spotify_id(id), offset, to_duration(position))

    @classmethod
    def queue(cls, uris: Iterable[Any]) -> Play:
        return cls("queue", uris=tuple(str(uri) for uri in uris))

    @classmethod
    def resume(cls) -> Play:
        return cls("resume")

    def to_dict(self) -> dict[str, Any]:
        """The JSON body of a start/resume playback request."""
        if self.kind == "resume":
            return {}
        if self.kind == "artist":
            return {"context_uri": _context_uri("artist", self.id), "position": 0}
        if self.kind == "queue":
            return {"uris": list(self.uris), "position": _millis(self.position)}
        body: dict[str, Any] = {
            "context_uri": _context_uri(self.kind, self.id),
            "position": _millis(self.position),
        }
        if self.offset is not None:
            body["offset"] = {"position": self.offset}
        return body


_TIMESTAMP_KINDS = ("before", "after")


@dataclass(frozen=True)
class Timestamp:
    """A point in time that results must come before or after."""

    kind: str
    moment: datetime

    def __post_init__(self) -> None:
        if self.kind not in _TIMESTAMP_KINDS:
            raise ValueError(f"timestamp kind must be 'before' or 'after', not {self.kind!r}")

    def name(self) -> str:
        """The query parameter name: `before` or `after`."""
        return self.kind

    @classmethod
    def before_now(cls) -> Timestamp:
        return cls("before", datetime.now().astimezone())

    @classmethod
    def after_now(cls) -> Timestamp:
        return cls("after", datetime.now().astimezone())

    def to_param(self) -> str:
        """The moment as Unix milliseconds."""
        moment = self.moment if self.moment.tzinfo is not None else self.moment.astimezone()
        return str((moment - _EPOCH) // _MILLISECOND)