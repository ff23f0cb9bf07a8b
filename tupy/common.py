"""Shared response objects and value parsers for Web API payloads."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from enum import Enum
from typing import Any, Callable, Mapping, TypeVar

_T = TypeVar("_T")

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_DATETIME_RE = re.compile(
    r"(\d{4}-\d{1,2}-\d{1,2}T\d{1,2}:\d{1,2}:\d{1,2})(?:\.(\d{1,9}))?Z"
)


class ResponseError(ValueError):
    """Raised when a response payload does not have the expected shape."""


def _mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ResponseError(f"expected an object, got {type(data).__name__}")
    return data


def _require(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ResponseError(f"missing field `{key}`") from None


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _as_str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise ResponseError(f"field `{key}` must be a string")
    return value


def _as_int(value: Any, key: str) -> int:
    if not _is_int(value):
        raise ResponseError(f"field `{key}` must be an integer")
    return value


def _as_uint(value: Any, key: str) -> int:
    value = _as_int(value, key)
    if value < 0:
        raise ResponseError(f"field `{key}` must not be negative")
    return value


def _as_float(value: Any, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ResponseError(f"field `{key}` must be a number")
    return float(value)


def _as_bool(value: Any, key: str) -> bool:
    if not isinstance(value, bool):
        raise ResponseError(f"field `{key}` must be a boolean")
    return value


def _as_list(value: Any, key: str) -> list:
    if not isinstance(value, list):
        raise ResponseError(f"field `{key}` must be a list")
    return value


def _str(data: Mapping[str, Any], key: str) -> str:
    return _as_str(_require(data, key), key)


def _opt_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    return None if value is None else _as_str(value, key)


def _uint(data: Mapping[str, Any], key: str) -> int:
    return _as_uint(_require(data, key), key)


def _bool(data: Mapping[str, Any], key: str) -> bool:
    return _as_bool(_require(data, key), key)


def _items(data: Mapping[str, Any], key: str, parse: Callable[[Any], _T]) -> list[_T]:
    return [parse(item) for item in _as_list(_require(data, key), key)]


def _parse_date(text: Any) -> date:
    text = _as_str(text, "date")
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError as exc:
        raise ResponseError(str(exc)) from None


def parse_named_objects(value: Any) -> list[str]:
    """Collect the `name` of every object in a list."""
    return [_str(_mapping(item), "name") for item in _as_list(value, "names")]


def parse_date_ymd(value: Any) -> date:
    """Parse a `YYYY-MM-DD` date."""
    return _parse_date(value)


def parse_date_ym(value: Any) -> date:
    """Parse a `YYYY-MM` date as the first day of that month."""
    return _parse_date(f"{_as_str(value, 'date')}-01")


def parse_date_y(value: Any) -> date:
    """Parse a `YYYY` date as the first day of that year."""
    return _parse_date(f"{_as_str(value, 'date')}-01-01")


def _utc_to_local(naive: datetime) -> datetime:
    return naive.replace(tzinfo=timezone.utc).astimezone()


def parse_added_at(value: Any) -> datetime:
    """Parse a `YYYY-MM-DDTHH:MM:SSZ` UTC timestamp into local time."""
    text = _as_str(value, "added_at")
    try:
        naive = datetime.strptime(text, "%Y-%m-%dT%H:%M:%SZ")
    except ValueError as exc:
        raise ResponseError(str(exc)) from None
    return _utc_to_local(naive)


def parse_datetime(value: Any) -> datetime:
    """Parse a UTC timestamp with fractional seconds into local time."""
    text = _as_str(value, "datetime")
    match = _DATETIME_RE.fullmatch(text)
    if match is None:
        raise ResponseError(f"invalid datetime {text!r}")
    try:
        naive = datetime.strptime(match.group(1), "%Y-%m-%dT%H:%M:%S")
    except ValueError as exc:
        raise ResponseError(str(exc)) from None
    fraction = match.group(2)
    if fraction:
        naive = naive.replace(microsecond=int(fraction[:6].ljust(6, "0")))
    return _utc_to_local(naive)


def parse_added_at_opt(value: Any) -> datetime | None:
    """Like `parse_added_at`, passing `None` through."""
    return None if value is None else parse_added_at(value)


def parse_timestamp(value: Any) -> datetime:
    """Turn Unix milliseconds into a local datetime."""
    millis = _as_int(value, "timestamp")
    try:
        return (_EPOCH + timedelta(milliseconds=millis)).astimezone()
    except (OverflowError, ValueError, OSError):
        raise ResponseError("Invalid timestamp") from None


def parse_duration(value: Any) -> timedelta:
    """Turn a count of milliseconds into a duration."""
    return timedelta(milliseconds=_as_int(value, "duration"))


def parse_duration_opt(value: Any) -> timedelta | None:
    """Like `parse_duration`, passing `None` through."""
    return None if value is None else parse_duration(value)


def parse_duration_seconds(value: Any) -> timedelta:
    """Turn fractional seconds into a duration, truncated to milliseconds."""
    seconds = _as_float(value, "duration")
    whole = math.trunc(seconds)
    millis = int((seconds - whole) * 1000.0)
    return timedelta(seconds=whole) + timedelta(milliseconds=millis)


@dataclass
class ExternalUrls:
    """Known external URLs of an object."""

    spotify: str

    @classmethod
    def from_dict(cls, data: Any) -> ExternalUrls:
        return cls(spotify=_str(_mapping(data), "spotify"))


@dataclass
class Followers:
    """Follower information of a profile."""

    total: int

    @classmethod
    def from_dict(cls, data: Any) -> Followers:
        return cls(total=_uint(_mapping(data), "total"))


@dataclass
class Image:
    """An image with optional dimensions (0 when unknown)."""

    url: str
    height: int = 0
    width: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> Image:
        data = _mapping(data)
        height = data.get("height")
        width = data.get("width")
        return cls(
            url=_str(data, "url"),
            height=0 if height is None else _as_uint(height, "height"),
            width=0 if width is None else _as_uint(width, "width"),
        )


class AlbumType(Enum):
    ALBUM = "album"
    SINGLE = "single"
    COMPILATION = "compilation"

    @classmethod
    def parse(cls, value: Any) -> AlbumType:
        """Parse an album type, ignoring case."""
        text = _as_str(value, "album_type")
        try:
            return cls(text.lower())
        except ValueError:
            raise ResponseError(
                f"Invalid album type {text!r}: expected one of 'album', "
                "'single' or 'compilation' (case-insensitive)"
            ) from None


class DatePrecision(Enum):
    YEAR = "year"
    MONTH = "month"
    DAY = "day"


class RestrictionReason(Enum):
    EXPLICIT = "explicit"
    MARKET = "market"
    PRODUCT = "product"

    @classmethod
    def parse(cls, value: Any) -> RestrictionReason | str:
        """Parse a reason; unknown reasons are kept as the plain string."""
        text = _as_str(value, "reason")
        try:
            return cls(text)
        except ValueError:
            return text


@dataclass
class Restrictions:
    """A content restriction applied to an item."""

    reason: RestrictionReason | str

    @classmethod
    def from_dict(cls, data: Any) -> Restrictions:
        return cls(reason=RestrictionReason.parse(_require(_mapping(data), "reason")))


_DATE_PARSERS = {
    DatePrecision.DAY: (parse_date_ymd, "%Y-%m-%d"),
    DatePrecision.MONTH: (parse_date_ym, "%Y-%m"),
    DatePrecision.YEAR: (parse_date_y, "%Y"),
}


@dataclass
class ReleaseDate:
    """A release date together with the precision it is known to."""

    precision: DatePrecision
    date: date

    @classmethod
    def from_dict(cls, data: Any) -> ReleaseDate:
        data = _mapping(data)
        raw = _str(data, "release_date_precision")
        try:
            precision = DatePrecision(raw)
        except ValueError:
            raise ResponseError(f"unknown release date precision {raw!r}") from None
        parse, _ = _DATE_PARSERS[precision]
        return cls(precision=precision, date=parse(_require(data, "release_date")))

    def __str__(self) -> str:
        _, fmt = _DATE_PARSERS[self.precision]
        return self.date.strftime(fmt)


@dataclass
class Paged:
    """One page of a paginated listing."""

    href: str
    limit: int
    offset: int
    total: int
    items: list
    next: str | None = None
    previous: str | None = None

    @classmethod
    def _from_page(cls, data: Any, parse_item: Callable[[Any], Any]):
        data = _mapping(data)
        return cls(
            href=_str(data, "href"),
            limit=_uint(data, "limit"),
            offset=_uint(data, "offset"),
            total=_uint(data, "total"),
            items=_items(data, "items", parse_item),
            next=_opt_str(data, "next"),
            previous=_opt_str(data, "previous"),
        )

    def page(self) -> int:
        """The 1-based number of this page."""
        if self.offset == 0:
            return 1
        return self.offset // self.limit + 1

    def max_page(self) -> int:
        """The number of pages available (at least 1)."""
        if self.total == 0:
            return 1
        return -(-self.total // self.limit)


@dataclass
class ExternalIds:
    """Known external identifiers of a recording or product."""

    isrc: str | None = None
    ean: str | None = None
    upc: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> ExternalIds:
        data = _mapping(data)
        return cls(
            isrc=_opt_str(data, "isrc"),
            ean=_opt_str(data, "ean"),
            upc=_opt_str(data, "upc"),
        )


@dataclass
class Cursors:
    """Cursors for cursor-based paging."""

    after: str | None = None
    before: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Cursors:
        data = _mapping(data)
        return cls(after=_opt_str(data, "after"), before=_opt_str(data, "before"))


@dataclass
class CopyRight:
    """A copyright statement; `type` is C (copyright) or P (performance)."""

    text: str
    type: str

    @classmethod
    def from_dict(cls, data: Any) -> CopyRight:
        data = _mapping(data)
        return cls(text=_str(data, "text"), type=_str(data, "type"))


@dataclass
class ResumePoint:
    """The user's most recent position in an item."""

    fully_played: bool = False
    resume_position: timedelta = field(default_factory=timedelta)

    @classmethod
    def from_dict(cls, data: Any) -> ResumePoint:
        data = _mapping(data)
        position = (
            parse_duration(data["resume_position_ms"])
            if "resume_position_ms" in data
            else timedelta(0)
        )
        return cls(fully_played=_bool(data, "fully_played"), resume_position=position)


@dataclass
class Category:
    """A browse category."""

    href: str
    icons: list[Image]
    id: str
    name: str

    @classmethod
    def from_dict(cls, data: Any) -> Category:
        data = _mapping(data)
        return cls(
            href=_str(data, "href"),
            icons=_items(data, "icons", Image.from_dict),
            id=_str(data, "id"),
            name=_str(data, "name"),
        )


@dataclass
class Categories(Paged):
    """A page of browse categories."""

    items: list[Category]

    @classmethod
    def from_dict(cls, data: Any) -> Categories:
        return cls._from_page(data, Category.from_dict)