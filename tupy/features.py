"""Audio features of tracks and recommendation results."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Mapping

from tupy.common import (
    ResponseError,
    _as_float,
    _as_int,
    _items,
    _mapping,
    _require,
    _str,
    _uint,
    parse_duration,
)
from tupy.music import SimplifiedTrack


def _u8(data: Mapping[str, Any], key: str) -> int:
    value = _uint(data, key)
    if value > 255:
        raise ResponseError(f"field `{key}` must be at most 255")
    return value


def _i8(data: Mapping[str, Any], key: str) -> int:
    value = _as_int(_require(data, key), key)
    if not -128 <= value <= 127:
        raise ResponseError(f"field `{key}` must be between -128 and 127")
    return value


def _float(data: Mapping[str, Any], key: str) -> float:
    return _as_float(_require(data, key), key)


@dataclass
class AudioFeatures:
    """High-level audio features of a track."""

    acousticness: float
    analysis_url: str
    danceability: float
    duration: timedelta
    energy: float
    id: str
    instrumentalness: float
    key: int
    liveness: float
    loudness: float
    mode: int
    speechiness: float
    tempo: float
    time_signature: int
    track_href: str
    uri: str
    valence: float

    @classmethod
    def from_dict(cls, data: Any) -> AudioFeatures:
        data = _mapping(data)
        return cls(
            acousticness=_float(data, "acousticness"),
            analysis_url=_str(data, "analysis_url"),
            danceability=_float(data, "danceability"),
            duration=parse_duration(_require(data, "duration_ms")),
            energy=_float(data, "energy"),
            id=_str(data, "id"),
            instrumentalness=_float(data, "instrumentalness"),
            key=_i8(data, "key"),
            liveness=_float(data, "liveness"),
            loudness=_float(data, "loudness"),
            mode=_u8(data, "mode"),
            speechiness=_float(data, "speechiness"),
            tempo=_float(data, "tempo"),
            time_signature=_u8(data, "time_signature"),
            track_href=_str(data, "track_href"),
            uri=_str(data, "uri"),
            valence=_float(data, "valence"),
        )


@dataclass
class RecommendationSeed:
    """A seed used for a recommendations response, with pool sizes."""

    after_filtering_size: int
    after_relinking_size: int
    href: str
    id: str
    initial_pool_size: int

    @classmethod
    def from_dict(cls, data: Any) -> RecommendationSeed:
        data = _mapping(data)
        return cls(
            after_filtering_size=_uint(data, "afterFilteringSize"),
            after_relinking_size=_uint(data, "afterRelinkingSize"),
            href=_str(data, "href"),
            id=_str(data, "id"),
            initial_pool_size=_uint(data, "initialPoolSize"),
        )


@dataclass
class Recommendations:
    """Recommended tracks and the seeds that produced them."""

    seeds: list[RecommendationSeed]
    tracks: list[SimplifiedTrack]

    @classmethod
    def from_dict(cls, data: Any) -> Recommendations:
        data = _mapping(data)
        return cls(
            seeds=_items(data, "seeds", RecommendationSeed.from_dict),
            tracks=_items(data, "tracks", SimplifiedTrack.from_dict),
        )