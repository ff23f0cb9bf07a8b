"""Track-level audio analysis: metadata and summary of the whole track."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Mapping

from tupy.common import (
    ResponseError,
    _as_float,
    _as_int,
    _mapping,
    _require,
    _str,
    _uint,
    parse_duration_seconds,
    parse_timestamp,
)


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


def _seconds(data: Mapping[str, Any], key: str) -> timedelta:
    return parse_duration_seconds(_require(data, key))


@dataclass
class AudioAnalysisMeta:
    """Information about how an analysis was produced."""

    analyzer_version: str
    platform: str
    detailed_status: str
    status_code: int
    timestamp: datetime
    analysis_time: timedelta
    input_process: str

    @classmethod
    def from_dict(cls, data: Any) -> AudioAnalysisMeta:
        data = _mapping(data)
        return cls(
            analyzer_version=_str(data, "analyzer_version"),
            platform=_str(data, "platform"),
            detailed_status=_str(data, "detailed_status"),
            status_code=_u8(data, "status_code"),
            timestamp=parse_timestamp(_require(data, "timestamp")),
            analysis_time=_seconds(data, "analysis_time"),
            input_process=_str(data, "input_process"),
        )


@dataclass
class AudioAnalysisTrack:
    """Overall analysis values for a track."""

    num_samples: int
    duration: timedelta
    sample_md5: str
    offset_seconds: int
    window_seconds: int
    analysis_sample_rate: int
    analysis_channels: int
    end_of_fade_in: timedelta
    start_of_fade_out: timedelta
    loudness: float
    tempo: float
    tempo_confidence: float
    time_signature: int
    time_signature_confidence: float
    key: int
    key_confidence: float
    mode: int
    mode_confidence: float
    codestring: str
    code_version: float
    echoprintstring: str
    echoprint_version: float
    synchstring: str
    synch_version: float
    rhythmstring: str
    rhythm_version: float

    @classmethod
    def from_dict(cls, data: Any) -> AudioAnalysisTrack:
        data = _mapping(data)
        return cls(
            num_samples=_uint(data, "num_samples"),
            duration=_seconds(data, "duration"),
            sample_md5=_str(data, "sample_md5"),
            offset_seconds=_uint(data, "offset_seconds") if "offset_seconds" in data else 0,
            window_seconds=_uint(data, "window_seconds") if "window_seconds" in data else 0,
            analysis_sample_rate=_uint(data, "analysis_sample_rate"),
            analysis_channels=_u8(data, "analysis_channels"),
            end_of_fade_in=_seconds(data, "end_of_fade_in"),
            start_of_fade_out=_seconds(data, "start_of_fade_out"),
            loudness=_float(data, "loudness"),
            tempo=_float(data, "tempo"),
            tempo_confidence=_float(data, "tempo_confidence"),
            time_signature=_u8(data, "time_signature"),
            time_signature_confidence=_float(data, "time_signature_confidence"),
            key=_i8(data, "key"),
            key_confidence=_float(data, "key_confidence"),
            mode=_u8(data, "mode"),
            mode_confidence=_float(data, "mode_confidence"),
            codestring=_str(data, "codestring"),
            code_version=_float(data, "code_version"),
            echoprintstring=_str(data, "echoprintstring"),
            echoprint_version=_float(data, "echoprint_version"),
            synchstring=_str(data, "synchstring"),
            synch_version=_float(data, "synch_version"),
            rhythmstring=_str(data, "rhythmstring"),
            rhythm_version=_float(data, "rhythm_version"),
        )