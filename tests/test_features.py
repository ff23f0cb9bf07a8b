from datetime import timedelta

import pytest

from tupy.common import ResponseError
from tupy.features import AudioFeatures, RecommendationSeed, Recommendations

URLS = {"spotify": "https://open.example.com/x"}


def _features(**overrides):
    data = {
        "acousticness": 0.00242,
        "analysis_url": "https://api.example.com/audio-analysis/t1",
        "danceability": 0.585,
        "duration_ms": 237040,
        "energy": 0.842,
        "id": "t1",
        "instrumentalness": 0.00686,
        "key": 9,
        "liveness": 0.0866,
        "loudness": -5.883,
        "mode": 0,
        "speechiness": 0.0556,
        "tempo": 118.211,
        "time_signature": 4,
        "track_href": "https://api.example.com/tracks/t1",
        "uri": "spotify:track:t1",
        "valence": 0.428,
    }
    data.update(overrides)
    return data


def _seed(**overrides):
    data = {
        "afterFilteringSize": 250,
        "afterRelinkingSize": 249,
        "href": "https://api.example.com/artists/a1",
        "id": "a1",
        "initialPoolSize": 500,
    }
    data.update(overrides)
    return data


def _simple_track():
    return {
        "artists": [
            {
                "external_urls": URLS,
                "href": "https://api.example.com/artists/a1",
                "id": "a1",
                "name": "Artist",
                "uri": "spotify:artist:a1",
            }
        ],
        "disc_number": 1,
        "duration_ms": 1000,
        "explicit": True,
        "external_urls": URLS,
        "href": "https://api.example.com/tracks/t2",
        "id": "t2",
        "name": "Song",
        "track_number": 2,
        "uri": "spotify:track:t2",
        "is_local": False,
    }


def test_features_from_dict():
    features = AudioFeatures.from_dict(_features())
    assert features.duration == timedelta(milliseconds=237040)
    assert features.key == 9
    assert features.mode == 0
    assert features.danceability == pytest.approx(0.585)
    assert features.uri == "spotify:track:t1"


def test_features_key_unknown():
    assert AudioFeatures.from_dict(_features(key=-1)).key == -1


def test_features_mode_must_fit_byte():
    with pytest.raises(ResponseError):
        AudioFeatures.from_dict(_features(mode=256))


def test_features_missing_field():
    data = _features()
    del data["valence"]
    with pytest.raises(ResponseError):
        AudioFeatures.from_dict(data)


def test_seed_reads_camel_case_keys():
    seed = RecommendationSeed.from_dict(_seed())
    assert seed.after_filtering_size == 250
    assert seed.after_relinking_size == 249
    assert seed.initial_pool_size == 500
    assert seed.id == "a1"


def test_seed_missing_pool_size():
    data = _seed()
    del data["initialPoolSize"]
    with pytest.raises(ResponseError):
        RecommendationSeed.from_dict(data)


def test_recommendations():
    result = Recommendations.from_dict({"seeds": [_seed()], "tracks": [_simple_track()]})
    assert [seed.id for seed in result.seeds] == ["a1"]
    assert [track.id for track in result.tracks] == ["t2"]
    assert result.tracks[0].explicit is True


def test_recommendations_require_tracks():
    with pytest.raises(ResponseError):
        Recommendations.from_dict({"seeds": []})