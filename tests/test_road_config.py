import json
import logging
from dataclasses import replace

import pytest

from random_source import SeededRandomSource
from road_config import (
    RoadConfig,
    StraightLengthRange,
    dense_road_config,
    preset_config,
    sparse_road_config,
)
from road_config_loader import load_road_config, save_road_config


def test_defaults_derive_margins_and_radii():
    config = RoadConfig()

    assert config.half_width == 3
    assert config.boundary_margin == 6
    assert config.collision_radius == 4
    assert config.cleanup_radius == 4
    assert config.landmark_offset == 4
    assert config.collision_start_length == config.min_straight_length
    assert config.acceptance_distance == pytest.approx(9.0)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"road_width": 1},
        {"map_size": 12},
        {"min_straight_length": 0, "max_straight_length": 5},
        {"min_straight_length": 10, "max_straight_length": 10},
        {"max_segments": -1},
        {"acceptance_fraction": -0.1},
        {"collision_check_radius": -1},
        {"min_length_before_collision_check": -2},
    ],
)
def test_invalid_values_raise(kwargs):
    with pytest.raises(ValueError):
        RoadConfig(**kwargs)


def test_map_size_just_above_twice_margin_is_accepted():
    config = RoadConfig(map_size=13, road_width=6)

    assert config.map_size == 13


def test_zero_segments_is_allowed():
    assert RoadConfig(max_segments=0).max_segments == 0


def test_collision_scan_includes_own_segment_by_default():
    assert RoadConfig().ignore_own_segment_in_collision is False


def test_derived_radii_follow_replaced_width():
    config = replace(RoadConfig(), road_width=10, min_straight_length=20)

    assert config.collision_check_radius is None
    assert config.collision_radius == 6
    assert config.collision_start_length == 20


def test_derived_radii_survive_round_trip_through_dict():
    config = RoadConfig()

    widened = preset_config("dense", **dict(config.to_dict(), road_width=10))

    assert widened.collision_radius == 6


def test_explicit_collision_values_are_kept():
    config = replace(
        RoadConfig(collision_check_radius=5, min_length_before_collision_check=2), road_width=10
    )

    assert config.collision_radius == 5
    assert config.collision_start_length == 2


def test_integral_strings_and_floats_are_coerced():
    config = RoadConfig(map_size="80", road_width=4.0, collision_check_radius="3", acceptance_fraction="0.25")

    assert config.map_size == 80
    assert config.road_width == 4
    assert config.collision_radius == 3
    assert config.acceptance_fraction == pytest.approx(0.25)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"road_width": "wide"},
        {"map_size": None},
        {"road_width": 4.5},
        {"max_segments": True},
        {"acceptance_fraction": "lots"},
        {"min_length_before_collision_check": [3]},
    ],
)
def test_non_integer_values_raise_value_error(kwargs):
    with pytest.raises(ValueError):
        RoadConfig(**kwargs)


def test_small_collision_radius_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="road_config"):
        RoadConfig(road_width=6, collision_check_radius=1)

    assert "collision_check_radius" in caplog.text


def test_recommended_collision_radius_does_not_warn(caplog):
    with caplog.at_level(logging.WARNING, logger="road_config"):
        RoadConfig(road_width=6, collision_check_radius=3)

    assert caplog.text == ""


def test_presets_differ_only_in_tuning():
    dense = dense_road_config()
    sparse = sparse_road_config()

    assert (dense.min_straight_length, dense.max_straight_length, dense.max_segments) == (30, 60, 60)
    assert dense.acceptance_fraction == pytest.approx(0.3)
    assert dense.collision_radius == 4
    assert (sparse.min_straight_length, sparse.max_straight_length, sparse.max_segments) == (50, 100, 40)
    assert sparse.acceptance_fraction == pytest.approx(0.5)
    assert sparse.collision_radius == 7
    assert sparse.map_size == dense.map_size


def test_sparse_preset_radius_tracks_road_width_override():
    assert sparse_road_config(road_width=4).collision_radius == 5


def test_preset_config_rejects_unknown_name():
    with pytest.raises(ValueError):
        preset_config("suburban")


def test_straight_length_range_samples_half_open_interval():
    length_range = StraightLengthRange(3, 6)
    rng = SeededRandomSource(99)

    samples = {length_range.sample(rng) for _ in range(200)}

    assert samples == {3, 4, 5}


def test_load_road_config_overlays_file_on_preset(tmp_path):
    path = tmp_path / "roads.json"
    path.write_text(json.dumps({"road_config": {"map_size": 80, "max_segments": 12, "colour": "red"}}))

    config = load_road_config(str(path), preset="sparse")

    assert config.map_size == 80
    assert config.max_segments == 12
    assert config.min_straight_length == 50


def test_load_road_config_missing_file_falls_back(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="road_config_loader"):
        config = load_road_config(str(tmp_path / "missing.json"))

    assert config == dense_road_config()
    assert "not found" in caplog.text


def test_load_road_config_corrupt_file_falls_back(tmp_path, caplog):
    path = tmp_path / "broken.json"
    path.write_text("{not json")

    with caplog.at_level(logging.WARNING, logger="road_config_loader"):
        config = load_road_config(str(path))

    assert config.max_segments == dense_road_config().max_segments
    assert "Error loading config" in caplog.text


def test_load_road_config_invalid_value_still_raises(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"road_config": {"road_width": 1}}))

    with pytest.raises(ValueError):
        load_road_config(str(path))


def test_load_road_config_coerces_string_numbers(tmp_path):
    path = tmp_path / "strings.json"
    path.write_text(json.dumps({"road_config": {"road_width": "4", "map_size": "90"}}))

    config = load_road_config(str(path))

    assert config.road_width == 4
    assert config.map_size == 90


def test_load_road_config_rejects_non_numeric_width(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps({"road_config": {"road_width": "six"}}))

    with pytest.raises(ValueError):
        load_road_config(str(path))


def test_saved_config_loads_back(tmp_path):
    config = RoadConfig(map_size=90, road_width=4, random_seed=17, deduplicate_landmarks=True)
    path = tmp_path / "nested" / "roads.json"

    save_road_config(config, str(path))

    assert load_road_config(str(path)) == config
