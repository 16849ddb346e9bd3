"""Load and save RoadConfig values from JSON files."""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict

from road_config import RoadConfig, preset_config

logger = logging.getLogger(__name__)

CONFIG_SECTION = "road_config"

ALLOWED_KEYS = frozenset(
    {
        "map_size",
        "road_width",
        "min_straight_length",
        "max_straight_length",
        "max_segments",
        "acceptance_fraction",
        "collision_check_radius",
        "min_length_before_collision_check",
        "ignore_own_segment_in_collision",
        "deduplicate_landmarks",
        "random_seed",
        "collect_metrics",
    }
)


def read_config_overrides(config_path: str) -> Dict[str, Any]:
    """Return the known ``road_config`` entries from ``config_path``, or {} if unreadable."""
    if not os.path.exists(config_path):
        logger.warning("Config file not found: %s, using preset defaults", config_path)
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Error loading config %s: %s, using preset defaults", config_path, exc)
        return {}

    section = data.get(CONFIG_SECTION, {}) if isinstance(data, dict) else {}
    if not isinstance(section, dict):
        logger.warning("Config section %r in %s is not an object, ignoring it", CONFIG_SECTION, config_path)
        return {}

    unknown = sorted(key for key in section if key not in ALLOWED_KEYS)
    if unknown:
        logger.warning("Ignoring unknown road_config keys: %s", ", ".join(unknown))
    return {key: value for key, value in section.items() if key in ALLOWED_KEYS}


def load_road_config(config_path: str, preset: str = "dense") -> RoadConfig:
    """
    Load a RoadConfig from JSON, overlaying file values on a named preset.

    Args:
        config_path: Path to a JSON file shaped ``{"road_config": {...}}``
        preset: Preset supplying values the file does not set

    Returns:
        RoadConfig: The validated configuration. Invalid values raise ValueError.
    """
    overrides = read_config_overrides(config_path)
    config = preset_config(preset, **overrides)
    logger.debug("Loaded road config from %s (preset %s): %s", config_path, preset, config)
    return config


def save_road_config(config: RoadConfig, config_path: str) -> None:
    """Write ``config`` to ``config_path`` in the shape read by load_road_config."""
    directory = os.path.dirname(config_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(config_path, "w", encoding="utf-8") as handle:
        json.dump({CONFIG_SECTION: config.to_dict()}, handle, indent=2, sort_keys=True)
        handle.write("\n")
