#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging
import random

from grid_renderer import DEFAULT_GLYPHS, GridTileSink
from road_config import PRESETS, preset_config
from road_config_loader import load_road_config
from road_map_builder import RoadMapBuilder
from road_models import RoadTileSet
from road_sinks import RecordingInstantiationSink

DEFAULT_TILES = RoadTileSet(
    road="road",
    background="grass",
    corner_markers=("corner_ne", "corner_nw", "corner_sw", "corner_se"),
)
LANDMARK_PREFAB = "traffic_light"


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate a road network and print it as ASCII.")
    parser.add_argument("--preset", choices=sorted(PRESETS), default="dense")
    parser.add_argument("--config", type=str, default=None, help="Optional JSON file with a road_config section")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--map-size", type=int, default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.config:
        config = load_road_config(args.config, preset=args.preset)
    else:
        config = preset_config(args.preset)
    if args.map_size is not None:
        overrides = config.to_dict()
        overrides["map_size"] = args.map_size
        config = preset_config(args.preset, **overrides)

    seed = args.seed if args.seed is not None else config.random_seed
    if seed is None:
        # Pick a random seed and print it, so the map can be reproduced with --seed.
        seed = random.randint(0, 1000000)
    config.random_seed = seed
    print(f"Using random seed {seed}")

    tile_sink = GridTileSink(config.map_size)
    landmark_sink = RecordingInstantiationSink()
    builder = RoadMapBuilder(
        config,
        tile_sink,
        DEFAULT_TILES,
        instantiation_sink=landmark_sink,
        landmark_prefab=LANDMARK_PREFAB,
    )
    road_map = builder.generate_road_map()
    if road_map is None:
        raise SystemExit("Road map generation failed")

    # Landmarks are objects, not tiles; overlay them on the printout only.
    for landmark in road_map.landmarks:
        tile_sink.set_tile(landmark.cell, LANDMARK_PREFAB)
    glyphs = dict(DEFAULT_GLYPHS)
    glyphs[LANDMARK_PREFAB] = "T"
    for line in tile_sink.to_lines(glyphs=glyphs):
        print(line)

    print(
        f"{road_map.road_tile_count} road tiles, {len(road_map.junctions)} junctions, "
        f"{road_map.corner_marker_count} corner markers, {len(landmark_sink)} landmarks"
    )


if __name__ == "__main__":
    main()
