#!/usr/bin/env python3

# This file performs multiple runs of road generation, collecting and reporting metrics.
# Used for testing both performance of the algorithm and quality of the resulting networks.

from __future__ import annotations

import argparse
import datetime
import json
import math
import os
import random
import statistics
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from random_source import SeededRandomSource
from road_config import PRESETS, RoadConfig, preset_config
from road_generator import RoadGenerator
from road_graph import build_segment_graph, summarize_segment_graph

DEFAULT_SEGMENT_COMPLETION_THRESHOLD_RATIO = 0.8

PERCENTILES = [1.0, 5.0] + [float(value) for value in range(10, 100, 5)] + [99.0]


def build_config(preset: str, seed: int, map_size: int | None) -> RoadConfig:
    overrides: Dict[str, Any] = {"random_seed": seed, "collect_metrics": True}
    if map_size is not None:
        overrides["map_size"] = map_size
    return preset_config(preset, **overrides)


@dataclass
class GenerationRunResult:
    seed: int
    duration: float
    segments_created: int
    segment_target: int
    meets_segment_threshold: bool
    junction_count: int
    road_coverage: float
    dead_end_count: int
    branch_count: int
    graph_diameter: int
    corner_markers: int
    landmarks: int
    phase_metrics: Dict[str, Dict[str, float | int]]


def percentile(values: List[float], pct: float) -> float:
    if not values:
        return float("nan")
    if pct <= 0:
        return min(values)
    if pct >= 100:
        return max(values)
    ordered = sorted(values)
    rank = (len(ordered) - 1) * (pct / 100.0)
    lower = math.floor(rank)
    upper = math.ceil(rank)
    if lower == upper:
        return ordered[int(rank)]
    fraction = rank - lower
    return ordered[lower] + (ordered[upper] - ordered[lower]) * fraction


def compute_basic_stats(values: List[float]) -> Dict[str, float]:
    return {
        "mean": statistics.mean(values),
        "median": statistics.median(values),
        "min": min(values),
        "max": max(values),
        "stdev": statistics.stdev(values) if len(values) > 1 else float("nan"),
    }


def json_safe_number(value: float | int | None) -> float | int | None:
    if value is None:
        return None
    if isinstance(value, int):
        return value
    numeric = float(value)
    if math.isnan(numeric) or math.isinf(numeric):
        return None
    return numeric


def format_seconds(value: float) -> str:
    if value >= 1.0:
        return f"{value:.3f}s"
    return f"{value * 1000:.1f}ms"


@dataclass
class MetricDefinition:
    key: str
    name: str
    values: List[float]
    value_formatter: Callable[[float], str] = lambda value: f"{value:.3f}"


def percentile_label(pct: float) -> str:
    return f"p{int(pct)}" if float(pct).is_integer() else f"p{pct:g}"


def report_metric(definition: MetricDefinition) -> Dict[str, Any]:
    """Print a metric summary and return its JSON form."""
    values = definition.values
    print(definition.name + ":")
    if not values:
        print("  (no data)")
        return {"count": 0}

    fmt = definition.value_formatter
    stats = compute_basic_stats(values)
    print(
        "  Count {count}, mean {mean}, median {median}, min {min}, max {max}, stdev {stdev}".format(
            count=len(values),
            **{name: "nan" if math.isnan(value) else fmt(value) for name, value in stats.items()},
        )
    )
    percentiles = {percentile_label(pct): percentile(values, pct) for pct in PERCENTILES}
    print("  Percentiles: " + ", ".join(f"{label}={fmt(value)}" for label, value in percentiles.items()))

    summary: Dict[str, Any] = {"count": len(values)}
    summary.update({name: json_safe_number(value) for name, value in stats.items()})
    summary["percentiles"] = {label: json_safe_number(value) for label, value in percentiles.items()}
    return summary


def run_single_generation(
    preset: str, seed: int, map_size: int | None, completion_ratio: float
) -> GenerationRunResult:
    """Run one road generation with the provided seed and collect metrics."""
    config = build_config(preset, seed, map_size)
    generator = RoadGenerator(config)

    start = time.perf_counter()
    road_map = generator.generate(SeededRandomSource(seed))
    end = time.perf_counter()

    stats = summarize_segment_graph(build_segment_graph(road_map))
    segment_threshold = math.floor(config.max_segments * completion_ratio)

    return GenerationRunResult(
        seed=seed,
        duration=end - start,
        segments_created=road_map.segments_created,
        segment_target=config.max_segments,
        meets_segment_threshold=road_map.segments_created >= segment_threshold,
        junction_count=len(road_map.junctions),
        road_coverage=road_map.road_coverage(),
        dead_end_count=stats.dead_end_count,
        branch_count=stats.branch_count,
        graph_diameter=stats.diameter,
        corner_markers=road_map.corner_marker_count,
        landmarks=len(road_map.landmarks),
        phase_metrics=generator.metrics.snapshot() if generator.metrics else {},
    )


def run_benchmark(
    preset: str, num_runs: int, seed: int | None, map_size: int | None, completion_ratio: float
) -> List[GenerationRunResult]:
    """Run the generator multiple times and collect run-level metrics."""
    rng = random.Random(seed)
    return [
        run_single_generation(preset, rng.randint(0, 1_000_000), map_size, completion_ratio)
        for _ in range(num_runs)
    ]


def aggregate_phase_times(results: List[GenerationRunResult]) -> Dict[str, float]:
    totals: Dict[str, float] = {}
    for result in results:
        for name, metrics in result.phase_metrics.items():
            totals[name] = totals.get(name, 0.0) + float(metrics.get("total_time", 0.0))
    return totals


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Run the road generator multiple times and report timing and quality statistics."
    )
    parser.add_argument("-n", "--runs", type=int, default=20, help="Number of generations to execute (default: 20)")
    parser.add_argument("--preset", choices=sorted(PRESETS), default="dense")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Optional seed for the benchmark harness RNG; keeps run seeds reproducible",
    )
    parser.add_argument("--map-size", type=int, default=None)
    parser.add_argument(
        "--segment-completion-threshold-ratio",
        type=float,
        default=DEFAULT_SEGMENT_COMPLETION_THRESHOLD_RATIO,
        help="Fraction of max_segments required for a run to be considered successful",
    )
    parser.add_argument("--no-save", action="store_true", help="Skip writing the JSON report")
    args = parser.parse_args()

    if args.runs <= 0:
        raise SystemExit("Number of runs must be a positive integer")
    if not (0.0 < args.segment_completion_threshold_ratio <= 1.0):
        raise SystemExit("Segment completion threshold ratio must be within (0, 1]")

    results = run_benchmark(
        args.preset, args.runs, args.seed, args.map_size, args.segment_completion_threshold_ratio
    )

    for idx, result in enumerate(results, start=1):
        status = "ok" if result.meets_segment_threshold else "low"
        print(
            f"Run {idx:02d}: {format_seconds(result.duration)} (seed {result.seed}) | "
            f"segments {result.segments_created}/{result.segment_target} ({status}) | "
            f"coverage {result.road_coverage:.1%} | dead ends {result.dead_end_count}"
        )

    durations = [result.duration for result in results]
    worst_index = durations.index(max(durations))
    print()
    print(
        f"Worst-case generation time: {format_seconds(durations[worst_index])}"
        f" (seed {results[worst_index].seed})"
    )

    metrics_to_report = [
        MetricDefinition("generation_time", "Generation time", durations, lambda value: f"{value:.4f}s"),
        MetricDefinition("segments_created", "Segments created",
                         [float(r.segments_created) for r in results], lambda value: f"{value:.0f}"),
        MetricDefinition("junctions", "Junctions", [float(r.junction_count) for r in results],
                         lambda value: f"{value:.0f}"),
        MetricDefinition("road_coverage", "Road coverage", [r.road_coverage for r in results],
                         lambda value: f"{value:.1%}"),
        MetricDefinition("dead_ends", "Dead ends", [float(r.dead_end_count) for r in results],
                         lambda value: f"{value:.1f}"),
        MetricDefinition("branch_points", "Branch points", [float(r.branch_count) for r in results],
                         lambda value: f"{value:.1f}"),
        MetricDefinition("graph_diameter", "Graph diameter", [float(r.graph_diameter) for r in results],
                         lambda value: f"{value:.0f}"),
        MetricDefinition("corner_markers", "Corner markers", [float(r.corner_markers) for r in results],
                         lambda value: f"{value:.0f}"),
        MetricDefinition("landmarks", "Landmarks", [float(r.landmarks) for r in results],
                         lambda value: f"{value:.0f}"),
    ]

    aggregated: Dict[str, Any] = {}
    for metric in metrics_to_report:
        print()
        aggregated[metric.key] = report_metric(metric)

    phase_totals = aggregate_phase_times(results)
    if phase_totals:
        print()
        print("Phase timing summary:")
        for name, total in sorted(phase_totals.items(), key=lambda item: item[1], reverse=True):
            print(f"  {name}: total {format_seconds(total)}, avg {format_seconds(total / len(results))}")

    if args.no_save:
        return

    timestamp = datetime.datetime.now(datetime.timezone.utc).replace(microsecond=0)
    script_dir = os.path.dirname(os.path.abspath(__file__))
    benchmarks_dir = os.path.abspath(os.path.join(script_dir, "..", "benchmarks"))
    os.makedirs(benchmarks_dir, exist_ok=True)
    output_path = os.path.join(benchmarks_dir, f"benchmark-{timestamp.strftime('%Y%m%dT%H%M%SZ')}.json")

    benchmark_data = {
        "benchmark_run_info": {
            "timestamp": timestamp.isoformat(),
            "num_iterations": args.runs,
            "parameters": {
                "preset": args.preset,
                "seed": args.seed,
                "map_size": args.map_size,
                "segment_completion_threshold_ratio": args.segment_completion_threshold_ratio,
            },
        },
        "aggregated_results": aggregated,
        "results": [
            {
                "run_id": idx,
                "seed": result.seed,
                "total_time_seconds": result.duration,
                "segments_created": result.segments_created,
                "meets_segment_threshold": result.meets_segment_threshold,
                "road_coverage": result.road_coverage,
                "graph_diameter": result.graph_diameter,
                "phase_times": {
                    name: float(metrics.get("total_time", 0.0))
                    for name, metrics in sorted(result.phase_metrics.items())
                },
            }
            for idx, result in enumerate(results, start=1)
        ],
    }

    with open(output_path, "w", encoding="utf-8") as handle:
        json.dump(benchmark_data, handle, indent=2, sort_keys=True)
        handle.write("\n")

    print(f"\nSaved benchmark results to {os.path.relpath(output_path)}")


if __name__ == "__main__":
    main()
