"""Junction frontier grower: repeatedly extends straight roads from random junctions."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from grower_context import GrowerContext
from growers.base import (
    CandidateFinder,
    GeometryPlanner,
    GrowerApplier,
    RoadGrower,
)
from growers.segment_grower import SegmentGrower
from road_geometry import CARDINAL_DIRECTIONS, Cell, Direction
from road_models import RoadSegment, SegmentGrowth

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SegmentPlan:
    """Accepted straight run from a junction."""

    growth: SegmentGrowth

    def to_segment(self) -> RoadSegment:
        growth = self.growth
        return RoadSegment(
            start=growth.origin,
            end=growth.end,
            direction=growth.direction,
            length=growth.length,
        )


class FrontierJunctionFinder(CandidateFinder[Cell, SegmentPlan]):
    """Yields uniformly random frontier junctions until the frontier empties or the cap is hit."""

    def find_candidates(self, context: GrowerContext) -> Iterable[Cell]:
        frontier = context.layout.frontier
        while context.can_grow_more():
            yield frontier[context.rng.next_int(0, len(frontier))]

    def on_failure(self, context: GrowerContext, candidate: Cell) -> None:
        context.layout.retire_junction(candidate)
        logger.debug(
            "Retired dead-end junction %s; %d left on frontier",
            candidate.to_tuple(),
            len(context.layout.frontier),
        )


class StraightSegmentPlanner(GeometryPlanner[Cell, SegmentPlan]):
    """Tries the four directions in random order until one grows far enough."""

    def __init__(self, segment_grower: SegmentGrower) -> None:
        self.segment_grower = segment_grower

    def plan(self, context: GrowerContext, candidate: Cell) -> Optional[SegmentPlan]:
        directions: List[Direction] = list(CARDINAL_DIRECTIONS)
        context.rng.shuffle(directions)
        occupancy = context.layout.occupancy
        for direction in directions:
            requested_length = context.config.straight_length.sample(context.rng)
            growth = self.segment_grower.grow(occupancy, candidate, direction, requested_length)
            if self.segment_grower.is_accepted(growth):
                return SegmentPlan(growth)
        return None


class SegmentApplier(GrowerApplier[Cell, SegmentPlan]):
    """Registers accepted segments and their end junctions."""

    def __init__(self) -> None:
        self.created = 0

    def apply(self, context: GrowerContext, candidate: Cell, plan: SegmentPlan) -> None:
        context.layout.register_segment(plan.to_segment())
        self.created += 1

    def finalize(self, context: GrowerContext) -> int:
        return self.created


def run_junction_frontier_grower(context: GrowerContext) -> int:
    """Grow straight segments from the frontier; returns the number of segments created."""
    grower = RoadGrower(
        name="junction_frontier",
        candidate_finder=FrontierJunctionFinder(),
        geometry_planner=StraightSegmentPlanner(SegmentGrower(context.config)),
        applier=SegmentApplier(),
    )
    return grower.run(context)
