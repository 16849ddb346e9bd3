from __future__ import annotations

from typing import Generic, Iterable, Optional, TypeVar

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from grower_context import GrowerContext


C = TypeVar("C")
P = TypeVar("P")


class CandidateFinder(Generic[C, P]):
    """Locate potential growth opportunities in the current road state."""

    def find_candidates(self, context: GrowerContext) -> Iterable[C]:
        raise NotImplementedError

    def on_failure(self, context: GrowerContext, candidate: C) -> None:
        """Hook called when no plan could be produced for the candidate."""
        return None


class GeometryPlanner(Generic[C, P]):
    """Validate a candidate and compute geometry to add to the road layout."""

    def plan(self, context: GrowerContext, candidate: C) -> Optional[P]:
        raise NotImplementedError


class GrowerApplier(Generic[C, P]):
    """Commit a planned geometry change to the road state."""

    def apply(self, context: GrowerContext, candidate: C, plan: P) -> None:
        raise NotImplementedError

    def finalize(self, context: GrowerContext) -> int:
        """Perform any final bookkeeping; return the grower's reported result."""
        return 0


class RoadGrower(Generic[C, P]):
    """Coordinates finder, planner, and applier to execute a grower."""

    def __init__(
        self,
        name: str,
        candidate_finder: CandidateFinder[C, P],
        geometry_planner: GeometryPlanner[C, P],
        applier: GrowerApplier[C, P],
    ) -> None:
        self.name = name
        self.candidate_finder = candidate_finder
        self.geometry_planner = geometry_planner
        self.applier = applier

    def run(self, context: GrowerContext) -> int:
        """Execute the grower pipeline and return the aggregate result."""
        for candidate in self.candidate_finder.find_candidates(context):
            plan = self.geometry_planner.plan(context, candidate)
            if plan is None:
                self.candidate_finder.on_failure(context, candidate)
                continue
            self.applier.apply(context, candidate, plan)
        return self.applier.finalize(context)
