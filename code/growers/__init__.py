from .junction_frontier import run_junction_frontier_grower
from .segment_grower import SegmentGrower, grow_straight_segment

__all__ = [
    "run_junction_frontier_grower",
    "SegmentGrower",
    "grow_straight_segment",
]
