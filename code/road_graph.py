"""Graph view of a generated road network: junctions as nodes, segments as edges."""

from __future__ import annotations

from dataclasses import dataclass

import networkx as nx

from road_models import RoadMap


@dataclass(frozen=True)
class RoadGraphStats:
    junction_count: int
    segment_count: int
    dead_end_count: int
    branch_count: int
    component_count: int
    largest_component_size: int
    diameter: int
    cycle_count: int


def build_segment_graph(road_map: RoadMap) -> nx.Graph:
    graph = nx.Graph()
    for junction in road_map.junctions:
        graph.add_node(junction.to_tuple(), is_origin=junction == road_map.origin)

    for segment in road_map.segments:
        graph.add_edge(
            segment.start.to_tuple(),
            segment.end.to_tuple(),
            length=segment.length,
            direction=segment.direction.name,
        )
    return graph


def summarize_segment_graph(graph: nx.Graph) -> RoadGraphStats:
    degrees = dict(graph.degree())
    components = list(nx.connected_components(graph))
    largest = max(components, key=len) if components else set()

    diameter = 0
    if len(largest) >= 2:
        subgraph = graph.subgraph(largest).copy()
        try:
            diameter = int(nx.diameter(subgraph))
        except nx.NetworkXError:
            diameter = 0

    return RoadGraphStats(
        junction_count=graph.number_of_nodes(),
        segment_count=graph.number_of_edges(),
        dead_end_count=sum(1 for degree in degrees.values() if degree == 1),
        branch_count=sum(1 for degree in degrees.values() if degree >= 3),
        component_count=len(components),
        largest_component_size=len(largest),
        diameter=diameter,
        cycle_count=len(nx.cycle_basis(graph)),
    )
