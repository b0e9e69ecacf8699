"""Road-level topology graph assembled from map-builder calls."""
from __future__ import annotations

from typing import Any, Dict, List, Tuple

import networkx as nx

from ..domain.models import CubicPolynomial, LaneId, RoadId
from ..utils.constants import NO_ROAD
from ..utils.logging import get_logger

LOG = get_logger()

GraphType = nx.MultiDiGraph


class TopologyMapBuilder:
    """Map-builder that records roads as graph nodes joined by their links.

    Edges run in driving order: ``predecessor -> road`` and
    ``road -> successor``. Links naming an id that was never added as a road
    (usually a junction id) are kept aside as dangling.
    """

    def __init__(self) -> None:
        self._graph: GraphType = nx.MultiDiGraph()
        self._links: List[Tuple[RoadId, RoadId, str]] = []

    def add_road(
        self,
        road_id: RoadId,
        name: str,
        length: float,
        junction_id: RoadId,
        predecessor: RoadId,
        successor: RoadId,
    ) -> None:
        if road_id in self._graph:
            # Sections and lanes already emitted for this id keep accumulating.
            LOG.warning("road %d added more than once; merging its records", road_id)
            self._graph.add_node(road_id, name=name, length=length, junction_id=junction_id)
        else:
            self._graph.add_node(
                road_id,
                name=name,
                length=length,
                junction_id=junction_id,
                speed_zones=[],
                sections=[],
                lanes=0,
            )
        if predecessor != NO_ROAD:
            self._links.append((predecessor, road_id, "predecessor"))
        if successor != NO_ROAD:
            self._links.append((road_id, successor, "successor"))

    def set_road_type_speed(
        self, road_id: RoadId, s: float, road_type: str, max_speed: float, unit: str
    ) -> None:
        self._graph.nodes[road_id]["speed_zones"].append(
            {"s": s, "type": road_type, "max": max_speed, "unit": unit}
        )

    def add_road_section(self, road_id: RoadId, polynomial: CubicPolynomial) -> None:
        self._graph.nodes[road_id]["sections"].append(polynomial.s)

    def add_road_section_lane(
        self,
        road_id: RoadId,
        section_index: int,
        lane_id: LaneId,
        lane_type: str,
        level: bool,
        predecessor: LaneId,
        successor: LaneId,
    ) -> None:
        self._graph.nodes[road_id]["lanes"] += 1

    def _dangling_links(self) -> List[Tuple[RoadId, RoadId, str]]:
        return [
            link for link in self._links if link[0] not in self._graph or link[1] not in self._graph
        ]

    def build_graph(self) -> GraphType:
        graph = self._graph.copy()
        for _, data in graph.nodes(data=True):
            data["speed_zones"] = [dict(zone) for zone in data["speed_zones"]]
            data["sections"] = list(data["sections"])
        for source, target, relation in self._links:
            if source in graph and target in graph:
                graph.add_edge(source, target, relation=relation)
        return graph

    def summary(self) -> Dict[str, Any]:
        graph = self.build_graph()
        return {
            "road_count": graph.number_of_nodes(),
            "section_count": sum(len(data["sections"]) for _, data in graph.nodes(data=True)),
            "lane_count": sum(data["lanes"] for _, data in graph.nodes(data=True)),
            "link_count": graph.number_of_edges(),
            "junction_road_count": sum(
                1 for _, data in graph.nodes(data=True) if data["junction_id"] != NO_ROAD
            ),
            "dangling_links": len(self._dangling_links()),
            "component_count": nx.number_weakly_connected_components(graph),
        }


__all__ = ["GraphType", "TopologyMapBuilder"]
