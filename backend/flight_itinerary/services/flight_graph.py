"""
Flight graph: edge model and directed multigraph construction.

Each submitted [origin, destination] pair becomes a FlightPath and then one
directed edge in a networkx MultiDiGraph keyed by airport code. Parallel
edges are kept so repeated legs count towards the node degrees.
"""
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import networkx as nx


@dataclass(frozen=True)
class FlightPath:
    """A single directed leg between two airports."""
    origin: str
    destination: str

    @classmethod
    def from_pair(cls, pair: Sequence[str]) -> "FlightPath":
        origin, destination = pair
        return cls(origin=origin, destination=destination)

    @property
    def is_round_trip(self) -> bool:
        # same airport at both ends, whatever the casing
        return self.origin.lower() == self.destination.lower()


@dataclass(frozen=True)
class NodeDegree:
    airport: str
    out_degree: int
    in_degree: int

    @property
    def diff(self) -> int:
        return self.out_degree - self.in_degree


def build_flight_graph(flight_paths: Iterable[FlightPath]) -> nx.MultiDiGraph:
    """
    Build the directed multigraph of the submitted legs.

    Nodes are airport codes as given (case-sensitive); nodes are kept in order
    of first appearance, so iteration is stable for identical input.
    """
    graph = nx.MultiDiGraph()
    for path in flight_paths:
        graph.add_edge(path.origin, path.destination)
    return graph


def node_degrees(graph: nx.MultiDiGraph) -> list[NodeDegree]:
    """Out/in degree for every airport in the graph, in insertion order."""
    return [
        NodeDegree(
            airport=node,
            out_degree=graph.out_degree(node),
            in_degree=graph.in_degree(node),
        )
        for node in graph.nodes
    ]
