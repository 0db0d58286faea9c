"""
그래프 생성, Dijkstra 최단 경로, 요금 계산
"""

from app.algorithms.graph_builder import Edge, Graph, build_graph
from app.algorithms.dijkstra import DijkstraEngine, ShortestPathTree
from app.algorithms.fare_calculator import FareCalculator, calculate_fare

__all__ = [
    "Edge",
    "Graph",
    "build_graph",
    "DijkstraEngine",
    "ShortestPathTree",
    "FareCalculator",
    "calculate_fare",
]
