# 단일 출발지 -> 단일 도착지 최단 경로 (Dijkstra, label-setting)
import heapq
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from app.algorithms.graph_builder import Graph
from app.core.exceptions import RouteNotFoundException, StationNotFoundException

logger = logging.getLogger(__name__)

INFINITY = float("inf")


@dataclass
class ShortestPathTree:
    distances: Dict[int, float]
    predecessors: Dict[int, Optional[int]]
    settled: Set[int] = field(default_factory=set)

    def distance_to(self, station_id: int) -> float:
        return self.distances.get(station_id, INFINITY)


class DijkstraEngine:
    """
    binary heap(heapq) 기반 Dijkstra

    동일한 거리의 후보가 여러 개일 때 선택 순서는 heap 튜플 비교(station_id)에 따름
    => 가중치가 같은 경로가 여러 개면 반환되는 경로는 구현에 따라 달라질 수 있음
    """

    def find_path(
        self, graph: Graph, source_id: int, destination_id: int
    ) -> ShortestPathTree:
        """
        최단 거리 탐색 (도착역이 확정되면 조기 종료)

        Raises:
            StationNotFoundException: 그래프에 없는 역
        """
        for station_id in (source_id, destination_id):
            if station_id not in graph:
                raise StationNotFoundException(f"역을 찾을 수 없습니다: {station_id}")

        distances: Dict[int, float] = {station_id: INFINITY for station_id in graph}
        predecessors: Dict[int, Optional[int]] = {station_id: None for station_id in graph}
        settled: Set[int] = set()

        distances[source_id] = 0
        # (tentative distance, station_id) => 갱신 시 중복 push, pop 시 stale 항목 skip
        frontier: List[Tuple[float, int]] = [(0, source_id)]

        while frontier:
            current_dist, current_id = heapq.heappop(frontier)

            if current_id in settled:
                continue
            settled.add(current_id)

            if current_id == destination_id:
                break

            for edge in graph[current_id]:
                candidate = current_dist + edge.weight
                if candidate < distances[edge.to_id]:
                    distances[edge.to_id] = candidate
                    predecessors[edge.to_id] = current_id
                    heapq.heappush(frontier, (candidate, edge.to_id))

        logger.debug(
            f"탐색 완료: {source_id} → {destination_id}, 확정된 역 {len(settled)}개, "
            f"거리={distances[destination_id]}"
        )
        return ShortestPathTree(distances, predecessors, settled)

    def reconstruct_path(
        self, tree: ShortestPathTree, source_id: int, destination_id: int
    ) -> List[int]:
        """
        도착역 -> 출발역 방향으로 predecessor를 따라가며 경로 복원

        Raises:
            RouteNotFoundException: 도착역에 도달할 수 없을 때
        """
        if destination_id != source_id and tree.predecessors.get(destination_id) is None:
            raise RouteNotFoundException(
                f"{source_id}에서 {destination_id}까지 경로를 찾을 수 없습니다"
            )

        path: List[int] = []
        current: Optional[int] = destination_id
        while current is not None:
            path.append(current)
            current = tree.predecessors.get(current)
        path.reverse()

        # predecessor 체인이 출발역에서 끝나지 않으면 불완전한 경로
        if path[0] != source_id:
            raise RouteNotFoundException(
                f"{source_id}에서 {destination_id}까지 경로를 찾을 수 없습니다"
            )
        return path

    def shortest_path(
        self, graph: Graph, source_id: int, destination_id: int
    ) -> Tuple[List[int], float]:
        """탐색 + 경로 복원 => (경로, 총 가중치)"""
        tree = self.find_path(graph, source_id, destination_id)
        path = self.reconstruct_path(tree, source_id, destination_id)
        return path, tree.distance_to(destination_id)
