"""Spatial metrics over a live-cell snapshot: size, extent, centre, clusters."""

from __future__ import annotations

from collections.abc import Collection

import networkx as nx
import numpy as np

from sparse_life.config.constants import NEIGHBOR_OFFSETS
from sparse_life.domain.cell import Cell


def population(cells: Collection[Cell]) -> int:
    return len(cells)


def bounding_box(cells: Collection[Cell]) -> tuple[int, int, int, int] | None:
    """Return ``(min_x, min_y, max_x, max_y)``, or None for an empty snapshot."""
    if not cells:
        return None
    xs = [cell.x for cell in cells]
    ys = [cell.y for cell in cells]
    return min(xs), min(ys), max(xs), max(ys)


def centroid(cells: Collection[Cell]) -> np.ndarray | None:
    """Mean ``(x, y)`` of the live cells as a float array, or None when empty."""
    if not cells:
        return None
    coords = np.array([(cell.x, cell.y) for cell in cells], dtype=float)
    return coords.mean(axis=0)


def adjacency_graph(cells: Collection[Cell]) -> nx.Graph:
    """Graph with one node per live cell and an edge between Moore neighbors."""
    g = nx.Graph()
    g.add_nodes_from(cells)
    for cell in cells:
        for dx, dy in NEIGHBOR_OFFSETS:
            other = Cell(cell.x + dx, cell.y + dy)
            if other in g:
                g.add_edge(cell, other)
    return g


def cluster_count(cells: Collection[Cell]) -> int:
    """Number of 8-connected components among live cells."""
    return nx.number_connected_components(adjacency_graph(cells))
