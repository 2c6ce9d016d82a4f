"""Metrics over live-cell snapshots."""

from sparse_life.metrics.spatial import (
    adjacency_graph,
    bounding_box,
    centroid,
    cluster_count,
    population,
)

__all__ = [
    "adjacency_graph",
    "bounding_box",
    "centroid",
    "cluster_count",
    "population",
]
