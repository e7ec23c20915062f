# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
Weighted k-means refinement of a color palette.

Clusters the distinct colors of an image, each weighted by its pixel
count, starting from a set of seed centroids (normally Wu's boxes).
Distances are squared Euclidean distances in RGB.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
from numpy.typing import NDArray

from monet.hct.color_utils import argb_from_rgb, rgb_from_argb_array, round_half_up

logger = logging.getLogger(__name__)

# Distinct colors per distance-matrix block
_CHUNK_SIZE = 8192


@dataclass(frozen=True, slots=True)
class QuantizerConfig:
    """
    Tuning for the k-means refinement.

    Attributes:
        max_iterations: Hard cap on refinement passes
        min_movement_distance: A color only changes cluster when its
            distance improves by more than this (RGB units)
        seed: Random seed for the initial assignment
    """
    # Refinement always terminates after this many passes
    max_iterations: int = 10
    min_movement_distance: float = 3.0
    seed: int = 0x42688

    def __post_init__(self) -> None:
        if self.max_iterations < 1:
            raise ValueError(f"max_iterations must be >= 1, got {self.max_iterations}")
        if self.min_movement_distance < 0.0:
            raise ValueError(f"min_movement_distance must be >= 0, got {self.min_movement_distance}")


class QuantizerWsmeans:
    """Weighted k-means over distinct colors."""

    def __init__(self, config: Optional[QuantizerConfig] = None) -> None:
        self.config = config or QuantizerConfig()

    def quantize(
        self,
        pixels: NDArray[np.integer],
        starting_clusters: Sequence[int],
        max_colors: int,
    ) -> dict[int, int]:
        """
        Refine clusters over the given pixels.

        Args:
            pixels: 1-D array of opaque ARGB ints
            starting_clusters: Initial ARGB centroids; random colors are
                used when empty
            max_colors: Maximum number of clusters

        Returns:
            Dict of ARGB centroid → pixel count. Clusters that converge to
            the same color are merged, so counts always sum to the number
            of pixels.
        """
        colors, counts = np.unique(np.asarray(pixels, dtype=np.int64), return_counts=True)
        if len(colors) == 0:
            return {}
        points = rgb_from_argb_array(colors).astype(np.float64)
        weights = counts.astype(np.float64)
        rng = np.random.default_rng(self.config.seed)

        cluster_count = min(max_colors, len(points))
        if len(starting_clusters) > 0:
            cluster_count = min(cluster_count, len(starting_clusters))
            clusters = rgb_from_argb_array(np.asarray(starting_clusters[:cluster_count], dtype=np.int64))
            clusters = clusters.astype(np.float64)
        else:
            clusters = rng.random((cluster_count, 3)) * 255.0

        assignments = rng.integers(cluster_count, size=len(points))
        populations = np.zeros(cluster_count)

        for iteration in range(self.config.max_iterations):
            moved = self._reassign(points, clusters, assignments)
            if moved == 0 and iteration != 0:
                logger.debug("k-means converged after %d iterations", iteration)
                break
            clusters, populations = self._recenter(points, weights, assignments, cluster_count)

        result: dict[int, int] = {}
        for centroid, population in zip(clusters, populations):
            if population == 0.0:
                continue
            r, g, b = (round_half_up(float(c)) for c in centroid)
            argb = argb_from_rgb(r, g, b)
            result[argb] = result.get(argb, 0) + int(population)
        return result

    def _reassign(
        self,
        points: NDArray[np.float64],
        clusters: NDArray[np.float64],
        assignments: NDArray[np.intp],
    ) -> int:
        """Move every point to its nearest cluster in place; returns how many moved."""
        moved = 0
        for start in range(0, len(points), _CHUNK_SIZE):
            chunk = points[start:start + _CHUNK_SIZE]
            current = assignments[start:start + _CHUNK_SIZE]

            # (points, clusters) matrix of squared distances
            distances = np.sum((chunk[:, None, :] - clusters[None, :, :]) ** 2, axis=2)
            rows = np.arange(len(chunk))
            previous = distances[rows, current]
            nearest = np.argmin(distances, axis=1)
            best = distances[rows, nearest]

            change = np.abs(np.sqrt(best) - np.sqrt(previous))
            moving = (best < previous) & (change > self.config.min_movement_distance)
            current[moving] = nearest[moving]
            moved += int(np.count_nonzero(moving))
        return moved

    @staticmethod
    def _recenter(
        points: NDArray[np.float64],
        weights: NDArray[np.float64],
        assignments: NDArray[np.intp],
        cluster_count: int,
    ) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        populations = np.bincount(assignments, weights=weights, minlength=cluster_count)
        sums = np.stack(
            [np.bincount(assignments, weights=weights * points[:, c], minlength=cluster_count) for c in range(3)],
            axis=1,
        )
        clusters = np.zeros((cluster_count, 3))
        np.divide(sums, populations[:, None], out=clusters, where=populations[:, None] > 0)
        return clusters, populations
