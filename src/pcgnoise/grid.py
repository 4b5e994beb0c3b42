import logging
from dataclasses import dataclass

import numpy as np

from pcgnoise.common import Sampler, Vec2, sample_array

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridStats:
    minimum: float
    maximum: float
    mean: float


def coordinate_grid(width: int, height: int, period: float, origin: Vec2 = (0.0, 0.0)) -> tuple[np.ndarray, np.ndarray]:
    """
    Sample coordinates for a width x height raster.

    Both arrays have shape (height, width); pixel (i, j) maps to
    (origin_x + i / period, origin_y + j / period).
    """
    ox, oy = origin
    ii, jj = np.meshgrid(np.arange(width, dtype=np.float64), np.arange(height, dtype=np.float64))
    return ox + ii / period, oy + jj / period


def sample_grid(sampler: Sampler, width: int, height: int, period: float, origin: Vec2 = (0.0, 0.0)) -> np.ndarray:
    xs, ys = coordinate_grid(width, height, period, origin)
    values = np.asarray(sample_array(sampler, xs, ys), dtype=np.float64)
    logger.debug("sampled %dx%d grid (period=%s, origin=%s)", width, height, period, origin)
    return values


def grid_stats(values: np.ndarray) -> GridStats:
    return GridStats(
        minimum=float(np.min(values)),
        maximum=float(np.max(values)),
        mean=float(np.mean(values)),
    )


def to_gray8(values: np.ndarray) -> np.ndarray:
    """Map [0, 1] values to 8-bit intensities, clamping anything that drifted outside."""
    v = np.clip(np.asarray(values, dtype=np.float64), 0.0, 1.0)
    return (v * 255).astype(np.uint8)
