import logging
from dataclasses import dataclass

import numpy as np
import pygame

from pcgnoise.common import Sampler
from pcgnoise.curves import bias, ridge, shaped, smoothstep
from pcgnoise.fractal import fractal
from pcgnoise.grid import GridStats, grid_stats, sample_grid, to_gray8
from pcgnoise.perlin import perlin2d

logger = logging.getLogger(__name__)


@dataclass
class RenderConfig:
    width: int = 256
    height: int = 256
    period: float = 50.0
    seed: int = 88
    octaves: int = 6
    persistence: float = 0.5
    lacunarity: float = 2.0
    edge0: float = 0.0
    edge1: float = 0.95
    bias: float = 0.1
    output: str = "perlin_noise.png"


def build_sampler(cfg: RenderConfig) -> Sampler:
    """Ridged fBm, then smoothstep and bias on the combined value."""
    base = fractal(perlin2d(cfg.seed), cfg.octaves, cfg.persistence, cfg.lacunarity, [ridge])
    return shaped(base, smoothstep(cfg.edge0, cfg.edge1), bias(cfg.bias))


def render(cfg: RenderConfig) -> tuple[np.ndarray, GridStats]:
    values = sample_grid(build_sampler(cfg), cfg.width, cfg.height, cfg.period)
    stats = grid_stats(values)
    logger.info("vMin: %r vMax: %r", stats.minimum, stats.maximum)
    return values, stats


def save_png(values: np.ndarray, path: str) -> None:
    gray = to_gray8(values)
    # surfarray is indexed [x, y]; grids are [row, col]
    rgb = np.repeat(gray.T[:, :, None], 3, axis=2)
    surface = pygame.surfarray.make_surface(rgb)
    pygame.image.save(surface, path)
    logger.info("wrote %dx%d image to %s", gray.shape[1], gray.shape[0], path)
