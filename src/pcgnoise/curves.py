"""
Shaping curves for remapping noise values.

All curves take a value (a float or an ndarray) and return one of the same
kind. ``turbulence`` and ``ridge`` are plain functions; ``smoothstep``,
``bias`` and ``gain`` build a curve from their parameters.
"""
from dataclasses import dataclass

import numpy as np

from pcgnoise.common import Curve, Sampler, sample_array
from pcgnoise.perlin import fade, lerp

__all__ = [
    "fade", "lerp", "turbulence", "ridge",
    "SmoothStep", "Bias", "Gain", "smoothstep", "bias", "gain",
    "chain", "Shaped", "shaped",
]


def turbulence(v):
    return abs(v * 2 - 1)


def ridge(v):
    v = 1 - abs(v * 2 - 1)
    return v * v


@dataclass(frozen=True)
class SmoothStep:
    edge0: float
    edge1: float

    def __call__(self, x):
        if np.ndim(x) == 0:
            if x < self.edge0:
                return 0.0
            elif x > self.edge1 or self.edge0 == self.edge1:
                return 1.0
            t = (x - self.edge0) / (self.edge1 - self.edge0)
            return t * t * (3 - 2 * t)
        if self.edge0 == self.edge1:
            # zero-width ramp: hard step at the edge
            return np.where(np.asarray(x) < self.edge0, 0.0, 1.0)
        t = np.clip((x - self.edge0) / (self.edge1 - self.edge0), 0.0, 1.0)
        return t * t * (3 - 2 * t)


@dataclass(frozen=True)
class Bias:
    """b = 0.5: no change, b < 0.5: towards 0, b > 0.5: towards 1. b must be inside (0, 1)."""
    b: float

    def __call__(self, v):
        return v / ((1 / self.b - 2) * (1 - v) + 1)


@dataclass(frozen=True)
class Gain:
    """Contrast around 0.5. g = 0.5: no change, g < 0.5: more contrast, g > 0.5: less."""
    g: float

    def __call__(self, v):
        lower = Bias(self.g)
        upper = Bias(1 - self.g)
        if np.ndim(v) == 0:
            if v < 0.5:
                return lower(v * 2) / 2
            return upper(v * 2 - 1) / 2 + 0.5
        v = np.asarray(v, dtype=np.float64)
        # both halves are evaluated; the discarded one may divide by zero
        with np.errstate(divide="ignore", invalid="ignore"):
            return np.where(v < 0.5, lower(v * 2) / 2, upper(v * 2 - 1) / 2 + 0.5)


def smoothstep(edge0: float, edge1: float) -> SmoothStep:
    if edge0 > edge1:
        edge0, edge1 = edge1, edge0
    return SmoothStep(edge0, edge1)


def bias(b: float) -> Bias:
    return Bias(b)


def gain(g: float) -> Gain:
    return Gain(g)


def chain(*curves: Curve) -> Curve:
    """Compose curves left to right: chain(f, g)(v) == g(f(v))."""
    def apply(v):
        for fn in curves:
            v = fn(v)
        return v
    return apply


@dataclass(frozen=True)
class Shaped:
    base: Sampler
    curves: tuple[Curve, ...]

    def __call__(self, x: float, y: float) -> float:
        v = self.base(x, y)
        for fn in self.curves:
            v = fn(v)
        return v

    def sample(self, xs, ys) -> np.ndarray:
        v = sample_array(self.base, xs, ys)
        for fn in self.curves:
            v = fn(v)
        return v


def shaped(base: Sampler, *curves: Curve) -> Shaped:
    return Shaped(base, tuple(curves))
