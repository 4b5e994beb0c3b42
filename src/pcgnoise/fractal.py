from dataclasses import dataclass
from typing import Iterable

import numpy as np

from pcgnoise.common import Curve, Sampler, sample_array


@dataclass(frozen=True)
class Fractal2D:
    """
    Sums octaves of ``base`` at growing frequency and shrinking amplitude.

    Each octave value goes through ``curves`` in order before it is weighted,
    and the sum is divided by the total weight, so the output stays in the
    range the shaped octaves live in. ``octaves`` must be at least 1; with
    none there is no weight and the result is NaN.
    """
    base: Sampler
    octaves: int
    persistence: float
    lacunarity: float
    curves: tuple[Curve, ...] = ()

    def __call__(self, x: float, y: float) -> float:
        freq = 1.0
        amp = 1.0
        total = 0.0
        weight = 0.0
        for _ in range(self.octaves):
            v = self.base(x * freq, y * freq)
            for fn in self.curves:
                v = fn(v)
            total += v * amp
            weight += amp
            freq *= self.lacunarity
            amp *= self.persistence
        if weight == 0.0:
            return float("nan")
        return total / weight

    def sample(self, xs, ys) -> np.ndarray:
        xs = np.asarray(xs, dtype=np.float64)
        ys = np.asarray(ys, dtype=np.float64)
        freq = 1.0
        amp = 1.0
        total = np.zeros(np.broadcast_shapes(xs.shape, ys.shape), dtype=np.float64)
        weight = 0.0
        for _ in range(self.octaves):
            v = sample_array(self.base, xs * freq, ys * freq)
            for fn in self.curves:
                v = fn(v)
            total += v * amp
            weight += amp
            freq *= self.lacunarity
            amp *= self.persistence
        with np.errstate(invalid="ignore"):
            return total / np.float64(weight)


def fractal(base: Sampler, octaves: int, persistence: float, lacunarity: float,
            curves: Iterable[Curve] = ()) -> Fractal2D:
    return Fractal2D(base, octaves, persistence, lacunarity, tuple(curves))
