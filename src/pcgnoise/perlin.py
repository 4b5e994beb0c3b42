import math
from dataclasses import dataclass

import numpy as np

from pcgnoise.common import U32_MASK, Curve
from pcgnoise.fractal import Fractal2D, fractal
from pcgnoise.hashing import hash3, hash3_array

# indexed by the low 3 bits of the lattice hash
GRADIENTS = (
    (1, 1), (1, -1), (-1, 1), (-1, -1),
    (1, 0), (-1, 0), (0, 1), (0, -1),
)
_GRAD_X = np.array([g[0] for g in GRADIENTS], dtype=np.float64)
_GRAD_Y = np.array([g[1] for g in GRADIENTS], dtype=np.float64)


def lerp(a, b, t):
    return a + t * (b - a)


def fade(t):
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def graddot2(seed: int, gridx: int, gridy: int, fracx: float, fracy: float) -> float:
    h = hash3(seed, gridx, gridy)[0] & 7
    if h == 0:
        return fracx + fracy
    elif h == 1:
        return fracx - fracy
    elif h == 2:
        return -fracx + fracy
    elif h == 3:
        return -fracx - fracy
    elif h == 4:
        return fracx
    elif h == 5:
        return -fracx
    elif h == 6:
        return fracy
    elif h == 7:
        return -fracy
    raise AssertionError(f"gradient selector out of range: {h}")


def graddot2_array(seed: int, gridx, gridy, fracx, fracy) -> np.ndarray:
    h = hash3_array(seed, gridx, gridy)[0] & np.uint32(7)
    return _GRAD_X[h] * fracx + _GRAD_Y[h] * fracy


@dataclass(frozen=True)
class Perlin2D:
    """
    Classic 2D gradient noise normalized to [0, 1].

    Lattice corners pick one of eight gradients from a hash of
    (seed, cell x, cell y); the four corner dot products are blended with the
    quintic fade curve. Integer coordinates always give exactly 0.5.
    """
    seed: int

    def __call__(self, x: float, y: float) -> float:
        gridx = math.floor(x)
        gridy = math.floor(y)
        fracx = x - gridx
        fracy = y - gridy
        fadex = fade(fracx)
        fadey = fade(fracy)

        x0 = gridx & U32_MASK
        y0 = gridy & U32_MASK
        x1 = (gridx + 1) & U32_MASK
        y1 = (gridy + 1) & U32_MASK

        dot00 = graddot2(self.seed, x0, y0, fracx, fracy)
        dot10 = graddot2(self.seed, x1, y0, fracx - 1, fracy)
        dot01 = graddot2(self.seed, x0, y1, fracx, fracy - 1)
        dot11 = graddot2(self.seed, x1, y1, fracx - 1, fracy - 1)

        value = lerp(
            lerp(dot00, dot10, fadex),
            lerp(dot01, dot11, fadex),
            fadey,
        )
        return value / 2 + 0.5

    def sample(self, xs, ys) -> np.ndarray:
        xs = np.asarray(xs, dtype=np.float64)
        ys = np.asarray(ys, dtype=np.float64)

        gx = np.floor(xs)
        gy = np.floor(ys)
        fx = xs - gx
        fy = ys - gy
        sx = fade(fx)
        sy = fade(fy)

        x0 = gx.astype(np.int64)
        y0 = gy.astype(np.int64)
        x1 = x0 + 1
        y1 = y0 + 1

        n00 = graddot2_array(self.seed, x0, y0, fx, fy)
        n10 = graddot2_array(self.seed, x1, y0, fx - 1.0, fy)
        n01 = graddot2_array(self.seed, x0, y1, fx, fy - 1.0)
        n11 = graddot2_array(self.seed, x1, y1, fx - 1.0, fy - 1.0)

        ix0 = lerp(n00, n10, sx)
        ix1 = lerp(n01, n11, sx)
        return lerp(ix0, ix1, sy) / 2 + 0.5


def perlin2d(seed: int) -> Perlin2D:
    return Perlin2D(seed & U32_MASK)


def perlin2d_fbm(seed: int, octaves: int = 6, persistence: float = 0.5, lacunarity: float = 2.0,
                 curves: tuple[Curve, ...] = ()) -> Fractal2D:
    return fractal(perlin2d(seed), octaves, persistence, lacunarity, curves)
