from typing import Callable, Protocol, TypeAlias

import numpy as np

Vec2: TypeAlias = tuple[float, float]
Curve: TypeAlias = Callable[[float], float]

U32_MASK = 0xFFFFFFFF


class Sampler(Protocol):
    def __call__(self, x: float, y: float) -> float:
        ...


def sample_array(sampler: Sampler, xs, ys) -> np.ndarray:
    """Evaluate any sampler over broadcastable coordinate arrays."""
    fn = getattr(sampler, "sample", None)
    if fn is not None:
        return fn(xs, ys)
    return np.vectorize(sampler, otypes=[np.float64])(xs, ys)
