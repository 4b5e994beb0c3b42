"""
PCG-style integer hashes (Jarzynski & Olano, "Hash Functions for GPU Rendering").

Every function maps unsigned 32-bit words to unsigned 32-bit words with all
arithmetic wrapping modulo 2**32. The ``*_array`` variants do the same on
numpy arrays and agree bit for bit with the scalar ones.
"""
import numpy as np

from pcgnoise.common import U32_MASK

MULTIPLIER = 1664525
INCREMENT = 1013904223


def hash4(x: int, y: int, z: int, w: int) -> tuple[int, int, int, int]:
    x = (x * MULTIPLIER + INCREMENT) & U32_MASK
    y = (y * MULTIPLIER + INCREMENT) & U32_MASK
    z = (z * MULTIPLIER + INCREMENT) & U32_MASK
    w = (w * MULTIPLIER + INCREMENT) & U32_MASK

    x = (x + y * w) & U32_MASK
    y = (y + z * x) & U32_MASK
    z = (z + x * y) & U32_MASK
    w = (w + y * z) & U32_MASK

    x ^= x >> 16
    y ^= y >> 16
    z ^= z >> 16
    w ^= w >> 16

    x = (x + y * w) & U32_MASK
    y = (y + z * x) & U32_MASK
    z = (z + x * y) & U32_MASK
    w = (w + y * z) & U32_MASK
    return x, y, z, w


def hash3(x: int, y: int, z: int) -> tuple[int, int, int]:
    x = (x * MULTIPLIER + INCREMENT) & U32_MASK
    y = (y * MULTIPLIER + INCREMENT) & U32_MASK
    z = (z * MULTIPLIER + INCREMENT) & U32_MASK

    x = (x + y * z) & U32_MASK
    y = (y + z * x) & U32_MASK
    z = (z + x * y) & U32_MASK

    x ^= x >> 16
    y ^= y >> 16
    z ^= z >> 16

    x = (x + y * z) & U32_MASK
    y = (y + z * x) & U32_MASK
    z = (z + x * y) & U32_MASK
    return x, y, z


def hash2(x: int, y: int) -> tuple[int, int]:
    hx, hy, _ = hash3(x, y, 0)
    return hx, hy


def hash1(x: int) -> int:
    return hash2(x, 0)[0]


def _as_u32(a) -> np.ndarray:
    # int64 -> uint32 keeps the low 32 bits, same as masking a python int
    return np.asarray(a).astype(np.int64).astype(np.uint32)


def hash3_array(x, y, z) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    x, y, z = np.broadcast_arrays(_as_u32(x), _as_u32(y), _as_u32(z))
    m = np.uint32(MULTIPLIER)
    c = np.uint32(INCREMENT)
    s = np.uint32(16)
    with np.errstate(over="ignore"):
        x = x * m + c
        y = y * m + c
        z = z * m + c

        x = x + y * z
        y = y + z * x
        z = z + x * y

        x = x ^ (x >> s)
        y = y ^ (y >> s)
        z = z ^ (z >> s)

        x = x + y * z
        y = y + z * x
        z = z + x * y
    return x, y, z


def hash4_array(x, y, z, w) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    x, y, z, w = np.broadcast_arrays(_as_u32(x), _as_u32(y), _as_u32(z), _as_u32(w))
    m = np.uint32(MULTIPLIER)
    c = np.uint32(INCREMENT)
    s = np.uint32(16)
    with np.errstate(over="ignore"):
        x = x * m + c
        y = y * m + c
        z = z * m + c
        w = w * m + c

        x = x + y * w
        y = y + z * x
        z = z + x * y
        w = w + y * z

        x = x ^ (x >> s)
        y = y ^ (y >> s)
        z = z ^ (z >> s)
        w = w ^ (w >> s)

        x = x + y * w
        y = y + z * x
        z = z + x * y
        w = w + y * z
    return x, y, z, w
