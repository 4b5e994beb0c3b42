import math

import numpy as np
import pytest

import pcgnoise.perlin as perlin
from pcgnoise.perlin import GRADIENTS, Perlin2D, fade, graddot2, lerp, perlin2d


def test_fade_endpoints():
    assert fade(0.0) == 0.0
    assert fade(1.0) == 1.0
    assert fade(0.5) == pytest.approx(0.5)


def test_lerp_basic():
    assert lerp(0.0, 10.0, 0.0) == 0.0
    assert lerp(0.0, 10.0, 0.25) == 2.5
    assert lerp(10.0, 20.0, 1.5) == 25.0


def test_graddot_covers_all_gradients():
    seen = {}
    for gx in range(2000):
        h = perlin.hash3(7, gx, 3)[0] & 7
        seen.setdefault(h, gx)
        if len(seen) == 8:
            break
    assert len(seen) == 8

    fx, fy = 0.3, 0.7
    for h, gx in seen.items():
        grad = GRADIENTS[h]
        assert graddot2(7, gx, 3, fx, fy) == pytest.approx(grad[0] * fx + grad[1] * fy)


def test_graddot_unreachable_selector_is_an_assertion(monkeypatch):
    class Rogue(int):
        def __and__(self, other):
            return 8

    monkeypatch.setattr(perlin, "hash3", lambda *args: (Rogue(0), 0, 0))
    with pytest.raises(AssertionError):
        graddot2(0, 0, 0, 0.5, 0.5)


def test_perlin_is_deterministic():
    a = perlin2d(88)
    b = perlin2d(88)
    for x, y in [(0.1, 0.2), (12.75, -3.5), (-100.01, 55.5)]:
        assert a(x, y) == b(x, y)
        assert a(x, y) == a(x, y)


def test_seed_changes_field():
    a = perlin2d(1)
    b = perlin2d(2)
    pts = [(i * 0.37 + 0.1, i * 0.53 + 0.2) for i in range(100)]
    assert sum(abs(a(x, y) - b(x, y)) for x, y in pts) > 0.0


@pytest.mark.parametrize("seed", [0, 1, 88, 0xFFFFFFFF])
def test_lattice_points_are_exactly_half(seed):
    p = perlin2d(seed)
    for ix in range(-5, 6):
        for iy in range(-5, 6):
            assert p(ix, iy) == 0.5
            assert p(float(ix), float(iy)) == 0.5

    xs, ys = np.meshgrid(np.arange(-5, 6), np.arange(-5, 6))
    assert np.all(p.sample(xs, ys) == 0.5)


def test_range_over_random_points():
    rng = np.random.default_rng(1234)
    xs = rng.uniform(-1000.0, 1000.0, 10_000)
    ys = rng.uniform(-1000.0, 1000.0, 10_000)
    p = perlin2d(31337)

    values = [p(float(x), float(y)) for x, y in zip(xs, ys)]
    assert min(values) >= 0.0
    assert max(values) <= 1.0

    arr = p.sample(xs, ys)
    assert arr.min() >= 0.0
    assert arr.max() <= 1.0


def test_array_sample_matches_scalar():
    rng = np.random.default_rng(5)
    xs = rng.uniform(-50.0, 50.0, 500)
    ys = rng.uniform(-50.0, 50.0, 500)
    p = perlin2d(88)
    expected = np.array([p(float(x), float(y)) for x, y in zip(xs, ys)])
    np.testing.assert_allclose(p.sample(xs, ys), expected, rtol=0, atol=1e-12)


def test_continuous_across_cell_edges():
    p = perlin2d(3)
    for edge in (1.0, -2.0, 17.0):
        assert p(edge - 1e-9, 0.3) == pytest.approx(p(edge + 1e-9, 0.3), abs=1e-6)
        assert p(0.3, edge - 1e-9) == pytest.approx(p(0.3, edge + 1e-9), abs=1e-6)


def test_factory_wraps_seed():
    assert perlin2d(-1) == Perlin2D(0xFFFFFFFF)
    assert perlin2d(-1)(0.4, 0.6) == Perlin2D(0xFFFFFFFF)(0.4, 0.6)


def test_not_constant():
    p = perlin2d(10)
    values = {round(p(x / 7.3, x / 3.1), 9) for x in range(1, 50)}
    assert len(values) > 10
    assert not math.isnan(p(0.5, 0.5))
