import pytest

from sgd_polyfit.training.engines.curve_sampler_engine import CurveSamplerEngine
from sgd_polyfit.training.engines.hypothesis import hypothesis
from sgd_polyfit.utils.errors import InvalidConfiguration


def test_sample_grid_and_values():
    thetas = (0.1, -0.4, 2.0)
    curve = CurveSamplerEngine().sample(thetas, 50)

    assert len(curve) == 50
    assert [p.x for p in curve] == [i / 50 for i in range(50)]
    assert [p.y for p in curve] == [hypothesis(i / 50, thetas) for i in range(50)]


def test_sample_starts_at_zero_and_stays_below_one():
    curve = CurveSamplerEngine().sample((1.0,), 4)
    assert [p.x for p in curve] == [0.0, 0.25, 0.5, 0.75]
    assert all(p.y == 1.0 for p in curve)


def test_sample_is_deterministic():
    engine = CurveSamplerEngine()
    assert engine.sample((0.3, 0.2), 10) == engine.sample((0.3, 0.2), 10)


def test_zero_steps():
    assert CurveSamplerEngine().sample((1.0, 2.0), 0) == ()


def test_negative_steps():
    with pytest.raises(InvalidConfiguration):
        CurveSamplerEngine().sample((1.0,), -3)
