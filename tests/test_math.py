import pytest

from bezchain.core.math import evaluate, parameter_values, sample_group, within_tolerance


@pytest.mark.parametrize("t", [0.0, 0.25, 0.5, 1.0])
def test_single_coordinate_is_constant(t):
    assert evaluate([7.5], t) == 7.5


@pytest.mark.parametrize("t", [0.0, 0.3, 0.5, 0.9, 1.0])
def test_two_coordinates_interpolate_linearly(t):
    a, b = -2.0, 6.0
    assert evaluate([a, b], t) == pytest.approx(a + t * (b - a))


def test_cubic_matches_bernstein_form():
    c = [0.0, 3.0, -1.0, 4.0]
    t = 0.37
    u = 1.0 - t
    expected = u**3 * c[0] + 3 * u**2 * t * c[1] + 3 * u * t**2 * c[2] + t**3 * c[3]
    assert evaluate(c, t) == pytest.approx(expected)


def test_empty_input_is_rejected():
    with pytest.raises(ValueError):
        evaluate([], 0.5)
    with pytest.raises(ValueError):
        sample_group([], 16)


def test_parameter_values_cover_closed_interval():
    ts = parameter_values(16)
    assert len(ts) == 17
    assert ts[0] == 0.0
    assert ts[-1] == 1.0
    assert ts[8] == pytest.approx(0.5)
    with pytest.raises(ValueError):
        parameter_values(0)


def test_sample_group_reproduces_endpoints():
    pts = [(1.0, 2.0), (5.0, -3.0), (8.0, 8.0), (12.0, 0.5)]
    samples = sample_group(pts, 16)
    assert len(samples) == 17
    assert samples[0] == pytest.approx(pts[0])
    assert samples[-1] == pytest.approx(pts[-1])


def test_sample_group_degenerate_polygons():
    assert sample_group([(3.0, 4.0)], 4) == [(3.0, 4.0)] * 5
    line = sample_group([(0.0, 0.0), (4.0, 8.0)], 4)
    assert line[2] == pytest.approx((2.0, 4.0))


def test_within_tolerance_is_a_box():
    assert within_tolerance((0.0, 0.0), (10.0, 10.0), 10.0)
    assert not within_tolerance((0.0, 0.0), (10.5, 0.0), 10.0)
    assert not within_tolerance((0.0, 0.0), (0.0, -10.5), 10.0)
