import pytest

from orthodromic import ConvergenceError, DistanceResult, DomainFault


def test_distance_result_success():
    result = DistanceResult.success(12.5)
    assert result.ok
    assert result.value == 12.5
    assert result.error is None
    assert result.unwrap() == 12.5
    assert result.to_sentinel() == 12.5
    assert repr(result) == '<DistanceResult(value=12.5)>'


def test_distance_result_zero_is_success():
    result = DistanceResult.success(0.)
    assert result.ok
    assert result.to_sentinel() == 0.


def test_distance_result_failure():
    error = ConvergenceError('no convergence', iterations=100)
    result = DistanceResult.failure(error)
    assert not result.ok
    assert result.value is None
    assert result.error is error
    assert result.to_sentinel() == -1.

    with pytest.raises(ConvergenceError):
        result.unwrap()

    assert 'ConvergenceError' in repr(result)


def test_distance_result_requires_exactly_one():
    with pytest.raises(ValueError):
        DistanceResult()

    with pytest.raises(ValueError):
        DistanceResult(1., DomainFault('bad'))


def test_distance_result_eq():
    assert DistanceResult.success(1.) == DistanceResult.success(1.)
    assert DistanceResult.success(1.) != DistanceResult.success(2.)
    assert DistanceResult.success(1.) != 1.

    error = DomainFault('bad')
    assert DistanceResult.failure(error) == DistanceResult.failure(error)
    assert DistanceResult.failure(error) != DistanceResult.failure(DomainFault('bad'))


def test_distance_result_immutable():
    result = DistanceResult.success(1.)
    with pytest.raises(AttributeError):
        result.value = 2.

    with pytest.raises(AttributeError):
        result.error = DomainFault('bad')

    assert result.value == 1.
    assert result.ok
