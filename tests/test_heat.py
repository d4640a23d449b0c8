import pytest

from coldl3.commitment_errors import HashError
from coldl3.heat import HeatCommitmentCalculator


def test_heat_commitment_calculation():
    calculator = HeatCommitmentCalculator()
    test_data = b"test_heat_data"

    commitment = calculator.calculate(test_data)
    assert len(commitment) == 32

    assert calculator.calculate(test_data) == commitment

    different = calculator.calculate(b"different_heat_data")
    assert different != commitment
    assert len(different) == 32


def test_heat_factor():
    calculator = HeatCommitmentCalculator()
    test_data = b"test_heat_factor_data"

    commitment1 = calculator.calculate(test_data)
    calculator.heat_factor = 2
    commitment2 = calculator.calculate(test_data)

    assert commitment1 != commitment2


def test_default_heat_factor_is_one():
    assert HeatCommitmentCalculator().heat_factor == 1
    data = b"some data"
    assert HeatCommitmentCalculator().calculate(data) == HeatCommitmentCalculator(1).calculate(data)


def test_constructor_factor_matches_assigned_factor():
    data = b"payload"
    assigned = HeatCommitmentCalculator()
    assigned.heat_factor = 7
    assert HeatCommitmentCalculator(heat_factor=7).calculate(data) == assigned.calculate(data)


@pytest.mark.parametrize("factor", [-1, 2**64])
def test_out_of_range_factor_raises(factor):
    with pytest.raises(HashError):
        HeatCommitmentCalculator(factor).calculate(b"data")