from coldl3.commitments import (
    CommitmentEngine,
    HeatCommitment,
    YieldCommitment,
    data_hash,
)
from coldl3.heat import HeatCommitmentCalculator


def test_heat_commitment_calculation():
    engine = CommitmentEngine()
    test_data = b"test_heat_data"

    commitment = engine.calculate_heat_commitment(test_data)
    assert len(commitment) == 32
    assert engine.verify_commitment(commitment, test_data)


def test_yield_commitment_calculation():
    engine = CommitmentEngine()
    commitment = engine.calculate_yield_commitment(b"test_yield_data")
    assert len(commitment) == 32


def test_commitment_verification():
    engine = CommitmentEngine()
    test_data = b"test_verification_data"

    commitment = engine.calculate_heat_commitment(test_data)
    assert engine.verify_commitment(commitment, test_data)
    assert not engine.verify_commitment(commitment, b"wrong_data")


def test_yield_commitment_does_not_verify_as_heat():
    engine = CommitmentEngine()
    data = b"data"
    assert not engine.verify_commitment(engine.calculate_yield_commitment(data), data)


def test_engine_uses_given_heat_calculator():
    data = b"data"
    engine = CommitmentEngine(heat_calculator=HeatCommitmentCalculator(5))
    assert engine.calculate_heat_commitment(data) == HeatCommitmentCalculator(5).calculate(data)
    assert engine.calculate_heat_commitment(data) != CommitmentEngine().calculate_heat_commitment(data)


def test_verification_fails_on_calculator_error():
    engine = CommitmentEngine(heat_calculator=HeatCommitmentCalculator(-1))
    assert engine.verify_commitment(bytes(32), b"data") is False


def test_data_hash_properties():
    assert len(data_hash(b"abc")) == 32
    assert data_hash(b"abc") == data_hash(bytearray(b"abc"))
    assert data_hash(b"abc") != data_hash(b"abd")


def test_heat_commitment_struct():
    test_data = b"test_heat_struct_data"
    commitment = HeatCommitment(bytes([1]) * 32, 1234567890, data_hash(test_data))

    assert commitment.verify(test_data)
    assert not commitment.verify(b"wrong_data")


def test_yield_commitment_struct():
    test_data = b"test_yield_struct_data"
    commitment = YieldCommitment(bytes([2]) * 32, 1234567890, 1000, data_hash(test_data))

    assert commitment.verify(test_data)
    assert not commitment.verify(b"wrong_data")
    assert commitment.yield_amount == 1000