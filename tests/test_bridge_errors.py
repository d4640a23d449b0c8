import pytest

from coldl3.bridge_errors import (
    ArbitrumError,
    BridgeError,
    BridgeNotRunning,
    FuegoError,
    InvalidHeader,
    ProofSubmissionError,
    RelayerError,
)
from coldl3.sync_errors import InvalidGenesisBlock


def test_fixed_messages():
    assert str(BridgeNotRunning()) == "Bridge is not running"
    assert str(InvalidHeader()) == "Invalid header"


@pytest.mark.parametrize(
    ("cls", "prefix"),
    [
        (ArbitrumError, "Arbitrum client error"),
        (FuegoError, "Fuego verification error"),
        (RelayerError, "Relayer error"),
        (ProofSubmissionError, "Proof submission error"),
    ],
)
def test_detail_messages(cls, prefix):
    err = cls("Simulated relay failure")
    assert str(err) == f"{prefix}: Simulated relay failure"
    assert err.detail == "Simulated relay failure"


@pytest.mark.parametrize(
    "cls",
    [BridgeNotRunning, InvalidHeader, ArbitrumError, FuegoError, RelayerError, ProofSubmissionError],
)
def test_all_caught_as_bridge_error(cls):
    err = cls()
    assert isinstance(err, BridgeError)
    assert err.detail is None


def test_fuego_error_wraps_block_sync_message():
    err = FuegoError(str(InvalidGenesisBlock()))
    assert str(err) == "Fuego verification error: Invalid genesis block"