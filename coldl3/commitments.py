"""Commitment engine and commitment records."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

from coldl3.commitment_errors import CommitmentError
from coldl3.heat import HeatCommitmentCalculator
from coldl3.yield_commitment import YieldCommitmentCalculator

HASH_SIZE = 32


def data_hash(data: bytes) -> bytes:
    """Return the 32-byte digest used to bind a commitment to its data."""
    return hashlib.blake2b(bytes(data)).digest()[:HASH_SIZE]


class CommitmentEngine:
    """Calculates HEAT and yield commitments and verifies HEAT commitments."""

    def __init__(
        self,
        heat_calculator: HeatCommitmentCalculator | None = None,
        yield_calculator: YieldCommitmentCalculator | None = None,
    ) -> None:
        self.heat_calculator = heat_calculator or HeatCommitmentCalculator()
        self.yield_calculator = yield_calculator or YieldCommitmentCalculator()

    def calculate_heat_commitment(self, data: bytes) -> bytes:
        """Return the HEAT commitment of ``data``."""
        return self.heat_calculator.calculate(data)

    def calculate_yield_commitment(self, data: bytes) -> bytes:
        """Return the yield commitment of ``data``."""
        return self.yield_calculator.calculate(data)

    def verify_commitment(self, commitment: bytes, data: bytes) -> bool:
        """Return True if ``commitment`` is the HEAT commitment of ``data``."""
        try:
            return self.calculate_heat_commitment(data) == bytes(commitment)
        except CommitmentError:
            return False


@dataclass
class HeatCommitment:
    """A recorded HEAT commitment with the hash of its data."""

    commitment: bytes
    timestamp: int
    data_hash: bytes

    def verify(self, data: bytes) -> bool:
        """Return True if ``data`` hashes to the recorded data hash."""
        return self.data_hash == data_hash(data)


@dataclass
class YieldCommitment:
    """A recorded yield commitment with its amount and the hash of its data."""

    commitment: bytes
    timestamp: int
    yield_amount: int
    data_hash: bytes

    def verify(self, data: bytes) -> bool:
        """Return True if ``data`` hashes to the recorded data hash."""
        return self.data_hash == data_hash(data)