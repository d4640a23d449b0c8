"""HEAT commitment calculation."""

from __future__ import annotations

import hashlib

from coldl3.commitment_errors import HashError

HEAT_TAG = b"HEAT"
COMMITMENT_SIZE = 32


class HeatCommitmentCalculator:
    """Derives 32-byte HEAT commitments, keyed by a heat factor."""

    def __init__(self, heat_factor: int = 1) -> None:
        self.heat_factor = heat_factor

    def calculate(self, data: bytes) -> bytes:
        """Return the HEAT commitment of ``data`` under the current heat factor."""
        try:
            factor = self.heat_factor.to_bytes(8, "little")
        except (OverflowError, AttributeError) as exc:
            raise HashError(f"heat factor {self.heat_factor!r} is not a 64-bit unsigned integer") from exc
        hasher = hashlib.blake2b()
        hasher.update(factor)
        hasher.update(bytes(data))
        hasher.update(HEAT_TAG)
        return hasher.digest()[:COMMITMENT_SIZE]