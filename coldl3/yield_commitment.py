"""Yield commitment calculation."""

from __future__ import annotations

import hashlib
import struct

YIELD_TAG = b"YIELD"
COMMITMENT_SIZE = 32


class YieldCommitmentCalculator:
    """Derives 32-byte yield commitments, keyed by a yield rate."""

    def __init__(self, yield_rate: float = 1.0) -> None:
        self.yield_rate = float(yield_rate)

    def calculate(self, data: bytes) -> bytes:
        """Return the yield commitment of ``data`` under the current yield rate."""
        hasher = hashlib.blake2b()
        hasher.update(struct.pack("<d", self.yield_rate))
        hasher.update(bytes(data))
        hasher.update(YIELD_TAG)
        return hasher.digest()[:COMMITMENT_SIZE]

    def calculate_yield_amount(self, data: bytes) -> int:
        """Return the data length scaled by the yield rate, truncated, never negative."""
        return max(0, int(len(data) * self.yield_rate))