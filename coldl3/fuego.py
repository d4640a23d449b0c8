"""Verification of Fuego block headers for the bridge."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass

from coldl3.blocks import BlockHeader, ZERO_HASH

logger = logging.getLogger(__name__)

SIMULATED_NETWORK_DELAY = 0.05
MAX_FUTURE_DRIFT = 3600
FAILURE_MESSAGE = "Header validation failed"


@dataclass
class HeaderVerification:
    """Outcome of verifying one header; ``verification_time`` is in seconds."""

    is_valid: bool
    verification_time: float
    error_message: str | None = None


class FuegoHeaderVerifier:
    """Checks headers against the Fuego chain rules and records the outcomes."""

    def __init__(self, rpc_url: str, network_delay: float = SIMULATED_NETWORK_DELAY) -> None:
        self.rpc_url = rpc_url
        self.network_delay = network_delay
        self._verified: dict[bytes, HeaderVerification] = {}
        self._last_verification_time = time.monotonic()

    async def verify_header(self, header: BlockHeader) -> HeaderVerification:
        """Verify ``header`` and record the result under its hash."""
        start = time.monotonic()
        await asyncio.sleep(self.network_delay)
        is_valid = self._header_ok(header)
        verification = HeaderVerification(
            is_valid=is_valid,
            verification_time=time.monotonic() - start,
            error_message=None if is_valid else FAILURE_MESSAGE,
        )
        self._verified[header.hash()] = verification
        self._last_verification_time = time.monotonic()
        logger.info("Header verified: height %d, valid: %s", header.height, is_valid)
        return verification

    @staticmethod
    def _header_ok(header: BlockHeader) -> bool:
        if header.height == 0 and header.prev_hash != ZERO_HASH:
            return False
        if header.timestamp > int(time.time()) + MAX_FUTURE_DRIFT:
            return False
        return header.difficulty != 0

    def get_verification_result(self, header_hash: bytes) -> HeaderVerification | None:
        """Return the recorded verification for ``header_hash``, if any."""
        return self._verified.get(bytes(header_hash))

    @property
    def all_verified_headers(self) -> list[HeaderVerification]:
        """Every recorded verification."""
        return list(self._verified.values())

    @property
    def last_verification_time(self) -> float:
        """Monotonic time of the latest verification, or of verifier creation."""
        return self._last_verification_time

    async def is_accessible(self) -> bool:
        """Report whether the Fuego RPC endpoint is reachable."""
        return True