"""Client that submits bridge proofs to the Arbitrum settlement layer."""

from __future__ import annotations

import asyncio
import enum
import logging
import time
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

SIMULATED_NETWORK_DELAY = 0.1
SIMULATED_BLOCK_NUMBER = 12345
SIMULATED_GAS_USED = 100000
ZERO_HASH = bytes(32)


@dataclass
class ProofSubmission:
    """A proof for one header, ready to be sent to the contract."""

    header_hash: bytes
    proof_data: bytes = b""
    timestamp: int = 0


class SubmissionStatus(enum.Enum):
    """Where a submitted proof stands on the settlement layer."""

    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    FAILED = "Failed"


@dataclass
class SubmissionResult:
    """Receipt of a proof submission; ``error`` is set when it failed."""

    transaction_hash: bytes
    block_number: int
    gas_used: int
    status: SubmissionStatus
    error: str | None = field(default=None)


class ArbitrumClient:
    """Submits proofs and remembers the receipt for each header hash.

    Submissions are simulated: each takes ``network_delay`` seconds and is confirmed.
    """

    def __init__(
        self,
        rpc_url: str,
        contract_address: str,
        network_delay: float = SIMULATED_NETWORK_DELAY,
    ) -> None:
        self.rpc_url = rpc_url
        self.contract_address = contract_address
        self.network_delay = network_delay
        self._submissions: dict[bytes, SubmissionResult] = {}
        self._last_submission_time = time.monotonic()

    async def submit_proof(self, submission: ProofSubmission) -> SubmissionResult:
        """Send ``submission`` to the contract and record its receipt."""
        await asyncio.sleep(self.network_delay)
        result = SubmissionResult(
            transaction_hash=ZERO_HASH,
            block_number=SIMULATED_BLOCK_NUMBER,
            gas_used=SIMULATED_GAS_USED,
            status=SubmissionStatus.CONFIRMED,
        )
        header_hash = bytes(submission.header_hash)
        self._submissions[header_hash] = result
        self._last_submission_time = time.monotonic()
        logger.info("Proof submitted to Arbitrum: %s", header_hash.hex())
        return result

    def get_submission_result(self, header_hash: bytes) -> SubmissionResult | None:
        """Return the receipt recorded for ``header_hash``, if any."""
        return self._submissions.get(bytes(header_hash))

    @property
    def all_submissions(self) -> list[SubmissionResult]:
        """Every recorded receipt."""
        return list(self._submissions.values())

    @property
    def last_submission_time(self) -> float:
        """Monotonic time of the latest submission, or of client creation."""
        return self._last_submission_time

    async def is_accessible(self) -> bool:
        """Report whether the RPC endpoint is reachable."""
        return True