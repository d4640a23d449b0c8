"""Bridge that relays verified Fuego headers to Arbitrum as proofs."""

from __future__ import annotations

import asyncio
import contextlib
import dataclasses
import enum
import logging
import time
from dataclasses import dataclass

from coldl3.arbitrum import ArbitrumClient, ProofSubmission
from coldl3.blocks import Block, BlockHeader
from coldl3.bridge_errors import BridgeError, BridgeNotRunning, InvalidHeader
from coldl3.fuego import FuegoHeaderVerifier
from coldl3.relayer import Relayer, RelayerConfig

logger = logging.getLogger(__name__)

MESSAGE_QUEUE_SIZE = 1000


@dataclass
class BridgeConfig:
    """Bridge settings; ``relayer_interval`` and ``proof_timeout`` are in seconds."""

    arbitrum_rpc_url: str = "http://localhost:8545"
    arbitrum_contract_address: str = "0x0000000000000000000000000000000000000000"
    fuego_rpc_url: str = "http://localhost:8080"
    relayer_interval: float = 60.0
    max_headers_per_batch: int = 10
    proof_timeout: float = 300.0
    enable_auto_relay: bool = True


class BridgeState(enum.Enum):
    """Lifecycle state of the bridge."""

    INITIALIZING = "Initializing"
    RUNNING = "Running"
    STOPPING = "Stopping"
    STOPPED = "Stopped"
    ERROR = "Error"


class ProofStatus(enum.Enum):
    """Where a bridge proof stands."""

    PENDING = "Pending"
    SUBMITTED = "Submitted"
    CONFIRMED = "Confirmed"
    FAILED = "Failed"


@dataclass
class BridgeProof:
    """A Fuego header together with the proof data sent to Arbitrum."""

    fuego_header: BlockHeader
    arbitrum_proof: bytes
    submission_timestamp: int
    status: ProofStatus = ProofStatus.PENDING


@dataclass
class BridgeStats:
    """Counters of bridge activity."""

    total_headers_verified: int = 0
    total_proofs_submitted: int = 0
    total_proofs_confirmed: int = 0
    total_proofs_failed: int = 0
    last_header_height: int = 0
    last_proof_timestamp: int = 0


class BridgeMessageKind(enum.Enum):
    """Kind of event reported by the bridge."""

    HEADER_VERIFIED = "HeaderVerified"
    PROOF_SUBMITTED = "ProofSubmitted"
    PROOF_CONFIRMED = "ProofConfirmed"
    PROOF_FAILED = "ProofFailed"
    BRIDGE_ERROR = "BridgeError"


@dataclass(frozen=True)
class BridgeMessage:
    """An event on the bridge's message queue."""

    kind: BridgeMessageKind
    header: BlockHeader | None = None
    header_hash: bytes | None = None
    error: str | None = None


def _proof_data(block: Block) -> bytes:
    header = block.header
    return b"".join(
        (
            header.hash(),
            header.height.to_bytes(8, "little"),
            header.timestamp.to_bytes(8, "little"),
            len(block.transactions).to_bytes(4, "little"),
        )
    )


class Bridge:
    """Verifies Fuego headers, builds proofs and submits them to Arbitrum."""

    def __init__(
        self,
        config: BridgeConfig | None = None,
        *,
        arbitrum_client: ArbitrumClient | None = None,
        fuego_verifier: FuegoHeaderVerifier | None = None,
        relayer: Relayer | None = None,
    ) -> None:
        self.config = config if config is not None else BridgeConfig()
        self.arbitrum_client = arbitrum_client or ArbitrumClient(
            self.config.arbitrum_rpc_url, self.config.arbitrum_contract_address
        )
        self.fuego_verifier = fuego_verifier or FuegoHeaderVerifier(self.config.fuego_rpc_url)
        self.relayer = relayer or Relayer(
            RelayerConfig(
                interval=self.config.relayer_interval,
                max_batch_size=self.config.max_headers_per_batch,
                timeout=self.config.proof_timeout,
            )
        )
        self._state = BridgeState.INITIALIZING
        self.last_error: str | None = None
        self._stats = BridgeStats()
        self._pending: dict[bytes, BridgeProof] = {}
        self._submitted: dict[bytes, BridgeProof] = {}
        self._messages: asyncio.Queue[BridgeMessage] = asyncio.Queue(MESSAGE_QUEUE_SIZE)
        self._processor: asyncio.Task[None] | None = None

    async def start(self) -> None:
        """Start the relayer and message processing."""
        self._state = BridgeState.RUNNING
        await self.relayer.start()
        if self._processor is None or self._processor.done():
            self._processor = asyncio.create_task(self._process_messages())

    async def stop(self) -> None:
        """Stop the relayer and message processing."""
        self._state = BridgeState.STOPPING
        await self.relayer.stop()
        processor, self._processor = self._processor, None
        if processor is not None:
            processor.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await processor
        self._state = BridgeState.STOPPED

    def _require_running(self) -> None:
        if self._state is not BridgeState.RUNNING:
            raise BridgeNotRunning()

    def _emit(self, message: BridgeMessage) -> None:
        with contextlib.suppress(asyncio.QueueFull):
            self._messages.put_nowait(message)

    async def verify_fuego_header(self, header: BlockHeader) -> bool:
        """Verify ``header`` against Fuego; return whether it is valid."""
        self._require_running()
        verification = await self.fuego_verifier.verify_header(header)
        if not verification.is_valid:
            return False
        self._stats.total_headers_verified += 1
        self._stats.last_header_height = header.height
        self._emit(BridgeMessage(BridgeMessageKind.HEADER_VERIFIED, header=header))
        return True

    async def submit_to_arbitrum(self, proof: BridgeProof) -> None:
        """Submit ``proof`` to Arbitrum and move it from pending to submitted."""
        self._require_running()
        header_hash = proof.fuego_header.hash()
        submission = ProofSubmission(
            header_hash=header_hash,
            proof_data=bytes(proof.arbitrum_proof),
            timestamp=proof.submission_timestamp,
        )
        try:
            await self.arbitrum_client.submit_proof(submission)
        except BridgeError as exc:
            self._stats.total_proofs_failed += 1
            self._emit(
                BridgeMessage(BridgeMessageKind.PROOF_FAILED, header_hash=header_hash, error=str(exc))
            )
            raise
        self._stats.total_proofs_submitted += 1
        self._stats.last_proof_timestamp = proof.submission_timestamp
        pending = self._pending.pop(header_hash, None)
        if pending is not None:
            self._submitted[header_hash] = pending
        self._emit(BridgeMessage(BridgeMessageKind.PROOF_SUBMITTED, header_hash=header_hash))

    async def create_bridge_proof(self, block: Block) -> BridgeProof:
        """Verify the block's header and record a pending proof for it."""
        if not await self.verify_fuego_header(block.header):
            raise InvalidHeader()
        proof = BridgeProof(
            fuego_header=dataclasses.replace(block.header),
            arbitrum_proof=_proof_data(block),
            submission_timestamp=int(time.time()),
            status=ProofStatus.PENDING,
        )
        self._pending[block.header.hash()] = proof
        return proof

    @property
    def state(self) -> BridgeState:
        """Current lifecycle state."""
        return self._state

    @property
    def stats(self) -> BridgeStats:
        """A snapshot of the bridge counters."""
        return dataclasses.replace(self._stats)

    @property
    def pending_proofs_count(self) -> int:
        """Number of proofs awaiting submission."""
        return len(self._pending)

    @property
    def submitted_proofs_count(self) -> int:
        """Number of submitted proofs."""
        return len(self._submitted)

    @property
    def message_queue(self) -> asyncio.Queue[BridgeMessage]:
        """Queue of bridge events processed while running."""
        return self._messages

    async def _process_messages(self) -> None:
        while True:
            message = await self._messages.get()
            kind = message.kind
            if kind is BridgeMessageKind.HEADER_VERIFIED and message.header is not None:
                logger.info("Header verified: height %d", message.header.height)
            elif kind is BridgeMessageKind.PROOF_SUBMITTED:
                logger.info("Proof submitted: %s", (message.header_hash or b"").hex())
            elif kind is BridgeMessageKind.PROOF_CONFIRMED:
                logger.info("Proof confirmed: %s", (message.header_hash or b"").hex())
            elif kind is BridgeMessageKind.PROOF_FAILED:
                logger.warning(
                    "Proof failed: %s, error: %s", (message.header_hash or b"").hex(), message.error
                )
            elif kind is BridgeMessageKind.BRIDGE_ERROR:
                logger.error("Bridge error: %s", message.error)
                self.last_error = message.error
                self._state = BridgeState.ERROR