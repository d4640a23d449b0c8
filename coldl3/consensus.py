"""Consensus engine combining HotStuff BFT with PoW merge mining."""

from __future__ import annotations

import asyncio
import enum
import logging
import time
from dataclasses import dataclass, field

from coldl3.blocks import Block, BlockHeader, BlockProof, ProofType, Transaction, ZERO_HASH
from coldl3.consensus_config import ConsensusConfig
from coldl3.consensus_errors import ConsensusNotRunning
from coldl3.fuego_hash import FuegoHash
from coldl3.hotstuff import (
    BlockFinalized,
    BlockRejected,
    ConsensusFailure,
    ConsensusMessage,
    HotStuffConsensus,
)
from coldl3.pow_mining import MiningConfig, PoWMiner

logger = logging.getLogger(__name__)

MESSAGE_QUEUE_SIZE = 1000


class ConsensusStatus(enum.Enum):
    """Lifecycle state of the consensus engine."""

    STARTING = "Starting"
    RUNNING = "Running"
    STOPPING = "Stopping"
    STOPPED = "Stopped"
    ERROR = "Error"


@dataclass
class BlockProposal:
    """A block offered for consensus by a node."""

    block: Block
    proposer: int
    timestamp: int
    signature: bytes = field(default=b"")


class Consensus:
    """Proposes blocks, runs them through HotStuff and optionally merge-mines."""

    def __init__(self, config: ConsensusConfig | None = None) -> None:
        self.config = config if config is not None else ConsensusConfig()
        self._messages: asyncio.Queue[ConsensusMessage] = asyncio.Queue(MESSAGE_QUEUE_SIZE)
        self._hotstuff = HotStuffConsensus(self.config, self._messages)
        self._pow_miner = (
            PoWMiner(MiningConfig(difficulty=self.config.pow_difficulty))
            if self.config.enable_merge_mining
            else None
        )
        self._fuego_hash = FuegoHash()
        self._status = ConsensusStatus.STARTING
        self.last_error: str | None = None
        self._finalized: list[Block] = []
        self._proposals: dict[bytes, BlockProposal] = {}
        self._processor: asyncio.Task[None] | None = None

    async def start_consensus(self) -> None:
        """Start the protocol, the miner and message processing."""
        self._status = ConsensusStatus.RUNNING
        await self._hotstuff.start()
        if self._pow_miner is not None:
            await self._pow_miner.start()
        if self._processor is None or self._processor.done():
            self._processor = asyncio.create_task(self._process_messages())

    async def stop_consensus(self) -> None:
        """Stop the protocol, the miner and message processing."""
        self._status = ConsensusStatus.STOPPING
        await self._hotstuff.stop()
        if self._pow_miner is not None:
            await self._pow_miner.stop()
        processor, self._processor = self._processor, None
        if processor is not None:
            processor.cancel()
            try:
                await processor
            except asyncio.CancelledError:
                pass
        self._status = ConsensusStatus.STOPPED

    async def propose_block(self, transactions: list[Transaction]) -> BlockProposal:
        """Build a block from ``transactions`` and submit it to consensus."""
        if self._status is not ConsensusStatus.RUNNING:
            raise ConsensusNotRunning()
        header = BlockHeader(
            height=0,
            prev_hash=self._latest_block_hash(),
            merkle_root=self.merkle_root(transactions),
            timestamp=int(time.time()),
            difficulty=self.config.pow_difficulty,
            nonce=0,
        )
        block = Block(
            header=header,
            transactions=list(transactions),
            proof=BlockProof(ProofType.POW, b""),
        )
        proposal = BlockProposal(
            block=block,
            proposer=self.config.node_id,
            timestamp=int(time.time()),
            signature=b"",
        )
        self._proposals[block.header.hash()] = proposal
        await self._hotstuff.propose_block(block)
        return proposal

    @property
    def finalized_blocks(self) -> list[Block]:
        """Blocks finalized so far."""
        return list(self._finalized)

    @property
    def status(self) -> ConsensusStatus:
        """Current lifecycle state."""
        return self._status

    @property
    def block_proposals(self) -> dict[bytes, BlockProposal]:
        """Stored proposals keyed by block hash."""
        return dict(self._proposals)

    @property
    def pow_miner(self) -> PoWMiner | None:
        """The merge miner, or None when merge mining is disabled."""
        return self._pow_miner

    @property
    def hotstuff(self) -> HotStuffConsensus:
        """The underlying BFT protocol."""
        return self._hotstuff

    @property
    def message_queue(self) -> asyncio.Queue[ConsensusMessage]:
        """Queue of protocol messages processed while running."""
        return self._messages

    def merkle_root(self, transactions: list[Transaction]) -> bytes:
        """Return the Merkle root of the transaction hashes; odd nodes carry up."""
        if not transactions:
            return ZERO_HASH
        level = [tx.hash for tx in transactions]
        while len(level) > 1:
            level = [
                self._fuego_hash.hash(level[i] + level[i + 1]) if i + 1 < len(level) else level[i]
                for i in range(0, len(level), 2)
            ]
        return level[0]

    def _latest_block_hash(self) -> bytes:
        return self._finalized[-1].header.hash() if self._finalized else ZERO_HASH

    async def _process_messages(self) -> None:
        while True:
            message = await self._messages.get()
            if isinstance(message, BlockFinalized):
                logger.info("Block finalized: %s", message.block.header.hash().hex())
            elif isinstance(message, BlockRejected):
                logger.info("Block rejected: %s, reason: %s", message.block_hash.hex(), message.reason)
            elif isinstance(message, ConsensusFailure):
                logger.error("Consensus error: %s", message.error)
                self.last_error = message.error
                self._status = ConsensusStatus.ERROR