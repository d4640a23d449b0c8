"""HotStuff-style BFT consensus with simulated votes."""

from __future__ import annotations

import asyncio
import enum
import logging
import time
from dataclasses import dataclass
from typing import Union

from coldl3.blocks import Block
from coldl3.consensus_config import ConsensusConfig
from coldl3.consensus_errors import ConsensusNotRunning, HotStuffError, InvalidBlockProposal

logger = logging.getLogger(__name__)

DEFAULT_VIEW_TIMEOUT = 30.0


class ConsensusState(enum.Enum):
    """Phase a block is in during consensus."""

    PRE_PREPARE = "PrePrepare"
    PREPARE = "Prepare"
    COMMIT = "Commit"
    FINALIZED = "Finalized"


@dataclass
class BlockFinalized:
    """A block reached the commit phase."""

    block: Block


@dataclass
class BlockRejected:
    """A block was rejected, with the reason."""

    block_hash: bytes
    reason: str


@dataclass
class ConsensusFailure:
    """The consensus protocol hit an error."""

    error: str


ConsensusMessage = Union[BlockFinalized, BlockRejected, ConsensusFailure]


@dataclass
class HotStuffConfig:
    """Protocol settings; ``block_time`` and ``view_timeout`` are in seconds."""

    node_id: int = 0
    total_nodes: int = 4
    block_time: float = 10.0
    max_block_size: int = 1000
    min_finality: int = 2
    view_timeout: float = DEFAULT_VIEW_TIMEOUT

    @classmethod
    def from_consensus_config(cls, config: ConsensusConfig) -> HotStuffConfig:
        """Derive protocol settings from the engine configuration."""
        return cls(
            node_id=config.node_id,
            total_nodes=config.total_nodes,
            block_time=config.block_time,
            max_block_size=config.max_block_size,
            min_finality=config.min_finality,
            view_timeout=DEFAULT_VIEW_TIMEOUT,
        )


class HotStuffConsensus:
    """Runs blocks through pre-prepare, prepare and commit phases.

    Votes from the other nodes are simulated: every node but the leader votes.
    Messages are put on ``messages`` when a queue is given, otherwise dropped.
    """

    def __init__(
        self,
        config: ConsensusConfig | None = None,
        messages: asyncio.Queue[ConsensusMessage] | None = None,
    ) -> None:
        self.config = HotStuffConfig.from_consensus_config(config or ConsensusConfig())
        self._messages = messages
        self._current_view = 0
        self._current_leader = 0
        self._view_start = time.monotonic()
        self._pending: dict[bytes, Block] = {}
        self._prepared: dict[bytes, Block] = {}
        self._committed: dict[bytes, Block] = {}
        self._running = False
        self._stop_event: asyncio.Event | None = None
        self._task: asyncio.Task[None] | None = None

    async def start(self) -> None:
        """Start the view-management loop."""
        self._running = True
        if self._task is None or self._task.done():
            self._stop_event = asyncio.Event()
            self._task = asyncio.create_task(self._manage_views(self._stop_event))

    async def stop(self) -> None:
        """Stop the view-management loop and wait for it to finish."""
        self._running = False
        if self._stop_event is not None:
            self._stop_event.set()
        task, self._task = self._task, None
        if task is not None:
            await task

    async def propose_block(self, block: Block) -> None:
        """Validate ``block`` and drive it through all consensus phases."""
        if not self._running:
            raise ConsensusNotRunning()
        if self.config.node_id != self._current_leader:
            raise HotStuffError("Not the current leader")
        self._validate_block(block)
        self._pending[block.header.hash()] = block
        self._pre_prepare_phase(block)
        self._prepare_phase(block)
        await self._commit_phase(block)

    def _pre_prepare_phase(self, block: Block) -> None:
        logger.info("Pre-prepare phase for block: %s", block.header.hash().hex())

    def _votes(self) -> int:
        return self.config.total_nodes - 1

    def _prepare_phase(self, block: Block) -> None:
        if self._votes() < self.config.min_finality:
            raise HotStuffError("Insufficient prepare votes")
        block_hash = block.header.hash()
        self._prepared[block_hash] = block
        logger.info("Prepare phase completed for block: %s", block_hash.hex())

    async def _commit_phase(self, block: Block) -> None:
        if self._votes() < self.config.min_finality:
            raise HotStuffError("Insufficient commit votes")
        block_hash = block.header.hash()
        self._committed[block_hash] = block
        if self._messages is not None:
            await self._messages.put(BlockFinalized(block))
        logger.info("Commit phase completed for block: %s", block_hash.hex())

    def _validate_block(self, block: Block) -> None:
        if len(block.transactions) > self.config.max_block_size:
            raise InvalidBlockProposal("Block too large")
        if block.header.timestamp < int(time.monotonic() - self._view_start):
            raise InvalidBlockProposal("Block timestamp too old")

    async def _manage_views(self, stop_event: asyncio.Event) -> None:
        view = 0
        while self._running:
            leader = view % self.config.total_nodes
            try:
                await asyncio.wait_for(stop_event.wait(), self.config.view_timeout)
            except asyncio.TimeoutError:
                pass
            view += 1
            logger.info("Moving to view %d, leader: %d", view, leader)

    @property
    def is_running(self) -> bool:
        """Whether the protocol is accepting proposals."""
        return self._running

    @property
    def current_view(self) -> int:
        """The current view number."""
        return self._current_view

    @property
    def current_leader(self) -> int:
        """Node id of the current leader."""
        return self._current_leader

    @property
    def pending_blocks_count(self) -> int:
        """Number of proposed blocks."""
        return len(self._pending)

    @property
    def prepared_blocks_count(self) -> int:
        """Number of blocks that passed the prepare phase."""
        return len(self._prepared)

    @property
    def committed_blocks_count(self) -> int:
        """Number of committed blocks."""
        return len(self._committed)