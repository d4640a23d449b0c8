"""Proof-of-work merge mining."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass

from coldl3.blocks import Block
from coldl3.consensus_errors import PoWMiningError

logger = logging.getLogger(__name__)

U64_MAX = 2**64 - 1
HASH_RATE_UPDATE_EVERY = 1000
DEFAULT_CURRENT_DIFFICULTY = 1000


def meets_difficulty(block_hash: bytes, difficulty: int) -> bool:
    """Return True if ``block_hash`` has at least ``difficulty`` leading zero bits."""
    leading_zeros = 0
    for byte in block_hash:
        if byte == 0:
            leading_zeros += 8
        else:
            leading_zeros += 8 - byte.bit_length()
            break
    return leading_zeros >= difficulty


@dataclass
class MiningConfig:
    """Miner settings; ``merge_mining_interval`` is in seconds."""

    difficulty: int = 1000
    max_nonce: int = U64_MAX
    target_hash_rate: int = 1000
    enable_merge_mining: bool = True
    merge_mining_interval: float = 10.0


@dataclass
class MiningResult:
    """Outcome of mining one block; ``duration`` is in seconds."""

    block_hash: bytes
    nonce: int
    hash_rate: int
    duration: float
    difficulty: int


class PoWMiner:
    """Searches nonces for blocks and runs a background merge-mining loop."""

    def __init__(self, config: MiningConfig | None = None) -> None:
        self.config = config if config is not None else MiningConfig()
        self.current_difficulty = DEFAULT_CURRENT_DIFFICULTY
        self._running = False
        self._hash_rate = 0
        self._total_hashes = 0
        self._last_mine_time = time.monotonic()
        self._task: asyncio.Task[None] | None = None

    async def start(self) -> None:
        """Start the background mining loop."""
        self._running = True
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self._mining_loop())

    async def stop(self) -> None:
        """Stop the background mining loop and wait for it to finish."""
        self._running = False
        task, self._task = self._task, None
        if task is not None:
            await task

    async def mine_block(self, block: Block, difficulty: int) -> MiningResult:
        """Find a nonce whose header hash meets ``difficulty``; updates ``block`` in place."""
        start = time.monotonic()
        hashes = 0
        block.header.timestamp = int(time.time())
        for nonce in range(self.config.max_nonce):
            block.header.nonce = nonce
            block_hash = block.header.hash()
            if self.check_difficulty(block_hash, difficulty):
                duration = time.monotonic() - start
                block.proof.proof_data = nonce.to_bytes(8, "little")
                return MiningResult(
                    block_hash=block_hash,
                    nonce=nonce,
                    hash_rate=hashes // max(1, int(duration)),
                    duration=duration,
                    difficulty=difficulty,
                )
            hashes += 1
            if hashes % HASH_RATE_UPDATE_EVERY == 0:
                self._hash_rate = hashes // max(1, int(time.monotonic() - start))
                self._total_hashes += HASH_RATE_UPDATE_EVERY
                await asyncio.sleep(0)
        raise PoWMiningError("Max nonce reached")

    def check_difficulty(self, block_hash: bytes, difficulty: int) -> bool:
        """Return True if ``block_hash`` meets ``difficulty``."""
        return meets_difficulty(block_hash, difficulty)

    async def _mining_loop(self) -> None:
        while self._running:
            start = time.monotonic()
            hashes = 0
            while time.monotonic() - start < self.config.merge_mining_interval and self._running:
                hashes += 1
                await asyncio.sleep(0.001)
            self._hash_rate = hashes // max(1, int(time.monotonic() - start))
            self._total_hashes += hashes
            self._last_mine_time = time.monotonic()
            logger.info("Mining: %d hashes/sec, total: %d", self._hash_rate, self._total_hashes)

    @property
    def hash_rate(self) -> int:
        """Most recently measured hash rate."""
        return self._hash_rate

    @property
    def total_hashes(self) -> int:
        """Total hashes computed so far."""
        return self._total_hashes

    @property
    def last_mine_time(self) -> float:
        """Monotonic time of the last completed mining round."""
        return self._last_mine_time

    @property
    def is_running(self) -> bool:
        """Whether the background mining loop is enabled."""
        return self._running