"""Periodic relaying of headers and proofs between the chains."""

from __future__ import annotations

import asyncio
import dataclasses
import logging
import random
import time
from dataclasses import dataclass

from coldl3.bridge_errors import BridgeError, RelayerError

logger = logging.getLogger(__name__)

SIMULATED_RELAY_WORK = 0.1


@dataclass
class RelayerConfig:
    """Relay settings; ``interval`` and ``timeout`` are in seconds."""

    interval: float = 60.0
    max_batch_size: int = 10
    timeout: float = 300.0


@dataclass
class RelayerStats:
    """Counters of relay rounds; ``average_relay_time`` is in seconds."""

    total_relays: int = 0
    successful_relays: int = 0
    failed_relays: int = 0
    last_relay_time: int = 0
    average_relay_time: float = 0.0


class Relayer:
    """Runs relay rounds in the background every ``config.interval`` seconds.

    Relay work is simulated and fails for roughly one round in ten.
    """

    def __init__(
        self,
        config: RelayerConfig | None = None,
        rng: random.Random | None = None,
        work_delay: float = SIMULATED_RELAY_WORK,
    ) -> None:
        self.config = config if config is not None else RelayerConfig()
        self.work_delay = work_delay
        self._rng = rng if rng is not None else random.Random()
        self._running = False
        self._stats = RelayerStats()
        self._last_relay_time = time.monotonic()
        self._stop_event: asyncio.Event | None = None
        self._task: asyncio.Task[None] | None = None

    async def start(self) -> None:
        """Start the background relay loop."""
        self._running = True
        if self._task is None or self._task.done():
            self._stop_event = asyncio.Event()
            self._task = asyncio.create_task(self._relay_loop(self._stop_event))

    async def stop(self) -> None:
        """Stop the background relay loop and wait for it to finish."""
        self._running = False
        if self._stop_event is not None:
            self._stop_event.set()
        task, self._task = self._task, None
        if task is not None:
            await task

    async def perform_relay(self) -> None:
        """Run one relay round, raising RelayerError when it fails."""
        await asyncio.sleep(self.work_delay)
        if self._rng.randrange(256) % 10 == 0:
            raise RelayerError("Simulated relay failure")

    async def _relay_loop(self, stop_event: asyncio.Event) -> None:
        while self._running:
            start = time.monotonic()
            self._stats.total_relays += 1
            try:
                await self.perform_relay()
            except BridgeError as exc:
                self._stats.failed_relays += 1
                logger.warning("Relay failed: %s", exc)
            else:
                self._stats.successful_relays += 1
                logger.info("Relay successful")
            self._stats.last_relay_time = int(time.time())
            self._stats.average_relay_time = time.monotonic() - start
            self._last_relay_time = time.monotonic()
            try:
                await asyncio.wait_for(stop_event.wait(), self.config.interval)
            except asyncio.TimeoutError:
                pass

    @property
    def stats(self) -> RelayerStats:
        """A snapshot of the relay counters."""
        return dataclasses.replace(self._stats)

    @property
    def last_relay_time(self) -> float:
        """Monotonic time of the latest relay round, or of relayer creation."""
        return self._last_relay_time

    @property
    def is_running(self) -> bool:
        """Whether the relay loop is enabled."""
        return self._running