"""Configuration of the consensus engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ConsensusConfig:
    """Settings shared by the BFT protocol and the merge miner.

    ``block_time`` is in seconds.
    """

    node_id: int = 0
    total_nodes: int = 4
    block_time: float = 10.0
    max_block_size: int = 1000
    min_finality: int = 2
    pow_difficulty: int = 1000
    enable_merge_mining: bool = True