"""Block source that knows the genesis block."""

from __future__ import annotations

from coldl3.blocks import Block, BlockHeader, BlockProof, ProofType, ZERO_HASH

GENESIS_TIMESTAMP = 1234567890


def _genesis_block() -> Block:
    header = BlockHeader(
        height=0,
        prev_hash=ZERO_HASH,
        merkle_root=bytes([1]) * 32,
        timestamp=GENESIS_TIMESTAMP,
        nonce=0,
        difficulty=1,
    )
    return Block(header=header, transactions=[], proof=BlockProof(ProofType.POW, b""))


class FuegoBlockParser:
    """Reads blocks from the underlying chain; only the genesis block exists."""

    async def get_block_by_height(self, height: int) -> Block | None:
        """Return the block at ``height``, or None past the chain tip."""
        return _genesis_block() if height == 0 else None

    async def get_block_by_hash(self, block_hash: bytes) -> Block | None:
        """Look a block up by hash; no blocks are indexed by hash."""
        return None

    async def parse_block_data(self, data: bytes) -> Block:
        """Decode raw block data into a block."""
        return _genesis_block()

    async def validate_block(self, block: Block) -> bool:
        """Run the chain's own block check, which accepts every block."""
        return True