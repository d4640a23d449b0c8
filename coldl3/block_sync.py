"""Block synchronisation with a hash-keyed block cache."""

from __future__ import annotations

from coldl3.blocks import Block, BlockProof, ProofType, Transaction
from coldl3.parser import FuegoBlockParser
from coldl3.sync_errors import BlockSyncError, BlockValidationFailed, ParserError

BATCH_SIZE = 100


class BlockSync:
    """Pulls blocks from a parser, validates them and caches them by hash."""

    def __init__(self, parser: FuegoBlockParser | None = None) -> None:
        self._parser = parser if parser is not None else FuegoBlockParser()
        self._cache: dict[bytes, Block] = {}
        self._current_height = 0

    async def sync_blocks(self, from_height: int) -> list[Block]:
        """Fetch and validate consecutive blocks starting at ``from_height``."""
        blocks: list[Block] = []
        height = from_height
        while True:
            try:
                block = await self._parser.get_block_by_height(height)
            except BlockSyncError as exc:
                raise ParserError(str(exc)) from exc
            if block is None:
                break
            if not await self.validate_block(block):
                raise BlockValidationFailed()
            blocks.append(block)
            self._cache[block.header.hash()] = block
            height += 1
        self._current_height = height
        return blocks

    async def validate_block(self, block: Block) -> bool:
        """Validate header, transactions and proof; header violations raise."""
        if not block.header.verify():
            return False
        if not all(self._transaction_ok(tx) for tx in block.transactions):
            return False
        return self._proof_ok(block.proof)

    async def get_block_by_hash(self, block_hash: bytes) -> Block | None:
        """Return a cached block, falling back to the parser."""
        cached = self._cache.get(block_hash)
        if cached is not None:
            return cached
        return await self._parser.get_block_by_hash(block_hash)

    async def fast_sync(self, target_height: int) -> list[Block]:
        """Sync in batches from the current height up to ``target_height``."""
        blocks: list[Block] = []
        height = self._current_height
        while height < target_height:
            end_height = min(height + BATCH_SIZE, target_height)
            blocks.extend(await self.sync_blocks(height))
            height = end_height
        return blocks

    @property
    def current_height(self) -> int:
        """Height reached by the last sync."""
        return self._current_height

    @property
    def cache_size(self) -> int:
        """Number of cached blocks."""
        return len(self._cache)

    @staticmethod
    def _transaction_ok(tx: Transaction) -> bool:
        return tx.fee != 0 and bool(tx.inputs) and bool(tx.outputs)

    @staticmethod
    def _proof_ok(proof: BlockProof) -> bool:
        return isinstance(proof.proof_type, ProofType)