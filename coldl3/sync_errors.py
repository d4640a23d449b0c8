"""Errors raised while fetching, parsing and validating blocks."""

from __future__ import annotations


class BlockSyncError(Exception):
    """Base class for every block synchronisation error."""

    default_message = "Block sync error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)


class ParserError(BlockSyncError):
    """The block source failed to deliver or decode a block."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Parser error: {detail}")


class BlockValidationFailed(BlockSyncError):
    """A block did not pass validation."""

    default_message = "Block validation failed"


class InvalidTimestamp(BlockSyncError):
    """A block header carries a zero timestamp."""

    default_message = "Invalid timestamp"


class InvalidGenesisBlock(BlockSyncError):
    """A height-zero header points at a previous block."""

    default_message = "Invalid genesis block"


class TransactionValidationFailed(BlockSyncError):
    """A transaction did not pass validation."""

    default_message = "Transaction validation failed"


class ProofValidationFailed(BlockSyncError):
    """A block proof did not pass validation."""

    default_message = "Proof validation failed"


class BlockNotFound(BlockSyncError):
    """The requested block is unknown."""

    default_message = "Block not found"


class SyncError(BlockSyncError):
    """Synchronisation could not proceed."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Sync error: {detail}")