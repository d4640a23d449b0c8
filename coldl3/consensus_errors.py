"""Errors raised by the consensus engine."""

from __future__ import annotations


class ConsensusError(Exception):
    """Base class for every consensus error."""

    prefix: str | None = None
    default_message = "Consensus error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        if detail is None:
            message = self.default_message
        elif self.prefix:
            message = f"{self.prefix}: {detail}"
        else:
            message = detail
        super().__init__(message)


class ConsensusNotRunning(ConsensusError):
    """An operation needs a running consensus engine."""

    default_message = "Consensus is not running"


class InvalidBlockProposal(ConsensusError):
    """A proposed block was rejected before voting."""

    prefix = "Invalid block proposal"
    default_message = "Invalid block proposal"


class ConsensusBlockValidationFailed(ConsensusError):
    """A block failed consensus validation."""

    prefix = "Block validation failed"
    default_message = "Block validation failed"


class HotStuffError(ConsensusError):
    """The BFT protocol could not make progress."""

    prefix = "HotStuff consensus error"
    default_message = "HotStuff consensus error"


class PoWMiningError(ConsensusError):
    """Proof-of-work mining failed."""

    prefix = "PoW mining error"
    default_message = "PoW mining error"


class HashBackendError(ConsensusError):
    """The hash backend produced an unusable result."""

    prefix = "Hash backend error"
    default_message = "Hash backend error"


class ConsensusSyncError(ConsensusError):
    """A block synchronisation error surfaced inside consensus."""

    prefix = "Block sync error"
    default_message = "Block sync error"