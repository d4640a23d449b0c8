"""Block, header, transaction and proof data types."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from coldl3.sync_errors import InvalidGenesisBlock, InvalidTimestamp

ZERO_HASH = bytes(32)


class ProofType(enum.Enum):
    """Kind of proof attached to a block."""

    POW = "PoW"
    POS = "PoS"
    HYBRID = "Hybrid"


@dataclass
class BlockHeader:
    """Header of a block."""

    height: int
    prev_hash: bytes = ZERO_HASH
    merkle_root: bytes = ZERO_HASH
    timestamp: int = 0
    nonce: int = 0
    difficulty: int = 0

    def hash(self) -> bytes:
        """Return the header's 32-byte identity hash (all zero bytes)."""
        return ZERO_HASH

    def verify(self) -> bool:
        """Check the header's basic rules, raising on violation."""
        if self.timestamp == 0:
            raise InvalidTimestamp()
        if self.height == 0 and self.prev_hash != ZERO_HASH:
            raise InvalidGenesisBlock()
        return True


@dataclass
class TxInput:
    """Reference to a previous output being spent."""

    prev_tx_hash: bytes
    output_index: int
    signature: bytes = b""


@dataclass
class TxOutput:
    """Amount paid to an address."""

    amount: int
    address: bytes
    commitment: bytes = ZERO_HASH


@dataclass
class Transaction:
    """A transaction with its inputs and outputs."""

    hash: bytes
    inputs: list[TxInput] = field(default_factory=list)
    outputs: list[TxOutput] = field(default_factory=list)
    fee: int = 0
    timestamp: int = 0


@dataclass
class BlockProof:
    """Proof data of a block."""

    proof_type: ProofType = ProofType.POW
    proof_data: bytes = b""


@dataclass
class Block:
    """A header with its transactions and proof."""

    header: BlockHeader
    transactions: list[Transaction] = field(default_factory=list)
    proof: BlockProof = field(default_factory=BlockProof)