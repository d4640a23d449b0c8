"""Stand-alone block, transaction and proof validation."""

from __future__ import annotations

from coldl3.blocks import Block, BlockProof, ProofType, Transaction, TxInput, TxOutput


def validate_block(block: Block) -> bool:
    """Validate header, transactions and proof of ``block``.

    Header rule violations raise; other failures return False.
    """
    if not block.header.verify():
        return False
    if not all(validate_transaction(tx) for tx in block.transactions):
        return False
    return validate_proof(block.proof)


def validate_transaction(tx: Transaction) -> bool:
    """Return True if the transaction pays a fee and has valid inputs and outputs."""
    if tx.fee == 0:
        return False
    if not tx.inputs or not tx.outputs:
        return False
    return all(map(validate_input, tx.inputs)) and all(map(validate_output, tx.outputs))


def validate_input(tx_input: TxInput) -> bool:
    """Return True if the input carries a signature."""
    return bool(tx_input.signature)


def validate_output(tx_output: TxOutput) -> bool:
    """Return True if the output has a non-zero amount and an address."""
    return tx_output.amount != 0 and bool(tx_output.address)


def validate_proof(proof: BlockProof) -> bool:
    """Return True for any proof of a known proof type."""
    return isinstance(proof.proof_type, ProofType)