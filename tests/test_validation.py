import pytest

from coldl3.blocks import (
    Block,
    BlockHeader,
    BlockProof,
    ProofType,
    Transaction,
    TxInput,
    TxOutput,
)
from coldl3.sync_errors import InvalidTimestamp
from coldl3.validation import (
    validate_block,
    validate_input,
    validate_output,
    validate_proof,
    validate_transaction,
)


def _valid_tx(**overrides):
    fields = dict(
        hash=bytes(32),
        inputs=[TxInput(prev_tx_hash=bytes(32), output_index=0, signature=bytes([1]) * 64)],
        outputs=[TxOutput(amount=100, address=bytes([1]) * 32, commitment=bytes(32))],
        fee=1,
        timestamp=1234567890,
    )
    fields.update(overrides)
    return Transaction(**fields)


def _header(**overrides):
    fields = dict(
        height=1,
        prev_hash=bytes(32),
        merkle_root=bytes([1]) * 32,
        timestamp=1234567890,
        nonce=0,
        difficulty=1,
    )
    fields.update(overrides)
    return BlockHeader(**fields)


def test_block_validation():
    block = Block(header=_header(), transactions=[], proof=BlockProof(ProofType.POW, b""))
    assert validate_block(block) is True


def test_transaction_validation():
    assert validate_transaction(_valid_tx()) is True


def test_invalid_transaction():
    tx = Transaction(hash=bytes(32), inputs=[], outputs=[], fee=0, timestamp=1234567890)
    assert validate_transaction(tx) is False


def test_transaction_without_fee_is_invalid():
    assert validate_transaction(_valid_tx(fee=0)) is False


def test_transaction_with_unsigned_input_is_invalid():
    tx = _valid_tx(inputs=[TxInput(prev_tx_hash=bytes(32), output_index=0, signature=b"")])
    assert validate_transaction(tx) is False


def test_input_and_output_rules():
    assert validate_input(TxInput(bytes(32), 0, b"")) is False
    assert validate_input(TxInput(bytes(32), 0, b"\x01")) is True
    assert validate_output(TxOutput(amount=0, address=b"\x01")) is False
    assert validate_output(TxOutput(amount=5, address=b"")) is False
    assert validate_output(TxOutput(amount=5, address=b"\x01")) is True


@pytest.mark.parametrize("proof_type", list(ProofType))
def test_all_proof_types_validate(proof_type):
    assert validate_proof(BlockProof(proof_type, b"")) is True


def test_block_with_bad_transaction_is_invalid():
    block = Block(header=_header(), transactions=[_valid_tx(fee=0)])
    assert validate_block(block) is False


def test_block_with_bad_header_raises():
    block = Block(header=_header(timestamp=0))
    with pytest.raises(InvalidTimestamp):
        validate_block(block)