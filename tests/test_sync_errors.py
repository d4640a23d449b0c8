import pytest

from coldl3.sync_errors import (
    BlockNotFound,
    BlockSyncError,
    BlockValidationFailed,
    InvalidGenesisBlock,
    InvalidTimestamp,
    ParserError,
    ProofValidationFailed,
    SyncError,
    TransactionValidationFailed,
)


@pytest.mark.parametrize(
    "error_cls, message",
    [
        (BlockValidationFailed, "Block validation failed"),
        (InvalidTimestamp, "Invalid timestamp"),
        (InvalidGenesisBlock, "Invalid genesis block"),
        (TransactionValidationFailed, "Transaction validation failed"),
        (ProofValidationFailed, "Proof validation failed"),
        (BlockNotFound, "Block not found"),
    ],
)
def test_fixed_messages(error_cls, message):
    err = error_cls()
    assert str(err) == message
    assert isinstance(err, BlockSyncError)


def test_sync_error_carries_detail():
    err = SyncError("peer gone")
    assert str(err) == "Sync error: peer gone"
    assert err.detail == "peer gone"


def test_parser_error_carries_detail():
    err = ParserError("boom")
    assert str(err) == "Parser error: boom"
    assert err.detail == "boom"


def test_errors_are_catchable_as_base():
    err = InvalidTimestamp()
    assert isinstance(err, BlockSyncError)
    assert str(err) == "Invalid timestamp"


def test_custom_message_overrides_default():
    assert str(BlockNotFound("missing block 7")) == "missing block 7"