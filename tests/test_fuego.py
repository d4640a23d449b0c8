import time

import pytest

from coldl3.blocks import BlockHeader
from coldl3.fuego import FuegoHeaderVerifier

RPC_URL = "http://localhost:8080"


def make_verifier() -> FuegoHeaderVerifier:
    return FuegoHeaderVerifier(RPC_URL, network_delay=0.0)


def make_header(**overrides) -> BlockHeader:
    values = dict(
        height=1,
        prev_hash=bytes(32),
        merkle_root=bytes(32),
        timestamp=int(time.time()),
        difficulty=1000,
        nonce=0,
    )
    values.update(overrides)
    return BlockHeader(**values)


def test_verifier_creation_keeps_url():
    verifier = make_verifier()
    assert verifier.rpc_url == RPC_URL
    assert verifier.all_verified_headers == []


@pytest.mark.asyncio
async def test_header_verification():
    verifier = FuegoHeaderVerifier(RPC_URL, network_delay=0.01)
    verification = await verifier.verify_header(make_header())
    assert verification.is_valid is True
    assert verification.error_message is None
    assert verification.verification_time >= 0.0


@pytest.mark.asyncio
async def test_invalid_genesis_header():
    verifier = make_verifier()
    verification = await verifier.verify_header(make_header(height=0, prev_hash=bytes([1]) * 32))
    assert verification.is_valid is False
    assert verification.error_message == "Header validation failed"


@pytest.mark.asyncio
async def test_far_future_timestamp_is_invalid():
    verifier = make_verifier()
    verification = await verifier.verify_header(make_header(timestamp=int(time.time()) + 7200))
    assert verification.is_valid is False


@pytest.mark.asyncio
async def test_zero_difficulty_is_invalid():
    verifier = make_verifier()
    verification = await verifier.verify_header(make_header(difficulty=0))
    assert verification.is_valid is False


@pytest.mark.asyncio
async def test_verification_result_retrieval():
    verifier = make_verifier()
    header = make_header()
    await verifier.verify_header(header)
    result = verifier.get_verification_result(header.hash())
    assert result is not None
    assert result.is_valid is True
    assert len(verifier.all_verified_headers) == 1


@pytest.mark.asyncio
async def test_unknown_hash_has_no_result():
    verifier = make_verifier()
    await verifier.verify_header(make_header())
    assert verifier.get_verification_result(bytes([9]) * 32) is None


@pytest.mark.asyncio
async def test_fuego_accessibility():
    verifier = make_verifier()
    assert await verifier.is_accessible() is True