# coldl3

An asyncio library of building blocks for the COLD L3 chain. It covers block
records and sync, commitments, consensus and a header bridge. It has no
dependencies outside the standard library.

## What is in it

### Blocks and block sync

- `coldl3.blocks`: the dataclasses `BlockHeader`, `Transaction`, `TxInput`,
  `TxOutput`, `BlockProof` and `Block`, plus the `ProofType` enum (`POW`,
  `POS`, `HYBRID`). `BlockHeader.verify()` raises `InvalidTimestamp` when the
  timestamp is zero. It raises `InvalidGenesisBlock` when a height-0 header
  has a non-zero `prev_hash`. `BlockHeader.hash()` returns 32 zero bytes for
  every header.
- `coldl3.parser`: `FuegoBlockParser`, a block source that knows only the
  genesis block (height 0, timestamp 1234567890, difficulty 1).
  - `get_block_by_height` returns `None` for any other height.
  - `get_block_by_hash` always returns `None`.
  - `parse_block_data` returns the genesis block.
  - `validate_block` accepts every block.
- `coldl3.validation`: `validate_block`, `validate_transaction`,
  `validate_input`, `validate_output` and `validate_proof`. A transaction must
  have the following:
  - a non-zero fee,
  - at least one input and at least one output,
  - a signature on every input,
  - a non-zero amount and an address on every output.
- `coldl3.block_sync`: `BlockSync`.
  - `sync_blocks(from_height)` fetches consecutive blocks from a parser,
    validates them and caches them by header hash.
  - `fast_sync(target_height)` syncs in batches of 100.
  - `get_block_by_hash` looks in the cache first, then asks the parser.
  - `current_height` and `cache_size` are properties.
- `coldl3.sync_errors`: `BlockSyncError` and its subclasses.

### Commitments

- `coldl3.heat`: `HeatCommitmentCalculator(heat_factor=1)`. `calculate(data)`
  hashes the heat factor as 8 little-endian bytes, then the data, then `b"HEAT"`,
  with BLAKE2b. It returns the first 32 bytes of the digest.
- `coldl3.yield_commitment`: `YieldCommitmentCalculator(yield_rate=1.0)`.
  `calculate(data)` works the same way with the rate as a little-endian double
  and `b"YIELD"`. `calculate_yield_amount(data)` returns the data length times
  the rate, truncated and never negative.
- `coldl3.commitments`: `CommitmentEngine` calculates both kinds of commitment.
  `verify_commitment(commitment, data)` checks a HEAT commitment. `HeatCommitment`
  and `YieldCommitment` records check data against their stored `data_hash`,
  which is `data_hash(data)`: the first 32 bytes of BLAKE2b.
- `coldl3.commitment_errors`: `CommitmentError` and its subclasses.

### Consensus

- `coldl3.consensus_config`: `ConsensusConfig` (node id, node count, block time
  in seconds, maximum block size, minimum finality, PoW difficulty, merge
  mining on or off).
- `coldl3.fuego_hash`: `FuegoHash`, a BLAKE2b-based 32-byte hasher that caches
  its results. It offers `hash`, `hash_block_header`, `verify`, `cache_stats`
  and `clear_cache`.
- `coldl3.pow_mining`: `meets_difficulty(block_hash, difficulty)` counts
  leading zero bits. `PoWMiner` searches nonces with `mine_block(block,
  difficulty)`; it sets the header nonce and timestamp and writes the nonce
  into the proof data. `start()` and `stop()` run a background merge-mining
  loop.
- `coldl3.hotstuff`: `HotStuffConsensus` takes a block through the
  pre-prepare, prepare and commit phases. Votes are simulated: every node but
  the leader votes. A view-management loop runs while it is started.
- `coldl3.consensus`: `Consensus` ties these together.
  - `start_consensus()` and `stop_consensus()` start and stop the engine.
  - `propose_block(transactions)` builds a block with a Merkle root over the
    transaction hashes, stores a `BlockProposal` and submits the block to
    HotStuff.
  - `merkle_root(transactions)` is public.
  - `status` is a `ConsensusStatus`.
- `coldl3.consensus_errors`: `ConsensusError` and its subclasses.

### Bridge

- `coldl3.fuego`: `FuegoHeaderVerifier.verify_header(header)` rejects headers
  that fail any of these rules:
  - a genesis header must not point at a previous block,
  - the timestamp must be no more than one hour ahead,
  - the difficulty must not be zero.

  It records each result under the header hash.
- `coldl3.arbitrum`: `ArbitrumClient.submit_proof(submission)` records a
  confirmed `SubmissionResult` for each `ProofSubmission`.
- `coldl3.relayer`: `Relayer` runs relay rounds every `RelayerConfig.interval`
  seconds and counts them in `RelayerStats`. About one round in ten fails with
  `RelayerError`.
- `coldl3.bridge`: `Bridge`.
  - `start()` and `stop()` start and stop the bridge and its relayer.
  - `verify_fuego_header(header)` verifies a header.
  - `create_bridge_proof(block)` returns a pending `BridgeProof`.
  - `submit_to_arbitrum(proof)` submits a proof and moves it from pending to
    submitted.
  - `state`, `stats`, `pending_proofs_count` and `submitted_proofs_count` are
    properties.

  Operations other than start and stop raise `BridgeNotRunning` unless the
  bridge is running.
- `coldl3.bridge_errors`: `BridgeError` and its subclasses.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Example

```python
import asyncio

from coldl3.block_sync import BlockSync
from coldl3.commitments import CommitmentEngine


async def main():
    syncer = BlockSync()
    blocks = await syncer.sync_blocks(0)
    print(len(blocks), syncer.current_height)  # 1 1

    engine = CommitmentEngine()
    commitment = engine.calculate_heat_commitment(b"payload")
    print(engine.verify_commitment(commitment, b"payload"))  # True


asyncio.run(main())
```

Errors are raised as exceptions. Each area has its own base class:

- `coldl3.sync_errors.BlockSyncError`
- `coldl3.commitment_errors.CommitmentError`
- `coldl3.consensus_errors.ConsensusError`
- `coldl3.bridge_errors.BridgeError`

Progress is reported through the `logging` module, not printed.

## What it does not do

- There is no command-line program or node daemon, and no peer-to-peer
  networking. The package is a library only.
- Nothing is stored on disk. Caches, proofs and receipts live in memory.
- The parts that would talk to other systems are simulated:
  - the block parser serves only the genesis block,
  - the Arbitrum client and the Fuego verifier make no network calls, and
    wait a short fixed delay instead,
  - the relayer does no real relaying.
- `BlockHeader.hash()` returns 32 zero bytes for every header. As a result,
  everything keyed by header hash holds at most one entry per map: the block
  cache, proposals, verifications and bridge proofs.

## Running the tests

```
pytest
```