"""
Shared fixtures: an in-memory chain client and raw block documents
shaped like nodeos get_block responses.
"""
from typing import Any, Dict, List, Optional

import pytest

from eos_graphql.exceptions import ChainAPIError, NotFoundError
from eos_graphql.explorer.block_explorer import BlockExplorer
from eos_graphql.providers.api_client_interface import AbstractChainClient


def make_action(account="eosio.token", name="transfer", data=None) -> Dict[str, Any]:
    return {
        "account": account,
        "name": name,
        "authorization": [{"actor": "alice", "permission": "active"}],
        "data": data if data is not None else {
            "from": "alice", "to": "bob", "quantity": "1.0000 EOS", "memo": "hi"
        },
        "hex_data": "0000000000855c34",
    }


def make_transaction(n_actions: Optional[int]) -> Dict[str, Any]:
    """A transaction with a receipt holding `n_actions` actions, or no receipt when None."""
    trx: Dict[str, Any] = {
        "id": f"trx-{n_actions}",
        "signatures": ["SIG_K1_abc"],
        "compression": "none",
        "packed_context_free_data": "",
        "context_free_data": [],
        "packed_trx": "deadbeef",
    }
    if n_actions is not None:
        trx["transaction"] = {
            "expiration": "2019-01-01T00:00:30",
            "ref_block_num": 12,
            "ref_block_prefix": 3917419530,
            "max_net_usage_words": 0,
            "max_cpu_usage_ms": 0,
            "delay_sec": 0,
            "context_free_actions": [],
            "actions": [make_action() for _ in range(n_actions)],
        }
    return {"status": "executed", "cpu_usage_us": 300, "net_usage_words": 16, "trx": trx}


def make_block(block_num: int, transactions: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    return {
        "timestamp": "2019-01-01T00:00:00.000",
        "producer": "eosnewyorkio",
        "confirmed": 0,
        "previous": f"prev-{block_num - 1}",
        "transaction_mroot": "0" * 64,
        "action_mroot": "1" * 64,
        "schedule_version": 700,
        "producer_signature": "SIG_K1_producer",
        "transactions": transactions if transactions is not None else [],
        "id": f"block-{block_num}",
        "block_num": block_num,
        "ref_block_prefix": 3917419530,
    }


CHAIN_INFO = {
    "server_version": "d1bc8d3",
    "chain_id": "aca376f206b8fc25a6ed44dbdc66547c36c6c33e3a119ffbeaef943642f0e906",
    "head_block_num": 101,
    "last_irreversible_block_num": 80,
    "last_irreversible_block_id": "lib-80",
    "head_block_id": "block-101",
    "head_block_time": "2019-01-01T00:00:50.500",
    "head_block_producer": "eosnewyorkio",
    "virtual_block_cpu_limit": 200000000,
    "virtual_block_net_limit": 1048576000,
    "block_cpu_limit": 199900,
    "block_net_limit": 1048576,
    "server_version_string": "v1.8.0",
}

TOKEN_ABI = {
    "account_name": "eosio.token",
    "abi": {
        "version": "eosio::abi/1.1",
        "types": [{"new_type_name": "account_name", "type": "name"}],
        "structs": [
            {
                "name": "transfer",
                "base": "",
                "fields": [
                    {"name": "from", "type": "name"},
                    {"name": "to", "type": "name"},
                    {"name": "quantity", "type": "asset"},
                    {"name": "memo", "type": "string"},
                ],
            }
        ],
        "actions": [{"name": "transfer", "type": "transfer", "ricardian_contract": ""}],
        "tables": [
            {
                "name": "accounts",
                "index_type": "i64",
                "key_names": ["currency"],
                "key_types": ["uint64"],
                "type": "account",
            }
        ],
        "ricardian_clauses": [],
        "variants": [],
    },
}


class FakeChainClient(AbstractChainClient):
    """In-memory chain: records every call so tests can check ordering."""

    def __init__(self, blocks=None, abis=None, info=None, fail_on=None):
        self.blocks = {b["block_num"]: b for b in (blocks or [])}
        self.abis = abis or {}
        self.info = info if info is not None else CHAIN_INFO
        self.fail_on = fail_on or {}
        self.calls = []
        self.closed = False

    async def get_info(self):
        self.calls.append(("get_info",))
        return dict(self.info)

    async def get_block(self, block_num):
        self.calls.append(("get_block", block_num))
        if block_num in self.fail_on:
            raise self.fail_on[block_num]
        if block_num not in self.blocks:
            raise NotFoundError(f"Could not find block: {block_num}", node_error="unknown_block_exception")
        return dict(self.blocks[block_num])

    async def get_abi(self, account_name):
        self.calls.append(("get_abi", account_name))
        if account_name not in self.abis:
            raise NotFoundError(f"No contract deployed on account {account_name}")
        return self.abis[account_name]

    async def close(self):
        self.closed = True


@pytest.fixture
def chain_client():
    blocks = [make_block(n, [make_transaction(1)]) for n in range(90, 100)]
    blocks.append(make_block(100, [make_transaction(3), make_transaction(None)]))
    return FakeChainClient(blocks=blocks, abis={"eosio.token": TOKEN_ABI})


@pytest.fixture
def explorer(chain_client):
    return BlockExplorer(chain_client)
