"""
GraphQL object types mirroring the nodeos chain API response shapes.

Field names keep the node's snake_case wire names. Every type has a
``from_rpc`` constructor that picks its fields out of the raw JSON dict,
so unknown keys from newer node versions are ignored.
"""
from typing import Any, Dict, List, NewType, Optional

import strawberry
from strawberry.scalars import JSON

# Integer that may exceed the 32-bit range of Int (uint32/uint64 counters).
# Registered as a GraphQL scalar through the schema config in query.py.
Long = NewType("Long", int)


def _list(data: Dict[str, Any], key: str) -> List[Any]:
    return data.get(key) or []


# --- Chain status ---

@strawberry.type
class Chain:
    server_version: Optional[str] = None
    server_version_string: Optional[str] = None
    server_full_version_string: Optional[str] = None
    chain_id: Optional[str] = None
    head_block_num: Optional[int] = None
    head_block_id: Optional[str] = None
    head_block_time: Optional[str] = None
    head_block_producer: Optional[str] = None
    last_irreversible_block_num: Optional[int] = None
    last_irreversible_block_id: Optional[str] = None
    last_irreversible_block_time: Optional[str] = None
    fork_db_head_block_num: Optional[int] = None
    fork_db_head_block_id: Optional[str] = None
    earliest_available_block_num: Optional[int] = None
    block_cpu_limit: Optional[Long] = None
    block_net_limit: Optional[Long] = None
    virtual_block_cpu_limit: Optional[Long] = None
    virtual_block_net_limit: Optional[Long] = None

    @classmethod
    def from_rpc(cls, data: Dict[str, Any]) -> "Chain":
        return cls(
            server_version=data.get("server_version"),
            server_version_string=data.get("server_version_string"),
            server_full_version_string=data.get("server_full_version_string"),
            chain_id=data.get("chain_id"),
            head_block_num=data.get("head_block_num"),
            head_block_id=data.get("head_block_id"),
            head_block_time=data.get("head_block_time"),
            head_block_producer=data.get("head_block_producer"),
            last_irreversible_block_num=data.get("last_irreversible_block_num"),
            last_irreversible_block_id=data.get("last_irreversible_block_id"),
            last_irreversible_block_time=data.get("last_irreversible_block_time"),
            fork_db_head_block_num=data.get("fork_db_head_block_num"),
            fork_db_head_block_id=data.get("fork_db_head_block_id"),
            earliest_available_block_num=data.get("earliest_available_block_num"),
            block_cpu_limit=data.get("block_cpu_limit"),
            block_net_limit=data.get("block_net_limit"),
            virtual_block_cpu_limit=data.get("virtual_block_cpu_limit"),
            virtual_block_net_limit=data.get("virtual_block_net_limit"),
        )


# --- Actions ---

@strawberry.type
class PermissionLevel:
    actor: Optional[str] = None
    permission: Optional[str] = None


@strawberry.type(description="Typed view of a transfer-style action payload.")
class ActionData:
    from_: Optional[str] = strawberry.field(name="from", default=None)
    to: Optional[str] = None
    quantity: Optional[str] = None
    memo: Optional[str] = None

    @classmethod
    def from_rpc(cls, data: Any) -> Optional["ActionData"]:
        # Unknown contracts are reported as hex only, data is then a string
        if not isinstance(data, dict):
            return None
        return cls(
            from_=data.get("from"),
            to=data.get("to"),
            quantity=data.get("quantity"),
            memo=data.get("memo"),
        )


@strawberry.type
class Action:
    account: Optional[str] = None
    name: Optional[str] = None
    authorization: List[PermissionLevel] = strawberry.field(default_factory=list)
    data: Optional[ActionData] = None
    data_json: Optional[JSON] = strawberry.field(
        default=None, description="Action payload exactly as returned by the node."
    )
    hex_data: Optional[str] = None

    @classmethod
    def from_rpc(cls, data: Dict[str, Any]) -> "Action":
        return cls(
            account=data.get("account"),
            name=data.get("name"),
            authorization=[
                PermissionLevel(actor=a.get("actor"), permission=a.get("permission"))
                for a in _list(data, "authorization")
            ],
            data=ActionData.from_rpc(data.get("data")),
            data_json=data.get("data"),
            hex_data=data.get("hex_data"),
        )


# --- Transactions ---

@strawberry.type
class TransactionReceipt:
    expiration: Optional[str] = None
    ref_block_num: Optional[int] = None
    ref_block_prefix: Optional[Long] = None
    max_net_usage_words: Optional[int] = None
    max_cpu_usage_ms: Optional[int] = None
    delay_sec: Optional[int] = None
    context_free_actions: List[Action] = strawberry.field(default_factory=list)
    actions: List[Action] = strawberry.field(default_factory=list)

    @classmethod
    def from_rpc(cls, data: Dict[str, Any]) -> "TransactionReceipt":
        return cls(
            expiration=data.get("expiration"),
            ref_block_num=data.get("ref_block_num"),
            ref_block_prefix=data.get("ref_block_prefix"),
            max_net_usage_words=data.get("max_net_usage_words"),
            max_cpu_usage_ms=data.get("max_cpu_usage_ms"),
            delay_sec=data.get("delay_sec"),
            context_free_actions=[Action.from_rpc(a) for a in _list(data, "context_free_actions")],
            actions=[Action.from_rpc(a) for a in _list(data, "actions")],
        )


@strawberry.type
class Trx:
    id: Optional[str] = None
    signatures: List[str] = strawberry.field(default_factory=list)
    compression: Optional[str] = None
    packed_context_free_data: Optional[str] = None
    context_free_data: List[str] = strawberry.field(default_factory=list)
    packed_trx: Optional[str] = None
    transaction: Optional[TransactionReceipt] = None

    @classmethod
    def from_rpc(cls, data: Any) -> Optional["Trx"]:
        if data is None:
            return None
        # Deferred transactions are reported by id only
        if isinstance(data, str):
            return cls(id=data)
        receipt = data.get("transaction")
        return cls(
            id=data.get("id"),
            signatures=_list(data, "signatures"),
            compression=data.get("compression"),
            packed_context_free_data=data.get("packed_context_free_data"),
            context_free_data=_list(data, "context_free_data"),
            packed_trx=data.get("packed_trx"),
            transaction=TransactionReceipt.from_rpc(receipt) if isinstance(receipt, dict) else None,
        )


@strawberry.type
class Transaction:
    status: Optional[str] = None
    cpu_usage_us: Optional[int] = None
    net_usage_words: Optional[int] = None
    trx: Optional[Trx] = None

    @classmethod
    def from_rpc(cls, data: Dict[str, Any]) -> "Transaction":
        return cls(
            status=data.get("status"),
            cpu_usage_us=data.get("cpu_usage_us"),
            net_usage_words=data.get("net_usage_words"),
            trx=Trx.from_rpc(data.get("trx")),
        )


# --- Blocks ---

@strawberry.type
class Block:
    id: Optional[str] = None
    block_num: Optional[int] = None
    timestamp: Optional[str] = None
    producer: Optional[str] = None
    confirmed: Optional[int] = None
    previous: Optional[str] = None
    transaction_mroot: Optional[str] = None
    action_mroot: Optional[str] = None
    schedule_version: Optional[int] = None
    producer_signature: Optional[str] = None
    ref_block_prefix: Optional[Long] = None
    actions_count: Optional[int] = strawberry.field(
        default=None, description="Total number of actions across the block's transaction receipts."
    )
    transactions: List[Transaction] = strawberry.field(default_factory=list)

    @classmethod
    def from_rpc(cls, data: Dict[str, Any]) -> "Block":
        return cls(
            id=data.get("id"),
            block_num=data.get("block_num"),
            timestamp=data.get("timestamp"),
            producer=data.get("producer"),
            confirmed=data.get("confirmed"),
            previous=data.get("previous"),
            transaction_mroot=data.get("transaction_mroot"),
            action_mroot=data.get("action_mroot"),
            schedule_version=data.get("schedule_version"),
            producer_signature=data.get("producer_signature"),
            ref_block_prefix=data.get("ref_block_prefix"),
            actions_count=data.get("actions_count"),
            transactions=[Transaction.from_rpc(t) for t in _list(data, "transactions")],
        )


# --- ABI ---

@strawberry.type
class AbiType:
    new_type_name: Optional[str] = None
    type: Optional[str] = None


@strawberry.type
class AbiField:
    name: Optional[str] = None
    type: Optional[str] = None


@strawberry.type
class AbiStruct:
    name: Optional[str] = None
    base: Optional[str] = None
    fields: List[AbiField] = strawberry.field(default_factory=list)


@strawberry.type
class AbiAction:
    name: Optional[str] = None
    type: Optional[str] = None
    ricardian_contract: Optional[str] = None


@strawberry.type
class AbiTable:
    name: Optional[str] = None
    index_type: Optional[str] = None
    key_names: List[str] = strawberry.field(default_factory=list)
    key_types: List[str] = strawberry.field(default_factory=list)
    type: Optional[str] = None


@strawberry.type
class AbiClause:
    id: Optional[str] = None
    body: Optional[str] = None


@strawberry.type
class AbiVariant:
    name: Optional[str] = None
    types: List[str] = strawberry.field(default_factory=list)


@strawberry.type
class Abi:
    account_name: Optional[str] = None
    version: Optional[str] = None
    types: List[AbiType] = strawberry.field(default_factory=list)
    structs: List[AbiStruct] = strawberry.field(default_factory=list)
    actions: List[AbiAction] = strawberry.field(default_factory=list)
    tables: List[AbiTable] = strawberry.field(default_factory=list)
    ricardian_clauses: List[AbiClause] = strawberry.field(default_factory=list)
    variants: List[AbiVariant] = strawberry.field(default_factory=list)

    @classmethod
    def from_rpc(cls, data: Dict[str, Any]) -> "Abi":
        abi = data.get("abi") or {}
        return cls(
            account_name=data.get("account_name"),
            version=abi.get("version"),
            types=[
                AbiType(new_type_name=t.get("new_type_name"), type=t.get("type"))
                for t in _list(abi, "types")
            ],
            structs=[
                AbiStruct(
                    name=s.get("name"),
                    base=s.get("base"),
                    fields=[AbiField(name=f.get("name"), type=f.get("type")) for f in _list(s, "fields")],
                )
                for s in _list(abi, "structs")
            ],
            actions=[
                AbiAction(name=a.get("name"), type=a.get("type"), ricardian_contract=a.get("ricardian_contract"))
                for a in _list(abi, "actions")
            ],
            tables=[
                AbiTable(
                    name=t.get("name"),
                    index_type=t.get("index_type"),
                    key_names=_list(t, "key_names"),
                    key_types=_list(t, "key_types"),
                    type=t.get("type"),
                )
                for t in _list(abi, "tables")
            ],
            ricardian_clauses=[
                AbiClause(id=c.get("id"), body=c.get("body"))
                for c in _list(abi, "ricardian_clauses")
            ],
            variants=[
                AbiVariant(name=v.get("name"), types=_list(v, "types"))
                for v in _list(abi, "variants")
            ],
        )
