import logging
from typing import List, Optional

import strawberry
from graphql import GraphQLError
from strawberry.schema.config import StrawberryConfig
from strawberry.types import Info

from ..exceptions import ChainAPIError
from ..explorer.block_explorer import BlockExplorer
from .types import Abi, Block, Chain, Long

logger = logging.getLogger(__name__)


def _explorer(info: Info) -> BlockExplorer:
    return info.context["explorer"]


def _to_graphql_error(query: str, e: ChainAPIError) -> GraphQLError:
    logger.warning(f"{query} failed ({e.code}): {e}")
    return GraphQLError(str(e), original_error=e, extensions={"code": e.code})


async def resolve_chain(info: Info) -> Optional[Chain]:
    try:
        data = await _explorer(info).get_chain_info()
    except ChainAPIError as e:
        raise _to_graphql_error("getChainMetadata", e) from e
    return Chain.from_rpc(data)


@strawberry.type
class Query:
    get_chain_metadata: Optional[Chain] = strawberry.field(
        name="getChainMetadata", resolver=resolve_chain,
        description="Current status of the remote node.",
    )
    get_chain: Optional[Chain] = strawberry.field(
        name="getChain", resolver=resolve_chain,
        deprecation_reason="Use getChainMetadata.",
    )

    @strawberry.field(name="getBlock")
    async def get_block(self, info: Info, block_num: int) -> Optional[Block]:
        try:
            data = await _explorer(info).get_block(block_num)
        except ChainAPIError as e:
            raise _to_graphql_error(f"getBlock({block_num})", e) from e
        return Block.from_rpc(data)

    @strawberry.field(name="getBlocks", description="`limit` blocks going down from `block_num`.")
    async def get_blocks(self, info: Info, block_num: int, limit: int) -> Optional[List[Block]]:
        try:
            blocks = await _explorer(info).get_blocks(block_num, limit)
        except ChainAPIError as e:
            raise _to_graphql_error(f"getBlocks({block_num}, {limit})", e) from e
        return [Block.from_rpc(b) for b in blocks]

    @strawberry.field(name="getAbi")
    async def get_abi(self, info: Info, account: str) -> Optional[Abi]:
        try:
            data = await _explorer(info).get_abi(account)
        except ChainAPIError as e:
            raise _to_graphql_error(f"getAbi({account})", e) from e
        return Abi.from_rpc(data)


schema = strawberry.Schema(
    query=Query,
    config=StrawberryConfig(
        auto_camel_case=False,
        scalar_map={
            Long: strawberry.scalar(
                name="Long",
                serialize=int,
                parse_value=int,
                description="Integer that may exceed the 32-bit range of Int (uint32/uint64 counters).",
            ),
        },
    ),
)
