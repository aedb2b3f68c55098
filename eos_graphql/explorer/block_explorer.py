import logging
from typing import Dict, Any, List

from ..exceptions import InvalidInputError, NotFoundError
from ..providers.api_client_interface import AbstractChainClient
from ..utils.action_counter import enrich_block

logger = logging.getLogger(__name__)

class BlockExplorer:
    """
    BlockExplorer (read-only view of the chain)

    Turns GraphQL queries into calls against the chain API client and adds
    the derived fields the node does not report itself.
    """

    def __init__(self, api_client: AbstractChainClient):
        """
        :param api_client: AbstractChainClient implementation (EosRpcClient in production).
        """
        self._api = api_client
        logger.info("BlockExplorer initialized.")

    async def get_chain_info(self) -> Dict[str, Any]:
        return await self._api.get_info()

    async def get_block(self, block_num: int) -> Dict[str, Any]:
        """
        Fetches one block and computes its actions_count.

        :param block_num: Block number, 1-based.
        """
        if block_num < 1:
            raise NotFoundError(f"Block {block_num} does not exist (block numbers start at 1)")

        data = await self._api.get_block(block_num)
        return enrich_block(data)

    async def get_blocks(self, block_num: int, limit: int) -> List[Dict[str, Any]]:
        """
        Fetches `limit` blocks going down from `block_num`: n, n-1, ..., n-limit+1.

        Requests are sent one at a time, so the result order is the request order.
        A failure on any block fails the whole range.
        """
        if limit < 0:
            raise InvalidInputError(f"limit must be a non-negative integer, got {limit}")
        if limit == 0:
            return []

        lowest = block_num - limit + 1
        if lowest < 1:
            raise NotFoundError(
                f"Range {block_num}..{lowest} goes below block 1"
            )

        logger.info(f"BlockExplorer: Fetching {limit} blocks starting at {block_num}.")
        blocks = []
        for n in range(block_num, lowest - 1, -1):
            blocks.append(await self.get_block(n))
        return blocks

    async def get_abi(self, account: str) -> Dict[str, Any]:
        """Passthrough: the ABI document deployed on `account`."""
        return await self._api.get_abi(account)
