import logging
from typing import Dict, Any

from ..exceptions import InvalidInputError

logger = logging.getLogger(__name__)


def has_actions(transaction: Dict[str, Any]) -> bool:
    """
    Checks whether a transaction in a block carries a receipt (and therefore actions).

    The node reports 'trx' either as an object or, for deferred transactions,
    as a bare transaction id string. Only the object form can hold a receipt.
    """
    trx = transaction.get("trx")
    return isinstance(trx, dict) and isinstance(trx.get("transaction"), dict)


def count_actions(block: Dict[str, Any]) -> int:
    """
    Returns the total number of actions across all transactions of a block.

    :param block: Raw block document as returned by get_block.
    :return: Action count; a transaction without a receipt contributes 0.
    """
    transactions = block.get("transactions")
    if not isinstance(transactions, list):
        raise InvalidInputError(
            f"Block {block.get('block_num')} has no transactions list"
        )

    count = 0
    for i, t in enumerate(transactions):
        if not isinstance(t, dict):
            raise InvalidInputError(
                f"Block {block.get('block_num')}: transaction #{i} is not an object"
            )
        if has_actions(t):
            actions = t["trx"]["transaction"].get("actions") or []
            if not isinstance(actions, list):
                raise InvalidInputError(
                    f"Block {block.get('block_num')}: actions of transaction #{i} is not a list"
                )
            count += len(actions)
    return count


def enrich_block(block: Dict[str, Any]) -> Dict[str, Any]:
    """Adds the derived 'actions_count' field to the block document and returns it."""
    block["actions_count"] = count_actions(block)
    return block
