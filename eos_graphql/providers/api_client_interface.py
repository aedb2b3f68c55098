from abc import ABC, abstractmethod
from typing import Dict, Any

class AbstractChainClient(ABC):
    """
    Abstract base class (interface) for an EOS chain API client.
    Declares the calls any concrete client must implement, so the HTTP
    node client can be swapped for another transport or a test double.
    """

    @abstractmethod
    async def get_info(self) -> Dict[str, Any]:
        """Get the current chain status snapshot (head block, LIB, limits)."""
        pass

    @abstractmethod
    async def get_block(self, block_num: int) -> Dict[str, Any]:
        """Get the full block document by its number."""
        pass

    @abstractmethod
    async def get_abi(self, account_name: str) -> Dict[str, Any]:
        """
        Get the ABI deployed on an account.

        :param account_name: EOS account name, e.g. 'eosio.token'.
        :return: The node response: {'account_name': ..., 'abi': {...}}.
        """
        pass

    async def close(self) -> None:
        """Release transport resources. Clients without any may keep the default."""
        pass
