import logging
import re
import httpx
from typing import Dict, Any, Optional

from .api_client_interface import AbstractChainClient
from ..exceptions import ChainAPIError, RemoteUnavailableError, NotFoundError, InvalidInputError

logger = logging.getLogger(__name__)

# --- Node error names (error.name in a nodeos error body) ---
NOT_FOUND_ERRORS = {"unknown_block_exception", "account_query_exception"}
INVALID_INPUT_ERRORS = {"block_id_type_exception", "name_type_exception"}

# Up to 12 chars of [.1-5a-z], an optional 13th char restricted to [.1-5a-j]
ACCOUNT_NAME_RE = re.compile(r"[.1-5a-z]{1,12}[.1-5a-j]?\Z")


def is_valid_account_name(name: str) -> bool:
    return bool(name) and ACCOUNT_NAME_RE.fullmatch(name) is not None


class EosRpcClient(AbstractChainClient):
    """
    API client for the nodeos chain API (/v1/chain/*).
    """
    def __init__(self,
                 base_url: str,
                 timeout: float = 15,
                 proxy_url: Optional[str] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):

        self._base_url = base_url.rstrip('/')
        self._timeout = timeout

        proxy = proxy_url or None
        self._client = httpx.AsyncClient(
            timeout=timeout,
            proxy=proxy,
            transport=transport,
            headers={"Content-Type": "application/json"}
        )
        logger.info(f"EosRpcClient initialized for {self._base_url}.")

    async def _request(self, endpoint: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Performs one POST against the chain API and classifies failures.

        :param endpoint: Chain API method, e.g. 'get_block'.
        :param payload: JSON body of the call.
        :return: Decoded JSON response.
        """
        url = f"{self._base_url}/v1/chain/{endpoint}"
        try:
            response = await self._client.post(url, json=payload)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise self._classify_http_error(e) from e
        except httpx.RequestError as e:
            logger.error(f"Network error for {e.request.url}: {e}")
            raise RemoteUnavailableError(f"Network error: {e}") from e
        except ValueError as e:
            logger.error(f"Failed to decode JSON response from {url}: {e}")
            raise RemoteUnavailableError(f"JSON decode error: {e}") from e

        if not isinstance(data, dict):
            error_message = f"Invalid API response from {endpoint}: expected an object, got {type(data).__name__}"
            logger.error(error_message)
            raise RemoteUnavailableError(error_message)
        return data

    @staticmethod
    def _classify_http_error(e: httpx.HTTPStatusError) -> ChainAPIError:
        """Maps a nodeos error body ({'code', 'message', 'error': {...}}) to a typed error."""
        status = e.response.status_code
        try:
            body = e.response.json()
        except ValueError:
            body = None

        node_error = body.get("error") if isinstance(body, dict) else None
        if not isinstance(node_error, dict):
            logger.error(f"HTTP error for {e.request.url}: {status} - {e.response.text}")
            if status >= 500:
                return RemoteUnavailableError(f"HTTP error: {status}")
            return ChainAPIError(f"HTTP error: {status}")

        name = node_error.get("name") or ""
        what = node_error.get("what") or body.get("message") or "unknown error"
        details = node_error.get("details") or []
        detail_text = "; ".join(d.get("message", "") for d in details if isinstance(d, dict))
        message = f"{what}: {detail_text}" if detail_text else what

        if name in NOT_FOUND_ERRORS or "unknown key" in detail_text:
            logger.warning(f"Node reported not found for {e.request.url}: {name} - {message}")
            return NotFoundError(message, node_error=name)
        if name in INVALID_INPUT_ERRORS:
            logger.warning(f"Node rejected input for {e.request.url}: {name} - {message}")
            return InvalidInputError(message, node_error=name)

        logger.error(f"Node error for {e.request.url}: {status} {name} - {message}")
        return ChainAPIError(message, node_error=name)

    async def get_info(self) -> Dict[str, Any]:
        return await self._request("get_info", {})

    async def get_block(self, block_num: int) -> Dict[str, Any]:
        return await self._request("get_block", {"block_num_or_id": block_num})

    async def get_abi(self, account_name: str) -> Dict[str, Any]:
        if not is_valid_account_name(account_name):
            raise InvalidInputError(f"Invalid account name: {account_name!r}")

        data = await self._request("get_abi", {"account_name": account_name})
        if not data.get("abi"):
            logger.warning(f"Account {account_name} has no ABI deployed. Response: {data}")
            raise NotFoundError(f"No contract deployed on account {account_name}")
        return data

    async def close(self) -> None:
        await self._client.aclose()
        logger.info("EosRpcClient closed.")
