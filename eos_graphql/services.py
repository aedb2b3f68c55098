from . import config

from .providers.eos_rpc_client import EosRpcClient

"""
Service locator: builds the shared, configured clients once.
The server receives them explicitly, tests build their own.
"""

# --- EOS node API client ---
api_client_eos = EosRpcClient(
    base_url=config.EOS_RPC_URL,
    timeout=config.EOS_RPC_TIMEOUT,
    proxy_url=config.EOS_RPC_PROXY_URL
)
