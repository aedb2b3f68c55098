import os


def _get_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


# --- Application ---
APP_ENV = os.getenv('APP_ENV', 'dev')
APP_HOST = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT = int(os.getenv('APP_PORT', '4000'))

# --- GraphQL endpoint ---
GRAPHQL_PATH = os.getenv('GRAPHQL_PATH', '/graphql')
GRAPHIQL_ENABLED = _get_bool('GRAPHIQL_ENABLED', 'true')

# --- CORS (comma separated lists) ---
CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')
CORS_METHODS = os.getenv('CORS_METHODS', '*')
CORS_HEADERS = os.getenv('CORS_HEADERS', '*')
CORS_CREDENTIALS = _get_bool('CORS_CREDENTIALS', 'false')

# --- EOS node RPC ---
EOS_RPC_URL = os.getenv('EOS_RPC_URL', 'http://api.eosnewyork.io')
EOS_RPC_TIMEOUT = float(os.getenv('EOS_RPC_TIMEOUT', '15'))
EOS_RPC_PROXY_URL = os.getenv('EOS_RPC_PROXY_URL') or None
