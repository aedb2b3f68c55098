import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from strawberry.fastapi import GraphQLRouter

from . import config
from .explorer.block_explorer import BlockExplorer
from .providers.api_client_interface import AbstractChainClient
from .schema.query import schema

logger = logging.getLogger(__name__)

class GraphQLServer:
    """FastAPI application serving the chain GraphQL schema."""

    def __init__(self, api_client: AbstractChainClient):
        self._api = api_client
        self._explorer = BlockExplorer(api_client)

        self._app = FastAPI(title="EOS GraphQL", lifespan=self._lifespan)
        self._app.add_middleware(
            CORSMiddleware,
            allow_origins=self.parse_list_env(config.CORS_ORIGINS),
            allow_credentials=config.CORS_CREDENTIALS,
            allow_methods=self.parse_list_env(config.CORS_METHODS),
            allow_headers=self.parse_list_env(config.CORS_HEADERS),
        )

        graphql_app = GraphQLRouter(
            schema,
            context_getter=self._get_context,
            graphql_ide="graphiql" if config.GRAPHIQL_ENABLED else None,
        )
        self._app.include_router(graphql_app, prefix=config.GRAPHQL_PATH)

    @property
    def app(self) -> FastAPI:
        return self._app

    async def _get_context(self):
        return {"explorer": self._explorer}

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        logger.info(f"GraphQL endpoint ready at {config.GRAPHQL_PATH}")
        yield
        await self._api.close()

    def run(self, host: str, port: int):
        uvicorn.run(self._app, host=host, port=port)

    @staticmethod
    def parse_list_env(value_str):
        return [item.strip() for item in value_str.split(',') if item.strip()]
