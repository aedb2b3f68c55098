from dotenv import load_dotenv
import logging
load_dotenv()

from eos_graphql import config
from eos_graphql import services
from eos_graphql.app_server import GraphQLServer

if config.APP_ENV == 'prod':
    log_level = logging.WARNING
    log_level_name = 'WARNING'
else:
    # dev
    log_level = logging.INFO
    log_level_name = 'INFO'

logging.basicConfig(level=log_level, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)
logger.info(f"Logging level set to {log_level_name} based on APP_ENV='{config.APP_ENV}'")


def main():
    server = GraphQLServer(services.api_client_eos)
    server.run(host=config.APP_HOST, port=config.APP_PORT)


if __name__ == "__main__":
    main()
