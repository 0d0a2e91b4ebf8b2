import logging
import sys

from dotenv import load_dotenv
from elasticsearch import Elasticsearch
from pydantic import ValidationError

from address_autocomplete.app import create_app
from address_autocomplete.config import Config

logger = logging.getLogger(__name__)


def create_es_client(config: Config) -> Elasticsearch:
  kwargs = {
    "ca_certs": config.es_ca_cert,
    "basic_auth": (config.es_username, config.es_password),
  }
  if config.es_request_timeout is not None:
    kwargs["request_timeout"] = config.es_request_timeout
  return Elasticsearch(config.es_endpoint, **kwargs)


def main():
  # load .env file, variables already set in the environment win
  load_dotenv()
  logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")

  try:
    config = Config()
  except ValidationError as e:
    logger.error("Invalid configuration: %s", e)
    sys.exit(1)

  logging.getLogger().setLevel(config.log_level)
  app = create_app(config, create_es_client(config))
  logger.info("Canada Address Autocomplete API is running on port %d, http://localhost:%d",
              config.api_port, config.api_port)
  app.run(host=config.api_host, port=config.api_port, threaded=True)


if __name__ == '__main__':
  main()
