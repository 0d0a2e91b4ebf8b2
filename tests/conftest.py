from unittest.mock import MagicMock

import pytest

from address_autocomplete.app import create_app
from address_autocomplete.config import Config


def echo_search(index, query, **kwargs):
  # return the query as full_addr and the geo point as the sort value so the
  # tests can check what reached elasticsearch
  match = query["bool"]["must"][0].get("match_phrase_prefix", {})
  q = match.get("full_addr", "")
  sort = kwargs.get("sort")
  location = sort[0]["_geo_distance"]["location"] if sort else None
  return {
    "hits": {
      "total": {"value": 1},
      "hits": [{
        "_source": {"full_addr": q},
        "sort": ["{:g},{:g}".format(location["lon"], location["lat"])] if location else []
      }]
    }
  }


@pytest.fixture
def config():
  return Config(
    es_endpoint="http://localhost:9200",
    es_ca_cert="ca.crt",
    es_username="elastic",
    es_password="secret",
    es_index="test",
  )


@pytest.fixture
def es():
  client = MagicMock()
  client.search.side_effect = echo_search
  return client


@pytest.fixture
def client(config, es):
  app = create_app(config, es)
  return app.test_client()
