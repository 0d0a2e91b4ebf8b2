import logging
import math
from typing import List, Optional, Tuple

from elasticsearch import Elasticsearch

from address_autocomplete.provinces import province_abbr, province_name

logger = logging.getLogger(__name__)

MAX_RESULTS = 20
SOURCE_FIELDS = ["full_addr", "city", "postal_code", "pruid", "location"]
REQUIRED_FIELDS = ["full_addr", "city", "pruid"]
# pruid may be mapped as a number, where a term on "" is rejected
TEXT_FIELDS = ["full_addr", "city"]

Location = Tuple[float, float]


def _to_float(value: Optional[str]) -> Optional[float]:
  if value is None:
    return None
  try:
    number = float(value)
  except ValueError:
    return None
  return number if math.isfinite(number) else None


def parse_location(lat: Optional[str], lon: Optional[str]) -> Optional[Location]:
  """parse the lat/lon query parameters

  Both values have to be present and numeric, otherwise there's
  no point to sort by distance from.

  Returns:
      (lat, lon) or None
  """
  lat_value = _to_float(lat)
  lon_value = _to_float(lon)
  if lat_value is None or lon_value is None:
    return None
  return lat_value, lon_value


def build_search_request(q: str, location: Optional[Location] = None) -> dict:
  """build the keyword arguments for Elasticsearch.search

  Args:
      q (str): address prefix typed by the user
      location ((float, float), optional): (lat, lon) to rank results by distance

  Returns:
      dict: search arguments, without the index
  """
  if q.strip():
    match = {"match_phrase_prefix": {"full_addr": q}}
  else:
    match = {"match_all": {}}

  request = {
    "size": MAX_RESULTS,
    "query": {
      "bool": {
        "must": [match],
        "filter": [{"exists": {"field": field}} for field in REQUIRED_FIELDS],
        "must_not": [{"term": {field: ""}} for field in TEXT_FIELDS]
      }
    },
    "source": SOURCE_FIELDS
  }

  if location is not None:
    lat, lon = location
    request["sort"] = [
      {
        "_geo_distance": {
          "location": {"lat": lat, "lon": lon},
          "order": "asc",
          "unit": "km",
          "distance_type": "plane",
          "ignore_unmapped": True
        }
      },
      "_score"
    ]

  return request


def to_address(hit: dict, with_distance: bool = False) -> dict:
  source = hit.get("_source", {})
  address = {field: source[field] for field in SOURCE_FIELDS if field in source}
  pruid = source.get("pruid")
  address["provice"] = province_name(pruid)
  address["provice_abbr"] = province_abbr(pruid)

  # first sort value is the geo distance, passed through as returned
  sort_values = hit.get("sort")
  if with_distance and sort_values:
    address["distance"] = sort_values[0]
  return address


def autocomplete_search(es: Elasticsearch, index: str, q: str,
                        location: Optional[Location] = None) -> List[dict]:
  """search addresses starting with q, closest first when a location is given

  Args:
      es (Elasticsearch): shared client
      index (str): address index
      q (str): the query string
      location ((float, float), optional): (lat, lon) of the user

  Returns:
      list: at most MAX_RESULTS output addresses
  """
  request = build_search_request(q, location)
  logger.debug("autocomplete query on %s: %s", index, request)
  res = es.search(index=index, **request)

  hits = res["hits"]["hits"][:MAX_RESULTS]
  return [to_address(hit, with_distance=location is not None) for hit in hits]
