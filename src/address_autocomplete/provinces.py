"""Canadian provinces and territories keyed by their census pruid.

Data from Statistics Canada:
  https://www150.statcan.gc.ca/n1/pub/92-500-g/2016002/tbl/tbl_4.6-eng.htm
"""
from enum import IntEnum
from types import MappingProxyType
from typing import NamedTuple, Optional


class Pruid(IntEnum):
  NEWFOUNDLAND_AND_LABRADOR = 10
  PRINCE_EDWARD_ISLAND = 11
  NOVA_SCOTIA = 12
  NEW_BRUNSWICK = 13
  QUEBEC = 24
  ONTARIO = 35
  MANITOBA = 46
  SASKATCHEWAN = 47
  ALBERTA = 48
  BRITISH_COLUMBIA = 59
  YUKON = 60
  NORTHWEST_TERRITORIES = 61
  NUNAVUT = 62


class Province(NamedTuple):
  name: str
  abbr: str


PROVINCES = MappingProxyType({
  Pruid.NEWFOUNDLAND_AND_LABRADOR: Province("Newfoundland and Labrador", "NL"),
  Pruid.PRINCE_EDWARD_ISLAND: Province("Prince Edward Island", "PE"),
  Pruid.NOVA_SCOTIA: Province("Nova Scotia", "NS"),
  Pruid.NEW_BRUNSWICK: Province("New Brunswick", "NB"),
  Pruid.QUEBEC: Province("Quebec", "QC"),
  Pruid.ONTARIO: Province("Ontario", "ON"),
  Pruid.MANITOBA: Province("Manitoba", "MB"),
  Pruid.SASKATCHEWAN: Province("Saskatchewan", "SK"),
  Pruid.ALBERTA: Province("Alberta", "AB"),
  Pruid.BRITISH_COLUMBIA: Province("British Columbia", "BC"),
  Pruid.YUKON: Province("Yukon", "YT"),
  Pruid.NORTHWEST_TERRITORIES: Province("Northwest Territories", "NT"),
  Pruid.NUNAVUT: Province("Nunavut", "NU"),
})


def _as_code(pruid) -> Optional[int]:
  # bool is an int subclass
  if pruid is None or isinstance(pruid, bool):
    return None
  if isinstance(pruid, int):
    return pruid
  if isinstance(pruid, float):
    return int(pruid) if pruid.is_integer() else None
  if isinstance(pruid, str) and pruid.strip().isdecimal():
    return int(pruid.strip())
  return None


def lookup_province(pruid) -> Optional[Province]:
  """find the province for a pruid

  Indexes loaded from CSV often hold the code as "35" or 35.0, both
  resolve the same as 35.

  Args:
      pruid: region identifier as stored in the address document

  Returns:
      Province or None when the value is not one of the 13 codes
  """
  code = _as_code(pruid)
  if code is None:
    return None
  return PROVINCES.get(code)


def province_name(pruid) -> str:
  province = lookup_province(pruid)
  return province.name if province else ""


def province_abbr(pruid) -> str:
  province = lookup_province(pruid)
  return province.abbr if province else ""
