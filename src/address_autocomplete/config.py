from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
  """startup configuration, read once from environment variables

  Field names map to the upper-case variables (ES_ENDPOINT, API_PORT, ...).
  Empty variables count as missing.
  """
  model_config = SettingsConfigDict(
    case_sensitive=False,
    env_ignore_empty=True,
    extra="ignore",
    frozen=True,
  )

  es_endpoint: str
  es_ca_cert: str
  es_username: str
  es_password: str
  es_index: str
  api_port: int = 3000
  api_host: str = "0.0.0.0"
  es_request_timeout: Optional[float] = None
  log_level: str = "INFO"

  @field_validator("log_level")
  @classmethod
  def upper_log_level(cls, value: str) -> str:
    return value.upper()
