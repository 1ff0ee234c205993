"""Settings for the OmniKassa gateway integration.

Read on import from environment variables or a local `.env` file (see
`.env.example`). Only the signing key is needed for normal operation; orders
can be built and serialized without it and signed later.
"""

import base64
import binascii

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GatewaySettings(BaseSettings):
    """Typed view of gateway configuration from environment variables."""

    service_name: str = "omnikassa-gateway"
    log_level: str = "INFO"
    # Base64 encoded, as handed out in the OmniKassa dashboard.
    signing_key: str | None = None
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("signing_key")
    @classmethod
    def _check_signing_key(cls, value: str | None) -> str | None:
        # An empty SIGNING_KEY= line in .env means "not configured".
        if value is None or not value.strip():
            return None
        try:
            base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ValueError("SIGNING_KEY must be base64 encoded") from exc
        return value


settings = GatewaySettings()
