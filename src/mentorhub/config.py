"""Application configuration via environment variables.

Uses pydantic-settings to load config from env vars with the MENTORHUB_
prefix (or a local .env file). The bare JWT_SECRET and PORT variables
are accepted too, so existing deployments keep working.

Learn: a missing signing secret is NOT fatal. The service falls back to
INSECURE_DEFAULT_SECRET and logs a warning at startup. Anyone who knows
that string can forge tokens, so always set MENTORHUB_JWT_SECRET outside
local development.
"""

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings

INSECURE_DEFAULT_SECRET = "your-secret-key"


class Settings(BaseSettings):
    """All app configuration. Set via MENTORHUB_* env vars."""

    # Auth
    jwt_secret: str = Field(
        INSECURE_DEFAULT_SECRET,
        validation_alias=AliasChoices("MENTORHUB_JWT_SECRET", "JWT_SECRET"),
    )
    jwt_algorithm: str = "HS256"
    access_token_expire_hours: int = 24
    bcrypt_rounds: int = Field(10, ge=4, le=31)

    # Server
    environment: str = "development"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = Field(5000, validation_alias=AliasChoices("MENTORHUB_PORT", "PORT"))

    # CORS
    cors_origins: list[str] = ["*"]

    model_config = {
        "env_prefix": "MENTORHUB_",
        "env_file": ".env",
        "extra": "ignore",
        "populate_by_name": True,
    }

    @field_validator("jwt_secret")
    @classmethod
    def fallback_on_empty_secret(cls, value: str) -> str:
        """An empty secret behaves like an unset one."""
        return value or INSECURE_DEFAULT_SECRET

    @property
    def uses_insecure_secret(self) -> bool:
        return self.jwt_secret == INSECURE_DEFAULT_SECRET


# Singleton — import this everywhere
settings = Settings()
