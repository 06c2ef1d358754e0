"""
Environment-driven settings for the token engine.

Settings are read from ``NEO_TOKENS_*`` environment variables or a ``.env``
file and turned into an immutable EngineConfig snapshot.
"""
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.enums import Algorithm


class TokenSettings(BaseSettings):
    """Token engine settings."""

    model_config = SettingsConfigDict(
        env_prefix="NEO_TOKENS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Signing
    algorithm: Algorithm = Field(default=Algorithm.HS256)
    secret_key: Optional[SecretStr] = Field(default=None)
    secret_key_file: Optional[Path] = Field(default=None)
    private_key: Optional[SecretStr] = Field(default=None)
    private_key_file: Optional[Path] = Field(default=None)
    public_key: Optional[str] = Field(default=None)
    public_key_file: Optional[Path] = Field(default=None)

    # Validation
    required_claims: str = Field(default="")  # comma-separated claim names
    clock_skew_seconds: int = Field(default=0, ge=0)
    require_expiration: bool = Field(default=True)

    # Issuance
    include_not_before: bool = Field(default=False)
    issuer: Optional[str] = Field(default=None)
    default_ttl_seconds: int = Field(default=900, gt=0)  # 15 minutes

    def get_required_claims(self) -> List[str]:
        """Get required claim names as a list."""
        return [name.strip() for name in self.required_claims.split(",") if name.strip()]


@lru_cache()
def get_token_settings() -> TokenSettings:
    """Get cached token settings instance."""
    return TokenSettings()
