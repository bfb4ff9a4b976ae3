"""Centralised application settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Governance
    owner_principal: str = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
    platform_fee_basis_points: int = 50  # 5.0 %

    # Fares (smallest currency unit)
    base_fare: int = 500000
    per_km_fare: int = 100000

    # API
    log_level: str = "INFO"
    rate_limit: str = "100/minute"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
