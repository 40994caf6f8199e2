from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="KELLYCALC_", env_file=".env", extra="ignore")

    # Output
    precision: int = Field(default=2, ge=0, le=10)  # decimals for percentages

    # Advice threshold: positive fractions below this are reported as NO_BET
    min_fraction: float = Field(default=0.0, ge=0.0, le=1.0)

    # Pipeline tracing on stderr
    verbose: bool = False


settings = Settings()
