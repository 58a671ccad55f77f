from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

SeedMode = Literal["strict", "missing"]


class Settings(BaseSettings):
    app_env: str = "dev"

    # Mongo
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "stock_brokerage"
    # server selection timeout; an unreachable server fails the connect step
    mongodb_timeout_ms: int = 5000

    # Seeding
    # "strict": one insert_many, a rerun on a seeded db fails on the unique symbol index
    # "missing": insert only the seed symbols not already present
    seed_mode: SeedMode = "strict"

    # ignore extra keys in .env
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

settings = Settings()
