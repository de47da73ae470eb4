"""CLI configuration."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Players
    player_name: str = "You"
    opponent_name: str = "Computer"

    # Opponent random source
    seed: Optional[int] = None

    # Round log
    log_rounds: bool = False
    log_dir: str = "logs"

    class Config:
        env_prefix = "RPSLS_"


settings = Settings()
