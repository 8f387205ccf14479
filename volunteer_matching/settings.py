import os
from pydantic import BaseModel


class Settings(BaseModel):
    log_level: str = "INFO"
    rank_max_workers: int = 1


def get_settings() -> Settings:
    return Settings(
        log_level=os.getenv("MATCHING_LOG_LEVEL", "INFO").upper(),
        rank_max_workers=int(os.getenv("RANK_MAX_WORKERS", "1")),
    )
