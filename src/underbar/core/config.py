import os
from pydantic import BaseModel, Field

from underbar.core.enums import SchedulerKind


class Settings(BaseModel):
    LOG_LEVEL: str = "INFO"  # default level for setup_logger
    DEFAULT_SCHEDULER: SchedulerKind = Field(default=SchedulerKind.ASYNCIO)

    @classmethod
    def load(cls) -> "Settings":
        values = {}

        log_level = os.getenv("UNDERBAR_LOG_LEVEL")
        if log_level:
            values["LOG_LEVEL"] = log_level.upper()

        scheduler = os.getenv("UNDERBAR_SCHEDULER")
        if scheduler:
            values["DEFAULT_SCHEDULER"] = scheduler.lower()

        return cls(**values)


settings = Settings.load()
