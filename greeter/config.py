"""Application settings loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from greeter.greeting import GREETINGS


class Settings(BaseSettings):
    # Server (PORT has no default: the process must not start without it)
    port: int = Field(ge=0, le=65535)
    host: str = "0.0.0.0"

    # Values echoed into the greeting (unset renders as "undefined")
    node_env: str | None = None
    my_input_env_var: str | None = None

    # Greeting line
    greeter_example: Literal["aws-resources", "terraform-aws-modules"] = "aws-resources"
    greeter_greeting: str | None = None

    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalise_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @property
    def greeting_line(self) -> str:
        """Explicit greeting if configured, otherwise the example variant's line."""
        if self.greeter_greeting is not None:
            return self.greeter_greeting
        return GREETINGS[self.greeter_example]


@lru_cache
def get_settings() -> Settings:
    return Settings()
