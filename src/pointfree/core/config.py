import os
import typing as tp

from pydantic import BaseModel, field_validator

from pointfree.core.enums import ExcessArgs

# Spellings accepted by ``logging`` that map onto a canonical level name
_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


class Settings(BaseModel):
    EXCESS_ARGS: ExcessArgs = ExcessArgs.FORWARD
    LOG_LEVEL: tp.Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("EXCESS_ARGS", mode="before")
    @classmethod
    def _parse_excess(cls, value: tp.Any) -> tp.Any:
        if isinstance(value, str):
            return ExcessArgs(value)
        return value

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _normalise_level(cls, value: tp.Any) -> tp.Any:
        if isinstance(value, str):
            value = value.upper()
            return _LEVEL_ALIASES.get(value, value)
        return value

    @classmethod
    def load(cls) -> "Settings":
        values = {}

        excess = os.getenv("POINTFREE_EXCESS_ARGS")
        if excess:
            values["EXCESS_ARGS"] = excess

        log_level = os.getenv("LOG_LEVEL")
        if log_level:
            values["LOG_LEVEL"] = log_level

        return cls(**values)


settings = Settings.load()
