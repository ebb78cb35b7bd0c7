"""Validated settings for a game session."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from gobblet_rules.types import STARTING_INVENTORY

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class GameConfig(BaseModel):
    # A size slot exists once per cell, so more than 9 pieces could never be placed
    starting_inventory: int = Field(default=STARTING_INVENTORY, ge=1, le=9)
    clear_screen: bool = True
    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.upper()
        return value
