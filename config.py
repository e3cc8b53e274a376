"""
config.py — Application configuration through environment variables.
All variables are prefixed with INTCALC_.
"""
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Integer domain (32-bit signed by default)
    int_bits: int = Field(default=32, ge=2, le=128)
    overflow_policy: Literal["error", "wrap"] = "error"

    # Input limits
    max_input_length: int = Field(default=10_000, ge=1)
    max_nesting_depth: int = Field(default=64, ge=1)  # parentheses and unary minus
    # /parse only: deepest tree returned as JSON
    max_tree_depth: int = Field(default=100, ge=1)

    # Logging
    log_level: str = "INFO"

    # App
    app_title: str = "IntCalc"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="INTCALC_", env_file=".env", extra="ignore")
