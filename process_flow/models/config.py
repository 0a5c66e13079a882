"""Resolver configuration."""

from typing import Optional

from pydantic import BaseModel, Field


class ResolverConfig(BaseModel):
    """Configuration for the process flow service."""

    max_definitions: Optional[int] = Field(default=None, ge=1)
    rgb_separator: str = ", "
    log_level: str = "INFO"
