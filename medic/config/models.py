"""
Pydantic models for medic configuration.
"""

from enum import Enum
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models import Severity


class ColorChoice(str, Enum):
    """When to style the report with terminal colors."""
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


class MedicConfig(BaseModel):
    """Configuration for a diagnostic run."""

    model_config = ConfigDict(extra="forbid")

    color: ColorChoice = Field(default=ColorChoice.AUTO, description="Color output mode")
    fail_on: Severity = Field(
        default=Severity.ERROR,
        description="Overall severity at which the exit code becomes non-zero",
    )
    skip: List[str] = Field(default_factory=list, description="Names of checks to skip")

    @field_validator("color", mode="before")
    @classmethod
    def normalize_color(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("fail_on", mode="before")
    @classmethod
    def parse_severity(cls, v: Any) -> Any:
        if isinstance(v, str) and not isinstance(v, Severity):
            return Severity.parse(v)
        return v

    @field_validator("skip")
    @classmethod
    def validate_skip(cls, v: List[str]) -> List[str]:
        names = [name.strip() for name in v]
        if any(not name for name in names):
            raise ValueError("Check names in 'skip' must not be empty")
        return names
