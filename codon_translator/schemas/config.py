from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator

OutputMode = Literal["flat", "report"]
SymbolStyle = Literal["three", "one"]


class OutputSettings(BaseModel):
    """How a translation is rendered for a single run."""
    mode: OutputMode = "flat"
    separator: Optional[str] = None  # None: space for three-letter, nothing for one-letter
    symbols: SymbolStyle = "three"

    model_config = ConfigDict(extra="forbid")

    @field_validator("separator")
    @classmethod
    def _validate_separator(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value not in (" ", "-", ""):
            raise ValueError(f"Unsupported separator: {value!r} (use ' ', '-' or '')")
        return value
