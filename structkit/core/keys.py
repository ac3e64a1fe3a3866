#!/usr/bin/env python
import re
from typing import Hashable

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    field_validator,
)

_CELL_PATTERN = re.compile(r"^([A-Za-z])(\d+)$")


class CellKey(BaseModel):
    """Spreadsheet coordinate; frozen so equal fields hash equally."""

    model_config = ConfigDict(frozen=True)

    col: str = Field(..., min_length=1, max_length=1, description="Column letter")
    row: StrictInt = Field(..., ge=1, description="Row index, starting at 1")

    def __init__(self, col: str, row: int, **data: object) -> None:
        super().__init__(col=col, row=row, **data)

    @field_validator("col")
    @classmethod
    def check_col(cls, value: str) -> str:
        if not (value.isascii() and value.isalpha()):
            raise ValueError(f"Column must be an ASCII letter, got {value!r}")
        return value.upper()

    @classmethod
    def parse(cls, text: str) -> "CellKey":
        match = _CELL_PATTERN.match(text.strip())
        if match is None:
            raise ValueError(f"Malformed cell coordinate: {text!r}")
        return cls(match.group(1), int(match.group(2)))

    def __str__(self) -> str:
        return f"{self.col}{self.row}"


class Entry(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: Hashable = Field(..., description="Cache key")
    value: StrictInt | StrictFloat = Field(
        ..., description="Numeric value held for the key"
    )
