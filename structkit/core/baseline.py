#!/usr/bin/env python
import logging
from types import MappingProxyType
from typing import Callable, Hashable, Iterable, Mapping, Tuple

from structkit.core.keys import CellKey, Entry

BaselineGenerator = Callable[[], Iterable[Tuple[Hashable, int | float]]]


class ConstructionFailure(Exception):
    pass


def grid_generator(columns: str, rows: int) -> BaselineGenerator:
    """Spreadsheet baseline: one cell per column letter and row, valued by row."""

    def generate() -> Iterable[Tuple[CellKey, int]]:
        if rows < 0:
            raise ValueError(f"rows must be non-negative, got {rows}")
        if len(set(columns.upper())) != len(columns):
            raise ValueError(f"duplicate column labels in {columns!r}")
        for col in columns:
            for row in range(1, rows + 1):
                yield CellKey(col, row), row

    return generate


def build_baseline(generator: BaselineGenerator) -> Mapping[Hashable, Entry]:
    try:
        data = {key: Entry(key=key, value=value) for key, value in generator()}
    except Exception as e:
        logging.error("baseline construction failed: %s", e)
        raise ConstructionFailure(f"Failed to build baseline: {e}") from e

    logging.debug("baseline built with %(count)d entries", {"count": len(data)})
    return MappingProxyType(data)
