#!/usr/bin/env python
from typing import List, Protocol, Sequence, runtime_checkable


def format_currency(amount: float) -> str:
    return f"${amount:,.2f}"


@runtime_checkable
class CartPart(Protocol):
    name: str

    @property
    def price(self) -> float: ...


class Part:
    def __init__(self, name: str, price: float) -> None:
        self.name = name
        self._price = price

    @property
    def price(self) -> float:
        return self._price


class CompositePart:
    """A part made of parts; nested composites are priced recursively."""

    def __init__(self, name: str, *parts: CartPart) -> None:
        self.name = name
        self.parts: List[CartPart] = list(parts)

    @property
    def price(self) -> float:
        return sum(part.price for part in self.parts)


class CustomerOrder:
    def __init__(self, customer: str, parts: Sequence[CartPart]) -> None:
        self.customer = customer
        self.parts = list(parts)

    @property
    def total_price(self) -> float:
        return sum(part.price for part in self.parts)

    def details(self) -> str:
        return f"Order for {self.customer}: Cost: {format_currency(self.total_price)}"


@runtime_checkable
class FileSystemEntry(Protocol):
    def size(self) -> int: ...

    def describe(self) -> str: ...

    def set_nesting_level(self, level: int) -> None: ...


def _megabytes(size: int) -> str:
    return f"{size / 1024 / 1024:.1f}MB"


class File:
    def __init__(self, name: str, size: int) -> None:
        if size < 0:
            raise ValueError(f"file size must be non-negative, got {size}")
        self.name = name
        self._size = size
        self.nesting_level = 0

    def size(self) -> int:
        return self._size

    def set_nesting_level(self, level: int) -> None:
        self.nesting_level = level

    def describe(self) -> str:
        indent = "\t" * self.nesting_level
        return f"{indent}- {self.name} ({_megabytes(self._size)})"

    def __str__(self) -> str:
        return self.describe()


class Directory:
    def __init__(self, name: str) -> None:
        self.name = name
        self.entries: List[FileSystemEntry] = []
        self.nesting_level = 0

    def add(self, entry: FileSystemEntry) -> "Directory":
        entry.set_nesting_level(self.nesting_level + 1)
        self.entries.append(entry)
        return self

    def size(self) -> int:
        return sum(entry.size() for entry in self.entries)

    def set_nesting_level(self, level: int) -> None:
        self.nesting_level = level
        for entry in self.entries:
            entry.set_nesting_level(level + 1)

    def describe(self) -> str:
        indent = "\t" * self.nesting_level
        lines = [f"{indent}[+] {self.name} ({_megabytes(self.size())})"]
        lines.extend(entry.describe() for entry in self.entries)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.describe()
