import logging
from typing import Hashable, List

from structkit.core.flyweightfactory import CacheRegistry
from structkit.core.keys import CellKey


class Spreadsheet:
    """A named sheet whose grid is the registry's shared cache for that name."""

    def __init__(self, registry: CacheRegistry, name: Hashable) -> None:
        self.name = name
        self.grid = registry.get_or_create(name)

    def set_value(self, coord: CellKey, value: int | float) -> None:
        self.grid.set(coord, value)

    def value(self, coord: CellKey) -> int | float | None:
        return self.grid.get(coord)

    @property
    def total(self) -> int | float:
        return self.grid.total()


def run(playground: "structkit.core.playground.Playground") -> List[str]:  # noqa: F821
    ss1 = Spreadsheet(playground.registry, "ss1")
    ss1.set_value(CellKey.parse("A1"), 100)
    ss1.set_value(CellKey.parse("J20"), 200)

    ss2 = Spreadsheet(playground.registry, "ss2")
    ss2.set_value(CellKey.parse("F10"), 200)
    ss2.set_value(CellKey.parse("G23"), 250)

    cells_created = ss1.grid.override_count() + ss2.grid.override_count()
    logging.info("spreadsheet demo created %d override cells", cells_created)
    return [
        f"SS1 Total: {ss1.total}",
        f"SS2 Total: {ss2.total}",
        f"Cells created: {cells_created}",
    ]
