from typing import List

from structkit.patterns.composite import CompositePart, CustomerOrder, Part


def run(playground: "structkit.core.playground.Playground") -> List[str]:  # noqa: F821
    door_window = CompositePart(
        "DoorWindow", Part("Window", 100.50), Part("Window Switch", 12)
    )
    door = CompositePart(
        "Door", door_window, Part("Door Loom", 80), Part("Door Handles", 43.40)
    )
    hood = Part("Hood", 320)

    order = CustomerOrder("Seyha", [hood, door, door_window])
    lines = [order.details()]
    lines.extend(f"{part.name} with price {part.price:.2f}" for part in order.parts)
    return lines
