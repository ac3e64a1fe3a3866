from typing import List


def run(playground: "structkit.core.playground.Playground") -> List[str]:  # noqa: F821
    factory = playground.loggers
    logger = factory.logger("structkit.demo", "UnitTest")
    same = factory.logger("structkit.demo", "UnitTest")
    other = factory.logger("structkit.demo", "Network")

    logger.info("flyweight logger ready")
    other.debug("second channel ready")

    return [
        f"Logger {logger.name} shared: {logger is same}",
        f"Logger {other.name} distinct: {other is not logger}",
        f"Channels registered: {len(factory)}",
    ]
