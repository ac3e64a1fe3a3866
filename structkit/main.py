#!/usr/bin/env python
import argparse
import logging
import sys
from typing import Dict, List

import orjson as json

import structkit.core.playground as pg
from structkit.core.baseline import ConstructionFailure


def parse_arguments(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run the structural pattern demos over a shared-state cache"
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Absolute path to <config>.json",
        action="store",
        default="",
    )
    parser.add_argument(
        "--json",
        help="Print demo output as a JSON document",
        action="store_true",
    )
    parser.add_argument("demos", nargs="*", help="Demo names to run (default: all)")
    return parser.parse_args(argv)


def render(results: Dict[str, List[str]], as_json: bool) -> str:
    if as_json:
        return json.dumps(results, option=json.OPT_INDENT_2).decode("utf-8")
    blocks = []
    for name, lines in results.items():
        blocks.append("\n".join([f"== {name} ==", *lines]))
    return "\n\n".join(blocks)


def main(argv: List[str] | None = None) -> int:
    args = parse_arguments(argv)

    try:
        playground = pg.Playground(args.config)
        results = playground.run(args.demos)
    except pg.PlaygroundConfigError as e:
        logging.error("cannot start playground: %s", e)
        return 1
    except (ConstructionFailure, ValueError) as e:
        logging.error("%s", e)
        return 1

    print(render(results, args.json))
    return 0


if __name__ == "__main__":
    sys.exit(main())
