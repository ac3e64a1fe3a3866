from typing import List

from structkit.patterns.adapter import Sharer, SharerType


def run(playground: "structkit.core.playground.Playground") -> List[str]:  # noqa: F821
    sharer = Sharer()
    lines = [sharer.share("Hey there", SharerType.FACEBOOK)]
    lines.extend(sharer.share_everywhere("Hello World!"))
    return lines
