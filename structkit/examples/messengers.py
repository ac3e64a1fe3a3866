from typing import List

from structkit.patterns.bridge import (
    PlainMessageHandler,
    QuickMessageSender,
    SecureMessageHandler,
    SelfDestructingMessageHandler,
    VIPMessageSender,
)


def run(playground: "structkit.core.playground.Playground") -> List[str]:  # noqa: F821
    senders = [QuickMessageSender(), VIPMessageSender()]
    handlers = [
        PlainMessageHandler(),
        SecureMessageHandler(),
        SelfDestructingMessageHandler(),
    ]
    return [
        sender.send(handler, "Hello") for handler in handlers for sender in senders
    ]
