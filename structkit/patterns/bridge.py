#!/usr/bin/env python
import logging
from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class MessageHandler(Protocol):
    def modify(self, message: str) -> str: ...


class PlainMessageHandler:
    def modify(self, message: str) -> str:
        return message


class SecureMessageHandler:
    """XOR-scrambles the UTF-8 bytes and renders them as hex."""

    def __init__(self, key: int = 0xCC) -> None:
        if not 0 <= key <= 0xFF:
            raise ValueError(f"key must fit in one byte, got {key}")
        self.key = key

    def modify(self, message: str) -> str:
        return bytes(b ^ self.key for b in message.encode("utf-8")).hex()

    def restore(self, scrambled: str) -> str:
        return bytes(b ^ self.key for b in bytes.fromhex(scrambled)).decode("utf-8")


class SelfDestructingMessageHandler:
    def modify(self, message: str) -> str:
        return "☠" + message


class MessageSender(ABC):
    """Delivery side of the bridge; any sender works with any handler."""

    @property
    @abstractmethod
    def channel(self) -> str:
        pass

    def send(self, handler: MessageHandler, message: str) -> str:
        modified = handler.modify(message)
        logging.debug(
            "%(sender)s delivering via %(channel)s",
            {"sender": type(self).__name__, "channel": self.channel},
        )
        return f'Message "{modified}" sent via {self.channel}'


class QuickMessageSender(MessageSender):
    channel = "e-mail"


class VIPMessageSender(MessageSender):
    channel = "P2P"


class EZMessageSender(MessageSender):
    channel = "P2P"
