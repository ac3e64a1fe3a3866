#!/usr/bin/env python
import logging
from enum import Enum
from typing import (
    Callable,
    Dict,
    List,
    Mapping,
    Optional,
    Protocol,
    runtime_checkable,
)
from uuid import UUID, uuid4


class SharingError(Exception):
    pass


@runtime_checkable
class Sharing(Protocol):
    def share(self, message: str) -> str: ...


class FacebookSharer:
    def share(self, message: str) -> str:
        return f"Message {message} shared on Facebook"


class TwitterSharer:
    def share(self, message: str) -> str:
        return f"Message {message} shared on Twitter"


class RedditPoster:
    """Third-party style client with a callback API we cannot change."""

    def __init__(self) -> None:
        self.posted: List[str] = []

    def post(
        self,
        text: str,
        completion: Callable[[Optional[Exception], Optional[UUID]], None],
    ) -> None:
        self.posted.append(text)
        completion(None, uuid4())


class RedditSharingAdapter:
    """Presents RedditPoster through the Sharing interface."""

    def __init__(self, poster: RedditPoster) -> None:
        self.poster = poster
        self.last_post_id: Optional[UUID] = None

    def share(self, message: str) -> str:
        outcome: Dict[str, object] = {}

        def completion(error: Optional[Exception], post_id: Optional[UUID]) -> None:
            outcome["error"] = error
            outcome["post_id"] = post_id

        self.poster.post(message, completion)
        error = outcome.get("error")
        if isinstance(error, Exception):
            raise SharingError(f"Reddit post failed: {error}") from error
        self.last_post_id = outcome.get("post_id")  # type: ignore[assignment]
        return f"Message {message} posted to Reddit"


class SharerType(str, Enum):
    FACEBOOK = "Facebook"
    TWITTER = "Twitter"
    REDDIT = "Reddit"

    @property
    def description(self) -> str:
        if self is SharerType.REDDIT:
            return "Reddit Poster"
        return f"{self.value} Sharer"


class Sharer:
    def __init__(self, services: Optional[Mapping[SharerType, Sharing]] = None) -> None:
        if services is None:
            services = {
                SharerType.FACEBOOK: FacebookSharer(),
                SharerType.TWITTER: TwitterSharer(),
                SharerType.REDDIT: RedditSharingAdapter(RedditPoster()),
            }
        self.services: Dict[SharerType, Sharing] = dict(services)

    def share(self, message: str, service_type: SharerType) -> str:
        service = self.services.get(service_type)
        if service is None:
            logging.error("no sharing service configured for %s", service_type.value)
            raise ValueError(f"Unsupported sharing service: {service_type.value}")
        return service.share(message)

    def share_everywhere(self, message: str) -> List[str]:
        """Share on every service; a failing service is logged and skipped."""
        lines = []
        for service_type, service in self.services.items():
            try:
                lines.append(service.share(message))
            except SharingError as e:
                logging.error(
                    "Error occurred while trying to share message %(message)s via %(service)s: %(error)s",
                    {"message": message, "service": service_type.description, "error": e},
                )
        return lines
