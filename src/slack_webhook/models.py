"""Data models for Slack webhook payloads."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from slack_webhook.exceptions import InvalidArgumentError

FALLBACK_SEPARATOR = " - "


class AttachmentColor(Enum):
    """Named attachment colors supported by Slack."""

    GOOD = "good"
    WARNING = "warning"
    DANGER = "danger"


def parse_color(color: AttachmentColor | str) -> AttachmentColor:
    """Resolve a color name into an AttachmentColor."""
    if isinstance(color, AttachmentColor):
        return color
    try:
        return AttachmentColor(color)
    except ValueError:
        allowed = ", ".join(c.value for c in AttachmentColor)
        raise InvalidArgumentError(
            f"color must be one of {allowed}, got {color!r}"
        ) from None


@dataclass(frozen=True)
class Attachment:
    """A rich attachment block shown beneath a Slack message.

    Attributes:
        title: Bold heading of the attachment.
        text: Main attachment body.
        color: Color of the bar on the left edge.
        fallback: Plain-text summary for clients without rich formatting.
        title_link: Optional URL the title links to.
        pretext: Optional text shown above the attachment block.
    """

    title: str
    text: str
    color: AttachmentColor
    fallback: str
    title_link: str | None = None
    pretext: str | None = None

    def __post_init__(self) -> None:
        if not self.title:
            raise InvalidArgumentError("title must not be empty")
        if not self.text:
            raise InvalidArgumentError("text must not be empty")
        object.__setattr__(self, "color", parse_color(self.color))
        if not self.fallback:
            object.__setattr__(self, "fallback", f"{self.title}{FALLBACK_SEPARATOR}{self.text}")

    def to_dict(self) -> dict[str, str]:
        """Convert to the webhook JSON shape, omitting unset optional fields."""
        data = {
            "fallback": self.fallback,
            "title": self.title,
            "text": self.text,
            "color": self.color.value,
        }
        if self.title_link:
            data["title_link"] = self.title_link
        if self.pretext:
            data["pretext"] = self.pretext
        return data


@dataclass(frozen=True)
class Message:
    """A message posted to an incoming webhook."""

    text: str
    channel: str
    username: str
    icon_emoji: str
    attachments: tuple[Attachment | dict[str, Any], ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the webhook JSON shape."""
        data: dict[str, Any] = {
            "text": self.text,
            "username": self.username,
            "icon_emoji": self.icon_emoji,
            "channel": self.channel,
        }
        if self.attachments:
            data["attachments"] = [
                a.to_dict() if isinstance(a, Attachment) else dict(a) for a in self.attachments
            ]
        return data
