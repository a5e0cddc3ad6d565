"""Slack incoming-webhook sender."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from typing import Any

import httpx
from pydantic import ValidationError

from slack_webhook.config import (
    DEFAULT_BASE_URL,
    DEFAULT_ICON,
    DEFAULT_TIMEOUT,
    DEFAULT_USERNAME,
    get_settings,
)
from slack_webhook.exceptions import InvalidArgumentError, NetworkError
from slack_webhook.models import Attachment, Message

logger = logging.getLogger(__name__)

SUCCESS_RESPONSE = "ok"


def serialize_payload(message: Message) -> str:
    """Serialize a message to JSON with literal characters.

    Slack expects the payload field to carry non-ASCII characters and
    slashes as-is. ``json`` never escapes ``/``, and ``ensure_ascii=False``
    keeps unicode literal.

    Raises:
        InvalidArgumentError: If the message holds text that is not valid
            UTF-8, such as an unpaired surrogate.
    """
    payload = json.dumps(message.to_dict(), ensure_ascii=False)
    try:
        payload.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidArgumentError(f"message is not valid UTF-8: {e.reason}") from e
    return payload


def _require(**values: str) -> None:
    for name, value in values.items():
        if not value:
            raise InvalidArgumentError(f"{name} must not be empty")


class SlackWebhookSender:
    """Posts messages to Slack incoming webhooks.

    Each call to ``send`` makes exactly one POST request. Nothing is
    retried and no state is kept between calls.
    """

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the sender.

        Args:
            base_url: Webhook host and path prefix; the API key is appended.
            timeout: HTTP request timeout in seconds.
            transport: Optional httpx transport, mainly for tests.

        Raises:
            InvalidArgumentError: If timeout is not a positive number.
        """
        if timeout <= 0:
            raise InvalidArgumentError(f"timeout must be positive, got {timeout}")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def webhook_url(self, api_key: str) -> str:
        """Build the webhook URL for an API key."""
        return f"{self.base_url}/{api_key}"

    def send(
        self,
        text: str,
        api_key: str,
        channel: str,
        username: str = DEFAULT_USERNAME,
        icon: str = DEFAULT_ICON,
        attachments: Iterable[Attachment | Mapping[str, Any]] | None = None,
    ) -> bool:
        """Send a message to a Slack channel.

        Args:
            text: Message text.
            api_key: Webhook key, e.g. ``T000/B000/XXXX``.
            channel: Target channel such as ``#general``.
            username: Bot username shown on the message.
            icon: Bot icon emoji.
            attachments: Optional attachments, posted in the given order.

        Returns:
            True if Slack answered ``ok``, False for any other response.

        Raises:
            InvalidArgumentError: If text, api_key or channel is empty.
            NetworkError: If the request could not be completed.
        """
        _require(text=text, api_key=api_key, channel=channel)

        message = Message(
            text=text,
            channel=channel,
            username=username,
            icon_emoji=icon,
            attachments=tuple(
                a if isinstance(a, Attachment) else dict(a) for a in attachments or ()
            ),
        )
        payload = serialize_payload(message)

        logger.debug(
            f"Posting Slack message to {channel} "
            f"({len(message.attachments)} attachments)"
        )

        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.post(
                    self.webhook_url(api_key),
                    data={"payload": payload},
                )
        except httpx.TransportError as e:
            logger.error(f"Slack webhook request failed: {e}")
            raise NetworkError(f"Slack webhook request failed: {e}") from e

        if response.text == SUCCESS_RESPONSE:
            logger.info(f"Slack message delivered to {channel}")
            return True

        logger.error(f"Slack webhook rejected message: {response.status_code} {response.text}")
        return False


def send_message(
    text: str,
    api_key: str,
    channel: str,
    username: str | None = None,
    icon: str | None = None,
    attachments: Iterable[Attachment | Mapping[str, Any]] | None = None,
) -> bool:
    """Send a message using a sender built from application settings.

    Username and icon fall back to the configured defaults.

    Raises:
        InvalidArgumentError: If an argument or a SLACK_WEBHOOK_* setting is
            invalid.
        NetworkError: If the request could not be completed.
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        raise InvalidArgumentError(f"invalid Slack webhook settings: {e}") from e

    sender = SlackWebhookSender(base_url=settings.base_url, timeout=settings.timeout)
    return sender.send(
        text,
        api_key,
        channel,
        username=username or settings.username,
        icon=icon or settings.icon_emoji,
        attachments=attachments,
    )
