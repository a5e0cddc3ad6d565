"""Slack incoming-webhook client."""

from slack_webhook.exceptions import InvalidArgumentError, NetworkError, SlackWebhookError
from slack_webhook.formatter import build_attachment, format_link
from slack_webhook.models import Attachment, AttachmentColor, Message
from slack_webhook.sender import SlackWebhookSender, send_message

__version__ = "0.1.0"

__all__ = [
    "Attachment",
    "AttachmentColor",
    "InvalidArgumentError",
    "Message",
    "NetworkError",
    "SlackWebhookError",
    "SlackWebhookSender",
    "__version__",
    "build_attachment",
    "format_link",
    "send_message",
]
