"""Exceptions raised by the Slack webhook client."""


class SlackWebhookError(Exception):
    """Base exception for Slack webhook errors."""

    pass


class InvalidArgumentError(SlackWebhookError, ValueError):
    """Raised when a required argument is missing or out of range."""

    pass


class NetworkError(SlackWebhookError):
    """Raised when the webhook request fails at the transport level."""

    pass
