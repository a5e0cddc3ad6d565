"""Message formatting helpers for Slack webhooks.

This module builds the pieces that go into a webhook message: inline
hyperlink tokens in Slack's ``<url|text>`` markup, and attachment blocks
with a colored sidebar.
"""

from __future__ import annotations

from slack_webhook.exceptions import InvalidArgumentError
from slack_webhook.models import Attachment, AttachmentColor


def format_link(url: str, display_text: str | None = None) -> str:
    """Format a Slack hyperlink token.

    Args:
        url: Link target.
        display_text: Optional text shown instead of the raw URL.

    Returns:
        ``<url|display_text>`` when display text is given, else ``<url>``.

    Raises:
        InvalidArgumentError: If url is empty.
    """
    if not url:
        raise InvalidArgumentError("url must not be empty")
    if display_text:
        return f"<{url}|{display_text}>"
    return f"<{url}>"

def build_attachment(
    title: str,
    text: str,
    color: AttachmentColor | str,
    *,
    pretext: str | None = None,
    title_link: str | None = None,
    fallback: str | None = None,
) -> Attachment:
    """Build an attachment for a webhook message.

    Args:
        title: Attachment heading.
        text: Attachment body.
        color: One of ``good``, ``warning`` or ``danger``.
        pretext: Optional text shown above the attachment.
        title_link: Optional URL for the title.
        fallback: Plain-text summary. Defaults to ``"<title> - <text>"``.

    Returns:
        Frozen Attachment instance.

    Raises:
        InvalidArgumentError: If title or text is empty, or color is unknown.
    """
    return Attachment(
        title=title,
        text=text,
        color=color,
        fallback=fallback or "",
        title_link=title_link or None,
        pretext=pretext or None,
    )
