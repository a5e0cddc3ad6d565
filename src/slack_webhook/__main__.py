"""CLI entry point for the Slack webhook client.

Usage:
    python -m slack_webhook "Deploy finished" --channel "#ops" [options]
"""

from __future__ import annotations

import argparse
import logging
import logging.config
import sys
from typing import NoReturn

from pydantic import ValidationError

from slack_webhook import __version__
from slack_webhook.config import SlackSettings, clear_settings_cache, get_settings
from slack_webhook.exceptions import InvalidArgumentError, NetworkError
from slack_webhook.formatter import build_attachment
from slack_webhook.models import Attachment, AttachmentColor
from slack_webhook.sender import SlackWebhookSender

# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="slack-webhook",
        description="Post a message to a Slack channel through an incoming webhook.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m slack_webhook "Hello" --channel "#general"
  python -m slack_webhook "Build failed" --channel "#ci" \\
      --attachment-title "main #42" --attachment-text "3 tests failed" \\
      --attachment-color danger
  python -m slack_webhook --config-check
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("text", nargs="?", help="Message text")
    parser.add_argument("--channel", help="Target channel, e.g. #general")
    parser.add_argument(
        "--api-key",
        help="Webhook key T.../B.../... (default: SLACK_WEBHOOK_API_KEY)",
    )
    parser.add_argument("--username", default=None, help="Bot username (default: from settings)")
    parser.add_argument("--icon", default=None, help="Bot icon emoji (default: from settings)")
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Override HTTP timeout in seconds (default: from settings)",
    )

    attachment = parser.add_argument_group("attachment")
    attachment.add_argument("--attachment-title", help="Attachment title")
    attachment.add_argument("--attachment-text", help="Attachment body")
    attachment.add_argument(
        "--attachment-color",
        choices=[c.value for c in AttachmentColor],
        help="Attachment color",
    )
    attachment.add_argument("--attachment-link", help="URL the attachment title links to")
    attachment.add_argument("--attachment-pretext", help="Text shown above the attachment")

    parser.add_argument(
        "--config-check",
        action="store_true",
        help="Validate configuration and exit without sending",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Override logging level (default: from settings)",
    )

    return parser


def configure_logging(level: str) -> None:
    """Configure logging for the command line tool.

    Args:
        level: Logging level string (DEBUG, INFO, etc.)
    """
    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "detailed": {
                "format": (
                    "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"
                ),
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "detailed" if level == "DEBUG" else "standard",
                "stream": "ext://sys.stderr",
            },
        },
        "root": {
            "level": level,
            "handlers": ["console"],
        },
        "loggers": {
            "httpx": {"level": "WARNING"},
            "httpcore": {"level": "WARNING"},
        },
    }
    logging.config.dictConfig(config)


def validate_config() -> SlackSettings | None:
    """Validate and load configuration.

    Returns:
        Settings instance if valid, None if invalid.
    """
    try:
        clear_settings_cache()
        return get_settings()
    except ValidationError as e:
        print("Configuration validation failed:", file=sys.stderr)
        for error in e.errors():
            field = ".".join(str(loc) for loc in error["loc"])
            print(f"  {field}: {error['msg']}", file=sys.stderr)
        return None


def run_config_check(settings: SlackSettings) -> int:
    """Print the redacted configuration and report success."""
    print("Configuration is valid!")
    print()
    print("Configuration:")
    for key, value in settings.redacted_summary().items():
        print(f"  {key}: {value}")
    return EXIT_SUCCESS


def build_cli_attachment(args: argparse.Namespace) -> Attachment | None:
    """Build the attachment described by the --attachment-* flags, if any.

    Raises:
        InvalidArgumentError: If the flags describe an incomplete attachment.
    """
    given = [
        args.attachment_title,
        args.attachment_text,
        args.attachment_color,
        args.attachment_link,
        args.attachment_pretext,
    ]
    if not any(given):
        return None
    if not args.attachment_color:
        raise InvalidArgumentError("--attachment-color is required for an attachment")
    return build_attachment(
        args.attachment_title or "",
        args.attachment_text or "",
        args.attachment_color,
        pretext=args.attachment_pretext,
        title_link=args.attachment_link,
    )


def run_send(args: argparse.Namespace, settings: SlackSettings) -> int:
    """Send the message described by the parsed arguments.

    Returns:
        Exit code.
    """
    logger = logging.getLogger(__name__)

    api_key = args.api_key or (
        settings.api_key.get_secret_value() if settings.api_key else None
    )
    if not api_key:
        print("No webhook key: pass --api-key or set SLACK_WEBHOOK_API_KEY", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    timeout = args.timeout if args.timeout is not None else settings.timeout

    try:
        sender = SlackWebhookSender(base_url=settings.base_url, timeout=timeout)
        attachment = build_cli_attachment(args)
        delivered = sender.send(
            args.text or "",
            api_key,
            args.channel or "",
            username=args.username or settings.username,
            icon=args.icon or settings.icon_emoji,
            attachments=[attachment] if attachment else None,
        )
    except InvalidArgumentError as e:
        print(f"Invalid arguments: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except NetworkError as e:
        logger.error("Could not reach Slack: %s", e)
        return EXIT_ERROR

    return EXIT_SUCCESS if delivered else EXIT_ERROR


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:]).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    settings = validate_config()
    if settings is None:
        sys.exit(EXIT_CONFIG_ERROR)

    configure_logging(args.log_level or settings.log_level)

    if args.config_check:
        sys.exit(run_config_check(settings))

    sys.exit(run_send(args, settings))


if __name__ == "__main__":
    main()
