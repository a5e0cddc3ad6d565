"""Test that the project setup is working correctly."""

import slack_webhook


def test_version() -> None:
    """Test that version is defined."""
    assert slack_webhook.__version__ == "0.1.0"


def test_public_api() -> None:
    """Test that the helpers are exported from the package root."""
    for name in slack_webhook.__all__:
        assert getattr(slack_webhook, name) is not None
