#!/usr/bin/env python3
"""Terminal viewer for a secret message.

Fetches a message by the id its QR code carries, then asks for three
"clicks" (Enter presses) before showing it, reporting the scan the same way
the web viewer does.

Usage:
    python3 scripts/reveal-message.py a1b2c3d4e5f6a7b8
    python3 scripts/reveal-message.py --api-url https://example.com/api a1b2c3d4e5f6a7b8
"""

from __future__ import annotations

import argparse
import sys

import httpx

from infusesecret.client import InfuseSecretClient
from infusesecret.config import get_settings
from infusesecret.errors import InfuseSecretError
from infusesecret.models.message import MessageRead
from infusesecret.services.reveal import HttpScanNotifier, RevealSession


def main() -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Unlock a secret message.")
    parser.add_argument("message_id", help="Message id from the QR code")
    parser.add_argument(
        "--api-url",
        default=settings.api_url,
        help=f"API base URL (default: {settings.api_url})",
    )
    args = parser.parse_args()

    with InfuseSecretClient(args.api_url, timeout=settings.client_timeout_seconds) as client:
        try:
            message = MessageRead.model_validate(client.get_message(args.message_id))
        except InfuseSecretError as exc:
            print(f"Error: {exc.message}", file=sys.stderr)
            return 1
        except httpx.HTTPError as exc:
            print(f"Failed to load message: {exc}", file=sys.stderr)
            return 1

        notifier = HttpScanNotifier(client)
        # send() rather than the threaded call: the process exits right after
        session = RevealSession(message, notifier=notifier.send)
        template = session.template

        print(f"{template.pattern}  You have a secret message!  {template.pattern}")
        while not session.is_unlocked:
            remaining = session.remaining_clicks
            input(f"Press Enter to tap ({remaining} more click{'s' if remaining > 1 else ''})...")
            session.click()

        print(" ".join(icon.emoji for icon in session.celebration))
        print()
        print("Secret Message Unlocked!")
        print()
        print(message.message)
        if message.quote:
            print()
            print(f'"{message.quote}"')
        if message.photo_url:
            print()
            print(f"Photo: {message.photo_url}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
