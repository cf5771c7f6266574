"""
Local chat simulator

Drives the dispatcher from the terminal with the in-memory state store.
Replies are printed instead of being sent to the gateway, so no WhatsApp
connection is needed.

Usage: python scripts/simulate_chat.py [--user 94770000000@s.whatsapp.net]
"""

import argparse
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from app.flow.dispatcher import dispatch_message
from app.schemas.webhook import parse_inbound_message
from app.services.state_store import InMemoryStateStore
from utils.whatsapp_utils import get_button_ids


class ConsoleSender:
    """Prints replies to stdout in place of the gateway."""

    async def send_message(self, to, payload):
        print("\n" + "-" * 60)
        print(payload["text"])
        buttons = payload.get("buttons", [])
        if buttons:
            print()
            for button, button_id in zip(buttons, get_button_ids(payload)):
                print(f"  [{button_id}] {button['buttonText']['displayText']}")
        print("-" * 60 + "\n")
        return {"id": "console"}


async def run(user_id: str):
    store = InMemoryStateStore()
    sender = ConsoleSender()

    print("=" * 60)
    print("  NovoNex bot simulator")
    print("  Type a message or a button id in [brackets]. Ctrl+D to quit.")
    print("=" * 60 + "\n")

    while True:
        try:
            text = input("you> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        event = parse_inbound_message({
            "key": {"remoteJid": user_id, "fromMe": False},
            "message": {"conversation": text}
        })
        await dispatch_message(event, store, sender)

        state = await store.get(user_id)
        print(f"(state: {state.to_dict()})")


def main():
    parser = argparse.ArgumentParser(description="Chat with the NovoNex bot locally")
    parser.add_argument("--user", default="94770000000@s.whatsapp.net", help="Simulated sender id")
    args = parser.parse_args()

    asyncio.run(run(args.user))


if __name__ == "__main__":
    main()
