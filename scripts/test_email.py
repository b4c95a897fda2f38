import argparse
import asyncio
import os
import sys

# Add project root to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.common.config import settings
from src.modules.contact.dispatcher import send_contact_email
from src.modules.contact.outcomes import Delivered, user_message
from src.modules.contact.providers.factory import build_provider_config
from src.modules.contact.validator import validate_submission

async def test_contact_email(name: str, email: str, message: str) -> int:
    config = build_provider_config(settings)
    print(f"Provider: {config.kind.value if config.kind else 'none'}")
    print(f"Sender: {config.sender or '-'}  Recipient: {config.recipient}")

    submission = validate_submission({"name": name, "email": email, "message": message})
    outcome = await send_contact_email(submission, config)

    if isinstance(outcome, Delivered):
        print(f"Delivered, message id {outcome.message_id}")
        return 0
    print(f"Failed ({outcome.kind.value}): {user_message(outcome)}")
    print(f"Detail: {outcome.detail}")
    return 1

if __name__ == "__main__":
    # Use real settings from .env
    parser = argparse.ArgumentParser(description="Send a test contact-form email through the configured provider.")
    parser.add_argument("--name", default="Portfolio Smoke Test")
    parser.add_argument("--email", default="smoke-test@example.com", help="Reply-To address")
    parser.add_argument("--message", default="This is a test message from scripts/test_email.py.")
    args = parser.parse_args()
    sys.exit(asyncio.run(test_contact_email(args.name, args.email, args.message)))
