"""Scaffold a local .env file for the live coordination service."""
from __future__ import annotations

import secrets
from pathlib import Path

ENV_TEMPLATE = """# Environment configuration for SEIAC live coordination
TEACHER_PASSWORD={password}
DEBUG=true
LIVE_MESSAGE_TTL_MS=90000
LIVE_BLOCK_DEFAULT_MINUTES=10
LIVE_SWEEP_INTERVAL_SECONDS=60
"""


def main() -> None:
    env_path = Path(".env")
    if env_path.exists():
        print(".env already exists. No changes made.")
        return

    env_path.write_text(
        ENV_TEMPLATE.format(password=secrets.token_urlsafe(12)),
        encoding="utf-8",
    )
    print("Created .env with a generated TEACHER_PASSWORD. Review it before deployment.")


if __name__ == "__main__":
    main()
