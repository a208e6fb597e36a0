# kelime_bot/config.py

import os
from dotenv import load_dotenv

# Load .env file if present (local development)
load_dotenv()

BOT_TOKEN = os.getenv("BOT_TOKEN")
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4.1-mini")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Seconds
SUCCESS_DELAY = float(os.getenv("SUCCESS_DELAY", "2.0"))
ERROR_DELAY = float(os.getenv("ERROR_DELAY", "1.0"))

DEFAULT_DIFFICULTY = os.getenv("DEFAULT_DIFFICULTY", "medium").lower()

if SUCCESS_DELAY < 0 or ERROR_DELAY < 0:
    raise ValueError("SUCCESS_DELAY and ERROR_DELAY must not be negative.")

if DEFAULT_DIFFICULTY not in ("easy", "medium", "hard"):
    raise ValueError(
        f"DEFAULT_DIFFICULTY must be easy, medium or hard (got {DEFAULT_DIFFICULTY!r})."
    )
