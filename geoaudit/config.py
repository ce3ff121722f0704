"""
Runtime settings, read from the environment (and a local .env file).

  API_SECRET_KEY       — require this value in the x-api-key header (empty: open)
  LOG_LEVEL            — root log level (default INFO)
  LOG_JSON             — emit JSON log lines when "1"/"true"
  FETCH_TIMEOUT        — page fetch timeout in seconds (default 15)
  USER_AGENT           — User-Agent sent when fetching pages
  SUGGESTION_STRATEGY  — "static" or "content"
  PORT                 — port for `python -m geoaudit.main`
"""

import os

from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str = "") -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


API_SECRET = os.environ.get("API_SECRET_KEY", "")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_JSON = _flag("LOG_JSON")

FETCH_TIMEOUT = float(os.environ.get("FETCH_TIMEOUT", "15"))
USER_AGENT = os.environ.get("USER_AGENT", "Mozilla/5.0 (compatible; GeoAudit/1.0)")

SUGGESTION_STRATEGY = os.environ.get("SUGGESTION_STRATEGY", "static")

PORT = int(os.environ.get("PORT", 8000))
