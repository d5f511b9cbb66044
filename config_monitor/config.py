"""Configuration and settings."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Paths
PROJECT_ROOT = Path(__file__).resolve().parent.parent
OUTPUT_DIR = PROJECT_ROOT / "output"

# Logging
LOG_DIR = OUTPUT_DIR / "logs"
LOG_FILE = Path(os.getenv("LOG_FILE", "") or LOG_DIR / "app.jsonl")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
VERBOSE_LOGGING = os.getenv("VERBOSE_LOGGING", "false").lower() == "true"

# Ensure log directory exists
LOG_FILE.parent.mkdir(parents=True, exist_ok=True)

# Monitor endpoint: POST {MONITOR_ENDPOINT_PATH}/monitor
MONITOR_ENDPOINT_PATH = os.getenv("MONITOR_ENDPOINT_PATH", "").rstrip("/")
MONITOR_PORT = int(os.getenv("MONITOR_PORT", "8000"))

# Origin id stamped on every refresh broadcast from this instance
BUS_ID = os.getenv("BUS_ID", "config-monitor")
