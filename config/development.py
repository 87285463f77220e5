import os
from pathlib import Path

RESOURCES_DIR = Path(__file__).resolve().parents[1] / "resources"

# JSON file with url/username/password, re-read on every login check
DB_CONFIG_PATH = os.getenv("DB_CONFIG_PATH", str(RESOURCES_DIR / "config.json"))
ATTEND_PAGE_PATH = os.getenv("ATTEND_PAGE_PATH", str(RESOURCES_DIR / "attendance.html"))

# Debugger stays on loopback; set HOST explicitly to expose the dev server
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8080"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app creates the users table on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
# Optional: also upsert the demo login on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
DEMO_USERNAME = os.getenv("DEMO_USERNAME", "teacher")
DEMO_PASSWORD = os.getenv("DEMO_PASSWORD", "teacher123")
