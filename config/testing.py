import os
from pathlib import Path

RESOURCES_DIR = Path(__file__).resolve().parents[1] / "resources"

DB_CONFIG_PATH = os.getenv("DB_CONFIG_PATH", str(RESOURCES_DIR / "config.json"))
ATTEND_PAGE_PATH = os.getenv("ATTEND_PAGE_PATH", str(RESOURCES_DIR / "attendance.html"))

HOST = "127.0.0.1"
PORT = int(os.getenv("PORT", "8080"))

DEBUG = False
TESTING = True
LOG_LEVEL = "DEBUG"

AUTO_INIT_DB = False
AUTO_SEED_DB = False
