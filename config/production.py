import os
from pathlib import Path

RESOURCES_DIR = Path(__file__).resolve().parents[1] / "resources"

DB_CONFIG_PATH = os.getenv("DB_CONFIG_PATH", str(RESOURCES_DIR / "config.json"))
ATTEND_PAGE_PATH = os.getenv("ATTEND_PAGE_PATH", str(RESOURCES_DIR / "attendance.html"))

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
