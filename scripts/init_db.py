from __future__ import annotations

import sys
from pathlib import Path

import importlib

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.classroom_attendance.classroom_attendance.database.bootstrap import apply_schema, ensure_user, list_tables
from src.classroom_attendance.classroom_attendance.database.descriptor import JsonDescriptorLoader


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    descriptor = JsonDescriptorLoader(settings.DB_CONFIG_PATH).load()
    target = descriptor.connect_kwargs()

    apply_schema(descriptor)
    ensure_user(
        descriptor,
        username=getattr(settings, "DEMO_USERNAME", "teacher"),
        password=getattr(settings, "DEMO_PASSWORD", "teacher123"),
    )
    tables = list_tables(descriptor)
    print(
        "OK: users table ready -> "
        f"{target.get('user')}@{target.get('host')}:{target.get('port')}/{target.get('database')} "
        f"(tables={len(tables)})"
    )


if __name__ == "__main__":
    main()
