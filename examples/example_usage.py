"""Example: check a login through the service layer (no Flask, no window).

Controllers and the dialog are thin layers; the lookup lives in CredentialGateway.
"""

import importlib
import sys

from config import get_settings_module

from src.classroom_attendance.classroom_attendance.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config_path=settings.DB_CONFIG_PATH,
        attend_page_path=settings.ATTEND_PAGE_PATH,
    )
    username, password = (sys.argv[1:3] + ["", ""])[:2]
    result = container.credential_gateway.check_credentials(username, password)
    print(result.outcome.value, result.detail or "")


if __name__ == "__main__":
    main()
