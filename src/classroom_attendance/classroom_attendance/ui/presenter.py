from __future__ import annotations

from typing import Protocol

from ..core.constants import LOGIN_FAILURE_MESSAGE, LOGIN_SUCCESS_MESSAGE


class UserValidator(Protocol):
    def validate_user(self, username: str, password: str) -> bool:
        raise NotImplementedError


class LoginPresenter:
    """Turns a login attempt into the text the dialog shows.

    Kept free of tkinter so the yes/no contract can be tested headless.
    """

    def __init__(self, gateway: UserValidator):
        self._gateway = gateway

    def attempt(self, username: str, password: str) -> tuple[bool, str]:
        ok = self._gateway.validate_user(username, password)
        return ok, LOGIN_SUCCESS_MESSAGE if ok else LOGIN_FAILURE_MESSAGE
