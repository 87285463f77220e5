from src.classroom_attendance.classroom_attendance.credentials.service import CredentialGateway
from src.classroom_attendance.classroom_attendance.ui.presenter import LoginPresenter


class InMemoryCredentials:
    def __init__(self, rows):
        self._rows = set(rows)

    def exists(self, username, password):
        return (username, password) in self._rows


def test_login_success_message():
    presenter = LoginPresenter(CredentialGateway(InMemoryCredentials({("alice", "pw1")})))

    assert presenter.attempt("alice", "pw1") == (True, "Login successful!")


def test_login_failure_message():
    presenter = LoginPresenter(CredentialGateway(InMemoryCredentials({("alice", "pw1")})))

    assert presenter.attempt("alice", "nope") == (False, "Login failed.")


def test_login_failure_when_database_errors():
    class Broken:
        def exists(self, username, password):
            raise RuntimeError("server has gone away")

    presenter = LoginPresenter(CredentialGateway(Broken()))

    assert presenter.attempt("alice", "pw1") == (False, "Login failed.")
