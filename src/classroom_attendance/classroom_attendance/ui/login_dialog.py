"""
Desktop login window: username, password and a Login button.
Each click runs one credential check and reports the result in a message box.
"""

from __future__ import annotations

import importlib
import tkinter as tk
from tkinter import messagebox, ttk

from dotenv import load_dotenv

from config import get_settings_module

from ..container import build_container
from ..main import configure_logging
from .presenter import LoginPresenter


class LoginDialog:
    def __init__(self, presenter: LoginPresenter):
        self.presenter = presenter
        self.root = tk.Tk()
        self.root.title("Login")
        self.root.geometry("300x150")
        self.root.resizable(False, False)
        self._build_ui()

    def _build_ui(self):
        frame = ttk.Frame(self.root, padding=12)
        frame.pack(fill=tk.BOTH, expand=True)

        ttk.Label(frame, text="Username:").grid(row=0, column=0, sticky=tk.W, pady=4)
        self.user_entry = ttk.Entry(frame, width=18)
        self.user_entry.grid(row=0, column=1, sticky=tk.W, pady=4, padx=6)

        ttk.Label(frame, text="Password:").grid(row=1, column=0, sticky=tk.W, pady=4)
        self.pass_entry = ttk.Entry(frame, width=18, show="*")
        self.pass_entry.grid(row=1, column=1, sticky=tk.W, pady=4, padx=6)

        self.login_btn = ttk.Button(frame, text="Login", command=self._on_login)
        self.login_btn.grid(row=2, column=1, sticky=tk.W, pady=8, padx=6)
        self.root.bind("<Return>", lambda _event: self._on_login())

    def _on_login(self):
        ok, message = self.presenter.attempt(self.user_entry.get(), self.pass_entry.get())
        if ok:
            messagebox.showinfo("Login", message, parent=self.root)
        else:
            messagebox.showerror("Login", message, parent=self.root)

    def run(self):
        self.root.mainloop()


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    container = build_container(
        db_config_path=settings.DB_CONFIG_PATH,
        attend_page_path=settings.ATTEND_PAGE_PATH,
    )
    # Refuse to open the window with an unusable database config.
    container.descriptor_loader.load().connect_kwargs()

    LoginDialog(LoginPresenter(container.credential_gateway)).run()


if __name__ == "__main__":
    main()
