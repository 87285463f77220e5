from __future__ import annotations

import logging

from flask import Flask, Response, request

from ..container import Container
from ..core.constants import SUBMIT_CONFIRMATION


logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/attend", methods=["GET"], endpoint="attend")
    def attend():
        try:
            page = container.attend_page_path.read_bytes()
        except OSError:
            logger.exception("Cannot read attendance form %s", container.attend_page_path)
            return Response("Attendance form unavailable", status=500, mimetype="text/plain")

        return Response(page, status=200, content_type="text/html")

    @app.route("/submit", methods=["POST"], endpoint="submit")
    def submit():
        body = request.get_data(as_text=True)
        container.submission_service.record(body)
        return Response(SUBMIT_CONFIRMATION, status=200, mimetype="text/plain")
