from __future__ import annotations

import logging
import re
from typing import Optional

from ..common.query_string import parse_query
from ..core.constants import NULL_MARKER
from .model import AttendanceSubmission


logger = logging.getLogger(__name__)
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _show(value: Optional[str]) -> str:
    return NULL_MARKER if value is None else value


class SubmissionService:
    """Use case: accept one attendance form and record it.

    Recording means one INFO line on this module's logger; nothing is persisted.
    """

    def __init__(self, sink: Optional[logging.Logger] = None):
        self._sink = sink or logger

    def parse_body(self, body: str) -> AttendanceSubmission:
        # Only CR, LF and CRLF count as line breaks; they are dropped, lines concatenated.
        text = "".join(_LINE_BREAK.split(body or ""))
        return AttendanceSubmission.from_fields(parse_query(text))

    def format_entry(self, submission: AttendanceSubmission) -> str:
        return (
            f"Received attendance: {_show(submission.student_id)}, {_show(submission.name)} "
            f"at [{_show(submission.lat)}, {_show(submission.lon)}] "
            f"for session {_show(submission.session)}"
        )

    def record(self, body: str) -> AttendanceSubmission:
        submission = self.parse_body(body)
        self._sink.info(self.format_entry(submission))
        return submission
