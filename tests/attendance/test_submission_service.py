from unittest.mock import Mock

import pytest

from src.classroom_attendance.classroom_attendance.attendance.model import AttendanceRecord, AttendanceSubmission
from src.classroom_attendance.classroom_attendance.attendance.service import SubmissionService


def test_record_starts_absent_and_is_mutable():
    record = AttendanceRecord(id="S1", lat=10.76, lon=106.66, distance=42.0)

    assert record.is_present is False
    record.is_present = True
    assert record.is_present is True


def test_parse_body_joins_lines():
    svc = SubmissionService(sink=Mock())

    submission = svc.parse_body("studentId=S1&name=Al\nice&session=Mon\r\n")

    assert submission == AttendanceSubmission(student_id="S1", name="Alice", session="Mon", lat=None, lon=None)


def test_record_writes_one_line_to_sink():
    sink = Mock()
    svc = SubmissionService(sink=sink)

    svc.record("studentId=S%201&name=B%C3%ACnh&session=Tue&lat=10.5&lon=106.7")

    sink.info.assert_called_once_with("Received attendance: S 1, Bình at [10.5, 106.7] for session Tue")


def test_record_rejects_presence_at_construction():
    with pytest.raises(TypeError):
        AttendanceRecord(id="S1", lat=10.76, lon=106.66, distance=42.0, is_present=True)


def test_parse_body_only_strips_cr_and_lf():
    svc = SubmissionService(sink=Mock())

    submission = svc.parse_body("studentId=S1&name=An Binh\x0c&session=Mon\r")

    assert submission.name == "An Binh\x0c"
    assert submission.session == "Mon"
