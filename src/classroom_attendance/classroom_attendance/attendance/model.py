from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional


@dataclass
class AttendanceRecord:
    """One student's position relative to the classroom.

    ``is_present`` always starts as False; whoever owns the record flips it.
    """

    id: str
    lat: float
    lon: float
    distance: float
    is_present: bool = field(default=False, init=False)


@dataclass(frozen=True)
class AttendanceSubmission:
    """Fields of one submitted attendance form (plain text, no coercion)."""

    student_id: Optional[str]
    name: Optional[str]
    session: Optional[str]
    lat: Optional[str]
    lon: Optional[str]

    @classmethod
    def from_fields(cls, fields: Mapping[str, str]) -> "AttendanceSubmission":
        return cls(
            student_id=fields.get("studentId"),
            name=fields.get("name"),
            session=fields.get("session"),
            lat=fields.get("lat"),
            lon=fields.get("lon"),
        )
