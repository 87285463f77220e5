from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .attendance.service import SubmissionService
from .credentials.mysql_credential_repository import MySQLCredentialRepository
from .credentials.service import CredentialGateway
from .database.connection import DatabaseConnection
from .database.descriptor import JsonDescriptorLoader


@dataclass(frozen=True)
class Container:
    descriptor_loader: JsonDescriptorLoader
    conn: DatabaseConnection

    credentials_repo: MySQLCredentialRepository

    credential_gateway: CredentialGateway
    submission_service: SubmissionService

    attend_page_path: Path


def build_container(*, db_config_path: str | Path, attend_page_path: str | Path) -> Container:
    descriptor_loader = JsonDescriptorLoader(db_config_path)
    conn = DatabaseConnection(descriptor_loader.load)

    credentials_repo = MySQLCredentialRepository(conn)

    credential_gateway = CredentialGateway(credentials_repo)
    submission_service = SubmissionService()

    return Container(
        descriptor_loader=descriptor_loader,
        conn=conn,
        credentials_repo=credentials_repo,
        credential_gateway=credential_gateway,
        submission_service=submission_service,
        attend_page_path=Path(attend_page_path),
    )
