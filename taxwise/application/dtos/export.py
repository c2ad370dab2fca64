"""DTOs for document package export (request-scoped, never persisted)."""

import base64
from dataclasses import dataclass, field

from taxwise.domain.enums import ExportCategory


@dataclass(frozen=True)
class UserDocumentRef:
    """One user-owned file to include, addressed by a short-lived access URL.

    Either field may be empty when the client sent an incomplete entry; the
    assembler records that as an issue instead of rejecting the request.
    """

    filename: str
    access_url: str


@dataclass(frozen=True)
class ExportRequest:
    """Input for ExportPackageAssembler.assemble."""

    actor_id: str
    category: ExportCategory
    user_files: tuple[UserDocumentRef, ...] = ()
    actor_name: str = ""


@dataclass(frozen=True)
class ExportResult:
    """Outcome of one export: the archive plus a success verdict.

    overall_success is False when any single file failed; the archive is
    still complete and carries error-marker entries for the failures.
    """

    overall_success: bool
    archive_bytes: bytes
    archive_filename: str
    human_message: str
    issues: tuple[str, ...] = field(default_factory=tuple)

    @property
    def archive_base64(self) -> str:
        return base64.b64encode(self.archive_bytes).decode("ascii")

    @property
    def download_url(self) -> str:
        """The archive as a data URL the browser can download directly."""
        return f"data:application/zip;base64,{self.archive_base64}"
