"""Request/response schemas for the export-package API.

Wire names are camelCase (the web client sends userId, userDocuments,
signedUrl). Incomplete userDocuments entries are accepted here; the
assembler records them as skipped.
"""

from pydantic import BaseModel, ConfigDict, Field

from taxwise.application.dtos.export import ExportRequest, ExportResult, UserDocumentRef
from taxwise.domain.enums import ExportCategory


class UserDocumentIn(BaseModel):
    """One user file addressed by a short-lived signed URL."""

    model_config = ConfigDict(populate_by_name=True)

    filename: str | None = None
    signed_url: str | None = Field(default=None, alias="signedUrl")


class ExportPackageRequest(BaseModel):
    """Body of POST /export-package."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., alias="userId", min_length=1)
    category: ExportCategory
    user_documents: list[UserDocumentIn] = Field(default_factory=list, alias="userDocuments")
    user_name: str | None = Field(default=None, alias="userName")

    def to_dto(self) -> ExportRequest:
        return ExportRequest(
            actor_id=self.user_id,
            category=self.category,
            user_files=tuple(
                UserDocumentRef(filename=d.filename or "", access_url=d.signed_url or "")
                for d in self.user_documents
            ),
            actor_name=self.user_name or "",
        )


class ExportPackageResponse(BaseModel):
    """Archive as a data URL plus the success verdict."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    message: str
    download_url: str = Field(..., serialization_alias="downloadUrl")
    filename: str

    @classmethod
    def from_result(cls, result: ExportResult) -> "ExportPackageResponse":
        return cls(
            success=result.overall_success,
            message=result.human_message,
            download_url=result.download_url,
            filename=result.archive_filename,
        )


class ExportPackageErrorResponse(BaseModel):
    """Body of every non-200 export answer."""

    success: bool = False
    message: str
