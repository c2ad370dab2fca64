"""Export package assembly: user files + category sample form + summary, as one ZIP.

Every file is fetched independently. A failed fetch becomes an
ERROR_FETCHING_*.txt entry in the archive and flips overall_success to
False; it never aborts the export. Only a failure to serialize the archive
raises (ExportAssemblyException).
"""

from __future__ import annotations

import asyncio
import io
import logging
import re
import zipfile
from collections.abc import Callable
from datetime import datetime

from taxwise.application.dtos.export import ExportRequest, ExportResult, UserDocumentRef
from taxwise.application.interfaces.services import IObjectStore, ISignedUrlFetcher
from taxwise.application.services.audit_logger import AuditLogger
from taxwise.application.services.reference_documents import (
    GENERAL_GUIDE_ARCHIVE_NAME,
    GENERAL_GUIDE_TEXT,
    ReferenceDocument,
    reference_document_for,
)
from taxwise.domain.enums import ExportCategory
from taxwise.domain.exceptions import ExportAssemblyException
from taxwise.infrastructure.exceptions import SignedUrlFetchError
from taxwise.shared.enums import AuditLogAction
from taxwise.shared.telemetry.tracing import add_span_attributes, add_span_event, traced
from taxwise.shared.utils.datetime import to_epoch_millis, utc_now

logger = logging.getLogger(__name__)

USER_DOCUMENTS_DIR = "user_documents"
SAMPLE_DOCUMENTS_DIR = "sample_documents"
SUMMARY_FILENAME = "summary.txt"

SKIPPED_DOCUMENT_ISSUE = "Skipped a user document due to missing URL/filename.\n"
NO_USER_DOCS_TEXT = "No user documents were specified for this export or the list was empty."

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9.]")


def error_entry_name(filename: str) -> str:
    """Archive name of the error marker for a user file that could not be fetched."""
    return f"ERROR_FETCHING_{_UNSAFE_FILENAME_CHARS.sub('_', filename)[:50]}.txt"


def user_entry_name(filename: str) -> str:
    """Archive name for a fetched user file: the last path segment only.

    "../../x.pdf" and "C:\\docs\\x.pdf" both become "x.pdf", so extracting
    the archive never writes outside user_documents/.
    """
    name = filename.replace("\\", "/").rsplit("/", 1)[-1]
    if name in ("", ".", ".."):
        return _UNSAFE_FILENAME_CHARS.sub("_", filename).strip(".") or "unnamed"
    return name


def _isoformat_z(dt: datetime) -> str:
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ExportPackageAssembler:
    """Builds the export ZIP for one request. Stateless between calls."""

    def __init__(
        self,
        object_store: IObjectStore,
        url_fetcher: ISignedUrlFetcher,
        audit_logger: AuditLogger,
        *,
        archive_prefix: str = "taxwise",
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._object_store = object_store
        self._url_fetcher = url_fetcher
        self._audit_logger = audit_logger
        self._archive_prefix = archive_prefix
        self._clock = clock

    async def _fetch_user_file(self, ref: UserDocumentRef) -> bytes | str:
        """Return the file bytes, or the error text for the marker entry."""
        try:
            return await self._url_fetcher.fetch_bytes_via_url(ref.access_url)
        except Exception as e:
            if isinstance(e, SignedUrlFetchError) and e.status_code is not None:
                reason = f"Failed to fetch {ref.filename}: {e.message} (Status: {e.status_code})"
            else:
                reason = str(e) or type(e).__name__
            logger.warning("Could not fetch user document %r: %s", ref.filename, reason)
            add_span_event("user_document_fetch_failed", {"error_type": type(e).__name__})
            return (
                f"Could not fetch user document: {ref.filename}\n"
                f"Error: {reason}\n"
                "Verify the signed URL was valid and accessible.\n\n"
            )

    async def _fetch_reference(self, doc: ReferenceDocument) -> bytes | str:
        try:
            return await self._object_store.fetch_bytes(doc.storage_path)
        except Exception as e:
            logger.warning(
                "Could not fetch sample document %s: %s", doc.storage_path, e
            )
            return (
                f"Could not fetch sample document from storage: {doc.storage_path}\n"
                f"Error: {e}\n\n"
                "Verify that the file exists at this exact path in the storage bucket "
                "and that read access is allowed. Check for typos and case sensitivity "
                "in the path."
            )

    async def _no_reference(self) -> None:
        return None

    def _build_summary(
        self,
        request: ExportRequest,
        generated_at: datetime,
        reference: ReferenceDocument | None,
        issues: list[str],
    ) -> str:
        summary = (
            "TaxWise Export Summary\n"
            f"User ID: {request.actor_id}\n"
            f"Category: {request.category.value}\n"
            f"Export Date: {_isoformat_z(generated_at)}\n"
            f"Number of user documents attempted: {len(request.user_files)}\n"
            "Sample document attempted (path in storage): "
            f"{reference.storage_path if reference else 'None for this category'}\n"
        )
        if issues:
            summary += f"\n--- Issues Encountered ---\n{''.join(issues)}\n--- End Issues ---\n"
        summary += (
            "\nNote: If documents are missing, check for ERROR_FETCHING_...txt files "
            "in the ZIP folders for details."
        )
        return summary

    @staticmethod
    def _write_archive(entries: dict[str, bytes]) -> bytes:
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            for name, data in entries.items():
                zf.writestr(name, data)
        return buffer.getvalue()

    @traced("exports.assemble")
    async def assemble(self, request: ExportRequest) -> ExportResult:
        """Fetch everything for request and return the finished archive."""
        category = request.category
        logger.info(
            "Export requested actor=%s category=%s user_files=%d",
            request.actor_id,
            category.value,
            len(request.user_files),
        )
        add_span_attributes(category=category.value, count=len(request.user_files))

        overall_success = True
        issues: list[str] = []
        # Later writes to the same name replace earlier ones.
        entries: dict[str, bytes] = {}

        fetchable = [
            ref for ref in request.user_files if ref.filename and ref.access_url
        ]
        reference = reference_document_for(category)
        outcomes = await asyncio.gather(
            *(self._fetch_user_file(ref) for ref in fetchable),
            self._fetch_reference(reference) if reference else self._no_reference(),
        )
        user_outcomes = iter(outcomes[:-1])
        reference_outcome = outcomes[-1]

        # 1. User documents, in input order.
        for ref in request.user_files:
            if not (ref.filename and ref.access_url):
                logger.warning("Skipping user document with missing URL/filename")
                issues.append(SKIPPED_DOCUMENT_ISSUE)
                overall_success = False
                continue
            outcome = next(user_outcomes)
            if isinstance(outcome, bytes):
                entries[f"{USER_DOCUMENTS_DIR}/{user_entry_name(ref.filename)}"] = outcome
            else:
                entries[f"{USER_DOCUMENTS_DIR}/{error_entry_name(ref.filename)}"] = (
                    outcome.encode("utf-8")
                )
                issues.append(outcome)
                overall_success = False
        if not request.user_files:
            entries[f"{USER_DOCUMENTS_DIR}/INFO_NO_USER_DOCS.txt"] = NO_USER_DOCS_TEXT.encode(
                "utf-8"
            )

        # 2. Category sample form.
        if reference is not None:
            if isinstance(reference_outcome, bytes):
                entries[f"{SAMPLE_DOCUMENTS_DIR}/{reference.archive_name}"] = reference_outcome
            else:
                entries[
                    f"{SAMPLE_DOCUMENTS_DIR}/ERROR_FETCHING_SAMPLE_{category.value}.txt"
                ] = reference_outcome.encode("utf-8")
                issues.append(reference_outcome)
                overall_success = False
        elif category is ExportCategory.GENERAL:
            entries[f"{SAMPLE_DOCUMENTS_DIR}/{GENERAL_GUIDE_ARCHIVE_NAME}"] = (
                GENERAL_GUIDE_TEXT.encode("utf-8")
            )
        else:
            entries[
                f"{SAMPLE_DOCUMENTS_DIR}/INFO_NO_SAMPLE_FOR_CATEGORY_{category.value}.txt"
            ] = (
                "No specific sample document is configured for the category "
                f"'{category.value}'."
            ).encode("utf-8")

        # 3. Summary.
        generated_at = self._clock()
        entries[SUMMARY_FILENAME] = self._build_summary(
            request, generated_at, reference, issues
        ).encode("utf-8")

        # 4. Serialize.
        archive_filename = (
            f"{self._archive_prefix}_export_{category.value}_"
            f"{request.actor_id[:8]}_{to_epoch_millis(generated_at)}.zip"
        )
        try:
            archive_bytes = self._write_archive(entries)
        except Exception as e:
            logger.exception("Failed to write export archive for category=%s", category.value)
            await self._audit_logger.log_user_action(
                request.actor_id,
                request.actor_name,
                AuditLogAction.DOCUMENT_EXPORTED,
                f"Failed. Category: {category.value}, Error: {e}",
            )
            raise ExportAssemblyException(category.value, str(e)) from e

        if overall_success:
            human_message = f"Package for category '{category.value}' generated successfully."
            audit_details = f"Success. Category: {category.value}, Filename: {archive_filename}"
        else:
            human_message = (
                f"Package for category '{category.value}' generated with some issues. "
                "Please check summary.txt and any error files in the ZIP."
            )
            audit_details = f"Failed. Category: {category.value}, Issues: {len(issues)}"

        logger.info(
            "Export finished category=%s success=%s issues=%d size=%d",
            category.value,
            overall_success,
            len(issues),
            len(archive_bytes),
        )
        await self._audit_logger.log_user_action(
            request.actor_id,
            request.actor_name,
            AuditLogAction.DOCUMENT_EXPORTED,
            audit_details,
        )
        return ExportResult(
            overall_success=overall_success,
            archive_bytes=archive_bytes,
            archive_filename=archive_filename,
            human_message=human_message,
            issues=tuple(issues),
        )
