"""Fixed reference (sample) documents bundled with each export category."""

from __future__ import annotations

from dataclasses import dataclass

from taxwise.domain.enums import ExportCategory


@dataclass(frozen=True)
class ReferenceDocument:
    """Object-store path of a sample form and its name inside the archive."""

    storage_path: str
    archive_name: str


_SAMPLE_ROOT = "app_resources/sample_documents"

REFERENCE_DOCUMENTS: dict[ExportCategory, ReferenceDocument | None] = {
    ExportCategory.MEDICAL: ReferenceDocument(
        f"{_SAMPLE_ROOT}/medical_KND1151156.pdf.pdf", "sample_medical_KND1151156.pdf"
    ),
    ExportCategory.EDUCATIONAL: ReferenceDocument(
        f"{_SAMPLE_ROOT}/educational_KND1151158.pdf", "sample_educational_KND1151158.pdf"
    ),
    ExportCategory.PROPERTY: ReferenceDocument(
        f"{_SAMPLE_ROOT}/property_KND1150117.pdf", "sample_property_KND1150117.pdf"
    ),
    ExportCategory.SOCIAL: ReferenceDocument(
        f"{_SAMPLE_ROOT}/social_KND1150130.pdf", "sample_social_KND1150130.pdf"
    ),
    ExportCategory.INVESTMENTS: ReferenceDocument(
        f"{_SAMPLE_ROOT}/investments_KND1150145.pdf", "sample_investments_KND1150145.pdf"
    ),
    ExportCategory.GENERAL: None,
}

_missing = set(ExportCategory) - set(REFERENCE_DOCUMENTS)
if _missing:
    raise RuntimeError(
        "REFERENCE_DOCUMENTS has no entry for: "
        + ", ".join(sorted(c.value for c in _missing))
    )

GENERAL_GUIDE_ARCHIVE_NAME = "sample_general_guide.txt"

GENERAL_GUIDE_TEXT = (
    "TaxWise general export\n"
    "\n"
    "No official sample form is bundled for the 'general' category.\n"
    "Use the documents in user_documents/ together with the deduction form that\n"
    "matches each expense (medical, educational, property, social or investments).\n"
    "Export a specific category to receive its sample form.\n"
)


def reference_document_for(category: ExportCategory) -> ReferenceDocument | None:
    return REFERENCE_DOCUMENTS[category]
