"""Tests for the category -> reference document table."""

import pytest

from taxwise.application.services.reference_documents import (
    REFERENCE_DOCUMENTS,
    reference_document_for,
)
from taxwise.domain.enums import ExportCategory


def test_every_category_has_an_entry() -> None:
    assert set(REFERENCE_DOCUMENTS) == set(ExportCategory)


def test_only_general_has_no_reference_document() -> None:
    unmapped = [c for c, doc in REFERENCE_DOCUMENTS.items() if doc is None]
    assert unmapped == [ExportCategory.GENERAL]


@pytest.mark.parametrize(
    ("category", "path", "archive_name"),
    [
        (
            ExportCategory.MEDICAL,
            "app_resources/sample_documents/medical_KND1151156.pdf.pdf",
            "sample_medical_KND1151156.pdf",
        ),
        (
            ExportCategory.EDUCATIONAL,
            "app_resources/sample_documents/educational_KND1151158.pdf",
            "sample_educational_KND1151158.pdf",
        ),
        (
            ExportCategory.PROPERTY,
            "app_resources/sample_documents/property_KND1150117.pdf",
            "sample_property_KND1150117.pdf",
        ),
        (
            ExportCategory.SOCIAL,
            "app_resources/sample_documents/social_KND1150130.pdf",
            "sample_social_KND1150130.pdf",
        ),
        (
            ExportCategory.INVESTMENTS,
            "app_resources/sample_documents/investments_KND1150145.pdf",
            "sample_investments_KND1150145.pdf",
        ),
    ],
)
def test_reference_document_paths(
    category: ExportCategory, path: str, archive_name: str
) -> None:
    doc = reference_document_for(category)
    assert doc is not None
    assert doc.storage_path == path
    assert doc.archive_name == archive_name


def test_category_values() -> None:
    assert ExportCategory.values() == [
        "medical",
        "educational",
        "property",
        "social",
        "investments",
        "general",
    ]
