from taxwise.application.use_cases.exports.export_package import (
    ExportPackageAssembler,
    error_entry_name,
    user_entry_name,
)

__all__ = ["ExportPackageAssembler", "error_entry_name", "user_entry_name"]
