"""Use cases: export package assembly and deduction suggestions."""
