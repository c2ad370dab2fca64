"""Domain layer: enums and exceptions (no framework imports)."""
