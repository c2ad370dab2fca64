"""Cross-cutting helpers: enums, telemetry, utilities."""
