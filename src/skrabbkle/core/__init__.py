"""Cross-cutting helpers: errors, sanitizing, schemas, telemetry."""
