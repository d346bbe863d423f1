"""Shared cross-cutting code: request context, telemetry, utilities."""
