"""Application DTOs: validated backend rows and report dataclasses."""
