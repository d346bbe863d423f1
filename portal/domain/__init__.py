"""Domain layer: exceptions, role enums, and access predicates (no I/O)."""
