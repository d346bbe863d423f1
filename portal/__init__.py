"""Corporate portal reporting service."""
