"""Security helpers for rawhtml."""

from .sanitizer import DEFAULT_BLOCKED_SCHEMES, AttributeSanitizer, sanitize_attribute_value

__all__ = ["AttributeSanitizer", "DEFAULT_BLOCKED_SCHEMES", "sanitize_attribute_value"]
