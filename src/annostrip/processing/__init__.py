"""Public API surface for annostrip.processing."""
__all__ = [
    "cleaner_registry",
    "comment_rules",
    "docstrip",
    "engine",
    "line_ops",
]
