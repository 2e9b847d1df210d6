"""Public API surface for smartquotify.processing."""
__all__ = [
    "protect_rules",
    "quote_rules",
    "text_ops",
    "zones",
]
