"""Thin adapters that feed live text surfaces through ``transform``."""
from .editable import LiveQuotifier, remap_caret

__all__ = ["LiveQuotifier", "remap_caret"]
