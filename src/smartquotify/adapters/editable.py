from __future__ import annotations
"""Live conversion for text-input-like objects.

The adapter owns no typography: it reads the current content, calls
``transform`` and, only when the result differs, writes it back and moves
the caret by the length delta. The default rule table swaps one code
point for another, so the delta is usually zero.
"""

import logging
from typing import Optional

from smartquotify.api import OptionsLike, resolve_options, transform
from smartquotify.core.errors import InvalidSurfaceError
from smartquotify.core.interfaces.surface import EditableSurfaceProtocol
from smartquotify.logging.helpers import get_logger


def remap_caret(position: int, old_length: int, new_length: int) -> int:
    """Shift ``position`` by the length delta, clamped to ``[0, new_length]``."""
    return max(0, min(position + (new_length - old_length), new_length))


class LiveQuotifier:
    def __init__(
        self,
        surface: EditableSurfaceProtocol,
        options: OptionsLike = None,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if not isinstance(surface, EditableSurfaceProtocol):
            raise InvalidSurfaceError(
                f'{type(surface).__name__} is not editable: expected get_text/set_text/get_caret/set_caret'
            )
        self._surface = surface
        self._options = resolve_options(options)
        self._log = logger or get_logger('adapters.editable')

    @property
    def surface(self) -> EditableSurfaceProtocol:
        return self._surface

    def refresh(self) -> bool:
        """Convert the surface content in place; return True when it changed."""
        old = self._surface.get_text()
        new = transform(old, self._options)
        if new == old:
            return False

        caret = self._surface.get_caret()
        if caret is None:
            caret = len(old)
        self._surface.set_text(new)
        self._surface.set_caret(remap_caret(caret, len(old), len(new)))
        self._log.debug('live refresh: %d -> %d chars', len(old), len(new))
        return True
