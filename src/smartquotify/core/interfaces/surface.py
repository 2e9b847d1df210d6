from __future__ import annotations
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class EditableSurfaceProtocol(Protocol):
    """Text-input-like object whose content can be rewritten in place."""

    def get_text(self) -> str: ...

    def set_text(self, text: str) -> None: ...

    def get_caret(self) -> Optional[int]: ...

    def set_caret(self, position: int) -> None: ...
