"""Protocols that flag registries and config decoders are written against."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Settable(Protocol):
    """A value that can be assigned from text and rendered back to text."""

    def set(self, text: str, /) -> None: ...
    def __str__(self) -> str: ...


@runtime_checkable
class TextUnmarshaler(Protocol):
    """A value that can be assigned from raw text bytes."""

    def unmarshal_text(self, data: bytes, /) -> None: ...
