"""Payload shape protocol."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class PayloadShape(Protocol):
    """Turns raw generated text into a validated payload.

    ``parse`` raises PayloadParseError when the text does not match the shape;
    it never returns a partially accepted payload.
    """

    name: str

    def parse(self, text: str) -> Any:
        ...
