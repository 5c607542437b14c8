"""
Response Formats

Maps the ?format= query parameter to an encode/decode strategy.

    ?format=json   → JsonFormat
    (absent / "")  → settings.DEFAULT_FORMAT
    ?format=xml    → FormatNotImplementedError (501)

Lookup is exact and case-sensitive. The registry is filled at startup and
only read afterwards.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional

from fastapi.encoders import jsonable_encoder

from restwire.config.settings import settings
from restwire.shared.core.exceptions import FormatNotImplementedError


class ResponseFormat(ABC):
    """Serialization strategy for envelopes and request bodies."""

    name: str
    media_type: str

    @abstractmethod
    def encode(self, payload: Any) -> bytes:
        """Serialize a response payload."""

    @abstractmethod
    def decode(self, body: bytes) -> Any:
        """Parse a request body. Raises ValueError on malformed input."""


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


class JsonFormat(ResponseFormat):
    """
    Compact JSON with keys in lexical order.

    Sorting keys makes envelopes byte-stable:
        {"error":"...","success":false}
        {"result":{...},"success":true}
    """

    name = "json"
    media_type = "application/json"

    def encode(self, payload: Any) -> bytes:
        # NaN and Infinity have no JSON spelling; dumps raises ValueError
        return json.dumps(
            jsonable_encoder(payload),
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        ).encode("utf-8")

    def decode(self, body: bytes) -> Any:
        # json.JSONDecodeError subclasses ValueError
        return json.loads(body, parse_constant=_reject_constant)


class FormatRegistry:
    """Fixed mapping of format identifiers to strategies."""

    def __init__(
        self,
        formats: Optional[Iterable[ResponseFormat]] = None,
        default: Optional[str] = None,
    ) -> None:
        self._formats: dict[str, ResponseFormat] = {}
        self._default = default or settings.DEFAULT_FORMAT
        for fmt in formats or ():
            self.register(fmt)

    def register(self, fmt: ResponseFormat) -> None:
        self._formats[fmt.name] = fmt

    def names(self) -> list[str]:
        return sorted(self._formats)

    @property
    def default(self) -> ResponseFormat:
        return self._formats[self._default]

    def resolve(self, value: Optional[str]) -> ResponseFormat:
        """
        Resolve a ?format= value to a strategy.

        Args:
            value: Raw query parameter; None or "" selects the default

        Returns:
            The registered ResponseFormat

        Raises:
            FormatNotImplementedError: value is not a registered identifier
        """
        name = value or self._default
        fmt = self._formats.get(name)
        if fmt is None:
            raise FormatNotImplementedError(name)
        return fmt


# Registry used by the dispatcher unless one is passed explicitly
format_registry = FormatRegistry([JsonFormat()])
