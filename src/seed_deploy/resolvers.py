"""Typed lookups of deployment values from a key/value configuration source."""

from __future__ import annotations

import re
from typing import Mapping, Optional

from .errors import ConfigurationError
from .units import parse_units

ADDRESS_PATTERN = re.compile(r"^0x[0-9a-fA-F]{40}$")


def is_address(value: str) -> bool:
    return ADDRESS_PATTERN.fullmatch(value) is not None


def _lookup(source: Mapping[str, str], key: str) -> Optional[str]:
    """Return the raw value for ``key``, treating empty strings as unset."""
    value = source.get(key)
    return value if value else None


class AddressResolver:
    """Resolve 20-byte hex addresses, optionally falling back to a default."""

    def __init__(self, source: Mapping[str, str]):
        self._source = source

    def resolve(self, key: str, default: Optional[str] = None) -> str:
        """Resolve ``key`` to an address, using ``default`` when it is unset.

        The value is returned exactly as configured (checksum casing is kept).

        Raises:
            ConfigurationError: If neither the key nor a default is present,
                or the value is not ``0x`` followed by 40 hex digits.
        """
        value = _lookup(self._source, key) or default
        if not value:
            raise ConfigurationError(key, "missing required value, no default available")
        if not is_address(value):
            raise ConfigurationError(
                key, f"malformed address {value!r}, expected a 20-byte 0x-prefixed hex string"
            )
        return value

    def require_explicit(self, key: str) -> str:
        """Resolve ``key`` with no default path at all."""
        return self.resolve(key)

    def resolve_optional(self, key: str) -> Optional[str]:
        """Resolve ``key`` if it is set, return ``None`` otherwise."""
        if _lookup(self._source, key) is None:
            return None
        return self.resolve(key)


class AmountResolver:
    """Resolve decimal token amounts into fixed-point integers."""

    def __init__(self, source: Mapping[str, str]):
        self._source = source

    def resolve(self, key: str, decimals: int, fallback: str) -> int:
        """Resolve ``key`` (or ``fallback``) scaled by ``10**decimals``.

        Raises:
            ConfigurationError: If the text is not a non-negative decimal with
                at most ``decimals`` fractional digits.
        """
        raw = self._source.get(key)
        text = fallback if raw is None else raw
        try:
            return parse_units(text, decimals)
        except ValueError as e:
            raise ConfigurationError(key, f"invalid numeric amount: {e}") from e

    def resolve_decimals(self, key: str, fallback: str) -> int:
        """Resolve a non-negative integer decimal count."""
        raw = self._source.get(key)
        text = (fallback if raw is None else raw).strip()
        if not (text.isascii() and text.isdigit()):
            raise ConfigurationError(
                key, f"invalid decimals {text!r}, expected a non-negative integer"
            )
        return int(text)
