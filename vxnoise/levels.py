"""Instruction-set levels used to choose a noise implementation."""

from __future__ import annotations

from enum import Enum


class UnsupportedLevelError(RuntimeError):
    """Raised when a requested instruction-set level cannot be used."""


class SimdLevel(Enum):
    """Instruction-set level a noise generator may be built for."""

    AUTO = "auto"
    NONE = "none"
    SSE2 = "sse2"
    SSE42 = "sse42"
    AVX2 = "avx2"
    NEON = "neon"

    @classmethod
    def parse(cls, value: "SimdLevel | str | None") -> "SimdLevel":
        """Turn a level, its name or its value into a ``SimdLevel``."""
        if value is None:
            return cls.AUTO
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip()
            try:
                return cls(text.lower())
            except ValueError:
                pass
            try:
                return cls[text.upper()]
            except KeyError:
                pass
        raise ValueError(f"unknown SIMD level: {value!r}")


# Every x86 level is evaluated with the same vectorised array code, so all of
# them are available on any machine.
_SUPPORTED = frozenset({SimdLevel.NONE, SimdLevel.SSE2, SimdLevel.SSE42, SimdLevel.AVX2})
_FASTEST = SimdLevel.AVX2


def resolve_level(level: "SimdLevel | str | None" = SimdLevel.AUTO) -> SimdLevel:
    """Return the concrete level to build for.

    ``AUTO`` picks the fastest supported level. ``NEON`` is rejected, as is
    any level that is not supported.
    """
    parsed = SimdLevel.parse(level)
    if parsed is SimdLevel.AUTO:
        return _FASTEST
    if parsed is SimdLevel.NEON:
        raise UnsupportedLevelError("SIMD level 'NEON' not yet supported!")
    if parsed not in _SUPPORTED:
        raise UnsupportedLevelError(
            f"Computer does not support SIMD level {parsed.name}!"
        )
    return parsed