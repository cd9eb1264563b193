import pytest

from vxnoise.levels import SimdLevel, UnsupportedLevelError, resolve_level


def test_auto_resolves_to_fastest():
    assert resolve_level(SimdLevel.AUTO) is SimdLevel.AVX2


def test_none_argument_means_auto():
    assert resolve_level(None) is resolve_level(SimdLevel.AUTO)


@pytest.mark.parametrize(
    "level", [SimdLevel.NONE, SimdLevel.SSE2, SimdLevel.SSE42, SimdLevel.AVX2]
)
def test_explicit_levels_are_kept(level):
    assert resolve_level(level) is level


def test_neon_is_rejected():
    with pytest.raises(UnsupportedLevelError, match="NEON"):
        resolve_level(SimdLevel.NEON)


def test_unsupported_error_is_runtime_error():
    with pytest.raises(RuntimeError):
        resolve_level("neon")


@pytest.mark.parametrize("text", ["sse42", "SSE42", " Sse42 "])
def test_strings_are_parsed(text):
    assert resolve_level(text) is SimdLevel.SSE42


def test_unknown_string_raises_value_error():
    with pytest.raises(ValueError):
        resolve_level("mmx")


def test_parse_round_trip():
    for level in SimdLevel:
        assert SimdLevel.parse(level.value) is level
        assert SimdLevel.parse(level.name) is level