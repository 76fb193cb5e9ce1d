"""Tests for identifier construction."""

import pytest

from gmlsurface.model import Gml, Id


class TestIdParse:
    def test_valid(self):
        assert Id.parse("UUID_6b33ecfa-6e08") == Id("UUID_6b33ecfa-6e08")

    @pytest.mark.parametrize("text", [None, "", " ", "a b", "tab\tid", "line\n"])
    def test_invalid(self, text):
        assert Id.parse(text) is None

    def test_non_string(self):
        assert Id.parse(42) is None


class TestIdFromHash:
    def test_hex_format(self):
        assert Id.from_hashed_u64(255).value == "00000000000000ff"

    def test_masked_to_64_bits(self):
        assert Id.from_hashed_u64(2 ** 64 + 1) == Id("0000000000000001")
        assert Id.from_hashed_u64(-1) == Id("ffffffffffffffff")

    def test_round_trips_through_parse(self):
        derived = Id.from_hashed_u64(0xDEADBEEF)
        assert Id.parse(str(derived)) == derived


class TestGml:
    def test_hashable(self):
        assert len({Gml(Id("a")), Gml(Id("a")), Gml(Id("b"))}) == 2
