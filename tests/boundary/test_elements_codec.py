"""
Test suite for the element list JSON codec.

System role: Verification of element column serialization
"""

import pytest

from inverselens.boundary.store.elements_codec import decode_elements, encode_elements


class TestElementsCodec:
    """Test suite for encode_elements / decode_elements."""

    def test_empty_list_should_encode_to_empty_array(self) -> None:
        assert encode_elements([]) == "[]"
        assert decode_elements("[]") == []

    @pytest.mark.parametrize(
        "elements",
        [
            ["red", "circle"],
            ["z", "y", "x", "w"],
            ["same", "same"],
            ["comma, inside", 'quote "inside"', "ünïcödé", ""],
        ],
    )
    def test_round_trip_should_preserve_order_and_content(self, elements: list[str]) -> None:
        assert decode_elements(encode_elements(elements)) == elements

    @pytest.mark.parametrize("raw", ['{"a": 1}', '"text"', "[1, 2]", "null"])
    def test_decode_should_reject_non_string_arrays(self, raw: str) -> None:
        with pytest.raises(ValueError):
            decode_elements(raw)

    def test_decode_should_reject_invalid_json(self) -> None:
        with pytest.raises(ValueError):
            decode_elements("[unterminated")
