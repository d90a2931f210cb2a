"""
JSON text codec for perspective element lists.

The relational table stores element lists as JSON array text. Encoding
then decoding returns an equal list, order preserved, ``[]`` included.

Dependencies: json
System role: Column serialization for the relational record store
"""

import json


def encode_elements(elements: list[str]) -> str:
    """Serialize an element list to JSON array text."""
    return json.dumps(list(elements), ensure_ascii=False)


def decode_elements(raw: str) -> list[str]:
    """
    Parse JSON array text back into an element list.

    Raises:
        ValueError: If the text is not a JSON array of strings
    """
    value = json.loads(raw)
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"Expected JSON array of strings, got {raw[:100]!r}")
    return value
