"""
Shared test helpers: an independent NMEA checksum validator.
"""

import pytest


def checksum_is_valid(sentence: str) -> bool:
    """Recompute the XOR between '$' and '*' and compare with the suffix."""
    if not sentence.startswith("$") or "*" not in sentence:
        return False
    body, _, provided = sentence[1:].rpartition("*")
    if len(provided) != 2:
        return False
    calculated = 0
    for ch in body:
        calculated ^= ord(ch)
    try:
        return calculated == int(provided, 16)
    except ValueError:
        return False


@pytest.fixture
def valid_checksum():
    return checksum_is_valid
