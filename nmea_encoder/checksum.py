"""
NMEA 0183 checksum: XOR of every byte between '$' and '*'.
"""

import logging

logger = logging.getLogger(__name__)


def compute_checksum(body: str) -> int:
    """
    XOR of all bytes of body (0-255).

    body is everything strictly between '$' and '*'. Raises ValueError if it
    contains non-ASCII characters.
    """
    try:
        data = body.encode("ascii")
    except UnicodeEncodeError as e:
        raise ValueError(f"NMEA body is not ASCII: {body!r}") from e
    checksum = 0
    for byte in data:
        checksum ^= byte
    return checksum


def format_checksum(checksum: int) -> str:
    """Two uppercase hex digits, zero padded."""
    return f"{checksum:02X}"


def wrap_sentence(body: str) -> str:
    """Return "$" + body + "*" + checksum. No CR/LF is appended."""
    sentence = f"${body}*{format_checksum(compute_checksum(body))}"
    logger.debug("Built %s", sentence)
    return sentence
