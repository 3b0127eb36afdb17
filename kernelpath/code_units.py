"""Helpers for working with strings of UTF-16 code units."""

SEPARATOR = "\\"
ALT_SEPARATOR = "/"

_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)
_BMP_LIMIT = 0xFFFF


def from_text(text: str) -> str:
    """Convert a Python string to code-unit form.

    Characters outside the BMP are split into surrogate pairs so that every
    character of the result is a single 16-bit code unit.
    """
    if all(ord(ch) <= _BMP_LIMIT for ch in text):
        return text
    units = []
    for ch in text:
        cp = ord(ch)
        if cp <= _BMP_LIMIT:
            units.append(ch)
            continue
        cp -= 0x10000
        units.append(chr(0xD800 + (cp >> 10)))
        units.append(chr(0xDC00 + (cp & 0x3FF)))
    return "".join(units)


def to_text(units: str) -> str:
    """Join valid surrogate pairs back into characters, keeping lone surrogates."""
    return to_utf16le(units).decode("utf-16-le", "surrogatepass")


def from_utf16le(data: bytes) -> str:
    """Decode little-endian UTF-16 bytes into code-unit form."""
    if len(data) % 2:
        msg = f"UTF-16 data must have an even length, got {len(data)} bytes"
        raise ValueError(msg)
    return "".join(
        chr(int.from_bytes(data[i : i + 2], "little")) for i in range(0, len(data), 2)
    )


def to_utf16le(units: str) -> bytes:
    """Encode code units as little-endian UTF-16 bytes."""
    return from_text(units).encode("utf-16-le", "surrogatepass")


def ascii_upper(units: str) -> str:
    """Uppercase ASCII letters only."""
    return units.translate(_ASCII_UPPER)


def is_ascii_letter(ch: str) -> bool:
    """Return True for a single character in A-Z or a-z."""
    return len(ch) == 1 and ("a" <= ch <= "z" or "A" <= ch <= "Z")
