from __future__ import annotations

"""
Permission Specification Checks.

Validates octal-style permission strings ("755", "640") before a batch
permission change is attempted.
"""

from typing import Optional

OWNER_READ = 4
_OCTAL_DIGITS = frozenset("01234567")


class InvalidPermissionError(ValueError):
    """Raised when a permission string cannot be converted to a mode."""


def check_file_permissions(spec: Optional[str]) -> bool:
    """
    Check whether a permission string grants the owner read access.

    Only the first digit is inspected. Anything that is not a non-empty run
    of ASCII digits 0-9 is rejected without raising, including digits from
    other scripts such as "٧" or fullwidth "７".

    Args:
        spec: Permission string such as "750".

    Returns:
        bool: True if the owner digit has the read bit (>= 4).
    """
    if not spec or not isinstance(spec, str):
        return False
    # isdigit() accepts superscripts and other non-ASCII digits
    if not all("0" <= ch <= "9" for ch in spec):
        return False
    return int(spec[0]) >= OWNER_READ


def is_valid_mode(spec: Optional[str]) -> bool:
    """Return True for owner/group/other strings of exactly three octal digits."""
    if not spec or not isinstance(spec, str):
        return False
    return len(spec) == 3 and all(ch in _OCTAL_DIGITS for ch in spec)


def parse_mode(spec: str) -> int:
    """
    Convert a permission string to the integer mode used by os.chmod.

    Args:
        spec: Octal permission string.

    Returns:
        int: Numeric mode (e.g. 0o755).

    Raises:
        InvalidPermissionError: If the string is not a valid octal mode.
    """
    if not is_valid_mode(spec):
        raise InvalidPermissionError(f"Invalid permission mode: {spec!r}")
    return int(spec, 8)
