"""Lookup between numeric status codes and their descriptions."""

from __future__ import annotations

STATUS_CODE_STRINGS: tuple[str, ...] = (
    "Address not found",
    "Connection dropped",
    "Connection timed out",
)


def get_status_code_string(status_code: int) -> str:
    """Return the description for ``status_code``.

    Raises IndexError for a code outside the known range.
    """
    if not 0 <= status_code < len(STATUS_CODE_STRINGS):
        raise IndexError(f"unknown status code {status_code}")
    return STATUS_CODE_STRINGS[status_code]


def string_to_status_code(status_code_string: str) -> int:
    """Return the numeric code whose description is ``status_code_string``.

    Raises ValueError when no code has that description.
    """
    try:
        return STATUS_CODE_STRINGS.index(status_code_string)
    except ValueError:
        raise ValueError(f"unknown status string {status_code_string!r}") from None