"""
Clearance state evaluation
"""

from typing import Any, Mapping, Optional


def is_fully_cleared(status: Optional[Mapping[str, Any]]) -> bool:
    """
    Check whether every department flag is true

    Args:
        status: Mapping of department to flag

    Returns:
        True if the mapping is non-empty and every flag is True
    """
    if not status:
        return False
    return all(value is True for value in status.values())
