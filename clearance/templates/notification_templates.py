"""
Notification titles and message bodies
"""

from typing import Iterable, Tuple
from clearance.utils.helpers import format_department_name

STATUS_UPDATED_TITLE = 'Clearance Status Updated'
CLEARANCE_COMPLETED_TITLE = 'Clearance Completed'
CLEARANCE_COMPLETED_MESSAGE = (
    'Congratulations! All your clearance items have been completed. '
    'You can now download your clearance certificate.'
)


def get_status_update_message(changes: Iterable[Tuple[str, bool]]) -> str:
    """
    Build the status update message, one line per changed department.

    Args:
        changes: (department, new_status) pairs

    Returns:
        Multi-line message, e.g.::

            Your clearance status has been updated:
            Library: Cleared
            Academic department: Not Cleared
    """
    lines = [
        f"{format_department_name(department)}: {'Cleared' if status else 'Not Cleared'}"
        for department, status in changes
    ]
    return "Your clearance status has been updated:\n" + "\n".join(lines)
