"""
Appointment lifecycle - status transitions

Appointment statuses: pending → confirmed → completed, pending/confirmed → cancelled

Note:
- 'completed' is manual only (an administrative action, never time based)
- 'cancelled' and 'completed' are terminal
- hard deletion is allowed from any status and is not a transition
"""

from ...exceptions import InvalidTransitionException
from ...models import AppointmentStatus

CONFIRM = "confirm"
CANCEL = "cancel"
COMPLETE = "complete"
DELETE = "delete"

# Define valid manual transitions for appointments
valid_transitions = {
    AppointmentStatus.PENDING.value: [AppointmentStatus.CONFIRMED.value, AppointmentStatus.CANCELLED.value],
    AppointmentStatus.CONFIRMED.value: [AppointmentStatus.COMPLETED.value, AppointmentStatus.CANCELLED.value],
    AppointmentStatus.CANCELLED.value: [],  # Terminal state
    AppointmentStatus.COMPLETED.value: [],  # Terminal state
}

ACTION_TARGETS = {
    CONFIRM: AppointmentStatus.CONFIRMED.value,
    CANCEL: AppointmentStatus.CANCELLED.value,
    COMPLETE: AppointmentStatus.COMPLETED.value,
}


def validate_status_transition(current_status: str, new_status: str) -> bool:
    """
    Validate if an appointment status transition is allowed

    Args:
        current_status: Current appointment status
        new_status: Desired new status

    Returns:
        bool: True if transition is valid, False otherwise
    """
    # Allow same status (no-op)
    if current_status == new_status:
        return True

    return new_status in valid_transitions.get(current_status, [])


def allowed_actions(current_status: str) -> list[str]:
    """Actions that would change the status from here, plus delete."""
    actions = [
        action
        for action, target in ACTION_TARGETS.items()
        if target in valid_transitions.get(current_status, [])
    ]
    actions.append(DELETE)
    return actions


def next_status(current_status: str, action: str) -> str:
    """
    Resolve the status an action leads to.

    Repeating an action on the status it already produced is a no-op and
    returns the current status.

    Raises:
        ValueError: Unknown action
        InvalidTransitionException: Action not allowed from current_status
    """
    if action not in ACTION_TARGETS:
        raise ValueError(f"Unknown lifecycle action: {action}")

    target = ACTION_TARGETS[action]
    if not validate_status_transition(current_status, target):
        raise InvalidTransitionException(action, current_status, allowed_actions(current_status))
    return target
