import logging
from enum import Enum
from typing import Any, Optional

from account_api.core.models import ValidationError
from account_api.api.v1.models import Status

logger = logging.getLogger(__name__)


class ReactivationTrigger(str, Enum):
    SUCCESSFUL_AUTH = "SUCCESSFUL_AUTH"
    PASSWORD_RESET = "PASSWORD_RESET"


def validate_status(status: Optional[Any]) -> str:
    """Return the canonical status value, or raise ValidationError."""
    if not status:
        raise ValidationError("status is required")
    value = getattr(status, "value", status)
    if value not in (Status.ACTIVE.value, Status.INACTIVE.value):
        raise ValidationError(f"invalid status '{value}', expected ACTIVE or INACTIVE")
    return value


def reactivate(entity: Any, trigger: ReactivationTrigger) -> bool:
    """
    Move an INACTIVE entity back to ACTIVE.

    The caller persists the change. Returns True when a transition happened.
    """
    entity.touch()
    if entity.status == Status.ACTIVE.value:
        return False

    entity.status = Status.ACTIVE.value
    logger.info(
        "%s %s reactivated (%s)",
        type(entity).__name__, getattr(entity, "id", None), trigger.value,
    )
    return True
