# ============================================================================
# FILE: app/core/status.py
# ============================================================================
from enum import Enum
from typing import Dict, List

class ItemStatus(str, Enum):
    """Tracking status of an item"""
    PENDING = "pending"
    ON_HOLD = "on-hold"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    STOPPED = "stopped"

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]

# Display labels shown to users
STATUS_LABELS: Dict[ItemStatus, str] = {
    ItemStatus.PENDING: "Ongoing",
    ItemStatus.ON_HOLD: "Hiatus",
    ItemStatus.IN_PROGRESS: "Waiting",
    ItemStatus.COMPLETED: "Completed",
    ItemStatus.STOPPED: "Retired",
}

STATUS_VALUES: List[str] = [status.value for status in ItemStatus]
