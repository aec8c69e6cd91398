"""
Pydantic schemas for technician slots.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, List, Optional
import enum


class SlotStatus(str, enum.Enum):
    """Slot status enumeration."""
    AVAILABLE = "available"
    PARTIALLY_BOOKED = "partially_booked"
    FULL = "full"
    BLOCKED = "blocked"


class Slot(BaseModel):
    """A 2-hour availability window."""
    id: Optional[str] = Field(default=None, alias="_id")
    # Either populated user objects or bare ids.
    technician_ids: List[Any] = Field(default_factory=list, alias="technicianIds")
    date: str
    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")
    capacity: int = 1
    booked_count: Optional[int] = Field(default=0, alias="bookedCount")
    status: str = SlotStatus.AVAILABLE.value

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def can_book(self) -> bool:
        return self.status in (SlotStatus.AVAILABLE.value, SlotStatus.PARTIALLY_BOOKED.value)


class SlotCreate(BaseModel):
    """Schema for creating a slot."""
    date: str
    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")
    capacity: int = 1
    technician_ids: List[str] = Field(default_factory=list, alias="technicianIds")

    model_config = ConfigDict(populate_by_name=True)
