"""
Pydantic schemas for parts and part requests.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, List, Optional
import enum


class PartRequestStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    PARTIALLY_APPROVED = "partially_approved"
    REJECTED = "rejected"
    FULFILLED = "fulfilled"


class PartRequestType(str, enum.Enum):
    INITIAL_SERVICE = "initial_service"
    ADDITIONAL_DURING_SERVICE = "additional_during_service"


class Part(BaseModel):
    """Schema for inventory parts."""
    id: str = Field(alias="_id")
    part_number: Optional[str] = Field(default=None, alias="partNumber")
    name: str
    category: Optional[str] = None
    brand: Optional[str] = None
    pricing: Optional[dict] = None
    inventory: Optional[dict] = None
    is_recommended: bool = Field(default=False, alias="isRecommended")

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @property
    def retail_price(self) -> Optional[float]:
        if self.pricing:
            return self.pricing.get("retail")
        return None

    @property
    def current_stock(self) -> Optional[int]:
        if self.inventory:
            return self.inventory.get("currentStock")
        return None


class RequestedPart(BaseModel):
    part_id: Any = Field(alias="partId")
    quantity: int = Field(ge=1)
    reason: str
    priority: str = "normal"
    available_quantity: int = Field(default=0, alias="availableQuantity")
    shortfall: int = 0

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class PartRequestCreate(BaseModel):
    """Schema for a technician's part request."""
    appointment_id: str = Field(alias="appointmentId")
    type: PartRequestType = PartRequestType.INITIAL_SERVICE
    requested_parts: List[RequestedPart] = Field(alias="requestedParts")
    request_notes: Optional[str] = Field(default=None, alias="requestNotes")

    model_config = ConfigDict(populate_by_name=True)


class PartRequest(BaseModel):
    """Schema for part request responses."""
    id: str = Field(alias="_id")
    request_number: Optional[str] = Field(default=None, alias="requestNumber")
    type: Optional[str] = None
    appointment_id: Optional[Any] = Field(default=None, alias="appointmentId")
    requested_by: Optional[Any] = Field(default=None, alias="requestedBy")
    requested_parts: List[RequestedPart] = Field(default_factory=list, alias="requestedParts")
    status: str = PartRequestStatus.PENDING.value

    model_config = ConfigDict(populate_by_name=True, extra="allow")
