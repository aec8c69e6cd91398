"""
Pydantic schemas for the service catalogue and appointments.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, List, Optional
import enum


class AppointmentStatus(str, enum.Enum):
    """Appointment status enumeration."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CUSTOMER_ARRIVED = "customer_arrived"
    RECEPTION_CREATED = "reception_created"
    RECEPTION_APPROVED = "reception_approved"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    INVOICED = "invoiced"
    CANCELLED = "cancelled"
    CANCEL_REQUESTED = "cancel_requested"
    CANCEL_APPROVED = "cancel_approved"
    CANCEL_REFUNDED = "cancel_refunded"
    NO_SHOW = "no_show"


class Service(BaseModel):
    """Schema for service catalogue entries."""
    id: str = Field(alias="_id")
    name: str
    description: Optional[str] = None
    category: Optional[str] = None
    base_price: Optional[float] = Field(default=None, alias="basePrice")
    estimated_duration: Optional[int] = Field(default=None, alias="estimatedDuration")
    is_active: bool = Field(default=True, alias="isActive")

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class AppointmentService(BaseModel):
    service_id: Optional[Any] = Field(default=None, alias="serviceId")
    quantity: int = 1
    price: Optional[float] = None
    estimated_duration: Optional[int] = Field(default=None, alias="estimatedDuration")

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class AppointmentCreate(BaseModel):
    """Schema for booking an appointment."""
    vehicle_id: str = Field(alias="vehicleId")
    services: List[AppointmentService] = []
    scheduled_date: str = Field(alias="scheduledDate")
    scheduled_time: str = Field(alias="scheduledTime")
    technician_id: Optional[str] = Field(default=None, alias="technicianId")
    customer_notes: Optional[str] = Field(default=None, alias="customerNotes")

    model_config = ConfigDict(populate_by_name=True)


class Appointment(BaseModel):
    """Schema for appointment responses."""
    id: str = Field(alias="_id")
    appointment_number: Optional[str] = Field(default=None, alias="appointmentNumber")
    customer_id: Optional[Any] = Field(default=None, alias="customerId")
    vehicle_id: Optional[Any] = Field(default=None, alias="vehicleId")
    services: List[AppointmentService] = []
    status: AppointmentStatus = AppointmentStatus.PENDING
    scheduled_date: Optional[str] = Field(default=None, alias="scheduledDate")
    scheduled_time: Optional[str] = Field(default=None, alias="scheduledTime")
    assigned_technician: Optional[Any] = Field(default=None, alias="assignedTechnician")
    priority: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, extra="allow")
