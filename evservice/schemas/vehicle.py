"""
Pydantic schemas for Vehicle.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class VehicleBase(BaseModel):
    """Base vehicle schema with common fields."""
    make: str
    model: str
    year: int
    license_plate: str = Field(alias="licensePlate")
    vin: Optional[str] = None
    color: Optional[str] = None
    battery_capacity: Optional[float] = Field(default=None, alias="batteryCapacity")
    mileage: Optional[int] = None

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class VehicleCreate(VehicleBase):
    """Schema for registering a vehicle."""
    pass


class VehicleUpdate(BaseModel):
    """Schema for updating a vehicle."""
    make: Optional[str] = None
    model: Optional[str] = None
    year: Optional[int] = None
    license_plate: Optional[str] = Field(default=None, alias="licensePlate")
    vin: Optional[str] = None
    color: Optional[str] = None
    battery_capacity: Optional[float] = Field(default=None, alias="batteryCapacity")
    mileage: Optional[int] = None

    model_config = ConfigDict(populate_by_name=True)


class Vehicle(VehicleBase):
    """Schema for vehicle responses."""
    id: str = Field(alias="_id")
    customer_id: Optional[str] = Field(default=None, alias="customerId")
