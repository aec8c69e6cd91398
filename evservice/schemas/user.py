"""
Pydantic schemas for User and Authentication.
"""
from pydantic import BaseModel, EmailStr, ConfigDict, Field
from typing import List, Optional
import enum


class UserRole(str, enum.Enum):
    """User role enumeration."""
    CUSTOMER = "customer"
    STAFF = "staff"
    TECHNICIAN = "technician"
    ADMIN = "admin"


class TechnicianAvailability(BaseModel):
    status: str = "available"
    current_appointment: Optional[str] = Field(default=None, alias="currentAppointment")

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class TechnicianProfileSummary(BaseModel):
    """Technician details embedded in the user payload."""
    id: Optional[str] = Field(default=None, alias="_id")
    employee_id: Optional[str] = Field(default=None, alias="employeeId")
    specializations: List[str] = []
    skill_level: Optional[int] = Field(default=None, alias="skillLevel")
    availability: Optional[TechnicianAvailability] = None

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class User(BaseModel):
    """Schema for user responses."""
    id: str = Field(alias="_id")
    email: str
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    phone: Optional[str] = None
    role: UserRole = UserRole.CUSTOMER
    avatar: Optional[str] = None
    is_active: bool = Field(default=True, alias="isActive")
    is_email_verified: bool = Field(default=False, alias="isEmailVerified")
    technician_profile: Optional[TechnicianProfileSummary] = Field(
        default=None, alias="technicianProfile"
    )

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @property
    def full_name(self) -> str:
        extra = self.model_extra or {}
        if extra.get("fullName"):
            return extra["fullName"]
        return f"{self.first_name} {self.last_name}".strip() or self.email


class RegisterData(BaseModel):
    """Schema for creating an account."""
    email: EmailStr
    password: str
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    phone: str
    role: Optional[UserRole] = None

    model_config = ConfigDict(populate_by_name=True)


class ProfileUpdate(BaseModel):
    """Schema for updating the current user."""
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    phone: Optional[str] = None
    avatar: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class LoginRequest(BaseModel):
    """Schema for login request."""
    email: str
    password: str
