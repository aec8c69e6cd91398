"""
Pydantic schemas for request/response validation.
"""
from evservice.schemas.common import ApiResponse, Meta, extract_items
from evservice.schemas.user import User, UserRole, RegisterData, ProfileUpdate, LoginRequest
from evservice.schemas.vehicle import VehicleBase, VehicleCreate, VehicleUpdate, Vehicle
from evservice.schemas.service import Service, Appointment, AppointmentCreate, AppointmentStatus
from evservice.schemas.slot import Slot, SlotCreate, SlotStatus
from evservice.schemas.part import Part, PartRequest, PartRequestCreate, RequestedPart
from evservice.schemas.technician import TechnicianCandidate
from evservice.schemas.transaction import (
    TransactionType, PaymentPurpose, TransactionStatus, CardType, VerificationMethod,
    BillingInfo, CashPayment, CardPayment, BankTransferPayment, RefundRequest, Transaction,
)

__all__ = [
    "ApiResponse", "Meta", "extract_items",
    "User", "UserRole", "RegisterData", "ProfileUpdate", "LoginRequest",
    "VehicleBase", "VehicleCreate", "VehicleUpdate", "Vehicle",
    "Service", "Appointment", "AppointmentCreate", "AppointmentStatus",
    "Slot", "SlotCreate", "SlotStatus",
    "Part", "PartRequest", "PartRequestCreate", "RequestedPart",
    "TechnicianCandidate",
    "TransactionType", "PaymentPurpose", "TransactionStatus", "CardType", "VerificationMethod",
    "BillingInfo", "CashPayment", "CardPayment", "BankTransferPayment", "RefundRequest",
    "Transaction",
]
