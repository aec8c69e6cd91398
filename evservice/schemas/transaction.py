"""
Pydantic schemas for payment transactions and refunds.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Dict, Optional
import enum


class TransactionType(str, enum.Enum):
    VNPAY = "vnpay"
    CASH = "cash"
    CARD = "card"
    BANK_TRANSFER = "bank_transfer"
    MOMO = "momo"
    ZALOPAY = "zalopay"


class PaymentPurpose(str, enum.Enum):
    APPOINTMENT_DEPOSIT = "appointment_deposit"
    APPOINTMENT_PAYMENT = "appointment_payment"
    INVOICE_PAYMENT = "invoice_payment"
    SERVICE_PAYMENT = "service_payment"
    REFUND = "refund"
    DEPOSIT_BOOKING = "deposit_booking"
    OTHER = "other"


class TransactionStatus(str, enum.Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"
    EXPIRED = "expired"
    REFUNDED = "refunded"
    DISPUTED = "disputed"


class CardType(str, enum.Enum):
    VISA = "visa"
    MASTERCARD = "mastercard"
    AMEX = "amex"
    JCB = "jcb"
    UNIONPAY = "unionpay"
    OTHER = "other"


class VerificationMethod(str, enum.Enum):
    BANK_STATEMENT = "bank_statement"
    SMS_CONFIRMATION = "sms_confirmation"
    ONLINE_BANKING = "online_banking"
    PHONE_VERIFICATION = "phone_verification"
    OTHER = "other"


class _Wire(BaseModel):
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)


class BillingInfo(_Wire):
    mobile: Optional[str] = None
    email: Optional[str] = None
    full_name: Optional[str] = Field(default=None, alias="fullName")
    address: Optional[str] = None


class _PaymentBase(_Wire):
    user_id: str = Field(alias="userId")
    appointment_id: Optional[str] = Field(default=None, alias="appointmentId")
    invoice_id: Optional[str] = Field(default=None, alias="invoiceId")
    amount: float = Field(gt=0)
    billing_info: Optional[BillingInfo] = Field(default=None, alias="billingInfo")
    notes: Optional[str] = None
    customer_notes: Optional[str] = Field(default=None, alias="customerNotes")


class CashData(_Wire):
    denomination: Optional[Dict[str, int]] = None
    change_given: Optional[float] = Field(default=None, alias="changeGiven")
    notes: Optional[str] = None


class CashPayment(_PaymentBase):
    """Schema for recording a cash payment."""
    cash_data: Optional[CashData] = Field(default=None, alias="cashData")


class CardData(_Wire):
    card_type: CardType = Field(alias="cardType")
    last4_digits: str = Field(alias="last4Digits")
    auth_code: Optional[str] = Field(default=None, alias="authCode")
    transaction_id: Optional[str] = Field(default=None, alias="transactionId")
    terminal_id: Optional[str] = Field(default=None, alias="terminalId")
    merchant_id: Optional[str] = Field(default=None, alias="merchantId")
    batch_number: Optional[str] = Field(default=None, alias="batchNumber")
    notes: Optional[str] = None

    @field_validator("last4_digits")
    @classmethod
    def four_digits(cls, value: str) -> str:
        if len(value) != 4 or not value.isdigit():
            raise ValueError("last4Digits must be exactly 4 digits")
        return value


class CardPayment(_PaymentBase):
    """Schema for recording a card payment."""
    card_data: CardData = Field(alias="cardData")


class BankTransferData(_Wire):
    bank_name: str = Field(alias="bankName")
    bank_code: Optional[str] = Field(default=None, alias="bankCode")
    transfer_ref: Optional[str] = Field(default=None, alias="transferRef")
    account_number: Optional[str] = Field(default=None, alias="accountNumber")
    account_holder: Optional[str] = Field(default=None, alias="accountHolder")
    transfer_date: Optional[str] = Field(default=None, alias="transferDate")
    verification_method: Optional[VerificationMethod] = Field(
        default=None, alias="verificationMethod"
    )
    verification_notes: Optional[str] = Field(default=None, alias="verificationNotes")
    receipt_image: Optional[str] = Field(default=None, alias="receiptImage")
    notes: Optional[str] = None


class BankTransferPayment(_PaymentBase):
    """Schema for recording a bank transfer."""
    bank_transfer_data: BankTransferData = Field(alias="bankTransferData")


class RefundRequest(_Wire):
    """Schema for refunding a transaction; no amount means a full refund."""
    amount: Optional[float] = Field(default=None, gt=0)
    reason: str = Field(min_length=1)
    customer_notes: Optional[str] = Field(default=None, alias="customerNotes")

    @field_validator("reason")
    @classmethod
    def reason_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("reason is required")
        return value.strip()


class Transaction(BaseModel):
    """Schema for transaction responses."""
    id: str = Field(alias="_id")
    transaction_ref: Optional[str] = Field(default=None, alias="transactionRef")
    transaction_type: str = Field(alias="transactionType")
    payment_purpose: Optional[str] = Field(default=None, alias="paymentPurpose")
    user_id: Optional[Any] = Field(default=None, alias="userId")
    appointment_id: Optional[Any] = Field(default=None, alias="appointmentId")
    invoice_id: Optional[Any] = Field(default=None, alias="invoiceId")
    amount: float = 0
    paid_amount: float = Field(default=0, alias="paidAmount")
    currency: str = "VND"
    status: str = TransactionStatus.PENDING.value
    created_at: Optional[str] = Field(default=None, alias="createdAt")

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @property
    def refundable(self) -> bool:
        return self.status == TransactionStatus.COMPLETED.value
