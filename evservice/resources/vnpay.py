"""
VNPay gateway routes.
"""
from typing import Optional

from evservice.resources.base import Resource


class VNPayResource(Resource):

    def create_payment(self, payment_data: dict):
        """Returns the gateway redirect URL under `data.paymentUrl`."""
        return self.client.post("/api/vnpay/create-payment", payment_data)

    def check_transaction(self, transaction_ref: str):
        return self.client.post("/api/vnpay/check-transaction", {"transactionRef": transaction_ref})

    def verify_appointment_payment(self, payment_data: dict):
        return self.client.post("/api/vnpay/verify-appointment-payment", payment_data)

    def payment_methods(self):
        return self.client.get("/api/vnpay/payment-methods")

    def my_transactions(self, params: Optional[dict] = None):
        return self.client.get("/api/vnpay/transactions", params=params)

    def all_transactions(self, params: Optional[dict] = None):
        return self.client.get("/api/vnpay/transactions/all", params=params)

    def transaction(self, transaction_id: str):
        return self.client.get(f"/api/vnpay/transactions/{transaction_id}")

    def transaction_stats(self, params: Optional[dict] = None):
        return self.client.get("/api/vnpay/transactions/stats", params=params)

    def update_transaction_status(self, transaction_id: str, status_data: dict):
        return self.client.put(f"/api/vnpay/transactions/{transaction_id}/status", status_data)

    def refund(self, transaction_id: str, refund_data: dict):
        return self.client.post(f"/api/vnpay/transactions/{transaction_id}/refund", refund_data)

    def expired_transactions(self):
        return self.client.get("/api/vnpay/transactions/expired")

    def cleanup_expired(self):
        return self.client.post("/api/vnpay/transactions/cleanup-expired")
