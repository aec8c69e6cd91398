"""
Transaction routes: staff payment recording, refunds and statistics.
"""
from typing import Optional

from evservice.resources.base import Resource, payload
from evservice.schemas.transaction import RefundRequest


class TransactionsResource(Resource):

    def list(self, params: Optional[dict] = None):
        """
        Get all transactions (staff/admin) with pagination and filters.
        """
        return self.client.get("/api/transactions", params=params)

    def mine(self, params: Optional[dict] = None):
        return self.client.get("/api/transactions/my", params=params)

    def get(self, transaction_id: str):
        return self.client.get(f"/api/transactions/{transaction_id}")

    def record_cash(self, cash_payment):
        return self.client.post("/api/transactions/cash", payload(cash_payment))

    def record_card(self, card_payment):
        return self.client.post("/api/transactions/card", payload(card_payment))

    def record_bank_transfer(self, bank_transfer_payment):
        return self.client.post("/api/transactions/bank-transfer", payload(bank_transfer_payment))

    def refund(self, transaction_id: str, refund):
        """
        Refund a transaction. `refund` is a RefundRequest or a dict with the
        same fields; it is validated before anything is sent.
        """
        if not isinstance(refund, RefundRequest):
            refund = RefundRequest.model_validate(refund)
        return self.client.post(f"/api/transactions/{transaction_id}/refund", payload(refund))

    def update_status(self, transaction_id: str, status: str, additional_data: Optional[dict] = None):
        body = {"status": status}
        if additional_data:
            body["additionalData"] = additional_data
        return self.client.put(f"/api/transactions/{transaction_id}/status", body)

    def statistics(self, params: Optional[dict] = None):
        return self.client.get("/api/transactions/statistics", params=params)

    def process_expired(self):
        return self.client.post("/api/transactions/process-expired")
