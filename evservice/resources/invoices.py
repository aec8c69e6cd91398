"""
Invoice routes.
"""
from pathlib import Path
from typing import Optional

from evservice.resources.base import Resource


class InvoicesResource(Resource):

    def list(self, params: Optional[dict] = None):
        return self.client.get("/api/invoices", params=params)

    def get(self, invoice_id: str):
        return self.client.get(f"/api/invoices/{invoice_id}")

    def by_appointment(self, appointment_id: str):
        return self.client.get(f"/api/invoices/appointment/{appointment_id}")

    def generate(self, appointment_id: str, data: Optional[dict] = None):
        return self.client.post(f"/api/invoices/generate/{appointment_id}", data or {})

    def update(self, invoice_id: str, update_data: dict):
        return self.client.put(f"/api/invoices/{invoice_id}", update_data)

    def update_status(self, invoice_id: str, status: str, **data):
        return self.client.put(f"/api/invoices/{invoice_id}/status", dict(data, status=status))

    def approve(self, invoice_id: str):
        return self.update_status(invoice_id, "approved")

    def send_to_customer(self, invoice_id: str, method: str = "email"):
        return self.update_status(invoice_id, "sent", sentMethod=method)

    def record_payment(self, invoice_id: str, payment_data: dict):
        return self.client.post(f"/api/invoices/{invoice_id}/payment", payment_data)

    def download_pdf(self, invoice_id: str, destination: Path) -> Path:
        """Save the invoice PDF to `destination`."""
        response = self.client.get(f"/api/invoices/{invoice_id}/pdf", raw=True)
        destination = Path(destination)
        destination.write_bytes(response.content)
        return destination
