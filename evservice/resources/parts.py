"""
Parts inventory and part request routes.
"""
from typing import List, Optional

from evservice.resources.base import Resource, payload

REVIEW_DECISIONS = ("approved", "rejected", "partially_approved")


class PartsResource(Resource):

    def list(self, params: Optional[dict] = None):
        """
        Get parts with pagination and optional filters.
        """
        return self.client.get("/api/parts", params=params)

    def get(self, part_id: str):
        return self.client.get(f"/api/parts/{part_id}")

    def by_service_category(self, category: str):
        return self.client.get(f"/api/parts/by-service/{category}")

    def reserve(self, appointment_id: str, part_ids: List[str]):
        return self.client.post(
            "/api/parts/reserve", {"appointmentId": appointment_id, "partIds": part_ids}
        )

    def use(self, parts: List[dict]):
        """Consume previously reserved parts."""
        return self.client.put("/api/parts/use", {"parts": parts})

    def for_appointment(self, appointment_id: str):
        return self.client.get(f"/api/parts/appointment/{appointment_id}")

    def analytics(self):
        return self.client.get("/api/parts/analytics")

    def low_stock(self):
        return self.client.get("/api/parts/low-stock")


class PartRequestsResource(Resource):
    """Technician part requests awaiting staff review."""

    def pending_approvals(self, params: Optional[dict] = None):
        return self.client.get("/api/part-requests/pending-approval", params=params)

    def get(self, request_id: str):
        return self.client.get(f"/api/part-requests/{request_id}")

    def create(self, request_data):
        return self.client.post("/api/part-requests", payload(request_data))

    def review(self, request_id: str, decision: str, review_notes: Optional[str] = None, **data):
        """
        Record a staff decision: approved, rejected or partially_approved.
        """
        if decision not in REVIEW_DECISIONS:
            raise ValueError(f"Invalid decision: {decision}")
        body = dict(data, decision=decision)
        if review_notes:
            body["reviewNotes"] = review_notes
        return self.client.put(f"/api/part-requests/{request_id}/review", body)

    def approve(self, request_id: str, notes: Optional[str] = None, **approval_data):
        return self.review(request_id, "approved", notes, **approval_data)

    def partially_approve(self, request_id: str, approved_items: List[dict],
                          notes: Optional[str] = None):
        return self.review(request_id, "partially_approved", notes, approvedItems=approved_items)

    def reject(self, request_id: str, reason: str):
        return self.review(request_id, "rejected", reason)

    def update_status(self, request_id: str, status: str, **data):
        return self.client.put(
            f"/api/part-requests/{request_id}/status", dict(data, status=status)
        )

    def fulfill(self, request_id: str, **fulfillment_data):
        return self.update_status(request_id, "fulfilled", **fulfillment_data)

    def by_appointment(self, appointment_id: str):
        return self.client.get(f"/api/part-requests/appointment/{appointment_id}")
