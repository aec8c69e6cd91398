"""
Technician slot routes.
"""
from typing import List, Optional

from evservice.resources.base import Resource, payload


class SlotsResource(Resource):

    def list(
        self,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        technician_id: Optional[str] = None,
        **params,
    ):
        """
        Get slots between two ISO dates, optionally for one technician.
        """
        params.update({"from": date_from, "to": date_to, "technicianId": technician_id})
        return self.client.get("/api/slots", params=params)

    def create(self, slot_data):
        return self.client.post("/api/slots", payload(slot_data))

    def update(self, slot_id: str, update_data: dict):
        return self.client.put(f"/api/slots/{slot_id}", update_data)

    def reserve(self, slot_id: str):
        return self.client.post(f"/api/slots/{slot_id}/reserve")

    def release(self, slot_id: str):
        return self.client.post(f"/api/slots/{slot_id}/release")

    def assign_technicians(self, slot_id: str, technician_ids: Optional[List[str]] = None):
        return self.client.put(
            f"/api/slots/{slot_id}/assign", {"technicianIds": technician_ids or []}
        )
