"""
Contact form, reporting and dashboard routes.
"""
from typing import Optional

from evservice.resources.base import Resource


class ContactsResource(Resource):

    def create(self, contact_data: dict):
        """Public contact form submission."""
        return self.client.post("/api/contacts", contact_data)

    def list(self, params: Optional[dict] = None):
        return self.client.get("/api/contacts", params=params)

    def get(self, contact_id: str):
        return self.client.get(f"/api/contacts/{contact_id}")

    def update_status(self, contact_id: str, status: str, **data):
        return self.client.put(f"/api/contacts/{contact_id}/status", dict(data, status=status))

    def add_note(self, contact_id: str, content: str):
        return self.client.post(f"/api/contacts/{contact_id}/notes", {"content": content})

    def stats(self):
        return self.client.get("/api/contacts/stats")


class ReportsResource(Resource):

    def analytics(self, params: Optional[dict] = None):
        return self.client.get("/api/reports/analytics", params=params)

    def detailed(self, params: Optional[dict] = None):
        return self.client.get("/api/reports/detailed", params=params)

    def kpi(self):
        return self.client.get("/api/reports/kpi")


class DashboardResource(Resource):

    def stats(self, role: str, filters: Optional[dict] = None):
        return self.client.get(f"/api/dashboard/{role}", params=filters)

    def details(self, detail_type: str):
        return self.client.get(f"/api/dashboard/details/{detail_type}")
