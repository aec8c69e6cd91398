"""
Technician profile and workload routes.
"""
from typing import Optional

from evservice.resources.base import Resource


class TechniciansResource(Resource):

    def list(self, params: Optional[dict] = None):
        return self.client.get("/api/technicians", params=params)

    def profile(self, technician_id: Optional[str] = None):
        return self.client.get(
            "/api/technicians/profile", params={"technicianId": technician_id}
        )

    def update_profile(self, profile_data: dict):
        return self.client.put("/api/technicians/profile", profile_data)

    def update_availability(self, status: str):
        return self.update_profile({"availability": {"status": status}})

    def workload(
        self,
        technician_id: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ):
        return self.client.get(
            "/api/technicians/workload",
            params={"technicianId": technician_id, "startDate": start_date, "endDate": end_date},
        )
