"""
Service catalogue routes.
"""
from typing import Optional

from evservice.resources.base import Resource


class ServicesResource(Resource):

    def list(self, params: Optional[dict] = None):
        """
        Get catalogue services with optional filters.
        """
        return self.client.get("/api/services", params=params)

    def get(self, service_id: str):
        return self.client.get(f"/api/services/{service_id}")

    def by_category(self, category: str):
        return self.list({"category": category})
