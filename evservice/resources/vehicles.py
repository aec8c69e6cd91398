"""
Vehicle routes.
"""
from typing import Optional

from evservice.resources.base import Resource, payload


class VehiclesResource(Resource):

    def list(self, params: Optional[dict] = None):
        """
        Get vehicles visible to the current user.
        """
        return self.client.get("/api/vehicles", params=params)

    def get(self, vehicle_id: str):
        """
        Get a specific vehicle by ID.
        """
        return self.client.get(f"/api/vehicles/{vehicle_id}")

    def create(self, vehicle):
        """
        Register a new vehicle.
        """
        return self.client.post("/api/vehicles", payload(vehicle))

    def update(self, vehicle_id: str, vehicle_update):
        """
        Update a vehicle. Only provided fields are sent.
        """
        return self.client.put(f"/api/vehicles/{vehicle_id}", payload(vehicle_update))

    def delete(self, vehicle_id: str):
        return self.client.delete(f"/api/vehicles/{vehicle_id}")

    def service_history(self, vehicle_id: str):
        return self.client.get(f"/api/vehicles/{vehicle_id}/maintenance")

    def update_mileage(self, vehicle_id: str, mileage: int):
        return self.client.put(f"/api/vehicles/{vehicle_id}/mileage", {"mileage": mileage})

    def by_user(self, user_id: str):
        return self.list({"userId": user_id})
