"""
Authentication and user management endpoints.
"""
from typing import Optional

from evservice.resources.base import Resource, payload


class AuthResource(Resource):

    def login(self, email: str, password: str):
        """Exchange credentials for a token and user."""
        return self.client.post("/api/auth/login", {"email": email, "password": password})

    def register(self, user_data):
        """Create a customer account; answers like `login`."""
        return self.client.post("/api/auth/register", payload(user_data))

    def get_profile(self):
        """Current user for the stored token."""
        return self.client.get("/api/auth/me")

    def update_profile(self, user_data):
        return self.client.put("/api/auth/profile", payload(user_data))

    def change_password(self, current_password: str, new_password: str):
        return self.client.put(
            "/api/auth/change-password",
            {"currentPassword": current_password, "newPassword": new_password},
        )


class UsersResource(Resource):
    """Staff/admin management of accounts."""

    def list(self, params: Optional[dict] = None):
        return self.client.get("/api/auth/users", params=params)

    def get(self, user_id: str):
        return self.client.get(f"/api/auth/users/{user_id}")

    def create(self, user_data):
        return self.client.post("/api/auth/users", payload(user_data))

    def update(self, user_id: str, update_data):
        return self.client.put(f"/api/auth/users/{user_id}", payload(update_data))

    def delete(self, user_id: str):
        return self.client.delete(f"/api/auth/users/{user_id}")

    def update_status(self, user_id: str, is_active: bool):
        return self.client.put(f"/api/auth/users/{user_id}/status", {"isActive": is_active})
