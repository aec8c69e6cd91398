"""
Appointment routes.
"""
from typing import List, Optional

from evservice.resources.base import Resource, payload
from evservice.schemas.service import AppointmentStatus


class AppointmentsResource(Resource):

    def list(self, params: Optional[dict] = None):
        """
        Get appointments with pagination and optional filters.
        """
        return self.client.get("/api/appointments", params=params)

    def get(self, appointment_id: str):
        return self.client.get(f"/api/appointments/{appointment_id}")

    def create(self, appointment_data):
        """
        Book an appointment.

        A 409 means the slot was taken in the meantime; the raised ApiError
        carries the server's `conflicts`.
        """
        return self.client.post("/api/appointments", payload(appointment_data))

    def update(self, appointment_id: str, update_data):
        return self.client.put(f"/api/appointments/{appointment_id}", payload(update_data))

    def check_availability(self, date: str, duration: Optional[int] = None):
        return self.client.get(
            "/api/appointments/availability", params={"date": date, "duration": duration}
        )

    def vehicle_booking_status(self, vehicle_id: str):
        return self.client.get(f"/api/appointments/vehicle-status/{vehicle_id}")

    def pre_validate(
        self,
        date: str,
        time: str,
        duration: Optional[int] = None,
        technician_id: Optional[str] = None,
    ):
        return self.client.get(
            "/api/appointments/pre-validate",
            params={"date": date, "time": time, "duration": duration, "technicianId": technician_id},
        )

    def available_technicians(
        self,
        date: str,
        time: str,
        duration: Optional[int] = None,
        service_categories: Optional[List[str]] = None,
    ):
        return self.client.get(
            "/api/appointments/available-technicians",
            params={
                "date": date,
                "time": time,
                "duration": duration,
                "serviceCategories": service_categories,
            },
        )

    def technician_availability(
        self, technician_id: str, date: str, time: str, duration: Optional[int] = None
    ):
        return self.client.get(
            "/api/appointments/technician-availability",
            params={"technicianId": technician_id, "date": date, "time": time, "duration": duration},
        )

    def available_time_slots(self, date: str, duration: int = 60):
        return self.client.get(
            "/api/appointments/available-slots", params={"date": date, "duration": duration}
        )

    # Status transitions

    def confirm(self, appointment_id: str, notes: Optional[str] = None):
        return self.client.put(f"/api/appointments/{appointment_id}/staff-confirm", {"notes": notes})

    def check_in(self, appointment_id: str):
        return self.client.put(f"/api/appointments/{appointment_id}/customer-arrived")

    def start_work(self, appointment_id: str, notes: Optional[str] = None):
        return self.client.put(f"/api/appointments/{appointment_id}/start-work", {"notes": notes})

    def complete(self, appointment_id: str, notes: Optional[str] = None):
        return self.client.put(f"/api/appointments/{appointment_id}/complete", {"notes": notes})

    def cancel(self, appointment_id: str, reason: str):
        return self.client.delete(f"/api/appointments/{appointment_id}", {"reason": reason})

    def staff_reject(self, appointment_id: str, reason: str):
        return self.client.put(f"/api/appointments/{appointment_id}/staff-reject", {"reason": reason})

    def reschedule(
        self, appointment_id: str, new_date: str, new_time: str, reason: Optional[str] = None
    ):
        return self.client.put(
            f"/api/appointments/{appointment_id}/reschedule",
            {"newDate": new_date, "newTime": new_time, "reason": reason},
        )

    def update_status(self, appointment_id: str, status, notes: Optional[str] = None):
        """
        Move an appointment to `status` through its dedicated endpoint.

        Statuses without one fall back to a plain update.
        """
        status = AppointmentStatus(status)
        if status == AppointmentStatus.CONFIRMED:
            return self.confirm(appointment_id, notes)
        if status == AppointmentStatus.CUSTOMER_ARRIVED:
            return self.check_in(appointment_id)
        if status == AppointmentStatus.IN_PROGRESS:
            return self.start_work(appointment_id, notes)
        if status == AppointmentStatus.COMPLETED:
            return self.complete(appointment_id, notes)
        if status == AppointmentStatus.CANCELLED:
            return self.cancel(appointment_id, notes or "Cancelled by staff")
        return self.update(appointment_id, {"status": status.value, "notes": notes})

    def assign_technician(self, appointment_id: str, technician_id: str):
        return self.client.put(
            f"/api/appointments/{appointment_id}/assign", {"technicianId": technician_id}
        )

    def assign_technicians(self, appointment_id: str, technician_ids: List[str]):
        """The server takes one technician per appointment; the first id is sent."""
        if not technician_ids:
            raise ValueError("At least one technician id is required")
        return self.assign_technician(appointment_id, technician_ids[0])

    def parts_decision(self, appointment_id: str, decision: dict):
        return self.client.put(f"/api/appointments/{appointment_id}/parts-decision", decision)

    # Staff queues

    def pending_staff_confirmation(self, params: Optional[dict] = None):
        return self.client.get("/api/appointments/pending-staff-confirmation", params=params)

    def work_queue(self, params: Optional[dict] = None):
        return self.client.get("/api/appointments/work-queue", params=params)

    # Cancellation and refunds

    def request_cancellation(self, appointment_id: str, data: dict):
        return self.client.post(f"/api/appointments/{appointment_id}/request-cancel", data)

    def approve_cancellation(self, appointment_id: str, notes: Optional[str] = None):
        return self.client.post(
            f"/api/appointments/{appointment_id}/approve-cancel", {"notes": notes}
        )

    def process_refund(self, appointment_id: str, data: dict):
        return self.client.post(f"/api/appointments/{appointment_id}/process-refund", data)

    def timeline(self, appointment_id: str):
        return self.client.get(f"/api/appointments/{appointment_id}/timeline")

    def customer_actions(self, appointment_id: str):
        return self.client.get(f"/api/appointments/{appointment_id}/customer-actions")
