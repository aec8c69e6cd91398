"""
Staff assignment and approval workflows.

The server decides which technicians fit and which requests are valid; these
helpers fetch its answers and call the matching endpoints.
"""
import logging
from typing import List, Optional

from pydantic import ValidationError

from evservice.schemas.service import Appointment
from evservice.schemas.technician import TechnicianCandidate

logger = logging.getLogger(__name__)


def _parse_all(model, items) -> list:
    parsed = []
    for item in items:
        try:
            parsed.append(model.model_validate(item))
        except ValidationError:
            logger.debug("Skipping malformed %s: %r", model.__name__, item)
    return parsed


def pending_appointments(api, params: Optional[dict] = None) -> List[Appointment]:
    response = api.appointments.pending_staff_confirmation(params)
    return _parse_all(Appointment, response.items())


def available_technicians(
    api,
    date: str,
    time: str,
    duration: Optional[int] = None,
    service_categories: Optional[List[str]] = None,
) -> List[TechnicianCandidate]:
    """Candidates in server order, recommendation flags untouched."""
    response = api.appointments.available_technicians(date, time, duration, service_categories)
    items = response.items() or response.unwrap("technicians", [])
    return _parse_all(TechnicianCandidate, items)


def assign_technician(api, appointment_id: str, technician_id: str):
    response = api.appointments.assign_technician(appointment_id, technician_id)
    logger.info("Assigned technician %s to appointment %s", technician_id, appointment_id)
    api.notifier.success("Đã phân công kỹ thuật viên")
    return response


def confirm_appointment(api, appointment_id: str, notes: Optional[str] = None):
    response = api.appointments.confirm(appointment_id, notes)
    api.notifier.success("Đã xác nhận lịch hẹn")
    return response


def approve_part_request(api, request_id: str, notes: Optional[str] = None):
    response = api.part_requests.approve(request_id, notes=notes)
    api.notifier.success("Đã duyệt yêu cầu phụ tùng")
    return response


def reject_part_request(api, request_id: str, reason: str):
    if not reason or not reason.strip():
        raise ValueError("A rejection reason is required")
    response = api.part_requests.reject(request_id, reason.strip())
    api.notifier.success("Đã từ chối yêu cầu phụ tùng")
    return response
