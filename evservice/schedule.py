"""
Weekly technician timetable.

The server returns a flat list of slots; the grid indexes them by date and
start time so a week can be laid out as days across, time windows down.
"""
import logging
from datetime import date, datetime, timedelta
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from pydantic import ValidationError

from evservice.errors import ApiError
from evservice.schemas.slot import Slot

logger = logging.getLogger(__name__)

# Four 2-hour windows with a lunch break.
SLOT_RANGES = [
    ("08:00", "10:00"),
    ("10:00", "12:00"),
    ("13:00", "15:00"),
    ("15:00", "17:00"),
]

DAYS_PER_WEEK = 7
NO_TECHNICIAN = "—"

SlotMap = Dict[str, Dict[str, Slot]]


def week_start_for(day: date) -> date:
    """Monday of the week containing `day`."""
    return day - timedelta(days=day.weekday())


def week_dates(week_start: date, days: int = DAYS_PER_WEEK) -> List[str]:
    return [(week_start + timedelta(days=offset)).isoformat() for offset in range(days)]


def build_slot_map(slots: Iterable[Any]) -> SlotMap:
    """
    Index slots as date -> start time -> slot.

    Accepts raw dicts or Slot instances; a later slot for the same cell
    replaces an earlier one. Malformed entries are skipped.
    """
    slot_map: SlotMap = {}
    for item in slots:
        if not isinstance(item, Slot):
            try:
                item = Slot.model_validate(item)
            except ValidationError:
                logger.debug("Skipping malformed slot: %r", item)
                continue
        slot_map.setdefault(item.date, {})[item.start_time] = item
    return slot_map


def technician_names(slot: Optional[Slot], current_user_id: Optional[str] = None) -> List[str]:
    """
    Display names of a slot's technicians.

    Populated users show their full name, else email, else id. The current
    user is marked with "(You)".
    """
    if slot is None or not slot.technician_ids:
        return [NO_TECHNICIAN]

    names = []
    for tech in slot.technician_ids:
        if isinstance(tech, dict):
            full_name = f"{tech.get('firstName') or ''} {tech.get('lastName') or ''}".strip()
            tech_id = tech.get("_id") or tech.get("id")
            name = full_name or tech.get("email") or str(tech_id)
        else:
            tech_id = str(tech)
            name = tech_id
        if current_user_id and tech_id == current_user_id:
            name = f"{name} (You)"
        names.append(name)
    return names


def occupancy(slot: Slot) -> str:
    return f"{slot.booked_count or 0}/{slot.capacity}"


class WeeklySlotGrid:
    """A week of slots laid out as SLOT_RANGES x days."""

    def __init__(
        self,
        week_start: date,
        slot_map: Optional[SlotMap] = None,
        now: Optional[datetime] = None,
        days: int = DAYS_PER_WEEK,
    ):
        self.week_start = week_start
        self.dates = week_dates(week_start, days)
        self.slot_map = slot_map or {}
        self.now = now or datetime.now()

    @classmethod
    def from_slots(cls, week_start: date, slots: Iterable[Any], **kwargs) -> "WeeklySlotGrid":
        return cls(week_start, build_slot_map(slots), **kwargs)

    @property
    def date_from(self) -> str:
        return self.dates[0]

    @property
    def date_to(self) -> str:
        return self.dates[-1]

    def cell(self, day: str, start: str) -> Optional[Slot]:
        return self.slot_map.get(day, {}).get(start)

    def rows(self) -> Iterator[Tuple[str, str, List[Optional[Slot]]]]:
        for start, end in SLOT_RANGES:
            yield start, end, [self.cell(day, start) for day in self.dates]

    def is_past(self, day: str, start: str) -> bool:
        return datetime.fromisoformat(f"{day}T{start}") < self.now

    def assigned_count(self) -> int:
        return sum(1 for _, _, cells in self.rows() for slot in cells if slot is not None)


def fetch_week(
    api,
    technician_id: str,
    week_start: date,
    now: Optional[datetime] = None,
    days: int = DAYS_PER_WEEK,
) -> WeeklySlotGrid:
    """
    Load one technician's slots for the week starting at `week_start`.

    Request failures are logged and produce an empty grid.
    """
    grid = WeeklySlotGrid(week_start, now=now, days=days)
    try:
        response = api.slots.list(
            date_from=grid.date_from, date_to=grid.date_to, technician_id=technician_id
        )
    except ApiError as exc:
        logger.error("Could not load slots for %s: %s", technician_id, exc)
        return grid

    slots = response.items()
    logger.debug("Fetched %d slots for technician %s", len(slots), technician_id)
    grid.slot_map = build_slot_map(slots)
    return grid
