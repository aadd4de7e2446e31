"""Platform payload -> local field mapping.

The platform API is loosely typed: ids arrive as ints or strings, flags as
bools, ints or strings, and optional fields may be missing or null.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

DEFAULT_DURATION_MINUTES = 60

# attendance code -> local booking status; anything else is "booked"
ATTENDANCE_STATUS: dict[int, str] = {
    -1: "cancelled",
    1: "completed",
}


def platform_id(value: Any) -> str | None:
    """Canonical string form of a platform id."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    text = str(value).strip()
    return text or None


def as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"true", "1", "yes", "y", "on"}
    return bool(value)


def as_int(value: Any) -> int | None:
    """Positive integer or None."""
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = int(float(value))
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


def staff_to_local(item: dict[str, Any]) -> dict[str, Any]:
    return {
        "name": item.get("name") or "Unknown",
        "is_active": as_bool(item["is_active"]) if "is_active" in item else True,
    }


def service_to_local(item: dict[str, Any]) -> dict[str, Any]:
    duration = as_int(item.get("seance_length")) or as_int(item.get("duration"))
    return {
        "name": item.get("title") or item.get("name") or "Unknown Service",
        "duration_minutes": duration or DEFAULT_DURATION_MINUTES,
        "is_mobile": as_bool(item.get("is_mobile")) or as_bool(item.get("online")),
    }


def booking_status(attendance: Any) -> str:
    if isinstance(attendance, bool) or attendance is None:
        return "booked"
    try:
        code = int(attendance)
    except (TypeError, ValueError):
        return "booked"
    return ATTENDANCE_STATUS.get(code, "booked")


def parse_remote(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp as sent, keeping any UTC offset."""
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None


def to_utc(parsed: datetime) -> datetime:
    """Naive UTC form of a parsed timestamp; naive values are taken as UTC."""
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def parse_instant(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp into a naive UTC datetime.

    Offset-aware values are converted to UTC; naive values are taken as UTC.
    """
    parsed = parse_remote(value)
    return to_utc(parsed) if parsed is not None else None


def record_staff_id(record: dict[str, Any]) -> Any:
    if record.get("staff_id"):
        return record["staff_id"]
    staff = record.get("staff")
    return staff.get("id") if isinstance(staff, dict) else None


def first_service(record: dict[str, Any]) -> dict[str, Any] | None:
    """Only the first listed service is linked locally."""
    services = record.get("services")
    if isinstance(services, list):
        for service in services:
            if isinstance(service, dict):
                return service
    return None


def client_fields(record: dict[str, Any]) -> dict[str, Any]:
    client = record.get("client")
    if not isinstance(client, dict):
        client = {}
    return {
        "client_name": client.get("name") or None,
        "client_phone": client.get("phone") or None,
    }
