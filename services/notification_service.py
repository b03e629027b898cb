# services/notification_service.py

from typing import Optional

from core.utils import utc_now_iso
from services.api_service import ApiService


SEND_PATH = "/api/notifications/send"

DEFAULT_CLASS_SCHEDULE = {
    "location": "Room 201",
    "time": "9:00 AM - 10:30 AM",
}


def _recipient(person: dict) -> dict:
    return {
        "email": person.get("email"),
        "phone": person.get("phone"),
        "name": person.get("fullName") or person.get("name"),
    }


def _event_of(request: dict) -> dict:
    """The embedded event of a signup request (`event`, or a populated `eventId`)."""
    for key in ("event", "eventId"):
        value = request.get(key)
        if isinstance(value, dict):
            return value
    return {}


class NotificationService(ApiService):
    """Admin-triggered member emails, sent through POST /api/notifications/send."""

    def send(self, notification_type: str, recipient: dict, data: Optional[dict] = None) -> dict:
        return self.post(SEND_PATH, json={
            "type": notification_type,
            "recipient": recipient,
            "data": data or {},
        })

    # -----------------------------------------------------
    # Membership
    # -----------------------------------------------------
    def send_membership_approval(self, member: dict) -> dict:
        return self.send("membership_renewal_approved", _recipient(member), {
            "memberSince": member.get("memberSince"),
            "renewalDate": member.get("renewalDate"),
        })

    def send_membership_declined(self, member: dict, reason: str = "") -> dict:
        return self.send("membership_renewal_declined", _recipient(member), {"reason": reason})

    # -----------------------------------------------------
    # Foundation classes
    # -----------------------------------------------------
    def send_class_schedule(self, enrollee: dict, schedule: Optional[dict] = None) -> dict:
        schedule = schedule or dict(DEFAULT_CLASS_SCHEDULE, startDate=enrollee.get("preferredSession"))
        return self.send("foundation_class_approved", _recipient(enrollee), {
            "preferredSession": enrollee.get("preferredSession"),
            "schedule": schedule,
        })

    def send_class_completion(self, enrollee: dict) -> dict:
        return self.send("foundation_class_completed", _recipient(enrollee), {
            "completionDate": utc_now_iso(),
        })

    def send_class_cancellation(self, enrollee: dict, reason: str = "") -> dict:
        return self.send("foundation_class_cancelled", _recipient(enrollee), {"reason": reason})

    # -----------------------------------------------------
    # Event signups
    # -----------------------------------------------------
    def send_event_signup_approval(self, request: dict) -> dict:
        event = _event_of(request)
        event_type = request.get("eventType")

        data = {
            "eventTitle": event.get("title") or "Event",
            "eventDate": event.get("date") or "TBD",
            "eventTime": event.get("time") or "TBD",
            "eventLocation": event.get("location") or "TBD",
        }
        if event_type == "baptism":
            data.update({
                "testimony": request.get("testimony"),
                "previousReligion": request.get("previousReligion"),
            })
        elif event_type == "babyDedication":
            data.update({
                "childName": request.get("childName"),
                "childDateOfBirth": request.get("childDateOfBirth"),
                "parentNames": request.get("parentNames"),
            })

        return self.send(f"{event_type}_signup_approved", _recipient(request), data)

    def send_event_signup_declined(self, request: dict, reason: str = "") -> dict:
        event = _event_of(request)
        return self.send(f"{request.get('eventType')}_signup_declined", _recipient(request), {
            "eventTitle": event.get("title") or "Event",
            "reason": reason,
        })
