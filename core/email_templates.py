# core/email_templates.py

"""
Email bodies for the request workflows and the admin notification endpoint.
Every template returns an EmailContent with a plain-text and an HTML body.
"""

from html import escape
from typing import Any, Optional

from pydantic import BaseModel

from core.config import settings
from core.date_utils import format_date_to_string, parse_date


class EmailContent(BaseModel):
    subject: str
    text: str
    html: str


# -----------------------------------------------------
# Shared pieces
# -----------------------------------------------------
def display_date(value: Any, fallback: str = "N/A") -> str:
    parsed = parse_date(value)
    return format_date_to_string(parsed) if parsed else fallback


def _e(value: Any, fallback: str = "") -> str:
    if value is None or value == "":
        return escape(fallback)
    return escape(str(value))


def _footer_html() -> str:
    return f"""
    <div style="margin-top: 30px; padding-top: 20px; border-top: 1px solid #eee; color: #666; font-size: 12px;">
      <p>{_e(settings.CHURCH_NAME)}</p>
      <p>{_e(settings.CHURCH_ADDRESS)}</p>
      <p>Phone: {_e(settings.CHURCH_PHONE)} | Email: {_e(settings.CHURCH_EMAIL)}</p>
      <p><a href="{_e(settings.CHURCH_WEBSITE)}" style="color: #4a6ee0;">{_e(settings.CHURCH_WEBSITE)}</a></p>
    </div>"""


def _page(heading: str, inner_html: str, color: str = "#4f46e5") -> str:
    return f"""
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; line-height: 1.6;">
  <div style="background-color: {color}; color: white; padding: 20px; text-align: center;">
    <h1>{escape(heading)}</h1>
  </div>
  <div style="padding: 20px; border: 1px solid #e5e7eb; border-top: none;">
    {inner_html}
  </div>
  {_footer_html()}
</div>"""


def _details_html(title: str, rows: list) -> str:
    items = "".join(
        f"<li><strong>{escape(label)}:</strong> {_e(value, 'Not specified')}</li>"
        for label, value in rows
    )
    return (
        '<div style="background-color: #f3f4f6; padding: 15px; border-radius: 5px; margin: 20px 0;">'
        f'<h3 style="margin-top: 0;">{escape(title)}</h3><ul>{items}</ul></div>'
    )


def _details_text(title: str, rows: list) -> str:
    lines = [f"{title}"]
    lines.extend(f"- {label}: {value if value not in (None, '') else 'Not specified'}" for label, value in rows)
    return "\n".join(lines)


def _sign_off_text() -> str:
    return f"Blessings,\n{settings.CHURCH_NAME} Team"


# -----------------------------------------------------
# Membership renewals
# -----------------------------------------------------
def renewal_confirmation(renewal: dict) -> EmailContent:
    rows = [
        ("Name", renewal.get("fullName")),
        ("Member Since", renewal.get("memberSince")),
        ("Renewal Date", display_date(renewal.get("renewalDate"))),
    ]
    intro = (
        f"Thank you for renewing your membership with {settings.CHURCH_NAME}. "
        "Your renewal has been received and is being processed."
    )
    text = "\n\n".join([
        f"Dear {renewal.get('fullName')},",
        intro,
        _details_text("Renewal Details:", rows),
        "If you have any questions, please contact our church office.",
        _sign_off_text(),
    ])
    html = _page(
        "Membership Renewal Confirmation",
        f"<p>Dear {_e(renewal.get('fullName'))},</p><p>{escape(intro)}</p>"
        + _details_html("Renewal Details:", rows)
        + "<p>If you have any questions, please contact our church office.</p>",
    )
    return EmailContent(subject=f"Membership Renewal Confirmation - {settings.CHURCH_NAME}", text=text, html=html)


def renewal_admin_notice(renewal: dict) -> EmailContent:
    rows = [
        ("Name", renewal.get("fullName")),
        ("Email", renewal.get("email")),
        ("Phone", renewal.get("phone")),
        ("Birthday", display_date(renewal.get("birthday"))),
        ("Member Since", renewal.get("memberSince")),
        ("Ministry Involvement", renewal.get("ministryInvolvement")),
        ("Address Change", "Yes" if renewal.get("addressChange") else "No"),
    ]
    if renewal.get("addressChange"):
        rows.append(("New Address", renewal.get("newAddress")))

    text = "\n\n".join([
        "A new membership renewal has been submitted.",
        _details_text("Member Details:", rows),
        "Please review it in the admin dashboard.",
    ])
    html = _page(
        "New Membership Renewal",
        "<p>A new membership renewal has been submitted.</p>"
        + _details_html("Member Details:", rows)
        + "<p>Please review it in the admin dashboard.</p>",
    )
    return EmailContent(subject="New Membership Renewal Submission", text=text, html=html)


def renewal_approval(renewal: dict) -> EmailContent:
    rows = [
        ("Name", renewal.get("fullName")),
        ("Member Since", renewal.get("memberSince")),
        ("Renewal Date", display_date(renewal.get("renewalDate"))),
        ("Status", "Approved"),
    ]
    intro = (
        f"We are pleased to inform you that your membership renewal with {settings.CHURCH_NAME} "
        "has been reviewed and approved. Your membership is now active and renewed for another year."
    )
    text = "\n\n".join([
        f"Dear {renewal.get('fullName')},",
        intro,
        _details_text("Membership Details:", rows),
        _sign_off_text(),
    ])
    html = _page(
        "Membership Renewal Approved",
        f"<p>Dear {_e(renewal.get('fullName'))},</p><p>{escape(intro)}</p>"
        + _details_html("Membership Details:", rows),
        color="#047857",
    )
    return EmailContent(
        subject=f"Your Membership Renewal Has Been Approved - {settings.CHURCH_NAME}",
        text=text,
        html=html,
    )


# -----------------------------------------------------
# Foundation classes
# -----------------------------------------------------
def registration_confirmation(registration: dict) -> EmailContent:
    rows = [
        ("Name", registration.get("fullName")),
        ("Preferred Session", registration.get("preferredSession")),
        ("Registration Date", display_date(registration.get("registrationDate"))),
    ]
    intro = (
        "Thank you for registering for Foundation Classes. "
        "We will contact you with your class schedule soon."
    )
    text = "\n\n".join([
        f"Dear {registration.get('fullName')},",
        intro,
        _details_text("Registration Details:", rows),
        _sign_off_text(),
    ])
    html = _page(
        "Foundation Classes Registration",
        f"<p>Dear {_e(registration.get('fullName'))},</p><p>{escape(intro)}</p>"
        + _details_html("Registration Details:", rows),
    )
    return EmailContent(
        subject=f"Foundation Classes Registration Confirmation - {settings.CHURCH_NAME}",
        text=text,
        html=html,
    )


def registration_admin_notice(registration: dict) -> EmailContent:
    rows = [
        ("Name", registration.get("fullName")),
        ("Email", registration.get("email")),
        ("Phone", registration.get("phone")),
        ("Preferred Session", registration.get("preferredSession")),
        ("Questions", registration.get("questions")),
    ]
    text = "\n\n".join([
        "A new Foundation Classes registration has been submitted.",
        _details_text("Registration Details:", rows),
    ])
    html = _page(
        "New Foundation Classes Registration",
        "<p>A new Foundation Classes registration has been submitted.</p>"
        + _details_html("Registration Details:", rows),
    )
    return EmailContent(subject="New Foundation Classes Registration", text=text, html=html)


COMPLETION_PRIVILEGES = [
    "Participate in church decision meetings",
    "Serve in various ministry areas",
    "Access member-specific resources and support",
    "Become more deeply connected to our church community",
]


def class_completion(registration: dict) -> EmailContent:
    intro = (
        "Congratulations! We're thrilled to inform you that you have successfully completed "
        f"all of your Foundation Classes at {settings.CHURCH_NAME}. We are pleased to welcome you "
        "as an official member of our church family!"
    )
    text = "\n\n".join([
        f"Dear {registration.get('fullName')},",
        intro,
        "As a church member, you now have the opportunity to:\n"
        + "\n".join(f"- {item}" for item in COMPLETION_PRIVILEGES),
        "Welcome to the family!",
        _sign_off_text(),
    ])
    items = "".join(f"<li>{escape(item)}</li>" for item in COMPLETION_PRIVILEGES)
    html = _page(
        "Welcome to Church Membership",
        f"<p>Dear {_e(registration.get('fullName'))},</p><p>{escape(intro)}</p>"
        f"<p>As a church member, you now have the opportunity to:</p><ul>{items}</ul>"
        "<p>Welcome to the family!</p>",
        color="#047857",
    )
    return EmailContent(
        subject="Congratulations on Completing Foundation Classes - Welcome to Church Membership!",
        text=text,
        html=html,
    )


# -----------------------------------------------------
# Cell group join requests
# -----------------------------------------------------
def join_request_confirmation(request: dict, cell_group: dict) -> EmailContent:
    rows = [
        ("Cell Group", cell_group.get("name")),
        ("Leader", cell_group.get("leader")),
        ("Meeting Day", cell_group.get("meetingDay")),
        ("Meeting Time", cell_group.get("meetingTime")),
        ("Location", cell_group.get("location")),
    ]
    intro = (
        f'Thank you for your interest in joining the "{cell_group.get("name")}" cell group. '
        "Your request has been received and the cell group leader will contact you soon."
    )
    text = "\n\n".join([
        f"Dear {request.get('name')},",
        intro,
        _details_text("Request Details:", rows),
        _sign_off_text(),
    ])
    html = _page(
        "Cell Group Join Request",
        f"<p>Dear {_e(request.get('name'))},</p><p>{escape(intro)}</p>"
        + _details_html("Request Details:", rows),
    )
    return EmailContent(
        subject=f"Cell Group Join Request Confirmation - {settings.CHURCH_NAME}",
        text=text,
        html=html,
    )


def join_request_leader_notice(request: dict, cell_group: dict) -> EmailContent:
    rows = [
        ("Name", request.get("name")),
        ("Email", request.get("email")),
        ("Phone", request.get("phone")),
        ("WhatsApp", request.get("whatsapp")),
        ("Message", request.get("message")),
    ]
    intro = "A new request to join your cell group has been submitted."
    text = "\n\n".join([
        f"Dear {cell_group.get('leader')},",
        intro,
        _details_text("Join Request Details:", rows),
        "Please contact this person soon to welcome them.",
        _sign_off_text(),
    ])
    html = _page(
        "New Cell Group Join Request",
        f"<p>Dear {_e(cell_group.get('leader'))},</p><p>{escape(intro)}</p>"
        + _details_html("Join Request Details:", rows)
        + "<p>Please contact this person soon to welcome them.</p>",
    )
    return EmailContent(
        subject=f"New Cell Group Join Request - {settings.CHURCH_NAME}",
        text=text,
        html=html,
    )


# -----------------------------------------------------
# Admin-triggered notifications (POST /api/notifications/send)
# -----------------------------------------------------
def _notification(subject: str, name: Optional[str], paragraphs: list, color: str = "#4f46e5") -> EmailContent:
    greeting = f"Hello {name or 'Friend'},"
    text = "\n\n".join([greeting] + paragraphs + [_sign_off_text()])
    inner = f"<h2>{escape(greeting)}</h2>" + "".join(f"<p>{escape(p)}</p>" for p in paragraphs)
    return EmailContent(subject=subject, text=text, html=_page(subject, inner, color=color))


def _with_reason(paragraphs: list, data: dict) -> list:
    if data.get("reason"):
        paragraphs.append(f"Additional information: {data['reason']}")
    return paragraphs


def notification_content(notification_type: str, recipient: dict, data: Optional[dict] = None) -> EmailContent:
    """Pick the email for a notification type; unknown types get a generic message."""
    data = data or {}
    name = recipient.get("name")
    church = settings.CHURCH_NAME

    if notification_type == "membership_renewal_approved":
        return _notification(
            "Your Membership Renewal Has Been Approved",
            name,
            [
                f"We're pleased to inform you that your membership renewal at {church} has been approved!",
                "Your continued commitment to our church family is greatly appreciated.",
            ],
            color="#047857",
        )

    if notification_type == "membership_renewal_declined":
        return _notification(
            "Regarding Your Membership Renewal",
            name,
            _with_reason([
                f"Thank you for submitting your membership renewal at {church}.",
                "There appears to be some information we need to clarify. "
                "Please contact our church office at your earliest convenience.",
            ], data),
        )

    if notification_type == "foundation_class_approved":
        schedule = data.get("schedule") or {}
        return _notification(
            "Welcome to Foundation Classes - Your Enrollment is Confirmed",
            name,
            [
                "Great news! Your enrollment in our Foundation Classes has been approved and confirmed.",
                f"Location: {schedule.get('location') or 'Church Main Building, Room 201'}",
                f"Start Date: {schedule.get('startDate') or 'Please contact the church office for details'}",
                f"Time: {schedule.get('time') or '9:00 AM - 10:30 AM'}",
                "Please arrive 15 minutes early for your first class.",
            ],
        )

    if notification_type == "foundation_class_completed":
        return _notification(
            "Congratulations on Completing Foundation Classes - Welcome to Church Membership!",
            name,
            [
                f"You have successfully completed all of your Foundation Classes at {church}.",
                "We are pleased to welcome you as an official member of our church family!",
            ],
            color="#047857",
        )

    if notification_type == "foundation_class_cancelled":
        return _notification(
            "Regarding Your Foundation Class Enrollment",
            name,
            _with_reason([
                f"We are contacting you regarding your enrollment in our Foundation Classes at {church}.",
                "Please contact our church office at your earliest convenience.",
            ], data),
        )

    if notification_type.endswith("_signup_approved"):
        return _notification(
            f"Your Signup for {data.get('eventTitle') or 'the Event'} Has Been Approved",
            name,
            [
                f"Your signup for {data.get('eventTitle') or 'the event'} has been approved.",
                f"Date: {data.get('eventDate') or 'TBD'}",
                f"Time: {data.get('eventTime') or 'TBD'}",
                f"Location: {data.get('eventLocation') or 'TBD'}",
            ],
            color="#047857",
        )

    if notification_type.endswith("_signup_declined"):
        return _notification(
            f"Regarding Your Signup for {data.get('eventTitle') or 'the Event'}",
            name,
            _with_reason([
                f"Thank you for signing up for {data.get('eventTitle') or 'the event'}.",
                "Unfortunately we are unable to accept your request at this time.",
            ], data),
        )

    return _notification(
        f"Notification from {church}",
        name,
        [
            f"This is a notification from {church}.",
            "Please contact our church office for more information.",
        ],
    )
