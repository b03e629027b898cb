# core/email_utils.py

from core import email_templates
from core.config import settings
from core.notifications import send_email
from core.logging_config import logger


def _deliver(content: email_templates.EmailContent, to: str) -> bool:
    return send_email(subject=content.subject, body=content.text, to=to, html_body=content.html)


def send_quietly(sender, *args) -> bool:
    """
    Run a workflow email sender without failing the request that triggered it.
    Returns False (and logs) when delivery fails.
    """
    try:
        return bool(sender(*args))
    except Exception as e:
        logger.warning(f"{sender.__name__} failed: {e}")
        return False


# -----------------------------------------------------
# Membership renewals
# -----------------------------------------------------
def send_membership_renewal_emails(renewal: dict) -> bool:
    """
    Confirmation to the member + notice to the church office.
    Each message is attempted on its own; returns whether the member copy went out.
    """
    sent = send_quietly(_deliver, email_templates.renewal_confirmation(renewal), renewal.get("email"))
    send_quietly(_deliver, email_templates.renewal_admin_notice(renewal), settings.ADMIN_EMAIL)
    logger.info(f"Renewal emails processed for {renewal.get('email')}")
    return sent


def send_membership_approval_email(renewal: dict) -> bool:
    return _deliver(email_templates.renewal_approval(renewal), renewal.get("email"))


# -----------------------------------------------------
# Foundation classes
# -----------------------------------------------------
def send_foundation_class_registration_emails(registration: dict) -> bool:
    sent = send_quietly(_deliver, email_templates.registration_confirmation(registration), registration.get("email"))
    send_quietly(_deliver, email_templates.registration_admin_notice(registration), settings.ADMIN_EMAIL)
    logger.info(f"Registration emails processed for {registration.get('email')}")
    return sent


def send_foundation_class_completion_email(registration: dict) -> bool:
    return _deliver(email_templates.class_completion(registration), registration.get("email"))


# -----------------------------------------------------
# Cell group join requests
# -----------------------------------------------------
def send_cell_group_join_request_emails(request: dict, cell_group: dict) -> bool:
    sent = send_quietly(_deliver, email_templates.join_request_confirmation(request, cell_group), request.get("email"))

    # leaderContact is free text; only use it when it is an address
    leader_contact = cell_group.get("leaderContact") or ""
    leader_email = leader_contact if "@" in leader_contact else settings.ADMIN_EMAIL
    send_quietly(_deliver, email_templates.join_request_leader_notice(request, cell_group), leader_email)
    return sent


# -----------------------------------------------------
# Admin notifications
# -----------------------------------------------------
def send_notification_email(notification_type: str, recipient: dict, data: dict = None) -> bool:
    content = email_templates.notification_content(notification_type, recipient, data)
    return _deliver(content, recipient.get("email"))
