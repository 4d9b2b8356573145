"""
notifications/services/dispatch.py

Outbound reminder messages.

Text messages go out through the carriers' email-to-text gateways,
so both channels are delivered with django.core.mail.
"""

import logging

from django.core.mail import EmailMultiAlternatives, send_mail

from notifications.channels import CHANNEL_EMAIL, CHANNELS

logger = logging.getLogger(__name__)


def remove_duplicates(values):
    """Drop blanks and repeats, keeping first-seen order."""
    seen = set()
    result = []
    for val in values:
        if not val or val in seen:
            continue
        seen.add(val)
        result.append(val)
    return result


def org_sender(organization, reminder_settings):
    username = organization.name.replace(" ", "_")
    return (
        f"{organization.name} Reminders "
        f"<{username}@{reminder_settings.sender_domain}>"
    )


def collect_recipients(organization, channel):
    return remove_duplicates(
        member.address_for(channel) for member in organization.get_members()
    )


def send_org_message(organization, event, channel, *, reminder_settings):
    """
    Send one reminder for `event` to every opted-in member of
    `organization` on `channel` ("email" or "text").

    Returns True when the message was handed to the mail backend, or
    when there was nobody to send it to.
    """
    if channel not in CHANNELS:
        raise ValueError(f"unknown reminder channel {channel!r}")

    recipients = collect_recipients(organization, channel)

    if not recipients:
        logger.info(
            "No recipients, not sending reminder (%s) for event %s",
            channel, event.pk,
        )
        return True

    message = EmailMultiAlternatives(
        subject=event.title,
        body=event.text_message,
        from_email=org_sender(organization, reminder_settings),
        to=[],
        bcc=recipients,
    )
    if channel == CHANNEL_EMAIL and event.email_message:
        message.attach_alternative(event.email_message, "text/html")

    logger.info("notify (%s) via %s: %s", event.title, channel, recipients)

    try:
        message.send(fail_silently=False)
    except Exception as exc:
        logger.error(
            "Couldn't send %s reminder for event %s: %s",
            channel, event.pk, exc,
        )
        return False

    return True


def notify_admin(recipient, subject, html_message, *, reminder_settings):
    """Confirmation email to whoever saved an event."""
    if not recipient:
        return False

    logger.info("notify (%s): %s", subject, recipient)

    try:
        send_mail(
            subject=subject,
            message="",
            from_email=reminder_settings.admin_sender,
            recipient_list=[recipient],
            html_message=html_message,
            fail_silently=False,
        )
    except Exception as exc:
        logger.error("Couldn't send email: %s", exc)
        return False

    return True
