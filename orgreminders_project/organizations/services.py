from datetime import timedelta

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from notifications.exceptions import UnknownTimeZone
from notifications.services.reminders import resolve_timezone
from organizations.models import Member, Organization


ORGANIZATION_TRIAL = timedelta(days=7)


def split_lines(value):
    return [line.strip() for line in (value or "").splitlines() if line.strip()]


def save_organization(data):
    """
    Create or update an Organization from the organization form.
    Returns (organization, created).
    """
    name = (data.get("name") or "").strip()
    if not name:
        raise ValidationError("Organization name is required.")

    time_zone = (data.get("timezone") or "").strip()
    try:
        resolve_timezone(time_zone)
    except UnknownTimeZone:
        raise ValidationError(f"Unknown time zone: {time_zone}")

    key = (data.get("key") or "").strip()
    if key:
        try:
            org = Organization.objects.get(pk=key)
        except (Organization.DoesNotExist, ValueError):
            raise ValidationError("Organization not found.")
        created = False
    else:
        org = Organization(expires=timezone.now() + ORGANIZATION_TRIAL)
        created = True

    duplicate = Organization.objects.filter(name=name)
    if org.pk:
        duplicate = duplicate.exclude(pk=org.pk)
    if duplicate.exists():
        raise ValidationError(f"An organization named {name} already exists.")

    org.name = name
    org.description = data.get("description", "")
    org.time_zone = time_zone
    org.administrators = split_lines(data.get("admin"))
    org.active = True
    org.save()

    return org, created


def save_member(data, web_user):
    """
    Create or update a Member from the member form.

    Only superusers may flag web users, and a member that is not a
    web user must belong to at least one organization.
    """
    org_names = [name for name in data.getlist("orgs") if name]
    web_flag = web_user.superuser and data.get("webuser") == "on"

    if not org_names and not web_flag:
        raise ValidationError("Cannot save without an organization.")

    organizations = list(Organization.objects.filter(name__in=org_names))
    missing = set(org_names) - {org.name for org in organizations}
    if missing:
        raise ValidationError(f"Unknown organization(s): {', '.join(sorted(missing))}")

    key = (data.get("key") or "").strip()
    if key:
        try:
            member = Member.objects.get(pk=key)
        except (Member.DoesNotExist, ValueError):
            raise ValidationError("Member not found.")
        created = False
    else:
        member = Member()
        created = True

    member.name = data.get("name", "")
    member.email = (data.get("email") or "").strip()
    member.cell = data.get("cell", "")
    member.carrier = data.get("carrier", "")
    member.email_on = data.get("emailon") == "on"
    member.text_on = data.get("texton") == "on"
    member.web_user = web_flag

    with transaction.atomic():
        member.save()
        member.organizations.set(organizations)

    return member, created


def can_view_member(member, web_user):
    """Web-user members are visible only to themselves and superusers."""
    if not member.web_user:
        return True
    return web_user.superuser or (
        bool(web_user.email) and member.email.lower() == web_user.email.lower()
    )
