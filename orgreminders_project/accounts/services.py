"""
Who may use the site, and which organizations they manage.
"""

from dataclasses import dataclass, field

from organizations.models import Member, Organization


@dataclass
class WebUser:
    user: object = None
    email: str = ""
    superuser: bool = False
    allowed: bool = False
    organizations: list = field(default_factory=list)

    @property
    def organization_names(self):
        return sorted(org.name for org in self.organizations)


def organizations_administered_by(email):
    if not email:
        return []
    return [
        org for org in Organization.objects.order_by("name")
        if email in (org.administrators or [])
    ]


def lookup_web_user(user):
    """
    Resolve a Django user into a WebUser.

    Superusers are always allowed; anyone else needs a Member record
    flagged as a web user with the same email.
    """
    if user is None or not user.is_authenticated:
        return WebUser()

    email = user.email or ""
    allowed = user.is_superuser or (
        bool(email)
        and Member.objects.filter(web_user=True, email__iexact=email).exists()
    )

    if not allowed:
        return WebUser(user=user, email=email)

    return WebUser(
        user=user,
        email=email,
        superuser=user.is_superuser,
        allowed=True,
        organizations=organizations_administered_by(email),
    )
