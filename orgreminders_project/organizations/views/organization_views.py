from django.core.exceptions import ValidationError
from django.http import JsonResponse
from django.shortcuts import get_object_or_404
from django.views.decorators.http import require_GET, require_POST

from organizations.models import Organization
from organizations.services import save_organization


def serialize_organization(org, with_members=False):
    data = {
        "key": str(org.pk),
        "name": org.name,
        "description": org.description,
        "time_zone": org.time_zone,
        "active": org.active,
        "expires": org.expires.isoformat(),
        "administrators": org.administrators,
    }
    if with_members:
        data["members"] = list(org.get_members().values("id", "name", "email"))
    return data


@require_GET
def organization_list(request):
    return JsonResponse({
        "organizations": [
            serialize_organization(org, with_members=True)
            for org in request.web_user.organizations
        ],
    })


@require_GET
def organization_detail(request, key):
    org = get_object_or_404(Organization, pk=key)
    return JsonResponse(serialize_organization(org, with_members=True))


@require_POST
def organization_save(request):
    try:
        org, created = save_organization(request.POST)
    except ValidationError as exc:
        return JsonResponse({"error": " ".join(exc.messages)}, status=400)

    data = serialize_organization(org)
    data["created"] = created
    return JsonResponse(data, status=201 if created else 200)
