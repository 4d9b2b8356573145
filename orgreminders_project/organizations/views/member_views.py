from django.core.exceptions import ValidationError
from django.http import Http404, JsonResponse
from django.views.decorators.http import require_GET, require_POST

from organizations.models import Member
from organizations.services import can_view_member, save_member


def serialize_member(member):
    return {
        "key": str(member.pk),
        "name": member.name,
        "email": member.email,
        "cell": member.cell,
        "carrier": member.carrier,
        "text_addr": member.text_addr,
        "email_on": member.email_on,
        "text_on": member.text_on,
        "web_user": member.web_user,
        "orgs": sorted(org.name for org in member.organizations.all()),
    }


@require_GET
def member_list(request):
    members = {}

    for org in request.web_user.organizations:
        for member in org.get_members():
            members[member.pk] = member

    return JsonResponse({
        "members": [
            serialize_member(m)
            for m in sorted(members.values(), key=lambda m: m.name)
        ],
    })


@require_GET
def member_detail(request, key):
    web_user = request.web_user

    try:
        member = Member.objects.get(pk=key)
    except Member.DoesNotExist:
        member = None

    # Protect web users
    if member is None or not can_view_member(member, web_user):
        raise Http404("Member not found or access denied.")

    data = serialize_member(member)
    data["available_orgs"] = [
        name for name in web_user.organization_names
        if name not in data["orgs"]
    ]
    return JsonResponse(data)


@require_POST
def member_save(request):
    try:
        member, created = save_member(request.POST, request.web_user)
    except ValidationError as exc:
        return JsonResponse({"error": " ".join(exc.messages)}, status=400)

    data = serialize_member(member)
    data["created"] = created
    return JsonResponse(data, status=201 if created else 200)
