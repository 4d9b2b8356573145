from django.urls import path

from organizations.views import (
    member_detail,
    member_list,
    member_save,
    organization_detail,
    organization_list,
    organization_save,
)

app_name = "organizations"

urlpatterns = [
    # Organizations
    path("organizations/", organization_list, name="list"),
    path("organizations/save/", organization_save, name="save"),
    path("organizations/<int:key>/", organization_detail, name="detail"),

    # Members
    path("members/", member_list, name="members"),
    path("members/save/", member_save, name="member-save"),
    path("members/<int:key>/", member_detail, name="member-detail"),
]
