from django.contrib import admin
from django.urls import path, include
from django.shortcuts import redirect


def root_redirect(request):
    if request.user.is_authenticated:
        return redirect("events:list")
    return redirect("login")


urlpatterns = [
    # ROOT
    path("", root_redirect, name="root"),

    # DJANGO ADMIN (STAFF ONLY)
    path("django/admin/", admin.site.urls),

    # AUTH
    path("auth/", include("accounts.urls")),

    # APP
    path("events/", include("events.urls")),
    path("", include("organizations.urls")),
    path("", include("notifications.urls")),
]
