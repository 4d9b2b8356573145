from django.conf import settings
from django.contrib.auth import logout
from django.contrib.auth.views import redirect_to_login
from django.shortcuts import redirect

from accounts.services import lookup_web_user


class LoginRequiredMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

        self.PUBLIC_PREFIXES = (
            settings.LOGIN_URL,
            "/auth/",
            "/static/",
            "/django/admin/",  # Django admin (staff only)
        )

    def __call__(self, request):
        path = request.path

        # Allow public paths
        if path.startswith(self.PUBLIC_PREFIXES):
            return self.get_response(request)

        # Block unauthenticated users
        if not request.user.is_authenticated:
            return redirect_to_login(request.get_full_path(), settings.LOGIN_URL)

        # 🔒 WEB USER ACCESS CONTROL
        # Superusers, or members flagged as web users
        web_user = lookup_web_user(request.user)
        if not web_user.allowed:
            logout(request)
            return redirect(settings.LOGIN_URL)

        request.web_user = web_user
        return self.get_response(request)
