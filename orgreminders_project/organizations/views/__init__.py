from .member_views import member_detail, member_list, member_save
from .organization_views import (
    organization_detail,
    organization_list,
    organization_save,
)

__all__ = [
    "member_detail",
    "member_list",
    "member_save",
    "organization_detail",
    "organization_list",
    "organization_save",
]
