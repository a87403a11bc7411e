"""
Permission Core - role-derived capabilities.
"""

from euclid_mam.kernel.permissions.permission_service import (
    Capability,
    PermissionService,
    ROLE_CAPABILITIES,
)

__all__ = [
    "Capability",
    "PermissionService",
    "ROLE_CAPABILITIES",
]
