"""
Identity Core - Authentication, user management and form nonces.
"""

from euclid_mam.kernel.identity.password import PasswordHasher, verify_password, hash_password
from euclid_mam.kernel.identity.jwt import (
    JWTManager,
    TokenPair,
    AccessTokenPayload,
    create_access_token,
    verify_access_token,
)
from euclid_mam.kernel.identity.nonce import NonceManager
from euclid_mam.kernel.identity.identity_service import IdentityService, sanitize_nicename

__all__ = [
    "PasswordHasher",
    "verify_password",
    "hash_password",
    "JWTManager",
    "TokenPair",
    "AccessTokenPayload",
    "create_access_token",
    "verify_access_token",
    "NonceManager",
    "IdentityService",
    "sanitize_nicename",
]
