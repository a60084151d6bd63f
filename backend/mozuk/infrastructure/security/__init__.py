from .passwords import hash_password, verify_password
from .tokens import TokenService

__all__ = ["hash_password", "verify_password", "TokenService"]
