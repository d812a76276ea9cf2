"""Password hashing domain service."""

from blog.config import AuthSettings
from blog.util.password import hash_password, verify_password

from .base import Service


class PasswordService(Service):
    """Hashes and checks user passwords with the configured bcrypt cost."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def hash(self, password: str) -> str:
        return hash_password(password, rounds=self.auth_settings.bcrypt_rounds)

    def verify(self, password: str, digest: str) -> bool:
        return verify_password(password, digest)
