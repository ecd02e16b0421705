import re
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, field_validator

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+$")
"""Basic `local-part@domain` shape"""


class ServerEntry(BaseModel):
    """A named server the API is reachable at"""

    model_config = ConfigDict(frozen=True)

    url: str
    """Absolute base URL (scheme + host, optional port)"""
    description: str
    """Human readable label shown by the documentation UI"""

    @field_validator("url")
    @classmethod
    def check_absolute_url(cls, value: str) -> str:
        parts = urlsplit(value)
        if parts.scheme not in ("http", "https") or not parts.hostname:
            raise ValueError(f"Server URL must be an absolute http(s) URL: {value!r}")
        # Raises ValueError on a non-numeric or out of range port
        parts.port
        return value


class Contact(BaseModel):
    """Contact information published with the API documentation"""

    model_config = ConfigDict(frozen=True)

    name: str
    email: str

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        if not EMAIL_PATTERN.match(value):
            raise ValueError(f"Contact email is not a valid address: {value!r}")
        return value


class ApiMetadata(BaseModel):
    """Immutable descriptor of the API identity and its reachable servers"""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    version: str
    contact: Contact
    servers: tuple[ServerEntry, ...]
    """Ordered list of servers, the first one is shown as the default"""

    @field_validator("version")
    @classmethod
    def check_version(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Version must not be empty")
        return value

    def to_openapi_kwargs(self) -> dict:
        """Keyword arguments for `fastapi.openapi.utils.get_openapi`

        Returns:
            dict: title, version, description, contact and servers
        """
        return {
            "title": self.title,
            "version": self.version,
            "description": self.description,
            "contact": self.contact.model_dump(),
            "servers": [server.model_dump() for server in self.servers],
        }
