"""Credential providers that decorate requests before they are sent."""

from __future__ import annotations

import base64
from abc import ABC, abstractmethod

from .request import HttpRequest


class ServiceCredentials(ABC):
    """Base class for anything that authenticates outgoing requests."""

    @abstractmethod
    async def process_request(self, request: HttpRequest) -> None:
        """Decorate ``request`` in place, e.g. by adding auth headers."""


class TokenCredentials(ServiceCredentials):
    """Sends a fixed token in the ``Authorization`` header."""

    def __init__(self, token: str, scheme: str = "Bearer") -> None:
        if not token:
            raise ValueError("token must not be empty")
        self.token = token
        self.scheme = scheme

    async def process_request(self, request: HttpRequest) -> None:
        request.headers["Authorization"] = f"{self.scheme} {self.token}"


class BasicAuthenticationCredentials(ServiceCredentials):
    """HTTP Basic authentication."""

    def __init__(self, user_name: str, password: str) -> None:
        self.user_name = user_name
        self.password = password

    async def process_request(self, request: HttpRequest) -> None:
        raw = f"{self.user_name}:{self.password}".encode()
        request.headers["Authorization"] = f"Basic {base64.b64encode(raw).decode('ascii')}"
