import base64
from typing import Dict, Mapping

from .constants import HEADER_AUTHORIZATION


def basic_auth_header(email: str, password: str) -> Dict[str, str]:
    """Build an ``Authorization: Basic`` header for the given credentials."""
    credentials = f"{email}:{password}".encode("utf-8")
    token = base64.b64encode(credentials).decode("ascii")
    return {HEADER_AUTHORIZATION: f"Basic {token}"}


def mask_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """Copy of ``headers`` safe to write to logs."""
    return {
        name: "***" if name.lower() == HEADER_AUTHORIZATION.lower() else value
        for name, value in headers.items()
    }
