"""HTTP clients for services the directory API talks to."""

from .mock_server_client import MockServerClient  # noqa: F401
