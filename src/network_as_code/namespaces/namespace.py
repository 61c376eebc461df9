"""Base class for client namespaces."""

from ..api import APIClient


class Namespace:
    """Groups related operations around a shared API client."""

    def __init__(self, api: APIClient):
        self.api = api
