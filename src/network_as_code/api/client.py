"""Bundle of service clients for the Network as Code API.

Each microservice (QoS, location retrieval, location verification,
slicing) is reached through its own ``ServiceClient`` with its own base
URL and routing header. ``APIClient`` builds one of each, sharing the
API key.
"""

import httpx
import structlog

from .location import LocationApi
from .qos import QodApi
from .service import DEFAULT_TIMEOUT, ServiceClient, ServiceEndpoint
from .slicing import SlicingApi

logger = structlog.get_logger(__name__)

QOS_SERVICE = "quality-of-service-on-demand"
LOCATION_RETRIEVAL_SERVICE = "location-retrieval"
LOCATION_VERIFICATION_SERVICE = "location-verification"
SLICING_SERVICE = "network-slicing"


def service_endpoint(service: str, dev_mode: bool = False) -> ServiceEndpoint:
    """Resolve the base URL and routing host of a microservice.

    Production and development tenants share the gateway URL and differ
    only in the ``X-RapidAPI-Host`` routing header.
    """
    tenant = "nokia-dev" if dev_mode else "nokia"
    return ServiceEndpoint(
        base_url=f"https://{service}.p-eu.rapidapi.com",
        host=f"{service}.{tenant}.rapidapi.com",
    )


class APIClient:
    """One ServiceClient per Network as Code microservice.

    The API key is read-only after construction, so one instance can be
    shared by every namespace and used from several threads.
    """

    def __init__(
        self,
        token: str,
        dev_mode: bool = False,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the service clients.

        Args:
            token: Network as Code API key.
            dev_mode: Route requests to the development tenant.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport shared by all services.
        """

        def service(name: str) -> ServiceClient:
            return ServiceClient(
                token=token,
                endpoint=service_endpoint(name, dev_mode),
                timeout=timeout,
                transport=transport,
            )

        self.dev_mode = dev_mode
        self.sessions = QodApi(service(QOS_SERVICE))
        self.location = LocationApi(
            retrieval=service(LOCATION_RETRIEVAL_SERVICE),
            verification=service(LOCATION_VERIFICATION_SERVICE),
        )
        self.slicing = SlicingApi(service(SLICING_SERVICE))
        logger.debug("Created API client", dev_mode=dev_mode)

    def services(self) -> list[ServiceClient]:
        """Return every underlying ServiceClient."""
        return [
            self.sessions.service,
            self.location.retrieval,
            self.location.verification,
            self.slicing.service,
        ]

    def close(self):
        """Close every underlying HTTP client."""
        for service in self.services():
            service.close()
