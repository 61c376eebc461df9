"""Location retrieval and verification endpoints."""

from typing import Any

from .service import ServiceClient, parse
from .types import RawLocation, RawVerification


class LocationApi:
    """Endpoints of the location retrieval and verification services.

    The two operations are served by separate microservices, each with
    its own routing host.
    """

    def __init__(self, retrieval: ServiceClient, verification: ServiceClient):
        self.retrieval = retrieval
        self.verification = verification

    def retrieve(self, device: dict[str, Any], max_age: int) -> RawLocation:
        """Retrieve the last known location of a device.

        Args:
            device: Serialized device identification.
            max_age: Maximum acceptable age of the location, in seconds.

        Returns:
            Validated location response.
        """
        data = self.retrieval.request(
            "POST",
            "/retrieve",
            json={"device": device, "maxAge": max_age},
        )
        return parse(RawLocation, data)

    def verify(
        self,
        device: dict[str, Any],
        latitude: float,
        longitude: float,
        radius: float,
        max_age: int,
    ) -> RawVerification:
        """Ask whether a device is within ``radius`` meters of a point.

        Radius and max_age are forwarded as given; the service enforces
        their semantics.
        """
        body = {
            "device": device,
            "area": {
                "areaType": "CIRCLE",
                "center": {"latitude": latitude, "longitude": longitude},
                "radius": radius,
            },
            "maxAge": max_age,
        }
        data = self.verification.request("POST", "/verify", json=body)
        return parse(RawVerification, data)
