"""Device model and its location and QoS operations.

A device is identified by any combination of network access identifier,
IPv4 address information, IPv6 address and phone number. At least one of
them must be present. Devices are plain local objects; only their
operations reach the network.
"""

from dataclasses import dataclass, field
from typing import Any

import structlog

from .. import errors
from ..api import APIClient, types
from .location import Location
from .session import PortsSpec, QoDSession

logger = structlog.get_logger(__name__)

DEFAULT_MAX_AGE = 60


@dataclass(frozen=True)
class DeviceIpv4Addr:
    """IPv4 address information of a device.

    The public address and port identify the device behind NAT; the
    private address is its address inside the operator network.
    """

    public_address: str | None = None
    private_address: str | None = None
    public_port: int | None = None

    def is_empty(self) -> bool:
        return self.public_address is None and self.private_address is None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.public_address is not None:
            payload["publicAddress"] = self.public_address
        if self.private_address is not None:
            payload["privateAddress"] = self.private_address
        if self.public_port is not None:
            payload["publicPort"] = self.public_port
        return payload


@dataclass
class Device:
    """A device on the operator network.

    Attributes:
        network_access_identifier: Subscriber identifier (e.g.
            "device@operator.net").
        ipv4_address: IPv4 address information, if known.
        ipv6_address: IPv6 address, if known.
        phone_number: MSISDN, if known.
    """

    _api: APIClient = field(repr=False, compare=False)
    network_access_identifier: str | None = None
    ipv4_address: DeviceIpv4Addr | None = None
    ipv6_address: str | None = None
    phone_number: str | None = None

    def __post_init__(self):
        if not self.has_identifier():
            msg = (
                "Device requires a network access identifier, an IP address "
                "or a phone number"
            )
            raise errors.ValidationError(msg)

    def has_identifier(self) -> bool:
        """Whether at least one identifying attribute is present."""
        return (
            self.network_access_identifier is not None
            or self.has_ip_address()
            or self.phone_number is not None
        )

    def has_ip_address(self) -> bool:
        """Whether an IPv4 or IPv6 address is present."""
        has_ipv4 = self.ipv4_address is not None and not self.ipv4_address.is_empty()
        return has_ipv4 or self.ipv6_address is not None

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the API's ``device`` object, omitting absent fields."""
        payload: dict[str, Any] = {}
        if self.network_access_identifier is not None:
            payload["networkAccessIdentifier"] = self.network_access_identifier
        if self.ipv4_address is not None and not self.ipv4_address.is_empty():
            payload["ipv4Address"] = self.ipv4_address.to_payload()
        if self.ipv6_address is not None:
            payload["ipv6Address"] = self.ipv6_address
        if self.phone_number is not None:
            payload["phoneNumber"] = self.phone_number
        return payload

    # -----------------------------------------------------------------------
    # Location
    # -----------------------------------------------------------------------

    def location(self, max_age: int = DEFAULT_MAX_AGE) -> Location:
        """Retrieve the current location of the device.

        Args:
            max_age: Maximum acceptable age of the location, in seconds.

        Returns:
            Location snapshot.

        Raises:
            NotFoundError: If the device is unknown to the network.
            ServerError: If the service fails or answers malformed data.
        """
        raw = self._api.location.retrieve(self.to_payload(), max_age)
        return Location.from_raw(raw)

    def verify_location(
        self,
        latitude: float,
        longitude: float,
        radius: float,
        max_age: int = DEFAULT_MAX_AGE,
    ) -> bool:
        """Check whether the device is within ``radius`` meters of a point.

        The answer comes from the verification service; nothing is
        computed locally.

        Args:
            latitude: Latitude of the area center.
            longitude: Longitude of the area center.
            radius: Radius of the area, in meters.
            max_age: Maximum acceptable age of the location, in seconds.

        Returns:
            True only when the service answers ``"TRUE"``.
        """
        raw = self._api.location.verify(
            self.to_payload(),
            latitude,
            longitude,
            radius,
            max_age,
        )
        return raw.verification_result == "TRUE"

    # -----------------------------------------------------------------------
    # Quality on demand
    # -----------------------------------------------------------------------

    def create_qod_session(
        self,
        profile: str,
        service_ipv4: str | None = None,
        service_ipv6: str | None = None,
        device_ports: PortsSpec | None = None,
        service_ports: PortsSpec | None = None,
        duration: int | None = None,
        notification_url: str | None = None,
        notification_auth_token: str | None = None,
    ) -> QoDSession:
        """Create a QoS session for traffic between this device and a server.

        Args:
            profile: QoS profile name (e.g. "QOS_L").
            service_ipv4: IPv4 address of the application server.
            service_ipv6: IPv6 address of the application server.
            device_ports: Device ports the session applies to.
            service_ports: Application server ports the session applies to.
            duration: Requested session duration, in seconds.
            notification_url: URL for session status notifications.
            notification_auth_token: Token sent with notifications.

        Returns:
            The created session as reported by the service.

        Raises:
            ValidationError: If the device or the application server has no
                IP address. Raised before any request is sent.
        """
        if not self.has_ip_address():
            msg = "Device must have an IPv4 or IPv6 address to create a QoS session"
            raise errors.ValidationError(msg)
        if service_ipv4 is None and service_ipv6 is None:
            msg = "At least one of IP parameters must be provided"
            raise errors.ValidationError(msg)

        application_server: dict[str, Any] = {}
        if service_ipv4 is not None:
            application_server["ipv4Address"] = service_ipv4
        if service_ipv6 is not None:
            application_server["ipv6Address"] = service_ipv6

        body: dict[str, Any] = {
            "qosProfile": profile,
            "device": self.to_payload(),
            "applicationServer": application_server,
        }
        if device_ports is not None:
            body["devicePorts"] = device_ports.to_payload()
        if service_ports is not None:
            body["applicationServerPorts"] = service_ports.to_payload()
        if duration is not None:
            body["duration"] = duration
        if notification_url is not None:
            body["notificationUrl"] = notification_url
        if notification_auth_token is not None:
            body["notificationAuthToken"] = notification_auth_token

        raw = self._api.sessions.create_session(body)
        logger.info(
            "Created QoS session",
            session_id=raw.session_id,
            profile=profile,
            status=raw.qos_status,
        )
        return QoDSession.from_raw(self._api, raw, device=self)

    def sessions(self) -> list[QoDSession]:
        """List the QoS sessions of this device.

        Raises:
            ValidationError: If the device has no network access identifier.
        """
        if self.network_access_identifier is None:
            msg = "Listing sessions requires a network access identifier"
            raise errors.ValidationError(msg)
        raws = self._api.sessions.list_sessions(self.network_access_identifier)
        return [QoDSession.from_raw(self._api, raw, device=self) for raw in raws]

    def clear_sessions(self) -> None:
        """Delete every QoS session of this device."""
        for session in self.sessions():
            session.delete()

    @classmethod
    def from_raw(cls, api: APIClient, raw: types.RawDevice) -> "Device | None":
        """Build a device from the QoS service echo.

        Returns None when the echo carries no identifying attribute.
        """
        ipv4 = None
        if raw.ipv4_address is not None:
            ipv4 = DeviceIpv4Addr(
                public_address=raw.ipv4_address.public_address,
                private_address=raw.ipv4_address.private_address,
                public_port=raw.ipv4_address.public_port,
            )
            if ipv4.is_empty():
                ipv4 = None
        if (
            raw.network_access_identifier is None
            and ipv4 is None
            and raw.ipv6_address is None
            and raw.phone_number is None
        ):
            return None
        return cls(
            _api=api,
            network_access_identifier=raw.network_access_identifier,
            ipv4_address=ipv4,
            ipv6_address=raw.ipv6_address,
            phone_number=raw.phone_number,
        )
