"""Devices namespace."""

from ..models import Device, DeviceIpv4Addr
from .namespace import Namespace


class Devices(Namespace):
    """Factory for devices. Building a device never sends a request."""

    def get(
        self,
        network_access_identifier: str | None = None,
        ipv4_address: DeviceIpv4Addr | None = None,
        ipv6_address: str | None = None,
        phone_number: str | None = None,
    ) -> Device:
        """Get a device by any combination of its identifiers.

        Args:
            network_access_identifier: Subscriber identifier.
            ipv4_address: IPv4 address information.
            ipv6_address: IPv6 address.
            phone_number: MSISDN.

        Returns:
            A local Device bound to this client.

        Raises:
            ValidationError: If no identifier is given.
        """
        return Device(
            _api=self.api,
            network_access_identifier=network_access_identifier,
            ipv4_address=ipv4_address,
            ipv6_address=ipv6_address,
            phone_number=phone_number,
        )
