"""Slices namespace."""

import structlog

from ..models import (
    AreaOfService,
    NetworkIdentifier,
    Slice,
    SliceInfo,
    Throughput,
)
from .namespace import Namespace

logger = structlog.get_logger(__name__)


class Slices(Namespace):
    """Creation and lookup of network slices."""

    def create(
        self,
        network_id: NetworkIdentifier,
        slice_info: SliceInfo,
        notification_url: str,
        *,
        name: str | None = None,
        area_of_service: AreaOfService | None = None,
        slice_downlink_throughput: Throughput | None = None,
        slice_uplink_throughput: Throughput | None = None,
        device_downlink_throughput: Throughput | None = None,
        device_uplink_throughput: Throughput | None = None,
        max_data_connections: int | None = None,
        max_devices: int | None = None,
        notification_auth_token: str | None = None,
    ) -> Slice:
        """Create a network slice.

        The returned slice's state is whatever the service answered,
        typically PENDING. Poll with ``Slice.refresh()`` to follow it.

        Args:
            network_id: Mobile network (mcc/mnc) to provision the slice on.
            slice_info: Service type and differentiator.
            notification_url: URL for slice state notifications.
            name: Client-chosen slice name.
            area_of_service: Polygon the slice serves, vertices in order.
            slice_downlink_throughput: Downlink throughput of the slice.
            slice_uplink_throughput: Uplink throughput of the slice.
            device_downlink_throughput: Downlink throughput per device.
            device_uplink_throughput: Uplink throughput per device.
            max_data_connections: Maximum number of data connections.
            max_devices: Maximum number of devices.
            notification_auth_token: Token sent with notifications.

        Returns:
            The created slice.
        """
        requested = Slice(
            _api=self.api,
            name=name,
            network_identifier=network_id,
            slice_info=slice_info,
            notification_url=notification_url,
            notification_auth_token=notification_auth_token,
            area_of_service=area_of_service,
            slice_downlink_throughput=slice_downlink_throughput,
            slice_uplink_throughput=slice_uplink_throughput,
            device_downlink_throughput=device_downlink_throughput,
            device_uplink_throughput=device_uplink_throughput,
            max_data_connections=max_data_connections,
            max_devices=max_devices,
        )
        raw = self.api.slicing.create(requested.to_payload())
        created = Slice.from_raw(self.api, raw)
        logger.info(
            "Created slice",
            slice_name=created.name,
            state=created.state.value,
        )
        return created

    def get(self, name: str) -> Slice:
        """Get a slice by name. Each call returns a new object."""
        return Slice.from_raw(self.api, self.api.slicing.get(name))

    def get_all(self) -> list[Slice]:
        """Get every slice visible to the API key."""
        return [Slice.from_raw(self.api, raw) for raw in self.api.slicing.list_slices()]
