"""Network slice model and its server-driven state machine.

The slicing service owns the slice lifecycle::

    PENDING -> AVAILABLE <-> OPERATING
    {PENDING, AVAILABLE, OPERATING} -> DELETED

The client only requests transitions and observes the resulting state.
Transitions complete asynchronously, so callers poll with ``refresh()``
(or the bounded ``wait_for()`` helper) until the new state shows up.
"""

import enum
import time
from dataclasses import dataclass, field
from typing import Any

import structlog

from .. import errors
from ..api import APIClient, types

logger = structlog.get_logger(__name__)


class SliceState(str, enum.Enum):
    """Lifecycle states reported by the slicing service."""

    PENDING = "PENDING"
    AVAILABLE = "AVAILABLE"
    OPERATING = "OPERATING"
    DELETED = "DELETED"


@dataclass(frozen=True)
class NetworkIdentifier:
    """Mobile network the slice belongs to."""

    mcc: str
    mnc: str

    def to_payload(self) -> dict[str, Any]:
        return {"mcc": self.mcc, "mnc": self.mnc}


@dataclass(frozen=True)
class SliceInfo:
    """Slice/service type (e.g. "eMBB") and optional differentiator."""

    service_type: str
    differentiator: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"service_type": self.service_type}
        if self.differentiator is not None:
            payload["differentiator"] = self.differentiator
        return payload


@dataclass(frozen=True)
class Point:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class AreaOfService:
    """Polygon bounding the area a slice serves; vertex order is kept."""

    polygon: list[Point] = field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        return {
            "polygon": [
                {"lat": point.latitude, "lon": point.longitude}
                for point in self.polygon
            ],
        }

    @classmethod
    def from_raw(cls, raw: types.RawAreaOfService | None) -> "AreaOfService | None":
        if raw is None:
            return None
        return cls(
            polygon=[Point(latitude=p.lat, longitude=p.lon) for p in raw.polygon],
        )


@dataclass(frozen=True)
class Throughput:
    """Guaranteed and maximum throughput, in kbps."""

    guaranteed: float | None = None
    maximum: float | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.guaranteed is not None:
            payload["guaranteed"] = self.guaranteed
        if self.maximum is not None:
            payload["maximum"] = self.maximum
        return payload

    @classmethod
    def from_raw(cls, raw: types.RawThroughput | None) -> "Throughput | None":
        if raw is None:
            return None
        return cls(guaranteed=raw.guaranteed, maximum=raw.maximum)


@dataclass
class Slice:
    """A network slice.

    ``state`` is read-only. It only changes through
    ``_apply_server_state``, which runs after a successful response that
    carries a slice representation. It is stale as soon as the server
    moves on; call ``refresh()`` before relying on it.
    """

    _api: APIClient = field(repr=False, compare=False)
    name: str | None
    network_identifier: NetworkIdentifier
    slice_info: SliceInfo
    notification_url: str | None = None
    notification_auth_token: str | None = None
    area_of_service: AreaOfService | None = None
    slice_downlink_throughput: Throughput | None = None
    slice_uplink_throughput: Throughput | None = None
    device_downlink_throughput: Throughput | None = None
    device_uplink_throughput: Throughput | None = None
    max_data_connections: int | None = None
    max_devices: int | None = None
    sid: str | None = None
    _state: SliceState = field(default=SliceState.PENDING, init=False, repr=False)

    @property
    def state(self) -> SliceState:
        """Last state reported by the server."""
        return self._state

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the slicing service's request body.

        Absent options are omitted rather than sent as null.
        """
        payload: dict[str, Any] = {
            "networkIdentifier": self.network_identifier.to_payload(),
            "sliceInfo": self.slice_info.to_payload(),
        }
        optional: dict[str, Any] = {
            "name": self.name,
            "notificationUrl": self.notification_url,
            "notificationAuthToken": self.notification_auth_token,
            "maxDataConnections": self.max_data_connections,
            "maxDevices": self.max_devices,
        }
        for key, value in optional.items():
            if value is not None:
                payload[key] = value

        nested = {
            "areaOfService": self.area_of_service,
            "sliceDownlinkThroughput": self.slice_downlink_throughput,
            "sliceUplinkThroughput": self.slice_uplink_throughput,
            "deviceDownlinkThroughput": self.device_downlink_throughput,
            "deviceUplinkThroughput": self.device_uplink_throughput,
        }
        for key, value in nested.items():
            if value is not None:
                payload[key] = value.to_payload()
        return payload

    # -----------------------------------------------------------------------
    # Server interaction
    # -----------------------------------------------------------------------

    def _require_name(self) -> str:
        if self.name is None:
            msg = "Slice has no name; it was not created on the server"
            raise errors.ValidationError(msg)
        return self.name

    def _apply_server_state(self, raw: types.RawSlice) -> None:
        """Overwrite local fields from a server representation.

        Raises:
            ServerError: If the reported state is not a known SliceState.
        """
        try:
            state = SliceState(raw.state)
        except ValueError as exc:
            msg = f"Unknown slice state {raw.state!r}"
            raise errors.ServerError(msg, details=raw.state) from exc

        body = raw.slice
        if body.name is not None:
            self.name = body.name
        if raw.csi_id is not None:
            self.sid = raw.csi_id
        self.network_identifier = NetworkIdentifier(
            mcc=body.network_identifier.mcc,
            mnc=body.network_identifier.mnc,
        )
        self.slice_info = SliceInfo(
            service_type=body.slice_info.service_type,
            differentiator=body.slice_info.differentiator,
        )
        self.notification_url = body.notification_url
        # The service may leave the token out; keep the local one.
        if body.notification_auth_token is not None:
            self.notification_auth_token = body.notification_auth_token
        self.area_of_service = AreaOfService.from_raw(body.area_of_service)
        self.slice_downlink_throughput = Throughput.from_raw(
            body.slice_downlink_throughput,
        )
        self.slice_uplink_throughput = Throughput.from_raw(body.slice_uplink_throughput)
        self.device_downlink_throughput = Throughput.from_raw(
            body.device_downlink_throughput,
        )
        self.device_uplink_throughput = Throughput.from_raw(
            body.device_uplink_throughput,
        )
        self.max_data_connections = body.max_data_connections
        self.max_devices = body.max_devices

        previous = self._state
        self._state = state
        if previous != state:
            logger.info(
                "Slice state changed",
                slice_name=self.name,
                previous=previous.value,
                state=state.value,
            )

    def refresh(self) -> None:
        """Re-fetch the slice and update local state. Safe to repeat."""
        raw = self._api.slicing.get(self._require_name())
        self._apply_server_state(raw)

    def activate(self) -> None:
        """Request AVAILABLE -> OPERATING.

        The server may still report AVAILABLE right after the call; poll
        with ``refresh()`` to observe OPERATING.
        """
        raw = self._api.slicing.activate(self._require_name())
        if raw is not None:
            self._apply_server_state(raw)

    def deactivate(self) -> None:
        """Request OPERATING -> AVAILABLE."""
        raw = self._api.slicing.deactivate(self._require_name())
        if raw is not None:
            self._apply_server_state(raw)

    def delete(self) -> None:
        """Request deletion.

        The local object stays usable as a read-only snapshot; only
        ``refresh()`` remains meaningful afterwards.
        """
        raw = self._api.slicing.delete(self._require_name())
        if raw is not None:
            self._apply_server_state(raw)
        logger.info("Requested slice deletion", slice_name=self.name)

    def wait_for(
        self,
        state: SliceState | str,
        poll_interval: float,
        max_attempts: int,
    ) -> bool:
        """Poll with ``refresh()`` until the slice reaches ``state``.

        Runs in the calling thread and never more than ``max_attempts``
        refreshes; the caller picks the bound.

        Args:
            state: Target state.
            poll_interval: Seconds to sleep between refreshes.
            max_attempts: Maximum number of refreshes.

        Returns:
            True if the target state was observed, False otherwise.
        """
        target = SliceState(state)
        for attempt in range(max_attempts):
            if self._state == target:
                return True
            if attempt:
                time.sleep(poll_interval)
            self.refresh()
        return self._state == target

    @classmethod
    def from_raw(cls, api: APIClient, raw: types.RawSlice) -> "Slice":
        """Build a slice from a raw slicing service response.

        Every field is filled by ``_apply_server_state``.
        """
        body = raw.slice
        instance = cls(
            _api=api,
            name=body.name,
            network_identifier=NetworkIdentifier(
                mcc=body.network_identifier.mcc,
                mnc=body.network_identifier.mnc,
            ),
            slice_info=SliceInfo(service_type=body.slice_info.service_type),
        )
        instance._apply_server_state(raw)
        return instance
