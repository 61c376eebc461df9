"""Quality-on-demand session model."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import structlog

from ..api import APIClient, types

if TYPE_CHECKING:
    from .device import Device

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PortRange:
    """Inclusive range of ports, ``start`` to ``end``."""

    start: int
    end: int


@dataclass(frozen=True)
class PortsSpec:
    """Ports of a device or application server.

    Either or both of ``ranges`` and ``ports`` may be given.
    """

    ranges: list[PortRange] = field(default_factory=list)
    ports: list[int] = field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.ranges:
            payload["ranges"] = [{"from": r.start, "to": r.end} for r in self.ranges]
        if self.ports:
            payload["ports"] = list(self.ports)
        return payload

    @classmethod
    def from_raw(cls, raw: types.RawPorts | None) -> "PortsSpec | None":
        if raw is None:
            return None
        return cls(
            ranges=[PortRange(start=r.start, end=r.end) for r in raw.ranges or []],
            ports=list(raw.ports or []),
        )


@dataclass
class QoDSession:
    """A quality-on-demand session of a device.

    ``status`` and the timestamps are overwritten in place by
    ``refresh()``. The device and application-server bindings are set at
    creation and never change afterwards.

    Attributes:
        id: Server-issued session identifier.
        profile: QoS profile name (e.g. "QOS_L").
        status: Last known QoS status (e.g. "REQUESTED", "AVAILABLE").
        started_at: Start of the session, epoch seconds.
        expires_at: Expiry of the session, epoch seconds.
    """

    _api: APIClient = field(repr=False, compare=False)
    id: str
    profile: str
    status: str
    device: "Device | None" = None
    service_ipv4: str | None = None
    service_ipv6: str | None = None
    device_ports: PortsSpec | None = None
    service_ports: PortsSpec | None = None
    notification_url: str | None = None
    started_at: float | None = None
    expires_at: float | None = None

    def duration(self) -> float | None:
        """Return ``expires_at - started_at`` in seconds, without a request.

        The result may be zero or negative. None when either timestamp is
        missing, which is normal for a session that has not started yet.
        """
        if self.started_at is None or self.expires_at is None:
            return None
        return self.expires_at - self.started_at

    def refresh(self) -> None:
        """Re-fetch the session and overwrite status and timestamps."""
        raw = self._api.sessions.get_session(self.id)
        self.profile = raw.qos_profile
        self.status = raw.qos_status
        self.started_at = raw.started_at
        self.expires_at = raw.expires_at
        logger.debug("Refreshed session", session_id=self.id, status=self.status)

    def delete(self) -> None:
        """Delete the session on the server; the local object is kept as is."""
        self._api.sessions.delete_session(self.id)
        logger.info("Deleted session", session_id=self.id)

    @classmethod
    def from_raw(
        cls,
        api: APIClient,
        raw: types.RawSession,
        device: "Device | None" = None,
    ) -> "QoDSession":
        """Build a session from a raw QoS service response.

        Args:
            api: API client the session will use for refresh and delete.
            raw: Validated session response.
            device: Device the session belongs to, when known.
        """
        server = raw.application_server
        return cls(
            _api=api,
            id=raw.session_id,
            profile=raw.qos_profile,
            status=raw.qos_status,
            device=device,
            service_ipv4=server.ipv4_address if server else None,
            service_ipv6=server.ipv6_address if server else None,
            device_ports=PortsSpec.from_raw(raw.device_ports),
            service_ports=PortsSpec.from_raw(raw.application_server_ports),
            notification_url=raw.notification_url,
            started_at=raw.started_at,
            expires_at=raw.expires_at,
        )
