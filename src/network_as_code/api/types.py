"""Raw API response types for the Network as Code microservices.

Pydantic models representing the JSON returned by the QoS, location and
slicing services with minimal processing. Field aliases carry the
server's camelCase names; the Python attribute names are snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field


class RawModel(BaseModel):
    """Base for raw response models: accept aliases and ignore extras."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# ---------------------------------------------------------------------------
# Location
# ---------------------------------------------------------------------------


class RawPoint(RawModel):
    """A WGS84 coordinate pair."""

    latitude: float
    longitude: float


class RawArea(RawModel):
    """Area in which the device was located."""

    area_type: str = Field("CIRCLE", alias="areaType")
    center: RawPoint
    radius: float | None = None


class RawCivicAddress(RawModel):
    """Postal address fields, all optional."""

    country: str | None = None
    a1: str | None = None
    a2: str | None = None
    a3: str | None = None
    a4: str | None = None
    a5: str | None = None
    a6: str | None = None


class RawLocation(RawModel):
    """Response of the location retrieval endpoint."""

    area: RawArea
    civic_address: RawCivicAddress | None = Field(None, alias="civicAddress")
    last_location_time: str | None = Field(None, alias="lastLocationTime")


class RawVerification(RawModel):
    """Response of the location verification endpoint."""

    verification_result: str = Field(alias="verificationResult")


# ---------------------------------------------------------------------------
# Quality on demand
# ---------------------------------------------------------------------------


class RawDeviceIpv4Addr(RawModel):
    """IPv4 address information of a device as echoed by the QoS service."""

    public_address: str | None = Field(None, alias="publicAddress")
    private_address: str | None = Field(None, alias="privateAddress")
    public_port: int | None = Field(None, alias="publicPort")


class RawDevice(RawModel):
    """Device identification as echoed by the QoS service."""

    network_access_identifier: str | None = Field(
        None,
        alias="networkAccessIdentifier",
    )
    ipv4_address: RawDeviceIpv4Addr | None = Field(None, alias="ipv4Address")
    ipv6_address: str | None = Field(None, alias="ipv6Address")
    phone_number: str | None = Field(None, alias="phoneNumber")


class RawApplicationServer(RawModel):
    """Application server addresses bound to a session."""

    ipv4_address: str | None = Field(None, alias="ipv4Address")
    ipv6_address: str | None = Field(None, alias="ipv6Address")


class RawPortRange(RawModel):
    """Inclusive port range."""

    start: int = Field(alias="from")
    end: int = Field(alias="to")


class RawPorts(RawModel):
    """Port ranges and individual ports."""

    ranges: list[RawPortRange] | None = None
    ports: list[int] | None = None


class RawSession(RawModel):
    """A QoS session as returned by the QoS service."""

    session_id: str = Field(alias="sessionId")
    qos_profile: str = Field(alias="qosProfile")
    qos_status: str = Field(alias="qosStatus")
    started_at: float | None = Field(None, alias="startedAt")
    expires_at: float | None = Field(None, alias="expiresAt")
    device: RawDevice | None = None
    application_server: RawApplicationServer | None = Field(
        None,
        alias="applicationServer",
    )
    device_ports: RawPorts | None = Field(None, alias="devicePorts")
    application_server_ports: RawPorts | None = Field(
        None,
        alias="applicationServerPorts",
    )
    notification_url: str | None = Field(None, alias="notificationUrl")


# ---------------------------------------------------------------------------
# Slicing
# ---------------------------------------------------------------------------


class RawNetworkIdentifier(RawModel):
    """Mobile network the slice is provisioned on."""

    mcc: str
    mnc: str


class RawSliceInfo(RawModel):
    """Slice/service type and differentiator."""

    service_type: str
    differentiator: str | None = None


class RawPolygonPoint(RawModel):
    """Vertex of an area-of-service polygon (server uses lat/lon)."""

    lat: float
    lon: float


class RawAreaOfService(RawModel):
    """Ordered polygon bounding the slice's service area."""

    polygon: list[RawPolygonPoint] = Field(default_factory=list)


class RawThroughput(RawModel):
    """Guaranteed and maximum throughput pair."""

    guaranteed: float | None = None
    maximum: float | None = None


class RawSliceBody(RawModel):
    """Client-supplied part of a slice representation."""

    name: str | None = None
    network_identifier: RawNetworkIdentifier = Field(alias="networkIdentifier")
    slice_info: RawSliceInfo = Field(alias="sliceInfo")
    area_of_service: RawAreaOfService | None = Field(None, alias="areaOfService")
    max_data_connections: int | None = Field(None, alias="maxDataConnections")
    max_devices: int | None = Field(None, alias="maxDevices")
    slice_downlink_throughput: RawThroughput | None = Field(
        None,
        alias="sliceDownlinkThroughput",
    )
    slice_uplink_throughput: RawThroughput | None = Field(
        None,
        alias="sliceUplinkThroughput",
    )
    device_downlink_throughput: RawThroughput | None = Field(
        None,
        alias="deviceDownlinkThroughput",
    )
    device_uplink_throughput: RawThroughput | None = Field(
        None,
        alias="deviceUplinkThroughput",
    )
    notification_url: str | None = Field(None, alias="notificationUrl")
    notification_auth_token: str | None = Field(
        None,
        alias="notificationAuthToken",
    )


class RawSlice(RawModel):
    """Slice envelope as returned by the slicing service.

    ``state`` is kept as a plain string here; the domain model maps it
    onto the closed ``SliceState`` enumeration.
    """

    slice: RawSliceBody
    state: str
    csi_id: str | None = None
    order_id: str | None = None
    administrative_state: str | None = Field(None, alias="administrativeState")
    start_polling_at: float | None = Field(None, alias="startPollingAt")
