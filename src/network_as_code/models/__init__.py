"""Domain models of the Network as Code client.

Plain data holders mapped to and from the API's JSON representations.
Models that correspond to server resources can re-fetch themselves.
"""

from .device import Device, DeviceIpv4Addr
from .location import CivicAddress, Location
from .session import PortRange, PortsSpec, QoDSession
from .slice import (
    AreaOfService,
    NetworkIdentifier,
    Point,
    Slice,
    SliceInfo,
    SliceState,
    Throughput,
)

__all__ = [
    "AreaOfService",
    "CivicAddress",
    "Device",
    "DeviceIpv4Addr",
    "Location",
    "NetworkIdentifier",
    "Point",
    "PortRange",
    "PortsSpec",
    "QoDSession",
    "Slice",
    "SliceInfo",
    "SliceState",
    "Throughput",
]
