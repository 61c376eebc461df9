"""Location value objects."""

from dataclasses import dataclass

from ..api import types


@dataclass(frozen=True)
class CivicAddress:
    """Postal address of a location; every field is optional."""

    country: str | None = None
    a1: str | None = None
    a2: str | None = None
    a3: str | None = None
    a4: str | None = None
    a5: str | None = None
    a6: str | None = None


@dataclass(frozen=True)
class Location:
    """Point-in-time location snapshot of a device.

    Coordinates are WGS84 degrees. Instances are never cached; call
    ``Device.location()`` again for a fresh value.
    """

    latitude: float
    longitude: float
    civic_address: CivicAddress | None = None

    @classmethod
    def from_raw(cls, raw: types.RawLocation) -> "Location":
        civic = raw.civic_address
        return cls(
            latitude=raw.area.center.latitude,
            longitude=raw.area.center.longitude,
            civic_address=(
                CivicAddress(**civic.model_dump()) if civic is not None else None
            ),
        )
