"""Client namespaces.

Each namespace groups the operations of one resource family and
constructs model instances bound to the shared API client.
"""

from .devices import Devices
from .sessions import Sessions
from .slices import Slices

__all__ = ["Devices", "Sessions", "Slices"]
