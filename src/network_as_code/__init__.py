"""Network as Code client.

Typed, object-oriented access to the Network as Code API: device
location, quality-on-demand sessions and network slices.
"""

from .client import NetworkAsCodeClient

__version__ = "0.1.0"
__all__ = ["NetworkAsCodeClient"]
