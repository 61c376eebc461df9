"""Entry point of the Network as Code client library."""

import httpx
import structlog

from . import api, config
from .namespaces import Devices, Sessions, Slices

logger = structlog.get_logger(__name__)


class NetworkAsCodeClient:
    """A client for working with Network as Code.

    Example:
        >>> client = NetworkAsCodeClient(token="your_api_token")
        >>> device = client.devices.get("device@testcsp.net")
        >>> device.location()

    One API client is shared by every namespace. It holds the only
    credential and is read-only after construction.
    """

    def __init__(
        self,
        token: str,
        dev_mode: bool = False,
        timeout: float = api.DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            token: Authentication token for the Network as Code API.
            dev_mode: Route requests to the development tenant.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport, mainly for tests.
        """
        self._api = api.APIClient(
            token=token,
            dev_mode=dev_mode,
            timeout=timeout,
            transport=transport,
        )
        self._devices = Devices(self._api)
        self._sessions = Sessions(self._api)
        self._slices = Slices(self._api)

    @classmethod
    def from_config(cls, config_path: str | None = None) -> "NetworkAsCodeClient":
        """Build a client from a JSON configuration file.

        Also sets up logging from the configured level and format, unless
        ``setup_logging`` is off or the application configured structlog
        itself.
        """
        cfg = config.load_config(config_path)
        if cfg.setup_logging:
            config.configure_logging(cfg.log_level, cfg.log_format)
        logger.info("Creating client from config", dev_mode=cfg.dev_mode)
        return cls(token=cfg.token, dev_mode=cfg.dev_mode, timeout=cfg.timeout)

    @property
    def devices(self) -> Devices:
        """Namespace containing functionalities related to devices."""
        return self._devices

    @property
    def sessions(self) -> Sessions:
        """Namespace containing functionalities related to QoS sessions."""
        return self._sessions

    @property
    def slices(self) -> Slices:
        """Namespace containing functionalities related to network slices."""
        return self._slices

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        """Close the underlying HTTP connections."""
        self._api.close()
