"""Server settings read from the environment."""

import os
from dataclasses import dataclass

__all__ = ["ServerConfig"]


@dataclass
class ServerConfig:
    """Where the server finds gpsd.

    Attributes:
        gpsd_host: Host running gpsd (env ``NAVFIX_GPSD_HOST``).
        gpsd_port: gpsd TCP port (env ``NAVFIX_GPSD_PORT``).
    """

    gpsd_host: str = "localhost"
    gpsd_port: int = 2947

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Build a config, falling back to defaults for unset variables.

        Raises:
            ValueError: If ``NAVFIX_GPSD_PORT`` is not an integer.
        """
        return cls(
            gpsd_host=os.environ.get("NAVFIX_GPSD_HOST", cls.gpsd_host),
            gpsd_port=int(os.environ.get("NAVFIX_GPSD_PORT", cls.gpsd_port)),
        )
