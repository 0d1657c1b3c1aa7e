"""secinfo: rank infosec streamers by recent streaming activity."""

__version__ = "0.3.0"
