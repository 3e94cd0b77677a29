"""Status listener hooks for the security service."""

from ..domain.enums import AlarmStatus


class StatusListener:
    """Receives security service notifications.

    Subclasses override only the hooks they care about.
    """

    def notify(self, status: AlarmStatus) -> None:
        """Called after every alarm status write."""

    def cat_detected(self, cat_detected: bool) -> None:
        """Called after every processed image."""

    def sensor_status_changed(self) -> None:
        """Called after a sensor activation change."""
