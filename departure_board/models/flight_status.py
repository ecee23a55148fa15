"""Flight status model."""

from enum import Enum


class FlightStatus(Enum):
    """
    Status of a departing flight as displayed on the board.

    The value of each member is the label shown to passengers.

    Example: FlightStatus('En Route') -> FlightStatus.EN_ROUTE
    """
    EN_ROUTE = "En Route"
    SCHEDULED = "Scheduled"
    CANCELED = "Canceled"
    DELAYED = "Delayed"
    LANDED = "Landed"
    BOARDING = "Boarding"

    @classmethod
    def from_label(cls, text: str) -> 'FlightStatus':
        """
        Create status from a label or member name.

        Matching ignores case, and treats spaces, hyphens and underscores
        as equivalent, so "en route", "EN_ROUTE" and "En-Route" all match.

        Args:
            text: Status label (e.g., "Scheduled") or member name

        Returns:
            Matching FlightStatus

        Raises:
            ValueError: If the text does not match any status
        """
        if isinstance(text, cls):
            return text
        if not text:
            raise ValueError("Empty flight status")

        key = cls._normalize(str(text))
        for status in cls:
            if key in (cls._normalize(status.value), cls._normalize(status.name)):
                return status

        valid = ', '.join(s.value for s in cls)
        raise ValueError(f"Unknown flight status: {text!r}. Expected one of: {valid}")

    @staticmethod
    def _normalize(text: str) -> str:
        return text.strip().lower().replace('-', ' ').replace('_', ' ')

    def __str__(self) -> str:
        return self.value
