from dataclasses import dataclass


@dataclass(frozen=True)
class Airport:
    """Data class for storing a destination or origin airport."""

    city: str  # e.g. "Los Angeles (LAX)"

    def __post_init__(self):
        if not isinstance(self.city, str):
            raise TypeError(f"Airport city must be a string, got {type(self.city).__name__}")
        if not self.city.strip():
            raise ValueError("Airport city must not be empty")

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {'city': self.city}

    @classmethod
    def from_dict(cls, data: dict) -> 'Airport':
        """Create instance from dictionary."""
        return cls(city=data['city'])

    def __str__(self):
        return self.city
