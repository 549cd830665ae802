"""User-related data models."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class User:
    """Gandalf user and its public keys, indexed by key name."""

    name: str
    keys: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body Gandalf expects for this user."""
        return {"name": self.name, "keys": self.keys}
