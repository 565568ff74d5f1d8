"""
Base value object class for DDD.
"""
from abc import ABC
from dataclasses import dataclass, fields
from typing import Any, Dict


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base value object class.
    Value objects are immutable and compared by their attributes.
    """

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.__dict__.items())))

    def to_dict(self) -> Dict[str, Any]:
        """Shallow field mapping, used when embedding the value in a JSON column."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
