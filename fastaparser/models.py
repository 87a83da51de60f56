"""The sequence record shared by every reader and writer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass
class Record:
    """A named biological sequence."""

    id: str
    seq: str

    def to_dict(self) -> dict[str, str]:
        """Return the record as a plain mapping with ``id`` and ``seq`` keys."""
        return {"id": self.id, "seq": self.seq}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Record:
        """Build a record from a mapping holding string ``id`` and ``seq`` values."""
        if not isinstance(data, Mapping):
            raise ValueError(f"expected an object, got {type(data).__name__}")
        values = {}
        for key in ("id", "seq"):
            if key not in data:
                raise ValueError(f"missing field `{key}`")
            value = data[key]
            if not isinstance(value, str):
                raise ValueError(
                    f"field `{key}` must be a string, got {type(value).__name__}"
                )
            values[key] = value
        return cls(**values)