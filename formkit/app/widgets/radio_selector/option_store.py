from __future__ import annotations

import enum
from typing import Dict, Optional


class OptionType(str, enum.Enum):
    IMAGE = "image"
    COLOR = "color"


class Option:
    """Value contributed by one candidate field of a radio selector.

    :param type: kind of value
    :type type: OptionType
    :param value: resolved image url or hex color, e.g. ``#ff0000``
    :type value: str
    """

    def __init__(self, type: OptionType, value: str) -> Option:
        self.type = OptionType(type)
        self.value = value

    def to_json(self) -> Dict[str, str]:
        return {"type": self.type.value, "value": self.value}

    def __eq__(self, other) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __repr__(self) -> str:
        return f"Option(type={self.type.value!r}, value={self.value!r})"


class OptionStore:
    """Sparse mapping from choice index to its :class:`Option` plus the index
    of the selected choice. An index without entry has no value."""

    def __init__(self, current_index: int = 0):
        self._options: Dict[int, Option] = {}
        self.current_index = current_index

    def get(self, index: int) -> Optional[Option]:
        return self._options.get(index)

    def set(self, index: int, option: Option) -> None:
        self._options[index] = option

    def discard(self, index: int) -> bool:
        return self._options.pop(index, None) is not None

    @property
    def current(self) -> Optional[Option]:
        return self._options.get(self.current_index)

    def __contains__(self, index: int) -> bool:
        return index in self._options

    def __len__(self) -> int:
        return len(self._options)
