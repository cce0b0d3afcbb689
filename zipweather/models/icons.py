"""Weather code to icon reference table."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from zipweather.models.errors import UnknownConditionCode

# Clear through overcast have a distinct night icon.
NIGHT_VARIANT_CODES = frozenset({0, 1, 2, 3})
NIGHT_SUFFIX = "night"


@dataclass(frozen=True)
class IconTable:
    """Immutable mapping of stringified weather code to icon reference.

    Night variants are keyed as "<code>night".
    """

    entries: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __len__(self) -> int:
        return len(self.entries)

    def lookup(self, key: str) -> str:
        try:
            return self.entries[key]
        except KeyError:
            raise UnknownConditionCode(key) from None

    def select(self, condition_code: int, is_day: int = 1) -> str:
        """Pick the icon for a code, using the night variant where one exists."""
        if is_day == 0 and condition_code in NIGHT_VARIANT_CODES:
            return self.lookup(f"{condition_code}{NIGHT_SUFFIX}")
        return self.lookup(str(condition_code))


def load_icon_table(path: str | Path) -> IconTable:
    """Load an icon table from a JSON object of string keys to string refs."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"Icon table {path} must be a JSON object")
    for key, value in raw.items():
        if not isinstance(value, str):
            raise ValueError(f"Icon table {path}: entry {key!r} is not a string")

    return IconTable(raw)
