"""Engine settings."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields, replace
from enum import StrEnum
from typing import Any

from sweepdedupe.errors import InvalidSettingError

__all__ = [
    "Action",
    "DedupeSettings",
    "DupeRef",
    "FieldWeight",
    "Marker",
    "SETTING_ALIASES",
]


class Action(StrEnum):
    """What to do with the scores once the sweep has run."""

    STATS = "stats"
    MARK = "mark"
    DELETE = "delete"


class DupeRef(StrEnum):
    """How ``dupeOf`` backreferences identify other records."""

    INDEX = "index"
    RECNUMBER = "recnumber"


class FieldWeight(StrEnum):
    """How per-field scores of a step combine into one score."""

    MINIMUM = "minimum"
    AVERAGE = "average"


# A marker is a literal value or a function of the original record
Marker = Any | Callable[[Mapping[str, Any]], Any]

SETTING_ALIASES: dict[str, str] = {
    "validateStrategy": "validate_strategy",
    "actionField": "action_field",
    "markOk": "mark_ok",
    "markOK": "mark_ok",
    "markDupe": "mark_dupe",
    "dupeRef": "dupe_ref",
    "fieldWeight": "field_weight",
    "markOriginal": "mark_original",
}


def _coerce(enum_cls: type[StrEnum], value: Any, setting: str) -> Any:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        valid = ", ".join(member.value for member in enum_cls)
        raise InvalidSettingError(
            f"Invalid value for {setting}: {value!r}. Valid values: {valid}"
        ) from None


@dataclass
class DedupeSettings:
    """Settings for one deduplication run.

    Attributes
    ----------
    strategy : str
        Catalog name of the strategy to run (default: "clark").
    validate_strategy : bool
        Validate the strategy before running it.
    action : Action
        STATS annotates, MARK labels, DELETE drops duplicates.
    action_field : str
        Output field written by STATS and MARK.
    threshold : float
        Score at or above which a record counts as a duplicate, in [0, 1].
    mark_ok : Marker
        MARK value for non-duplicates, or a function of the original record.
    mark_dupe : Marker
        MARK value for duplicates, or a function of the original record.
    dupe_ref : DupeRef
        Backreference style used in ``dupeOf``.
    field_weight : FieldWeight
        Per-field score combination within a step.
    mark_original : bool
        Give the anchor record of a match the match score too, instead of 0.
    """

    strategy: str = "clark"
    validate_strategy: bool = True
    action: Action = Action.STATS
    action_field: str = "dedupe"
    threshold: float = 0.1
    mark_ok: Marker = "OK"
    mark_dupe: Marker = "DUPE"
    dupe_ref: DupeRef = DupeRef.INDEX
    field_weight: FieldWeight = FieldWeight.MINIMUM
    mark_original: bool = False

    def __post_init__(self) -> None:
        """Coerce enum settings and validate."""
        self.action = _coerce(Action, self.action, "action")
        self.dupe_ref = _coerce(DupeRef, self.dupe_ref, "dupe_ref")
        self.field_weight = _coerce(FieldWeight, self.field_weight, "field_weight")

        try:
            self.threshold = float(self.threshold)
        except (TypeError, ValueError):
            raise InvalidSettingError(f"threshold must be a number, got {self.threshold!r}") from None
        if not 0.0 <= self.threshold <= 1.0:
            raise InvalidSettingError(f"threshold must be in [0, 1], got {self.threshold}")

        if not self.strategy:
            raise InvalidSettingError("strategy must be a non-empty name")

    @classmethod
    def option_names(cls) -> list[str]:
        """Return the canonical setting names."""
        return [f.name for f in fields(cls)]

    @classmethod
    def canonical_name(cls, name: str) -> str:
        """Resolve a setting name or camelCase alias.

        Raises
        ------
        InvalidSettingError
            If ``name`` is not a known setting.
        """
        name = SETTING_ALIASES.get(name, name)
        if name not in cls.option_names():
            raise InvalidSettingError(f"Unknown setting: {name!r}")
        return name

    def merge(self, options: Mapping[str, Any]) -> "DedupeSettings":
        """Return new settings with ``options`` applied on top of these."""
        changes = {self.canonical_name(key): value for key, value in options.items()}
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if callable(value):
                value = getattr(value, "__name__", repr(value))
            elif isinstance(value, StrEnum):
                value = value.value
            data[f.name] = value
        return data
