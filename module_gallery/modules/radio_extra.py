"""
Radio-extra module - a small set of radio options plus a free-text "other".

From the outside the pair behaves as a single input: its value is the chosen
option, or the text typed into the other box when "other" is chosen.
"""
from collections.abc import Mapping
from typing import List, Optional, Tuple

OTHER = "other"
PRIMARY_INPUT = "primary"
OTHER_INPUT = "other"

GENDER_CHOICES = {
    "male": "Male",
    "female": "Female",
    "na": "Prefer not to say",
}


def normalize_choices(choices) -> List[Tuple[str, str]]:
    """
    Turn choices into (value, label) pairs.

    A mapping is read as value -> label; a plain list uses each entry as both.
    """
    if isinstance(choices, Mapping):
        pairs = [(str(value), str(label)) for value, label in choices.items()]
    elif isinstance(choices, (list, tuple)):
        pairs = [(str(choice), str(choice)) for choice in choices]
    else:
        raise TypeError(f"choices must be a list or mapping, got {type(choices).__name__}")

    if not pairs:
        raise ValueError("choices must not be empty")
    values = [value for value, _ in pairs]
    if OTHER in values:
        raise ValueError(f"{OTHER!r} is reserved for the free-text option")
    if len(set(values)) != len(values):
        raise ValueError(f"duplicate choice values: {values}")
    return pairs


def validate_selected(pairs: List[Tuple[str, str]], selected: Optional[str]) -> Optional[str]:
    if selected is None:
        return None
    allowed = [value for value, _ in pairs] + [OTHER]
    if selected not in allowed:
        raise ValueError(f"selected {selected!r} is not one of {allowed}")
    return selected


def resolve_value(primary: Optional[str], other: str = "") -> str:
    """The combined value of the control."""
    if primary == OTHER:
        return other or ""
    return primary or ""
