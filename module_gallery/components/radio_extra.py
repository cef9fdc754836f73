"""Radio-extra components - radio buttons with a free-text "other" option"""
from typing import Optional, Union

import reflex as rx

from ..modules.radio_extra import (
    GENDER_CHOICES,
    OTHER,
    OTHER_INPUT,
    PRIMARY_INPUT,
    normalize_choices,
    validate_selected,
)
from ..states.radio_extra_state import RadioExtraState
from ..utils.namespace import ns


def _radio_row(value: str, label) -> rx.Component:
    return rx.hstack(
        rx.radio_group.item(value=value),
        label,
        spacing="2",
        align="center",
    )


def radio_extra_ui(
    module_id: str,
    label: str,
    choices: Union[list, dict],
    selected: Optional[str] = None,
    placeholder: str = "Other",
) -> rx.Component:
    """
    Radio group whose last option is a text box

    Args:
        module_id: Module id
        label: Group label
        choices: Option values, or a mapping of value -> label
        selected: Initially selected value ("other" allowed)
        placeholder: Placeholder of the other text box

    Returns:
        Radio group component; its combined value is RadioExtraState.combined[module_id]
    """
    pairs = normalize_choices(choices)
    selected = validate_selected(pairs, selected)

    other = rx.input(
        id=ns(module_id, OTHER_INPUT),
        placeholder=placeholder,
        value=RadioExtraState.other[module_id],
        on_change=lambda text: RadioExtraState.set_other(module_id, text),
        size="2",
    )

    return rx.vstack(
        rx.text(label, size="2", weight="medium"),
        rx.radio_group.root(
            rx.vstack(
                *[_radio_row(value, rx.text(text, size="2")) for value, text in pairs],
                _radio_row(OTHER, other),
                spacing="2",
            ),
            id=ns(module_id, PRIMARY_INPUT),
            value=RadioExtraState.primary[module_id],
            on_change=lambda value: RadioExtraState.set_primary(module_id, value),
        ),
        on_mount=RadioExtraState.mount(module_id, selected or ""),
        spacing="2",
        align_items="start",
    )


def gender_ui(module_id: str, label: str = "Gender") -> rx.Component:
    return radio_extra_ui(
        module_id,
        label=label,
        choices=GENDER_CHOICES,
        placeholder="Self-described",
        selected="na",
    )


def radio_extra_value(module_id: str) -> rx.Component:
    return rx.text("Selected: ", RadioExtraState.combined[module_id], size="2")
