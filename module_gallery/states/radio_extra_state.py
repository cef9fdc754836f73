"""
Radio Extra State - radio + "other" text pairs, keyed by module id
"""
import reflex as rx
from reflex.utils import console

from .base_state import BaseState
from ..modules.radio_extra import OTHER, resolve_value


class RadioExtraState(BaseState):
    primary: dict[str, str] = {}
    other: dict[str, str] = {}
    combined: dict[str, str] = {}

    def _refresh(self, module_id: str):
        self.combined[module_id] = resolve_value(
            self.primary.get(module_id),
            self.other.get(module_id, ""),
        )

    @rx.event
    def mount(self, module_id: str, selected: str):
        """Apply the initial selection once per module instance"""
        if module_id not in self.primary:
            self.primary[module_id] = selected
            self.other[module_id] = ""
            self._refresh(module_id)

    @rx.event
    def set_primary(self, module_id: str, value: str):
        self.primary[module_id] = value
        self._refresh(module_id)

    @rx.event
    def set_other(self, module_id: str, text: str):
        """Typing in the other box selects the other option"""
        self.other[module_id] = text
        if self.primary.get(module_id) != OTHER:
            console.debug(f"{module_id}: switching to {OTHER!r}")
            self.primary[module_id] = OTHER
        self._refresh(module_id)
