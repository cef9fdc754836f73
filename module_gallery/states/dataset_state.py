"""
Dataset State - selected dataset and its preview, keyed by dataset input id

Picking a dataset refreshes every variable selector bound to it.
"""
import reflex as rx
from reflex.utils import console

from .base_state import BaseState
from ..config import get_settings
from ..modules import select_var
from ..modules.datasets import load_dataset, preview


class DatasetState(BaseState):
    selected: dict[str, str] = {}
    preview_columns: dict[str, list[str]] = {}
    preview_rows: dict[str, list[list[str]]] = {}

    def _load_preview(self, input_id: str, name: str):
        columns, rows = preview(load_dataset(name), rows=get_settings().preview_rows)
        self.preview_columns[input_id] = columns
        self.preview_rows[input_id] = rows

    def _downstream(self, input_id: str) -> list:
        from .select_var_state import SelectVarState

        return [SelectVarState.refresh(b.input_id) for b in select_var.bound_to(input_id)]

    @rx.event
    def mount(self, input_id: str, default: str):
        if input_id in self.selected:
            return self._downstream(input_id)
        return DatasetState.pick(input_id, default)

    @rx.event
    def pick(self, input_id: str, name: str):
        """Select a dataset by name"""
        try:
            self._load_preview(input_id, name)
        except (KeyError, TypeError) as e:
            self._report_error("pick", e)
            return
        self.selected[input_id] = name
        console.debug(f"{input_id} -> {name}")
        return self._downstream(input_id)
