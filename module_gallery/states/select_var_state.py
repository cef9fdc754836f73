"""
Select Var State - variable choices that follow a dataset module
"""
import reflex as rx
from reflex.utils import console

from .base_state import BaseState
from .dataset_state import DatasetState
from ..modules import histogram
from ..modules.datasets import as_frame, load_dataset
from ..modules.select_var import (
    describe_column,
    find_vars,
    get_binding,
    keep_selection,
    select_column,
)
from ..utils.namespace import split_id


class SelectVarState(BaseState):
    choices: dict[str, list[str]] = {}
    selected: dict[str, str] = {}
    summaries: dict[str, str] = {}

    async def _current_frame(self, input_id: str):
        binding = get_binding(input_id)
        datasets = await self.get_state(DatasetState)
        name = datasets.selected.get(binding.dataset_input_id)
        if not name:
            return binding, None
        return binding, as_frame(load_dataset(name))

    def _downstream(self, input_id: str) -> list:
        from .histogram_state import HistogramState

        module_id, _ = split_id(input_id)
        return [HistogramState.redraw(s.module_id) for s in histogram.following(module_id)]

    @rx.event
    async def refresh(self, input_id: str):
        """Recompute choices after the bound dataset changed"""
        try:
            binding, frame = await self._current_frame(input_id)
            choices = find_vars(frame, binding.filter) if frame is not None else []
        except (KeyError, TypeError) as e:
            self._report_error("refresh", e)
            return

        self.choices[input_id] = choices
        current = keep_selection(choices, self.selected.get(input_id))
        self.selected[input_id] = current
        self.summaries[input_id] = describe_column(select_column(frame, current))
        console.debug(f"{input_id}: {len(choices)} choices, selected {current!r}")
        return self._downstream(input_id)

    @rx.event
    async def pick(self, input_id: str, name: str):
        """Select a variable"""
        try:
            _, frame = await self._current_frame(input_id)
        except KeyError as e:
            self._report_error("pick", e)
            return
        self.selected[input_id] = name
        self.summaries[input_id] = describe_column(select_column(frame, name))
        return self._downstream(input_id)
