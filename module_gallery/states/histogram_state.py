"""
Histogram State - bins, chosen variable and chart data per histogram module

A histogram reads either its own variable from a fixed dataset or the
variable currently chosen in a linked select-var module.
"""
import reflex as rx
from reflex.utils import console

from .base_state import BaseState
from .dataset_state import DatasetState
from .select_var_state import SelectVarState
from ..config import get_settings
from ..modules.datasets import as_frame, load_dataset
from ..modules.histogram import get_source, histogram_bars, parse_bins
from ..modules.select_var import find_vars, get_binding, is_numeric, select_column


class HistogramState(BaseState):
    variables: dict[str, str] = {}
    bins: dict[str, int] = {}
    bars: dict[str, list[dict]] = {}
    titles: dict[str, str] = {}

    async def _series(self, module_id: str):
        """Values and title for a histogram, or (None, "") while nothing is chosen"""
        source = get_source(module_id)

        if source.linked:
            variables = await self.get_state(SelectVarState)
            binding = get_binding(source.var_input_id)
            datasets = await self.get_state(DatasetState)
            dataset = datasets.selected.get(binding.dataset_input_id)
            column = variables.selected.get(source.var_input_id)
        else:
            dataset = source.dataset
            column = self.variables.get(module_id)

        if not dataset or not column:
            return None, ""
        return select_column(as_frame(load_dataset(dataset)), column), column

    @rx.event
    async def mount(self, module_id: str):
        """Apply defaults for a histogram module instance"""
        if module_id not in self.bins:
            self.bins[module_id] = get_settings().default_bins
        try:
            source = get_source(module_id)
            if not source.linked and module_id not in self.variables:
                choices = find_vars(as_frame(load_dataset(source.dataset)), is_numeric)
                self.variables[module_id] = choices[0] if choices else ""
        except (KeyError, TypeError) as e:
            self._report_error("mount", e)
            return
        return HistogramState.redraw(module_id)

    @rx.event
    async def set_variable(self, module_id: str, name: str):
        self.variables[module_id] = name
        return HistogramState.redraw(module_id)

    @rx.event
    async def set_bins(self, module_id: str, raw: str):
        try:
            self.bins[module_id] = parse_bins(raw)
        except (TypeError, ValueError) as e:
            self._report_error("set_bins", e)
            return
        self.error_message = ""
        return HistogramState.redraw(module_id)

    @rx.event
    async def redraw(self, module_id: str):
        """Recompute the bars for one histogram"""
        bins = self.bins.get(module_id, get_settings().default_bins)
        try:
            values, title = await self._series(module_id)
            bars = histogram_bars(values, bins) if values is not None else []
        except (KeyError, TypeError, ValueError) as e:
            self._report_error("redraw", e)
            return
        self.bars[module_id] = bars
        self.titles[module_id] = title
        console.debug(f"Histogram {module_id}: {len(bars)} bars of {title!r}")
