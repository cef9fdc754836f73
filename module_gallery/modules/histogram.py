"""
Histogram module - bin a numeric variable for a bar chart.

A histogram either owns its variable (fixed dataset, variable picked inside
the module) or follows a select-var module and titles itself with the
selected variable's name.
"""
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np
import pandas as pd

from module_gallery.utils.namespace import ns

logger = logging.getLogger(__name__)

VAR_INPUT = "var"
BINS_INPUT = "bins"
PLOT_OUTPUT = "hist"


def parse_bins(raw) -> int:
    """Validate a bins value coming from a numeric input."""
    if isinstance(raw, bool):
        raise TypeError("bins must be a number")
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ValueError(f"bins must be a whole number, got {raw!r}") from None
    if not value.is_integer():
        raise ValueError(f"bins must be a whole number, got {raw!r}")
    bins = int(value)
    if bins < 1:
        raise ValueError(f"bins must be at least 1, got {bins}")
    return bins


def histogram_bars(values, bins: int) -> List[Dict]:
    """
    Count `values` into `bins` equal-width bins.

    Returns one dict per bin with "bin" (label), "start", "end" and "count".
    Missing values are dropped; an empty input gives no bars.
    """
    bins = parse_bins(bins)
    series = pd.Series(values)
    if series.empty:
        return []
    if not pd.api.types.is_numeric_dtype(series) or pd.api.types.is_bool_dtype(series):
        raise TypeError(f"histogram needs numeric values, got {series.dtype}")

    clean = series.dropna().to_numpy(dtype=float)
    if clean.size == 0:
        return []

    counts, edges = np.histogram(clean, bins=bins)
    return [
        {
            "bin": f"{start:.3g}-{end:.3g}",
            "start": float(start),
            "end": float(end),
            "count": int(count),
        }
        for count, start, end in zip(counts, edges[:-1], edges[1:])
    ]


@dataclass(frozen=True)
class HistogramSource:
    """Where a histogram module gets its values from."""

    module_id: str
    dataset: Optional[str] = None
    variable_from: Optional[str] = None

    @property
    def linked(self) -> bool:
        return self.variable_from is not None

    @property
    def var_input_id(self) -> str:
        if self.linked:
            return ns(self.variable_from, VAR_INPUT)
        return ns(self.module_id, VAR_INPUT)

    @property
    def bins_input_id(self) -> str:
        return ns(self.module_id, BINS_INPUT)

    @property
    def output_id(self) -> str:
        return ns(self.module_id, PLOT_OUTPUT)


_sources: Dict[str, HistogramSource] = {}


def histogram_server(
    module_id: str,
    dataset: Optional[str] = None,
    variable_from: Optional[str] = None,
) -> HistogramSource:
    """Register a histogram fed by a fixed dataset or by a select-var module."""
    if (dataset is None) == (variable_from is None):
        raise ValueError("histogram_server needs exactly one of dataset or variable_from")
    source = HistogramSource(module_id, dataset=dataset, variable_from=variable_from)
    _sources[module_id] = source
    logger.info(f"Histogram {module_id!r} reads from {dataset or variable_from!r}")
    return source


def get_source(module_id: str) -> HistogramSource:
    try:
        return _sources[module_id]
    except KeyError:
        raise KeyError(f"no histogram registered under {module_id!r}") from None


def following(var_module_id: str) -> List[HistogramSource]:
    """Histograms linked to the given select-var module."""
    return [s for s in _sources.values() if s.variable_from == var_module_id]
