"""
Select-var module - pick one variable from a dataset chosen elsewhere.

The selector is bound to a dataset module by id; its choices are the columns
of that dataset that pass the filter, and they are refreshed whenever the
dataset changes.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

import pandas as pd

from module_gallery.utils.namespace import ns

logger = logging.getLogger(__name__)

DATASET_INPUT = "dataset"
VAR_INPUT = "var"


def is_numeric(column: pd.Series) -> bool:
    return pd.api.types.is_numeric_dtype(column) and not pd.api.types.is_bool_dtype(column)


def find_vars(data: pd.DataFrame, filter: Callable[[pd.Series], bool]) -> List[str]:
    """Names of the columns of `data` for which `filter(column)` is true."""
    if not isinstance(data, pd.DataFrame):
        raise TypeError(f"data must be a DataFrame, got {type(data).__name__}")
    if not callable(filter):
        raise TypeError(f"filter must be callable, got {type(filter).__name__}")
    return [str(name) for name in data.columns if filter(data[name])]


def select_column(data: Optional[pd.DataFrame], name: Optional[str]) -> Optional[pd.Series]:
    if data is None or not name or name not in data.columns:
        return None
    return data[name]


def describe_column(column: Optional[pd.Series]) -> str:
    if column is None:
        return "NULL"
    return column.describe().to_string()


def keep_selection(choices: List[str], current: Optional[str]) -> str:
    """Keep `current` when it is still a valid choice, else fall back to the first one."""
    if current in choices:
        return current
    return choices[0] if choices else ""


@dataclass(frozen=True)
class SelectVarBinding:
    module_id: str
    data_id: str
    filter: Callable[[pd.Series], bool] = is_numeric

    @property
    def input_id(self) -> str:
        return ns(self.module_id, VAR_INPUT)

    @property
    def dataset_input_id(self) -> str:
        return ns(self.data_id, DATASET_INPUT)


_bindings: Dict[str, SelectVarBinding] = {}


def select_var_server(module_id: str, data_id: str, filter=is_numeric) -> SelectVarBinding:
    """
    Bind the variable selector `module_id` to the dataset module `data_id`.

    `data_id` is the reactive source and must be a module id; `filter` is fixed
    for the life of the app and must be a plain callable.
    """
    if not isinstance(data_id, str):
        raise TypeError(f"data_id must be a dataset module id, got {type(data_id).__name__}")
    if not callable(filter):
        raise TypeError(f"filter must be callable, got {type(filter).__name__}")

    binding = SelectVarBinding(module_id, data_id, filter)
    _bindings[binding.input_id] = binding
    logger.info(f"Variable selector {module_id!r} bound to dataset {data_id!r}")
    return binding


def get_binding(input_id: str) -> SelectVarBinding:
    try:
        return _bindings[input_id]
    except KeyError:
        raise KeyError(f"no variable selector registered for {input_id!r}") from None


def bound_to(dataset_input_id: str) -> List[SelectVarBinding]:
    """Variable selectors that follow the given dataset input."""
    return [b for b in _bindings.values() if b.dataset_input_id == dataset_input_id]
