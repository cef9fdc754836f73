"""
Framework-free logic behind the gallery's UI modules.
Each submodule pairs with a Reflex state and component of the same name.
"""

from .wizard import (
    Page,
    PageRegistry,
    PageSlot,
    SelectorCell,
    Transition,
    TransitionDispatcher,
    build_transitions,
    get_dispatcher,
    unregister,
    wizard_server,
)
from .datasets import is_data_frame, is_matrix, list_datasets, load_dataset
from .select_var import find_vars, is_numeric, select_var_server
from .histogram import histogram_bars, histogram_server
from .radio_extra import GENDER_CHOICES, normalize_choices, resolve_value

__all__ = [
    "Page",
    "PageRegistry",
    "PageSlot",
    "SelectorCell",
    "Transition",
    "TransitionDispatcher",
    "build_transitions",
    "get_dispatcher",
    "unregister",
    "wizard_server",
    "is_data_frame",
    "is_matrix",
    "list_datasets",
    "load_dataset",
    "find_vars",
    "is_numeric",
    "select_var_server",
    "histogram_bars",
    "histogram_server",
    "GENDER_CHOICES",
    "normalize_choices",
    "resolve_value",
]
