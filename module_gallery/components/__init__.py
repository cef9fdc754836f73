"""UI side of the gallery modules"""
from .wizard import wizard_ui, wrap_page, next_page, prev_page
from .radio_extra import radio_extra_ui, gender_ui, radio_extra_value
from .dataset import dataset_input, dataset_table
from .select_var import select_var_input, select_var_summary
from .histogram import histogram_ui, histogram_output

__all__ = [
    "wizard_ui",
    "wrap_page",
    "next_page",
    "prev_page",
    "radio_extra_ui",
    "gender_ui",
    "radio_extra_value",
    "dataset_input",
    "dataset_table",
    "select_var_input",
    "select_var_summary",
    "histogram_ui",
    "histogram_output",
]
