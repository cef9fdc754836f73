"""Dataset components - dataset picker and table preview"""
from typing import Callable, Optional

import reflex as rx

from ..modules.datasets import list_datasets
from ..modules.select_var import DATASET_INPUT
from ..states.dataset_state import DatasetState
from ..utils.namespace import ns


def dataset_input(module_id: str, filter: Optional[Callable] = None) -> rx.Component:
    """
    Select one of the bundled datasets

    Args:
        module_id: Module id
        filter: Optional predicate on the loaded data, e.g. is_data_frame or is_matrix
    """
    input_id = ns(module_id, DATASET_INPUT)
    names = list_datasets(filter)

    props = {"on_mount": DatasetState.mount(input_id, names[0])} if names else {}
    return rx.vstack(
        rx.text("Pick a dataset", size="2", weight="medium"),
        rx.select(
            names,
            id=input_id,
            value=DatasetState.selected[input_id],
            on_change=lambda name: DatasetState.pick(input_id, name),
            size="2",
        ),
        **props,
        spacing="1",
        align_items="start",
    )


def dataset_table(module_id: str) -> rx.Component:
    """First rows of the dataset picked in `module_id`"""
    input_id = ns(module_id, DATASET_INPUT)
    return rx.table.root(
        rx.table.header(
            rx.table.row(
                rx.foreach(
                    DatasetState.preview_columns[input_id],
                    lambda column: rx.table.column_header_cell(column),
                ),
            ),
        ),
        rx.table.body(
            rx.foreach(
                DatasetState.preview_rows[input_id],
                lambda row: rx.table.row(
                    rx.foreach(row, lambda cell: rx.table.cell(cell)),
                ),
            ),
        ),
        size="1",
        width="100%",
    )
