"""Dataset page - picker limited to data frames, plus a preview table"""
import reflex as rx

from ..components.dataset import dataset_input, dataset_table
from ..components.layout import page_header, shell
from ..modules.datasets import is_data_frame


def dataset_page() -> rx.Component:
    return shell(
        page_header("Dataset", "Pick one of the bundled example datasets."),
        dataset_input("dataset", filter=is_data_frame),
        dataset_table("dataset"),
        active_route="/dataset",
    )
