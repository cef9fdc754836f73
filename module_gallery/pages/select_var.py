"""Select-var page - variables follow the dataset picker"""
import reflex as rx

from ..components.dataset import dataset_input
from ..components.layout import page_header, shell
from ..components.select_var import select_var_input, select_var_summary
from ..modules.datasets import is_data_frame
from ..modules.select_var import is_numeric, select_var_server

select_var_server("sv_var", data_id="sv_data", filter=is_numeric)


def select_var_page() -> rx.Component:
    return shell(
        page_header("Select var", "Numeric variables of the chosen dataset."),
        rx.hstack(
            dataset_input("sv_data", filter=is_data_frame),
            select_var_input("sv_var"),
            spacing="4",
        ),
        select_var_summary("sv_var"),
        active_route="/select-var",
    )
