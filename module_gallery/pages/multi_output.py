"""
Multi-output page - dataset -> select var -> histogram

The histogram follows whatever the variable selector returns, and the
selector follows the dataset picker.
"""
import reflex as rx

from ..components.dataset import dataset_input
from ..components.histogram import histogram_output
from ..components.layout import page_header, shell
from ..components.select_var import select_var_input
from ..modules.datasets import is_data_frame
from ..modules.histogram import histogram_server
from ..modules.select_var import select_var_server

select_var_server("var", data_id="data")
histogram_server("hist", variable_from="var")


def multi_output_page() -> rx.Component:
    return shell(
        page_header("Multi output", "Three modules passing values to each other."),
        rx.grid(
            rx.vstack(
                dataset_input("data", filter=is_data_frame),
                select_var_input("var"),
                spacing="3",
            ),
            histogram_output("hist"),
            columns="2",
            spacing="5",
            width="100%",
        ),
        active_route="/multi-output",
    )
