"""Histogram page - one self-contained histogram module"""
import reflex as rx

from ..components.histogram import histogram_ui
from ..components.layout import page_header, shell
from ..config import get_settings
from ..modules.histogram import histogram_server

histogram_server("hist1", dataset=get_settings().histogram_dataset)


def histogram_page() -> rx.Component:
    return shell(
        page_header("Histogram", f"Distribution of a variable of {get_settings().histogram_dataset}."),
        histogram_ui("hist1"),
        active_route="/histogram",
    )
