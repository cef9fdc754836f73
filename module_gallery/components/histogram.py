"""Histogram components using recharts"""
import reflex as rx

from ..config import get_settings
from ..modules.datasets import as_frame, load_dataset
from ..modules.histogram import get_source
from ..modules.select_var import find_vars, is_numeric
from ..states.histogram_state import HistogramState


def histogram_chart(module_id: str, height: int = 300) -> rx.Component:
    """Bar chart of HistogramState.bars[module_id]"""
    return rx.vstack(
        rx.heading(HistogramState.titles[module_id], size="3"),
        rx.recharts.bar_chart(
            rx.recharts.bar(
                data_key="count",
                fill="#3b82f6",
            ),
            rx.recharts.x_axis(
                data_key="bin",
                stroke=rx.color("slate", 8),
            ),
            rx.recharts.y_axis(
                stroke=rx.color("slate", 8),
                allow_decimals=False,
            ),
            rx.recharts.graphing_tooltip(),
            data=HistogramState.bars[module_id],
            bar_category_gap=1,
            width="100%",
            height=height,
        ),
        width="100%",
    )


def bins_input(module_id: str) -> rx.Component:
    source = get_source(module_id)
    return rx.vstack(
        rx.text("bins", size="2", weight="medium"),
        rx.input(
            id=source.bins_input_id,
            type="number",
            min=1,
            default_value=str(get_settings().default_bins),
            on_change=lambda raw: HistogramState.set_bins(module_id, raw),
            size="2",
        ),
        spacing="1",
        align_items="start",
    )


def histogram_ui(module_id: str) -> rx.Component:
    """
    Self-contained histogram: variable select, bins and chart

    The module id must be registered with histogram_server(module_id, dataset=...).
    """
    source = get_source(module_id)
    choices = find_vars(as_frame(load_dataset(source.dataset)), is_numeric)

    return rx.vstack(
        rx.vstack(
            rx.text("Variable", size="2", weight="medium"),
            rx.select(
                choices,
                id=source.var_input_id,
                value=HistogramState.variables[module_id],
                on_change=lambda name: HistogramState.set_variable(module_id, name),
                size="2",
            ),
            spacing="1",
            align_items="start",
        ),
        bins_input(module_id),
        rx.box(histogram_chart(module_id), id=source.output_id, width="100%"),
        on_mount=HistogramState.mount(module_id),
        spacing="3",
        width="100%",
    )


def histogram_output(module_id: str) -> rx.Component:
    """Bins and chart for a histogram that follows a select-var module"""
    source = get_source(module_id)
    return rx.vstack(
        bins_input(module_id),
        rx.box(histogram_chart(module_id), id=source.output_id, width="100%"),
        on_mount=HistogramState.mount(module_id),
        spacing="3",
        width="100%",
    )
