"""Select-var components"""
import reflex as rx

from ..modules.select_var import VAR_INPUT
from ..states.select_var_state import SelectVarState
from ..utils.namespace import ns


def select_var_input(module_id: str) -> rx.Component:
    """Variable picker; choices arrive from the dataset bound by select_var_server()"""
    input_id = ns(module_id, VAR_INPUT)
    return rx.vstack(
        rx.text("Variable", size="2", weight="medium"),
        rx.select(
            SelectVarState.choices[input_id],
            id=input_id,
            value=SelectVarState.selected[input_id],
            on_change=lambda name: SelectVarState.pick(input_id, name),
            placeholder="Variable",
            size="2",
        ),
        on_mount=SelectVarState.refresh(input_id),
        spacing="1",
        align_items="start",
    )


def select_var_summary(module_id: str) -> rx.Component:
    input_id = ns(module_id, VAR_INPUT)
    return rx.el.pre(
        SelectVarState.summaries[input_id],
        class_name="text-xs bg-slate-50 border rounded-md p-3 w-full",
    )
