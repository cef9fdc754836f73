"""
Wizard pages

/wizard shows two independent wizards side by side; /wizard/demographics is a
small form whose last page submits.
"""
import reflex as rx

from ..components.layout import page_header, shell
from ..components.wizard import wizard_ui
from ..modules.wizard import wizard_server
from ..states.demographics_state import DemographicsState

TEXT_PAGES = [
    "Welcome! This wizard has three pages.",
    "Use prev and next to move between pages.",
    "This is the last page.",
]
SHORT_PAGES = ["First of two pages.", "Second of two pages."]

wizard_server("whiz", len(TEXT_PAGES))
wizard_server("whiz_short", len(SHORT_PAGES))
wizard_server("demographics", 3)


def wizard_page() -> rx.Component:
    return shell(
        page_header(
            "Wizard",
            "Navigation buttons and handlers are generated from the number of pages.",
        ),
        rx.grid(
            wizard_ui("whiz", [rx.text(text) for text in TEXT_PAGES]),
            wizard_ui("whiz_short", [rx.text(text) for text in SHORT_PAGES]),
            columns="2",
            spacing="4",
            width="100%",
        ),
        active_route="/wizard",
    )


def demographics_page() -> rx.Component:
    page1 = rx.vstack(
        rx.text("What's your name?", size="2", weight="medium"),
        rx.input(
            id="name",
            value=DemographicsState.name,
            on_change=DemographicsState.update_name,
        ),
        align_items="start",
    )
    page2 = rx.vstack(
        rx.text("How old are you?", size="2", weight="medium"),
        rx.input(
            id="age",
            type="number",
            value=DemographicsState.age,
            on_change=DemographicsState.update_age,
        ),
        align_items="start",
    )
    page3 = rx.vstack(
        rx.text("Is this data correct?"),
        rx.el.pre(DemographicsState.info, id="info"),
        align_items="start",
    )

    return shell(
        page_header("Demographics", "A wizard whose last page submits the form."),
        wizard_ui(
            "demographics",
            [page1, page2, page3],
            done_button=rx.button("Submit", id="done", on_click=DemographicsState.submit),
        ),
        rx.dialog.root(
            rx.dialog.content(
                rx.dialog.title("Thank you!"),
                rx.dialog.close(
                    rx.button("Close", variant="soft", on_click=DemographicsState.close_dialog),
                ),
            ),
            open=DemographicsState.submitted,
        ),
        active_route="/wizard/demographics",
    )
