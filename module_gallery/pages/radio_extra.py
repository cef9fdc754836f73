"""Radio-extra page - a generic instance and a gender instance on one page"""
import reflex as rx

from ..components.layout import page_header, shell
from ..components.radio_extra import gender_ui, radio_extra_ui, radio_extra_value


def radio_extra_page() -> rx.Component:
    return shell(
        page_header(
            "Radio extra",
            "Radio buttons with a free-text option; typing selects \"other\".",
        ),
        rx.card(
            rx.vstack(
                radio_extra_ui(
                    "extra",
                    label="Favourite colour",
                    choices=["red", "green", "blue"],
                ),
                radio_extra_value("extra"),
                spacing="3",
            ),
            width="100%",
        ),
        rx.card(
            rx.vstack(
                gender_ui("gender"),
                radio_extra_value("gender"),
                spacing="3",
            ),
            width="100%",
        ),
        active_route="/radio-extra",
    )
