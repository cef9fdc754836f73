"""Overview page"""
import reflex as rx

from ..components.layout import MENU, page_header, shell


def example_card(menu: dict) -> rx.Component:
    return rx.link(
        rx.card(
            rx.hstack(
                rx.icon(menu["icon"], size=20),
                rx.vstack(
                    rx.text(menu["name"], weight="bold"),
                    rx.text(menu["desc"], size="1", color="gray"),
                    spacing="0",
                    align_items="start",
                ),
                align="center",
                spacing="3",
            ),
            width="100%",
        ),
        href=menu["path"],
        underline="none",
    )


def index_page() -> rx.Component:
    examples = [m for m in MENU if m.get("path") not in (None, "/")]
    return shell(
        page_header(
            "Module Gallery",
            "Reusable, namespaced UI modules. Each example can be placed on a page more than once.",
        ),
        rx.grid(
            *[example_card(menu) for menu in examples],
            columns="3",
            spacing="3",
            width="100%",
        ),
        active_route="/",
    )
