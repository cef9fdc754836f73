import reflex as rx

# Import BaseState for sidebar toggle and error display (shared across all pages)
from ..states.base_state import BaseState as B

MENU = [
    {"type": "header", "name": "Modules"},
    {"icon": "layout-dashboard", "name": "Overview", "path": "/", "desc": "All examples"},
    {"icon": "list-checks", "name": "Radio extra", "path": "/radio-extra", "desc": "Radio + other text"},
    {"icon": "database", "name": "Dataset", "path": "/dataset", "desc": "Dataset picker"},
    {"icon": "table", "name": "Select var", "path": "/select-var", "desc": "Variable selector"},
    {"icon": "chart-no-axes-column", "name": "Histogram", "path": "/histogram", "desc": "Input + output module"},
    {"icon": "workflow", "name": "Multi output", "path": "/multi-output", "desc": "Modules wired together"},
    {"type": "divider"},
    {"type": "header", "name": "Wizards"},
    {"icon": "wand-sparkles", "name": "Wizard", "path": "/wizard", "desc": "Generated navigation"},
    {"icon": "user", "name": "Demographics", "path": "/wizard/demographics", "desc": "Form with submit"},
]


def render_menu_item(menu: dict, active: str) -> rx.Component:
    """Menu item (divider, group header or link)"""
    if menu.get("type") == "divider":
        return rx.divider(margin_top="3", margin_bottom="3")

    if menu.get("type") == "header":
        return rx.text(
            menu["name"],
            size="1",
            weight="bold",
            color="#6b7280",
            class_name="px-3 py-2 uppercase tracking-wide",
        )

    is_active = active == menu["path"]

    return rx.link(
        rx.flex(
            rx.icon(
                menu["icon"],
                size=20,
                color="#3b82f6" if is_active else "#6b7280",
            ),
            rx.text(
                menu["name"],
                size="3",
                weight="bold" if is_active else "medium",
                color="#3b82f6" if is_active else "#111827",
            ),
            align="center",
            gap="3",
        ),
        href=menu["path"],
        underline="none",
        width="100%",
        padding="0.75rem",
        border_radius="0.5rem",
        border_left=f"4px solid {'#3b82f6' if is_active else 'transparent'}",
        background="#eff6ff" if is_active else "transparent",
        _hover={"background": "#f3f4f6" if not is_active else "#eff6ff"},
        transition="all 0.2s ease",
    )


def collapsed_sidebar() -> rx.Component:
    """Collapsed sidebar (icons only)"""
    menu_items = [m for m in MENU if m.get("type") not in ["divider", "header"]]

    return rx.box(
        rx.button(
            rx.icon("panel-left-open", size=20, color="#6b7280"),
            variant="ghost",
            size="2",
            on_click=B.toggle_sidebar,
        ),
        rx.vstack(
            *[
                rx.link(
                    rx.icon(menu["icon"], size=18, color="#6b7280"),
                    href=menu["path"],
                    underline="none",
                )
                for menu in menu_items
            ],
            spacing="4",
            align="center",
            padding_top="1rem",
        ),
        height="100vh",
        width="64px",
        flex_shrink="0",
        padding="1rem 0.5rem",
        border_right="1px solid #e5e7eb",
        position="sticky",
        top="0",
        class_name="hidden lg:flex flex-col items-center",
    )


def sidebar(active: str = "/") -> rx.Component:
    return rx.box(
        rx.flex(
            rx.button(
                rx.icon("panel-left-close", size=20, color="#6b7280"),
                variant="ghost",
                size="2",
                on_click=B.toggle_sidebar,
            ),
            rx.heading("Module Gallery", size="4"),
            align="center",
            gap="3",
            padding_bottom="1rem",
            border_bottom="1px solid #e5e7eb",
            width="100%",
        ),
        rx.vstack(
            *[render_menu_item(menu, active) for menu in MENU],
            spacing="2",
            align="stretch",
            padding_top="1.5rem",
        ),
        height="100vh",
        width="240px",
        flex_shrink="0",
        padding="1.5rem",
        border_right="1px solid #e5e7eb",
        position="sticky",
        top="0",
        overflow_y="auto",
        class_name="hidden lg:flex flex-col",
    )


def error_callout() -> rx.Component:
    return rx.cond(
        B.error_message,
        rx.callout.root(
            rx.callout.icon(rx.icon("triangle-alert")),
            rx.callout.text(B.error_message),
            color_scheme="red",
            size="1",
            on_click=B.clear_error,
        ),
        rx.box(),
    )


def page_header(title: str, description: str) -> rx.Component:
    return rx.vstack(
        rx.heading(title, size="6"),
        rx.text(description, size="2", color="gray"),
        spacing="1",
        align_items="start",
    )


def shell(*children: rx.Component, on_mount=None, active_route: str = "/") -> rx.Component:
    props = {"on_mount": on_mount} if on_mount is not None else {}
    return rx.el.div(
        rx.cond(
            B.sidebar_collapsed,
            collapsed_sidebar(),
            sidebar(active_route),
        ),
        rx.el.div(
            rx.container(
                rx.vstack(
                    error_callout(),
                    *children,
                    spacing="5",
                    width="100%",
                ),
                size="3",
                padding_y="6",
            ),
            class_name="flex-1 min-h-screen bg-white",
        ),
        class_name="w-full min-h-screen bg-white flex",
        **props,
    )
