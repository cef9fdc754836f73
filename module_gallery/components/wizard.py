"""
Wizard components

wizard_ui() renders one page at a time. Each page gets a "prev" button (all
pages but the first) and a "next" button (all but the last); the last page
carries the caller's done control instead. Button ids are
"<root>/go_<from>_<to>" and the current page lives under "<root>/wizard".
"""
from typing import Optional, Sequence

import reflex as rx
from reflex.utils import console

from ..modules.wizard import PageRegistry, SELECTOR_NAME, Transition
from ..states.wizard_state import WizardState
from ..utils.namespace import ns


def transition_button(root: str, transition: Transition) -> rx.Component:
    control_id = transition.control_id(root)
    return rx.button(
        transition.direction,
        id=control_id,
        on_click=WizardState.activate(control_id),
        size="2",
        variant="soft" if transition.direction == "prev" else "solid",
        color_scheme="gray" if transition.direction == "prev" else "purple",
    )


def next_page(root: str, i: int) -> rx.Component:
    return transition_button(root, Transition.forward(i))


def prev_page(root: str, i: int) -> rx.Component:
    return transition_button(root, Transition.backward(i))


def wrap_page(
    title: str,
    page,
    button_left: Optional[rx.Component] = None,
    button_right: Optional[rx.Component] = None,
) -> rx.Component:
    """One wizard page: the content on top, navigation below"""
    return rx.card(
        rx.vstack(
            rx.box(page, width="100%"),
            rx.hstack(
                button_left if button_left is not None else rx.box(),
                rx.spacer(),
                button_right if button_right is not None else rx.box(),
                width="100%",
                align_items="center",
            ),
            spacing="4",
            width="100%",
        ),
        custom_attrs={"data-page": title},
        size="2",
        width="100%",
    )


def wizard_ui(root: str, pages: Sequence, done_button: Optional[rx.Component] = None) -> rx.Component:
    """
    Build the wizard UI for `pages`.

    Args:
        root: Module id; the matching server is wizard_server(root, len(pages))
        pages: Page contents, in order
        done_button: Control shown on the last page in place of "next"

    Returns:
        Component showing the current page of the wizard
    """
    registry = PageRegistry(pages, done=done_button)
    selector_id = ns(root, SELECTOR_NAME)
    console.debug(f"wizard_ui({root!r}) with {len(registry)} pages")

    wrapped = [
        (
            slot.page.title,
            wrap_page(
                slot.page.title,
                slot.page.content,
                transition_button(root, slot.previous) if slot.previous else None,
                transition_button(root, slot.next) if slot.next else slot.done,
            ),
        )
        for slot in registry.slots()
    ]

    if not wrapped:
        body = rx.fragment()
    elif len(wrapped) == 1:
        body = wrapped[0][1]
    else:
        # page_1 is the fallback so the first page shows before the flow mounts
        body = rx.match(
            WizardState.selected_pages[selector_id],
            *wrapped[1:],
            wrapped[0][1],
        )

    return rx.box(
        body,
        id=selector_id,
        on_mount=WizardState.mount_flow(selector_id),
        width="100%",
    )
