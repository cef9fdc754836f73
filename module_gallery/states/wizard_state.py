"""
Wizard State - current page of every wizard on the page

Pages are keyed by the wizard's selector id ("<root>/wizard") and stored as
page titles, so any number of wizards can share this state.
"""
import reflex as rx
from reflex.utils import console

from .base_state import BaseState
from ..modules.wizard import get_dispatcher, page_index, page_title
from ..utils.namespace import split_id


class _PageSelector:
    """Selector view over one entry of WizardState.selected_pages"""

    def __init__(self, state: "WizardState", selector_id: str):
        self.state = state
        self.selector_id = selector_id

    def get(self) -> int:
        return page_index(self.state.selected_pages.get(self.selector_id, page_title(1)))

    def set(self, value: int) -> None:
        self.state.selected_pages[self.selector_id] = page_title(value)


class WizardState(BaseState):
    """Wizard navigation state"""

    selected_pages: dict[str, str] = {}

    @rx.event
    def mount_flow(self, selector_id: str):
        """Start a wizard on its first page"""
        if selector_id not in self.selected_pages:
            self.selected_pages[selector_id] = page_title(1)
            console.debug(f"Wizard {selector_id} mounted on {page_title(1)}")

    @rx.event
    def activate(self, control_id: str):
        """Handle a prev/next button click"""
        try:
            root, _ = split_id(control_id)
            dispatcher = get_dispatcher(root)
            page = dispatcher.activate(control_id, _PageSelector(self, dispatcher.selector_id))
        except (KeyError, ValueError) as e:
            self._report_error("activate", e)
            return
        console.debug(f"{control_id} -> {page_title(page)}")
