"""
Base State Layer
- Error reporting and sidebar state shared by every gallery page
- All module states inherit from this
"""
import reflex as rx
from reflex.utils import console


class BaseState(rx.State):
    """Base state with common utilities"""

    error_message: str = ""

    # Sidebar state - shared across all pages
    sidebar_collapsed: bool = False

    @rx.event
    def toggle_sidebar(self):
        """Toggle sidebar collapse state"""
        self.sidebar_collapsed = not self.sidebar_collapsed

    @rx.event
    def clear_error(self):
        self.error_message = ""

    def _report_error(self, where: str, error: Exception):
        """Log a handler failure and surface it on the page"""
        console.error(f"{self.__class__.__name__}.{where} failed: {error}")
        # str() of a KeyError is the repr of its message
        if isinstance(error, KeyError) and error.args:
            self.error_message = str(error.args[0])
        else:
            self.error_message = str(error)

    def __repr__(self):
        return f"<{self.__class__.__name__}(error={bool(self.error_message)})>"
