import sys
import traceback

import reflex as rx

from module_gallery.config import load_env
from module_gallery.utils.logger import get_logger, setup_logging

load_env()
setup_logging()
logger = get_logger(__name__)


def handle_exception(exc_type, exc_value, exc_traceback):
    """Log all uncaught exceptions"""
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    logger.error("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))
    logger.error(f"Traceback:\n{''.join(traceback.format_tb(exc_traceback))}")


sys.excepthook = handle_exception

logger.info("=" * 60)
logger.info("STARTING MODULE GALLERY")
logger.info("=" * 60)

# Page modules register their module servers on import
from .pages.index import index_page
from .pages.radio_extra import radio_extra_page
from .pages.dataset import dataset_page
from .pages.select_var import select_var_page
from .pages.histogram import histogram_page
from .pages.multi_output import multi_output_page
from .pages.wizard import wizard_page, demographics_page

app = rx.App(
    theme=rx.theme(appearance="light", accent_color="blue"),
)

app.add_page(index_page, route="/", title="Module Gallery")
app.add_page(radio_extra_page, route="/radio-extra", title="Radio extra")
app.add_page(dataset_page, route="/dataset", title="Dataset")
app.add_page(select_var_page, route="/select-var", title="Select var")
app.add_page(histogram_page, route="/histogram", title="Histogram")
app.add_page(multi_output_page, route="/multi-output", title="Multi output")
app.add_page(wizard_page, route="/wizard", title="Wizard")
app.add_page(demographics_page, route="/wizard/demographics", title="Demographics")
