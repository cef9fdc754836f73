import reflex as rx
from reflex.constants import LogLevel

config = rx.Config(
    app_name="module_gallery",
    loglevel=LogLevel.INFO,
    plugins=[
        rx.plugins.SitemapPlugin(),
        rx.plugins.TailwindV3Plugin(),
    ],
    frontend_port=3000,
    backend_port=8000,
)
