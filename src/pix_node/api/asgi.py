"""ASGI entrypoint for the Pix Node API."""

from pix_node.api.app import create_app
from pix_node.containers import build_container

app = create_app(build_container())
