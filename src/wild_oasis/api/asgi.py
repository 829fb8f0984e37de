"""ASGI entrypoint for The Wild Oasis API."""

from wild_oasis.api.app import create_app
from wild_oasis.containers import build_container

app = create_app(build_container())
