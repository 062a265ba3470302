"""ASGI entrypoint for the trail kitchen API."""

from trail_kitchen.api.app import create_app
from trail_kitchen.containers import build_container

app = create_app(build_container())
