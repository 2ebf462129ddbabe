"""ASGI entrypoint for the nutrition API."""

from fittracker.api.app import create_app
from fittracker.containers import build_container

app = create_app(build_container())
