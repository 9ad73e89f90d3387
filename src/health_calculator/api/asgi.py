"""ASGI entrypoint for the health calculator API."""

from health_calculator.api.app import create_app
from health_calculator.containers import build_container

app = create_app(build_container())
