"""ASGI entrypoint for the carbon market API."""

from carbon_market.api.app import create_app
from carbon_market.containers import build_container

app = create_app(build_container())
