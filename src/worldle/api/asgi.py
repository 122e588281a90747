"""ASGI entrypoint for the game API."""

from worldle.api.app import create_app
from worldle.config import Settings
from worldle.containers import build_container

settings = Settings()
app = create_app(build_container(settings))
