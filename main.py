"""ASGI entry point: ``uvicorn main:app``."""

from moptabi.main import create_app

app = create_app()
