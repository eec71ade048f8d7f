"""ASGI entrypoint: uvicorn faq_chat.api.server:app"""
from ..core.config import Settings
from ..core.logging_config import setup_logging_from_settings
from .main import create_app

settings = Settings.from_config()
setup_logging_from_settings(settings)

app = create_app(settings=settings)
