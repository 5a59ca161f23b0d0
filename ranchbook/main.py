from ranchbook.config import Settings, get_settings
from ranchbook.core.logging import setup_logging
from ranchbook.factory import create_app

settings: Settings = get_settings()
setup_logging(settings)

app = create_app(settings)


__all__ = ["app"]
