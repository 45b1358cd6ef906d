from .logging import configure_logging
from .settings_loader import load_settings, build_settings

__all__ = ["build_settings", "configure_logging", "load_settings"]
