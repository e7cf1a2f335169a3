from .settings import settings_bp
from .system import system_bp

__all__ = ["settings_bp", "system_bp"]
