from .settings import RdUtilsSettings, get_settings, reload_settings

__all__ = ["RdUtilsSettings", "get_settings", "reload_settings"]
