from .config import Config, LoggingConfig, SerpApiConfig, Settings

__all__ = ["Config", "LoggingConfig", "SerpApiConfig", "Settings"]
