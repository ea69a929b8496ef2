"""Configuration module for application settings."""

from .settings import Settings, get_settings
from .logger import ROOT_LOGGER, bind_request, current_request, get_logger, reset_request, setup_logger

__all__ = [
    "Settings",
    "get_settings",
    "ROOT_LOGGER",
    "bind_request",
    "current_request",
    "get_logger",
    "reset_request",
    "setup_logger",
]
