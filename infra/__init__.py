"""
Infrastructure module exports.

Configuration and bootstrap for all service backends.
"""

from .config import InfraConfig, get_config, TTSBackendType, PresenterBackendType
from .bootstrap import NotifyBootstrap, bootstrap_infrastructure

__all__ = [
    "InfraConfig",
    "get_config",
    "TTSBackendType",
    "PresenterBackendType",
    "NotifyBootstrap",
    "bootstrap_infrastructure",
]
