"""
Core services exports.
"""

from scenereel.core.services.config_manager import load_config

__all__ = [
    'load_config',
]
