"""
Configuration manager for sandblast.
YAML file with dot-notation lookups and built-in defaults.
"""
import copy
import logging
import os
import yaml
from typing import Dict, Any, Optional
from pathlib import Path


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "sandblast.yaml"
CONFIG_ENV_VAR = "SANDBLAST_CONFIG"

_DEFAULTS = {
    'extract': {
        'keep_links': False,
        'destructive': False,
        'parser': 'html5lib'
    },
    'fetch': {
        'user_agent': 'Sandblast/0.3',
        'timeout_seconds': 20
    },
    'logging': {
        'level': 'WARNING'
    }
}


class SandblastConfig:
    """Configuration for extraction, fetching and logging."""
    
    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path or os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH))
        self._config = {}
        self.load_config()
    
    def load_config(self) -> None:
        """Load configuration from YAML file, layered over the defaults."""
        self._config = self._get_default_config()
        if not self.config_path.exists():
            return
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Could not load config from {self.config_path}: {e}")
            return
        if not isinstance(loaded, dict):
            logger.warning(f"Ignoring config {self.config_path}: top level is not a mapping")
            return
        _merge(self._config, loaded)
    
    def _get_default_config(self) -> Dict[str, Any]:
        """Return default configuration."""
        return copy.deepcopy(_DEFAULTS)
    
    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation (e.g., 'extract.keep_links')."""
        keys = key.split('.')
        value = self._config
        
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        
        return value
    
    def get_section(self, section: str) -> Dict[str, Any]:
        """Get entire configuration section."""
        return self._config.get(section, {})


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value


# Global configuration instance
_config = None


def get_config() -> SandblastConfig:
    """Get global configuration instance."""
    global _config
    if _config is None:
        _config = SandblastConfig()
    return _config


def set_config(config: Optional[SandblastConfig]) -> None:
    """Replace the global configuration instance (None resets it)."""
    global _config
    _config = config
