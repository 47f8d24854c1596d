from .config import Config
from .paths import ENV_CONFIG_PATH, default_config_path

__all__ = ["Config", "ENV_CONFIG_PATH", "default_config_path"]
