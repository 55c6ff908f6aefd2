from .azkaban_config import AzkabanConfig, DEFAULT_CONFIG_PATH, load_config, save_config

__all__ = ["AzkabanConfig", "DEFAULT_CONFIG_PATH", "load_config", "save_config"]
