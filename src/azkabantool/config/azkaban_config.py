from dataclasses import dataclass, field, asdict
from typing import Optional
from urllib.parse import urlparse
from dacite import from_dict, Config
from dacite.exceptions import DaciteError
import yaml
import os
from pathlib import Path
from loguru import logger

from azkabantool.errors import ConfigError

DEFAULT_CONFIG_PATH = "./.azkabantool/config.yaml"


@dataclass
class AzkabanConfig:
    server_address: str = field(default_factory=lambda: os.getenv("AZKABAN_SERVER", "http://localhost:8081"))
    username: str = field(default_factory=lambda: os.getenv("AZKABAN_USERNAME", "azkaban"))
    password: str = field(default_factory=lambda: os.getenv("AZKABAN_PASSWORD", "azkaban"))
    failure_email: str = field(default_factory=lambda: os.getenv("AZKABAN_FAILURE_EMAIL", ""))
    timeout: float = 30.0
    verify_ssl: bool = True
    template_dir: Optional[str] = None

    def __post_init__(self):
        parsed = urlparse(self.server_address)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigError(f"server_address must be an http(s) URL, got: {self.server_address}")
        self.server_address = self.server_address.rstrip("/")
        if self.timeout <= 0:
            raise ConfigError(f"timeout must be positive, got: {self.timeout}")

    def url(self, endpoint: str) -> str:
        return f"{self.server_address}/{endpoint.lstrip('/')}"

    @classmethod
    def from_yaml(cls, path: str) -> "AzkabanConfig":
        if not path.endswith(".yaml"):
            raise ConfigError(f"path must end with .yaml: {path}")
        if not Path(path).exists():
            logger.debug(f"Config file not found at {path}, using defaults")
            return cls()

        try:
            with open(path, "r") as f:
                raw_dict = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file {path}", detail=str(e))

        if not isinstance(raw_dict, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")

        # ints are accepted for the timeout
        if isinstance(raw_dict.get("timeout"), int):
            raw_dict["timeout"] = float(raw_dict["timeout"])

        try:
            config = from_dict(data_class=cls, data=raw_dict, config=Config(strict=True))
        except DaciteError as e:
            raise ConfigError(f"Invalid config file {path}", detail=str(e))
        logger.debug(f"Loaded config from {path}")
        return config

    def to_yaml(self, path: Optional[str] = DEFAULT_CONFIG_PATH):
        if not path:
            logger.error(f"path is not provided, using default path: {DEFAULT_CONFIG_PATH}")
            path = DEFAULT_CONFIG_PATH

        if not path.endswith(".yaml"):
            raise ConfigError(f"path must end with .yaml: {path}")

        with open(path, "w") as f:
            yaml.safe_dump(asdict(self), f, sort_keys=False)

        logger.info(f"Saved config to {path}")

def load_config(path: str) -> "AzkabanConfig":
    return AzkabanConfig.from_yaml(path)

def save_config(config: "AzkabanConfig", path: str):
    config.to_yaml(path)
