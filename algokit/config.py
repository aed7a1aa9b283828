"""
algokit/config.py

Configuration loader.
Loads defaults for the algorithms and the command-line front-end from YAML.

Lookup order for the file: explicit path argument, then the ALGOKIT_CONFIG
environment variable, then the algokit.yaml shipped inside the package. When
the default file is absent the built-in defaults are used.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .projectile import GRAVITY
from .segment_intersection import IntersectionMode

DEFAULT_CONFIG_PATH = Path(__file__).parent / "algokit.yaml"
CONFIG_ENV_VAR = "ALGOKIT_CONFIG"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ProjectileConfig:
    """抛体运动参数"""
    gravity: float = GRAVITY  # 单位：m/s^2


@dataclass
class IntersectionConfig:
    """线段相交判定参数"""
    mode: IntersectionMode = IntersectionMode.STRICT


@dataclass
class LoggingConfig:
    """日志参数"""
    level: str = "INFO"


@dataclass
class AlgokitConfig:
    projectile: ProjectileConfig = field(default_factory=ProjectileConfig)
    segment_intersection: IntersectionConfig = field(default_factory=IntersectionConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigurationLoader:
    """配置加载器"""

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """
        初始化配置

        Args:
            config_path: YAML配置文件路径，如果为None则依次尝试环境变量和默认路径
        """
        explicit = config_path is not None
        if config_path is None and os.environ.get(CONFIG_ENV_VAR):
            config_path = os.environ[CONFIG_ENV_VAR]
            explicit = True
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH

        self.config_path = Path(config_path)
        self.raw_config: Dict[str, Any] = {}
        self.config = AlgokitConfig()

        self._load_config(required=explicit)
        self._validate_config()

    def _load_config(self, required: bool) -> None:
        """从YAML文件加载配置"""
        if not self.config_path.exists():
            if required:
                raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
            logging.debug("No configuration file at %s; using defaults", self.config_path)
            return

        with open(self.config_path, 'r', encoding='utf-8') as f:
            self.raw_config = yaml.safe_load(f) or {}

        if not isinstance(self.raw_config, dict):
            raise ValueError(f"Configuration root must be a mapping: {self.config_path}")

        # 抛体运动
        projectile = self.raw_config.get('projectile') or {}
        self.config.projectile = ProjectileConfig(
            gravity=float(projectile.get('gravity', GRAVITY))
        )

        # 线段相交
        intersection = self.raw_config.get('segment_intersection') or {}
        mode = intersection.get('mode', IntersectionMode.STRICT.value)
        try:
            self.config.segment_intersection = IntersectionConfig(mode=IntersectionMode(str(mode).lower()))
        except ValueError:
            raise ValueError(f"Unknown segment_intersection.mode: {mode!r}") from None

        # 日志
        log_config = self.raw_config.get('logging') or {}
        self.config.logging = LoggingConfig(
            level=str(log_config.get('level', 'INFO')).upper()
        )

        logging.debug("Loaded configuration from %s", self.config_path)

    def _validate_config(self) -> None:
        """验证配置的有效性"""
        if self.config.projectile.gravity <= 0:
            raise ValueError(f"projectile.gravity must be positive, got {self.config.projectile.gravity}")

        if self.config.logging.level not in _LOG_LEVELS:
            raise ValueError(f"Unknown logging.level: {self.config.logging.level!r}")

    def summary(self) -> str:
        """返回配置摘要信息"""
        lines = [
            "Configuration Summary",
            "=" * 50,
            f"Source: {self.config_path}",
            f"Gravity: {self.config.projectile.gravity} m/s^2",
            f"Intersection mode: {self.config.segment_intersection.mode}",
            f"Log level: {self.config.logging.level}",
        ]
        return "\n".join(lines)


# ==============================================================================
# Module-level convenience functions
# ==============================================================================

_default_loader: Optional[ConfigurationLoader] = None


def load_config(config_path: Optional[Union[str, Path]] = None) -> ConfigurationLoader:
    """
    加载配置（单例模式）

    Args:
        config_path: 配置文件路径，如果为None则使用默认查找顺序

    Returns:
        ConfigurationLoader对象
    """
    global _default_loader
    if _default_loader is None or config_path is not None:
        _default_loader = ConfigurationLoader(config_path)
    return _default_loader


def get_config() -> AlgokitConfig:
    """获取当前加载的配置，尚未加载时按默认查找顺序加载"""
    return load_config().config
