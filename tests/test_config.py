"""
test_config.py

测试 YAML 配置加载与校验
"""

from pathlib import Path

import pytest

from algokit import config as config_module
from algokit.config import (
    AlgokitConfig,
    ConfigurationLoader,
    DEFAULT_CONFIG_PATH,
    get_config,
    load_config,
)
from algokit.segment_intersection import IntersectionMode


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """每个测试前清空单例与环境变量"""
    monkeypatch.setattr(config_module, "_default_loader", None)
    monkeypatch.delenv("ALGOKIT_CONFIG", raising=False)


def _write(tmp_path, text):
    path = tmp_path / "algokit.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestDefaultConfiguration:
    """测试默认配置文件"""

    def test_default_file_exists(self):
        assert DEFAULT_CONFIG_PATH.exists()

    def test_default_file_inside_package(self):
        """测试默认配置随包安装，而不是依赖源码目录结构"""
        package_dir = Path(config_module.__file__).parent
        assert DEFAULT_CONFIG_PATH.parent == package_dir
        assert DEFAULT_CONFIG_PATH.name == "algokit.yaml"

    def test_default_values(self):
        cfg = load_config().config
        assert isinstance(cfg, AlgokitConfig)
        assert cfg.projectile.gravity == 9.81
        assert cfg.segment_intersection.mode == IntersectionMode.STRICT
        assert cfg.logging.level == "INFO"

    def test_singleton(self):
        """测试重复加载返回同一对象"""
        assert load_config() is load_config()
        assert get_config() is load_config().config

    def test_summary(self):
        summary = load_config().summary()
        assert "Gravity: 9.81" in summary
        assert "Intersection mode: strict" in summary


class TestCustomConfiguration:
    """测试自定义配置文件"""

    def test_custom_values(self, tmp_path):
        path = _write(tmp_path, (
            "projectile:\n"
            "  gravity: 1.62\n"
            "segment_intersection:\n"
            "  mode: LEGACY\n"
            "logging:\n"
            "  level: debug\n"
        ))
        cfg = ConfigurationLoader(path).config
        assert cfg.projectile.gravity == 1.62
        assert cfg.segment_intersection.mode == IntersectionMode.LEGACY
        assert cfg.logging.level == "DEBUG"

    def test_partial_file_uses_defaults(self, tmp_path):
        """测试缺省字段使用默认值"""
        path = _write(tmp_path, "segment_intersection:\n  mode: legacy\n")
        cfg = ConfigurationLoader(path).config
        assert cfg.projectile.gravity == 9.81
        assert cfg.segment_intersection.mode == IntersectionMode.LEGACY

    def test_empty_file(self, tmp_path):
        cfg = ConfigurationLoader(_write(tmp_path, "")).config
        assert cfg == AlgokitConfig()

    def test_env_variable(self, tmp_path, monkeypatch):
        """测试通过环境变量指定配置文件"""
        path = _write(tmp_path, "projectile:\n  gravity: 3.71\n")
        monkeypatch.setenv("ALGOKIT_CONFIG", str(path))
        assert get_config().projectile.gravity == 3.71

    def test_explicit_path_replaces_singleton(self, tmp_path):
        first = load_config()
        second = load_config(_write(tmp_path, "projectile:\n  gravity: 5.0\n"))
        assert second is not first
        assert get_config().projectile.gravity == 5.0


class TestInvalidConfiguration:
    """测试非法配置"""

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigurationLoader(tmp_path / "missing.yaml")

    def test_missing_default_file(self, tmp_path, monkeypatch):
        """测试默认配置文件缺失时使用内置默认值"""
        monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATH", tmp_path / "missing.yaml")
        assert ConfigurationLoader().config == AlgokitConfig()

    def test_negative_gravity(self, tmp_path):
        with pytest.raises(ValueError, match="gravity"):
            ConfigurationLoader(_write(tmp_path, "projectile:\n  gravity: -9.81\n"))

    def test_unknown_mode(self, tmp_path):
        with pytest.raises(ValueError, match="mode"):
            ConfigurationLoader(_write(tmp_path, "segment_intersection:\n  mode: fuzzy\n"))

    def test_unknown_log_level(self, tmp_path):
        with pytest.raises(ValueError, match="logging.level"):
            ConfigurationLoader(_write(tmp_path, "logging:\n  level: LOUD\n"))

    def test_root_not_mapping(self, tmp_path):
        with pytest.raises(ValueError):
            ConfigurationLoader(_write(tmp_path, "- 1\n- 2\n"))
