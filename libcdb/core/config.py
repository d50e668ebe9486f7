from pathlib import Path
import yaml
import os
import re
from typing import Any, Dict, Optional
from rich.console import Console
from dataclasses import dataclass, field, asdict

console = Console(stderr=True)

DEFAULT_BASE_URL = "https://libc.rip/api"

@dataclass
class ApiConfig:
    """远程服务配置模型"""
    base_url: str = DEFAULT_BASE_URL
    timeout: int = 30
    proxies: Optional[Dict[str, str]] = None

@dataclass
class DownloadConfig:
    """下载配置模型"""
    save_dir: str = "."

@dataclass
class ConfigModel:
    """配置模型"""
    api: ApiConfig = field(default_factory=ApiConfig)
    download: DownloadConfig = field(default_factory=DownloadConfig)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式"""
        return {
            "api": asdict(self.api),
            "download": asdict(self.download)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ConfigModel':
        """从字典创建配置模型"""
        api = ApiConfig(**data.get("api", {}))
        download = DownloadConfig(**data.get("download", {}))
        return cls(api=api, download=download)

def expand_path(path: str) -> str:
    """展开路径中的 ${VAR} 变量和 ~"""
    if not path:
        return path

    def replace_var(match):
        return os.environ.get(match.group(1), match.group(0))

    path = re.sub(r'\${(\w+)}', replace_var, path)
    return os.path.expanduser(path)

# 各配置项允许的取值类型
FIELD_TYPES = {
    ("api", "base_url"): (str,),
    ("api", "timeout"): (int, float),
    ("api", "proxies"): (dict, type(None)),
    ("download", "save_dir"): (str,),
}

def check_value(section: str, key: str, value: Any) -> None:
    """检查配置项取值类型,不合法时抛出ValueError"""
    expected = FIELD_TYPES[(section, key)]
    if isinstance(value, bool) or not isinstance(value, expected):
        names = " or ".join("None" if t is type(None) else t.__name__ for t in expected)
        raise ValueError(f"Invalid value for {section}.{key}: {value!r} (expected {names})")

class Config:
    """配置管理器"""
    SECTIONS = ("api", "download")

    def __init__(self, config_file: Optional[Path] = None):
        self.config_file = Path(config_file) if config_file else self._get_user_config_path()
        self.config = self._load_config()

    def _get_user_config_path(self) -> Path:
        """获取用户配置文件路径"""
        xdg_config_home = os.environ.get("XDG_CONFIG_HOME", os.path.join(str(Path.home()), ".config"))
        return Path(xdg_config_home) / "libc-db" / "config.yaml"

    def _load_config(self) -> ConfigModel:
        """加载配置,文件不存在时使用默认值"""
        if not self.config_file.exists():
            return ConfigModel()

        try:
            with open(self.config_file, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            model = ConfigModel.from_dict(data)
        except (OSError, yaml.YAMLError, TypeError, AttributeError) as e:
            console.print(f"[yellow]Warning: Failed to load config file: {e}[/yellow]")
            return ConfigModel()

        # 类型不合法的配置项回退为默认值
        defaults = ConfigModel()
        for section, key in FIELD_TYPES:
            try:
                check_value(section, key, getattr(getattr(model, section), key))
            except ValueError as e:
                console.print(f"[yellow]Warning: {e}, using default[/yellow]")
                setattr(getattr(model, section), key, getattr(getattr(defaults, section), key))
        return model

    def save_config(self) -> None:
        """保存配置"""
        os.makedirs(self.config_file.parent, exist_ok=True)
        with open(self.config_file, "w", encoding="utf-8") as f:
            yaml.safe_dump(self.config.to_dict(), f, default_flow_style=False, allow_unicode=True)

    def get_api(self, key: str, default: Any = None) -> Any:
        """获取远程服务配置"""
        return getattr(self.config.api, key, default)

    def get_download(self, key: str, default: Any = None) -> Any:
        """获取下载配置"""
        value = getattr(self.config.download, key, default)
        if key == "save_dir":
            return expand_path(str(value))
        return value

    def set(self, section: str, key: str, value: Any) -> None:
        """
        设置配置项并保存

        Raises:
            KeyError: 未知的配置段落或配置项
            ValueError: 取值类型不合法
        """
        if section not in self.SECTIONS:
            raise KeyError(f"Unknown config section: {section}")
        target = getattr(self.config, section)
        if not hasattr(target, key):
            raise KeyError(f"Unknown config key: {section}.{key}")
        check_value(section, key, value)
        setattr(target, key, value)
        self.save_config()

    def reset(self) -> None:
        """重置为默认配置"""
        self.config = ConfigModel()
        self.save_config()

# 全局配置实例
config = Config()
