"""
查询数据模型与符号列表解析
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .errors import MalformedInput

# 按序列化顺序排列的可选查询字段
LOOKUP_FIELDS = ("md5", "sha1", "sha256", "buildid", "id")


def parse_symbol_map(raw: str) -> Dict[str, str]:
    """
    解析符号地址列表

    Args:
        raw: 逗号分隔的"符号: 地址"列表 (例如: "strncpy: db0, system: 0x4f4e0")

    Returns:
        Dict[str, str]: 符号名到地址的映射,重复的符号以后出现的为准

    Raises:
        MalformedInput: 某一项缺少":"或符号名/地址为空
    """
    symbols = {}
    for item in raw.split(","):
        name, sep, address = item.partition(":")
        name, address = name.strip(), address.strip()
        if not sep or not name or not address:
            raise MalformedInput(f"Invalid symbol-address pair: '{item}'", raw=item)
        symbols[name] = address
    return symbols


def parse_symbol_list(raw: str) -> List[str]:
    """
    解析逗号分隔的符号名列表,保持原有顺序

    Raises:
        MalformedInput: 存在去除空白后为空的符号名
    """
    symbols = [item.strip() for item in raw.split(",")]
    if not all(symbols):
        raise MalformedInput(f"Empty symbol in list: '{raw}'", raw=raw)
    return symbols


@dataclass(frozen=True)
class LookupQuery:
    """按多个可选属性查找libc,多个属性之间为AND关系"""
    md5: Optional[str] = None
    sha1: Optional[str] = None
    sha256: Optional[str] = None
    buildid: Optional[str] = None
    id: Optional[str] = None
    symbols: Optional[Dict[str, str]] = None
    # 仅控制输出行为,不参与序列化
    download: bool = False

    def to_payload(self) -> Dict[str, Any]:
        """序列化为请求体,未设置的字段直接省略"""
        payload: Dict[str, Any] = {}
        for key in LOOKUP_FIELDS:
            value = getattr(self, key)
            if value is not None:
                payload[key] = value
        if self.symbols is not None:
            payload["symbols"] = dict(self.symbols)
        return payload


@dataclass(frozen=True)
class DumpQuery:
    """导出指定libc ID的符号偏移"""
    id: str
    symbols: List[str] = field(default_factory=list)

    def __post_init__(self):
        if not self.id or not self.id.strip():
            raise MalformedInput("libc ID must not be empty", raw=self.id)
        for symbol in self.symbols:
            if not symbol or not symbol.strip():
                raise MalformedInput(f"Empty symbol in list: {self.symbols!r}", raw=str(self.symbols))

    def to_payload(self) -> Dict[str, Any]:
        """序列化为请求体,ID已经在路径中,不放入请求体"""
        return {"symbols": list(self.symbols)}
