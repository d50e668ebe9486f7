from pathlib import Path
import os
from typing import Any, Dict, List, Optional, Callable
from dataclasses import dataclass
import click

from .errors import MalformedInput, PersistenceFailure, ResponseShapeError

@dataclass
class CatalogRecord:
    """查找结果中的单条libc记录"""
    download_url: str
    id: Optional[str] = None
    md5: Optional[str] = None
    sha1: Optional[str] = None
    sha256: Optional[str] = None
    buildid: Optional[str] = None
    symbols: Optional[Dict[str, str]] = None
    symbols_url: Optional[str] = None
    libs_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> 'CatalogRecord':
        """从响应中的JSON对象创建记录,忽略未知字段"""
        if not isinstance(data, dict):
            raise ResponseShapeError(f"Expected a libc record object, got {type(data).__name__}")
        download_url = data.get("download_url")
        if not isinstance(download_url, str):
            raise ResponseShapeError("Libc record has no 'download_url' string")
        return cls(
            download_url=download_url,
            id=data.get("id"),
            md5=data.get("md5"),
            sha1=data.get("sha1"),
            sha256=data.get("sha256"),
            buildid=data.get("buildid"),
            symbols=data.get("symbols"),
            symbols_url=data.get("symbols_url"),
            libs_url=data.get("libs_url"),
        )

    @property
    def filename(self) -> str:
        """下载URL的最后一段路径"""
        head, sep, tail = self.download_url.rpartition("/")
        if not sep or tail in ("", ".", ".."):
            raise MalformedInput(f"Cannot derive a file name from URL: '{self.download_url}'",
                                 raw=self.download_url)
        return tail

class Downloader:
    """顺序下载管理器,任何一个文件失败都会中止整个批次"""
    def __init__(self, client, save_dir: str = ".", echo: Callable[[str], None] = click.echo):
        self.client = client
        self.save_dir = save_dir
        self.echo = echo

    def _save(self, path: Path, data: bytes) -> None:
        try:
            os.makedirs(path.parent, exist_ok=True)
            with open(path, 'wb') as f:
                f.write(data)
        except OSError as e:
            raise PersistenceFailure(f"Failed to write {path}: {e}") from e

    def run(self, records: List[CatalogRecord]) -> List[Path]:
        """
        依次下载所有记录对应的libc

        Args:
            records: 查找结果

        Returns:
            List[Path]: 已写入的文件路径
        """
        saved = []
        for record in records:
            outfile = record.filename
            self.echo(f"{record.download_url} -> {outfile}")
            data = self.client.fetch(record.download_url)
            path = Path(self.save_dir) / outfile
            self._save(path, data)
            saved.append(path)
        return saved
