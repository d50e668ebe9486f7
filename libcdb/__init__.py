"""
libc.rip数据库命令行客户端
"""
from .core.query import LookupQuery, DumpQuery
from .core.client import LibcDbClient
from .core.downloader import Downloader

__version__ = "0.1.0"
__all__ = [
    'LookupQuery',
    'DumpQuery',
    'LibcDbClient',
    'Downloader',
]
