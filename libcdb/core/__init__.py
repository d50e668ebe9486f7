"""
libc数据库客户端的核心功能模块
"""
from .errors import (
    LibcDbError,
    MalformedInput,
    TransportFailure,
    RemoteRejection,
    ResponseShapeError,
    PersistenceFailure,
)
from .query import LookupQuery, DumpQuery, parse_symbol_map, parse_symbol_list
from .request import RequestDescriptor, build_request
from .client import LibcDbClient
from .downloader import CatalogRecord, Downloader
from .router import route, decode_records

__all__ = [
    # 错误类型
    'LibcDbError',
    'MalformedInput',
    'TransportFailure',
    'RemoteRejection',
    'ResponseShapeError',
    'PersistenceFailure',

    # 查询与请求
    'LookupQuery',
    'DumpQuery',
    'parse_symbol_map',
    'parse_symbol_list',
    'RequestDescriptor',
    'build_request',

    # 响应处理
    'LibcDbClient',
    'CatalogRecord',
    'Downloader',
    'route',
    'decode_records',
]
