"""
根据查询构造请求
"""
from dataclasses import dataclass
from typing import Any, Dict, Union

from .query import DumpQuery, LookupQuery

FIND_PATH = "find"
DUMP_PATH = "libc/{id}"


@dataclass(frozen=True)
class RequestDescriptor:
    """待发送的请求描述"""
    method: str
    path: str
    body: Dict[str, Any]


def build_request(query: Union[LookupQuery, DumpQuery]) -> RequestDescriptor:
    """
    根据查询类型生成请求描述,不修改输入

    Args:
        query: LookupQuery或DumpQuery

    Returns:
        RequestDescriptor: 方法、相对路径和JSON请求体
    """
    if isinstance(query, LookupQuery):
        return RequestDescriptor("POST", FIND_PATH, query.to_payload())
    if isinstance(query, DumpQuery):
        return RequestDescriptor("POST", DUMP_PATH.format(id=query.id), query.to_payload())
    raise TypeError(f"Unsupported query type: {type(query).__name__}")
