"""
根据查询类型处理响应
"""
import json
from typing import Callable, List, Union

import click
import requests
from rich.console import Console

from .downloader import CatalogRecord, Downloader
from .errors import ResponseShapeError
from .query import DumpQuery, LookupQuery

console = Console(stderr=True)


def decode_records(body: str) -> List[CatalogRecord]:
    """将查找响应解析为CatalogRecord列表"""
    try:
        data = json.loads(body)
    except ValueError as e:
        raise ResponseShapeError(f"Response is not valid JSON: {e}") from e
    if not isinstance(data, list):
        raise ResponseShapeError(f"Expected a JSON array of libc records, got {type(data).__name__}")
    return [CatalogRecord.from_dict(item) for item in data]


def route(query: Union[LookupQuery, DumpQuery], client, response: requests.Response,
          save_dir: str = ".", echo: Callable[[str], None] = click.echo,
          verbose: bool = False) -> None:
    """
    输出响应或下载匹配的libc

    Args:
        query: 发出请求的查询
        client: 用于后续下载的LibcDbClient
        response: 已确认成功的响应
        save_dir: 下载目录
        echo: 标准输出函数
    """
    if isinstance(query, LookupQuery):
        if query.download:
            records = decode_records(response.text)
            if verbose:
                console.print(f"[cyan]Matched {len(records)} libc(s)")
            Downloader(client, save_dir=save_dir, echo=echo).run(records)
        else:
            echo(response.text.strip())
    elif isinstance(query, DumpQuery):
        echo(response.text.strip())
    else:
        raise TypeError(f"Unsupported query type: {type(query).__name__}")
