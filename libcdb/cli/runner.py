"""
命令执行的公共逻辑
"""
import sys
from typing import Union

import click
from rich.console import Console
from rich.markup import escape

from libcdb.core.client import LibcDbClient
from libcdb.core.errors import LibcDbError
from libcdb.core.query import DumpQuery, LookupQuery
from libcdb.core.request import build_request
from libcdb.core.router import route

console = Console(stderr=True)


def run_query(ctx: click.Context, query: Union[LookupQuery, DumpQuery]) -> None:
    """构造请求、发送并处理响应,出错时以非零状态退出"""
    settings = ctx.obj
    try:
        with LibcDbClient(settings["base_url"], timeout=settings["timeout"],
                          proxies=settings["proxies"], verbose=settings["verbose"]) as client:
            response = client.send(build_request(query))
            route(query, client, response, save_dir=settings["save_dir"], verbose=settings["verbose"])
    except LibcDbError as e:
        console.print(f"[red]Error: {escape(str(e))}")
        sys.exit(1)
