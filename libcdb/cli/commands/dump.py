"""
符号导出命令
"""
import click
from typing import List, Optional

from libcdb.cli.runner import run_query
from libcdb.core.errors import MalformedInput
from libcdb.core.query import DumpQuery, parse_symbol_list

def _symbol_list(ctx, param, value: Optional[str]) -> List[str]:
    if value is None:
        return []
    try:
        return parse_symbol_list(value)
    except MalformedInput as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param)

@click.command()
@click.argument('libc_id')
@click.option('--symbols', '-s', callback=_symbol_list,
              help="Comma-separated list of symbols to dump (e.g. 'strncat, sprintf')")
@click.pass_context
def dump(ctx, libc_id: str, symbols: List[str]):
    """Dump symbols for a given libc ID (e.g. 'libc6_2.27-3ubuntu1.2_amd64')"""
    try:
        query = DumpQuery(id=libc_id, symbols=symbols)
    except MalformedInput as e:
        raise click.BadParameter(str(e), param_hint="LIBC_ID")
    run_query(ctx, query)
