"""
libc查找命令
"""
import click
from typing import Dict, Optional

from libcdb.cli.runner import run_query
from libcdb.core.errors import MalformedInput
from libcdb.core.query import LookupQuery, parse_symbol_map

def _symbol_map(ctx, param, value: Optional[str]) -> Optional[Dict[str, str]]:
    if value is None:
        return None
    try:
        return parse_symbol_map(value)
    except MalformedInput as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param)

@click.command()
@click.option('--md5', help='Lookup by md5 hash')
@click.option('--sha1', help='Lookup by sha1 hash')
@click.option('--sha256', help='Lookup by sha256 hash')
@click.option('--buildid', help='Lookup by Build ID')
@click.option('--id', 'libc_id', help='Lookup by libc ID')
@click.option('--symbols', '-s', callback=_symbol_map,
              help="Comma-separated list of colon-separated symbol-address pairs (e.g. 'strncpy: db0, system: 0x4f4e0')")
@click.option('--download', '-d', is_flag=True,
              help='Download all matching libcs to the current directory instead of printing them')
@click.pass_context
def find(ctx, md5: Optional[str], sha1: Optional[str], sha256: Optional[str], buildid: Optional[str],
         libc_id: Optional[str], symbols: Optional[Dict[str, str]], download: bool):
    """Look up one or more libcs by various attributes.

    Several attributes can be specified to form an AND filter.
    """
    query = LookupQuery(
        md5=md5,
        sha1=sha1,
        sha256=sha256,
        buildid=buildid,
        id=libc_id,
        symbols=symbols,
        download=download,
    )
    run_query(ctx, query)
