#!/usr/bin/env python3
import click
from typing import Optional

from libcdb import __version__
import libcdb.core.config as config_module

# 导入命令模块
from .commands.find import find
from .commands.dump import dump
from .commands.config import config_cli

@click.group()
@click.version_option(__version__, prog_name="libc-db")
@click.option('--base-url', help='Base URL of the libc database API')
@click.option('--timeout', type=float, help='Request timeout in seconds')
@click.option('--verbose', '-v', is_flag=True, help='Print requests and match counts to stderr')
@click.pass_context
def cli(ctx, base_url: Optional[str], timeout: Optional[float], verbose: bool):
    """Command-line client for the libc.rip database"""
    config = config_module.config
    ctx.obj = {
        "base_url": base_url or config.get_api("base_url"),
        "timeout": timeout if timeout is not None else config.get_api("timeout"),
        "proxies": config.get_api("proxies"),
        "save_dir": config.get_download("save_dir"),
        "verbose": verbose,
    }

# 注册命令
cli.add_command(find)
cli.add_command(dump)
cli.add_command(config_cli, name="config")

main = cli

if __name__ == '__main__':
    cli()
