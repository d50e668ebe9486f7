"""
配置管理命令组
"""
import click
from rich.console import Console
from rich.table import Table
from rich.markup import escape
import sys
import json

import libcdb.core.config as config_module

console = Console()

def parse_value(value: str):
    """将命令行中的字符串值转换为合适的类型"""
    try:
        # 如果是JSON字符串，解析为Python对象
        return json.loads(value)
    except json.JSONDecodeError:
        pass

    if value.lower() == "true":
        return True
    if value.lower() == "false":
        return False
    if value.lower() == "none":
        return None
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return value

def display_config():
    """显示当前配置的辅助函数"""
    config_instance = config_module.config

    table = Table(title="Current Configuration")
    table.add_column("Section", style="cyan")
    table.add_column("Key", style="green")
    table.add_column("Value", style="yellow")

    for section, values in config_instance.config.to_dict().items():
        for key, value in values.items():
            if isinstance(value, (dict, list)):
                value_str = json.dumps(value, ensure_ascii=False)
            else:
                value_str = str(value)
            table.add_row(section, key, value_str)

    console.print(f"Config file: {config_instance.config_file}")
    console.print(table)

@click.group()
def config_cli():
    """Manage libc-db configuration"""
    pass

@config_cli.command()
def show():
    """Show the current configuration"""
    display_config()

@config_cli.command()
@click.argument("section", type=click.Choice(["api", "download"]))
@click.argument("key")
@click.argument("value")
def set(section: str, key: str, value: str):
    """Set a configuration value

    \b
    Examples:
    libc-db config set api base_url https://libc.rip/api
    libc-db config set api timeout 60
    libc-db config set api proxies '{"https":"http://127.0.0.1:7890"}'
    libc-db config set download save_dir ~/libcs
    """
    # 字符串类型的配置项保留原始输入,例如目录名"2024"
    if config_module.FIELD_TYPES.get((section, key)) == (str,):
        parsed_value = value
    else:
        parsed_value = parse_value(value)
    try:
        config_module.config.set(section, key, parsed_value)
    except (KeyError, ValueError, OSError) as e:
        console.print(f"[red]Failed to set configuration: {escape(str(e))}")
        sys.exit(1)
    console.print(f"[green]Successfully set {section}.{key} = {escape(str(parsed_value))}")

@config_cli.command()
def reset():
    """Reset the configuration to defaults"""
    try:
        config_module.config.reset()
    except OSError as e:
        console.print(f"[red]Failed to reset configuration: {e}")
        sys.exit(1)
    console.print("[green]Configuration has been reset to defaults")
    display_config()
