"""
CLI命令实现模块
"""
from .find import find
from .dump import dump
from .config import config_cli

__all__ = ['find', 'dump', 'config_cli']
