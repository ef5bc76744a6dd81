"""chain-pricer CLI 顶层入口。

本模块仅负责定义 Click 命令组并导入各子命令模块，
实际业务逻辑拆分在 `chain_pricer.cli.*` 子模块中。
"""

from __future__ import annotations

from typing import Optional

import click

from ..config import Settings
from ..logging_utils import setup_logging


@click.group()
@click.option("--log-level", default=None, help="覆盖配置中的日志级别，例如 DEBUG。")
@click.option("--log-json", is_flag=True, default=False, help="以 JSON 格式输出日志。")
def main(log_level: Optional[str], log_json: bool) -> None:
    """Cross-chain asset pricing and deal evaluation CLI."""
    settings = Settings.load()
    setup_logging(log_level or settings.log_level, json_format=log_json or settings.log_json)


# 导入子模块以注册子命令（装饰器在导入时执行）
from . import deal as _deal  # noqa: F401,E402
from . import price as _price  # noqa: F401,E402


__all__ = ["main"]
