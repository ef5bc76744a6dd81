from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """运行时配置模型，从环境变量或 .env 加载。

    集中管理定点数运算所需的代币常量、价格缓存行为（多链键、
    清理周期、代理价格服务器）以及 CLI 用到的 Gas 价格 RPC
    端点与日志级别等。
    """

    # 代币常量：零地址与 18 位精度
    address_zero: str = "0x0000000000000000000000000000000000000000"
    one_on_18_decimals: int = 10**18
    max_decimals_18: int = 18

    # 价格缓存：按 (资产, 网络) 还是仅按资产缓存，以及整体清空周期
    pricer_use_multichain: bool = False
    pricer_cleanup_interval_sec: int = 60
    pricer_proxy_server_url: Optional[str] = None
    pricer_request_timeout_sec: float = 10.0

    # CLI 读取 Gas 价格用的 JSON-RPC 节点
    rpc_url: Optional[str] = None
    rpc_retry_attempts: int = 3

    log_level: str = "INFO"
    log_json: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_prefix="", extra="ignore")

    @classmethod
    def load(cls, env_file: Optional[str | Path] = None, overrides: Optional[dict[str, Any]] = None) -> "Settings":
        """Load settings, allowing an optional .env override and programmatic overrides."""
        kwargs: dict[str, Any] = {}
        if env_file:
            kwargs["_env_file"] = env_file
        if overrides:
            kwargs.update(overrides)
        return cls(**kwargs)
