"""Settings 默认值与加载方式的测试。"""

from __future__ import annotations

from chain_pricer.config import Settings


def test_fixed18_constants_agree() -> None:
    settings = Settings(pricer_proxy_server_url=None)
    assert settings.one_on_18_decimals == 10**settings.max_decimals_18
    assert settings.address_zero == "0x" + "0" * 40
    # 缩放因子只有一个来源
    assert not hasattr(settings, "one_unit")


def test_load_applies_env_file_and_overrides(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("PRICER_USE_MULTICHAIN", raising=False)
    monkeypatch.delenv("PRICER_PROXY_SERVER_URL", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("PRICER_USE_MULTICHAIN=true\nPRICER_PROXY_SERVER_URL=http://proxy.local\n")

    loaded = Settings.load(env_file=env_file)
    assert loaded.pricer_use_multichain is True
    assert loaded.pricer_proxy_server_url == "http://proxy.local"

    overridden = Settings.load(env_file=env_file, overrides={"pricer_proxy_server_url": None})
    assert overridden.pricer_use_multichain is True
    assert overridden.pricer_proxy_server_url is None
