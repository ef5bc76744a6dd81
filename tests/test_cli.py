"""离线 CLI 子命令测试。"""

from click.testing import CliRunner

from chain_pricer.cli import main


def test_evaluate_deal_profitable() -> None:
    runner = CliRunner()
    result = runner.invoke(
        main,
        [
            "evaluate-deal",
            "--balance", "1",
            "--amount", "0.2",
            "--max-reward", "0.3",
            "--cost", "0.001",
            "--min-profit-per-order", "0.0001",
            "--min-profit-rate", "1",
            "--max-amount-per-order", "0.5",
            "--min-amount-per-order", "0.01",
            "--max-share", "50",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "True" in result.output
    assert "0.099" in result.output


def test_evaluate_deal_not_profitable() -> None:
    runner = CliRunner()
    result = runner.invoke(
        main,
        [
            "evaluate-deal",
            "--balance", "1",
            "--amount", "0.1",
            "--max-reward", "0.112",
            "--cost", "1.8",
            "--price-a-in-b", "0.556",
            "--max-amount-per-order", "0.5",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "False" in result.output
    assert "1.837728" in result.output
    assert "1.9" in result.output


def test_assess_deal_publishable() -> None:
    runner = CliRunner()
    result = runner.invoke(
        main,
        ["assess-deal", "--balance", "1.1", "--cost", "0.0002", "--price-a-in-b", "1", "--max-spend-limit", "1.1"],
    )

    assert result.exit_code == 0, result.output
    assert "True" in result.output
    assert "1.02022" in result.output


def test_assess_deal_without_limit() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["assess-deal", "--balance", "1.1", "--cost", "0.0002", "--price-a-in-b", "1"])

    assert result.exit_code == 0, result.output
    assert "False" in result.output


def test_invalid_amount_and_option_are_rejected() -> None:
    runner = CliRunner()

    bad_amount = runner.invoke(main, ["assess-deal", "--balance", "abc", "--cost", "0", "--price-a-in-b", "1"])
    assert bad_amount.exit_code == 2

    bad_choice = runner.invoke(
        main, ["assess-deal", "--balance", "1", "--cost", "0", "--price-a-in-b", "1", "--overpay", "turbo"]
    )
    assert bad_choice.exit_code == 2


def test_gas_price_without_rpc_url(monkeypatch) -> None:
    monkeypatch.delenv("RPC_URL", raising=False)
    runner = CliRunner()
    result = runner.invoke(main, ["gas-price"])
    assert result.exit_code == 2
    assert "RPC_URL" in result.output


def test_offline_commands_never_open_http_client(monkeypatch) -> None:
    """配置了代理服务器时，离线命令也不应创建 HTTP 客户端。"""

    def _no_client(*args, **kwargs):
        raise AssertionError("offline command created an HTTP client")

    monkeypatch.setenv("PRICER_PROXY_SERVER_URL", "http://proxy.local")
    monkeypatch.setattr("chain_pricer.clients.price_server.httpx.AsyncClient", _no_client)
    runner = CliRunner()

    assessed = runner.invoke(
        main,
        ["assess-deal", "--balance", "1.1", "--cost", "0.0002", "--price-a-in-b", "1", "--max-spend-limit", "1.1"],
    )
    evaluated = runner.invoke(
        main,
        ["evaluate-deal", "--balance", "1", "--amount", "0.1", "--max-reward", "0.2", "--max-amount-per-order", "1"],
    )

    assert assessed.exit_code == 0, assessed.output
    assert evaluated.exit_code == 0, evaluated.output


def test_balance_without_rpc_url(monkeypatch) -> None:
    monkeypatch.delenv("RPC_URL", raising=False)
    runner = CliRunner()
    result = runner.invoke(main, ["balance", "0x00000000000000000000000000000000000000aa", "--asset-id", "101", "--network", "ethm"])
    assert result.exit_code == 2
    assert "RPC_URL" in result.output


def test_balance_prints_token_balance(monkeypatch) -> None:
    async def _balance_of(self, token_address: str, wallet_address: str) -> int:
        assert token_address == "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"
        return 25 * 10**17

    monkeypatch.setenv("RPC_URL", "http://node.local")
    monkeypatch.setattr("chain_pricer.cli.price.RpcClient.balance_of", _balance_of)
    runner = CliRunner()
    result = runner.invoke(main, ["balance", "0x00000000000000000000000000000000000000aa", "--asset-id", "101", "--network", "ethm"])
    assert result.exit_code == 0, result.output
    assert "2500000000000000000" in result.output
    assert "2.5" in result.output
