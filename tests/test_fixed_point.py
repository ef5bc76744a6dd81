import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from chain_pricer.services.fixed_point import (
    div_trunc,
    format_ether,
    number_to_string,
    parse_price_string_to_fixed18,
    price_a_in_b,
    price_as_float,
    scale_factor,
    to_fixed_string,
)

PRICE_A = "1.102723238337682431"
PRICE_B = "0.907273238337682431"
PRICE_C = "1980.861883676755965"


def test_parse_keeps_exactly_18_decimals() -> None:
    assert parse_price_string_to_fixed18(PRICE_A) == 1102723238337682431
    assert parse_price_string_to_fixed18(PRICE_B) == 907273238337682431
    assert parse_price_string_to_fixed18(PRICE_C) == 1980861883676755965000


def test_parse_truncates_extra_digits() -> None:
    assert parse_price_string_to_fixed18("0.1234567890123456789") == 123456789012345678


def test_parse_without_dot_scales_integer() -> None:
    assert parse_price_string_to_fixed18("123") == 123 * 10**18
    # 已归一化的整数字符串再次解析时会再放大 10**18
    once = parse_price_string_to_fixed18("1.5")
    twice = parse_price_string_to_fixed18(str(once))
    assert once == 15 * 10**17
    assert twice == once * 10**18
    assert parse_price_string_to_fixed18(str(twice)) == twice * 10**18


def test_price_as_float() -> None:
    assert price_as_float(parse_price_string_to_fixed18(PRICE_A)) == 1.102723238337682431
    assert price_as_float(parse_price_string_to_fixed18(PRICE_C)) == 1980.861883676755965


def test_price_a_in_b_zero_denominator() -> None:
    assert price_a_in_b(10**18, 0) == 0


def test_price_a_in_b_matches_reference_values() -> None:
    a = parse_price_string_to_fixed18(PRICE_A)
    b = parse_price_string_to_fixed18(PRICE_B)
    c = parse_price_string_to_fixed18(PRICE_C)

    assert price_a_in_b(a, a) == 10**18
    assert price_a_in_b(b, b) == 10**18
    assert price_a_in_b(a, b) == 1215425730354513700
    assert price_a_in_b(a, c) == 556688604806143
    assert price_a_in_b(b, a) == 822756977267810000
    assert price_a_in_b(b, c) == 458019433769737
    assert price_a_in_b(c, a) == 1796336392314392200000


def test_number_to_string_drops_integral_fraction() -> None:
    assert number_to_string(1.0) == "1"
    assert number_to_string(2000.0) == "2000"
    assert number_to_string(0) == "0"
    assert number_to_string(1.2154257303545137) == "1.2154257303545137"


def test_number_to_string_never_uses_exponent() -> None:
    assert number_to_string(5e-7) == "0.0000005"
    assert number_to_string(1e21) == "1000000000000000000000"


def test_to_fixed_string() -> None:
    assert to_fixed_string(0.001) == "0.001000000000000000"
    assert to_fixed_string(0.00042) == "0.000420000000000000"


def test_scale_factor_counts_fraction_digits() -> None:
    assert scale_factor(1.0) == 1
    assert scale_factor(1.1) == 10
    assert scale_factor(1.05) == 100
    assert scale_factor(1.2) == 10


def test_format_ether() -> None:
    assert format_ether(1020220000000000000) == "1.02022"
    assert format_ether(0) == "0.0"
    assert format_ether(2 * 10**18) == "2.0"
    assert format_ether(-3) == "-0.000000000000000003"


def test_div_trunc_rounds_toward_zero() -> None:
    assert div_trunc(7, 2) == 3
    assert div_trunc(-7, 2) == -3
    assert div_trunc(7, -2) == -3
    assert div_trunc(-7, -2) == 3
    assert div_trunc(-1, 10**18) == 0
    assert div_trunc(0, -5) == 0
