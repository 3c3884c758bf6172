import pytest

from philo.config import ConfigError, Settings, parse_args, parse_int


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("-42", -42),
        ("     +42", 42),
        ("  \t\n\v\f\r-42", -42),
        ("42abc", 42),
        ("abc42", 0),
        ("   -abc", 0),
        ("", 0),
    ],
)
def test_parse_int_lenient_reading(text, expected):
    assert parse_int(text) == expected


def test_parse_int_wraps_like_a_32_bit_int():
    assert parse_int("-2147483648") == -2147483648
    assert parse_int("2147483648") == -2147483648


def test_parse_int_single_sign_only():
    assert parse_int("+-5") == 0
    assert parse_int("--5") == 0


def test_parse_args_four_arguments():
    settings = parse_args(["5", "800", "200", "200"])
    assert settings == Settings(5, 800, 200, 200, None)


def test_parse_args_with_meal_count():
    settings = parse_args(["4", "410", "200", "100", "7"])
    assert settings.philosophers == 4
    assert settings.time_to_die == 410
    assert settings.time_to_eat == 200
    assert settings.time_to_sleep == 100
    assert settings.must_eat == 7


def test_parse_args_accepts_trailing_garbage():
    settings = parse_args([" 3x", "+60", "60", "60"])
    assert settings == Settings(3, 60, 60, 60)


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["5", "800", "200"],
        ["5", "800", "200", "200", "3", "9"],
    ],
)
def test_parse_args_wrong_count(args):
    with pytest.raises(ConfigError, match="Invalid arguments"):
        parse_args(args)


@pytest.mark.parametrize(
    "args",
    [
        ["0", "800", "200", "200"],
        ["5", "-800", "200", "200"],
        ["5", "800", "abc", "200"],
        ["5", "800", "200", "0"],
        ["5", "800", "200", "200", "0"],
        ["5", "800", "200", "200", "-1"],
        ["2147483648", "800", "200", "200"],
    ],
)
def test_parse_args_rejects_values_below_one(args):
    with pytest.raises(ConfigError):
        parse_args(args)


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        parse_args(["1"])