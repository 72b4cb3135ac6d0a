import time

import pytest

from dining.params import ParamError, Params, current_millis, parse_int, parse_params


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -7", -7),
        ("+5", 5),
        ("\t\n 3", 3),
        ("", 0),
        ("-", 0),
    ],
)
def test_parse_int(text, expected):
    assert parse_int(text) == expected


def test_parse_int_sign_only_once():
    assert parse_int("-12") == -parse_int("12")


def test_current_millis_tracks_wall_clock():
    before = time.time() * 1000
    now = current_millis()
    after = time.time() * 1000
    assert before - 1 <= now <= after + 1
    assert current_millis() >= now


def test_parse_params_without_meals():
    params = parse_params(["5", "800", "200", "200"])
    assert params == Params(die_ms=800, eat_ms=200, sleep_ms=200, meals=0)


def test_parse_params_with_meals():
    params = parse_params(["5", "800", "200", "100", "7"])
    assert params.sleep_ms == 100
    assert params.meals == 7


def test_parse_params_empty_meals_means_unlimited():
    assert parse_params(["2", "400", "100", "100", ""]).meals == 0


def test_parse_params_ignores_extra_arguments():
    params = parse_params(["2", "400", "100", "100", "3", "junk"])
    assert params.meals == 3


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["5", "800", "200"],
        ["5", "0", "200", "200"],
        ["5", "800", "-1", "200"],
        ["5", "800", "200", "0"],
        ["5", "800", "200", "200", "-3"],
    ],
)
def test_parse_params_rejects_invalid(args):
    with pytest.raises(ParamError):
        parse_params(args)


def test_param_error_is_value_error():
    with pytest.raises(ValueError):
        parse_params(["1"])