import pytest

from arithdemo.status_codes import get_status_code_string, string_to_status_code


def test_get_status_code_string_first():
    assert get_status_code_string(0) == "Address not found"


def test_get_status_code_string_one_is_not_timed_out():
    assert get_status_code_string(1) == "Connection dropped"
    assert get_status_code_string(1) != "Connection timed out"


def test_get_status_code_string_last():
    assert get_status_code_string(2) == "Connection timed out"


@pytest.mark.parametrize("code", [-1, 3, 100])
def test_get_status_code_string_out_of_range(code):
    with pytest.raises(IndexError):
        get_status_code_string(code)


def test_string_to_status_code_first():
    assert string_to_status_code("Address not found") == 0


def test_string_to_status_code_timed_out_is_not_one():
    assert string_to_status_code("Connection timed out") == 2


def test_string_to_status_code_unknown():
    with pytest.raises(ValueError):
        string_to_status_code("No such status")


@pytest.mark.parametrize("code", [0, 1, 2])
def test_round_trip(code):
    assert string_to_status_code(get_status_code_string(code)) == code