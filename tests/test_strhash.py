from unittest import mock

import pytest

from wordhash.strhash import (
    DEBUG_R_VALUES,
    StringHash,
    chunk_value,
    chunk_values,
    letter_digit_to_number,
    main,
)


@pytest.mark.parametrize(
    "key, expected",
    [
        ("abc", 9953503400),
        ("abc123", 473827885525100),
        ("antidisestablishmentarianism", 1137429692708383810),
        ("9999999999999999999999999999", 7116200424364995040),
        ("", 0),
        ("B", 261934300),
        ("gfedcba", 80987980279261566),
        ("abcdefghijkl", 99959782498362165),
        ("abcdefghijklm", 177508434398820306),
        ("usccs103landcs104l", 2322055531449905840),
    ],
)
def test_debug_hash_values(key, expected):
    assert StringHash(True)(key) == expected


def test_hash_ignores_case():
    a = StringHash(True)("usccs103landcs104l")
    b = StringHash(True)("USCCS103LandCS104L")
    assert a == b == 2322055531449905840


def test_default_is_debug():
    assert StringHash()("AntidisEstablishmentAriaNism") == 1137429692708383810


def test_randomized_hashes_differ():
    key = "AntidisEstablishmentAriaNism"
    values = [StringHash(True)(key)]
    assert values[0] == 1137429692708383810
    with mock.patch("wordhash.strhash.time.time_ns", side_effect=[1, 2, 3, 4, 5]):
        values.extend(StringHash(False)(key) for _ in range(5))
    assert len(set(values)) == len(values)


def test_random_r_values_are_32_bit_and_replace_debug_values():
    with mock.patch("wordhash.strhash.time.time_ns", return_value=987654321):
        h = StringHash(False)
    assert h.r_values != list(DEBUG_R_VALUES)
    assert len(h.r_values) == 5
    assert all(0 <= r <= 0xFFFFFFFF for r in h.r_values)


def test_generate_r_values_same_clock_same_values():
    with mock.patch("wordhash.strhash.time.time_ns", return_value=1234):
        a = StringHash(True)
        a.generate_r_values()
        b = StringHash(False)
    assert a.r_values == b.r_values


@pytest.mark.parametrize(
    "letter, expected",
    [("a", 0), ("z", 25), ("A", 0), ("Z", 25), ("0", 26), ("9", 35)],
)
def test_letter_digit_to_number(letter, expected):
    assert letter_digit_to_number(letter) == expected


def test_chunk_value_empty_is_zero():
    assert chunk_value("") == 0


def test_chunk_value_rejects_long_chunk():
    with pytest.raises(ValueError):
        chunk_value("abcdefg")


def test_chunk_values_short_key():
    w = chunk_values("abc")
    assert len(w) == 5
    assert w[0] == chunk_value("abc")
    assert w[1:] == [0, 0, 0, 0]


def test_chunk_values_split_from_end():
    w = chunk_values("abcdefghijklm")
    assert w[0] == chunk_value("hijklm")
    assert w[1] == chunk_value("bcdefg")
    assert w[2] == chunk_value("a")
    assert w[3:] == [0, 0]


def test_key_too_long_rejected():
    with pytest.raises(ValueError):
        StringHash()("a" * 31)


def test_thirty_character_key_accepted():
    assert len(chunk_values("a" * 30)) == 5


def test_main_prints_hash(capsys):
    assert main(["abc"]) == 0
    assert capsys.readouterr().out == "h(abc)=9953503400\n"


def test_main_without_argument(capsys):
    assert main([]) == 1
    assert "Please provide a string to hash" in capsys.readouterr().out