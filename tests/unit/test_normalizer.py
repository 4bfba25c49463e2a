from __future__ import annotations

import pytest

from pan_validation.validation.normalizer import clean_records, count_blank, normalize


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("ABCDE1234F", "ABCDE1234F"),
        (" abcde1234f ", "ABCDE1234F"),
        ("\tbnzpa2318k\r", "BNZPA2318K"),
        ("MiXeD", "MIXED"),
        (None, None),
        ("", None),
        ("   ", None),
        ("\t\n", None),
    ],
)
def test_normalize(raw, expected):
    assert normalize(raw) == expected


@pytest.mark.parametrize("raw", ["ABCDE1234F", " abcde1234f ", "x", "  a b  "])
def test_normalize_idempotent(raw):
    once = normalize(raw)
    assert normalize(once) == once


def test_normalize_keeps_inner_whitespace():
    assert normalize("  ab cd  ") == "AB CD"


def test_clean_records_collapses_case_and_padding_variants():
    records = ["ABCDE1234F", " abcde1234f ", "AAAAA0000A", None, "  "]
    assert clean_records(records) == {"ABCDE1234F", "AAAAA0000A"}


def test_clean_records_empty_input():
    assert clean_records([]) == set()
    assert clean_records([None, "", " "]) == set()


def test_clean_records_output_invariants():
    cleaned = clean_records([" qwert9876y", "Qwert9876Y ", "zz"])
    for value in cleaned:
        assert value == value.strip()
        assert value == value.upper()


def test_count_blank():
    assert count_blank(["A", None, "", "   ", " b "]) == 3
    assert count_blank([]) == 0
