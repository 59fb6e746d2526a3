"""Tests for CSV parsing, missing-SEO detection, merge and serialization."""

import pytest

from helpers.csv_rows import (
    decode_csv_bytes,
    extract_domain,
    merge_descriptions,
    parse_csv_text,
    preview_slice,
    rows_missing_seo,
    rows_to_csv,
)
from helpers.flow_errors import EmptyOrMalformedCSV


def test_parse_keeps_header_order_and_strings():
    columns, rows = parse_csv_text("email,seo,zip\na@foo.com,,02134\nb@foo.com,existing,90210\n")

    assert columns == ["email", "seo", "zip"]
    assert rows == [
        {"email": "a@foo.com", "seo": "", "zip": "02134"},
        {"email": "b@foo.com", "seo": "existing", "zip": "90210"},
    ]


def test_parse_skips_blank_lines_and_fills_short_lines():
    _, rows = parse_csv_text("email,seo\n\na@foo.com\n\n")
    assert rows == [{"email": "a@foo.com", "seo": ""}]


@pytest.mark.parametrize("text", ["", "email,seo\n", "\n\n"])
def test_parse_rejects_empty_input(text):
    with pytest.raises(EmptyOrMalformedCSV):
        parse_csv_text(text)


def test_parse_rejects_ragged_rows():
    with pytest.raises(EmptyOrMalformedCSV):
        parse_csv_text("email,seo\na@foo.com,x\nb@foo.com,x,extra,more\n")


def test_parse_drops_trailing_delimiters_without_shifting_columns():
    columns, rows = parse_csv_text("email,seo\na@foo.com,,\nb@foo.com,existing,\n")

    assert columns == ["email", "seo"]
    assert rows == [
        {"email": "a@foo.com", "seo": ""},
        {"email": "b@foo.com", "seo": "existing"},
    ]


def test_round_trip_is_lossless_for_values():
    text = 'email,seo,company\na@foo.com,,"Acme, Inc"\nb@bar.com,Already here,Bar\n'
    columns, rows = parse_csv_text(text)

    again_columns, again_rows = parse_csv_text(rows_to_csv(rows, columns))

    assert again_columns == columns
    assert again_rows == rows


def test_rows_to_csv_appends_new_columns():
    out = rows_to_csv([{"email": "a@foo.com", "seo": "New"}], ["email"])
    assert out == "email,seo\na@foo.com,New\n"


def test_decode_strips_utf8_bom():
    assert decode_csv_bytes("\ufeffemail,seo\n".encode("utf-8")) == "email,seo\n"


def test_decode_falls_back_for_latin1():
    raw = (
        "email,seo\n"
        "ren\u00e9@caf\u00e9.fr,Tr\u00e8s bien, caf\u00e9 cr\u00e8me\n"
        "fran\u00e7ois@\u00e9t\u00e9.fr,D\u00e9j\u00e0 vu \u00e0 la fa\u00e7ade\n"
    ).encode("latin-1")
    text = decode_csv_bytes(raw)
    assert text.startswith("email,seo\n")


@pytest.mark.parametrize(
    "email, expected",
    [("a@foo.com", "foo.com"), ("a@b@foo.com", "b@foo.com"), ("nobody", None), ("x@", None), (None, None)],
)
def test_extract_domain(email, expected):
    assert extract_domain(email) == expected


def test_rows_missing_seo_treats_absent_and_blank_alike():
    rows = [
        {"email": "a@x.com", "seo": ""},
        {"email": "b@x.com", "seo": "   "},
        {"email": "c@x.com"},
        {"email": "d@x.com", "seo": "kept"},
    ]
    assert [r["email"] for r in rows_missing_seo(rows)] == ["a@x.com", "b@x.com", "c@x.com"]


def test_rows_missing_seo_empty_when_all_present():
    assert rows_missing_seo([{"email": "a@x.com", "seo": "done"}]) == []


def test_merge_gives_shared_domain_the_same_description():
    rows = [{"email": f"user{i}@shared.com", "seo": ""} for i in range(4)]
    merged = merge_descriptions(rows, {"shared.com": "One description."})
    assert {r["seo"] for r in merged} == {"One description."}


def test_merge_keeps_existing_description_for_matched_domain():
    rows = [{"email": "a@foo.com", "seo": ""}, {"email": "b@foo.com", "seo": "existing"}]
    merged = merge_descriptions(rows, {"foo.com": "Desc F."})
    assert [r["seo"] for r in merged] == ["Desc F.", "existing"]


def test_merge_leaves_unmatched_rows_untouched():
    rows = [{"email": "a@foo.com", "seo": ""}, {"email": "z@other.com", "seo": "old"}, {"email": "broken"}]
    merged = merge_descriptions(rows, {"foo.com": "Desc F."})

    assert merged[0]["seo"] == "Desc F."
    assert merged[1]["seo"] == "old"
    assert "seo" not in merged[2]


def test_merge_does_not_mutate_input():
    rows = [{"email": "a@foo.com", "seo": ""}]
    merge_descriptions(rows, {"foo.com": "Desc F."})
    assert rows[0]["seo"] == ""


def test_preview_slice_takes_first_ten_in_order():
    rows = [{"email": f"u{i}@x.com"} for i in range(25)]
    preview = preview_slice(rows)
    assert [r["email"] for r in preview] == [f"u{i}@x.com" for i in range(10)]


@pytest.mark.parametrize(
    "email",
    ["a@foo.com", "a@b@foo.com", "  bob@site.org ", "nobody", "x@", "", None, 42],
)
def test_extract_domain_matches_backend_rule(email):
    from backend.src.core.seo.domains import extract_domain as backend_extract_domain

    assert extract_domain(email) == backend_extract_domain(email)
