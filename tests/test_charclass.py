import string

import pytest

from gnuopt import charclass as cc

ASCII = range(128)


@pytest.mark.parametrize(
    "func, members",
    [
        (cc.is_alnum, string.ascii_letters + string.digits),
        (cc.is_alpha, string.ascii_letters),
        (cc.is_blank, " \t"),
        (cc.is_digit, string.digits),
        (cc.is_lower, string.ascii_lowercase),
        (cc.is_upper, string.ascii_uppercase),
        (cc.is_xdigit, string.hexdigits),
        (cc.is_punct, string.punctuation),
        (cc.is_space, " \t\n\v\f\r"),
    ],
)
def test_classes_match_ascii_sets(func, members):
    for code in ASCII:
        assert func(code) == (chr(code) in members), chr(code)


def test_cntrl_is_c0_and_del():
    for code in ASCII:
        assert cc.is_cntrl(code) == (code < 0x20 or code == 0x7F)


def test_print_and_graph_differ_only_by_space():
    for code in ASCII:
        if code == ord(" "):
            assert cc.is_print(code) and not cc.is_graph(code)
        else:
            assert cc.is_print(code) == cc.is_graph(code)


def test_print_excludes_controls():
    for code in ASCII:
        assert cc.is_print(code) != cc.is_cntrl(code)


def test_string_and_int_agree():
    for code in ASCII:
        assert cc.is_alnum(chr(code)) == cc.is_alnum(code)
        assert cc.is_punct(chr(code)) == cc.is_punct(code)


@pytest.mark.parametrize(
    "func",
    [cc.is_alnum, cc.is_alpha, cc.is_lower, cc.is_upper, cc.is_xdigit, cc.is_print, cc.is_punct],
)
def test_non_ascii_has_no_class(func):
    for ch in "éÄßΩ€":
        assert func(ch) is False


@pytest.mark.parametrize(
    "func",
    [
        cc.is_alnum,
        cc.is_alpha,
        cc.is_blank,
        cc.is_cntrl,
        cc.is_digit,
        cc.is_graph,
        cc.is_lower,
        cc.is_print,
        cc.is_punct,
        cc.is_space,
        cc.is_upper,
        cc.is_xdigit,
    ],
)
def test_weof_belongs_to_no_class(func):
    assert func(cc.WEOF) is False


def test_case_mapping_matches_str_methods():
    for ch in string.ascii_letters:
        assert cc.to_lower(ch) == ch.lower()
        assert cc.to_upper(ch) == ch.upper()


def test_case_mapping_round_trip():
    for code in ASCII:
        if cc.is_upper(code):
            assert cc.to_upper(cc.to_lower(code)) == code
        if cc.is_lower(code):
            assert cc.to_lower(cc.to_upper(code)) == code


def test_case_mapping_leaves_others_alone():
    for ch in string.digits + string.punctuation + " é":
        assert cc.to_lower(ch) == ch
        assert cc.to_upper(ch) == ch
    assert cc.to_lower(cc.WEOF) == cc.WEOF


def test_case_mapping_keeps_input_kind():
    assert cc.to_lower(ord("Q")) == ord("q")
    assert cc.to_upper("q") == "Q"


def test_bad_arguments():
    with pytest.raises(ValueError):
        cc.is_alpha("ab")
    with pytest.raises(TypeError):
        cc.is_alpha(1.5)