import pytest

from gnuopt.cli import OPTSTRING, main


def run(capsys, args):
    status = main(args)
    captured = capsys.readouterr()
    return status, captured.out, captured.err


def test_simple_flags(capsys):
    status, out, err = run(capsys, ["-a", "-b"])
    assert status == 0
    assert out == "option a\noption b\n"
    assert err == ""


def test_clustered_flags_match_separate_flags(capsys):
    _, clustered, _ = run(capsys, ["-ab"])
    _, separate, _ = run(capsys, ["-a", "-b"])
    assert clustered == separate


def test_option_with_attached_and_separate_value(capsys):
    _, attached, _ = run(capsys, ["-cvalue"])
    _, separate, _ = run(capsys, ["-c", "value"])
    assert attached == "option c with value 'value'\n"
    assert separate == attached


def test_digits_in_one_element(capsys):
    _, out, _ = run(capsys, ["-12"])
    assert out == "option 1\noption 2\n"


def test_digits_in_two_elements_are_reported(capsys):
    _, out, _ = run(capsys, ["-1", "-2"])
    lines = out.splitlines()
    assert lines == [
        "option 1",
        "digits occur in two different argv-elements.",
        "option 2",
    ]


def test_option_without_case_reports_code(capsys):
    _, out, _ = run(capsys, ["-d", "x"])
    assert out == "?? getopt returned character code 0144 ??\n"


def test_unknown_option_goes_to_stderr(capsys):
    status, out, err = run(capsys, ["-z"])
    assert status == 0
    assert out == ""
    assert err == "gnuopt: invalid option -- 'z'\n"


def test_missing_argument_goes_to_stderr(capsys):
    _, out, err = run(capsys, ["-c"])
    assert out == ""
    assert err == "gnuopt: option requires an argument -- 'c'\n"


def test_posix_order_stops_at_first_operand(capsys):
    _, out, _ = run(capsys, ["-a", "foo", "-b"])
    assert out.splitlines() == ["option a", "non-option ARGV-elements: foo -b "]


def test_double_dash_ends_options(capsys):
    _, out, _ = run(capsys, ["-a", "--", "-b"])
    assert out.splitlines() == ["option a", "non-option ARGV-elements: -b "]


def test_no_arguments_prints_nothing(capsys):
    status, out, err = run(capsys, [])
    assert (status, out, err) == (0, "", "")


@pytest.mark.parametrize("flag", ["a", "b"])
def test_every_plain_flag_is_in_optstring(capsys, flag):
    _, out, _ = run(capsys, [f"-{flag}"])
    assert flag in OPTSTRING
    assert out == f"option {flag}\n"