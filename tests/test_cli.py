"""End-to-end tests for the passforge command line."""

import json

import pytest

from passforge import output
from passforge.cli import main


def stdout_lines(capsys) -> list[str]:
    return [line for line in capsys.readouterr().out.splitlines() if line]


def test_basic_generation(capsys):
    assert main(["3", "--quiet"]) == 0
    lines = stdout_lines(capsys)
    assert len(lines) == 3
    assert all(len(line) == 16 for line in lines)


def test_length_option(capsys):
    assert main(["1", "--length", "20", "--quiet"]) == 0
    assert [len(line) for line in stdout_lines(capsys)] == [20]


def test_seed_reproducibility(capsys):
    main(["4", "--seed", "12345", "--quiet"])
    first = stdout_lines(capsys)
    main(["4", "--seed", "12345", "--quiet"])
    second = stdout_lines(capsys)

    assert first == second


def test_banner_shown_unless_quiet(capsys):
    main(["1"])
    assert "passforge" in capsys.readouterr().out


def test_exclude_ranges_and_lists(capsys):
    main(["20", "-q", "-e", "a-z,0-9", "--exclude-chars", "A,B", "--seed", "1"])
    joined = "".join(stdout_lines(capsys))
    assert not any(c.islower() or c.isdigit() or c in "AB" for c in joined)


def test_include_chars(capsys):
    main(["5", "-q", "--include-chars", "x-z", "--capitals-off", "--length", "8"])
    assert set("".join(stdout_lines(capsys))) <= set("xyz")


def test_pattern_sets_length(capsys):
    main(["2", "-q", "--pattern", "UUNNLL", "--length", "40"])
    lines = stdout_lines(capsys)
    assert len(lines) == 2
    for line in lines:
        assert line[:2].isupper() and line[2:4].isdigit() and line[4:].islower()


def test_minimums(capsys):
    main(["3", "-q", "-l", "4", "--min-capitals", "3", "--min-numerals", "3"])
    lines = stdout_lines(capsys)
    assert all(len(line) == 6 for line in lines)
    assert all(sum(c.isupper() for c in line) >= 3 for line in lines)


def test_json_output(capsys):
    assert main(["2", "--format", "json", "--symbols-off", "--length", "10"]) == 0
    report = json.loads(capsys.readouterr().out)

    assert report["count"] == 2
    assert report["length"] == 10
    assert len(report["passwords"]) == 2
    assert round(report["entropy_bits"], 2) == 59.54


def test_table_output(capsys):
    main(["10", "--table", "--seed", "7"])
    out = capsys.readouterr().out
    assert "Printing 10 passwords in 3 columns" in out


def test_invalid_range_exits_with_error(capsys):
    assert main(["1", "-e", "z-a"]) == 1
    err = capsys.readouterr().err
    assert "Error parsing exclude characters" in err
    assert "Invalid range 'z-a'" in err


def test_invalid_include_range(capsys):
    assert main(["1", "--include-chars", "9-0"]) == 1
    assert "Error parsing include characters" in capsys.readouterr().err


def test_invalid_pattern(capsys):
    assert main(["1", "-q", "--pattern", "LLX"]) == 1
    assert "Invalid pattern character: 'X'" in capsys.readouterr().err


def test_zero_length(capsys):
    assert main(["1", "-q", "--length", "0"]) == 1
    assert "length must be greater than 0" in capsys.readouterr().err


def test_zero_count(capsys):
    assert main(["0", "-q"]) == 1
    assert "count must be greater than 0" in capsys.readouterr().err


def test_everything_excluded(capsys):
    assert main(["1", "-q", "-c", "-n", "-s", "-e", "a-z"]) == 1
    assert "All character types are disabled" in capsys.readouterr().err


def test_copy_first_password(monkeypatch, capsys):
    copied = []
    monkeypatch.setattr(output.pyperclip, "copy", copied.append)

    assert main(["2", "-q", "--copy", "--seed", "3"]) == 0
    assert copied == [stdout_lines(capsys)[0]]


@pytest.mark.parametrize("flag", ["--min-capitals", "--min-numerals", "--min-symbols"])
def test_negative_minimums_are_rejected(flag, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["1", "-q", flag, "-2"])

    assert exc_info.value.code == 2
    assert "must be 0 or greater" in capsys.readouterr().err
