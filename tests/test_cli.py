"""
Tests for the minigrep CLI and text formatters
"""
import pytest

from mcp_minigrep.cli import build_parser, main
from mcp_minigrep.formatters import format_lines, format_policy, format_search

CONTENTS = """\
Rust:
safe, fast, productive.
Pick three.
Duct tape.
Trust me.
"""


@pytest.fixture
def poem_path(tmp_path):
    path = tmp_path / "poem.txt"
    path.write_text(CONTENTS, encoding="utf-8")
    return str(path)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("IGNORE_CASE", raising=False)


class TestParser:
    """Test argument parsing."""

    def test_no_override(self):
        args = build_parser().parse_args(["to", "poem.txt"])
        assert args.query == "to"
        assert args.file_path == "poem.txt"
        assert args.ignore_case is None

    def test_ignore_case_flag(self):
        assert build_parser().parse_args(["-i", "to", "poem.txt"]).ignore_case is True

    def test_case_sensitive_flag(self):
        assert build_parser().parse_args(["--case-sensitive", "to", "poem.txt"]).ignore_case is False

    def test_flags_are_exclusive(self):
        with pytest.raises(SystemExit) as exc:
            build_parser().parse_args(["-i", "-s", "to", "poem.txt"])
        assert exc.value.code == 2

    def test_missing_arguments(self):
        with pytest.raises(SystemExit) as exc:
            build_parser().parse_args(["to"])
        assert exc.value.code == 2


class TestMain:
    """Test end-to-end CLI runs."""

    def test_case_sensitive(self, poem_path, capsys):
        assert main(["duct", poem_path]) == 0
        assert capsys.readouterr().out == "safe, fast, productive.\n"

    def test_env_ignore_case(self, poem_path, capsys, monkeypatch):
        monkeypatch.setenv("IGNORE_CASE", "1")

        assert main(["rUsT", poem_path]) == 0
        assert capsys.readouterr().out == "Rust:\nTrust me.\n"

    def test_flag_overrides_env(self, poem_path, capsys, monkeypatch):
        monkeypatch.setenv("IGNORE_CASE", "1")

        assert main(["-s", "rUsT", poem_path]) == 0
        assert capsys.readouterr().out == ""

    def test_flag_ignore_case(self, poem_path, capsys):
        assert main(["-i", "DUCT", poem_path]) == 0
        assert capsys.readouterr().out == "safe, fast, productive.\nDuct tape.\n"

    def test_single_blank_line_match(self, tmp_path, capsys):
        path = tmp_path / "blank.txt"
        path.write_text("\n", encoding="utf-8")

        assert main(["", str(path)]) == 0
        assert capsys.readouterr().out == "\n"

    def test_blank_lines_among_matches(self, tmp_path, capsys):
        path = tmp_path / "mixed.txt"
        path.write_text("abc\n\nxyz\n", encoding="utf-8")

        assert main(["", str(path)]) == 0
        assert capsys.readouterr().out == "abc\n\nxyz\n"

    def test_report(self, poem_path, capsys):
        assert main(["--report", "duct", poem_path]) == 0
        out = capsys.readouterr().out
        assert 'SEARCH "duct" | case-sensitive' in out
        assert "MATCHES (1 found | 5 lines)" in out
        assert "2: safe, fast, productive." in out

    def test_missing_file(self, tmp_path, capsys):
        assert main(["duct", str(tmp_path / "missing.txt")]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Application error:")


class TestFormatters:
    """Test text formatters."""

    RESULT = {
        "success": True,
        "query": "rUsT",
        "policy": "insensitive",
        "ignore_case": True,
        "matches": [
            {"line_number": 1, "line": "Rust:"},
            {"line_number": 5, "line": "Trust me."},
        ],
        "match_count": 2,
        "total_lines": 5,
        "source": "poem.txt",
    }

    def test_format_lines(self):
        assert format_lines(self.RESULT) == "Rust:\nTrust me."

    def test_format_search(self):
        text = format_search(self.RESULT)
        assert text.splitlines()[0] == 'SEARCH "rUsT" | case-insensitive'
        assert "     1: Rust:" in text
        assert "     5: Trust me." in text

    def test_format_search_no_matches(self):
        result = {**self.RESULT, "matches": [], "match_count": 0}
        assert "NO MATCHES FOUND (5 lines searched)" in format_search(result)

    def test_format_error(self):
        result = {"success": False, "error": "boom"}
        assert format_lines(result) == "ERROR: boom"
        assert format_search(result) == "ERROR: boom"
        assert format_policy(result) == "ERROR: boom"

    def test_format_policy(self):
        text = format_policy({
            "success": True, "policy": "sensitive", "override": None, "variable": "IGNORE_CASE"
        })
        assert "CASE POLICY: sensitive" in text
        assert "IGNORE_CASE environment variable" in text
