"""Tests for the webring command line."""
import pytest

from webring._version import __version__
from webring.cli import build_parser, main


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args(["browse"])
        assert args.tab == "GCS"
        assert args.sort == "year"
        assert args.desc is False
        assert args.list is False

    def test_rejects_unknown_tab(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["browse", "--tab", "ARTS"])

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestListMode:
    def test_lists_tab_sorted_by_name(self, site_dir, capsys):
        code = main(["--list", "--base", str(site_dir), "--tab", "COMP", "--sort", "name"])

        out = capsys.readouterr().out
        assert code == 0
        assert out.splitlines()[0] == "Students (2)"
        assert out.index("Bob") < out.index("Dan")
        assert "Amy" not in out

    def test_explicit_browse_subcommand(self, site_dir, capsys):
        code = main(["browse", "--list", "--base", str(site_dir), "--sort", "year", "--desc"])

        lines = capsys.readouterr().out.splitlines()
        assert code == 0
        assert lines[2].startswith("Bob")
        assert lines[-1].startswith("Eve")

    def test_search_with_no_match(self, site_dir, capsys):
        code = main(["--list", "--base", str(site_dir), "--search", "nobody"])

        out = capsys.readouterr().out
        assert code == 0
        assert "Students (5)" in out
        assert "(no matching sites)" in out

    def test_base_from_environment(self, site_dir, monkeypatch, capsys):
        monkeypatch.setenv("WEBRING_BASE_PATH", str(site_dir))

        assert main(["--list"]) == 0
        assert "Students (5)" in capsys.readouterr().out

    def test_load_error_exits_1(self, tmp_path, capsys):
        code = main(["--list", "--base", str(tmp_path)])

        err = capsys.readouterr().err
        assert code == 1
        assert err.startswith("Error: Failed to fetch webring data")

    def test_undecodable_catalog_exits_1(self, tmp_path, capsys):
        (tmp_path / "webring.json").write_bytes(b'{"sites": [{"name": "\xe9"}]}')
        code = main(["--list", "--base", str(tmp_path)])

        assert code == 1
        assert capsys.readouterr().err.startswith("Error: Webring data is not valid UTF-8")
