#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/cli/test_mdedit_main.py
"""Unit tests for the mdedit command line entry point."""

import io
import logging

import pytest
from rich.logging import RichHandler

from mdedit.cli import build_options, create_parser, main
from mdedit.constants import EXIT_ERROR, EXIT_INPUT_ERROR, EXIT_SUCCESS, EXIT_VALIDATION_ERROR

SAMPLE_HTML = "<div><h2>Notes</h2><p>Some <i>text</i></p><ul><li>one</li><li>two</li></ul></div>"
SAMPLE_MARKDOWN = "## Notes\n\nSome _text_\n\n- one\n- two\n\n\n\n"


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def sample_file(isolated_config):
    path = isolated_config / "content.html"
    path.write_text(SAMPLE_HTML, encoding="utf-8")
    return path


@pytest.mark.unit
@pytest.mark.cli
class TestConversion:
    """Tests for converting HTML files."""

    def test_stdout(self, sample_file, capsys):
        assert main([str(sample_file)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == SAMPLE_MARKDOWN

    def test_out_file(self, sample_file, isolated_config, capsys):
        target = isolated_config / "notes.md"
        assert main([str(sample_file), "--out", str(target)]) == EXIT_SUCCESS
        assert target.read_text(encoding="utf-8") == SAMPLE_MARKDOWN
        assert capsys.readouterr().out == ""

    def test_stdin(self, isolated_config, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("<p><b>x</b></p>"))
        assert main(["-"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "**x**\n\n\n\n"

    def test_marker_flags(self, sample_file, capsys):
        assert main([str(sample_file), "--italic-marker", "*", "--bullet-marker", "+"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "## Notes\n\nSome *text*\n\n+ one\n+ two\n\n\n\n"

    def test_rich_output(self, sample_file, capsys):
        assert main([str(sample_file), "--rich"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "Notes" in out
        assert "one" in out
        assert any(isinstance(handler, RichHandler) for handler in logging.getLogger().handlers)

    def test_plain_logging_without_rich(self, sample_file, capsys):
        assert main([str(sample_file)]) == EXIT_SUCCESS
        assert not any(isinstance(handler, RichHandler) for handler in logging.getLogger().handlers)


@pytest.mark.unit
@pytest.mark.cli
class TestConfiguration:
    """Tests for configuration files in the CLI."""

    def test_discovered_config_applies(self, sample_file, isolated_config, capsys):
        (isolated_config / ".mdedit.toml").write_text('[markdown]\nbullet_marker = "*"\n', encoding="utf-8")
        assert main([str(sample_file)]) == EXIT_SUCCESS
        assert "* one\n* two\n" in capsys.readouterr().out

    def test_flag_overrides_config(self, sample_file, isolated_config, capsys):
        config = isolated_config / "custom.yaml"
        config.write_text("markdown:\n  bullet_marker: '*'\n", encoding="utf-8")
        assert main([str(sample_file), "--config", str(config), "--bullet-marker", "+"]) == EXIT_SUCCESS
        assert "+ one\n+ two\n" in capsys.readouterr().out

    def test_no_config(self, sample_file, isolated_config, monkeypatch, capsys):
        (isolated_config / ".mdedit.toml").write_text('[markdown]\nbullet_marker = "*"\n', encoding="utf-8")
        monkeypatch.setenv("MDEDIT_CONFIG", str(isolated_config / "missing.toml"))
        assert main([str(sample_file), "--no-config"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == SAMPLE_MARKDOWN

    def test_html_section(self, isolated_config, capsys):
        (isolated_config / ".mdedit.json").write_text('{"html": {"unknown_tags": "unwrap"}}', encoding="utf-8")
        source = isolated_config / "span.html"
        source.write_text("<p>a<span>b</span></p>", encoding="utf-8")
        assert main([str(source)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "ab\n\n\n\n"

    def test_missing_config(self, sample_file, isolated_config, capsys):
        assert main([str(sample_file), "--config", str(isolated_config / "nope.toml")]) == EXIT_VALIDATION_ERROR
        assert "does not exist" in capsys.readouterr().err

    def test_invalid_config_value(self, sample_file, isolated_config, capsys):
        (isolated_config / ".mdedit.toml").write_text('[markdown]\nbullet_marker = "x"\n', encoding="utf-8")
        assert main([str(sample_file)]) == EXIT_VALIDATION_ERROR
        assert "bullet_marker" in capsys.readouterr().err

    def test_section_must_be_table(self, sample_file, isolated_config, capsys):
        (isolated_config / ".mdedit.json").write_text('{"markdown": "fancy"}', encoding="utf-8")
        assert main([str(sample_file)]) == EXIT_VALIDATION_ERROR
        assert "must be a table" in capsys.readouterr().err

    def test_unknown_option_warns(self, isolated_config, caplog):
        parsed = create_parser().parse_args(["in.html"])
        with caplog.at_level(logging.WARNING, logger="mdedit.cli"):
            markdown_options, _ = build_options(parsed, {"markdown": {"colour": "red"}})
        assert markdown_options.bullet_marker == "-"
        assert "colour" in caplog.text


@pytest.mark.unit
@pytest.mark.cli
class TestErrors:
    """Tests for exit codes on failure."""

    def test_missing_input(self, isolated_config, capsys):
        assert main([str(isolated_config / "missing.html")]) == EXIT_INPUT_ERROR
        assert "cannot read" in capsys.readouterr().err

    def test_undecodable_input(self, isolated_config, capsys):
        source = isolated_config / "latin.html"
        source.write_bytes(b"<p>\xff\xfe</p>")
        assert main([str(source)]) == EXIT_INPUT_ERROR
        captured = capsys.readouterr()
        assert "cannot read" in captured.err
        assert captured.out == ""

    def test_unknown_tag(self, isolated_config, capsys):
        source = isolated_config / "span.html"
        source.write_text("<p>a<span>b</span></p>", encoding="utf-8")
        assert main([str(source)]) == EXIT_ERROR
        assert "Unknown tag 'span' with content 'b'" in capsys.readouterr().err

    def test_unsupported_heading(self, isolated_config, capsys):
        source = isolated_config / "h6.html"
        source.write_text("<h6>deep</h6>", encoding="utf-8")
        assert main([str(source)]) == EXIT_ERROR
        captured = capsys.readouterr()
        assert "Unknown tag 'h6' with content 'deep'" in captured.err
        assert captured.out == ""

    def test_invalid_flag_choice(self, sample_file):
        with pytest.raises(SystemExit) as exc_info:
            main([str(sample_file), "--bullet-marker", "x"])
        assert exc_info.value.code == 2

    def test_log_file(self, sample_file, isolated_config):
        log_file = isolated_config / "run.log"
        assert main([str(sample_file), "--log-level", "debug", "--log-file", str(log_file)]) == EXIT_SUCCESS
        assert log_file.exists()
