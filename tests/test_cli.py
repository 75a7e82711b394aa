from __future__ import annotations

import httpx
import pytest
from typer.testing import CliRunner

import cleanpg.cli.app as cli_app
from cleanpg.cli.app import app

runner = CliRunner()

SOURCE = (
    b"<!DOCTYPE html><html><head><title>T</title></head>"
    b"<body><nav>menu</nav><h1>Title</h1><p>Read <a href='/more'>more</a></p></body></html>"
)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CLEANPG_LOG_FILE", str(tmp_path / "log.txt"))
    return tmp_path


@pytest.fixture
def fetched(monkeypatch):
    calls = []

    def fake_read_html(url, config=None, **kwargs):
        calls.append(url)
        return SOURCE

    monkeypatch.setattr(cli_app, "read_html", fake_read_html)
    return calls


def test_clean_to_stdout(workdir, fetched):
    result = runner.invoke(app, ["clean", "http://example.com", "--nostyle"])
    assert result.exit_code == 0, result.output
    assert fetched == ["http://example.com"]
    assert result.stdout.startswith("<!DOCTYPE html>\n<html>\n<head>\n<title>T</title></head>")
    assert '\n<p>Read \n<a href="/more">more</a></p>' in result.stdout
    assert "style=" not in result.stdout

    log = (workdir / "log.txt").read_text()
    assert "skipping automatic tag-level style embedding" in log
    assert "created a clean version of http://example.com" in log


def test_short_flags(workdir, fetched):
    result = runner.invoke(app, ["clean", "-p", "-n", "-l", "http://example.com"])
    assert result.exit_code == 0, result.output
    assert "menu" not in result.stdout
    assert "\n<h1>Title</h1>" in result.stdout
    assert "<a" not in result.stdout


def test_styles_on_by_default(workdir, fetched):
    result = runner.invoke(app, ["clean", "http://example.com"])
    assert result.exit_code == 0, result.output
    assert '\n<h1 style="font-size: 175%;margin-top: 40px;">Title</h1>' in result.stdout


def test_output_and_save_files(workdir, fetched):
    result = runner.invoke(
        app,
        ["clean", "http://example.com", "-o", "clean.html", "-s", "source.html", "-n"],
    )
    assert result.exit_code == 0, result.output
    assert result.stdout == ""
    assert (workdir / "source.html").read_bytes() == SOURCE
    assert "\n<h1>Title</h1>" in (workdir / "clean.html").read_text(encoding="utf-8")


@pytest.mark.parametrize("flag", ["-o", "-s"])
def test_files_need_html_extension(workdir, fetched, flag):
    result = runner.invoke(app, ["clean", "http://example.com", flag, "out.txt"])
    assert result.exit_code == 1
    assert fetched == []
    assert "must have .html extension" in (workdir / "log.txt").read_text()


def test_fetch_failure_exits_nonzero(workdir, monkeypatch):
    def failing_read_html(url, config=None, **kwargs):
        raise httpx.ConnectError("connection refused")

    monkeypatch.setattr(cli_app, "read_html", failing_read_html)
    result = runner.invoke(app, ["clean", "http://example.invalid"])
    assert result.exit_code == 1
    assert "Cannot read [http://example.invalid]" in (workdir / "log.txt").read_text()


def test_render_failure_exits_nonzero(workdir, fetched, monkeypatch):
    from cleanpg.render.errors import ParseErrorNode

    def failing_clean(*args, **kwargs):
        raise ParseErrorNode("bad markup")

    monkeypatch.setattr(cli_app, "clean_html", failing_clean)
    result = runner.invoke(app, ["clean", "http://example.com"])
    assert result.exit_code == 1
    assert "Could not clean [http://example.com]" in (workdir / "log.txt").read_text()


def test_config_file_toggles(workdir, fetched):
    (workdir / "cfg.yaml").write_text("render:\n  inject_style: false\n  render_links: false\n")
    result = runner.invoke(app, ["clean", "http://example.com", "--config", "cfg.yaml"])
    assert result.exit_code == 0, result.output
    assert "style=" not in result.stdout
    assert "<a" not in result.stdout


def test_policy_command():
    result = runner.invoke(app, ["policy"])
    assert result.exit_code == 0, result.output
    assert "href" in result.stdout
    assert "blockquote" in result.stdout


def test_bad_config_exits_nonzero(workdir, fetched, monkeypatch):
    monkeypatch.setenv("CLEANPG_INJECT_STYLE", "sometimes")
    result = runner.invoke(app, ["clean", "http://example.com"])
    assert result.exit_code == 1
    assert fetched == []


def test_missing_url_shows_usage():
    result = runner.invoke(app, ["clean"])
    assert result.exit_code != 0


def test_bad_log_level_exits_nonzero(workdir, fetched, monkeypatch):
    monkeypatch.setenv("CLEANPG_LOG_LEVEL", "verbose")
    result = runner.invoke(app, ["clean", "http://example.com"])
    assert result.exit_code == 1
    assert not isinstance(result.exception, ValueError)
    assert fetched == []
    assert not (workdir / "log.txt").exists()
