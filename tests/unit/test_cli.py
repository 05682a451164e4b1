"""Unit tests for the command-line interface."""

import io
import json

import pytest

from legacy_url.cli import main
from legacy_url.config import reset_config


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Use default configuration."""
    for name in ("PARSE_DECODE_QUERY", "PARSE_SLASHES_DENOTE_HOST", "OUTPUT_INDENT"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


def read_records(capsys):
    """Parse one JSON record per output line."""
    out = capsys.readouterr().out
    return [json.loads(line) for line in out.splitlines() if line]


class TestCLI:
    """Test suite for the CLI."""

    def test_single_url(self, capsys):
        """Test a URL argument is printed as an indented JSON record."""
        assert main(["http://example.com:80/"]) == 0

        record = json.loads(capsys.readouterr().out)
        assert record["input"] == "http://example.com:80/"
        assert record["host"] == "example.com:80"
        assert record["port"] == "80"
        assert record["auth"] is None

    def test_no_input(self, capsys):
        """Test a missing URL is a usage error."""
        assert main([]) == 1

    def test_decode_query(self, capsys):
        """Test --decode-query."""
        assert main(["--decode-query", "--indent", "0", "http://x.com/?a=1&a=2"]) == 0

        (record,) = read_records(capsys)
        assert record["query"] == {"a": ["1", "2"]}

    def test_slashes_denote_host(self, capsys):
        """Test --slashes-denote-host."""
        assert main(["--slashes-denote-host", "--indent", "0", "//foo/bar"]) == 0

        (record,) = read_records(capsys)
        assert record["host"] == "foo"

    def test_exclude_none(self, capsys):
        """Test absent fields can be omitted."""
        assert main(["--exclude-none", "--indent", "0", "foo:"]) == 0

        (record,) = read_records(capsys)
        assert record == {"input": "foo:", "protocol": "foo:", "href": "foo:"}

    def test_stdin(self, capsys, monkeypatch):
        """Test '-' reads one URL per line, skipping blank lines."""
        monkeypatch.setattr("sys.stdin", io.StringIO("http://a.com/\n\nhttp://b.com/\n"))

        assert main(["--indent", "0", "-"]) == 0

        records = read_records(capsys)
        assert [r["hostname"] for r in records] == ["a.com", "b.com"]
