#!/usr/bin/env python3
"""
Tests for the browsy command-line entry point.

Runs main() end to end against httpx.MockTransport and checks argument
validation and exit codes.

Run with: python3 test_browsy.py
"""

import io
import os
import sys

import httpx
import pytest
from rich.console import Console

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(__file__))

from browsy import SearchInput, main, parse_input
from crate_search import Pagination


DOCS_PAGE = """
<ul>
  <li><a href="/clap/latest/clap/" class="release">
    <div class="name">clap-4.5.17</div>
    <div class="description">A simple to use, efficient, and full-featured Command Line Argument Parser</div>
    <div class="date">Sep 4, 2024</div>
  </a></li>
</ul>
"""


def _console() -> Console:
    return Console(file=io.StringIO(), width=200, force_terminal=False, color_system=None)


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


# ============================================================================
# Argument parsing
# ============================================================================

def test_parse_input_defaults():
    params = parse_input(["-q", "generics"])

    assert params == SearchInput(query="generics")
    assert params.source == "docs"
    assert params.quantity == 10
    assert params.page == 1
    assert params.pagination is None


def test_parse_input_custom_pagination():
    params = parse_input(["-q", "generics", "-c", "--quantity", "30", "--page", "2"])
    assert params.pagination == Pagination(count=30, page=2)


def test_parse_input_quantity_ignored_without_custom():
    params = parse_input(["--query", "generics", "--quantity", "30"])
    assert params.pagination is None


@pytest.mark.parametrize("argv", [
    [],
    ["-q", "x", "-s", "pypi"],
    ["-q", "x", "--quantity", "0"],
    ["-q", "x", "--page", "-1"],
    ["-q", ""],
])
def test_parse_input_rejects_bad_arguments(argv, capsys):
    with pytest.raises(SystemExit) as exc_info:
        parse_input(argv)
    assert exc_info.value.code == 2


# ============================================================================
# End to end
# ============================================================================

def test_main_docs_search_lists_crates():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, text=DOCS_PAGE)

    console = _console()
    code = main(["-q", "arg parser"], console=console, client=_client(handler))

    output = console.file.getvalue()
    assert code == 0
    assert seen == ["https://docs.rs/releases/search?query=arg+parser"]
    assert "Searching" in output
    assert "clap" in output
    assert "4.5.17" in output


def test_main_custom_search_sends_paginate_hash():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, text="")

    code = main(
        ["-q", "generics", "-c", "--quantity", "30", "--page", "2"],
        console=_console(),
        client=_client(handler)
    )

    assert code == 0
    assert seen == [
        "https://docs.rs/releases/search?paginate=P3E9Z2VuZXJpY3MmcGVyX3BhZ2U9MzAmcGFnZT0y"
    ]


@pytest.mark.parametrize("source", ["lib", "crates"])
def test_main_reports_unsupported_display_source(source):
    console = _console()
    code = main(
        ["-q", "tokio runtime", "-s", source],
        console=console,
        client=_client(lambda request: httpx.Response(200, text="<html></html>"))
    )

    assert code == 0
    assert "Unsupported source for result display" in console.file.getvalue()


def test_main_no_menu_skips_results():
    console = _console()
    code = main(
        ["-q", "clap", "--no-menu"],
        console=console,
        client=_client(lambda request: httpx.Response(200, text=DOCS_PAGE))
    )

    assert code == 0
    assert "4.5.17" not in console.file.getvalue()


class ClearingConsole(Console):
    """Console whose clear() wipes everything written so far, like a terminal."""

    def clear(self, home: bool = True) -> None:
        self.file.seek(0)
        self.file.truncate()


def test_main_interactive_flag_is_reserved():
    console = ClearingConsole(file=io.StringIO(), width=200, force_terminal=False, color_system=None)
    main(
        ["-q", "clap", "-i", "--no-menu"],
        console=console,
        client=_client(lambda request: httpx.Response(200, text=DOCS_PAGE))
    )
    assert "Interactive mode" in console.file.getvalue()


def test_main_network_failure_exit_code():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    code = main(["-q", "generics"], console=_console(), client=_client(handler))
    assert code == 3


def test_main_invalid_query_exit_code():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200)

    code = main(["-q", "bad\tquery"], console=_console(), client=_client(handler))

    assert code == 1
    assert calls == []


@pytest.mark.parametrize("extra", [[], ["-c", "--quantity", "10", "--page", "1"]])
def test_main_undecodable_query_exit_code(extra):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200)

    console = _console()
    code = main(["-q", "bad\udcffq", "--no-menu"] + extra, console=console, client=_client(handler))

    assert code == 1
    assert calls == []
    assert "Could not create request from string query" in console.file.getvalue()


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
