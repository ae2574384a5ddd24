"""
Tests for token assembly and shell quoting.
"""

import pytest

from cmdforge.core.models.command import ArgumentSpec, CommandDefinition
from cmdforge.core.models.resolution import ErrorCode
from cmdforge.core.services.command_builder.domain.normalize import normalize_values
from cmdforge.core.services.command_builder.domain.quoting import (
    is_free_form,
    needs_quoting,
    render_value,
    shell_quote,
)
from cmdforge.core.services.command_builder.domain.tokens import assemble_tokens, render_flag

# ── Quoting ─────────────────────────────────────────────────────────


class TestShellQuote:
    def test_plain(self):
        assert shell_quote("a b") == "'a b'"

    def test_embedded_single_quote(self):
        assert shell_quote("it's") == "'it'\\''s'"

    def test_empty(self):
        assert shell_quote("") == "''"


class TestNeedsQuoting:
    @pytest.mark.parametrize("value", [
        "a b", "$HOME", "`id`", 'say "hi"', "it's", "a;b", "a|b", "a&b",
        "(x)", "<in", "out>", "*.py", "?", "[ab]", "{x}", "a,b", "a\tb", "!x", "#c",
    ])
    def test_special_chars(self, value):
        assert needs_quoting(ArgumentSpec(id="file"), value)

    @pytest.mark.parametrize("value", ["log.txt", "/var/log/syslog", "8080:80", "~", "+100M", "-%mem"])
    def test_safe_values(self, value):
        assert not needs_quoting(ArgumentSpec(id="file"), value)

    def test_free_form_always_quoted(self):
        assert needs_quoting(ArgumentSpec(id="pattern"), "error")

    def test_explicit_quote_overrides_id(self):
        assert not is_free_form(ArgumentSpec(id="pattern", quote=False))
        assert is_free_form(ArgumentSpec(id="path", quote=True))

    def test_numbers_and_selects_never_quoted(self):
        assert not needs_quoting(ArgumentSpec(id="pattern", type="number", flag="-n"), "1 2")
        select = ArgumentSpec(id="query", type="select", flag="-q", options=[{"value": "a b"}])
        assert not needs_quoting(select, "a b")

    def test_render_value_number(self):
        assert render_value(ArgumentSpec(id="n", type="number", flag="-n"), 4) == "4"


# ── Flags ───────────────────────────────────────────────────────────


class TestRenderFlag:
    def test_switch(self):
        assert render_flag("-l", ArgumentSpec(id="l", type="checkbox", flag="-l"), True) == ["-l"]

    def test_valued(self):
        assert render_flag("--name", ArgumentSpec(id="name", flag="--name"), "web") == ["--name", "web"]

    def test_assignment_style(self):
        arg = ArgumentSpec(id="type", type="select", flag="-type=", options=[{"value": "MX"}])
        assert render_flag("-type=", arg, "MX") == ["-type=MX"]

    def test_bare_dash_suffix(self):
        arg = ArgumentSpec(id="signal", type="select", flag="-", options=[{"value": "9"}])
        assert render_flag("-", arg, "9") == ["-9"]

    def test_bare_dash_switch(self):
        assert render_flag("-", ArgumentSpec(id="login", type="checkbox", flag="-"), True) == ["-"]

    def test_quoted_value_stays_one_token(self):
        assert render_flag("-m", ArgumentSpec(id="message", flag="-m"), "fix bug") == ["-m", "'fix bug'"]


# ── Assembly ────────────────────────────────────────────────────────


class TestAssembleTokens:
    def test_switches_before_valued_flags(self, toy):
        out = assemble_tokens(toy, normalize_values(toy, {
            "src": "a", "label": "x", "level": 3, "verbose": True, "force": True,
        }))
        assert out.flags == ["-v", "-f", "--level", "3", "--label", "x"]
        assert out.positionals == ["a"]
        assert out.tokens == ["-v", "-f", "--level", "3", "--label", "x", "a"]

    def test_positionals_by_position(self, toy):
        out = assemble_tokens(toy, normalize_values(toy, {"dst": "b", "src": "a"}))
        assert out.positionals == ["a", "b"]

    def test_absent_values_emit_nothing(self, toy):
        out = assemble_tokens(toy, normalize_values(toy, {"src": "a", "label": "", "mode": ""}))
        assert out.tokens == ["a"]

    def test_input_order_irrelevant(self, toy):
        values = {"src": "a", "dst": "b", "verbose": True, "mode": "fast"}
        reversed_values = dict(reversed(list(values.items())))
        assert (
            assemble_tokens(toy, normalize_values(toy, values)).tokens
            == assemble_tokens(toy, normalize_values(toy, reversed_values)).tokens
        )

    def test_positional_gap(self, toy):
        out = assemble_tokens(toy, normalize_values(toy, {"dst": "b"}))
        assert [e.code for e in out.errors] == [ErrorCode.POSITIONAL_GAP]
        assert out.errors[0].position == 2
        assert out.positionals == ["b"]

    def test_trailing_absent_positional_is_fine(self, toy):
        out = assemble_tokens(toy, normalize_values(toy, {"src": "a"}))
        assert out.errors == []

    def test_unplaced_argument_not_rendered(self, catalog):
        man = catalog.by_id("man")
        out = assemble_tokens(man, normalize_values(man, {"command": "ls", "section": "1"}))
        assert out.tokens == ["ls"]

    def test_invalid_values_not_rendered(self, toy):
        out = assemble_tokens(toy, normalize_values(toy, {"src": "a", "level": 42}))
        assert out.tokens == ["a"]

    def test_positionals_first(self, catalog):
        find = catalog.by_id("find")
        out = assemble_tokens(find, normalize_values(find, {"size": "+100M", "path": ".", "type": "f"}))
        assert out.tokens == [".", "-type", "f", "-size", "+100M"]

    def test_positionals_first_keeps_flag_groups(self):
        command = CommandDefinition(
            id="walk",
            base="walk",
            positionals_first=True,
            args=[
                {"id": "root", "positional": True, "position": 1},
                {"id": "depth", "type": "number", "flag": "-depth"},
                {"id": "follow", "type": "checkbox", "flag": "-L"},
            ],
        )
        out = assemble_tokens(command, normalize_values(command, {"depth": 2, "follow": True, "root": "/srv"}))
        assert out.flags == ["-L", "-depth", "2"]
        assert out.tokens == ["/srv", "-L", "-depth", "2"]
