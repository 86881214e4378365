"""Tests for the stylesheet splitter and the declaration parser."""

import pytest

from ns_tailwind.model import AtRule, Declaration, Rule
from ns_tailwind.parser import parse_declarations, split_stylesheet


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


class TestSplitRules:
    def test_single_rule(self):
        nodes = split_stylesheet(".a { color: red; }")
        assert nodes == [Rule(selector=".a", body="color: red;")]

    def test_rules_in_source_order(self):
        nodes = split_stylesheet(".a { color: red; }\n.b { color: blue; }")
        assert [n.selector for n in nodes] == [".a", ".b"]

    def test_selector_list_kept_whole(self):
        nodes = split_stylesheet(":root, :host { --x: 1; }")
        assert nodes[0].selector == ":root, :host"

    def test_empty_body_discarded(self):
        assert split_stylesheet(".a {   }") == []

    def test_nested_braces_stay_in_body(self):
        nodes = split_stylesheet(".a { b { color: red; } } .c { color: blue; }")
        assert len(nodes) == 2
        assert nodes[0].body == "b { color: red; }"
        assert nodes[1] == Rule(selector=".c", body="color: blue;")


# ---------------------------------------------------------------------------
# At-rules
# ---------------------------------------------------------------------------


class TestSplitAtRules:
    def test_blockless_at_rule(self):
        nodes = split_stylesheet("@layer theme, base, utilities;")
        assert nodes == [AtRule(name="layer", params="theme, base, utilities", body=None)]
        assert not nodes[0].has_block

    def test_block_at_rule_params(self):
        nodes = split_stylesheet("@media (min-width: 40rem) { .a { color: red; } }")
        assert len(nodes) == 1
        node = nodes[0]
        assert node.name == "media"
        assert node.params == "(min-width: 40rem)"
        assert node.body.strip() == ".a { color: red; }"

    def test_deeply_nested_body(self):
        css = "@layer a { @layer b { @layer c { .x { color: red; } } } } .y { color: blue; }"
        nodes = split_stylesheet(css)
        assert [type(n) for n in nodes] == [AtRule, Rule]
        assert nodes[0].body.strip() == "@layer b { @layer c { .x { color: red; } } }"

    def test_vendor_prefixed_name(self):
        nodes = split_stylesheet("@-webkit-keyframes spin { to { opacity: 0; } }")
        assert nodes[0].name == "-webkit-keyframes"

    def test_at_rule_then_rule(self):
        nodes = split_stylesheet("@layer base;\n.a { color: red; }")
        assert isinstance(nodes[0], AtRule)
        assert nodes[1] == Rule(selector=".a", body="color: red;")


# ---------------------------------------------------------------------------
# Malformed input
# ---------------------------------------------------------------------------


class TestMalformedInput:
    def test_unterminated_block_runs_to_end(self):
        assert split_stylesheet(".a { color: red;") == [Rule(selector=".a", body="color: red;")]

    def test_trailing_text_without_brace_dropped(self):
        nodes = split_stylesheet(".a { color: red; } trailing garbage")
        assert nodes == [Rule(selector=".a", body="color: red;")]

    def test_unmatched_at_sign(self):
        assert split_stylesheet("@charset") == []

    @pytest.mark.parametrize("css", ["", "   \n\t", "}}}}", "{{{{", "@@@", ";;;"])
    def test_garbage_terminates(self, css):
        split_stylesheet(css)


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------


class TestParseDeclarations:
    def test_order_preserved(self):
        decls = parse_declarations("color: red; margin: 0; color: blue")
        assert decls == [
            Declaration("color", "red"),
            Declaration("margin", "0"),
            Declaration("color", "blue"),
        ]

    def test_split_on_first_colon(self):
        decls = parse_declarations("background-image: url(data:image/png;base64)")
        assert decls == [Declaration("background-image", "url(data:image/png")]

    def test_whitespace_trimmed(self):
        decls = parse_declarations("\n  --tw-space-x-reverse :  0 ;\n")
        assert decls == [Declaration("--tw-space-x-reverse", "0")]

    def test_invalid_segments_skipped(self):
        assert parse_declarations("color:; : red; junk; ") == []

    def test_custom_property_flag(self):
        assert Declaration("--spacing", "4").is_custom_property
        assert not Declaration("margin", "4").is_custom_property
