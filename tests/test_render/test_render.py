"""Tests for CSS text rendering."""

from jss.model.options import RuleOptions
from jss.model.rule import Rule, RuleKind
from jss.render import render_rule


class TestRegular:
    def test_scenario_anonymous(self, engine):
        rule = engine.create_rule({"float": "left"})
        assert render_rule(rule) == ".jss-0-0 {\n  float: left;\n}"

    def test_two_declarations(self, engine):
        rule = engine.create_rule("a", {"float": "left", "width": "1px"}, RuleOptions(named=False))
        assert rule.to_string() == "a {\n  float: left;\n  width: 1px;\n}"

    def test_repeated_property(self, engine):
        rule = engine.create_rule(
            "a", {"display": ["inline", "run-in"]}, RuleOptions(named=False)
        )
        assert rule.to_string() == "a {\n  display: inline;\n  display: run-in;\n}"

    def test_empty_block(self):
        assert render_rule(Rule(RuleKind.REGULAR, "a")) == "a {\n}"

    def test_missing_selector_has_empty_header(self, engine):
        rule = engine.create_rule({"float": "left"}, RuleOptions(named=False))
        assert rule.to_string() == "{\n  float: left;\n}"

    def test_numbers(self, engine):
        rule = engine.create_rule("a", {"z-index": 0, "opacity": 0.5})
        assert rule.to_string() == "a {\n  z-index: 0;\n  opacity: 0.5;\n}"

    def test_nested_bodies_not_rendered(self, engine):
        rule = engine.create_rule("a", {"color": "red", "&:hover": {"color": "blue"}})
        assert rule.to_string() == "a {\n  color: red;\n}"

    def test_idempotent(self, engine):
        rule = engine.create_rule("@media print", {"a": {"color": "red"}})
        assert rule.to_string() == rule.to_string()

    def test_reflects_mutation(self, engine):
        rule = engine.create_rule("a", {"color": "red"})
        rule.set("width", "1px")
        assert rule.to_string() == "a {\n  color: red;\n  width: 1px;\n}"


class TestContainers:
    def test_empty_keyframes(self):
        assert render_rule(Rule(RuleKind.KEYFRAME, "@keyframes id")) == "@keyframes id {\n}"

    def test_conditional_with_two_children(self, engine):
        rule = engine.create_rule(
            "@media print",
            {"a": {"color": "red"}, "b": {"display": ["none", "contents"]}},
            RuleOptions(named=False),
        )
        assert rule.to_string() == (
            "@media print {\n"
            "  a {\n    color: red;\n  }\n"
            "  b {\n    display: none;\n    display: contents;\n  }\n"
            "}"
        )

    def test_three_levels(self, engine):
        rule = engine.create_rule(
            "@supports (display: grid)",
            {"@media print": {"a": {"color": "red"}}},
            RuleOptions(named=False),
        )
        assert rule.to_string() == (
            "@supports (display: grid) {\n"
            "  @media print {\n"
            "    a {\n"
            "      color: red;\n"
            "    }\n"
            "  }\n"
            "}"
        )

    def test_simple_inside_conditional(self, engine):
        rule = engine.create_rule("@media print", {}, RuleOptions(named=False))
        rule.children.append(Rule(RuleKind.SIMPLE, "@import", value='"x.css"'))
        assert rule.to_string() == '@media print {\n  @import "x.css";\n}'

    def test_level_argument(self, engine):
        rule = engine.create_rule("a", {"color": "red"})
        assert render_rule(rule, level=1) == "  a {\n    color: red;\n  }"
