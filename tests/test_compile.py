"""Tests for zephyri.routing.compile — pattern to regex translation."""

import re

import pytest

from zephyri.errors import CompileError
from zephyri.routing.compile import compile_route, escape_regexp, replace_all, route_expression

QUERY = r"(\?[a-zA-Z0-9%_=&-]*)?\Z"


class TestRouteExpression:
    def test_literal(self) -> None:
        assert route_expression("/basic/") == "^/basic/" + QUERY

    def test_param(self) -> None:
        assert route_expression("/basic/:param") == (
            "^/basic/(?P<param>[,a-zA-Z0-9%_-]*)" + QUERY
        )

    def test_single_wildcard(self) -> None:
        assert route_expression("/basic/*") == "^/basic/[,a-zA-Z0-9_-]*" + QUERY

    def test_double_wildcard(self) -> None:
        assert route_expression("/basic/**") == "^/basic/[,/a-zA-Z0-9_-]*" + QUERY

    def test_multiple_params(self) -> None:
        assert route_expression("/user/:name/:message") == (
            "^/user/(?P<name>[,a-zA-Z0-9%_-]*)/(?P<message>[,a-zA-Z0-9%_-]*)" + QUERY
        )

    def test_both_wildcards(self) -> None:
        assert route_expression("/*/files/**") == (
            "^/[,a-zA-Z0-9_-]*/files/[,/a-zA-Z0-9_-]*" + QUERY
        )

    def test_only_first_single_wildcard_is_replaced(self) -> None:
        assert route_expression("/a/*/b/*") == "^/a/[,a-zA-Z0-9_-]*/b/*" + QUERY

    def test_regex_literals_pass_through(self) -> None:
        assert route_expression(r"/@(\w{1,16})/get/:id") == (
            r"^/@(\w{1,16})/get/(?P<id>[,a-zA-Z0-9%_-]*)" + QUERY
        )

    def test_bare_colon_is_literal(self) -> None:
        assert route_expression("/a:/b") == "^/a:/b" + QUERY


class TestCompileRoute:
    def test_returns_pattern(self) -> None:
        assert isinstance(compile_route("/"), re.Pattern)

    def test_root(self) -> None:
        assert compile_route("/").match("/")

    def test_literal_matches_exactly(self) -> None:
        pattern = compile_route("/hello/world")
        assert pattern.match("/hello/world")
        assert pattern.match("/hello/world?a=1&b=two")
        assert not pattern.match("/hello/world/")
        assert not pattern.match("/hello/worlds")
        assert not pattern.match("/hello")
        assert not pattern.match("x/hello/world")

    def test_no_trailing_newline_match(self) -> None:
        assert not compile_route("/app").match("/app\n")

    def test_case_sensitive(self) -> None:
        assert not compile_route("/App").match("/app")

    def test_param_captures(self) -> None:
        match = compile_route("/basic/:param").match("/basic/anything123")
        assert match is not None
        assert match.groupdict() == {"param": "anything123"}

    def test_param_may_be_empty(self) -> None:
        match = compile_route("/basic/:param").match("/basic/")
        assert match is not None
        assert match.groupdict() == {"param": ""}

    def test_param_allows_percent_and_comma(self) -> None:
        match = compile_route("/tag/:name").match("/tag/a%20b,c")
        assert match is not None
        assert match.groupdict() == {"name": "a%20b,c"}

    def test_param_does_not_cross_slash(self) -> None:
        assert not compile_route("/basic/:param").match("/basic/a/b")

    def test_no_params_gives_empty_groupdict(self) -> None:
        match = compile_route("/plain").match("/plain")
        assert match is not None
        assert match.groupdict() == {}

    def test_single_wildcard_stays_in_segment(self) -> None:
        pattern = compile_route("/basic/*")
        assert pattern.match("/basic/xyz")
        assert not pattern.match("/basic/a/b")

    def test_double_wildcard_crosses_segments(self) -> None:
        pattern = compile_route("/basic/**")
        assert pattern.match("/basic/xyz")
        assert pattern.match("/basic/a/b")

    def test_catch_all(self) -> None:
        pattern = compile_route("**")
        assert pattern.match("/")
        assert pattern.match("/user/bree/123")

    def test_prefixed_param(self) -> None:
        match = compile_route("/@:username/profile").match("/@bree/profile")
        assert match is not None
        assert match.groupdict() == {"username": "bree"}

    def test_second_single_wildcard_is_a_regex_star(self) -> None:
        pattern = compile_route("/a/*/b/*")
        assert pattern.match("/a/x/b/")
        assert pattern.match("/a/x/b//")
        assert not pattern.match("/a/x/b/y")


class TestCompileErrors:
    def test_invalid_group_name(self) -> None:
        with pytest.raises(CompileError) as exc_info:
            compile_route("/user/:user-id")
        assert exc_info.value.pattern == "/user/:user-id"
        assert "(?P<user-id>" in exc_info.value.expression
        assert isinstance(exc_info.value.__cause__, re.error)

    def test_group_name_starting_with_digit(self) -> None:
        with pytest.raises(CompileError):
            compile_route("/:1st")

    def test_duplicate_param_name(self) -> None:
        with pytest.raises(CompileError):
            compile_route("/:id/:id")

    def test_unbalanced_literal(self) -> None:
        with pytest.raises(CompileError) as exc_info:
            compile_route("/broken(")
        assert "/broken(" in str(exc_info.value)


class TestHelpers:
    def test_escape_regexp(self) -> None:
        assert escape_regexp("a.b*c") == r"a\.b\*c"
        assert escape_regexp("(x)[y]{z}") == r"\(x\)\[y\]\{z\}"
        assert escape_regexp("name_1,-") == "name_1,-"

    def test_replace_all_replaces_every_match(self) -> None:
        result = replace_all("a:x b:y", re.compile(r":(\w)"), lambda v: v.upper())
        assert result == "aX bY"

    def test_replace_all_no_match(self) -> None:
        assert replace_all("plain", re.compile(r":(\w)"), lambda v: v) == "plain"

    def test_replace_all_inserts_literally(self) -> None:
        result = replace_all(":a", re.compile(r":(\w)"), lambda v: r"\1\g<0>")
        assert result == r"\1\g<0>"
