"""Tests for PropertyGroup condition parsing."""

from __future__ import annotations

import pytest

from msbuildxml.config import ConditionKind, ParsedCondition
from msbuildxml.dotnet.condition import configuration_key, parse_condition


class TestParseCondition:
    def test_missing_attribute_is_unconditioned(self):
        condition = parse_condition(None)
        assert condition.kind is ConditionKind.UNCONDITIONED
        assert condition.value is None

    @pytest.mark.parametrize("raw", [
        " '$(Configuration)|$(Platform)' == 'Debug|AnyCPU' ",
        "'$(Configuration)|$(Platform)'=='Debug|AnyCPU'",
        "'$(Configuration)|$(Platform)'   ==\t'Debug|AnyCPU'",
    ])
    def test_configuration_platform_whitespace_insensitive(self, raw):
        condition = parse_condition(raw)
        assert condition.kind is ConditionKind.CONFIGURATION_PLATFORM
        assert condition.value == "Debug|AnyCPU"
        assert condition.raw == raw

    def test_empty_literal_is_recognised(self):
        condition = parse_condition("'$(Configuration)|$(Platform)' == ''")
        assert condition.kind is ConditionKind.CONFIGURATION_PLATFORM
        assert condition.value == ""

    @pytest.mark.parametrize("raw", [
        "",
        "'$(Configuration)|$(Platform)' != 'Debug|AnyCPU'",
        "'$(Platform)|$(Configuration)' == 'AnyCPU|Debug'",
        "'$(Configuration)' == 'Debug'",
        "'$(Configuration)|$(Platform)' == 'Debug|AnyCPU' And '$(Foo)' == 'Bar'",
        "\"$(Configuration)|$(Platform)\" == \"Debug|AnyCPU\"",
    ])
    def test_other_shapes_are_unrecognised(self, raw):
        condition = parse_condition(raw)
        assert condition.kind is ConditionKind.UNRECOGNIZED
        assert condition.value is None
        assert not condition.matches("Debug|AnyCPU")


class TestParsedConditionMatches:
    def test_exact_key(self):
        condition = parse_condition("'$(Configuration)|$(Platform)' == 'Release|x64'")
        assert condition.matches("Release|x64")

    def test_case_sensitive(self):
        condition = parse_condition("'$(Configuration)|$(Platform)' == 'Release|x64'")
        assert not condition.matches("release|x64")
        assert not condition.matches("Release|X64")

    def test_unconditioned_never_matches(self):
        assert not ParsedCondition(kind=ConditionKind.UNCONDITIONED).matches("Debug|AnyCPU")


class TestConfigurationKey:
    def test_joins_with_pipe(self):
        assert configuration_key("Debug", "AnyCPU") == "Debug|AnyCPU"
