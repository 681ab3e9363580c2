from textwrap import dedent

import pytest

from catalog.fish_parse import match_header, parse_fish
from catalog.model import Function


def test_parse_all_header_forms():
	code = dedent(
		"""
		function f1 -d "f1 description comment"
			echo e
		end

		function f2
			echo e
		end

		function f3 --description "f3 description comment"
			echo e
		end

		function f4 --description "f4 description comment";echo e; end

		function f5 -d "f5 description comment";echo e; end

		function f6;echo e; end

		function f7 -d "function to do something";echo e; end
		"""
	)
	functions = parse_fish(code.encode())
	assert len(functions) == 7
	assert functions == [
		Function(name="f1", description="f1 description comment"),
		Function(name="f2"),
		Function(name="f3", description="f3 description comment"),
		Function(name="f4", description="f4 description comment"),
		Function(name="f5", description="f5 description comment"),
		Function(name="f6"),
		Function(name="f7", description="function to do something"),
	]


def test_flag_after_other_flags():
	code = "function greet --argument-names who -d 'say hello'\n\techo hi $who\nend\n"
	assert parse_fish(code) == [Function(name="greet", description="say hello")]


@pytest.mark.parametrize(
	"statement, description",
	[
		('function f --description="long form"', "long form"),
		('function f -d"attached"', "attached"),
		("function f -d plain", "plain"),
		(r'function f -d "say \"hi\""', 'say "hi"'),
		("function f -d", ""),
		('function f -d "unterminated', "unterminated"),
		("function f -d 'it\\'s'", "it's"),
		('function f -d "C:\\temp"', "C:\\temp"),
	],
)
def test_description_flag_variants(statement, description):
	assert match_header(statement) == Function(name="f", description=description)


def test_semicolons_inside_quotes_do_not_split():
	code = 'function f -d "a; b"; echo; end\n'
	assert parse_fish(code) == [Function(name="f", description="a; b")]


def test_comments_are_ignored():
	code = dedent(
		"""\
		# function commented -d "nope"
		function real -d "yes" # function trailing
			echo "# function quoted"
		end
		"""
	)
	assert parse_fish(code) == [Function(name="real", description="yes")]


def test_nested_and_indented_functions_in_source_order():
	code = "begin; function a; end; end\n    function b\n    end\n"
	assert [f.name for f in parse_fish(code)] == ["a", "b"]


@pytest.mark.parametrize(
	"statement",
	["function", "  function  ", "functions -q f", "echo function f", "function -d x"],
)
def test_non_headers(statement):
	assert match_header(statement) is None


def test_comment_lines_do_not_become_descriptions():
	code = "# helper\nfunction f\nend\n"
	assert parse_fish(code) == [Function(name="f")]


def test_empty_input():
	assert parse_fish(b"") == []


def test_escaped_single_quote_does_not_swallow_later_statements():
	code = "function f -d 'it\\'s'; end; function g; end\n"
	assert parse_fish(code) == [
		Function(name="f", description="it's"),
		Function(name="g"),
	]


def test_backslash_in_double_quotes_before_separator():
	code = 'function f -d "dir\\\\"; end; function g -d "C:\\temp"; end\n'
	assert parse_fish(code) == [
		Function(name="f", description="dir\\"),
		Function(name="g", description="C:\\temp"),
	]
