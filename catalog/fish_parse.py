from __future__ import annotations

from typing import List, Optional, Tuple, Union

from .model import Function
from .text import decode_source, is_quoted_escape, read_word, split_lines


DESCRIPTION_FLAGS = ("-d", "--description")


def _statements(line: str) -> List[str]:
	"""Split a line on unquoted `;`, dropping a trailing `#` comment."""
	statements: List[str] = []
	quote = ""
	start = 0
	i = 0
	while i < len(line):
		ch = line[i]
		if quote:
			if ch == "\\" and is_quoted_escape(quote, line, i):
				i += 1
			elif ch == quote:
				quote = ""
		elif ch in "\"'":
			quote = ch
		elif ch == "\\":
			i += 1
		elif ch == ";":
			statements.append(line[start:i])
			start = i + 1
		elif ch == "#" and (i == 0 or line[i - 1].isspace() or line[i - 1] == ";"):
			statements.append(line[start:i])
			return statements
		i += 1
	statements.append(line[start:])
	return statements


def _words(statement: str) -> List[Tuple[str, str]]:
	words: List[Tuple[str, str]] = []
	i = 0
	while True:
		while i < len(statement) and statement[i].isspace():
			i += 1
		if i >= len(statement):
			break
		raw, value, i = read_word(statement, i)
		words.append((raw, value))
	return words


def _description(flags: List[Tuple[str, str]]) -> str:
	for index, (raw, value) in enumerate(flags):
		if raw in DESCRIPTION_FLAGS:
			if index + 1 < len(flags):
				return flags[index + 1][1]
			return ""
		if raw.startswith("--description="):
			return value[len("--description="):]
		if raw.startswith("-d") and not raw.startswith("--"):
			return value[2:]
	return ""


def match_header(statement: str) -> Optional[Function]:
	words = _words(statement)
	if len(words) < 2 or words[0][0] != "function":
		return None
	name = words[1][0]
	if name.startswith("-"):
		return None
	return Function(name=name, description=_description(words[2:]))


def parse_fish(content: Union[bytes, str]) -> List[Function]:
	functions: List[Function] = []
	for line in split_lines(decode_source(content)):
		for statement in _statements(line):
			record = match_header(statement)
			if record is not None:
				functions.append(record)
	return functions
