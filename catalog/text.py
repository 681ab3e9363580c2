"""Helpers shared by the scanners for turning raw source into description text."""

from __future__ import annotations

from typing import List, Optional, Tuple, Union

_BOM = "\ufeff"


def decode_source(content: Union[bytes, str]) -> str:
	if isinstance(content, str):
		text = content
	else:
		text = content.decode("utf-8", errors="replace")
	if text.startswith(_BOM):
		text = text[len(_BOM):]
	return text


def split_lines(text: str) -> List[str]:
	# str.splitlines also breaks on form feeds and unicode separators
	return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def clean_comment(line: str) -> Optional[str]:
	"""Return the text of a `#` comment line, or None when the line is not one.

	Only the first `#` is removed; the rest is trimmed and kept verbatim.
	"""
	stripped = line.strip()
	if not stripped.startswith("#"):
		return None
	return stripped[1:].strip()


QUOTED_ESCAPES = {
	"'": "'\\",
	'"': '"$\\\n',
}


def is_quoted_escape(quote: str, text: str, i: int) -> bool:
	"""Whether the backslash at `text[i]` escapes the next character inside `quote`."""
	return i + 1 < len(text) and text[i + 1] in QUOTED_ESCAPES[quote]


def read_word(text: str, start: int) -> Tuple[str, str, int]:
	"""Read one shell word beginning at `start`.

	Returns the raw source text of the word, its value with quotes removed,
	and the index just past it. Words end at unquoted whitespace. Inside quotes
	a backslash only escapes the characters listed in QUOTED_ESCAPES and is
	kept otherwise. An unterminated quote runs to the end of `text`.
	"""
	value: List[str] = []
	i = start
	quote = ""
	while i < len(text):
		ch = text[i]
		if quote:
			if ch == quote:
				quote = ""
			elif ch == "\\" and is_quoted_escape(quote, text, i):
				i += 1
				value.append(text[i])
			else:
				value.append(ch)
		elif ch in "\"'":
			quote = ch
		elif ch == "\\" and i + 1 < len(text):
			i += 1
			value.append(text[i])
		elif ch.isspace():
			break
		else:
			value.append(ch)
		i += 1
	return text[start:i], "".join(value), i
