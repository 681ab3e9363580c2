"""Function catalog scanner for sh, bash and zsh sources.

Two header forms are recognized, each at the start of a line:

	name() {            name ( ) on one line, brace on the same or a later line
	function name {     keyword form, `()` after the name is optional

A `#` comment on the line directly above a header becomes its description.
Function bodies are not parsed.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple, Union

from .model import Function
from .text import clean_comment, decode_source, split_lines


class _State(Enum):
	SEEKING_HEADER = "seeking_header"
	AWAITING_BRACE = "awaiting_brace"


def _skip_spaces(text: str, i: int) -> int:
	while i < len(text) and text[i].isspace():
		i += 1
	return i


def _read_name(text: str, start: int) -> Tuple[str, int]:
	i = start
	while i < len(text) and not text[i].isspace() and text[i] != "(":
		i += 1
	return text[start:i], i


def match_header(line: str) -> Optional[Tuple[str, bool]]:
	"""Match a function header in `line`.

	Returns the function name and whether the opening brace sits on the same
	line, or None when the line does not start a function definition.
	"""
	text = line.strip()
	if not text or text.startswith("#"):
		return None

	keyword = False
	pos = 0
	if text.startswith("function") and len(text) > 8 and text[8].isspace():
		keyword = True
		pos = _skip_spaces(text, 8)

	name, pos = _read_name(text, pos)
	if not name or name[0] in "{}#":
		return None

	pos = _skip_spaces(text, pos)
	if text.startswith("(", pos):
		pos = _skip_spaces(text, pos + 1)
		if not text.startswith(")", pos):
			return None
		pos = _skip_spaces(text, pos + 1)
	elif not keyword:
		return None

	rest = text[pos:]
	if rest.startswith("{"):
		return name, True
	if not rest or rest.startswith("#"):
		return name, False
	return None


def parse_posix(content: Union[bytes, str]) -> List[Function]:
	functions: List[Function] = []
	state = _State.SEEKING_HEADER
	pending: Optional[Function] = None
	previous_comment: Optional[str] = None

	for number, line in enumerate(split_lines(decode_source(content))):
		if state is _State.AWAITING_BRACE:
			stripped = line.strip()
			if not stripped:
				previous_comment = None
				continue
			state = _State.SEEKING_HEADER
			if stripped.startswith("{") and pending is not None:
				functions.append(pending)
				pending = None
				previous_comment = None
				continue
			# Anything else cancels the header; the line is scanned afresh.
			pending = None

		header = match_header(line)
		if header is not None:
			name, braced = header
			record = Function(name=name, description=previous_comment or "")
			if braced:
				functions.append(record)
			else:
				pending = record
				state = _State.AWAITING_BRACE
			previous_comment = None
			continue

		if number == 0 and line.startswith("#!"):
			previous_comment = None
		else:
			previous_comment = clean_comment(line)

	return functions
