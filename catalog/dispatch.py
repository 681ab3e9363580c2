"""Route a shell name to the scanner for its dialect."""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from .fish_parse import parse_fish
from .model import Dialect, Function, Shell
from .posix_parse import parse_posix

logger = logging.getLogger(__name__)


def dialect_for(shell: str) -> Optional[Dialect]:
	"""Map `sh`, `bash` and `zsh` to POSIX and `fish` to fish. Matching is exact."""
	try:
		known = Shell(shell)
	except ValueError:
		return None
	if known is Shell.FISH:
		return Dialect.FISH
	return Dialect.POSIX


def extract(shell: str, content: Union[bytes, str]) -> List[Function]:
	"""Extract the functions defined in `content`, in source order.

	An unsupported shell yields an empty list rather than an error.
	"""
	dialect = dialect_for(shell)
	if dialect is Dialect.POSIX:
		functions = parse_posix(content)
	elif dialect is Dialect.FISH:
		functions = parse_fish(content)
	else:
		logger.debug("No function scanner for shell %r", shell)
		return []
	logger.debug("Extracted %d function(s) from %s source", len(functions), dialect.value)
	return functions
