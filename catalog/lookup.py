"""Queries callers run against an extracted function list.

Listing, pre-dispatch existence checks and shell completion all work from the
same list of records; none of them re-read the source.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from .model import Function


class FunctionNotFoundError(LookupError):
	def __init__(self, name: str):
		super().__init__(f"the function `{name}` does not exist")
		self.name = name


def sort_functions(functions: Iterable[Function]) -> List[Function]:
	return sorted(functions, key=lambda f: f.name)


def find_function(functions: Iterable[Function], name: str) -> Optional[Function]:
	for function in functions:
		if function.name == name:
			return function
	return None


def ensure_function(functions: Iterable[Function], name: str) -> Function:
	"""Return the function called `name`, raising FunctionNotFoundError if absent."""
	function = find_function(functions, name)
	if function is None:
		raise FunctionNotFoundError(name)
	return function


def complete_functions(functions: Iterable[Function], prefix: str) -> List[str]:
	"""Completion candidates for `prefix`.

	Each candidate is the function name, followed by a tab and the description
	when there is one, which is the form shell completion scripts display as a hint.
	"""
	candidates: List[str] = []
	for function in functions:
		if not function.name.startswith(prefix):
			continue
		if function.description:
			candidates.append(f"{function.name}\t{function.description}")
		else:
			candidates.append(function.name)
	return candidates
