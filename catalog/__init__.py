"""Catalog of the functions defined in workspace shell scripts.

Modules:
- model.py: Function records, shell and dialect enums, catalog results.
- text.py: Source decoding and description text helpers.
- posix_parse.py: Function headers in sh, bash and zsh sources.
- fish_parse.py: Function headers in fish sources.
- dispatch.py: Shell name to scanner routing.
- fs_scan.py: Script discovery and shell detection on disk.
- lookup.py: Listing, existence checks and completion over extracted functions.
"""

from .dispatch import extract

__all__ = [
	"extract",
	"model",
	"text",
	"posix_parse",
	"fish_parse",
	"dispatch",
	"fs_scan",
	"lookup",
]
