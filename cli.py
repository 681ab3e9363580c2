from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

import uvicorn

from catalog.dispatch import dialect_for
from catalog.fs_scan import load_catalog, scan_scripts, shell_from_env
from catalog.lookup import FunctionNotFoundError, complete_functions, ensure_function, sort_functions
from catalog.model import Function, ScriptFile


class CliError(Exception):
	pass


def _load_functions(args: argparse.Namespace) -> List[Function]:
	scripts = _resolve_scripts(args)
	functions: List[Function] = []
	for script in scripts:
		functions.extend(load_catalog(script).functions)
	return functions


def _resolve_scripts(args: argparse.Namespace) -> List[ScriptFile]:
	path = os.path.abspath(args.path)
	if args.shell is not None:
		if dialect_for(args.shell) is None:
			raise CliError(f'shell "{args.shell}" is not supported')
		if os.path.isfile(path):
			return [ScriptFile(path=path, rel_path=os.path.basename(path), shell=args.shell)]
	scripts = scan_scripts(path, args.shell or shell_from_env())
	supported = [s for s in scripts if dialect_for(s.shell) is not None]
	if os.path.isfile(path) and not supported:
		raise CliError(f"cannot tell which shell {path} is written for, use --shell")
	return supported


def cmd_list(args: argparse.Namespace) -> None:
	functions = sort_functions(_load_functions(args))
	if args.json:
		print(json.dumps([f.model_dump() for f in functions], indent=2))
		return
	for f in functions:
		if f.description:
			print(f"{f.name}\t{f.description}")
		else:
			print(f.name)


def cmd_complete(args: argparse.Namespace) -> None:
	for candidate in complete_functions(sort_functions(_load_functions(args)), args.prefix):
		print(candidate)


def cmd_check(args: argparse.Namespace) -> None:
	function = ensure_function(_load_functions(args), args.name)
	print(function.name)


def cmd_serve(args: argparse.Namespace) -> None:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="catalog")
	parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
	sub = parser.add_subparsers(dest="cmd", required=True)

	def add_source(p: argparse.ArgumentParser) -> None:
		p.add_argument("path", help="Function file or directory of function files")
		p.add_argument("--shell", help="Shell the functions are written for (sh, bash, zsh, fish)")

	pl = sub.add_parser("list", help="List the functions defined in shell scripts")
	add_source(pl)
	pl.add_argument("--json", action="store_true", help="Print JSON instead of text")
	pl.set_defaults(func=cmd_list)

	pc = sub.add_parser("complete", help="Print completion candidates for a prefix")
	add_source(pc)
	pc.add_argument("prefix", nargs="?", default="")
	pc.set_defaults(func=cmd_complete)

	pk = sub.add_parser("check", help="Exit with an error if a function does not exist")
	add_source(pk)
	pk.add_argument("name")
	pk.set_defaults(func=cmd_check)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)
	return parser


def main(argv: Optional[List[str]] = None) -> int:
	args = build_parser().parse_args(argv)
	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.INFO,
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)
	try:
		args.func(args)
	except (CliError, FileNotFoundError, FunctionNotFoundError) as e:
		print(f"error: {e}", file=sys.stderr)
		return 1
	return 0


if __name__ == "__main__":
	sys.exit(main())
