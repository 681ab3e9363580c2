from __future__ import annotations

import logging
import os
from typing import Dict, List, Optional

from .dispatch import dialect_for, extract
from .model import ScriptCatalog, ScriptFile

logger = logging.getLogger(__name__)


EXTENSION_SHELL: Dict[str, str] = {
	".sh": "sh",
	".bash": "bash",
	".zsh": "zsh",
	".fish": "fish",
}

SKIP_DIRS = {".git", "node_modules", "dist", "build", "__pycache__"}


def shell_from_env(environ: Optional[Dict[str, str]] = None) -> Optional[str]:
	"""Return the name of the login shell from $SHELL if it is a supported one."""
	env = os.environ if environ is None else environ
	path = env.get("SHELL", "")
	name = os.path.basename(path.rstrip("/"))
	if dialect_for(name) is None:
		return None
	return name


def detect_shell(filename: str, default: Optional[str] = None) -> str:
	_, ext = os.path.splitext(filename)
	shell = EXTENSION_SHELL.get(ext.lower())
	if shell is not None:
		return shell
	if not ext and default is not None:
		return default
	return "unknown"


def scan_scripts(root: str, default_shell: Optional[str] = None) -> List[ScriptFile]:
	"""Collect the shell scripts under `root`, or `root` itself if it is a file."""
	if not os.path.exists(root):
		raise FileNotFoundError(f"path {root!r} does not exist")

	if os.path.isfile(root):
		shell = detect_shell(root, default_shell)
		return [ScriptFile(path=root, rel_path=os.path.basename(root), shell=shell)]

	scripts: List[ScriptFile] = []
	for dirpath, dirnames, filenames in os.walk(root):
		dirnames[:] = sorted(d for d in dirnames if d not in SKIP_DIRS)
		for filename in sorted(filenames):
			path = os.path.join(dirpath, filename)
			shell = detect_shell(filename, default_shell)
			if dialect_for(shell) is None:
				logger.debug("Skipping %s: no supported shell", path)
				continue
			scripts.append(
				ScriptFile(
					path=path,
					rel_path=os.path.relpath(path, root),
					shell=shell,
				)
			)
	return scripts


def load_catalog(script: ScriptFile) -> ScriptCatalog:
	with open(script.path, "rb") as fh:
		content = fh.read()
	functions = extract(script.shell, content)
	logger.debug("Loaded %d function(s) from %s", len(functions), script.path)
	return ScriptCatalog(path=script.path, shell=script.shell, functions=functions)
