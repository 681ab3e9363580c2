from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class Shell(str, Enum):
	SH = "sh"
	BASH = "bash"
	ZSH = "zsh"
	FISH = "fish"


class Dialect(str, Enum):
	POSIX = "posix"
	FISH = "fish"


class Function(BaseModel):
	name: str = Field(min_length=1)
	description: str = ""


class ScriptFile(BaseModel):
	path: str
	rel_path: str
	shell: str


class ScriptCatalog(BaseModel):
	path: str
	shell: str
	functions: List[Function] = []


class CatalogResult(BaseModel):
	root: str
	scripts: List[ScriptCatalog] = []
