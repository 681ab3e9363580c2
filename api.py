from __future__ import annotations

import os
from typing import List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from catalog.dispatch import dialect_for, extract
from catalog.fs_scan import load_catalog, scan_scripts
from catalog.lookup import complete_functions, sort_functions
from catalog.model import CatalogResult, Function


app = FastAPI(title="Shell Function Catalog")


class ExtractRequest(BaseModel):
	shell: str
	content: str


class ExtractResponse(BaseModel):
	shell: str
	functions: List[Function]


class CompleteRequest(ExtractRequest):
	prefix: str = ""


class CompleteResponse(BaseModel):
	candidates: List[str]


class CatalogRequest(BaseModel):
	root_path: str


def _require_shell(shell: str) -> None:
	if dialect_for(shell) is None:
		raise HTTPException(status_code=400, detail=f"Unsupported shell: {shell}")


@app.post("/extract", response_model=ExtractResponse)
def extract_functions(req: ExtractRequest) -> ExtractResponse:
	_require_shell(req.shell)
	return ExtractResponse(shell=req.shell, functions=extract(req.shell, req.content))


@app.post("/complete", response_model=CompleteResponse)
def complete(req: CompleteRequest) -> CompleteResponse:
	_require_shell(req.shell)
	functions = sort_functions(extract(req.shell, req.content))
	return CompleteResponse(candidates=complete_functions(functions, req.prefix))


@app.post("/catalog", response_model=CatalogResult)
def build_catalog(req: CatalogRequest) -> CatalogResult:
	root = os.path.abspath(req.root_path)
	if not os.path.isdir(root):
		raise HTTPException(status_code=400, detail=f"Invalid root_path: {root}")

	scripts = [load_catalog(s) for s in scan_scripts(root)]
	return CatalogResult(root=root, scripts=scripts)


def create_app() -> FastAPI:
	return app
