from textwrap import dedent

import pytest

from catalog.fs_scan import detect_shell, load_catalog, scan_scripts, shell_from_env
from catalog.model import Function


def _write_workspace(root):
	functions = root / "api" / "functions"
	functions.mkdir(parents=True)
	(functions / "functions.bash").write_text(
		dedent(
			"""\
			# Run the test suite
			test() {
				go test ./...
			}
			"""
		)
	)
	fish = root / "web" / "functions"
	fish.mkdir(parents=True)
	(fish / "functions.fish").write_text('function serve -d "Start the dev server"\n\tnpm start\nend\n')
	(root / "web" / "config.toml").write_text('path = "/tmp"\n')
	ignored = root / ".git"
	ignored.mkdir()
	(ignored / "hook.sh").write_text("hook() {\n}\n")
	return root


@pytest.mark.parametrize(
	"filename, shell",
	[
		("functions.sh", "sh"),
		("functions.bash", "bash"),
		("functions.ZSH", "zsh"),
		("functions.fish", "fish"),
		("functions.rb", "unknown"),
		("functions", "unknown"),
	],
)
def test_detect_shell(filename, shell):
	assert detect_shell(filename) == shell


def test_detect_shell_falls_back_to_default_without_extension():
	assert detect_shell("functions", default="zsh") == "zsh"
	assert detect_shell("functions.txt", default="zsh") == "unknown"


def test_shell_from_env():
	assert shell_from_env({"SHELL": "/usr/bin/fish"}) == "fish"
	assert shell_from_env({"SHELL": "/bin/bash"}) == "bash"
	assert shell_from_env({"SHELL": "/bin/tcsh"}) is None
	assert shell_from_env({}) is None


def test_scan_scripts_walks_directories(tmp_path):
	root = _write_workspace(tmp_path)
	scripts = scan_scripts(str(root))
	assert [(s.rel_path, s.shell) for s in scripts] == [
		("api/functions/functions.bash", "bash"),
		("web/functions/functions.fish", "fish"),
	]


def test_scan_single_file(tmp_path):
	path = tmp_path / "functions"
	path.write_text("f() {\n}\n")
	scripts = scan_scripts(str(path), default_shell="sh")
	assert len(scripts) == 1
	assert scripts[0].shell == "sh"
	assert scripts[0].rel_path == "functions"


def test_scan_missing_path(tmp_path):
	with pytest.raises(FileNotFoundError):
		scan_scripts(str(tmp_path / "missing"))


def test_load_catalog(tmp_path):
	root = _write_workspace(tmp_path)
	catalogs = [load_catalog(s) for s in scan_scripts(str(root))]
	assert catalogs[0].functions == [Function(name="test", description="Run the test suite")]
	assert catalogs[1].shell == "fish"
	assert catalogs[1].functions == [Function(name="serve", description="Start the dev server")]
