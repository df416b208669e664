# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
CLI tests: engine resolution, text and JSON output, exit codes.
"""

import json
import sys
from pathlib import Path

import pytest

from fschost.driver import ENGINE_ENV_VAR, main
from fschost.engine import EngineLoadError, load_engine

ENGINE_MODULE = "fschost_cli_test_engine"

ENGINE_SOURCE = """
from fschost.test_helpers import ScriptedEngine, long_diag

failing = ScriptedEngine(
	stdout="Compiler banner\\n",
	stderr="nested tool output\\n",
	diagnostics=[long_diag(39, "not defined"), long_diag(64, "less generic", is_error=False)],
	exit_code=1,
)
clean = ScriptedEngine(exit_code=0)


class _Holder:
	pass


holder = _Holder()
holder.compile = clean
not_callable = 42
"""


@pytest.fixture
def engine_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
	mod_dir = tmp_path / "engines"
	mod_dir.mkdir()
	(mod_dir / f"{ENGINE_MODULE}.py").write_text(ENGINE_SOURCE, encoding="utf-8")
	monkeypatch.syspath_prepend(str(mod_dir))
	monkeypatch.delitem(sys.modules, ENGINE_MODULE, raising=False)
	monkeypatch.delenv(ENGINE_ENV_VAR, raising=False)
	monkeypatch.chdir(tmp_path)
	work = tmp_path / "work"
	work.mkdir()
	return work


def test_text_output(engine_module: Path, capsys: pytest.CaptureFixture[str]) -> None:
	rc = main(["-C", str(engine_module), "--engine", f"{ENGINE_MODULE}:failing", "a.fs --test:ErrorRanges"])
	captured = capsys.readouterr()
	assert rc == 1
	assert captured.out.splitlines() == [
		"Compiler banner",
		"(3,5-3,9): error FS0039: not defined",
		"(3,5-3,9): warning FS0064: less generic",
	]
	assert captured.err.splitlines() == ["nested tool output"]


def test_json_output(engine_module: Path, capsys: pytest.CaptureFixture[str]) -> None:
	rc = main(["-C", str(engine_module), "--engine", f"{ENGINE_MODULE}:failing", "--json", "a.fs --vserrors"])
	payload = json.loads(capsys.readouterr().out)
	assert rc == 1
	assert payload == {
		"exit_code": 1,
		"lines": [
			"Compiler banner",
			"(3,5,3,9): typecheck error FS0039: not defined",
			"(3,5,3,9): typecheck warning FS0064: less generic",
		],
		"stderr": ["nested tool output"],
	}


def test_engine_from_environment(engine_module: Path, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
	monkeypatch.setenv(ENGINE_ENV_VAR, f"{ENGINE_MODULE}:clean")
	assert main(["-C", str(engine_module), "a.fs"]) == 0
	assert capsys.readouterr().out == ""


def test_engine_object_with_compile_method(engine_module: Path) -> None:
	assert main(["-C", str(engine_module), "--engine", f"{ENGINE_MODULE}:holder", "a.fs"]) == 0


def test_missing_engine_is_configuration_error(engine_module: Path, capsys) -> None:
	assert main(["a.fs"]) == 2
	assert "fschost: error: no compiler engine configured" in capsys.readouterr().err


def test_missing_directory_reports_internal_error(engine_module: Path, capsys) -> None:
	rc = main(["-C", str(engine_module / "nope"), "--engine", f"{ENGINE_MODULE}:clean", "a.fs"])
	out = capsys.readouterr().out.splitlines()
	assert rc == 1
	assert out[0] == "Internal compiler error"


@pytest.mark.parametrize(
	"ref, message",
	[
		("no_colon", "expected MODULE:ATTR"),
		(":attr", "expected MODULE:ATTR"),
		("fschost_no_such_module_xyz:run", "cannot import engine module"),
		(f"{ENGINE_MODULE}:missing", "has no attribute"),
		(f"{ENGINE_MODULE}:not_callable", "is not callable"),
	],
)
def test_load_engine_errors(engine_module: Path, ref: str, message: str) -> None:
	with pytest.raises(EngineLoadError, match=message):
		load_engine(ref)


def test_load_engine_dotted_attribute(engine_module: Path) -> None:
	engine = load_engine(f"{ENGINE_MODULE}:holder.compile")
	assert callable(engine)


@pytest.mark.parametrize(
	"source",
	["def broken(:\n", "raise RuntimeError('engine module failed to initialize')\n"],
)
def test_engine_module_failing_at_import_is_configuration_error(
	engine_module: Path,
	tmp_path: Path,
	monkeypatch: pytest.MonkeyPatch,
	capsys: pytest.CaptureFixture[str],
	source: str,
) -> None:
	name = "fschost_cli_broken_engine"
	(tmp_path / "engines" / f"{name}.py").write_text(source, encoding="utf-8")
	monkeypatch.delitem(sys.modules, name, raising=False)
	assert main(["--engine", f"{name}:run", "a.fs"]) == 2
	assert "fschost: error: cannot import engine module" in capsys.readouterr().err
