import json
import subprocess
from pathlib import Path
from unittest import mock

import pytest

from crablings.project import Crate, RustAnalyzerProject


def test_crate_defaults():
    crate = Crate(root_module="exercises/a.rs")
    assert crate.to_dict() == {
        "root_module": "exercises/a.rs",
        "edition": "2021",
        "deps": [],
        "cfg": ["test"],
    }


def test_add_path_only_rust_files():
    project = RustAnalyzerProject()
    project.add_path("exercises/intro1.rs")
    project.add_path("exercises/README.md")
    project.add_path("exercises/01_variables")
    assert [c.root_module for c in project.crates] == [str(Path("exercises/intro1.rs"))]


def test_exercises_to_json_walks_tree(tmp_path):
    root = tmp_path / "exercises"
    (root / "00_intro").mkdir(parents=True)
    (root / "01_variables").mkdir()
    (root / "00_intro" / "intro2.rs").write_text("")
    (root / "00_intro" / "intro1.rs").write_text("")
    (root / "01_variables" / "variables1.rs").write_text("")
    (root / "01_variables" / "README.md").write_text("")
    project = RustAnalyzerProject()
    project.exercises_to_json(root)
    names = [Path(c.root_module).name for c in project.crates]
    assert names == ["intro1.rs", "intro2.rs", "variables1.rs"]


def test_exercises_to_json_empty(tmp_path):
    project = RustAnalyzerProject()
    project.exercises_to_json(tmp_path)
    assert project.crates == []


def test_write_to_disk_round_trip(tmp_path):
    project = RustAnalyzerProject(sysroot_src="/sys/library")
    project.add_path("exercises/intro1.rs")
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    raw = target.read_text()
    assert json.loads(raw) == project.to_dict()
    assert " " not in raw
    assert list(json.loads(raw)) == ["sysroot_src", "crates"]


def test_sysroot_from_environment(monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", "/custom/src")
    project = RustAnalyzerProject()
    with mock.patch("crablings.project.subprocess.run") as run:
        project.get_sysroot_src()
    assert project.sysroot_src == "/custom/src"
    run.assert_not_called()


def test_sysroot_from_rustc(monkeypatch, capsys):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    completed = subprocess.CompletedProcess([], 0, b"/opt/toolchain\n", b"")
    project = RustAnalyzerProject()
    with mock.patch("crablings.project.subprocess.run", return_value=completed) as run:
        project.get_sysroot_src()
    assert run.call_args.args[0] == ["rustc", "--print", "sysroot"]
    assert Path(project.sysroot_src).parts[-5:] == ("lib", "rustlib", "src", "rust", "library")
    assert Path(project.sysroot_src).parts[:-5] == Path("/opt/toolchain").parts
    assert "Determined toolchain: /opt/toolchain" in capsys.readouterr().out


def test_sysroot_rustc_missing(monkeypatch):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    project = RustAnalyzerProject()
    with mock.patch("crablings.project.subprocess.run", side_effect=FileNotFoundError):
        with pytest.raises(FileNotFoundError):
            project.get_sysroot_src()
    assert project.sysroot_src == ""