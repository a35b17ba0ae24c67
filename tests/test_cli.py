import logging
import pathlib
import subprocess
import sys

import pytest

from verbump.cli import EXIT_FAILED, EXIT_OK, EXIT_USAGE, main
from verbump.targets import DEFAULT_TARGETS

MANIFEST = '[package]\nname = "casr"\nversion = "1.2.0"\n'
SOURCE = 'fn main() {\n    Command::new("casr-san").version("1.2.0");\n}\n'


@pytest.fixture
def tree(tmp_path, monkeypatch):
    """Workspace with every default target, used as VERBUMP_ROOT."""
    for target in DEFAULT_TARGETS:
        path = tmp_path / target.path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(MANIFEST if target.path.endswith(".toml") else SOURCE, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    for name in ("VERBUMP_MODE", "VERBUMP_ATOMIC", "VERBUMP_DRY_RUN"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("VERBUMP_ROOT", str(tmp_path))
    return tmp_path


def contents(root):
    return {t.path: (root / t.path).read_text(encoding="utf-8") for t in DEFAULT_TARGETS}


@pytest.mark.parametrize("args", [[], ["1.2.0"], ["1.2.0", "1.3.0", "1.4.0"]])
def test_wrong_argument_count_prints_usage(tree, capsys, args):
    """Usage goes to stderr and nothing is touched."""
    before = contents(tree)
    assert main(["verbump"] + args) == EXIT_USAGE
    err = capsys.readouterr().err
    assert "Usage: verbump old_version new_version" in err
    assert "Example: verbump 1.2.0 1.3.0" in err
    assert contents(tree) == before


def test_usage_uses_program_name(capsys):
    assert main(["/usr/local/bin/bump"]) == EXIT_USAGE
    assert "Usage: bump old_version new_version" in capsys.readouterr().err


def test_empty_argument_is_usage_error(tree, capsys):
    before = contents(tree)
    assert main(["verbump", "", "1.3.0"]) == EXIT_USAGE
    err = capsys.readouterr().err
    assert "verbump: old: String should have at least 1 character" in err
    assert "Usage: verbump" in err
    assert contents(tree) == before


def test_bump_rewrites_tree(tree):
    assert main(["verbump", "1.2.0", "1.3.0"]) == EXIT_OK
    for path, text in contents(tree).items():
        if path.endswith(".toml"):
            assert text == MANIFEST.replace("1.2.0", "1.3.0")
        else:
            assert text == SOURCE.replace("1.2.0", "1.3.0")


def test_missing_target_exits_with_failure(tree, caplog):
    (tree / "casr" / "src" / "bin" / "casr-python.rs").unlink()
    caplog.set_level(logging.INFO, logger="verbump")

    assert main(["verbump", "1.2.0", "1.3.0"]) == EXIT_FAILED
    assert "casr/src/bin/casr-python.rs" in caplog.text
    assert 'version = "1.3.0"' in (tree / "Cargo.toml").read_text(encoding="utf-8")
    assert '"1.3.0"' in (tree / "casr" / "src" / "bin" / "casr-libfuzzer.rs").read_text(encoding="utf-8")


def test_atomic_setting_from_environment(tree, monkeypatch):
    (tree / "libcasr" / "Cargo.toml").unlink()
    monkeypatch.setenv("VERBUMP_ATOMIC", "true")

    assert main(["verbump", "1.2.0", "1.3.0"]) == EXIT_FAILED
    assert (tree / "Cargo.toml").read_text(encoding="utf-8") == MANIFEST


def test_dry_run_setting_from_environment(tree, monkeypatch):
    monkeypatch.setenv("VERBUMP_DRY_RUN", "1")
    before = contents(tree)
    assert main(["verbump", "1.2.0", "1.3.0"]) == EXIT_OK
    assert contents(tree) == before


def test_no_match_is_success(tree):
    before = contents(tree)
    assert main(["verbump", "9.9.9", "10.0.0"]) == EXIT_OK
    assert contents(tree) == before


def test_script_entry_point(tree):
    """scripts/bump_version.py runs from a checkout without installation."""
    script = pathlib.Path(__file__).resolve().parents[1] / "scripts" / "bump_version.py"
    result = subprocess.run(
        [sys.executable, str(script), "1.2.0"],
        capture_output=True,
        text=True,
        cwd=tree,
    )
    assert result.returncode == EXIT_USAGE
    assert "Usage: bump_version.py old_version new_version" in result.stderr


def test_invalid_setting_is_reported(tree, monkeypatch, capsys):
    """A bad environment value ends with a message and exit code, not a traceback."""
    monkeypatch.setenv("VERBUMP_MODE", "bogus")
    before = contents(tree)
    assert main(["verbump", "1.2.0", "1.3.0"]) == EXIT_USAGE
    err = capsys.readouterr().err
    assert "verbump: invalid configuration: VERBUMP_MODE:" in err
    assert contents(tree) == before
