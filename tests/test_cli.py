"""Tests for the CLI commands."""

import json
import os
import shlex
import subprocess
import sys
from pathlib import Path

from typer.testing import CliRunner

import smartcommit
from smartcommit import __version__
from smartcommit.cli import app

runner = CliRunner()

ECHO_GENERATOR = [
    sys.executable,
    "-c",
    "import sys; sys.stdin.read(); print('\"feat(auth): Add token refresh.\"')",
]


def _write_generator_config(root: Path, command: list[str]) -> None:
    (root / ".smartcommit.toml").write_text(
        f"[generator]\ncommand = [{', '.join(json.dumps(part) for part in command)}]\n"
    )


def _write_diff(root: Path, text: str) -> Path:
    path = root / "change.diff"
    path.write_text(text)
    return path


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"smartcommit {__version__}" in result.output


class TestInit:
    def test_creates_config(self, tmp_git_repo: Path, monkeypatch):
        monkeypatch.chdir(tmp_git_repo)
        result = runner.invoke(app, ["init"])
        assert result.exit_code == 0
        assert (tmp_git_repo / ".smartcommit.toml").exists()

    def test_refuses_overwrite(self, tmp_git_repo: Path, monkeypatch):
        monkeypatch.chdir(tmp_git_repo)
        (tmp_git_repo / ".smartcommit.toml").write_text("existing")
        result = runner.invoke(app, ["init"])
        assert result.exit_code == 1
        assert (tmp_git_repo / ".smartcommit.toml").read_text() == "existing"


class TestAnalyze:
    def test_json_from_diff_file(self, tmp_git_repo: Path, monkeypatch, sample_diff_readme):
        monkeypatch.chdir(tmp_git_repo)
        diff = _write_diff(tmp_git_repo, sample_diff_readme)
        result = runner.invoke(app, ["analyze", "--diff-file", str(diff), "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["suggested_type"] == "docs"
        assert data["project_context"]["has_docs"] is True

    def test_terminal_output(self, tmp_git_repo: Path, monkeypatch, sample_diff_breaking):
        monkeypatch.chdir(tmp_git_repo)
        diff = _write_diff(tmp_git_repo, sample_diff_breaking)
        result = runner.invoke(app, ["analyze", "-d", str(diff)])
        assert result.exit_code == 0
        assert "refactor(lib)!" in result.stdout

    def test_stdin(self, tmp_git_repo: Path, monkeypatch, sample_diff_tests_only):
        monkeypatch.chdir(tmp_git_repo)
        result = runner.invoke(
            app, ["analyze", "-d", "-", "-f", "json"], input=sample_diff_tests_only
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["suggested_type"] == "test"

    def test_staged_changes(self, tmp_git_repo: Path, monkeypatch):
        monkeypatch.chdir(tmp_git_repo)
        (tmp_git_repo / "app.py").write_text("def main():\n    return 0\n")
        subprocess.run(["git", "add", "app.py"], cwd=tmp_git_repo, capture_output=True)
        result = runner.invoke(app, ["analyze", "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [f["path"] for f in data["files"]] == ["app.py"]
        assert data["files"][0]["status"] == "added"

    def test_commit_range(self, tmp_git_repo: Path, monkeypatch):
        monkeypatch.chdir(tmp_git_repo)
        (tmp_git_repo / "README.md").write_text("# Test\n\nMore docs.\n")
        subprocess.run(["git", "commit", "-am", "docs"], cwd=tmp_git_repo, capture_output=True)
        result = runner.invoke(app, ["analyze", "--from", "HEAD~1", "-f", "json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["suggested_type"] == "docs"

    def test_missing_diff_file(self, tmp_git_repo: Path, monkeypatch):
        monkeypatch.chdir(tmp_git_repo)
        result = runner.invoke(app, ["analyze", "-d", "nope.diff"])
        assert result.exit_code == 2

    def test_bad_format(self, tmp_git_repo: Path, monkeypatch):
        monkeypatch.chdir(tmp_git_repo)
        result = runner.invoke(app, ["analyze", "--format", "xml"])
        assert result.exit_code == 2

    def test_to_without_from(self, tmp_git_repo: Path, monkeypatch):
        monkeypatch.chdir(tmp_git_repo)
        result = runner.invoke(app, ["analyze", "--to", "HEAD", "-f", "json"])
        assert result.exit_code == 2

    def test_json_stdout_clean_under_debug(self, tmp_git_repo: Path, sample_diff_readme):
        diff = _write_diff(tmp_git_repo, sample_diff_readme)
        src_dir = Path(smartcommit.__file__).resolve().parent.parent
        proc = subprocess.run(
            [
                sys.executable, "-c", "from smartcommit.cli import app; app()",
                "analyze", "-d", str(diff), "-f", "json", "--debug",
            ],
            cwd=tmp_git_repo, capture_output=True, text=True,
            env={**os.environ, "PYTHONPATH": str(src_dir)},
        )
        assert proc.returncode == 0, proc.stderr
        assert json.loads(proc.stdout)["suggested_type"] == "docs"

    def test_bad_config(self, tmp_git_repo: Path, monkeypatch):
        monkeypatch.chdir(tmp_git_repo)
        (tmp_git_repo / ".smartcommit.toml").write_text("[message]\nmax_length = 0\n")
        result = runner.invoke(app, ["analyze"])
        assert result.exit_code == 2


class TestGenerate:
    def test_no_changes(self, tmp_git_repo: Path, monkeypatch):
        monkeypatch.chdir(tmp_git_repo)
        result = runner.invoke(app, ["generate"])
        assert result.exit_code == 0

    def test_show_prompt(self, tmp_git_repo: Path, monkeypatch, sample_diff_readme):
        monkeypatch.chdir(tmp_git_repo)
        diff = _write_diff(tmp_git_repo, sample_diff_readme)
        result = runner.invoke(app, ["generate", "-d", str(diff), "--show-prompt"])
        assert result.exit_code == 0
        assert "## Conventional Commit Rules:" in result.stdout
        assert "Generate only the commit message, nothing else:" in result.stdout

    def test_missing_generator(self, tmp_git_repo: Path, monkeypatch, sample_diff_readme):
        monkeypatch.chdir(tmp_git_repo)
        monkeypatch.delenv("SMARTCOMMIT_GENERATOR", raising=False)
        diff = _write_diff(tmp_git_repo, sample_diff_readme)
        result = runner.invoke(app, ["generate", "-d", str(diff)])
        assert result.exit_code == 2

    def test_raw_message(self, tmp_git_repo: Path, monkeypatch, sample_diff_new_auth):
        monkeypatch.chdir(tmp_git_repo)
        _write_generator_config(tmp_git_repo, ECHO_GENERATOR)
        diff = _write_diff(tmp_git_repo, sample_diff_new_auth)
        result = runner.invoke(app, ["generate", "-d", str(diff), "--raw"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "feat(auth): add token refresh"

    def test_json_with_variations(self, tmp_git_repo: Path, monkeypatch, sample_diff_new_auth):
        monkeypatch.chdir(tmp_git_repo)
        _write_generator_config(tmp_git_repo, ECHO_GENERATOR)
        diff = _write_diff(tmp_git_repo, sample_diff_new_auth)
        result = runner.invoke(app, ["generate", "-d", str(diff), "-n", "2", "-f", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        # identical replies collapse to one option
        assert data["messages"] == [
            {"message": "feat(auth): add token refresh", "commit_type": "feat"}
        ]

    def test_generator_env_override(self, tmp_git_repo: Path, monkeypatch, sample_diff_readme):
        monkeypatch.chdir(tmp_git_repo)
        monkeypatch.setenv(
            "SMARTCOMMIT_GENERATOR",
            shlex.join([sys.executable, "-c", "import sys; sys.stdin.read(); print('docs: add usage')"]),
        )
        diff = _write_diff(tmp_git_repo, sample_diff_readme)
        result = runner.invoke(app, ["generate", "-d", str(diff), "--raw"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "docs: add usage"

    def test_generation_failure(self, tmp_git_repo: Path, monkeypatch, sample_diff_readme):
        monkeypatch.chdir(tmp_git_repo)
        _write_generator_config(tmp_git_repo, [sys.executable, "-c", "import sys; sys.exit(1)"])
        diff = _write_diff(tmp_git_repo, sample_diff_readme)
        result = runner.invoke(app, ["generate", "-d", str(diff)])
        assert result.exit_code == 1

    def test_to_without_from(self, tmp_git_repo: Path, monkeypatch, sample_diff_readme):
        monkeypatch.chdir(tmp_git_repo)
        diff = _write_diff(tmp_git_repo, sample_diff_readme)
        result = runner.invoke(app, ["generate", "-d", str(diff), "--to", "HEAD~1"])
        assert result.exit_code == 2
