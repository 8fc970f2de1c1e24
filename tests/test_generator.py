"""Tests for the command-backed generator."""

import sys

import pytest

from smartcommit.message.generator import CommandGenerator, GeneratorError


def _python(code: str) -> list[str]:
    return [sys.executable, "-c", code]


class TestCommandGenerator:
    def test_prompt_on_stdin(self):
        gen = CommandGenerator(_python(
            "import sys; data = sys.stdin.read(); print('fix: ' + str(len(data)))"
        ))
        assert gen("abcde").strip() == "fix: 5"

    def test_empty_command_rejected(self):
        with pytest.raises(GeneratorError, match="No generator command"):
            CommandGenerator([])

    def test_missing_executable(self):
        gen = CommandGenerator(["smartcommit-no-such-generator-binary"])
        with pytest.raises(GeneratorError, match="not found"):
            gen("prompt")

    def test_nonzero_exit(self):
        gen = CommandGenerator(_python("import sys; sys.stderr.write('quota'); sys.exit(3)"))
        with pytest.raises(GeneratorError, match="quota"):
            gen("prompt")

    def test_empty_output(self):
        gen = CommandGenerator(_python("pass"))
        with pytest.raises(GeneratorError, match="empty output"):
            gen("prompt")

    def test_timeout(self):
        gen = CommandGenerator(_python("import time; time.sleep(5)"), timeout=1)
        with pytest.raises(GeneratorError, match="timed out"):
            gen("prompt")
