"""Command-backed text generator — prompt on stdin, message on stdout."""

from __future__ import annotations

import subprocess
from typing import List


class GeneratorError(Exception):
    """Raised when the generator command is missing, times out, or fails."""


class CommandGenerator:
    """Callable generator that shells out to a configured command.

    Usage::

        generate = CommandGenerator(["llm", "-m", "gpt-4o-mini"])
        text = generate(prompt)
    """

    def __init__(self, command: List[str], timeout: int = 120) -> None:
        if not command:
            raise GeneratorError("No generator command configured")
        self.command = list(command)
        self.timeout = timeout

    def __call__(self, prompt: str) -> str:
        try:
            result = subprocess.run(
                self.command,
                input=prompt,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                encoding="utf-8",
                errors="replace",
            )
        except FileNotFoundError:
            raise GeneratorError(f"Generator command not found: {self.command[0]}")
        except subprocess.TimeoutExpired:
            raise GeneratorError(f"Generator timed out after {self.timeout}s")

        if result.returncode != 0:
            stderr = result.stderr.strip() or f"exit code {result.returncode}"
            raise GeneratorError(f"Generator failed: {stderr}")
        if not result.stdout.strip():
            raise GeneratorError("Generator returned empty output")
        return result.stdout
