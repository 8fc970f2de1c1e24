"""Shared test fixtures — sample diffs, analyzer, temp git repos."""

from __future__ import annotations

import subprocess
import textwrap
from pathlib import Path

import pytest

from smartcommit.analysis.analyzer import DiffAnalyzer
from smartcommit.analysis.context import ProjectContext
from smartcommit.log import setup_logging


@pytest.fixture(autouse=True)
def _quiet_logging():
    setup_logging("warning")


@pytest.fixture
def analyzer() -> DiffAnalyzer:
    """Analyzer with a fixed, filesystem-free project context."""
    return DiffAnalyzer(context_probe=lambda: ProjectContext())


def _new_file_diff(path: str, lines: int) -> str:
    body = "".join(f"+line {i}\n" for i in range(lines))
    return (
        f"diff --git a/{path} b/{path}\n"
        "new file mode 100644\n"
        "index 0000000..e69de29\n"
        "--- /dev/null\n"
        f"+++ b/{path}\n"
        f"@@ -0,0 +1,{lines} @@\n"
        f"{body}"
    )


@pytest.fixture
def new_file_diff():
    """Factory: a diff adding one new file of *lines* '+' lines."""
    return _new_file_diff


@pytest.fixture
def sample_diff_new_auth() -> str:
    """One new file src/auth.ts with 60 added lines."""
    return _new_file_diff("src/auth.ts", 60)


@pytest.fixture
def sample_diff_readme() -> str:
    """README.md modified: 5 additions, 2 deletions."""
    return textwrap.dedent("""\
        diff --git a/README.md b/README.md
        index 1234567..abcdef0 100644
        --- a/README.md
        +++ b/README.md
        @@ -1,4 +1,7 @@
         # Project
        -Old intro.
        -Old usage.
        +New intro.
        +
        +## Usage
        +
        +Run the tool.
    """)


@pytest.fixture
def sample_diff_tests_only() -> str:
    """Two modified test files."""
    return textwrap.dedent("""\
        diff --git a/src/auth.test.ts b/src/auth.test.ts
        index 1234567..abcdef0 100644
        --- a/src/auth.test.ts
        +++ b/src/auth.test.ts
        @@ -10,2 +10,4 @@
        +  it('rejects expired tokens', () => {
        +  });
        diff --git a/src/user.spec.ts b/src/user.spec.ts
        index 1234567..abcdef0 100644
        --- a/src/user.spec.ts
        +++ b/src/user.spec.ts
        @@ -3,1 +3,2 @@
        +  it('loads profile', () => {});
    """)


@pytest.fixture
def sample_diff_deleted() -> str:
    """A deleted Python module."""
    return textwrap.dedent("""\
        diff --git a/app/legacy.py b/app/legacy.py
        deleted file mode 100644
        index abc1234..0000000
        --- a/app/legacy.py
        +++ /dev/null
        @@ -1,3 +0,0 @@
        -x = 1
        -y = 2
        -z = 3
    """)


@pytest.fixture
def sample_diff_rename() -> str:
    """A renamed file with one added line (git emits a similarity line first)."""
    return textwrap.dedent("""\
        diff --git a/old_name.py b/new_name.py
        similarity index 97%
        rename from old_name.py
        rename to new_name.py
        index abc1234..def5678 100644
        --- a/old_name.py
        +++ b/new_name.py
        @@ -1,0 +2,1 @@
        +# New line added after rename
    """)


@pytest.fixture
def sample_diff_package_json() -> str:
    """A dependency bump in package.json."""
    return textwrap.dedent("""\
        diff --git a/package.json b/package.json
        index 1234567..abcdef0 100644
        --- a/package.json
        +++ b/package.json
        @@ -5,3 +5,3 @@
        -    "react": "18.2.0",
        +    "react": "18.3.1",
    """)


@pytest.fixture
def sample_diff_breaking() -> str:
    """A diff whose text mentions removing a function."""
    return textwrap.dedent("""\
        diff --git a/lib/api.py b/lib/api.py
        index 1234567..abcdef0 100644
        --- a/lib/api.py
        +++ b/lib/api.py
        @@ -1,4 +1,2 @@
        -# deprecated: remove function get_user in v2
        -def get_user(uid):
        -    return db.get(uid)
        +def fetch_user(uid):
    """)


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository for integration tests."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    subprocess.run(
        ["git", "config", "user.email", "test@test.com"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    subprocess.run(
        ["git", "config", "user.name", "Test"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    # Initial commit
    readme = tmp_path / "README.md"
    readme.write_text("# Test\n")
    subprocess.run(["git", "add", "."], cwd=tmp_path, capture_output=True, check=True)
    subprocess.run(
        ["git", "commit", "-m", "init"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    return tmp_path
