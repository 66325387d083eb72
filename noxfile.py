"""Nox sessions for ossready."""

import nox

nox.options.sessions = ["lint", "test"]

PACKAGE = "ossready"


@nox.session
def lint(session: nox.Session) -> None:
    """Check style and types without modifying files."""
    session.install("-e", ".[dev]")
    session.run("ruff", "check", PACKAGE, "tests")
    session.run("black", "--check", PACKAGE, "tests")
    session.run("mypy", PACKAGE)


@nox.session(name="fix")
def fix(session: nox.Session) -> None:
    """Apply ruff fixes and black formatting."""
    session.install("-e", ".[dev]")
    session.run("ruff", "check", "--fix", PACKAGE, "tests")
    session.run("black", PACKAGE, "tests")


@nox.session(python=["3.10", "3.11", "3.12"])
def test(session: nox.Session) -> None:
    """Run the test suite with coverage."""
    session.install("-e", ".[dev]")
    session.run("pytest", f"--cov={PACKAGE}", "--cov-report=term-missing", *session.posargs)


@nox.session
def audit_self(session: nox.Session) -> None:
    """Score this repository with the installed CLI."""
    session.install("-e", ".")
    session.run("ossready", "status", "--path", ".")
