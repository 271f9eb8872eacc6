# tests/conftest.py
"""
Pytest configuration for tmuxscope tests.

Provides an in-memory stand-in for the tmux binary so session tests run
without a tmux server, plus directory-tree and environment fixtures.
"""

import os
from pathlib import Path

import pytest

from tmuxscope.config import ScopeConfig
from tmuxscope.manager import SessionManager


class FakeTmux:
    """Stateful runner that answers the tmux subcommands tmuxscope issues.

    Mirrors tmux's exit codes and stderr for the cases the engine handles:
    no server, duplicate session, missing session.
    """

    def __init__(self):
        self.sessions: dict[str, dict] = {}
        self.extra_lines: list[str] = []
        self.calls: list[list[str]] = []

    def add_session(self, name: str, windows: int = 1, attached: int = 0, path: str = "/tmp"):
        self.sessions[name] = {"windows": windows, "attached": attached, "path": path}

    def subcommands(self, subcommand: str) -> list[list[str]]:
        return [call for call in self.calls if call[1] == subcommand]

    def __call__(self, command: str, args: list[str]) -> tuple[int, str, str]:
        self.calls.append([command] + list(args))
        subcommand = args[0]

        if subcommand == "list-sessions":
            if not self.sessions and not self.extra_lines:
                return 1, "", "no server running on /tmp/tmux-1000/default\n"
            lines = [f"{name}:{s['windows']}:{s['attached']}" for name, s in self.sessions.items()]
            return 0, "\n".join(lines + self.extra_lines) + "\n", ""

        if subcommand == "new-session":
            name = args[args.index("-s") + 1]
            path = args[args.index("-c") + 1]
            if name in self.sessions:
                return 1, "", f"duplicate session: {name}\n"
            self.add_session(name, path=path)
            return 0, "", ""

        if subcommand in ("kill-session", "switch-client"):
            target = args[args.index("-t") + 1]
            name = target[1:] if target.startswith("=") else target
            if name not in self.sessions:
                return 1, "", f"can't find session: {name}\n"
            if subcommand == "kill-session":
                del self.sessions[name]
            else:
                for session in self.sessions.values():
                    session["attached"] = 0
                self.sessions[name]["attached"] = 1
            return 0, "", ""

        return 1, "", f"unknown command: {subcommand}\n"


@pytest.fixture
def fake_tmux():
    return FakeTmux()


@pytest.fixture
def projects_root(tmp_path) -> Path:
    root = tmp_path / "projects"
    for name in ("alpha", "beta", "beta/api", ".git"):
        (root / name).mkdir(parents=True)
    return root


@pytest.fixture
def manager(fake_tmux, projects_root) -> SessionManager:
    return SessionManager(ScopeConfig(search_paths=[str(projects_root)]), runner=fake_tmux)


@pytest.fixture
def outside_tmux(monkeypatch):
    monkeypatch.delenv("TMUX", raising=False)


@pytest.fixture
def inside_tmux(monkeypatch):
    monkeypatch.setenv("TMUX", "/tmp/tmux-1000/default,4242,0")


@pytest.fixture
def home(tmp_path, monkeypatch) -> Path:
    """Point ~ at the temporary directory."""
    monkeypatch.setenv("HOME", str(tmp_path))
    return Path(os.environ["HOME"])
