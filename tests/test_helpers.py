"""
Shared test utilities for Bluetooth Tray tests.

Provides headless GTK stubs, path setup, and a fake bluetoothctl.
"""

import os
import subprocess
import sys
import types

REPO_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# GTK-related module names the tray modules import.
DEFAULT_GI_MODULES = ("Gtk", "GLib", "Gdk")


def add_repo_to_path():
    """Make the bluetooth_tray package importable from a source checkout."""
    if REPO_DIR not in sys.path:
        sys.path.insert(0, REPO_DIR)


def create_gtk_mocks(extra_modules=()):
    """
    Create mock gi/GTK modules for headless testing.

    Returns a tuple of (gi_mock, repo_mock) that can be installed into
    sys.modules to allow importing modules that depend on GTK without
    requiring an actual GTK installation or display.
    """
    gi_mock = types.ModuleType("gi")
    gi_mock.require_version = lambda *a, **kw: None

    repo_mock = types.ModuleType("gi.repository")

    class _StubMeta(type):
        def __getattr__(cls, name):
            return _StubWidget

    class _StubWidget(metaclass=_StubMeta):
        """No-op GTK widget stub for headless CI."""

        def __init__(self, *a, **kw):
            pass

        def __init_subclass__(cls, **kw):
            pass

        def __getattr__(self, name):
            return _stub_func

    def _stub_func(*a, **kw):
        return _StubWidget()

    class _StubModule:
        def __getattr__(self, name):
            return _StubWidget

    for name in (*DEFAULT_GI_MODULES, *extra_modules):
        setattr(repo_mock, name, _StubModule())

    gi_mock.repository = repo_mock
    return gi_mock, repo_mock


def install_gtk_mocks(extra_modules=()):
    """Create **and** install GTK mocks into ``sys.modules``."""
    gi_mock, repo_mock = create_gtk_mocks(extra_modules)
    sys.modules["gi"] = gi_mock
    sys.modules["gi.repository"] = repo_mock
    return gi_mock, repo_mock


def fake_btctl(responses):
    """Build a stand-in for backend._run_btctl.

    *responses* maps an argument tuple, e.g. ``("devices", "Paired")``,
    to ``(stdout, returncode)``.  Unknown commands succeed silently.
    The returned callable records every argument list in ``.calls``.
    """
    calls = []

    def _run(args):
        calls.append(list(args))
        stdout, returncode = responses.get(tuple(args), ("", 0))
        return subprocess.CompletedProcess(
            ["bluetoothctl"] + list(args), returncode, stdout, ""
        )

    _run.calls = calls
    return _run
