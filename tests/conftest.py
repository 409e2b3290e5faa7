"""Global pytest configuration.

Registers the fixture plugin `tests.lib.algorithms.sample_graphs` when it can
be found. The plugin is not imported here so that pytest applies assertion
rewriting to it.
"""

from __future__ import annotations

from importlib.util import find_spec

pytest_plugins: list[str] = []
if find_spec("tests.lib.algorithms.sample_graphs") is not None:
    pytest_plugins = ["tests.lib.algorithms.sample_graphs"]
