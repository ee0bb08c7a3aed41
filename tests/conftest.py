from __future__ import annotations

from pathlib import Path

import pytest

_DIRECTORY_MARKERS = ("unit", "integration", "end2end")


def _mark_tests_by_directory(
    config: pytest.Config,
    items: list[pytest.Item],
    marker: str,
) -> None:
    target_dir = (Path(config.rootpath) / "tests" / marker).resolve()

    for item in items:
        item_path = Path(str(item.path)).resolve()
        if target_dir in item_path.parents:
            item.add_marker(getattr(pytest.mark, marker))


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    for marker in _DIRECTORY_MARKERS:
        _mark_tests_by_directory(config, items, marker)
