from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from arc42docs.logging import reset_logging
from arc42docs.tools import Arc42Tools, Toolkit, build_toolkit
from tests._fixtures.workspace_builder import WorkspaceBuilder


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Keep caplog working after tests that run the CLI."""
    yield
    reset_logging()


@pytest.fixture
def workspace_builder(tmp_path: Path) -> WorkspaceBuilder:
    """Provide a reusable workspace builder rooted at the pytest tmp_path."""
    return WorkspaceBuilder(tmp_path)


@pytest.fixture
def toolkit() -> Toolkit:
    return build_toolkit()


@pytest.fixture
def tools(toolkit: Toolkit, workspace_builder: WorkspaceBuilder) -> Arc42Tools:
    return Arc42Tools(toolkit, workspace_builder.settings())
