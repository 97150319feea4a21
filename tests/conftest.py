from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from documentize.config import DocumentizeConfig
from documentize.typescript import SymbolResolver, TypeScriptSession
from tests._fixtures.components import ComponentBuilder


@pytest.fixture(autouse=True)
def _reset_documentize_logger() -> Iterator[None]:
    """Undo handler and propagation changes made by configure_logging."""
    yield
    logger = logging.getLogger("documentize")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def component_builder(tmp_path: Path) -> ComponentBuilder:
    """Provide a reusable component project rooted at the pytest tmp_path."""
    return ComponentBuilder(tmp_path)


@pytest.fixture(scope="session")
def ts_session() -> TypeScriptSession:
    """One TypeScript session shared across tests, as in a real build."""
    return TypeScriptSession()


@pytest.fixture
def resolver(ts_session: TypeScriptSession) -> SymbolResolver:
    return SymbolResolver(ts_session)


@pytest.fixture
def config(tmp_path: Path) -> DocumentizeConfig:
    return DocumentizeConfig(root=tmp_path)
