from pathlib import Path

import pytest

from tests.infrastructure.file_utils import write
from tests.infrastructure.samples import NO_PRESENTER, NO_PROXY_PROPERTY, PRESENTER_EMPTY_PROXY, PRESENTER_WITH_LOADING


@pytest.fixture
def presenter_empty_proxy() -> str:
    """State with two properties, presenter with an empty proxy object."""
    return PRESENTER_EMPTY_PROXY


@pytest.fixture
def presenter_with_loading() -> str:
    """Same file after 'loading' has been mirrored once."""
    return PRESENTER_WITH_LOADING


@pytest.fixture
def no_presenter() -> str:
    return NO_PRESENTER


@pytest.fixture
def no_proxy_property() -> str:
    return NO_PROXY_PROPERTY


@pytest.fixture
def tmpproj(tmp_path: Path):
    """Working directory with FeedPresenter.kt (empty proxy object)."""
    write(tmp_path / "FeedPresenter.kt", PRESENTER_EMPTY_PROXY)
    return tmp_path
