import os
from typing import Any

import pytest

from tests.models.utils import global_defaults_dict


@pytest.fixture(autouse=True)
def clear_os_environment() -> None:
    """Clear the OS environment."""
    os.environ.clear()


@pytest.fixture
def global_defaults() -> dict[str, Any]:
    """Fixture with the global defaults mapping."""
    return global_defaults_dict()
