from __future__ import annotations

import pytest

from gridkit.api.geometry import GridParameters
from gridkit.runtime.config import RuntimeConfig, load_runtime_config, reset_runtime_config
from tests.gridkit.helpers import RecordingCallbacks


@pytest.fixture
def params() -> GridParameters:
    return GridParameters(
        cols=12,
        container_width=1200,
        row_height=30,
        margin=(10, 10),
        container_padding=(10, 10),
    )


@pytest.fixture
def flat_params() -> GridParameters:
    # 100px cells, no margins or padding.
    return GridParameters(
        cols=10,
        container_width=1000,
        row_height=100,
        margin=(0, 0),
        container_padding=(0, 0),
    )


@pytest.fixture
def recorder() -> RecordingCallbacks:
    return RecordingCallbacks()


@pytest.fixture
def runtime_config() -> RuntimeConfig:
    return load_runtime_config(env={})


@pytest.fixture(autouse=True)
def _isolated_runtime_config():
    reset_runtime_config()
    yield
    reset_runtime_config()
