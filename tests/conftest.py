"""Shared pytest fixtures for the responder tests."""
from __future__ import annotations

import logging
from datetime import datetime

import pytest

from responder.config import AppConfig, ModelConfig
from responder.engines.factory import create_engine
from responder.host import HostInfo

logging.basicConfig(level=logging.WARNING)
logging.getLogger("responder").setLevel(logging.DEBUG)

FIXED_NOW = datetime(2024, 3, 5, 9, 7, 30)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def host_info() -> HostInfo:
    return HostInfo(
        memory_bytes=8 * 1024**3,
        free_memory_bytes=None,
        uptime_seconds=3 * 3600 + 2 * 60 + 5,
        platform_version="Linux 6.1",
        processor="x86_64",
    )


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig(model=ModelConfig(default_model="markov", random_seed=7))


@pytest.fixture
def engine_factory(app_config, host_info, fixed_clock):
    def _factory(kind):
        return create_engine(kind.value, app_config, clock=fixed_clock, host_info=host_info)

    return _factory
