from contextlib import AbstractContextManager, contextmanager
from typing import Generator, Protocol

import pytest
from cukexpr import config


class ConfigFixtureProtocol(Protocol):
    def __call__(self, *, logging: bool = config.TRACE_LOGGING) -> AbstractContextManager[None]:
        ...


@pytest.fixture
def cukexpr_config() -> ConfigFixtureProtocol:
    @contextmanager
    def _with_config(*, logging: bool = config.TRACE_LOGGING) -> Generator[None, None, None]:
        old_logging = config.TRACE_LOGGING
        config.TRACE_LOGGING = logging
        try:
            yield
        finally:
            config.TRACE_LOGGING = old_logging

    return _with_config
