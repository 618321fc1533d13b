"""
Mock for the gulp build-orchestration API.
Records every call of the fluent pipeline methods in order.
"""

import logging
from typing import Any, List, Optional
from unittest.mock import Mock

from build_fixtures.config_factory import FixtureConfig, get_config

logger = logging.getLogger(__name__)


_CHAIN = object()


def _noop(*args, **kwargs):
    return None


class GulpMock:
    """
    Stand-in for gulp with stubbed series, src, pipe, dest and watch methods.

    Every call appends the method name to call_sequence. series and watch
    return a no-op callable (deferred execution), dest returns a sentinel
    value (which may be None) and src/pipe return the mock itself so that calls
    can be chained.
    """

    METHODS = ('series', 'src', 'pipe', 'dest', 'watch')

    def __init__(self, dest_return_value: Any = '_dest_ret_'):
        self.call_sequence: List[str] = []
        self.dest_return_value = dest_return_value

        return_values = {
            'series': _noop,
            'dest': dest_return_value,
            'watch': _noop
        }
        for method in self.METHODS:
            setattr(self, method, self._create_stub(method, return_values.get(method, _CHAIN)))

    def _create_stub(self, method: str, return_value: Any) -> Mock:
        def record(*args, **kwargs):
            self.call_sequence.append(method)
            return self if return_value is _CHAIN else return_value

        return Mock(side_effect=record, name=f"gulp.{method}")

    def reset(self) -> None:
        """Clear the call sequence and the call history of every stub."""
        self.call_sequence.clear()
        for method in self.METHODS:
            getattr(self, method).reset_mock()

    def __repr__(self) -> str:
        return f"GulpMock(call_sequence={self.call_sequence!r})"


def create_gulp_mock(config: Optional[FixtureConfig] = None) -> GulpMock:
    """Create a mock gulp object.

    Args:
        config: Optional fixture configuration supplying the dest sentinel

    Returns:
        GulpMock: A mock with recorded pipeline methods
    """
    config = config or get_config()
    logger.debug("Creating gulp mock")
    return GulpMock(dest_return_value=config.dest_return_value)
