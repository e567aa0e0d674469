"""pytest configuration and fixtures for color-compat tests."""

import pytest

from color_compat.protocols import (
    SystemPaletteResolver,
    register_color_resolver,
    reset_color_resolver,
    set_generator_config,
)


class FailingResolver(SystemPaletteResolver):
    """System palette resolver that has no color for one entry."""

    def __init__(self, fail_on, appearance=None):
        super().__init__()
        self.fail_on = fail_on
        self.fail_appearance = appearance

    def resolve(self, name, appearance):
        if name == self.fail_on and self.fail_appearance in (None, appearance):
            return None
        return super().resolve(name, appearance)


@pytest.fixture(autouse=True)
def reset_registries():
    """Restore the default resolver and config around every test."""
    reset_color_resolver()
    set_generator_config(None)
    yield
    reset_color_resolver()
    set_generator_config(None)


@pytest.fixture
def failing_resolver():
    """Register a resolver that cannot resolve ``systemTeal`` in dark mode."""
    from color_compat.core import Appearance

    resolver = FailingResolver("systemTeal", Appearance.DARK)
    register_color_resolver(resolver)
    return resolver
