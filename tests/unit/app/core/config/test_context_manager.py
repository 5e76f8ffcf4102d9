"""Unit tests for the context-scoped configuration."""

import asyncio

import pytest

from src.library_api.runtime.config.config_data import ConfigData
from src.library_api.runtime.context import (
    AppContext,
    get_config,
    get_context,
    set_config,
    set_context,
    with_context,
)


class TestContextManager:
    """Test the context manager functionality."""

    def test_default_context_available(self):
        context = get_context()
        config = get_config()

        assert isinstance(context, AppContext)
        assert isinstance(config, ConfigData)
        assert context.config is config

    def test_with_context_override_single_level(self):
        """Should override config for the duration of the context manager."""
        original_config = get_config()
        original_host = original_config.app.host

        test_config = ConfigData()
        test_config.app.host = "custom_host"

        with with_context(test_config):
            override_config = get_config()
            assert override_config.app.host == "custom_host"
            assert override_config is not original_config

        after_config = get_config()
        assert after_config.app.host == original_host
        assert after_config is original_config

    def test_override_keeps_unset_fields(self):
        """Only explicitly set fields replace the current values."""
        original = get_config()

        override = ConfigData()
        override.pagination.default_size = 3

        with with_context(override):
            config = get_config()
            assert config.pagination.default_size == 3
            assert config.pagination.max_size == original.pagination.max_size
            assert config.database.url == original.database.url
            assert config.app.title == original.app.title

    def test_with_context_nested_overrides(self):
        outer = ConfigData()
        outer.app.port = 9001
        inner = ConfigData()
        inner.app.host = "inner_host"

        with with_context(outer):
            with with_context(inner):
                config = get_config()
                assert config.app.port == 9001
                assert config.app.host == "inner_host"
            assert get_config().app.port == 9001
            assert get_config().app.host != "inner_host"

    def test_with_context_none_is_noop(self):
        original = get_config()

        with with_context(None):
            assert get_config() is original

    def test_with_context_rejects_other_types(self):
        with pytest.raises(ValueError, match="config_override must be ConfigData"):
            with with_context({"app": {"host": "x"}}):
                pass

    def test_context_restored_after_exception(self):
        original = get_config()
        override = ConfigData()
        override.app.host = "boom"

        with pytest.raises(RuntimeError):
            with with_context(override):
                raise RuntimeError("fail")

        assert get_config() is original

    def test_set_config_replaces_whole_config(self):
        original_context = get_context()
        replacement = ConfigData()
        replacement.app.title = "Replaced"

        try:
            set_config(replacement)
            assert get_config() is replacement
        finally:
            set_context(original_context)

        assert get_config() is original_context.config

    def test_async_tasks_are_isolated(self):
        """Overrides in one task do not leak into a concurrently running one."""

        async def with_port(port: int) -> int:
            override = ConfigData()
            override.app.port = port
            with with_context(override):
                await asyncio.sleep(0.01)
                return get_config().app.port

        async def run() -> list[int]:
            return await asyncio.gather(with_port(1111), with_port(2222))

        assert asyncio.run(run()) == [1111, 2222]
