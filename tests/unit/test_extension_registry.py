"""
Unit tests for extension loader dispatch
"""

import pytest

from cjsengine import ExtensionRegistry, ModuleArgumentError, load_source, load_json


class TestExtensionRegistry:

    def test_builtin_loaders(self):
        registry = ExtensionRegistry()
        assert list(registry) == ["default", ".py", ".json"]
        assert registry.get("default") is load_source
        assert registry.get(".py") is load_source
        assert registry.get(".json") is load_json

    def test_empty_registry(self):
        registry = ExtensionRegistry(with_builtin_loaders=False)
        assert len(registry) == 0
        assert registry.get("default") is None

    def test_register_overwrites_in_place(self):
        registry = ExtensionRegistry()

        def custom(location, module):
            return None

        registry.register(".py", custom)
        assert registry.get(".py") is custom
        assert list(registry) == ["default", ".py", ".json"]

    @pytest.mark.parametrize("extension", ["", None, 3])
    def test_rejects_invalid_extension(self, extension):
        registry = ExtensionRegistry()
        with pytest.raises(ModuleArgumentError):
            registry.register(extension, load_source)
