"""
Unit tests for the Python script backend
"""

import traceback
from types import SimpleNamespace

import pytest

from cjsengine import PythonBackend, CJSEngine
from cjsengine.backends import create_backend


class TestPythonBackend:

    def test_execute_returns_trailing_expression(self):
        backend = PythonBackend()
        assert backend.execute("x = 20\nx + 22") == 42

    def test_execute_without_expression_returns_none(self):
        backend = PythonBackend()
        assert backend.execute("y = 1") is None
        assert backend.get_value("y") == 1

    def test_globals_persist_between_executions(self):
        backend = PythonBackend()
        backend.execute("def twice(v):\n    return v * 2")
        assert backend.execute("twice(4)") == 8

    def test_host_values_visible_to_scripts(self):
        backend = PythonBackend()
        backend.set_value("greeting", "hi")
        assert backend.execute("greeting.upper()") == "HI"

    def test_syntax_error_propagates(self):
        backend = PythonBackend()
        with pytest.raises(SyntaxError):
            backend.execute("def broken(:")

    def test_wrapper_binds_parameters_in_fresh_scope(self):
        backend = PythonBackend()
        backend.set_value("shared", 7)
        wrapper = backend.compile_wrapper("total = a + b + shared", "<mod>", ("a", "b"))
        scope = wrapper(1, 2)
        assert scope["total"] == 10
        assert backend.get_value("total") is None

    def test_wrapper_parameters_shadow_globals(self):
        backend = PythonBackend()
        backend.set_value("require", "global")
        wrapper = backend.compile_wrapper("seen = require", "<mod>", ("require",))
        assert wrapper("local")["seen"] == "local"

    def test_wrapper_checks_argument_count(self):
        backend = PythonBackend()
        wrapper = backend.compile_wrapper("pass", "<mod>", ("a", "b"))
        with pytest.raises(TypeError):
            wrapper(1)

    def test_wrapper_errors_keep_filename(self):
        backend = PythonBackend()
        wrapper = backend.compile_wrapper("raise KeyError('k')", "/app/bad.py", ())
        with pytest.raises(KeyError) as exc_info:
            wrapper()
        assert traceback.extract_tb(exc_info.tb)[-1].filename == "/app/bad.py"

    def test_parse_json_and_new_object(self):
        backend = PythonBackend()
        assert backend.parse_json('{"a": [1, 2]}') == {"a": [1, 2]}
        obj = backend.new_object()
        assert isinstance(obj, SimpleNamespace)
        assert vars(obj) == {}
        assert backend.new_object() is not obj


class TestBackendSelection:

    def test_by_name(self):
        assert isinstance(create_backend("python"), PythonBackend)

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unknown backend"):
            create_backend("lua")
        with pytest.raises(ValueError):
            CJSEngine(backend="lua")

    def test_instance_is_used_as_is(self):
        backend = PythonBackend()
        engine = CJSEngine(backend=backend)
        assert engine.backend is backend
        assert backend.get_value("require") == engine.require
