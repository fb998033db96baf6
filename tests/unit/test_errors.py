"""
Tests for the error hierarchy and diagnostic formatting.
"""

import re

from cjsengine import (
    CJSError,
    ModuleArgumentError,
    ModuleResolutionError,
    LoaderConfigurationError,
    ModuleCollisionError,
    format_error,
)
from cjsengine.shared.errors import Error

_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


class TestErrorHierarchy:

    def test_codes(self):
        assert ModuleArgumentError("x").error_code == "E0001"
        assert ModuleResolutionError("x").error_code == "E0002"
        assert LoaderConfigurationError(".x", "/a.x").error_code == "E0003"
        assert ModuleCollisionError("x").error_code == "E0004"

    def test_all_derive_from_base(self):
        for err in (
            ModuleArgumentError("x"),
            ModuleResolutionError("x"),
            LoaderConfigurationError(".x", "/a.x"),
            ModuleCollisionError("x"),
        ):
            assert isinstance(err, CJSError)

    def test_argument_error_is_value_error(self):
        assert isinstance(ModuleArgumentError("x"), ValueError)


class TestFormatError:

    def test_resolution_error_plain(self):
        err = ModuleResolutionError("./util", searched=["/a/util", "/a/util.py"], requester="/a/main.py")
        out = format_error(err, color=False)
        assert out.splitlines()[0] == "error[E0002]: cannot find module './util'"
        assert "= note: required from /a/main.py" in out
        assert "= note: searched: /a/util, /a/util.py" in out
        assert "= help:" in out

    def test_script_error_uses_type_name(self):
        out = format_error(ZeroDivisionError("division by zero"), color=False)
        assert out == "error: ZeroDivisionError: division by zero"

    def test_color_follows_environment(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("CJSENGINE_COLOR", "never")
        assert "\x1b[" not in format_error(ModuleCollisionError("fs"))

        monkeypatch.setenv("CJSENGINE_COLOR", "1")
        colored = format_error(ModuleCollisionError("fs"))
        assert "\x1b[" in colored
        assert _ANSI_ESCAPE.sub("", colored).startswith("error[E0004]: module 'fs' is already registered")

    def test_no_color(self, no_color):
        assert "\x1b[" not in format_error(ModuleArgumentError("A module id is required."))

    def test_error_record_from_exception(self):
        record = Error.from_exception(LoaderConfigurationError(".txt", "/a/b.txt"))
        assert record.code == "E0003"
        assert record.notes == ["while loading /a/b.txt"]
