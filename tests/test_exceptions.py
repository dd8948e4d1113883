"""Error codes, messages and compact formatting."""

import pytest

from trellis import (
    AssetNotFoundError,
    DuplicateGlobalError,
    ErrorCode,
    LayoutDepthError,
    NestedBlockError,
    RenderDepthError,
    ReservedBlockNameError,
    UnclosedBlockError,
    UndefinedFunctionError,
    UnmatchedEndBlockError,
    ViewDirectoryNotFoundError,
    ViewError,
    ViewNotFoundError,
    ViewRuntimeError,
)
from trellis.environment import terminal
from trellis.environment.exceptions import did_you_mean
from trellis.render_context import render_context


class TestErrorCode:
    def test_codes_unique(self):
        values = [code.value for code in ErrorCode]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize("code", list(ErrorCode))
    def test_code_format(self, code):
        prefix, category, number = code.value.split("-")
        assert prefix == "T"
        assert category in {"CFG", "VIEW", "BLK", "EXT", "RUN"}
        assert len(number) == 3
        assert code.category != "unknown"

    def test_docs_url(self):
        assert ErrorCode.NESTED_BLOCK.docs_url.endswith("errors.html#t-blk-002")

    def test_category(self):
        assert ErrorCode.NESTED_BLOCK.category == "blocks"
        assert ErrorCode.VIEW_NOT_FOUND.category == "view"
        assert ErrorCode.LAYOUT_DEPTH.category == "runtime"


class TestHierarchy:
    @pytest.mark.parametrize(
        "error",
        [
            ViewDirectoryNotFoundError("views"),
            DuplicateGlobalError("site"),
            ViewNotFoundError("views/x.py"),
            AssetNotFoundError("assets/x.css"),
        ],
    )
    def test_setup_errors(self, error):
        assert isinstance(error, ViewError)
        assert not isinstance(error, ViewRuntimeError)
        assert error.code is not None

    @pytest.mark.parametrize(
        "error",
        [
            ReservedBlockNameError(),
            NestedBlockError("a", "b"),
            UnmatchedEndBlockError(),
            UnclosedBlockError("a"),
            UndefinedFunctionError("f"),
            LayoutDepthError(50, "layouts/main"),
            RenderDepthError(50, "partials/item"),
        ],
    )
    def test_runtime_errors(self, error):
        assert isinstance(error, ViewRuntimeError)
        assert error.code is not None
        assert error.suggestion

    def test_undefined_function_is_attribute_error(self):
        assert isinstance(UndefinedFunctionError("f"), AttributeError)


class TestMessages:
    def test_view_directory(self):
        assert str(ViewDirectoryNotFoundError("/srv/views")) == (
            'The specified view directory "/srv/views" does not exist.'
        )

    def test_duplicate_global(self):
        error = DuplicateGlobalError("site")
        assert str(error) == 'Unable to add "site" as this global variable has already been added.'
        assert error.name == "site"

    def test_view_not_found_plain(self):
        error = ViewNotFoundError("/srv/views/x.py")
        assert str(error) == 'View file "/srv/views/x.py" does not exist or is not a file.'
        assert error.suggestion is None

    def test_view_not_found_without_close_match(self):
        error = ViewNotFoundError("/v/zzz.py", view="zzz", available=["pages/home"])
        assert "Did you mean" not in str(error)

    def test_asset_not_found(self):
        assert str(AssetNotFoundError("/a/b.css")) == 'Asset file "/a/b.css" does not exist.'

    def test_runtime_error_location_and_stack(self):
        error = UnmatchedEndBlockError(view_name="part", view_stack=["page", "part"])
        text = str(error)
        assert text.startswith("You must begin a block before you can end it.")
        assert "  Location: part" in text
        assert "  View stack: page > part" in text
        assert "  Suggestion: " in text

    def test_runtime_error_single_view_has_no_stack_line(self):
        error = UnclosedBlockError("menu", view_name="page", view_stack=["page"])
        assert "View stack" not in str(error)

    def test_runtime_error_outside_render(self):
        error = ViewRuntimeError("Something failed")
        assert error.view_name is None
        assert error.view_stack == []
        assert str(error) == "Something failed"

    def test_runtime_error_reads_current_context(self):
        with render_context() as ctx:
            ctx.view_name = "partials/item"
            ctx.view_stack = ["pages/home", "partials/item"]
            error = ViewRuntimeError("Something failed")
        assert error.view_name == "partials/item"
        assert error.view_stack == ["pages/home", "partials/item"]

    def test_depth_errors(self):
        assert str(LayoutDepthError(3, "a")).startswith("Maximum layout depth exceeded (3) when applying layout 'a'")
        assert str(RenderDepthError(3, "b")).startswith("Maximum render depth exceeded (3) when rendering 'b'")


class TestFormatCompact:
    def test_runtime_error_plain(self, monkeypatch):
        monkeypatch.setattr(terminal, "_USE_COLORS", False)
        error = NestedBlockError("menu", "sidebar", view_name="page", view_stack=["layout", "page"])
        lines = error.format_compact().splitlines()
        assert lines[0] == "T-BLK-002: You cannot nest blocks within other blocks."
        assert lines[1] == "  Location: page"
        assert lines[2] == "  View stack: layout > page"
        assert lines[3] == '  Hint: Call end_block() for "menu" before beginning "sidebar"'
        assert lines[4].startswith("  Docs: https://")

    def test_setup_error_plain(self, monkeypatch):
        monkeypatch.setattr(terminal, "_USE_COLORS", False)
        error = ViewNotFoundError("/v/pages/hom.py", view="pages/hom", available=["pages/home"])
        text = error.format_compact()
        assert text.startswith("T-VIEW-001: View file")
        assert "  Hint: Did you mean 'pages/home'?" in text

    def test_colored(self, monkeypatch):
        monkeypatch.setattr(terminal, "_USE_COLORS", True)
        text = DuplicateGlobalError("site").format_compact()
        assert "\033[" in text
        assert terminal.strip_colors(text).startswith("T-CFG-002: Unable to add")


class TestDidYouMean:
    def test_close_match(self):
        assert did_you_mean("asest", ["asset", "esc"]) == "asset"

    def test_no_match(self):
        assert did_you_mean("zzz", ["asset"]) is None
        assert did_you_mean("asset", []) is None
