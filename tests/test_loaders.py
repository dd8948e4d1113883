"""ViewLoader name normalisation and file resolution."""

import pytest
from hypothesis import given

from trellis import ViewDirectoryNotFoundError, ViewLoader, ViewNotFoundError
from trellis.environment.loaders import normalize_extension, normalize_view_name

from .conftest import write_views
from .strategies import inner_separator, separator_run, view_name


class TestNormalizeViewName:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("views/single", "views/single"),
            ("/views/single/", "views/single"),
            ("\\views/single\\", "views/single"),
            ("\\/\\/views/single/\\///", "views/single"),
            ("views\\nested\\page", "views/nested/page"),
            ("views//single", "views/single"),
            ("", ""),
            ("///", ""),
        ],
    )
    def test_examples(self, raw, expected):
        assert normalize_view_name(raw) == expected

    @given(view_name, separator_run, separator_run, inner_separator)
    def test_separator_noise_ignored(self, name, before, after, sep):
        noisy = before + name.replace("/", sep) + after
        assert normalize_view_name(noisy) == name

    @given(view_name)
    def test_idempotent(self, name):
        assert normalize_view_name(normalize_view_name(name)) == normalize_view_name(name)


@pytest.mark.parametrize(("raw", "expected"), [("py", "py"), (".py", "py"), ("", ""), (".html.py", "html.py")])
def test_normalize_extension(raw, expected):
    assert normalize_extension(raw) == expected


class TestViewLoader:
    @pytest.fixture
    def loader(self, tmp_path):
        write_views(
            tmp_path,
            {
                "pages/home.py": 'echo("home")',
                "pages/about.py": 'echo("about")',
                "layouts/main.py": 'echo("main")',
                "feeds/atom.xml": "<feed/>",
                "notes.txt": "not a view",
            },
        )
        return ViewLoader(tmp_path)

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ViewDirectoryNotFoundError) as exc_info:
            ViewLoader(tmp_path / "nope")
        assert exc_info.value.code.value == "T-CFG-001"

    def test_resolve_appends_extension(self, loader, tmp_path):
        assert loader.resolve("pages/home") == tmp_path.absolute() / "pages" / "home.py"

    def test_resolve_keeps_explicit_suffix(self, loader, tmp_path):
        assert loader.resolve("feeds/atom.xml") == tmp_path.absolute() / "feeds" / "atom.xml"

    def test_resolve_missing(self, loader):
        with pytest.raises(ViewNotFoundError) as exc_info:
            loader.resolve("pages/hom")
        assert exc_info.value.view == "pages/hom"
        assert exc_info.value.suggestion == "Did you mean 'pages/home'?"
        assert exc_info.value.path.endswith("hom.py")

    def test_resolve_directory_rejected(self, loader):
        with pytest.raises(ViewNotFoundError):
            loader.resolve("pages")

    def test_exists(self, loader):
        assert loader.exists("/pages/home/")
        assert not loader.exists("pages/missing")
        assert not loader.exists("")

    def test_get_source(self, loader):
        source, filename = loader.get_source("layouts/main")
        assert source == 'echo("main")'
        assert filename.endswith("main.py")

    def test_list_views(self, loader):
        assert loader.list_views() == ["layouts/main", "pages/about", "pages/home"]

    def test_list_views_without_extension(self, tmp_path):
        write_views(tmp_path, {"a.py": "", "b/c.txt": ""})
        assert ViewLoader(tmp_path, "").list_views() == ["a.py", "b/c.txt"]

    def test_repr(self, loader):
        assert "extension='py'" in repr(loader)
