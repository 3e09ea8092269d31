"""Shared test configuration and fixtures for ThemeHelper test suite."""

import sys
from pathlib import Path

import pytest

# Add backend to Python path so imports work
backend_dir = str(Path(__file__).parent.parent / "backend")
if backend_dir not in sys.path:
    sys.path.insert(0, backend_dir)


class FakeSite:
    def __init__(self, locales):
        self.locales = locales

    def get_supported_locale_names(self):
        return self.locales


class FakeContext(FakeSite):
    def __init__(self, locales, data=None):
        super().__init__(locales)
        self.data = data or {}

    def get_data(self, key):
        return self.data.get(key)


class FakeRequest:
    def __init__(self, context=None, site=None):
        self.context = context
        self.site = site or FakeSite({"en": "English"})

    def get_context(self):
        return self.context

    def get_site(self):
        return self.site


class FakeFile:
    def __init__(self, genre_id):
        self.genre_id = genre_id

    def get_genre_id(self):
        return self.genre_id


class FakeGalley:
    def __init__(self, label, genre_id=None, remote_url=None, has_file=True):
        self.label = label
        self.remote_url = remote_url
        self.file = FakeFile(genre_id) if has_file else None

    def get_remote_url(self):
        return self.remote_url

    def get_file(self):
        return self.file

    def __repr__(self):
        return f"FakeGalley({self.label!r})"


@pytest.fixture
def site():
    return FakeSite({"en": "English", "fr_CA": "Français (Canada)"})


@pytest.fixture
def journal():
    return FakeContext({"en": "English", "es": "Español"}, data={"itemsPerPage": 10})


@pytest.fixture
def request_with_context(journal, site):
    return FakeRequest(context=journal, site=site)


@pytest.fixture
def site_request(site):
    return FakeRequest(context=None, site=site)


@pytest.fixture
def galleys():
    return [
        FakeGalley("pdf", genre_id=1),
        FakeGalley("figure", genre_id=5),
        FakeGalley("remote", remote_url="https://example.org/article", has_file=False),
        FakeGalley("html", genre_id=1),
        FakeGalley("broken", has_file=False),
    ]


@pytest.fixture
def hooks():
    from themehelper.hooks import HookRegistry
    return HookRegistry()


@pytest.fixture
def template_mgr(hooks):
    from themehelper.templates.manager import TemplateManager
    return TemplateManager(hooks)
