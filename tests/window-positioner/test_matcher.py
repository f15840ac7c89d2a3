"""Unit tests for window matching rules."""

import logging

import pytest

from fakes import FakeBackend, make_window
from window_positioner.errors import BackendError
from window_positioner.matcher import (
    WindowMatcher,
    class_matches,
    first_match,
    title_matches,
)
from window_positioner.models import TitleSubstring, WmClass, WmClassAndTitle


class TestTitleMatches:
    """Case-insensitive substring rule."""

    @pytest.mark.parametrize("query", ["firefox", "FIREFOX", "zilla fire", "Mozilla Firefox"])
    def test_substring_case_insensitive(self, query):
        assert title_matches("Mozilla Firefox", query)

    def test_no_substring(self):
        assert not title_matches("Mozilla Firefox", "chrome")

    @pytest.mark.parametrize("title", [None, ""])
    def test_missing_title_never_matches(self, title):
        assert not title_matches(title, "anything")
        assert not title_matches(title, "")

    def test_empty_query_matches_titled_window(self):
        assert title_matches("htop", "")


class TestClassMatches:
    """Case-insensitive equality rule."""

    def test_exact_case_insensitive(self):
        assert class_matches("Alacritty", "alacritty")

    def test_substring_is_not_enough(self):
        assert not class_matches("Firefoxx", "Firefox")
        assert not class_matches("firefox", "fire")

    @pytest.mark.parametrize("wm_class", [None, ""])
    def test_missing_class_never_matches(self, wm_class):
        assert not class_matches(wm_class, "")
        assert not class_matches(wm_class, "firefox")


class TestResolve:
    """WindowMatcher.resolve against a catalog."""

    def test_title_first_match_wins(self, backend):
        match = WindowMatcher(backend).resolve(TitleSubstring(query="f"))
        assert match.id == 1

    def test_title_skips_untitled_windows(self):
        backend = FakeBackend(windows=[
            make_window(1, title=None, wm_class="a"),
            make_window(2, title="", wm_class="b"),
            make_window(3, title="Terminal", wm_class="c"),
        ])
        assert WindowMatcher(backend).resolve(TitleSubstring(query="")).id == 3

    def test_class_exact_match(self, backend):
        match = WindowMatcher(backend).resolve(WmClass(query="ALACRITTY"))
        assert match.id == 2

    def test_class_never_substring(self, backend):
        assert WindowMatcher(backend).resolve(WmClass(query="Firefoxx")).id == 5
        assert WindowMatcher(backend).resolve(WmClass(query="Firefo")) is None

        only_firefoxx = FakeBackend(windows=[make_window(9, title="x", wm_class="Firefoxx")])
        assert WindowMatcher(only_firefoxx).resolve(WmClass(query="Firefox")) is None

    def test_class_and_title_on_same_window(self, backend):
        matcher = WindowMatcher(backend)
        assert matcher.resolve(WmClassAndTitle(class_query="alacritty", title_query="HTOP")).id == 3
        assert matcher.resolve(WmClassAndTitle(class_query="firefox", title_query="save")).id == 4

    def test_class_and_title_requires_both(self, backend):
        # "htop" exists, but only under Alacritty
        selector = WmClassAndTitle(class_query="firefox", title_query="htop")
        assert WindowMatcher(backend).resolve(selector) is None

    def test_not_found(self, backend):
        assert WindowMatcher(backend).resolve(TitleSubstring(query="zzz-no-such-window")) is None

    def test_empty_catalog(self):
        assert WindowMatcher(FakeBackend()).resolve(WmClass(query="firefox")) is None

    def test_order_is_preserved(self, sample_windows):
        reversed_backend = FakeBackend(windows=list(reversed(sample_windows)))
        match = WindowMatcher(reversed_backend).resolve(WmClass(query="alacritty"))
        assert match.id == 3

    def test_stable_for_identical_snapshot(self, backend):
        matcher = WindowMatcher(backend)
        selector = TitleSubstring(query="o")
        assert matcher.resolve(selector) == matcher.resolve(selector)

    def test_backend_failure_propagates(self):
        backend = FakeBackend(fail_on={"list_windows"})
        with pytest.raises(BackendError):
            WindowMatcher(backend).resolve(TitleSubstring(query="x"))

    def test_lists_available_windows_on_class_miss(self, backend, caplog):
        with caplog.at_level(logging.DEBUG, logger="window_positioner.matcher"):
            WindowMatcher(backend).resolve(WmClass(query="chromium"))

        assert "Available windows:" in caplog.text
        assert '"Alacritty" - "htop"' in caplog.text
        assert '"Firefoxx" - "No title"' in caplog.text
        # Dialogs are not listed
        assert "Save File" not in caplog.text


def test_first_match_over_plain_list():
    windows = [make_window(7, title="one"), make_window(8, title="two one")]
    assert first_match(TitleSubstring(query="one"), windows).id == 7
    assert first_match(TitleSubstring(query="three"), windows) is None
