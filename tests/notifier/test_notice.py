"""Tests for Notice and Actor."""

import dataclasses

import pytest

from wphelpers.errors import InvalidArgument
from wphelpers.notifier import Actor, Notice, Severity, error, info, success, warning


class TestNoticeConstructor:
    """Tests for constructing notices."""

    @pytest.mark.parametrize("severity", ["error", "info", "success", "warning"])
    def test_accepts_known_severities(self, severity):
        notice = Notice(severity, "Hello")
        assert notice.severity == Severity(severity)
        assert notice.class_list == ("notice", f"notice-{severity}")

    def test_unknown_severity_becomes_info(self):
        notice = Notice("catastrophe", "Hello")
        assert notice.severity is Severity.INFO
        assert notice.get_class_list() == "notice notice-info"

    @pytest.mark.parametrize(
        "text", ["", "   ", "<script>alert(1)</script>", "<b></b>", "<!-- note -->", None]
    )
    def test_rejects_empty_text(self, text):
        with pytest.raises(InvalidArgument):
            Notice("info", text)

    def test_keeps_inline_markup_only(self):
        notice = Notice("info", ' <strong class="x">Saved</strong> <a href="/">view</a> ')
        assert notice.text == "<strong>Saved</strong> view"

    def test_create_formats_values(self):
        notice = Notice.create("success", "Saved %d of %s", 3, "posts")
        assert notice.text == "Saved 3 of posts"

    def test_is_immutable(self):
        notice = Notice("info", "Hello")
        with pytest.raises(dataclasses.FrozenInstanceError):
            notice.text = "No prayers for November to linger longer..."

    @pytest.mark.parametrize(
        ("factory", "severity"),
        [
            (error, Severity.ERROR),
            (info, Severity.INFO),
            (success, Severity.SUCCESS),
            (warning, Severity.WARNING),
        ],
    )
    def test_factories(self, factory, severity):
        notice = factory("Item %s", "one")
        assert notice.severity is severity
        assert notice.text == "Item one"

    def test_extra_classes(self):
        notice = Notice("error", "Hello").with_classes("is-dismissible", "", "is-dismissible")
        assert notice.get_class_list() == "notice notice-error is-dismissible"


class TestNoticeDigest:
    """Tests for the notice digest."""

    def test_equal_notices_share_digest(self):
        assert Notice("info", "Hello").digest == Notice("info", "Hello").digest

    def test_severity_changes_digest(self):
        assert Notice("info", "Hello").digest != Notice("error", "Hello").digest

    def test_digest_is_md5_hex(self):
        digest = Notice("info", "Hello").digest
        assert len(digest) == 32
        int(digest, 16)


class TestNoticeScreens:
    """Tests for screen visibility."""

    def test_visible_everywhere_by_default(self):
        assert Notice("info", "Hello").exists_on_screen("dashboard")

    def test_show_on_screen_limits_visibility(self):
        notice = Notice("info", "Hello").show_on_screen("dashboard", "plugins")
        assert notice.exists_on_screen("plugins")
        assert not notice.exists_on_screen("edit-post")

    def test_hide_on_screen(self):
        notice = Notice("info", "Hello").hide_on_screen("dashboard")
        assert not notice.exists_on_screen("dashboard")
        assert notice.exists_on_screen("plugins")

    def test_include_wins_over_exclude(self):
        notice = Notice("info", "Hello").hide_on_screen("plugins").show_on_screen("dashboard")
        assert notice.exists_on_screen("dashboard")
        assert not notice.exists_on_screen("users")

    def test_modifiers_return_new_notices(self):
        notice = Notice("info", "Hello")
        notice.show_on_screen("dashboard")
        assert notice.include == ()

    def test_screen_ids_are_deduplicated(self):
        notice = Notice("info", "Hello").show_on_screen("a", "b", "a", "").show_on_screen("b")
        assert notice.include == ("a", "b")


class TestNoticeAudience:
    """Tests for is_renderable()."""

    def test_renderable_for_everyone_by_default(self):
        notice = Notice("info", "Hello")
        assert notice.is_renderable(Actor(1))
        assert notice.is_renderable()

    def test_user_ids(self):
        notice = Notice("info", "Hello").for_users(5, 6)
        assert notice.is_renderable(Actor(5))
        assert not notice.is_renderable(Actor(7))
        assert not notice.is_renderable()

    def test_capabilities(self):
        notice = Notice("info", "Hello").for_capabilities("manage_options", "edit_posts")
        assert notice.is_renderable(Actor(1, frozenset({"edit_posts"})))
        assert not notice.is_renderable(Actor(1, frozenset({"read"})))
        assert not notice.is_renderable()

    def test_user_ids_take_precedence_over_capabilities(self):
        notice = Notice("info", "Hello").for_users(5).for_capabilities("manage_options")
        assert not notice.is_renderable(Actor(9, frozenset({"manage_options"})))
        assert notice.is_renderable(Actor(5))


class TestActor:
    """Tests for Actor."""

    def test_can(self):
        actor = Actor(1, frozenset({"read"}))
        assert actor.can("read")
        assert not actor.can("manage_options")
