"""Tests for the NavTree widget and NavTreeApp."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from textual.widgets import ListView, RichLog

from navtree.config import NavtreeConfig
from navtree.core.messages import ChangeDirectory, ReadFile
from navtree.ui.app import NavTreeApp
from navtree.ui.file_view import PLACEHOLDER
from navtree.ui.nav_tree import NavTree

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_app(start) -> NavTreeApp:
    return NavTreeApp(start, NavtreeConfig(refresh_interval=0.0))


async def _settle(pilot, rounds: int = 4) -> None:
    """Let read workers finish and the follow-up renders run."""
    for _ in range(rounds):
        await pilot.app.workers.wait_for_complete()
        await pilot.pause()


def _richlog_text(widget: RichLog) -> str:
    return "\n".join(line.text for line in widget.lines)


def _rows(app) -> ListView:
    return app.query_one("#nav-entries", ListView)


async def _select_row(pilot, index: int) -> None:
    rows = _rows(pilot.app)
    rows.focus()
    rows.index = index
    await pilot.pause()
    await pilot.press("enter")


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestListing:
    @pytest.mark.asyncio
    async def test_initial_listing(self, project_dir) -> None:
        async with _make_app(project_dir).run_test(size=(120, 40)) as pilot:
            await _settle(pilot)
            nav = pilot.app.query_one(NavTree)

            assert nav._header_text == f"Entries for {project_dir}"
            assert nav._row_messages == [
                ChangeDirectory(project_dir.parent),
                ChangeDirectory(project_dir / "src"),
                ReadFile(project_dir / "readme.txt"),
            ]

    @pytest.mark.asyncio
    async def test_rows_match_entries(self, project_dir) -> None:
        async with _make_app(project_dir).run_test(size=(120, 40)) as pilot:
            await _settle(pilot)
            nav = pilot.app.query_one(NavTree)
            entries = nav.navigation.view.entries

            # one up row plus one row per entry
            assert len(_rows(pilot.app).children) == len(entries) + 1
            assert len(nav._row_messages) == len(entries) + 1

    @pytest.mark.asyncio
    async def test_parent_key_goes_up(self, project_dir) -> None:
        async with _make_app(project_dir / "src").run_test(size=(120, 40)) as pilot:
            await _settle(pilot)
            nav = pilot.app.query_one(NavTree)
            assert nav.navigation.directory == project_dir / "src"

            _rows(pilot.app).focus()
            await pilot.press("backspace")
            await _settle(pilot)

            assert nav.navigation.directory == project_dir
            assert nav._header_text == f"Entries for {project_dir}"

    @pytest.mark.asyncio
    async def test_enter_on_directory_descends(self, project_dir) -> None:
        async with _make_app(project_dir).run_test(size=(120, 40)) as pilot:
            await _settle(pilot)
            nav = pilot.app.query_one(NavTree)
            await _select_row(pilot, 1)  # "D - src"
            await _settle(pilot)

            assert nav.navigation.directory == project_dir / "src"
            assert nav._row_messages[1:] == [ReadFile(project_dir / "src" / "main.py")]

    @pytest.mark.asyncio
    async def test_refresh_key_picks_up_new_files(self, project_dir) -> None:
        async with _make_app(project_dir).run_test(size=(120, 40)) as pilot:
            await _settle(pilot)
            (project_dir / "added.txt").write_text("new")

            await pilot.press("r")
            await _settle(pilot)

            nav = pilot.app.query_one(NavTree)
            assert ReadFile(project_dir / "added.txt") in nav._row_messages
            assert len(_rows(pilot.app).children) == len(nav._row_messages)

    @pytest.mark.asyncio
    async def test_vanished_directory_keeps_listing(self, project_dir) -> None:
        async with _make_app(project_dir).run_test(size=(120, 40)) as pilot:
            await _settle(pilot)
            nav = pilot.app.query_one(NavTree)
            before = list(nav._row_messages)

            nav.dispatch_navigation(ChangeDirectory(project_dir / "gone"))
            await _settle(pilot)

            assert nav.navigation.directory == project_dir
            assert nav._row_messages == before

    @pytest.mark.asyncio
    async def test_crashing_read_keeps_app_running(self, project_dir) -> None:
        async with _make_app(project_dir).run_test(size=(120, 40)) as pilot:
            await _settle(pilot)
            nav = pilot.app.query_one(NavTree)
            before = list(nav._row_messages)

            with patch(
                "navtree.core.tasks.list_directory", side_effect=RuntimeError("disk on fire")
            ):
                nav.dispatch_navigation(ChangeDirectory(project_dir / "src"))
                await _settle(pilot)

            assert pilot.app.is_running
            assert nav.navigation.directory == project_dir
            assert nav.navigation.directory_read_pending is False
            assert nav._row_messages == before
            assert nav._header_text == f"Entries for {project_dir}"


class TestFileView:
    @pytest.mark.asyncio
    async def test_placeholder_before_any_file(self, project_dir) -> None:
        async with _make_app(project_dir).run_test(size=(120, 40)) as pilot:
            await _settle(pilot)

            assert pilot.app.file_view is None
            log = pilot.app.query_one("#file-content", RichLog)
            assert PLACEHOLDER in _richlog_text(log)

    @pytest.mark.asyncio
    async def test_selecting_file_shows_contents(self, project_dir) -> None:
        readme = project_dir / "readme.txt"
        async with _make_app(project_dir).run_test(size=(200, 40)) as pilot:
            await _settle(pilot)
            await _select_row(pilot, 2)  # "F - readme.txt"
            await _settle(pilot)

            assert pilot.app.file_view == (readme, "hi")
            text = _richlog_text(pilot.app.query_one("#file-content", RichLog))
            assert "File:" in text
            assert readme.name in text
            assert "hi" in text

    @pytest.mark.asyncio
    async def test_new_file_replaces_previous(self, project_dir) -> None:
        main_py = project_dir / "src" / "main.py"
        async with _make_app(project_dir).run_test(size=(120, 40)) as pilot:
            await _settle(pilot)
            nav = pilot.app.query_one(NavTree)

            nav.dispatch_navigation(ReadFile(project_dir / "readme.txt"))
            await _settle(pilot)
            nav.dispatch_navigation(ReadFile(main_py))
            await _settle(pilot)

            assert pilot.app.file_view == (main_py, "print('hello')\n")

    @pytest.mark.asyncio
    async def test_unreadable_file_keeps_previous_view(self, project_dir) -> None:
        binary = project_dir / "blob.bin"
        binary.write_bytes(b"\xff\x00\xfe")
        async with _make_app(project_dir).run_test(size=(120, 40)) as pilot:
            await _settle(pilot)
            nav = pilot.app.query_one(NavTree)

            nav.dispatch_navigation(ReadFile(project_dir / "readme.txt"))
            await _settle(pilot)
            nav.dispatch_navigation(ReadFile(binary))
            await _settle(pilot)

            assert pilot.app.file_view == (project_dir / "readme.txt", "hi")


class TestPeriodicRefresh:
    @pytest.mark.asyncio
    async def test_timer_rereads_directory(self, project_dir) -> None:
        app = NavTreeApp(project_dir, NavtreeConfig(refresh_interval=0.05))
        async with app.run_test(size=(120, 40)) as pilot:
            await _settle(pilot)
            (project_dir / "later.txt").write_text("later")

            await pilot.pause(0.3)
            await _settle(pilot)

            nav = pilot.app.query_one(NavTree)
            assert ReadFile(project_dir / "later.txt") in nav._row_messages
