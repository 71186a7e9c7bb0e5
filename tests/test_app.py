"""Tests for the interactive explorer."""

import asyncio

from textual.widgets import Input

from scripture_ref.app import ReferenceExplorer
from scripture_ref.data.types import Reference


def _drive(app, steps):
    async def runner():
        async with app.run_test() as pilot:
            for step in steps:
                step(app)
                await pilot.pause()

    asyncio.run(runner())


class TestReferenceExplorer:
    """Test the explorer state transitions."""

    def test_start_reference(self):
        """The start reference is shown on mount."""
        app = ReferenceExplorer(start_reference="Rom 1:1-7")
        _drive(app, [])
        assert app.current == Reference("ROM", 1, 1, 1, 7)

    def test_chapter_stepping(self):
        """Next/prev chapter cross book boundaries."""
        app = ReferenceExplorer(start_reference="Rom 16")
        _drive(app, [lambda a: a.action_next_chapter()])
        assert app.current == Reference("1CO", 1, None, 1, None)

        app = ReferenceExplorer(start_reference="Rom 1")
        _drive(app, [lambda a: a.action_prev_chapter()])
        assert app.current == Reference("ACT", 28, None, 28, None)

    def test_invalid_keeps_previous(self):
        """An unparseable entry leaves the current reference alone."""
        app = ReferenceExplorer(start_reference="John 3:16")
        _drive(app, [lambda a: a.show_reference("Hezekiah 1:1")])
        assert app.current == Reference("JHN", 3, 16, 3, 16)

    def test_commands(self):
        """:commands update the current reference."""
        app = ReferenceExplorer(start_reference="Gen 1")
        _drive(
            app,
            [
                lambda a: a.run_command(":parse Gen 1:1-2:3"),
                lambda a: a.run_command(":next Gen 1:1-2:3"),
            ],
        )
        assert app.current == Reference("GEN", 3, None, 3, None)

    def test_end_of_bible(self):
        """Stepping past Revelation 22 keeps the position."""
        app = ReferenceExplorer(start_reference="Rev 22")
        _drive(app, [lambda a: a.action_next_chapter()])
        assert app.current == Reference("REV", 22, None, 22, None)

    def test_key_bindings(self):
        """PageDown/PageUp step chapters while the input has focus."""
        app = ReferenceExplorer(start_reference="Gen 50")

        async def runner():
            async with app.run_test() as pilot:
                await pilot.press("pagedown")
                await pilot.pause()
                assert app.current == Reference("EXO", 1, None, 1, None)
                await pilot.press("pageup", "pageup")
                await pilot.pause()
                assert app.current == Reference("GEN", 49, None, 49, None)

        asyncio.run(runner())

    def test_typed_reference(self):
        """Typing a reference and pressing enter shows it."""
        app = ReferenceExplorer(start_reference="Gen 1")

        async def runner():
            async with app.run_test() as pilot:
                app.query_one("#reference-input", Input).value = "jn 3:16"
                await pilot.press("enter")
                await pilot.pause()

        asyncio.run(runner())
        assert app.current == Reference("JHN", 3, 16, 3, 16)

    def test_command_suggestions(self):
        """The input suggests :command names."""
        app = ReferenceExplorer()

        async def runner():
            async with app.run_test():
                input_widget = app.query_one("#reference-input", Input)
                return await input_widget.suggester.get_suggestion(":ne")

        assert asyncio.run(runner()) == ":next"
