"""Shared layout components for Dropzones.

Provides a consistent header and page structure.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

from nicegui import ui

from dropzones.pages.registry import get_registered_pages

if TYPE_CHECKING:
    from collections.abc import Iterator


@contextmanager
def page_layout(title: str = "Dropzones") -> Iterator[None]:
    """Context manager for consistent page layout with a header.

    Usage:
        @page_route("/my-page", title="My Page", icon="star")
        async def my_page():
            with page_layout("My Page"):
                ui.label("Page content here")

    Args:
        title: Page title shown in header.

    Yields:
        Context for page content.
    """
    with ui.header().classes("bg-primary items-center q-py-xs"):
        ui.label(title).classes("text-h6 text-white q-ml-sm")

        # Spacer
        ui.element("div").classes("flex-grow")

        pages = get_registered_pages()
        if len(pages) > 1:
            for page in pages:
                ui.button(
                    page.title,
                    icon=page.icon,
                    on_click=lambda route=page.route: ui.navigate.to(route),
                ).props("flat color=white")

    # Main content area with padding
    with ui.element("div").classes("q-pa-md w-full"):
        yield
