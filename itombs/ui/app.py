"""Main NiceGUI application."""

from nicegui import app, ui

from itombs.api.routes import router
from itombs.config import settings
from itombs.ui.tree_page import FamilyTreePage, parse_owner_id


def _missing_user():
    ui.label("No user selected. Open this page with ?userid=<id>.") \
        .classes("text-gray-500 p-8")


async def _show_tree(userid: str, editable: bool):
    owner_id = parse_owner_id(userid)
    if owner_id is None:
        _missing_user()
        return

    page = FamilyTreePage(owner_id, editable=editable)
    page.build()
    await ui.context.client.connected()
    await page.measure()
    await page.refresh()


def create_app():
    """Register the tree pages and mount the tree API on the NiceGUI server."""
    app.include_router(router)

    @ui.page("/admin/tree")
    async def admin_tree_page(userid: str = ""):
        await _show_tree(userid, editable=True)

    @ui.page("/guest/tree")
    async def guest_tree_page(userid: str = ""):
        await _show_tree(userid, editable=False)

    return admin_tree_page, guest_tree_page


def run_app():
    """Create and run the UI server."""
    create_app()
    ui.run(title="iTombs", host=settings.server.host, port=settings.server.ui_port, reload=False)


if __name__ in {"__main__", "__mp_main__"}:
    run_app()
