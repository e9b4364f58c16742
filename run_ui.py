"""Run the iTombs family tree UI (pages and API on one server)."""

from itombs.ui.app import run_app

if __name__ in {"__main__", "__mp_main__"}:
    run_app()
