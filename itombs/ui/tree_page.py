"""Interactive family tree page for NiceGUI."""

from typing import Callable, Optional

from nicegui import events, ui

from itombs.client import RelativeClient
from itombs.config import settings
from itombs.errors import ItombsError, NotFound, ValidationError
from itombs.logger import get_logger
from itombs.models import RELATIONSHIP_CHOICES, RelativeRecord
from itombs.tree import TreeInteraction, TreeLayout, canvas_for, layout, render_svg

logger = get_logger(__name__)

# Pointer events cover mouse, pen and touch with the same offsetX/offsetY.
CANVAS_EVENTS = ["pointerdown", "pointermove", "pointerup", "pointerleave", "pointercancel"]

PRESS_EVENTS = ("pointerdown", "mousedown")
MOVE_EVENTS = ("pointermove", "mousemove")
RELEASE_EVENTS = ("pointerup", "mouseup")
LEAVE_EVENTS = ("pointerleave", "pointercancel", "mouseleave")

# Horizontal padding between the viewport and the canvas container.
CONTAINER_PADDING = 64


class FamilyTreePage:
    """Family tree for one user, editable by the owner or read-only for guests."""

    def __init__(
        self,
        owner_id: int,
        editable: bool = True,
        root_name: Optional[str] = None,
        client_factory: Callable[[], RelativeClient] = RelativeClient,
    ):
        self.owner_id = owner_id
        self.editable = editable
        self.root_name = root_name or settings.root_placeholder_name
        self.client_factory = client_factory

        self.records: list[RelativeRecord] = []
        self.canvas = canvas_for(settings.canvas.desktop_max_width, 1024)
        self.tree: TreeLayout = layout(self.root_name, [], self.canvas.width, self.canvas.height)
        self.interaction = TreeInteraction(self.tree, self.canvas)

        self.image = None
        self.canvas_container = None
        self.banner_container = None

    # ─────────────────────────────────────────
    # State (no UI required)
    # ─────────────────────────────────────────

    def apply_records(self, records: list[RelativeRecord]) -> None:
        """Recompute the layout for new data; manual drags are discarded."""
        self.records = records
        self._relayout()

    def apply_viewport(self, viewport_width: float) -> None:
        """Resize the canvas for a new viewport width."""
        container = max(viewport_width - CONTAINER_PADDING, 1)
        canvas = canvas_for(container, viewport_width)
        if canvas != self.canvas:
            self.canvas = canvas
            self._relayout()
            if self.canvas_container is not None:
                self._build_canvas()

    def _relayout(self) -> None:
        self.tree = layout(
            self.root_name, self.records,
            self.canvas.width, self.canvas.height, self.canvas.compact,
        )
        self.interaction.reset(self.tree, self.canvas)
        self._redraw()

    def handle_pointer(self, kind: str, point: tuple[float, float]) -> Optional[str]:
        """
        Feed one pointer event to the drag state.

        Returns:
            Id of a node that was clicked (pressed and released without
            dragging), otherwise None.
        """
        if kind in PRESS_EVENTS:
            node_id = self.interaction.node_at(point)
            if node_id is not None:
                self.interaction.begin_drag(node_id, point)
        elif kind in MOVE_EVENTS:
            if self.interaction.update_drag(point):
                self._redraw()
        elif kind in RELEASE_EVENTS:
            return self.interaction.end_drag()
        elif kind in LEAVE_EVENTS:
            self.interaction.end_drag()
        return None

    def svg_content(self) -> str:
        return render_svg(
            self.tree.nodes, self.tree.edges, self.canvas,
            positions=self.interaction.state.positions, standalone=False,
        )

    # ─────────────────────────────────────────
    # Rendering
    # ─────────────────────────────────────────

    def build(self):
        """Build the page UI."""
        with ui.column().classes("w-full max-w-7xl mx-auto p-4 gap-4"):
            with ui.row().classes("w-full justify-between items-center"):
                if self.editable:
                    ui.button("Back to Dashboard", icon="arrow_back",
                              on_click=lambda: ui.navigate.to(f"/admin/dashboard?user={self.owner_id}")
                              ).props("flat")
                with ui.column().classes("items-center flex-1"):
                    ui.label("Family Tree").classes("text-4xl font-extrabold")
                    ui.label(
                        "Visualize and manage your family connections"
                        if self.editable else "Explore this family's connections"
                    ).classes("text-gray-500")
                if self.editable:
                    ui.button("Add Relative", icon="add", on_click=self._open_add_dialog)

            with ui.card().classes("w-full p-4"):
                self.banner_container = ui.column().classes("w-full")
                self.canvas_container = ui.row().classes("w-full justify-center")
                self._build_canvas()

        ui.on("viewport_resize", self._on_resize)
        ui.add_body_html("""
        <script>
        window.addEventListener('resize', () => emitEvent('viewport_resize', {width: window.innerWidth}));
        </script>
        """)

    def _build_canvas(self):
        """(Re)create the drawing surface at the current canvas size."""
        self.canvas_container.clear()
        with self.canvas_container:
            self.image = ui.interactive_image(
                size=(self.canvas.width, self.canvas.height),
                content=self.svg_content(),
                on_mouse=self._on_mouse,
                events=CANVAS_EVENTS,
                cross=False,
            ).style(f"width: {self.canvas.width:g}px; touch-action: none")

    def _redraw(self):
        if self.image is None:
            return
        self.image.set_content(self.svg_content())

    def _render_banners(self):
        if self.banner_container is None:
            return
        self.banner_container.clear()
        with self.banner_container:
            if not self.records:
                with ui.card().classes("w-full bg-blue-50"):
                    ui.label("This family tree is empty!").classes("font-semibold text-blue-800")
                    if self.editable:
                        ui.label('Click "Add Relative" to start building your connections.') \
                            .classes("text-blue-600")
            if self.tree.skipped:
                names = ", ".join(f"{r.name} ({r.relationship})" for r in self.tree.skipped)
                with ui.card().classes("w-full bg-amber-50"):
                    ui.label(f"Not shown in the diagram: {names}") \
                        .classes("text-amber-800")

    # ─────────────────────────────────────────
    # Data
    # ─────────────────────────────────────────

    async def measure(self):
        """Read the viewport width from the browser; keep the current canvas if that fails."""
        try:
            width = await ui.run_javascript("window.innerWidth", timeout=2.0)
            self.apply_viewport(float(width))
        except (TimeoutError, TypeError, ValueError) as e:
            logger.warning("Could not read viewport width, keeping %gx%g canvas: %s",
                           self.canvas.width, self.canvas.height, e)

    async def refresh(self):
        """Re-fetch the whole relative list."""
        try:
            async with self.client_factory() as client:
                records = await client.list_relatives(self.owner_id)
        except ItombsError as e:
            logger.error("Loading tree for user %s failed: %s", self.owner_id, e)
            records = []
        self.apply_records(records)
        self._render_banners()

    # ─────────────────────────────────────────
    # Events
    # ─────────────────────────────────────────

    def _on_mouse(self, e: events.MouseEventArguments):
        clicked = self.handle_pointer(e.type, (e.image_x, e.image_y))
        if clicked is not None:
            self._open_details(clicked)

    def _on_resize(self, e: events.GenericEventArguments):
        self.apply_viewport(float(e.args["width"]))

    def _open_details(self, node_id: str):
        node = self.tree.get_node(node_id)
        if node is None or not node.clickable:
            return
        record = node.record

        with ui.dialog() as dialog, ui.card().classes("w-96"):
            with ui.row().classes("w-full justify-between items-center"):
                ui.label(record.name).classes("text-2xl font-bold")
                ui.button(icon="close", on_click=dialog.close).props("flat round")
            ui.label("Relationship").classes("text-sm text-gray-600")
            ui.label(record.relationship).classes("text-lg font-semibold capitalize")
            if record.profile_link:
                ui.label("Profile Link").classes("text-sm text-gray-600")
                ui.link(record.profile_link, record.profile_link, new_tab=True)
            if self.editable:
                ui.separator()
                ui.button("Delete Relative", icon="delete",
                          on_click=lambda: self._confirm_delete(dialog, record)) \
                    .classes("w-full").props("color=negative")
        dialog.open()

    def _confirm_delete(self, details_dialog, record: RelativeRecord):
        with ui.dialog() as dialog, ui.card():
            ui.label(f"Delete {record.name}?").classes("text-lg font-bold")
            ui.label("Are you sure you want to delete this relative?")

            async def confirm():
                dialog.close()
                await self._delete(details_dialog, record)

            with ui.row().classes("gap-2 mt-4"):
                ui.button("Cancel", on_click=dialog.close).props("flat")
                ui.button("Delete", on_click=confirm).props("color=negative")
        dialog.open()

    async def _delete(self, details_dialog, record: RelativeRecord):
        try:
            async with self.client_factory() as client:
                await client.delete_relative(record.id)
            ui.notify(f"{record.name} removed", type="positive")
        except NotFound:
            logger.warning("Relative %s was already deleted", record.id)
            ui.notify("This relative no longer exists", type="warning")
        except ItombsError as e:
            logger.error("Deleting relative %s failed: %s", record.id, e)
            ui.notify("Could not delete relative", type="negative")
            return
        details_dialog.close()
        await self.refresh()

    def _open_add_dialog(self):
        with ui.dialog() as dialog, ui.card().classes("w-96"):
            ui.label("Add New Relative").classes("text-lg font-bold mb-2")
            name = ui.input("Relative's Name").classes("w-full")
            relationship = ui.select(
                options=list(RELATIONSHIP_CHOICES),
                label="Relationship",
            ).classes("w-full")
            profile = ui.input("Profile URL (optional)").classes("w-full")

            async def submit():
                if not (name.value or "").strip() or not relationship.value:
                    ui.notify("Name and relationship are required", type="warning")
                    return
                add_button.disable()
                try:
                    async with self.client_factory() as client:
                        await client.add_relative(
                            self.owner_id, name.value, relationship.value, profile.value
                        )
                except ValidationError as e:
                    ui.notify(str(e), type="warning")
                    return
                except ItombsError as e:
                    logger.error("Adding relative failed: %s", e)
                    ui.notify("Could not add relative", type="negative")
                    return
                finally:
                    add_button.enable()
                dialog.close()
                await self.refresh()

            with ui.row().classes("gap-2 mt-4"):
                ui.button("Cancel", on_click=dialog.close).props("flat")
                add_button = ui.button("Add Relative", on_click=submit)
        dialog.open()


def parse_owner_id(raw: str) -> Optional[int]:
    """Owner id from the ``userid`` query parameter."""
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None
