"""
State Scores - Main Window

PySide6 main window with the choropleth map and the score panels.
"""

from PySide6 import QtWidgets, QtCore

from core import config
from core.events import Event
from .map_view import MapView
from .widgets import AppControls

# The map view consumes the arrow keys for scrolling, so votes use +/-.
KEY_ACTIONS = {
    QtCore.Qt.Key_S: "_on_toggle_clicked",
    QtCore.Qt.Key_Plus: "_on_vote_up",
    QtCore.Qt.Key_Equal: "_on_vote_up",
    QtCore.Qt.Key_Minus: "_on_vote_down",
    QtCore.Qt.Key_0: "_on_reset_zoom",
}


class MainWindow(QtWidgets.QMainWindow):
    """
    Main application window for State Scores.

    Holds a reference to an initialized Session. Every Qt event is turned
    into one core Event and dispatched; the session notifies us and we
    redraw from the freshly composed scene.
    """

    def __init__(self, session):
        super().__init__()
        self.setWindowTitle(config.WINDOW_TITLE)
        self.resize(*config.WINDOW_SIZE)

        # Core State
        self.session = session
        self.scene = None

        # Build UI
        self._setup_ui()

        # Connect signals
        self._connect_signals()

        self.viewport.set_geometry(self.session.geometry)
        self.session.subscribe(self._on_session_changed)
        self._refresh()

    def _setup_ui(self):
        """Create the UI layout."""
        self.viewport = MapView()
        self.viewport.setSizePolicy(
            QtWidgets.QSizePolicy.Expanding,
            QtWidgets.QSizePolicy.Expanding
        )
        self.setCentralWidget(self.viewport)

        # Sidebar dock
        self.dock = QtWidgets.QDockWidget("Scores", self)
        self.dock.setAllowedAreas(
            QtCore.Qt.LeftDockWidgetArea | QtCore.Qt.RightDockWidgetArea
        )
        self.controls = AppControls()
        self.dock.setWidget(self.controls)
        self.addDockWidget(QtCore.Qt.RightDockWidgetArea, self.dock)

    def _connect_signals(self):
        """Connect UI signals to slots."""
        self.viewport.region_hovered.connect(self._on_region_hovered)
        self.viewport.region_left.connect(self._on_region_left)
        self.viewport.region_picked.connect(self._on_region_picked)
        self.controls.toggle_clicked.connect(self._on_toggle_clicked)
        self.controls.info_panel.vote_up.connect(self._on_vote_up)
        self.controls.info_panel.vote_down.connect(self._on_vote_down)

    def _dispatch(self, event):
        # Qt can still deliver hover-leave while the window is closing
        if self.session.active:
            self.session.dispatch(event)

    def _on_session_changed(self, session):
        self._refresh()

    def _refresh(self):
        self.scene = self.session.scene()
        self.viewport.render_scene(self.scene)
        self.controls.render_scene(self.scene)

    # ─────────────────────────────────────────────────────────────────────────
    # UI Event Handlers
    # ─────────────────────────────────────────────────────────────────────────

    def _on_region_hovered(self, name):
        self._dispatch(Event.hover_enter(name))

    def _on_region_left(self):
        self._dispatch(Event.hover_leave())

    def _on_region_picked(self, name):
        self._dispatch(Event.pick(name))

    def _on_toggle_clicked(self):
        self._dispatch(Event.toggle_panel())

    def _on_vote_up(self):
        if self.scene and self.scene.selection:
            self._dispatch(self.scene.selection.up)

    def _on_vote_down(self):
        if self.scene and self.scene.selection:
            self._dispatch(self.scene.selection.down)

    def _on_reset_zoom(self):
        self.viewport.reset_zoom()

    def keyPressEvent(self, event):
        """Handle keyboard shortcuts."""
        action = KEY_ACTIONS.get(event.key())
        if action is None:
            super().keyPressEvent(event)
            return
        getattr(self, action)()

    def closeEvent(self, event):
        self.session.teardown()
        super().closeEvent(event)
