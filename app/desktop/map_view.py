"""
State Scores - Map View

QGraphicsView that draws one filled shape per state and reports
hover-enter, hover-leave and click on each shape as Qt signals.
"""
from PySide6 import QtCore, QtGui, QtWidgets
from PySide6.QtCore import Qt
from PySide6.QtGui import QWheelEvent

from core import config
from core.geometry import project_ring, scene_bounds


class RegionItem(QtWidgets.QGraphicsPathItem):
    """A single region. Multi-part regions are one path with several subpaths."""

    def __init__(self, name, projected_rings, view):
        super().__init__()
        self.name = name
        self._view = view

        path = QtGui.QPainterPath()
        for points in projected_rings:
            if len(points) == 0:
                continue
            path.addPolygon(QtGui.QPolygonF([QtCore.QPointF(x, y) for x, y in points]))
            path.closeSubpath()
        self.setPath(path)

        self.setAcceptHoverEvents(True)
        self.setToolTip(name)

    def apply_style(self, shape):
        fill = QtGui.QColor(shape.fill_color)
        fill.setAlphaF(shape.fill_opacity)
        self.setBrush(QtGui.QBrush(fill))

        pen = QtGui.QPen(QtGui.QColor(shape.stroke_color))
        pen.setWidthF(shape.stroke_width)
        pen.setCosmetic(True)  # constant on-screen width at any zoom
        self.setPen(pen)

    def hoverEnterEvent(self, event):
        self._view.region_hovered.emit(self.name)
        super().hoverEnterEvent(event)

    def hoverLeaveEvent(self, event):
        self._view.region_left.emit()
        super().hoverLeaveEvent(event)

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self._view.region_picked.emit(self.name)
            event.accept()
            return
        super().mousePressEvent(event)


class MapView(QtWidgets.QGraphicsView):
    """
    Choropleth map of the loaded regions.

    Geometry is built once from the session's normalized rings; afterwards
    `render_scene` only restyles the existing items.
    """

    region_hovered = QtCore.Signal(str)
    region_left = QtCore.Signal()
    region_picked = QtCore.Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._scene = QtWidgets.QGraphicsScene(self)
        self.setScene(self._scene)
        self.items_by_name = {}

        self.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing)
        self.setBackgroundBrush(QtGui.QColor(config.BACKGROUND_COLOR))
        self.setDragMode(QtWidgets.QGraphicsView.DragMode.ScrollHandDrag)
        self.setTransformationAnchor(QtWidgets.QGraphicsView.ViewportAnchor.AnchorUnderMouse)
        self.setMouseTracking(True)

    def set_geometry(self, geometry):
        """Build items from {name: [latitude-first ring, ...]}."""
        self._scene.clear()
        self.items_by_name = {}

        all_projected = []
        for name, rings in geometry.items():
            projected = [project_ring(ring) for ring in rings]
            all_projected.extend(projected)
            item = RegionItem(name, projected, self)
            self._scene.addItem(item)
            self.items_by_name[name] = item

        bounds = scene_bounds(all_projected)
        if bounds is not None:
            min_x, min_y, max_x, max_y = bounds
            self._scene.setSceneRect(QtCore.QRectF(min_x, min_y, max_x - min_x, max_y - min_y))
        self.reset_zoom()

    def render_scene(self, scene):
        for shape in scene.shapes:
            item = self.items_by_name.get(shape.name)
            if item is not None:
                item.apply_style(shape)

    def reset_zoom(self):
        rect = self._scene.sceneRect()
        if rect.isEmpty():
            lat, lng = config.MAP_CENTER
            self.centerOn(lng * config.MAP_SCALE, -lat * config.MAP_SCALE)
            return
        self.fitInView(rect, Qt.AspectRatioMode.KeepAspectRatio)

    def wheelEvent(self, event: QWheelEvent):
        dy = event.angleDelta().y()
        if dy == 0:
            super().wheelEvent(event)
            return
        factor = config.ZOOM_STEP if dy > 0 else 1.0 / config.ZOOM_STEP
        self.scale(factor, factor)
        event.accept()
