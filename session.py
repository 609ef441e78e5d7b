import logging
from dataclasses import dataclass, field
from enum import Enum

from PySide6.QtCore import QLineF, QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QImage, QPainter, QPen

from export import ExportError, ExportResult

log = logging.getLogger(__name__)

CANVAS_WIDTH = 400
CANVAS_HEIGHT = 400
BACKGROUND_COLOR = "#ffffff"
SLIDER_MIN = 1
SLIDER_MAX = 25

# Brushes thinner than this get padded so the dots stay visible.
THIN_BRUSH_LIMIT = 3
THIN_BRUSH_PADDING = 2


class Tool(Enum):
    STRAIGHT_LINE = "Straight Line"
    PARTICLE_TRACE = "Particle Trace"
    ERASE = "Erase"


def clamp_width(value, lo=SLIDER_MIN, hi=SLIDER_MAX):
    return max(lo, min(hi, float(value)))


def dot_diameter(width):
    """Diameter of a particle-trace dot for a brush of the given width."""
    if width < THIN_BRUSH_LIMIT:
        return width + THIN_BRUSH_PADDING
    return width


@dataclass
class ToolState:
    color: QColor = field(default_factory=lambda: QColor("#000000"))
    width: float = float(SLIDER_MIN)
    tool: Tool = Tool.STRAIGHT_LINE
    min_width: float = float(SLIDER_MIN)
    max_width: float = float(SLIDER_MAX)


class DrawingSession:
    """Owns the raster surface and turns pointer events into strokes.

    Every pointer handler looks at ``state.tool``; the same three handlers
    serve all tools.
    """

    def __init__(self, width=CANVAS_WIDTH, height=CANVAS_HEIGHT, state=None):
        self.surface = QImage(width, height, QImage.Format_ARGB32)
        self.surface.fill(QColor(BACKGROUND_COLOR))
        self.state = state or ToolState()
        self.track = None
        self.snapshot = None
        self.image_path = None

    @property
    def tool(self) -> Tool:
        return self.state.tool

    @property
    def color(self) -> QColor:
        return self.state.color

    @property
    def width(self) -> float:
        return self.state.width

    @property
    def image_uri(self):
        if self.image_path is None:
            return None
        return self.image_path.resolve().as_uri()

    def select_tool(self, tool: Tool):
        if not isinstance(tool, Tool):
            raise ValueError(f"unknown tool: {tool!r}")
        self.state.tool = tool
        if tool is Tool.ERASE:
            self.state.color = QColor(BACKGROUND_COLOR)
        log.info("[tool] %s", tool.value)

    def set_stroke_color(self, color):
        self.state.color = QColor(color)

    def set_stroke_width(self, value) -> float:
        self.state.width = clamp_width(value, self.state.min_width, self.state.max_width)
        return self.state.width

    def on_pointer_down(self, x, y):
        self.track = (x, y)

    def on_pointer_move(self, x, y):
        if self.state.tool is Tool.STRAIGHT_LINE:
            return
        self._draw_dot(x, y)
        self.track = (x, y)

    def on_pointer_up(self, x, y):
        if self.state.tool is not Tool.STRAIGHT_LINE:
            return
        if self.track is None:
            log.debug("[line] release at (%s, %s) without a press", x, y)
            return
        x0, y0 = self.track
        self._draw_line(x0, y0, x, y)
        self.track = None

    def export_image(self, exporter) -> ExportResult:
        """Snapshot the surface and hand it to *exporter* for writing.

        Cancelling the dialog and failing to write both leave the surface
        untouched; only a successful write updates ``image_path``.
        """
        self.snapshot = self.surface.copy()
        path = exporter.request_path()
        if not path:
            log.info("[save] cancelled")
            return ExportResult.cancelled()
        try:
            written = exporter.write(self.snapshot, path)
        except ExportError as e:
            log.error("[save] FAILED: %s", e)
            return ExportResult.failed(str(e))
        result = ExportResult.saved(written)
        self.image_path = result.path
        log.info("[save] wrote %s", result.path)
        return result

    def _draw_line(self, x0, y0, x1, y1):
        width = clamp_width(self.state.width, self.state.min_width, self.state.max_width)
        pen = QPen(self.state.color)
        pen.setWidthF(width)
        painter = QPainter(self.surface)
        painter.setPen(pen)
        painter.drawLine(QLineF(QPointF(x0, y0), QPointF(x1, y1)))
        painter.end()

    def _draw_dot(self, x, y):
        width = clamp_width(self.state.width, self.state.min_width, self.state.max_width)
        d = dot_diameter(width)
        painter = QPainter(self.surface)
        painter.setPen(Qt.NoPen)
        painter.setBrush(QBrush(self.state.color))
        painter.drawEllipse(QRectF(x - d / 2, y - d / 2, d, d))
        painter.end()
