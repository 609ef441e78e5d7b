import pytest
from PySide6.QtCore import QEvent, QPointF, Qt
from PySide6.QtGui import QMouseEvent

from canvas import Canvas
from session import CANVAS_HEIGHT, CANVAS_WIDTH, Tool

pytestmark = pytest.mark.usefixtures("qapp")


def mouse(kind, x, y, button=Qt.LeftButton, buttons=Qt.LeftButton):
    pos = QPointF(x, y)
    return QMouseEvent(kind, pos, pos, button, buttons, Qt.NoModifier)


def press(canvas, x, y):
    canvas.mousePressEvent(mouse(QEvent.MouseButtonPress, x, y))


def drag(canvas, x, y):
    canvas.mouseMoveEvent(mouse(QEvent.MouseMove, x, y, button=Qt.NoButton))


def release(canvas, x, y):
    canvas.mouseReleaseEvent(mouse(QEvent.MouseButtonRelease, x, y, buttons=Qt.NoButton))


@pytest.fixture
def canvas():
    return Canvas()


def test_canvas_matches_surface_size(canvas):
    assert canvas.width() == CANVAS_WIDTH
    assert canvas.height() == CANVAS_HEIGHT


def test_press_records_track(canvas):
    press(canvas, 12.5, 40)
    assert canvas.session.track == (12.5, 40)


def test_drag_and_release_draw_line(canvas):
    canvas.session.set_stroke_width(5)
    press(canvas, 10, 10)
    drag(canvas, 60, 60)
    release(canvas, 100, 10)
    assert canvas.session.surface.pixelColor(55, 10).name() == "#000000"
    assert canvas.session.surface.pixelColor(60, 60).name() == "#ffffff"


def test_drag_without_button_is_ignored(canvas, monkeypatch):
    calls = []
    monkeypatch.setattr(canvas.session, "on_pointer_move", lambda x, y: calls.append((x, y)))
    canvas.mouseMoveEvent(mouse(QEvent.MouseMove, 5, 5, button=Qt.NoButton, buttons=Qt.NoButton))
    assert calls == []


def test_right_button_does_not_draw(canvas):
    canvas.mousePressEvent(mouse(QEvent.MouseButtonPress, 10, 10, Qt.RightButton, Qt.RightButton))
    assert canvas.session.track is None


def test_particle_trace_through_mouse_events(canvas):
    canvas.session.select_tool(Tool.PARTICLE_TRACE)
    canvas.session.set_stroke_width(8)
    press(canvas, 100, 100)
    drag(canvas, 100, 100)
    drag(canvas, 150, 100)
    release(canvas, 150, 100)
    surface = canvas.session.surface
    assert surface.pixelColor(100, 100).name() == "#000000"
    assert surface.pixelColor(150, 100).name() == "#000000"
    assert surface.pixelColor(125, 100).name() == "#ffffff"
