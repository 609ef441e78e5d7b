from PySide6.QtCore import Qt
from PySide6.QtGui import QPainter
from PySide6.QtWidgets import QWidget

from session import DrawingSession


class Canvas(QWidget):
    def __init__(self, session=None):
        super().__init__()
        self.session = session or DrawingSession()
        self.setFixedSize(self.session.surface.size())
        self.setCursor(Qt.CrossCursor)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.drawImage(0, 0, self.session.surface)
        painter.end()

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            pos = event.position()
            self.session.on_pointer_down(pos.x(), pos.y())

    def mouseMoveEvent(self, event):
        if event.buttons() & Qt.LeftButton:
            pos = event.position()
            self.session.on_pointer_move(pos.x(), pos.y())
            self.update()

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton:
            pos = event.position()
            self.session.on_pointer_up(pos.x(), pos.y())
            self.update()
