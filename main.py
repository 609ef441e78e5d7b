import logging
import sys
import traceback

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QSlider, QLabel, QColorDialog,
    QMessageBox, QPushButton, QHBoxLayout, QVBoxLayout
)

from canvas import Canvas
from export import ExportStatus, PngExporter
from session import SLIDER_MAX, SLIDER_MIN, Tool

APP_NAME = "Profile Image"
WINDOW_WIDTH = 600
WINDOW_HEIGHT = 450
PADDING = 15

log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, exporter=None):
        super().__init__()
        self.setWindowTitle(APP_NAME)
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)

        self.canvas = Canvas()
        self.session = self.canvas.session
        self.exporter = exporter or PngExporter(self)

        self.status = QLabel()
        self.statusBar().addWidget(self.status)

        self.init_sidebar()
        self.update_status()

    def init_sidebar(self):
        sidebar = QVBoxLayout()
        sidebar.setSpacing(PADDING)
        sidebar.setContentsMargins(PADDING, PADDING, PADDING, PADDING)

        self.tool_buttons = {}
        for tool in (Tool.STRAIGHT_LINE, Tool.PARTICLE_TRACE):
            btn = QPushButton(tool.value)
            btn.setCheckable(True)
            btn.clicked.connect(lambda checked, t=tool: self.set_tool(t))
            sidebar.addWidget(btn)
            self.tool_buttons[tool] = btn

        self.color_btn = QPushButton("Colour")
        self.color_btn.setToolTip("Pick color")
        self.color_btn.clicked.connect(self.pick_color)
        sidebar.addWidget(self.color_btn)

        self.size_slider = QSlider(Qt.Horizontal)
        self.size_slider.setRange(SLIDER_MIN, SLIDER_MAX)
        self.size_slider.setValue(int(self.session.width))
        self.size_slider.setTickPosition(QSlider.TicksBelow)
        self.size_slider.setToolTip("Brush size")
        self.size_slider.valueChanged.connect(self.set_size)
        sidebar.addWidget(self.size_slider)

        erase_btn = QPushButton(Tool.ERASE.value)
        erase_btn.setCheckable(True)
        erase_btn.clicked.connect(lambda checked: self.set_tool(Tool.ERASE))
        sidebar.addWidget(erase_btn)
        self.tool_buttons[Tool.ERASE] = erase_btn

        self.save_btn = QPushButton("Save")
        self.save_btn.clicked.connect(self.save_image)
        sidebar.addWidget(self.save_btn)
        sidebar.addStretch()

        layout = QHBoxLayout()
        layout.addLayout(sidebar)
        layout.addWidget(self.canvas, alignment=Qt.AlignCenter)
        container = QWidget()
        container.setLayout(layout)
        self.setCentralWidget(container)

        self.update_tool_buttons()

    def set_tool(self, tool):
        self.session.select_tool(tool)
        self.update_tool_buttons()
        self.update_status()

    def update_tool_buttons(self):
        for t, btn in self.tool_buttons.items():
            btn.setChecked(self.session.tool == t)

    def set_size(self, size):
        self.session.set_stroke_width(size)
        self.update_status()

    def pick_color(self):
        color = QColorDialog.getColor(self.session.color, self, "Stroke Color")
        if color.isValid():
            self.session.set_stroke_color(color)
            self.update_status()

    def save_image(self):
        result = self.session.export_image(self.exporter)
        if result.status is ExportStatus.FAILED:
            QMessageBox.warning(self, APP_NAME, result.error)
        elif result.ok:
            self.statusBar().showMessage(f"Saved {result.path}", 5000)
        return result

    def update_status(self):
        color = QColor(self.session.color)
        self.color_btn.setStyleSheet(f"border-left: 12px solid {color.name()};")
        self.status.setText(
            f"Tool: {self.session.tool.value} | Size: {self.session.width:g} | Color: {color.name()}"
        )


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(message)s")

    def _excepthook(t, v, tb):
        log.error("".join(traceback.format_exception(t, v, tb)))
        sys.__excepthook__(t, v, tb)
    sys.excepthook = _excepthook

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    window = MainWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
