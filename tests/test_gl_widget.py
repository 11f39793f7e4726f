import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")
pytest.importorskip("OpenGL.GL")

from tilelife.gui import gl_widget
from tilelife.gui.gl_widget import LifeGLWidget


@pytest.fixture(scope="module")
def app():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


class RecordingApp:
    codes = []

    @classmethod
    def exit(cls, code=0):
        cls.codes.append(code)


def test_missing_window_stops_application(app, monkeypatch):
    RecordingApp.codes = []
    monkeypatch.setattr(gl_widget, "QCoreApplication", RecordingApp)
    widget = LifeGLWidget()
    monkeypatch.setattr(widget, "window_size", lambda: None)

    widget.paintGL()

    assert RecordingApp.codes == [1]
    assert not widget.frame_timer.isActive()
    assert not widget.step_timer.isActive()


def test_step_timer_only_advances_running_engine(app):
    widget = LifeGLWidget()
    generations = []
    widget.generation_updated.connect(generations.append)

    widget.update_simulation()
    assert generations == []

    widget.toggle_simulation()
    widget.update_simulation()
    assert generations == [1]
    widget.frame_timer.stop()
    widget.step_timer.stop()
