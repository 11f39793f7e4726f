"""OpenGL widget drawing the arena as coloured tiles."""
import logging

from PySide6.QtCore import QCoreApplication, Qt, QTimer, Signal
from PySide6.QtOpenGLWidgets import QOpenGLWidget
from PySide6.QtGui import QMouseEvent
from OpenGL.GL import *

from ..core.life_engine import LifeEngine
from ..core.projection import WindowUnavailableError, cell_at, cell_views
from ..utils.config import Config

LOG = logging.getLogger(__name__)


class LifeGLWidget(QOpenGLWidget):
    """OpenGL widget for rendering and interacting with the arena."""

    generation_updated = Signal(int)
    state_changed = Signal(str)

    def __init__(self, engine: LifeEngine = None, parent=None):
        """Initialize the OpenGL widget.

        Args:
            engine: Simulation to display; a default arena is created if omitted
            parent: Parent widget
        """
        super().__init__(parent)

        self.engine = engine if engine is not None else LifeEngine()

        # Redraw at the frame rate
        self.frame_timer = QTimer(self)
        self.frame_timer.timeout.connect(self.update)
        self.frame_timer.start(1000 // Config.DEFAULT_FPS)

        # Fixed timestep for the automaton, gated by the run state
        self.step_timer = QTimer(self)
        self.step_timer.timeout.connect(self.update_simulation)
        self.step_timer.start(int(Config.STEP_INTERVAL * 1000))

    def window_size(self):
        """Current drawable size in pixels, or None without a surface."""
        if self.width() <= 0 or self.height() <= 0:
            return None
        return (self.width(), self.height())

    def initializeGL(self):
        """Initialize OpenGL context."""
        glClearColor(*Config.BACKGROUND_COLOR)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)

    def resizeGL(self, width: int, height: int):
        """Handle widget resize.

        Args:
            width: New widget width
            height: New widget height
        """
        glViewport(0, 0, width, height)
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        # Origin in the middle, y up
        glOrtho(-width / 2, width / 2, -height / 2, height / 2, -1, 1)
        glMatrixMode(GL_MODELVIEW)

    def paintGL(self):
        """Render one quad per cell.

        Without a drawable surface the timers stop and the application exits
        with status 1; exceptions raised here would only be printed by Qt.
        """
        try:
            views = cell_views(self.engine.grid, self.window_size())
        except WindowUnavailableError as e:
            LOG.error(f"Cannot render arena: {e}")
            self.frame_timer.stop()
            self.step_timer.stop()
            QCoreApplication.exit(1)
            return

        glClear(GL_COLOR_BUFFER_BIT)

        glBegin(GL_QUADS)
        for view in views:
            x, y = view.position
            half_w, half_h = view.scale[0] / 2, view.scale[1] / 2
            glColor4f(*view.color)
            glVertex2f(x - half_w, y - half_h)
            glVertex2f(x + half_w, y - half_h)
            glVertex2f(x + half_w, y + half_h)
            glVertex2f(x - half_w, y + half_h)
        glEnd()

    def update_simulation(self):
        """Fixed-timestep callback; steps only while running."""
        if self.engine.tick():
            self.generation_updated.emit(self.engine.generation)
            self.update()

    def toggle_simulation(self):
        """Switch between paused and running."""
        state = self.engine.toggle()
        self.state_changed.emit(state.value)

    def step_simulation(self):
        """Advance one generation regardless of run state."""
        self.engine.step()
        self.generation_updated.emit(self.engine.generation)
        self.update()

    def reset_simulation(self):
        """Restore the starting pattern."""
        self.engine.reset()
        self.state_changed.emit(self.engine.state.value)
        self.generation_updated.emit(0)
        self.update()

    def clear_field(self):
        self.engine.clear()
        self.generation_updated.emit(0)
        self.update()

    def mousePressEvent(self, event: QMouseEvent):
        """Toggle the cell under a left click.

        Args:
            event: Mouse event
        """
        if event.button() != Qt.LeftButton:
            return
        size = self.window_size()
        if size is None:
            return
        width, height = size
        # Qt reports y down from the top-left corner
        pixel = (event.position().x() - width / 2, height / 2 - event.position().y())
        pos = cell_at(self.engine.grid, pixel, size)
        if pos is not None and self.engine.toggle_cell(pos.x, pos.y):
            self.update()
