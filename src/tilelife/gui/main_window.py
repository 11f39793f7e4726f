"""Main application window for the tile Game of Life."""
from PySide6.QtWidgets import QComboBox, QLabel, QMainWindow, QStatusBar, QToolBar
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QKeySequence
import logging

# Set up global logger
LOG = logging.getLogger(__name__)
LOG.setLevel(logging.DEBUG)
handler = logging.StreamHandler()
handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
LOG.addHandler(handler)

from .gl_widget import LifeGLWidget
from ..core import BinaryRule, RunState, rule_name
from ..utils.config import Config


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self):
        """Initialize the main window."""
        super().__init__()

        self.setWindowTitle(Config.WINDOW_TITLE)
        self.resize(Config.WINDOW_WIDTH, Config.WINDOW_HEIGHT)

        # Create central widget
        self.gl_widget = LifeGLWidget()
        self.setCentralWidget(self.gl_widget)

        # Connect signals
        self.gl_widget.generation_updated.connect(self.update_generation_display)
        self.gl_widget.state_changed.connect(self.update_state_display)

        # Create UI elements
        self.create_toolbar()
        self.create_status_bar()
        self.setup_keyboard_shortcuts()

    @property
    def engine(self):
        return self.gl_widget.engine

    def create_toolbar(self):
        """Create main toolbar with simulation controls."""
        toolbar = QToolBar("Main Toolbar")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        self.play_pause_action = QAction("▶ Play", self)
        self.play_pause_action.triggered.connect(self.toggle_simulation)
        toolbar.addAction(self.play_pause_action)

        step_action = QAction("⏭ Step", self)
        step_action.triggered.connect(self.step_simulation)
        toolbar.addAction(step_action)

        reset_action = QAction("⏹ Reset", self)
        reset_action.triggered.connect(self.reset_simulation)
        toolbar.addAction(reset_action)

        toolbar.addSeparator()

        # Rule selection combobox
        toolbar.addWidget(QLabel("Rule:"))
        self.rule_combobox = QComboBox()
        for rule in BinaryRule:
            self.rule_combobox.addItem(rule_name(rule), int(rule))
        self.rule_combobox.setCurrentIndex(self.rule_combobox.findData(int(self.engine.rule)))
        self.rule_combobox.currentIndexChanged.connect(self.change_rule)
        toolbar.addWidget(self.rule_combobox)

        toolbar.addSeparator()

        glider_action = QAction("🚀 Add Glider", self)
        glider_action.triggered.connect(self.add_glider)
        toolbar.addAction(glider_action)

        noise_action = QAction("🎲 Add Noise", self)
        noise_action.triggered.connect(self.add_noise)
        toolbar.addAction(noise_action)

        clear_action = QAction("🗑 Clear", self)
        clear_action.triggered.connect(self.clear_field)
        toolbar.addAction(clear_action)

    def create_status_bar(self):
        """Create status bar with generation counter, run state and arena size."""
        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

        self.generation_label = QLabel("Generation: 0")
        self.status_bar.addWidget(self.generation_label)

        self.alive_label = QLabel(f"Alive: {self.engine.alive_count}")
        self.status_bar.addWidget(self.alive_label)

        self.state_label = QLabel(f"State: {self.engine.state.value}")
        self.status_bar.addPermanentWidget(self.state_label)

        self.arena_label = QLabel(f"Arena: {self.engine.width}×{self.engine.height}")
        self.status_bar.addPermanentWidget(self.arena_label)

    def setup_keyboard_shortcuts(self):
        """Set up keyboard shortcuts."""
        shortcuts = [
            (Qt.Key_Space, self.toggle_simulation),
            (Qt.Key_S, self.step_simulation),
            (Qt.Key_R, self.reset_simulation),
            (Qt.Key_C, self.clear_field),
            (Qt.Key_N, self.add_noise),
            (Qt.Key_G, self.add_glider),
            (Qt.Key_Escape, self.close),
        ]
        for key, slot in shortcuts:
            action = QAction(self)
            action.setShortcut(QKeySequence(key))
            action.triggered.connect(slot)
            self.addAction(action)

    def toggle_simulation(self):
        """Toggle simulation play/pause."""
        self.gl_widget.toggle_simulation()

    def step_simulation(self):
        """Perform single simulation step."""
        alive_before = self.engine.alive_count
        self.gl_widget.step_simulation()
        LOG.info(f"STEP {self.engine.generation}: Alive cells before: {alive_before}, "
                 f"after: {self.engine.alive_count}")

    def reset_simulation(self):
        """Reset the simulation to its starting pattern."""
        self.gl_widget.reset_simulation()
        self.update_alive_display()

    def clear_field(self):
        """Clear the field."""
        self.gl_widget.clear_field()
        self.update_alive_display()

    def add_noise(self):
        """Add noise to the field."""
        placed = self.engine.add_noise(Config.DEFAULT_NOISE_DENSITY)
        self.gl_widget.update()
        self.update_alive_display()
        self.status_bar.showMessage(f"Added noise ({placed} cells)", 2000)

    def add_glider(self):
        """Add a glider pattern at the centre of the arena."""
        self.engine.add_pattern('glider')
        self.gl_widget.update()
        self.update_alive_display()
        self.status_bar.showMessage("Added glider pattern", 2000)

    def change_rule(self, index: int):
        """Switch the birth/survival rule from the combobox."""
        rule = BinaryRule(self.rule_combobox.itemData(index))
        self.engine.set_rule(rule)
        self.status_bar.showMessage(f"Rule: {rule_name(rule)}", 2000)

    def update_generation_display(self, generation: int):
        self.generation_label.setText(f"Generation: {generation}")
        self.update_alive_display()

    def update_alive_display(self):
        self.alive_label.setText(f"Alive: {self.engine.alive_count}")

    def update_state_display(self, state: str):
        """Update play/pause label and status after a run state change."""
        self.state_label.setText(f"State: {state}")
        if state == RunState.RUNNING.value:
            self.play_pause_action.setText("⏸ Pause")
        else:
            self.play_pause_action.setText("▶ Play")
