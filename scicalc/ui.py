#!/usr/bin/env python3
"""
Scientific Calculator - desktop shell around scicalc.engine
Buttons and keys are translated to core actions; after each action the
window re-reads display, pending op, angle mode, memory and history.
"""

import sys
from PyQt6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QGridLayout, QPushButton, QLabel, QDialog, QDialogButtonBox,
    QCheckBox, QFontDialog, QScrollArea, QFrame, QMessageBox
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont, QKeyEvent, QAction
import qdarktheme

from .config import load_settings, save_settings
from .engine import ScientificCalculator
from .keymap import (
    CoreAction, action_for_key, dispatch,
    DIGIT, DECIMAL, OPERATOR, EVALUATE, FUNCTION, MEMORY,
    TOGGLE_ANGLE, CLEAR_ALL, CLEAR_ENTRY,
)
from .numeric import group_thousands
from .state import AngleMode


# Button definitions (text, row, col, action)
SCIENTIFIC_BUTTONS = [
    # Row 0 - Memory and variables
    ("MC", 0, 0, CoreAction(MEMORY, "MC")), ("MR", 0, 1, CoreAction(MEMORY, "MR")),
    ("M+", 0, 2, CoreAction(MEMORY, "M+")), ("M-", 0, 3, CoreAction(MEMORY, "M-")),
    ("STO", 0, 4, CoreAction(MEMORY, "STO")), ("RCL", 0, 5, CoreAction(MEMORY, "RCL")),
    # Row 1 - Trig
    ("sin", 1, 0, CoreAction(FUNCTION, "sin")), ("cos", 1, 1, CoreAction(FUNCTION, "cos")),
    ("tan", 1, 2, CoreAction(FUNCTION, "tan")), ("sin⁻¹", 1, 3, CoreAction(FUNCTION, "sin⁻¹")),
    ("cos⁻¹", 1, 4, CoreAction(FUNCTION, "cos⁻¹")), ("tan⁻¹", 1, 5, CoreAction(FUNCTION, "tan⁻¹")),
    # Row 2 - Hyperbolic and logs
    ("sinh", 2, 0, CoreAction(FUNCTION, "sinh")), ("cosh", 2, 1, CoreAction(FUNCTION, "cosh")),
    ("tanh", 2, 2, CoreAction(FUNCTION, "tanh")), ("log", 2, 3, CoreAction(FUNCTION, "log")),
    ("ln", 2, 4, CoreAction(FUNCTION, "ln")), ("n!", 2, 5, CoreAction(FUNCTION, "n!")),
    # Row 3 - Powers and roots
    ("x²", 3, 0, CoreAction(FUNCTION, "x²")), ("x³", 3, 1, CoreAction(FUNCTION, "x³")),
    ("x^y", 3, 2, CoreAction(OPERATOR, "x^y")), ("y^x", 3, 3, CoreAction(OPERATOR, "y^x")),
    ("√", 3, 4, CoreAction(FUNCTION, "sqrt")), ("∛x", 3, 5, CoreAction(FUNCTION, "∛x")),
    # Row 4
    ("10^x", 4, 0, CoreAction(FUNCTION, "10^x")), ("e^x", 4, 1, CoreAction(FUNCTION, "e^x")),
    ("1/x", 4, 2, CoreAction(FUNCTION, "1/x")), ("π", 4, 3, CoreAction(FUNCTION, "π")),
    ("e", 4, 4, CoreAction(FUNCTION, "e")), ("Ans", 4, 5, CoreAction(FUNCTION, "Ans")),
    # Row 5
    ("nCr", 5, 0, CoreAction(OPERATOR, "nCr")), ("nPr", 5, 1, CoreAction(OPERATOR, "nPr")),
    ("(", 5, 2, CoreAction(OPERATOR, "(")), (")", 5, 3, CoreAction(OPERATOR, ")")),
    ("%", 5, 4, CoreAction(FUNCTION, "%")), ("DEG/RAD", 5, 5, CoreAction(TOGGLE_ANGLE)),
]

BASIC_BUTTONS = [
    # Row 0
    ("C", 0, 0, CoreAction(CLEAR_ALL)), ("CE", 0, 1, CoreAction(CLEAR_ENTRY)),
    ("±", 0, 2, CoreAction(FUNCTION, "±")), ("÷", 0, 3, CoreAction(OPERATOR, "÷")),
    # Row 1
    ("7", 1, 0, CoreAction(DIGIT, "7")), ("8", 1, 1, CoreAction(DIGIT, "8")),
    ("9", 1, 2, CoreAction(DIGIT, "9")), ("×", 1, 3, CoreAction(OPERATOR, "×")),
    # Row 2
    ("4", 2, 0, CoreAction(DIGIT, "4")), ("5", 2, 1, CoreAction(DIGIT, "5")),
    ("6", 2, 2, CoreAction(DIGIT, "6")), ("-", 2, 3, CoreAction(OPERATOR, "-")),
    # Row 3
    ("1", 3, 0, CoreAction(DIGIT, "1")), ("2", 3, 1, CoreAction(DIGIT, "2")),
    ("3", 3, 2, CoreAction(DIGIT, "3")), ("+", 3, 3, CoreAction(OPERATOR, "+")),
    # Row 4
    ("0", 4, 0, CoreAction(DIGIT, "0")), (".", 4, 1, CoreAction(DECIMAL)),
    ("=", 4, 2, CoreAction(EVALUATE)),
]

BUTTON_STYLE = """
    QPushButton {
        border: 1px solid #a0a0a0;
        border-radius: 3px;
        font-size: 12pt;
    }
"""


class SettingsDialog(QDialog):
    """Settings dialog for calculator preferences"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.resize(275, 150)

        layout = QVBoxLayout()

        # Commas option
        self.commas_check = QCheckBox("Show thousands separator (e.g. 1,000)")
        self.commas_check.setChecked(parent.config.get("show_commas", False))
        layout.addWidget(self.commas_check)

        # Startup angle mode
        self.degrees_check = QCheckBox("Start in degrees")
        self.degrees_check.setChecked(parent.config.get("start_in_degrees", True))
        layout.addWidget(self.degrees_check)

        # Font selection
        font_layout = QHBoxLayout()
        font_label = QLabel("Display Font:")
        self.font_button = QPushButton("Choose Font...")
        self.font_button.clicked.connect(self.choose_font)
        font_layout.addWidget(font_label)
        font_layout.addWidget(self.font_button)
        font_layout.addStretch()
        layout.addLayout(font_layout)

        layout.addStretch()

        # Dialog buttons
        button_box = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok |
            QDialogButtonBox.StandardButton.Cancel
        )
        button_box.accepted.connect(self.accept)
        button_box.rejected.connect(self.reject)
        layout.addWidget(button_box)

        self.setLayout(layout)
        self.selected_font = None

    def choose_font(self):
        """Open font dialog"""
        current_font = self.parent().display.font()
        font, ok = QFontDialog.getFont(current_font, self)
        if ok:
            self.selected_font = font


class HistoryPanel(QFrame):
    """History panel showing previous calculations"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setFrameStyle(QFrame.Shape.StyledPanel | QFrame.Shadow.Sunken)
        self.setMaximumWidth(300)
        self.setMinimumWidth(300)

        layout = QVBoxLayout()
        layout.setContentsMargins(8, 8, 8, 8)

        # Title
        title = QLabel("History")
        title_font = QFont()
        title_font.setBold(True)
        title.setFont(title_font)
        layout.addWidget(title)

        # Scroll area for history items
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)

        self.history_widget = QWidget()
        self.history_layout = QVBoxLayout()
        self.history_layout.setSpacing(4)
        self.history_layout.addStretch()
        self.history_widget.setLayout(self.history_layout)

        scroll.setWidget(self.history_widget)
        layout.addWidget(scroll)

        self.setLayout(layout)
        self.history_items = []
        self.shown_entries = []

    def show_entries(self, entries):
        """Rebuild the panel from the core's history, newest first"""
        if entries == self.shown_entries:
            return

        for label in self.history_items:
            self.history_layout.removeWidget(label)
            label.deleteLater()
        self.history_items.clear()

        # Stretch stays last
        for index, entry in enumerate(entries):
            label = QLabel(f"{entry.timestamp:%H:%M:%S}\n{entry.expression}\n= {entry.result}")
            label.setWordWrap(True)
            label.setStyleSheet("padding: 4px; background-color: #101010; border-radius: 3px;")
            font = QFont()
            font.setPointSize(9)
            label.setFont(font)
            self.history_layout.insertWidget(index, label)
            self.history_items.append(label)

        self.shown_entries = list(entries)


class ScientificCalculatorWindow(QMainWindow):
    """Main calculator window"""

    def __init__(self, config_file=None):
        super().__init__()

        self.config_file = config_file
        self.config = load_settings(self.config_file)

        # Calculator state lives in the core only
        self.calculator = ScientificCalculator()
        if not self.config.get("start_in_degrees", True):
            self.calculator.toggle_angle_mode()

        self.init_ui()
        self.apply_font()

    def init_ui(self):
        """Initialize the user interface"""
        self.setWindowTitle("Scientific Calculator")

        # Central widget and main layout
        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QHBoxLayout()
        main_layout.setSpacing(10)

        # Left side - calculator
        calc_layout = QVBoxLayout()
        calc_layout.setSpacing(8)

        # Display area
        display_frame = QFrame()
        display_frame.setFrameStyle(QFrame.Shape.StyledPanel | QFrame.Shadow.Sunken)
        display_layout = QVBoxLayout()
        display_layout.setContentsMargins(5, 5, 5, 5)

        # Top info row (Mode + Pending Op)
        info_layout = QHBoxLayout()

        # Mode indicator
        self.mode_label = QLabel("DEG")
        mode_font = QFont()
        mode_font.setBold(True)
        mode_font.setPointSize(9)
        self.mode_label.setFont(mode_font)
        self.mode_label.setStyleSheet("color: #0066cc;")
        info_layout.addWidget(self.mode_label)

        info_layout.addStretch()

        # Pending Operation Indicator
        self.op_label = QLabel("")
        op_font = QFont("Consolas", 20)
        op_font.setBold(True)
        self.op_label.setFont(op_font)
        self.op_label.setStyleSheet("color: #ffa500;")  # Orange for visibility
        info_layout.addWidget(self.op_label)

        display_layout.addLayout(info_layout)

        # Main display
        self.display = QLabel("0")
        self.display.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        display_font = QFont("Consolas", 24)
        self.display.setFont(display_font)
        self.display.setMinimumHeight(60)
        display_layout.addWidget(self.display)

        display_frame.setLayout(display_layout)
        calc_layout.addWidget(display_frame)

        calc_layout.addLayout(self.build_grid(SCIENTIFIC_BUTTONS, "#2a2438"))
        calc_layout.addLayout(self.build_grid(BASIC_BUTTONS, None))

        main_layout.addLayout(calc_layout)

        # Right side - history panel
        self.history_panel = HistoryPanel()
        main_layout.addWidget(self.history_panel)

        central.setLayout(main_layout)

        # Menu bar
        menubar = self.menuBar()

        # Edit menu
        edit_menu = menubar.addMenu("&Edit")

        clear_history_action = QAction("Clear &History", self)
        clear_history_action.triggered.connect(self.clear_history)
        edit_menu.addAction(clear_history_action)

        edit_menu.addSeparator()

        settings_action = QAction("&Settings...", self)
        settings_action.triggered.connect(self.show_settings)
        edit_menu.addAction(settings_action)

        # Help menu
        help_menu = menubar.addMenu("&Help")

        shortcuts_action = QAction("&Keyboard Shortcuts", self)
        shortcuts_action.triggered.connect(self.show_shortcuts)
        help_menu.addAction(shortcuts_action)

        # Set window properties
        size_w = 820
        size_h = 640
        self.setFixedSize(size_w, size_h)
        # Prevent maximize
        self.setWindowFlags(self.windowFlags() & ~Qt.WindowType.WindowMaximizeButtonHint)

        self.update_display()

    def build_grid(self, buttons, color):
        button_layout = QGridLayout()
        button_layout.setSpacing(4)

        for text, row, col, action in buttons:
            btn = QPushButton(text)
            btn.setMinimumSize(50, 40)
            btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            btn.setStyleSheet(BUTTON_STYLE)
            btn.clicked.connect(lambda checked, a=action: self.run_action(a))

            if action.name == EVALUATE:
                btn.setStyleSheet(btn.styleSheet() + "QPushButton { background-color: #1f2b27; font-weight: bold; }")
            elif action.name == MEMORY:
                btn.setStyleSheet(btn.styleSheet() + "QPushButton { background-color: #3b3020; }")
            elif action.name == OPERATOR and action.argument in "+-×÷":
                btn.setStyleSheet(btn.styleSheet() + "QPushButton { background-color: #243036; }")
            elif color:
                btn.setStyleSheet(btn.styleSheet() + f"QPushButton {{ background-color: {color}; }}")

            # "=" spans the last two columns
            if action.name == EVALUATE:
                button_layout.addWidget(btn, row, col, 1, 2)
            else:
                button_layout.addWidget(btn, row, col)

        return button_layout

    def run_action(self, action):
        """Forward an action to the core, then re-read its state"""
        dispatch(self.calculator, action)
        self.update_display()

    def clear_history(self):
        self.calculator.clear_history()
        self.update_display()

    def apply_font(self):
        font_str = self.config.get("display_font")
        if font_str:
            font = QFont()
            if font.fromString(font_str):
                self.display.setFont(font)

    def show_settings(self):
        """Show settings dialog"""
        dialog = SettingsDialog(self)
        if dialog.exec() == QDialog.DialogCode.Accepted:
            # Apply settings
            self.config["show_commas"] = dialog.commas_check.isChecked()
            self.config["start_in_degrees"] = dialog.degrees_check.isChecked()

            if dialog.selected_font:
                self.display.setFont(dialog.selected_font)

            self.update_display()

    def show_shortcuts(self):
        """Show keyboard shortcuts help"""
        shortcuts = """
<h3>Keyboard Shortcuts</h3>
<table>
<tr><td><b>0-9 .</b></td><td>Number entry (numpad supported)</td></tr>
<tr><td><b>+, -, *, /</b></td><td>Basic operations (numpad supported)</td></tr>
<tr><td><b>^</b></td><td>x to the power y</td></tr>
<tr><td><b>!</b></td><td>Factorial</td></tr>
<tr><td><b>( )</b></td><td>Parentheses (display only)</td></tr>
<tr><td><b>A</b></td><td>Last answer</td></tr>
<tr><td><b>R</b></td><td>Memory Recall</td></tr>
<tr><td><b>Enter, =</b></td><td>Equals</td></tr>
<tr><td><b>Backspace</b></td><td>Delete last character</td></tr>
<tr><td><b>ESC</b></td><td>Clear all</td></tr>
<tr><td><b>Delete</b></td><td>Clear entry</td></tr>
</table>
<p>No operator precedence: 2 + 3 × 4 = 20.</p>
        """
        msg = QMessageBox(self)
        msg.setWindowTitle("Keyboard Shortcuts")
        msg.setTextFormat(Qt.TextFormat.RichText)
        msg.setText(shortcuts)
        msg.exec()

    def keyPressEvent(self, event: QKeyEvent):
        """Handle keyboard input"""
        action = action_for_key(event.key(), event.text())
        if action is None:
            super().keyPressEvent(event)
            return
        self.run_action(action)

    def update_mode_label(self):
        _str = "DEG" if self.calculator.angle_mode is AngleMode.DEG else "RAD"
        if self.calculator.memory != 0:
            _str += " (M)"
        if self.calculator.parentheses:
            _str += f"  ({self.calculator.parentheses}"
        self.mode_label.setText(_str)

    def update_display(self):
        """Update the display labels"""
        text = self.calculator.get_display()
        if self.config.get("show_commas", False):
            text = group_thousands(text)
        self.display.setText(text)

        self.op_label.setText(self.calculator.pending_operator or "")
        self.update_mode_label()
        self.history_panel.show_entries(self.calculator.get_history())

    def closeEvent(self, event):
        """Handle window close"""
        self.config["display_font"] = self.display.font().toString()
        save_settings(self.config, self.config_file)
        event.accept()


def main():
    app = QApplication(sys.argv)
    qdarktheme.setup_theme()

    calculator = ScientificCalculatorWindow()
    calculator.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
