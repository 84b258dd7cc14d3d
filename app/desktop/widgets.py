from PySide6 import QtWidgets, QtCore

from core import config


class HoverInfo(QtWidgets.QFrame):
    """
    Shows the hovered state and its score, or a placeholder.
    """
    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QtWidgets.QVBoxLayout(self)

        self.lbl_text = QtWidgets.QLabel(config.HOVER_PLACEHOLDER)
        self.lbl_text.setStyleSheet("font-weight: bold;")
        layout.addWidget(self.lbl_text)

    def set_text(self, text):
        self.lbl_text.setText(text)


class InfoPanel(QtWidgets.QGroupBox):
    """
    Selected state: name, live score and the Vote Up / Vote Down buttons.
    """
    vote_up = QtCore.Signal()
    vote_down = QtCore.Signal()

    def __init__(self, parent=None):
        super().__init__("Selection", parent)
        layout = QtWidgets.QVBoxLayout(self)

        self.lbl_placeholder = QtWidgets.QLabel(config.SELECTION_PLACEHOLDER)
        self.lbl_placeholder.setStyleSheet("color: gray; font-style: italic;")

        self.lbl_name = QtWidgets.QLabel()
        self.lbl_name.setStyleSheet("font-size: 18px; font-weight: bold;")
        self.lbl_score = QtWidgets.QLabel()

        buttons = QtWidgets.QHBoxLayout()
        self.btn_up = QtWidgets.QPushButton(config.VOTE_UP_LABEL)
        self.btn_down = QtWidgets.QPushButton(config.VOTE_DOWN_LABEL)
        self.btn_up.clicked.connect(self.vote_up.emit)
        self.btn_down.clicked.connect(self.vote_down.emit)
        buttons.addWidget(self.btn_up)
        buttons.addWidget(self.btn_down)

        layout.addWidget(self.lbl_placeholder)
        layout.addWidget(self.lbl_name)
        layout.addWidget(self.lbl_score)
        layout.addLayout(buttons)

        self.set_selection(None)

    def set_selection(self, selection):
        has_selection = selection is not None
        self.lbl_placeholder.setVisible(not has_selection)
        for widget in (self.lbl_name, self.lbl_score, self.btn_up, self.btn_down):
            widget.setVisible(has_selection)

        if has_selection:
            self.lbl_name.setText(selection.title)
            self.lbl_score.setText(selection.score_text)


class ScoresPanel(QtWidgets.QGroupBox):
    """
    List of every state and its score. Shown only while expanded.
    """
    def __init__(self, parent=None):
        super().__init__(config.SUMMARY_TITLE, parent)
        layout = QtWidgets.QVBoxLayout(self)

        self.list = QtWidgets.QListWidget()
        self.list.setSelectionMode(QtWidgets.QAbstractItemView.SelectionMode.NoSelection)
        layout.addWidget(self.list)

    def set_scores(self, summary):
        # None means collapsed
        self.setVisible(summary is not None)
        if summary is None:
            return
        self.list.clear()
        for name, score in summary:
            self.list.addItem(f"{name}: {score}")


class AppControls(QtWidgets.QWidget):
    """
    Sidebar combining hover info, the score list toggle and the selection panel.
    """
    toggle_clicked = QtCore.Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.layout = QtWidgets.QVBoxLayout(self)

        self.hover_info = HoverInfo()

        self.btn_toggle = QtWidgets.QPushButton(config.SHOW_SCORES_LABEL)
        self.btn_toggle.clicked.connect(self.toggle_clicked.emit)

        self.scores_panel = ScoresPanel()
        self.scores_panel.setVisible(False)

        self.info_panel = InfoPanel()

        self.layout.addWidget(self.hover_info)
        self.layout.addWidget(self.btn_toggle)
        self.layout.addWidget(self.scores_panel, stretch=1)
        self.layout.addWidget(self.info_panel)
        self.layout.addStretch(0)

    def render_scene(self, scene):
        self.hover_info.set_text(scene.hover_text)
        self.btn_toggle.setText(scene.toggle_label)
        self.scores_panel.set_scores(scene.summary)
        self.info_panel.set_selection(scene.selection)
