"""Module: pyqt_imports.py

Author: Michael Economou
Date: 2026-02-02

Centralized PyQt5 imports to reduce import clutter in UI modules.
Groups related Qt classes together for better organization.
"""

# Core Qt classes
from PyQt5.QtCore import QEvent, QObject, QRect, Qt

# GUI classes for fonts
from PyQt5.QtGui import QFont

# Widget classes for UI components
from PyQt5.QtWidgets import (
    QApplication,
    QCheckBox,
    QDialog,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

__all__ = [
    "QApplication",
    "QCheckBox",
    "QDialog",
    "QEvent",
    "QFont",
    "QGridLayout",
    "QHBoxLayout",
    "QLabel",
    "QObject",
    "QPushButton",
    "QRect",
    "Qt",
    "QVBoxLayout",
    "QWidget",
]
