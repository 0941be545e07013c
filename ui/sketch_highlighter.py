# ui/sketch_highlighter.py
import re
from typing import List, Tuple, Pattern

from PySide6.QtGui import QSyntaxHighlighter, QTextCharFormat, QColor, QFont


def _format(color: str, bold: bool = False) -> QTextCharFormat:
    fmt = QTextCharFormat()
    fmt.setForeground(QColor(color))
    if bold:
        fmt.setFontWeight(QFont.Bold)
    return fmt


class SketchHighlighter(QSyntaxHighlighter):
    """
    Arduino syntax colouring for the sketch editor.
    Rules are applied in order, so later rules (strings, comments) win.
    """

    KEYWORDS = ["void", "int", "float", "char", "if", "else", "for", "while", "return",
                "HIGH", "LOW", "INPUT", "OUTPUT"]
    BUILTINS = ["setup", "loop", "pinMode", "digitalWrite", "analogRead", "analogWrite",
                "delay", "Serial", "map", "begin", "println", "print"]

    def __init__(self, document=None):
        super().__init__(document)
        self.rules: List[Tuple[Pattern, QTextCharFormat]] = [
            (re.compile(r"\b\d+\b"), _format("#00979d")),
            (re.compile(r"\b(" + "|".join(self.BUILTINS) + r")\b"), _format("#00979d")),
            (re.compile(r"\b(" + "|".join(self.KEYWORDS) + r")\b"), _format("#d35400", bold=True)),
            (re.compile(r"#\w+"), _format("#7d8c93")),
            (re.compile(r'"[^"]*"'), _format("#e67e22")),
            (re.compile(r"//.*$"), _format("#7d8c93")),
        ]

    def highlightBlock(self, text: str) -> None:
        for pattern, fmt in self.rules:
            for match in pattern.finditer(text):
                self.setFormat(match.start(), match.end() - match.start(), fmt)
