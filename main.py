import logging
import os
import sys

from PySide6.QtWidgets import QApplication
from app.app_window import AppWindow


def configure_logging() -> None:
    level_name = os.environ.get("WORKBENCH_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s - %(levelname)s - [%(name)s] - %(message)s",
    )


def main():
    configure_logging()
    app = QApplication(sys.argv)
    window = AppWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
