from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import os
from typing import Optional, Sequence

from safecalc import config


def create_app(argv: Optional[Sequence[str]] = None) -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(config.ORG_ID)
    QCoreApplication.setApplicationName(config.APP_ID)

    app = QApplication.instance() or QApplication(list(argv or []))

    # Set the visible, translatable display name
    visible_name = QCoreApplication.translate("App", config.VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    return app
