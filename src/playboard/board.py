#!/usr/bin/env python3
"""
Playboard - tactical diagram editor

Launch the Tk application after upgrading any legacy saves in the layouts folder.
"""
import logging

from playboard.config import LAYOUTS_DIR, ensure_directories
from playboard.legacy import convert_legacy_layouts
from playboard.ui.app import App


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    ensure_directories()
    convert_legacy_layouts(LAYOUTS_DIR)
    app = App()
    app.mainloop()


if __name__ == "__main__":
    main()
