"""
State Scores - Main Entry Point

Loads the states dataset, starts a session and opens the map window.
"""
import argparse
import logging
import sys

from PySide6 import QtWidgets

from app.desktop.main_window import MainWindow
from core.config import load_settings
from core.data import load_states_data
from core.errors import InvalidDataset
from core.session import Session

log = logging.getLogger("statescores")


def build_parser(settings) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Interactive US state scores map")
    ap.add_argument(
        "--data",
        default=str(settings.data_path),
        help="GeoJSON FeatureCollection of states (default: %(default)s)",
    )
    ap.add_argument(
        "--strict",
        action="store_true",
        default=settings.strict,
        help="Raise on references to unknown regions instead of logging them",
    )
    ap.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (default: %(default)s)",
    )
    return ap


def main(argv=None) -> int:
    settings = load_settings()
    args = build_parser(settings).parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        session = Session(strict=args.strict).initialize(load_states_data(args.data))
    except InvalidDataset as e:
        log.error("Cannot start: %s", e)
        return 2

    app = QtWidgets.QApplication(sys.argv[:1])
    window = MainWindow(session)
    window.show()

    print("State Scores started.")
    print("Controls: Hover a state to see its score, Click to select it.")
    print("Key 's': Show/Hide score list. Keys '+'/'-': Vote Up/Down. Key '0': Reset zoom.")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
