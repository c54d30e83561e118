"""
Entry point für das Hochschul-Verzeichnis.
Dieses Modul startet die Anwendung.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import AppConfig
from .controller import DirectoryController
from .logging_config import get_logger, setup_logging
from .persistence import RecordSerializer, TextPersonRepository
from .service import University
from .view import ConsoleView

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hochschul-verzeichnis",
        description="Verzeichnis für Studenten und Lehrkräfte (Konsole)",
    )
    parser.add_argument("--data-dir", default=None, help="Ordner mit Students.txt / Teachers.txt")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """
    Startpunkt der Anwendung.
    Ablauf:
    - Konfiguration lesen
    - Logging einrichten
    - Komponenten erstellen
    - vorhandene Dateien laden
    - Controller starten
    """
    args = build_parser().parse_args(argv)
    cfg = AppConfig.from_env().mit_overrides(data_dir=args.data_dir, log_level=args.log_level)
    setup_logging(cfg.log_level)

    try:
        # Bausteine der App erstellen.
        university = University()
        serializer = RecordSerializer()
        repo = TextPersonRepository(cfg.students_path, cfg.teachers_path, serializer=serializer)
        view = ConsoleView(serializer=serializer)
        controller = DirectoryController(university, repo, view, serializer=serializer)

        geladen, uebersprungen = repo.lade(university)
        if uebersprungen:
            view.show_message(f"{geladen} Einträge geladen, {uebersprungen} fehlerhafte Zeilen übersprungen.")
        elif geladen:
            view.show_message(f"{geladen} Einträge geladen.")

        # App starten.
        controller.starte_app()

    except KeyboardInterrupt:
        # Sauberer Abbruch per Strg+C.
        print("\nAnwendung beendet.")
        sys.exit(0)

    except Exception as e:
        # Unerwarteter Fehler.
        logger.exception("Unerwarteter Fehler")
        print(f"\nFEHLER: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
