"""
UI layer für die Console

Diese View zeigt Menü und Personenlisten in der Konsole.
- Text formatieren und ausgeben
- Listen als Kasten mit Rahmen bauen
- Eingaben lesen
"""

from __future__ import annotations

import shutil
import textwrap
from datetime import date
from typing import List, Optional, Sequence

from .domain import Person
from .persistence import RecordSerializer


class ConsoleView:
    """
    View für die Konsole.

    Die Breite wird automatisch anhand des aktuellen Fensters ermittelt.
    """

    def __init__(
        self,
        width: int | None = None,
        serializer: Optional[RecordSerializer] = None,
    ) -> None:
        """
        Erstellt die View.
        - Wenn width None ist, wird die Terminal-Breite genutzt.
        - Es gibt eine Mindestbreite von 60.
        """
        term_cols = shutil.get_terminal_size(fallback=(100, 24)).columns

        if width is None:
            width = term_cols

        self._width = max(60, width)
        self._serializer = serializer or RecordSerializer()

    def render_menue(self) -> None:
        """Zeigt das Hauptmenü."""
        print()
        print("╔═══════════════════════════════════════╗")
        print("║            HAUPTMENÜ                  ║")
        print("╠═══════════════════════════════════════╣")
        print("║   1) Student hinzufügen               ║")
        print("║   2) Lehrkraft hinzufügen             ║")
        print("║   3) Nach Nachname suchen             ║")
        print("║   4) Studenten über Notenschwelle     ║")
        print("║   5) Student entfernen                ║")
        print("║   6) Lehrkraft entfernen              ║")
        print("║   7) Alle Studenten anzeigen          ║")
        print("║   8) Alle Lehrkräfte anzeigen         ║")
        print("║   9) Studenten speichern              ║")
        print("║  10) Lehrkräfte speichern             ║")
        print("║  11) Beenden                          ║")
        print("╚═══════════════════════════════════════╝")

    def prompt(self, frage: str) -> str:
        """
        Fragt den Nutzer nach Eingabe.
        """
        return input(frage)

    def show_message(self, text: str) -> None:
        """
        Gibt eine Nachricht aus.
        """
        print(text)

    def render_personen(
        self,
        titel: str,
        personen: Sequence[Person],
        today: Optional[date] = None,
    ) -> None:
        """Zeigt eine Liste von Personen im Rahmen."""
        print(self.build_personen(titel, personen, today))

    def build_personen(
        self,
        titel: str,
        personen: Sequence[Person],
        today: Optional[date] = None,
    ) -> str:
        """
        Baut die Personenliste als Text.
        Eine Person pro Zeile, nummeriert.
        """
        sep = "+" + "─" * (self._width - 2) + "+"
        lines: List[str] = [sep]
        lines.extend(self._rows_wrapped(f"{titel} ({len(personen)})"))
        lines.append(sep)

        for i, p in enumerate(personen, 1):
            text = f"{i:3d}) {self._serializer.format_person(p, today)}"
            lines.extend(self._rows_wrapped(text))

        lines.append(sep)
        return "\n".join(lines)

    def _rows_wrapped(self, text: str) -> List[str]:
        """
        Bricht langen Text um.
        """
        inner = self._width - 2
        rows: List[str] = []

        wrapped = textwrap.wrap(
            text,
            width=inner,
            break_long_words=True,
            drop_whitespace=False,
            replace_whitespace=False,
        )

        if not wrapped:
            wrapped = [""]

        for part in wrapped:
            rows.append("│" + part.ljust(inner) + "│")

        return rows
