"""
Controller layer

Der DirectoryController steuert die App. Er verbindet University, Repository und View.

Aufgaben:
- Menü anzeigen und Auswahl lesen
- Datensätze parsen und hinzufügen
- Suchen, Entfernen, Anzeigen
- Speichern in die Textdateien
"""

from __future__ import annotations

import logging
import math
from typing import Callable, List, Optional, Type

from .domain import PersonRecord, Student, Teacher
from .errors import InputError, VerzeichnisError
from .persistence import RecordSerializer, TextPersonRepository
from .service import University
from .view import ConsoleView

logger = logging.getLogger(__name__)

STUDENT_FORMAT = "Nachname; Vorname; Vatersname; Geburtsdatum; Kurs; Gruppe; Note"
TEACHER_FORMAT = (
    "Nachname; Vorname; Vatersname; Geburtsdatum; Lehrstuhl; Dienstjahre; "
    "Position (Postgraduate, Professor, Docent, Senior_Lecturer, Junior_Researcher, Researcher)"
)


def parse_int(raw: str) -> int:
    """Liest eine ganze Zahl aus einer Eingabe."""
    try:
        return int(raw.strip())
    except ValueError:
        raise InputError(f"'{raw.strip()}' ist keine ganze Zahl.") from None


def parse_float(raw: str) -> float:
    """
    Liest eine Kommazahl. Dezimalkomma ist erlaubt.
    NaN und Unendlich sind keine gültigen Schwellenwerte.
    """
    text = raw.strip()
    try:
        value = float(text.replace(",", "."))
    except ValueError:
        raise InputError(f"'{text}' ist keine gültige Zahl.") from None
    if not math.isfinite(value):
        raise InputError(f"'{text}' ist keine gültige Zahl.")
    return value


class DirectoryController:
    """
    Hauptcontroller für das Verzeichnis.

    Aufgaben:
    - Menü-Schleife
    - Aufrufe an University, Repository und View
    """

    def __init__(
        self,
        university: University,
        repo: TextPersonRepository,
        view: ConsoleView,
        serializer: Optional[RecordSerializer] = None,
    ) -> None:
        """
        Erstellt den Controller.

        - university: Personen im Speicher
        - repo: Laden/Speichern der Textdateien
        - view: Ein-/Ausgabe
        """
        self._university = university
        self._repo = repo
        self._view = view
        self._serializer = serializer or RecordSerializer()

    def starte_app(self) -> None:
        """
        Startet die Menü-Schleife.
        Endet mit Auswahl 11 oder am Ende der Eingabe.
        """
        aktionen: dict[int, Callable[[], None]] = {
            1: self.add_student,
            2: self.add_teacher,
            3: self.find_by_last_name,
            4: self.find_by_avr_point,
            5: self.remove_student,
            6: self.remove_teacher,
            7: self.print_students,
            8: self.print_teachers,
            9: self.save_students,
            10: self.save_teachers,
        }

        while True:
            self._view.render_menue()
            try:
                choice = parse_int(self._view.prompt("Auswahl: "))
                if choice == 11:
                    break

                aktion = aktionen.get(choice)
                if aktion is None:
                    self._view.show_message("Ungültige Auswahl.")
                    continue
                aktion()
            except InputError as e:
                self._view.show_message(f"Ungültige Eingabe: {e.message}")
            except EOFError:
                # Eingabe beendet (Strg+D oder Pipe).
                break

        self._view.show_message("Programm wird beendet.")

    def add_student(self) -> None:
        """Liest eine Zeile und fügt einen Studenten hinzu."""
        raw = self._view.prompt(f"Daten des Studenten ({STUDENT_FORMAT}):\n")
        self._add(raw, self._serializer.parse_student, "Student hinzugefügt.")

    def add_teacher(self) -> None:
        """Liest eine Zeile und fügt eine Lehrkraft hinzu."""
        raw = self._view.prompt(f"Daten der Lehrkraft ({TEACHER_FORMAT}):\n")
        self._add(raw, self._serializer.parse_teacher, "Lehrkraft hinzugefügt.")

    def find_by_last_name(self) -> None:
        """Zeigt alle Personen mit dem Nachnamen."""
        lastname = self._view.prompt("Nachname: ").strip()
        treffer = self._university.find_by_last_name(lastname)
        if not treffer:
            self._view.show_message("Keine Person mit diesem Nachnamen gefunden.")
            return
        self._view.render_personen(f"Treffer für '{lastname}'", treffer)

    def find_by_avr_point(self) -> None:
        """
        Zeigt Studenten mit Note über dem Schwellenwert.
        Ungültige Zahl und keine Treffer werden unterschiedlich gemeldet.
        """
        try:
            threshold = parse_float(self._view.prompt("Mindestnote: "))
        except InputError as e:
            self._view.show_message(f"Ungültiges Format: {e.message}")
            return

        treffer = self._university.find_by_avr_point(threshold)
        if not treffer:
            self._view.show_message("Keine Studenten mit einer Note über diesem Wert.")
            return
        self._view.render_personen(f"Studenten mit Note > {threshold:g}", treffer)

    def remove_student(self) -> None:
        self._remove(Student, "Student")

    def remove_teacher(self) -> None:
        self._remove(Teacher, "Lehrkraft")

    def print_students(self) -> None:
        self._view.render_personen("Studenten", self._university.students)

    def print_teachers(self) -> None:
        self._view.render_personen("Lehrkräfte", self._university.teachers)

    def save_students(self) -> None:
        """Schreibt Students.txt."""
        self._save(self._repo.speichere_students, self._repo.students_path.name)

    def save_teachers(self) -> None:
        """Schreibt Teachers.txt."""
        self._save(self._repo.speichere_teachers, self._repo.teachers_path.name)

    def _add(self, raw: str, parse: Callable[[str], PersonRecord], erfolg: str) -> None:
        """
        Parst und fügt hinzu.
        Bei Fehlern bleibt das Verzeichnis unverändert.
        """
        try:
            person = parse(raw)
        except VerzeichnisError as e:
            logger.debug("Datensatz abgelehnt: %s", e.message)
            self._view.show_message(f"Fehler: {e.message}")
            return

        self._university.add(person)
        self._view.show_message(erfolg)

    def _remove(self, typ: Type[PersonRecord], bezeichnung: str) -> None:
        """
        Entfernt eine Person eines Typs nach Nachname.
        - Kein Treffer: Meldung
        - Ein Treffer: entfernen
        - Mehrere Treffer: Vorname abfragen, erster passender wird entfernt
        """
        lastname = self._view.prompt(f"Nachname ({bezeichnung}) zum Entfernen: ").strip()
        treffer: List[PersonRecord] = [
            p for p in self._university.find_by_last_name(lastname) if isinstance(p, typ)
        ]

        if not treffer:
            self._view.show_message("Keine Person mit diesem Nachnamen gefunden.")
            return

        person = treffer[0] if len(treffer) == 1 else self._waehle_nach_vorname(treffer)
        if person is None:
            self._view.show_message("Keine Person mit diesem Vor- und Nachnamen gefunden.")
            return

        self._university.remove(person)
        self._view.show_message("Gelöscht.")

    def _waehle_nach_vorname(self, treffer: List[PersonRecord]) -> Optional[PersonRecord]:
        """
        Auswahl bei mehreren Treffern.
        - Erste Person mit passendem Vornamen oder None.
        """
        self._view.render_personen("Mehrere Personen mit diesem Nachnamen", treffer)
        vorname = self._view.prompt("Vorname der zu löschenden Person: ").strip().casefold()
        for p in treffer:
            if p.name.casefold() == vorname:
                return p
        return None

    def _save(self, speichere: Callable[[University], int], dateiname: str) -> None:
        """Speichert und meldet das Ergebnis."""
        try:
            anzahl = speichere(self._university)
        except OSError as e:
            logger.error("Speichern von %s fehlgeschlagen: %s", dateiname, e)
            self._view.show_message(f"FEHLER beim Speichern: {e}")
            return
        self._view.show_message(f"{anzahl} Einträge in {dateiname} gespeichert.")
