"""
Persistence layer (Textdateien)

Hier liegt das Zeilenformat für Studenten und Lehrkräfte. Die Domain selbst bleibt frei von Datei-Details.
- RecordSerializer: Zeile <-> Person (parsen, anzeigen, speichern)
- FileStorage: Zeilen lesen/schreiben
- TextPersonRepository: Students.txt / Teachers.txt laden und speichern

Zeilenformat (7 Felder, Trenner ';'):
- Student: Nachname;Vorname;Vatersname;Geburtsdatum;Kurs;Gruppe;Note
- Teacher: Nachname;Vorname;Vatersname;Geburtsdatum;Lehrstuhl;Dienstjahre;Position
"""

from __future__ import annotations

import logging
import math
import re
from datetime import date, datetime
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from .domain import (
    PersonRecord,
    Position,
    Student,
    Teacher,
    pruefe_geburtsdatum,
)
from .errors import FormatError
from .service import University

logger = logging.getLogger(__name__)

FELDANZAHL = 7
TRENNER = ";"
GANZZAHL = re.compile(r"[+-]?[0-9]+")
DATUMSFORMATE = ("%Y-%m-%d", "%d-%m-%Y", "%d.%m.%Y")


def format_datum(d: date) -> str:
    """dd-MM-yyyy, das Jahr immer vierstellig."""
    return f"{d.day:02d}-{d.month:02d}-{d.year:04d}"


class RecordSerializer:
    """
    Wandelt Datensatzzeilen <-> Personen.
    - Jedes Feld wird getrimmt.
    - Positionen müssen exakt dem Enum-Namen entsprechen.
    - Das Alter wird nur bei der Anzeige berechnet.
    """

    def parse_student(self, line: str, today: Optional[date] = None) -> Student:
        """
        Baut einen Studenten aus einer Zeile.
        Fehler:
        - FormatError bei Feldanzahl, Datum oder Zahlen
        - DomainError bei Geburtsdatum in der Zukunft
        """
        lastname, name, patronymic, birth_date, rest = self._split_basis(line, today)
        course = self._parse_int(rest[0], "course")
        group = self._parse_int(rest[1], "group")
        score = self._parse_float(rest[2], "score")

        return Student(
            lastname=lastname,
            name=name,
            patronymic=patronymic,
            birth_date=birth_date,
            course=course,
            group=group,
            score=score,
        )

    def parse_teacher(self, line: str, today: Optional[date] = None) -> Teacher:
        """
        Baut eine Lehrkraft aus einer Zeile.
        Fehler wie bei parse_student, zusätzlich FormatError bei unbekannter Position.
        """
        lastname, name, patronymic, birth_date, rest = self._split_basis(line, today)
        department = rest[0]
        experience = self._parse_int(rest[1], "experience")
        position = self._parse_position(rest[2])

        return Teacher(
            lastname=lastname,
            name=name,
            patronymic=patronymic,
            birth_date=birth_date,
            department=department,
            experience=experience,
            position=position,
        )

    def format_person(self, person: PersonRecord, today: Optional[date] = None) -> str:
        """
        Anzeigeformat:
        Nachname Vorname Vatersname; dd-MM-yyyy; <Typ-Felder>; Alter
        """
        heute = today or date.today()
        kopf = f"{person.lastname} {person.name} {person.patronymic}"
        datum = format_datum(person.birth_date)
        felder = "; ".join(self._typ_felder(person, anzeige=True))
        return f"{kopf}; {datum}; {felder}; {person.age_at(heute)}"

    def to_record_line(self, person: PersonRecord) -> str:
        """
        Speicherformat mit 7 Feldern.
        Die Zeile kann mit parse_student / parse_teacher wieder gelesen werden.
        """
        felder = [
            person.lastname,
            person.name,
            person.patronymic,
            format_datum(person.birth_date),
            *self._typ_felder(person, anzeige=False),
        ]
        return "; ".join(felder)

    def _typ_felder(self, person: PersonRecord, anzeige: bool) -> List[str]:
        """
        Die drei typspezifischen Felder als Text.
        Beim Speichern wird die Note ohne Rundung geschrieben.
        """
        if isinstance(person, Student):
            score = f"{person.score:g}" if anzeige else repr(person.score)
            return [str(person.course), str(person.group), score]
        if isinstance(person, Teacher):
            return [person.department, str(person.experience), person.position.name]
        raise TypeError(f"Unbekannter Personentyp: {type(person).__name__}")

    def _split_basis(
        self, line: str, today: Optional[date]
    ) -> Tuple[str, str, str, date, List[str]]:
        """
        Teilt die Zeile und liest die gemeinsamen Felder.
        Rückgabe: Nachname, Vorname, Vatersname, Geburtsdatum, restliche 3 Felder.
        """
        parts = [p.strip() for p in line.split(TRENNER)]
        if len(parts) != FELDANZAHL:
            raise FormatError(
                f"Invalid format of input string: expected {FELDANZAHL} fields, got {len(parts)}"
            )

        birth_date = self._parse_date(parts[3])
        pruefe_geburtsdatum(birth_date, today)

        return parts[0], parts[1], parts[2], birth_date, parts[4:]

    def _parse_date(self, raw: str) -> date:
        """
        Liest ein Datum aus Text.
        Unterstützte Formate:
        - YYYY-MM-DD
        - DD-MM-YYYY
        - DD.MM.YYYY
        """
        for fmt in DATUMSFORMATE:
            try:
                return datetime.strptime(raw, fmt).date()
            except ValueError:
                continue
        raise FormatError(f"Invalid birth date: '{raw}'")

    def _parse_int(self, raw: str, feld: str) -> int:
        """Nur Ziffern mit optionalem Vorzeichen."""
        if not GANZZAHL.fullmatch(raw):
            raise FormatError(f"Invalid {feld}: '{raw}' is not an integer")
        return int(raw)

    def _parse_float(self, raw: str, feld: str) -> float:
        """Dezimalkomma ist erlaubt. NaN und Unendlich nicht."""
        try:
            value = float(raw.replace(",", "."))
        except ValueError:
            raise FormatError(f"Invalid {feld}: '{raw}' is not a number") from None
        if not math.isfinite(value):
            raise FormatError(f"Invalid {feld}: '{raw}' is not a finite number")
        return value

    def _parse_position(self, raw: str) -> Position:
        """Nur exakte Member-Namen, Groß/Klein zählt."""
        if raw in Position.__members__:
            return Position[raw]
        erlaubt = ", ".join(Position.__members__)
        raise FormatError(f"Invalid position: '{raw}' (allowed: {erlaubt})")


class FileStorage:
    """
    Klasse für Dateihandling beim Laden und Speichern.
    - Nur lesen/schreiben.
    - UTF-8 wird fest genutzt.
    """

    def lese_zeilen(self, pfad: Path) -> List[str]:
        """
        Liest alle Zeilen einer Datei.
        FileNotFoundError, wenn die Datei fehlt.
        """
        with open(pfad, "r", encoding="utf-8") as f:
            return f.read().splitlines()

    def schreibe_zeilen(self, pfad: Path, zeilen: List[str]) -> None:
        """
        Überschreibt die Datei komplett.
        Keine Zeilen ergeben eine leere Datei.
        """
        content = "".join(f"{z}\n" for z in zeilen)
        with open(pfad, "w", encoding="utf-8") as f:
            f.write(content)


class TextPersonRepository:
    """
    Repository für Students.txt und Teachers.txt.
    - FileStorage für Datei-Zugriff
    - RecordSerializer für Mapping
    """

    def __init__(
        self,
        students_path: Path,
        teachers_path: Path,
        storage: Optional[FileStorage] = None,
        serializer: Optional[RecordSerializer] = None,
    ) -> None:
        self._students_path = Path(students_path)
        self._teachers_path = Path(teachers_path)
        self._storage = storage or FileStorage()
        self._serializer = serializer or RecordSerializer()

    @property
    def students_path(self) -> Path:
        return self._students_path

    @property
    def teachers_path(self) -> Path:
        return self._teachers_path

    def lade(self, university: University) -> Tuple[int, int]:
        """
        Lädt beide Dateien, sofern vorhanden.
        Rückgabe: (geladen, übersprungen) über beide Dateien.
        """
        s_ok, s_skip = self._lade_datei(self._students_path, self._serializer.parse_student, university)
        t_ok, t_skip = self._lade_datei(self._teachers_path, self._serializer.parse_teacher, university)
        return s_ok + t_ok, s_skip + t_skip

    def speichere_students(self, university: University) -> int:
        """Schreibt alle Studenten (sortiert). Rückgabe: Anzahl Zeilen."""
        return self._speichere(self._students_path, university.students)

    def speichere_teachers(self, university: University) -> int:
        """Schreibt alle Lehrkräfte (sortiert). Rückgabe: Anzahl Zeilen."""
        return self._speichere(self._teachers_path, university.teachers)

    def _lade_datei(
        self,
        pfad: Path,
        parse: Callable[[str], PersonRecord],
        university: University,
    ) -> Tuple[int, int]:
        """
        Liest eine Datei zeilenweise.
        - Fehlende Datei ist kein Fehler.
        - Leere Zeilen werden ignoriert.
        - Fehlerhafte Zeilen werden übersprungen und geloggt.
        """
        if not pfad.exists():
            logger.info("Datei nicht vorhanden, wird übersprungen: %s", pfad)
            return 0, 0

        geladen = 0
        uebersprungen = 0
        for nr, zeile in enumerate(self._storage.lese_zeilen(pfad), 1):
            if not zeile.strip():
                continue
            try:
                university.add(parse(zeile))
                geladen += 1
            except ValueError as e:
                uebersprungen += 1
                logger.warning("%s:%d übersprungen: %s", pfad.name, nr, e)

        logger.info("%s geladen: %d Einträge, %d übersprungen", pfad, geladen, uebersprungen)
        return geladen, uebersprungen

    def _speichere(self, pfad: Path, personen: List[PersonRecord]) -> int:
        zeilen = [self._serializer.to_record_line(p) for p in personen]
        self._storage.schreibe_zeilen(pfad, zeilen)
        logger.info("%s gespeichert: %d Einträge", pfad, len(zeilen))
        return len(zeilen)
