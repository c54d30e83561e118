"""
Application/Use-Case layer

Die University hält alle Personen und beantwortet Abfragen.
- Die Einfügereihenfolge wird nie verändert.
- Sortierte Sichten sind immer neue Listen.
- Lineare Suche reicht für diese Datenmengen.
"""

from __future__ import annotations

import logging
from typing import Iterator, List

from .domain import PersonRecord, Student, Teacher

logger = logging.getLogger(__name__)


class University:
    """
    Repository für Studenten und Lehrkräfte.
    Doppelte Einträge sind erlaubt.
    """

    def __init__(self) -> None:
        self._persons: List[PersonRecord] = []

    def __len__(self) -> int:
        return len(self._persons)

    def __iter__(self) -> Iterator[PersonRecord]:
        return iter(list(self._persons))

    def add(self, person: PersonRecord) -> None:
        """Hängt eine Person an."""
        self._persons.append(person)
        logger.info("Person hinzugefügt: %s %s", person.lastname, person.name)

    def remove(self, person: PersonRecord) -> bool:
        """
        Entfernt den ersten passenden Eintrag.
        - Treffer ist dasselbe Objekt oder dieselbe person_id.
        - Kein Treffer: False, es wird nichts geändert.
        """
        for i, p in enumerate(self._persons):
            if p is person or p.person_id == person.person_id:
                del self._persons[i]
                logger.info("Person entfernt: %s %s", p.lastname, p.name)
                return True

        logger.debug("Person nicht im Verzeichnis: %s %s", person.lastname, person.name)
        return False

    @property
    def persons(self) -> List[PersonRecord]:
        """Alle Personen, sortiert nach Nachname."""
        return sorted(self._persons, key=lambda p: p.lastname)

    @property
    def students(self) -> List[Student]:
        """Alle Studenten, sortiert nach Nachname."""
        return sorted(
            (p for p in self._persons if isinstance(p, Student)),
            key=lambda s: s.lastname,
        )

    @property
    def teachers(self) -> List[Teacher]:
        """Alle Lehrkräfte, sortiert nach Nachname."""
        return sorted(
            (p for p in self._persons if isinstance(p, Teacher)),
            key=lambda t: t.lastname,
        )

    def find_by_last_name(self, lastname: str) -> List[PersonRecord]:
        """
        Sucht nach Nachname.
        - Groß/Klein wird ignoriert.
        - Reihenfolge wie beim Einfügen.
        - Mehrere Treffer muss der Aufrufer auflösen.
        """
        needle = lastname.strip().casefold()
        return [p for p in self._persons if p.lastname.casefold() == needle]

    def find_by_avr_point(self, threshold: float) -> List[Student]:
        """
        Studenten mit Note strikt über dem Schwellenwert.
        Absteigend nach Note. Gleiche Noten bleiben in Einfügereihenfolge.
        """
        treffer = [p for p in self._persons if isinstance(p, Student) and p.score > threshold]
        treffer.sort(key=lambda s: s.score, reverse=True)
        return treffer

    def find_by_department(self, text: str) -> List[Teacher]:
        """
        Lehrkräfte, deren Lehrstuhl den Text enthält (Groß/Klein egal).
        Aufsteigend nach Dienststellung.
        """
        needle = text.casefold()
        treffer = [
            p for p in self._persons
            if isinstance(p, Teacher) and needle in p.department.casefold()
        ]
        treffer.sort(key=lambda t: t.position.rang)
        return treffer
