"""
Domain beinhaltet die Entities + Enums

Dieses Modul enthält nur die Fachlogik.
Es enthält keine UI- oder Datei-Logik.

- Entities sind Dataclasses.
- Student und Teacher erfüllen beide das Person-Protokoll (keine Vererbung).
- Das Alter wird immer berechnet und nicht gespeichert.
- Jede Person hat eine person_id. Sie zählt nicht beim Vergleich.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional, Protocol, Union

from .errors import DomainError


class Position(Enum):
    """
    Dienststellung einer Lehrkraft.
    Der Wert legt die Sortierreihenfolge fest.
    """
    Postgraduate = 0
    Professor = 1
    Docent = 2
    Senior_Lecturer = 3
    Junior_Researcher = 4
    Researcher = 5

    @property
    def rang(self) -> int:
        """Rang für die Sortierung."""
        return self.value


def calculate_age(birth_date: date, today: date) -> int:
    """
    Berechnet das Alter in ganzen Jahren.
    - Differenz der Jahre
    - minus 1, wenn der Geburtstag in diesem Jahr noch nicht war
    """
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def pruefe_geburtsdatum(birth_date: date, today: Optional[date] = None) -> None:
    """Ein Geburtsdatum darf nicht in der Zukunft liegen."""
    heute = today or date.today()
    if birth_date > heute:
        raise DomainError("birth date cannot be in the future")


def _neue_id() -> str:
    return uuid.uuid4().hex


class Person(Protocol):
    """
    Gemeinsame Schnittstelle für Student und Teacher.
    """
    lastname: str
    name: str
    patronymic: str
    birth_date: date
    person_id: str

    @property
    def age(self) -> int:
        """Alter in ganzen Jahren (heute)."""
        ...

    def age_at(self, today: date) -> int:
        """Alter zu einem Stichtag."""
        ...


@dataclass(slots=True)
class Student:
    """
    Ein Student.
    - course: Studienjahr
    - group: Gruppennummer
    - score: Durchschnittsnote
    """
    lastname: str
    name: str
    patronymic: str
    birth_date: date
    course: int
    group: int
    score: float
    person_id: str = field(default_factory=_neue_id, compare=False, repr=False)

    @property
    def age(self) -> int:
        return calculate_age(self.birth_date, date.today())

    def age_at(self, today: date) -> int:
        return calculate_age(self.birth_date, today)


@dataclass(slots=True)
class Teacher:
    """
    Eine Lehrkraft.
    - department: Lehrstuhl
    - experience: Dienstjahre
    - position: Dienststellung
    """
    lastname: str
    name: str
    patronymic: str
    birth_date: date
    department: str
    experience: int
    position: Position
    person_id: str = field(default_factory=_neue_id, compare=False, repr=False)

    @property
    def age(self) -> int:
        return calculate_age(self.birth_date, date.today())

    def age_at(self, today: date) -> int:
        return calculate_age(self.birth_date, today)


# Jeder Datensatz ist genau eine dieser Varianten.
PersonRecord = Union[Student, Teacher]
