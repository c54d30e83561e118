"""
Fehlerklassen für das Hochschul-Verzeichnis.

- FormatError: Datensatzzeile ist fehlerhaft (Feldanzahl, Datum, Zahl, Position)
- DomainError: fachliche Regel verletzt (z.B. Geburtsdatum in der Zukunft)
- InputError: ungültige Eingabe im Menü (Auswahl, Schwellenwert)

Alle Klassen erben zusätzlich von ValueError.
So funktionieren auch allgemeine ``except ValueError`` Blöcke weiter.
"""

from __future__ import annotations


class VerzeichnisError(Exception):
    """Basisklasse für alle Fehler im Verzeichnis."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FormatError(VerzeichnisError, ValueError):
    """Datensatzzeile kann nicht gelesen werden."""


class DomainError(VerzeichnisError, ValueError):
    """Fachliche Regel ist verletzt."""


class InputError(VerzeichnisError, ValueError):
    """Eingabe im Menü ist keine gültige Zahl."""
