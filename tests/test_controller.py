"""
Tests für den DirectoryController.

Die Menü-Abläufe werden mit einer ScriptedView durchgespielt.
"""

import pytest
from hochschul_verzeichnis.controller import DirectoryController, parse_float, parse_int
from hochschul_verzeichnis.domain import Student, Teacher
from hochschul_verzeichnis.errors import InputError
from hochschul_verzeichnis.persistence import TextPersonRepository

from factories import ScriptedView, make_student, make_teacher


def run(university, tmp_path, eingaben):
    """Startet den Controller mit festen Eingaben und gibt die View zurück."""
    view = ScriptedView(eingaben)
    repo = TextPersonRepository(tmp_path / "Students.txt", tmp_path / "Teachers.txt")
    DirectoryController(university, repo, view).starte_app()
    return view


class TestInputParsing:
    """Tests für parse_int / parse_float."""

    def test_parse_int(self):
        assert parse_int(" 7 ") == 7
        with pytest.raises(InputError):
            parse_int("abc")

    def test_parse_float_with_comma(self):
        assert parse_float("4,5") == 4.5
        with pytest.raises(InputError):
            parse_float("viel")

    @pytest.mark.parametrize("raw", ["nan", "inf", "-Infinity"])
    def test_parse_float_rejects_non_finite(self, raw):
        """NaN und Unendlich sind keine Schwellenwerte."""
        with pytest.raises(InputError):
            parse_float(raw)


class TestMenuLoop:
    """Tests für die Menü-Schleife."""

    def test_exit(self, university, tmp_path):
        """11 beendet die Schleife."""
        view = run(university, tmp_path, ["11"])
        assert view.menue_aufrufe == 1
        assert view.nachrichten[-1] == "Programm wird beendet."

    def test_invalid_menu_input_reprompts(self, university, tmp_path):
        """Text statt Zahl: Meldung und Menü erneut."""
        view = run(university, tmp_path, ["abc", "11"])
        assert view.menue_aufrufe == 2
        assert any("Ungültige Eingabe" in n for n in view.nachrichten)

    def test_wrong_choice(self, university, tmp_path):
        """Unbekannte Nummer: Ungültige Auswahl."""
        view = run(university, tmp_path, ["42", "0", "11"])
        assert view.nachrichten.count("Ungültige Auswahl.") == 2
        assert view.menue_aufrufe == 3

    def test_end_of_input_stops(self, university, tmp_path):
        """Ende der Eingabe beendet ohne Fehler."""
        view = run(university, tmp_path, [])
        assert view.nachrichten == ["Programm wird beendet."]


class TestAdd:
    """Tests für Hinzufügen."""

    def test_add_student(self, university, tmp_path):
        view = run(university, tmp_path, ["1", "Smith; Jane; Anne; 2000-05-10; 3; 2; 4.5", "11"])
        assert "Student hinzugefügt." in view.nachrichten
        assert isinstance(university.students[0], Student)

    def test_add_teacher(self, university, tmp_path):
        view = run(university, tmp_path, ["2", "Petrov; Petr; P; 1970-01-01; Math; 10; Docent", "11"])
        assert "Lehrkraft hinzugefügt." in view.nachrichten
        assert isinstance(university.teachers[0], Teacher)

    def test_parse_error_reported_not_added(self, university, tmp_path):
        """Fehlerhafte Zeile: Meldung, Verzeichnis unverändert, Sitzung läuft weiter."""
        view = run(university, tmp_path, ["1", "Smith; Jane", "2", "A;B;C;2999-01-01;M;1;Docent", "11"])
        fehler = [n for n in view.nachrichten if n.startswith("Fehler:")]
        assert len(fehler) == 2
        assert "future" in fehler[1]
        assert len(university) == 0


class TestFind:
    """Tests für die Suchen."""

    def test_find_by_last_name(self, university, tmp_path):
        university.add(make_student("Ivanov", "Ivan"))
        university.add(make_teacher("Ivanov"))
        view = run(university, tmp_path, ["3", "IVANOV", "11"])
        titel, personen = view.listen[0]
        assert len(personen) == 2

    def test_find_by_last_name_not_found(self, university, tmp_path):
        view = run(university, tmp_path, ["3", "Nobody", "11"])
        assert "Keine Person mit diesem Nachnamen gefunden." in view.nachrichten
        assert view.listen == []

    def test_threshold_invalid_vs_empty(self, university, tmp_path):
        """Ungültige Zahl und keine Treffer sind unterschiedliche Meldungen."""
        university.add(make_student(score=3.0))
        view = run(university, tmp_path, ["4", "abc", "4", "4.5", "11"])
        assert any(n.startswith("Ungültiges Format") for n in view.nachrichten)
        assert "Keine Studenten mit einer Note über diesem Wert." in view.nachrichten

    def test_threshold_nan_is_invalid(self, university, tmp_path):
        """NaN wird als ungültige Zahl gemeldet, nicht als leeres Ergebnis."""
        university.add(make_student(score=3.0))
        view = run(university, tmp_path, ["4", "nan", "11"])
        assert any(n.startswith("Ungültiges Format") for n in view.nachrichten)
        assert "Keine Studenten mit einer Note über diesem Wert." not in view.nachrichten

    def test_threshold_results(self, university, tmp_path):
        university.add(make_student("A", score=4.1))
        university.add(make_student("B", score=4.9))
        view = run(university, tmp_path, ["4", "4", "11"])
        _, personen = view.listen[0]
        assert [p.lastname for p in personen] == ["B", "A"]


class TestRemove:
    """Tests für Entfernen."""

    def test_remove_single_student(self, university, tmp_path):
        university.add(make_student("Ivanov"))
        university.add(make_teacher("Ivanov"))
        view = run(university, tmp_path, ["5", "ivanov", "11"])
        assert "Gelöscht." in view.nachrichten
        assert university.students == []
        assert len(university.teachers) == 1

    def test_remove_teacher_not_found(self, university, tmp_path):
        """Nur Studenten mit dem Namen: Lehrkraft nicht gefunden."""
        university.add(make_student("Ivanov"))
        view = run(university, tmp_path, ["6", "Ivanov", "11"])
        assert "Keine Person mit diesem Nachnamen gefunden." in view.nachrichten
        assert len(university) == 1

    def test_remove_ambiguous_by_first_name(self, university, tmp_path):
        """Mehrere Treffer: Vorname entscheidet."""
        ivan = make_student("Ivanov", "Ivan")
        oleg = make_student("Ivanov", "Oleg")
        university.add(ivan)
        university.add(oleg)

        view = run(university, tmp_path, ["5", "Ivanov", "oleg", "11"])
        assert "Gelöscht." in view.nachrichten
        remaining = list(university)
        assert remaining == [ivan]
        assert remaining[0] is ivan

    def test_remove_ambiguous_unknown_first_name(self, university, tmp_path):
        university.add(make_student("Ivanov", "Ivan"))
        university.add(make_student("Ivanov", "Oleg"))
        view = run(university, tmp_path, ["5", "Ivanov", "Petr", "11"])
        assert "Keine Person mit diesem Vor- und Nachnamen gefunden." in view.nachrichten
        assert len(university) == 2


class TestPrintAndSave:
    """Tests für Anzeigen und Speichern."""

    def test_print_students_sorted(self, university, tmp_path):
        university.add(make_student("Zorin"))
        university.add(make_student("Antonov"))
        view = run(university, tmp_path, ["7", "11"])
        titel, personen = view.listen[0]
        assert titel == "Studenten"
        assert [p.lastname for p in personen] == ["Antonov", "Zorin"]

    def test_print_teachers(self, university, tmp_path):
        university.add(make_teacher("Petrov"))
        view = run(university, tmp_path, ["8", "11"])
        assert view.listen[0][0] == "Lehrkräfte"

    def test_save_students_and_teachers(self, university, tmp_path):
        university.add(make_student("Smith"))
        view = run(university, tmp_path, ["9", "10", "11"])
        assert "1 Einträge in Students.txt gespeichert." in view.nachrichten
        assert "0 Einträge in Teachers.txt gespeichert." in view.nachrichten
        assert (tmp_path / "Teachers.txt").read_text(encoding="utf-8") == ""

    def test_save_error_is_reported(self, university, tmp_path):
        """Schreibfehler beendet die Sitzung nicht."""
        view = ScriptedView(["9", "11"])
        repo = TextPersonRepository(tmp_path / "missing" / "Students.txt", tmp_path / "Teachers.txt")
        DirectoryController(university, repo, view).starte_app()
        assert any(n.startswith("FEHLER beim Speichern") for n in view.nachrichten)
