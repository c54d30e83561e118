"""
hochschul_verzeichnis package

Dieses Paket implementiert ein Konsolen-Verzeichnis für Studenten und Lehrkräfte
einer Hochschule.

Schichtenarchitektur:
- domain.py: Entitäten + Enums, Altersberechnung
- errors.py: Fehlerklassen
- persistence.py: Zeilenformat + Textdateien
- service.py: University (Abfragen)
- view.py: Konsolen-Ausgabe
- controller.py: Menü-Orchestrierung
- config.py / logging_config.py: Konfiguration und Logging
- main.py: Einstiegspunkt
"""
