"""German catalog, following the terminology of the official German arc42 template."""

from __future__ import annotations

from ..base import Guidance, LanguageCatalog

TITLES = {
    "01_introduction_and_goals": "Einführung und Ziele",
    "02_architecture_constraints": "Randbedingungen",
    "03_context_and_scope": "Kontextabgrenzung",
    "04_solution_strategy": "Lösungsstrategie",
    "05_building_block_view": "Bausteinsicht",
    "06_runtime_view": "Laufzeitsicht",
    "07_deployment_view": "Verteilungssicht",
    "08_concepts": "Querschnittliche Konzepte",
    "09_architecture_decisions": "Architekturentscheidungen",
    "10_quality_requirements": "Qualitätsanforderungen",
    "11_technical_risks": "Risiken und technische Schulden",
    "12_glossary": "Glossar",
}

DESCRIPTIONS = {
    "01_introduction_and_goals": "Aufgabenstellung, Qualitätsziele und Stakeholder",
    "02_architecture_constraints": "Technische und organisatorische Randbedingungen",
    "03_context_and_scope": "Fachlicher und technischer Kontext, externe Schnittstellen",
    "04_solution_strategy": "Grundlegende Lösungsentscheidungen und -strategien",
    "05_building_block_view": "Statische Zerlegung des Systems",
    "06_runtime_view": "Dynamisches Verhalten und wichtige Szenarien",
    "07_deployment_view": "Infrastruktur und Verteilung",
    "08_concepts": "Übergreifende Regelungen und Lösungsansätze",
    "09_architecture_decisions": "Wichtige, teure, kritische oder riskante Entscheidungen",
    "10_quality_requirements": "Qualitätsbaum und Qualitätsszenarien",
    "11_technical_risks": "Bekannte Probleme, Risiken und technische Schulden",
    "12_glossary": "Wichtige fachliche und technische Begriffe",
}

GUIDANCE = {
    "01_introduction_and_goals": (
        Guidance(
            heading="Aufgabenstellung",
            purpose="Beschreibt die wesentlichen Anforderungen und treibenden Kräfte, die "
            "Architektur und Entwicklung berücksichtigen müssen.",
            prompts=(
                "Die 3-5 wichtigsten funktionalen Anforderungen auflisten",
                "Die wesentlichen Features des Systems nennen",
            ),
            table=(
                ("ID", "Anforderung", "Priorität"),
                (
                    ("REQ-1", "[Kurzbeschreibung]", "Hoch"),
                    ("REQ-2", "[Kurzbeschreibung]", "Mittel"),
                ),
            ),
        ),
        Guidance(
            heading="Qualitätsziele",
            purpose="Die 3-5 wichtigsten Qualitätsziele der maßgeblichen Stakeholder festlegen.",
            prompts=(
                "Qualitäten nach ISO 25010 priorisieren: Performance, Sicherheit, "
                "Zuverlässigkeit, Wartbarkeit, Benutzbarkeit",
            ),
            table=(
                ("Priorität", "Qualitätsziel", "Motivation"),
                (
                    ("1", "[z.B. Performance]", "[Warum dies kritisch ist]"),
                    ("2", "[z.B. Sicherheit]", "[Warum dies kritisch ist]"),
                    ("3", "[z.B. Wartbarkeit]", "[Warum dies kritisch ist]"),
                ),
            ),
        ),
        Guidance(
            heading="Stakeholder",
            purpose="Alle Personen und Rollen nennen, die die Architektur kennen sollten.",
            table=(
                ("Rolle/Name", "Kontakt", "Erwartungshaltung"),
                (
                    ("Product Owner", "[Name/E-Mail]", "[Erwartungen an die Architektur]"),
                    ("Entwicklungsteam", "[Teamname]", "[Was das Team wissen muss]"),
                    ("Betrieb", "[Team/Person]", "[Anliegen zu Deployment und Betrieb]"),
                ),
            ),
        ),
    ),
    "02_architecture_constraints": (
        Guidance(
            heading="Technische Randbedingungen",
            purpose="Technische Vorgaben festhalten, die Entwurf und Umsetzung einschränken.",
            table=(
                ("Randbedingung", "Erläuterung"),
                (
                    ("[z.B. Betrieb unter Linux]", "[Warum diese Randbedingung besteht]"),
                    ("[z.B. mindestens Python 3.10]", "[Organisatorische Vorgabe]"),
                ),
            ),
        ),
        Guidance(
            heading="Organisatorische Randbedingungen",
            purpose="Vorgaben aus Team, Zeitplan, Budget oder rechtlichem Umfeld festhalten.",
            table=(
                ("Randbedingung", "Erläuterung"),
                (
                    ("[z.B. Teamgröße: 5 Entwickler]", "[Auswirkung auf die Architektur]"),
                    ("[z.B. Zeitrahmen: 6 Monate]", "[Lieferbedingungen]"),
                ),
            ),
        ),
        Guidance(
            heading="Konventionen",
            purpose="Geltende Programmier-, Dokumentations- und Namenskonventionen auflisten.",
            table=(
                ("Konvention", "Erläuterung"),
                (("[z.B. Code-Stil: PEP 8]", "[Link zum Styleguide]"),),
            ),
        ),
    ),
    "03_context_and_scope": (
        Guidance(
            heading="Fachlicher Kontext",
            purpose="Alle Kommunikationsbeziehungen (Nutzer, IT-Systeme, ...) mit Erklärung "
            "der fachlichen Ein- und Ausgaben festlegen.",
            prompts=("Ein Kontextdiagramm ergänzen (PlantUML, Mermaid oder Bild in images/)",),
            table=(
                ("Partner", "Eingabe", "Ausgabe"),
                (("[Nutzer/System]", "[Was gesendet wird]", "[Was empfangen wird]"),),
            ),
        ),
        Guidance(
            heading="Technischer Kontext",
            purpose="Technische Kanäle und Protokolle zwischen System und Umwelt festlegen.",
            table=(
                ("Partner", "Kanal", "Protokoll"),
                (("[Systemname]", "[z.B. REST-API]", "[z.B. HTTPS, JSON]"),),
            ),
        ),
    ),
    "04_solution_strategy": (
        Guidance(
            heading="Technologieentscheidungen",
            purpose="Die grundlegenden Technologieentscheidungen zusammenfassen.",
            table=(
                ("Entscheidung", "Wahl", "Begründung"),
                (
                    ("Programmiersprache", "[z.B. Python]", "[Warum diese Wahl]"),
                    ("Framework", "[z.B. FastAPI]", "[Warum diese Wahl]"),
                    ("Datenbank", "[z.B. PostgreSQL]", "[Warum diese Wahl]"),
                ),
            ),
        ),
        Guidance(
            heading="Top-Level-Zerlegung",
            purpose="Die grobe Struktur des Systems beschreiben.",
            prompts=("[z.B. Schichtenarchitektur]", "[z.B. Microservices]"),
        ),
        Guidance(
            heading="Strategien zur Erreichung der Qualitätsziele",
            purpose="Erläutern, wie die Qualitätsziele aus Abschnitt 1 erreicht werden.",
            table=(
                ("Qualitätsziel", "Lösungsansatz"),
                (
                    ("[Performance]", "[z.B. Caching, asynchrone Verarbeitung]"),
                    ("[Sicherheit]", "[z.B. OAuth2, Verschlüsselung]"),
                ),
            ),
        ),
    ),
    "05_building_block_view": (
        Guidance(
            heading="Ebene 1: Whitebox Gesamtsystem",
            purpose="Die Whitebox-Beschreibung zeigt die innere Struktur des Gesamtsystems.",
            prompts=("Ein Komponentendiagramm der obersten Bausteine ergänzen",),
            table=(
                ("Baustein", "Beschreibung"),
                (
                    ("[Komponente A]", "[Verantwortung und Zweck]"),
                    ("[Komponente B]", "[Verantwortung und Zweck]"),
                ),
            ),
        ),
        Guidance(
            heading="Ebene 2",
            purpose="Die Hauptkomponenten in kleinere Bausteine zerlegen.",
            table=(
                ("Baustein", "Beschreibung"),
                (("[Teilkomponente A.1]", "[Verantwortung]"),),
            ),
        ),
    ),
    "06_runtime_view": (
        Guidance(
            heading="Szenario 1: [z.B. Benutzeranmeldung]",
            purpose="Das Laufzeitverhalten für ein wichtiges Szenario beschreiben.",
            prompts=(
                "Ein Sequenzdiagramm der beteiligten Bausteine ergänzen",
                "Die Schritte in ihrer Reihenfolge auflisten",
            ),
        ),
        Guidance(
            heading="Szenario 2: [z.B. Datenverarbeitung]",
            purpose="Ein weiteres wichtiges Laufzeitszenario dokumentieren.",
            prompts=("[Schritte und Interaktionen beschreiben]",),
        ),
    ),
    "07_deployment_view": (
        Guidance(
            heading="Infrastruktur Ebene 1",
            purpose="Überblick über die Infrastruktur, auf der das System läuft.",
            prompts=(
                "Ein Verteilungsdiagramm ergänzen",
                "Begründung: [Warum diese Verteilungsarchitektur gewählt wurde]",
                "Zuordnung von Bausteinen zu Infrastruktur",
            ),
        ),
        Guidance(
            heading="Infrastruktur Ebene 2",
            purpose="Detailsicht auf einzelne Infrastrukturknoten.",
            table=(
                ("Aspekt", "Beschreibung"),
                (
                    ("Hardware", "[z.B. 4 vCPU, 16GB RAM]"),
                    ("Software", "[z.B. Ubuntu 22.04, Docker 24.x]"),
                ),
            ),
        ),
    ),
    "08_concepts": (
        Guidance(
            heading="Domänenmodell",
            purpose="Die zentralen fachlichen Begriffe und ihre Beziehungen zeigen.",
            prompts=("Ein Klassendiagramm des Domänenmodells ergänzen",),
        ),
        Guidance(
            heading="Sicherheitskonzept",
            purpose="Authentifizierung und Autorisierung im System beschreiben.",
            prompts=("Authentifizierung: [JWT, OAuth2, ...]", "Autorisierung: [RBAC, ABAC, ...]"),
        ),
        Guidance(
            heading="Fehlerbehandlung",
            purpose="Beschreiben, wie Fehler systemweit behandelt werden.",
            prompts=("[z.B. Globaler Error-Handler]", "[z.B. Strukturierte Fehlerantworten]"),
        ),
        Guidance(
            heading="Logging und Monitoring",
            purpose="Festhalten, wie das System im Betrieb beobachtet wird.",
            table=(
                ("Aspekt", "Ansatz"),
                (
                    ("Logging", "[z.B. Strukturierte JSON-Logs]"),
                    ("Metriken", "[z.B. Prometheus, Grafana]"),
                ),
            ),
        ),
        Guidance(
            heading="Teststrategie",
            purpose="Teststufen und ihre Abdeckungsziele festlegen.",
            table=(
                ("Art", "Umfang", "Abdeckungsziel"),
                (
                    ("Unit-Tests", "Einzelne Funktionen/Klassen", "80%"),
                    ("Integrationstests", "Zusammenspiel von Komponenten", "Hauptpfade"),
                ),
            ),
        ),
    ),
    "09_architecture_decisions": (
        Guidance(
            heading="ADR-001: [Entscheidungstitel]",
            purpose="Eine wichtige, teure, große oder riskante Entscheidung dokumentieren.",
            prompts=(
                "Status: [Vorgeschlagen | Akzeptiert | Veraltet | Ersetzt]",
                "Kontext: [Anlass der Entscheidung]",
                "Entscheidung: [Was entschieden wurde]",
                "Konsequenzen: [Positive und negative Auswirkungen]",
            ),
            table=(
                ("Alternative", "Vorteile", "Nachteile"),
                (("[Option A]", "[Vorteile]", "[Nachteile]"),),
            ),
        ),
        Guidance(
            heading="ADR-002: [Entscheidungstitel]",
            purpose="Weitere Entscheidungen nach demselben Schema festhalten.",
        ),
    ),
    "10_quality_requirements": (
        Guidance(
            heading="Übersicht der Qualitätsanforderungen",
            purpose="Die Qualitätsziele zu messbaren Qualitätsmerkmalen verfeinern.",
            prompts=(
                "Performance: Antwortzeit, Durchsatz",
                "Sicherheit: Authentifizierung, Autorisierung",
                "Wartbarkeit: Modularität, Testbarkeit",
            ),
        ),
        Guidance(
            heading="Qualitätsszenarien",
            purpose="Qualitätsanforderungen konkret und überprüfbar machen.",
            table=(
                ("ID", "Szenario", "Erwartete Reaktion", "Priorität"),
                (
                    ("PERF-1", "Dashboard-Aufruf unter Normallast", "< 200ms", "Hoch"),
                    ("SEC-1", "Ungültiger Anmeldeversuch", "Sperre nach 5 Versuchen", "Hoch"),
                ),
            ),
        ),
    ),
    "11_technical_risks": (
        Guidance(
            heading="Technische Risiken",
            purpose="Bekannte technische Risiken und ihre Gegenmaßnahmen benennen.",
            table=(
                ("Risiko", "Beschreibung", "Wahrscheinlichkeit", "Maßnahme"),
                (
                    (
                        "[z.B. Ausfall einer Fremd-API]",
                        "[Externer Dienst]",
                        "Mittel",
                        "[Circuit Breaker, Fallback]",
                    ),
                ),
            ),
        ),
        Guidance(
            heading="Technische Schulden",
            purpose="Angesammelte technische Schulden nachverfolgen.",
            table=(
                ("Punkt", "Beschreibung", "Auswirkung", "Priorität"),
                (("[z.B. Fehlende Tests]", "[Abdeckung in Modul X zu gering]", "Mittel", "Niedrig"),),
            ),
        ),
        Guidance(
            heading="Risiko-Monitoring",
            purpose="Beschreiben, wie Risiken überwacht und überprüft werden.",
            prompts=("[z.B. Wöchentliche Risiko-Reviews]",),
        ),
    ),
    "12_glossary": (
        Guidance(
            heading="Fachliche Begriffe",
            purpose="Die fachlichen Begriffe definieren, die Stakeholder verwenden.",
            table=(
                ("Begriff", "Definition"),
                (("[Fachbegriff 1]", "[Klare, knappe Definition]"),),
            ),
        ),
        Guidance(
            heading="Technische Begriffe",
            purpose="Die technischen Begriffe dieser Dokumentation definieren.",
            table=(
                ("Begriff", "Definition"),
                (("[Technischer Begriff 1]", "[Klare, knappe Definition]"),),
            ),
        ),
        Guidance(
            heading="Abkürzungen",
            purpose="Die verwendeten Abkürzungen ausschreiben.",
            table=(
                ("Abkürzung", "Bedeutung"),
                (("API", "Application Programming Interface"),),
            ),
        ),
    ),
}

PHRASES = {
    "purpose": "Zweck",
    "file": "Datei",
    "further_information": "Weitere Informationen",
    "resources": "Ressourcen",
    "template_reference": "Template-Referenz",
    "source": "Quelle",
    "readme_title": "{project} - Architekturdokumentation",
    "readme_intro": "Dieses Verzeichnis enthält die Architekturdokumentation für {project} "
    "nach dem arc42-Template.",
    "readme_title_generic": "Architekturdokumentation",
    "readme_intro_generic": "Dieses Verzeichnis enthält die Architekturdokumentation nach dem "
    "arc42-Template.",
    "readme_structure": "Struktur",
    "readme_sections": "Die 12 arc42-Abschnitte",
    "readme_getting_started": "Erste Schritte",
    "readme_steps": [
        "Mit Abschnitt 1 beginnen: Einführung und Ziele",
        "Die Abschnitte iterativ bearbeiten",
        "Konzepte mit Diagrammen veranschaulichen",
        "Auf Entscheidungen konzentrieren, nicht auf Implementierungsdetails",
    ],
    "structure_sections": "Einzelne Abschnittsdateien (12 Abschnitte)",
    "structure_images": "Diagramme und Bilder",
    "structure_document": "Kombinierte Hauptdokumentation",
    "structure_config": "Konfiguration",
    "document_intro": "Dieses Dokument beschreibt die Architektur von {project} nach dem "
    "arc42-Template.",
    "version": "Version",
    "date": "Datum",
    "status": "Status",
    "status_draft": "Entwurf",
    "language": "Sprache",
    "table_of_contents": "Inhaltsverzeichnis",
    "about_arc42": "Über arc42",
    "about_arc42_text": "arc42, das Template zur Dokumentation von Software- und "
    "Systemarchitekturen, wurde von Dr. Gernot Starke und Dr. Peter Hruschka entwickelt.",
    "guide_title": "arc42 Workflow-Leitfaden für Architekturdokumentation",
    "guide_overview": "Übersicht",
    "guide_intro": "Dieser Leitfaden hilft bei der Dokumentation der Softwarearchitektur mit "
    "dem arc42-Template, einer praxiserprobten Vorlage für Software- und "
    "Systemarchitekturen.",
    "guide_languages": "Verfügbare Sprachen",
    "guide_language_headers": ["Code", "Sprache", "Eigenname"],
    "guide_getting_started": "Erste Schritte",
    "guide_steps": [
        {
            "title": "Schritt 1: Workspace initialisieren",
            "text": "Den Dokumentations-Workspace anlegen:",
            "example": 'arc42docs init "Mein Projekt" --language DE',
        },
        {
            "title": "Schritt 2: Status prüfen",
            "text": "Den aktuellen Stand der Dokumentation anzeigen:",
            "example": "arc42docs status",
        },
        {
            "title": "Schritt 3: Abschnitts-Templates generieren",
            "text": "Ein ausführliches Template je Abschnitt abrufen:",
            "example": "arc42docs template 01_introduction_and_goals --language DE",
        },
    ],
    "guide_sections": "Die 12 arc42-Abschnitte",
    "guide_best_practices": "Best Practices",
    "guide_practices": [
        "Mit Abschnitt 1 beginnen - die Ziele zu verstehen ist grundlegend",
        "Knapp bleiben - arc42 ist pragmatisch, nicht bürokratisch",
        "Diagramme verwenden - ein Bild sagt mehr als tausend Worte",
        "Entscheidungen dokumentieren - das zukünftige Team wird es danken",
        "Iterieren - Architekturdokumentation ist nie fertig",
    ],
    "guide_tools": "Verfügbare Befehle",
    "guide_tool_descriptions": {
        "init": "Dokumentations-Workspace initialisieren",
        "status": "Dokumentationsstatus prüfen",
        "template": "Abschnitts-Template generieren",
        "update": "Abschnittsinhalt aktualisieren",
        "get": "Abschnittsinhalt lesen",
        "guide": "Diesen Leitfaden anzeigen",
    },
    "guide_structure": "Dateistruktur",
}

CATALOG = LanguageCatalog(
    code="DE",
    name="German",
    native_name="Deutsch",
    titles=TITLES,
    descriptions=DESCRIPTIONS,
    guidance=GUIDANCE,
    phrases=PHRASES,
)
