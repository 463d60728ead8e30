"""Dutch catalog."""

from __future__ import annotations

from ..base import Guidance, LanguageCatalog

TITLES = {
    "01_introduction_and_goals": "Introductie en Doelen",
    "02_architecture_constraints": "Beperkingen",
    "03_context_and_scope": "Scope en Context",
    "04_solution_strategy": "Oplossingsstrategie",
    "05_building_block_view": "Bouwstenenweergave",
    "06_runtime_view": "Runtime-weergave",
    "07_deployment_view": "Deployment-weergave",
    "08_concepts": "Cross-cutting Concepten",
    "09_architecture_decisions": "Architectuurbeslissingen",
    "10_quality_requirements": "Kwaliteitseisen",
    "11_technical_risks": "Risico's en Technische Schuld",
    "12_glossary": "Woordenlijst",
}

DESCRIPTIONS = {
    "01_introduction_and_goals": "Probleemstelling, kwaliteitsdoelen en stakeholders",
    "02_architecture_constraints": "Technische en organisatorische beperkingen",
    "03_context_and_scope": "Zakelijke en technische context, externe interfaces",
    "04_solution_strategy": "Fundamentele oplossingsbeslissingen en strategieën",
    "05_building_block_view": "Statische decompositie van het systeem",
    "06_runtime_view": "Dynamisch gedrag en belangrijke scenario's",
    "07_deployment_view": "Infrastructuur en deployment",
    "08_concepts": "Overkoepelende regelingen en oplossingsbenaderingen",
    "09_architecture_decisions": "Belangrijke, kostbare, kritieke of risicovolle beslissingen",
    "10_quality_requirements": "Kwaliteitsboom en kwaliteitsscenario's",
    "11_technical_risks": "Bekende problemen, risico's en technische schuld",
    "12_glossary": "Belangrijke zakelijke en technische termen",
}

GUIDANCE = {
    "01_introduction_and_goals": (
        Guidance(
            heading="Overzicht van Eisen",
            purpose="Beschrijft de relevante eisen en drijvende krachten waarmee architectuur "
            "en ontwikkeling rekening moeten houden.",
            prompts=(
                "De 3-5 belangrijkste functionele eisen opsommen",
                "De essentiële functies van het systeem noemen",
            ),
            table=(
                ("ID", "Eis", "Prioriteit"),
                (
                    ("REQ-1", "[Korte beschrijving]", "Hoog"),
                    ("REQ-2", "[Korte beschrijving]", "Gemiddeld"),
                ),
            ),
        ),
        Guidance(
            heading="Kwaliteitsdoelen",
            purpose="De 3-5 belangrijkste kwaliteitsdoelen van de belangrijkste stakeholders "
            "vastleggen.",
            prompts=(
                "Kwaliteiten prioriteren volgens ISO 25010: performance, beveiliging, "
                "betrouwbaarheid, onderhoudbaarheid, bruikbaarheid",
            ),
            table=(
                ("Prioriteit", "Kwaliteitsdoel", "Motivatie"),
                (
                    ("1", "[bijv. Performance]", "[Waarom dit cruciaal is]"),
                    ("2", "[bijv. Beveiliging]", "[Waarom dit cruciaal is]"),
                    ("3", "[bijv. Onderhoudbaarheid]", "[Waarom dit cruciaal is]"),
                ),
            ),
        ),
        Guidance(
            heading="Stakeholders",
            purpose="Alle personen en rollen benoemen die de architectuur moeten kennen.",
            table=(
                ("Rol/Naam", "Contact", "Verwachtingen"),
                (
                    ("Product Owner", "[Naam/E-mail]", "[Verwachtingen van de architectuur]"),
                    ("Ontwikkelteam", "[Teamnaam]", "[Wat het team moet weten]"),
                    ("Beheer", "[Team/Persoon]", "[Aandachtspunten voor deployment en beheer]"),
                ),
            ),
        ),
    ),
    "02_architecture_constraints": (
        Guidance(
            heading="Technische Beperkingen",
            purpose="Technische randvoorwaarden vastleggen die ontwerp en implementatie beperken.",
            table=(
                ("Beperking", "Toelichting"),
                (
                    ("[bijv. Draait op Linux]", "[Waarom deze beperking bestaat]"),
                    ("[bijv. Minimaal Python 3.10]", "[Organisatorische eis]"),
                ),
            ),
        ),
        Guidance(
            heading="Organisatorische Beperkingen",
            purpose="Beperkingen vanuit team, planning, budget of wetgeving vastleggen.",
            table=(
                ("Beperking", "Toelichting"),
                (
                    ("[bijv. Teamgrootte: 5 ontwikkelaars]", "[Invloed op de architectuur]"),
                    ("[bijv. Doorlooptijd: 6 maanden]", "[Leveringsvoorwaarden]"),
                ),
            ),
        ),
        Guidance(
            heading="Conventies",
            purpose="De geldende programmeer-, documentatie- en naamgevingsconventies opsommen.",
            table=(
                ("Conventie", "Toelichting"),
                (("[bijv. Codestijl: PEP 8]", "[Link naar de stijlgids]"),),
            ),
        ),
    ),
    "03_context_and_scope": (
        Guidance(
            heading="Zakelijke Context",
            purpose="Alle communicatiepartners (gebruikers, IT-systemen, ...) benoemen met de "
            "zakelijke in- en uitvoer.",
            prompts=("Een contextdiagram toevoegen (PlantUML, Mermaid of afbeelding in images/)",),
            table=(
                ("Partner", "Invoer", "Uitvoer"),
                (("[Gebruiker/Systeem]", "[Wat wordt verzonden]", "[Wat wordt ontvangen]"),),
            ),
        ),
        Guidance(
            heading="Technische Context",
            purpose="Technische kanalen en protocollen tussen het systeem en zijn omgeving "
            "benoemen.",
            table=(
                ("Partner", "Kanaal", "Protocol"),
                (("[Systeemnaam]", "[bijv. REST-API]", "[bijv. HTTPS, JSON]"),),
            ),
        ),
    ),
    "04_solution_strategy": (
        Guidance(
            heading="Technologiebeslissingen",
            purpose="De fundamentele technologiekeuzes samenvatten.",
            table=(
                ("Beslissing", "Keuze", "Onderbouwing"),
                (
                    ("Programmeertaal", "[bijv. Python]", "[Waarom deze keuze]"),
                    ("Framework", "[bijv. FastAPI]", "[Waarom deze keuze]"),
                    ("Database", "[bijv. PostgreSQL]", "[Waarom deze keuze]"),
                ),
            ),
        ),
        Guidance(
            heading="Decompositie op Hoofdlijnen",
            purpose="De globale structuur van het systeem beschrijven.",
            prompts=("[bijv. Gelaagde architectuur]", "[bijv. Microservices]"),
        ),
        Guidance(
            heading="Aanpak voor de Kwaliteitsdoelen",
            purpose="Uitleggen hoe de kwaliteitsdoelen uit sectie 1 worden bereikt.",
            table=(
                ("Kwaliteitsdoel", "Oplossingsaanpak"),
                (
                    ("[Performance]", "[bijv. Caching, asynchrone verwerking]"),
                    ("[Beveiliging]", "[bijv. OAuth2, versleuteling]"),
                ),
            ),
        ),
    ),
    "05_building_block_view": (
        Guidance(
            heading="Niveau 1: Whitebox van het Gehele Systeem",
            purpose="De whitebox toont de interne structuur van het gehele systeem.",
            prompts=("Een componentendiagram van de bouwstenen op het hoogste niveau toevoegen",),
            table=(
                ("Bouwsteen", "Beschrijving"),
                (
                    ("[Component A]", "[Verantwoordelijkheid en doel]"),
                    ("[Component B]", "[Verantwoordelijkheid en doel]"),
                ),
            ),
        ),
        Guidance(
            heading="Niveau 2",
            purpose="De hoofdcomponenten opsplitsen in kleinere bouwstenen.",
            table=(
                ("Bouwsteen", "Beschrijving"),
                (("[Subcomponent A.1]", "[Verantwoordelijkheid]"),),
            ),
        ),
    ),
    "06_runtime_view": (
        Guidance(
            heading="Scenario 1: [bijv. Gebruikerslogin]",
            purpose="Het runtimegedrag van een belangrijk scenario beschrijven.",
            prompts=(
                "Een sequentiediagram van de betrokken bouwstenen toevoegen",
                "De stappen in volgorde opsommen",
            ),
        ),
        Guidance(
            heading="Scenario 2: [bijv. Gegevensverwerking]",
            purpose="Nog een belangrijk runtimescenario documenteren.",
            prompts=("[Stappen en interacties beschrijven]",),
        ),
    ),
    "07_deployment_view": (
        Guidance(
            heading="Infrastructuur Niveau 1",
            purpose="Overzicht van de infrastructuur waarop het systeem draait.",
            prompts=(
                "Een deploymentdiagram toevoegen",
                "Motivatie: [Waarom voor deze deploymentarchitectuur is gekozen]",
                "Koppeling van bouwstenen aan infrastructuur",
            ),
        ),
        Guidance(
            heading="Infrastructuur Niveau 2",
            purpose="Gedetailleerd beeld van afzonderlijke infrastructuurnodes.",
            table=(
                ("Aspect", "Beschrijving"),
                (
                    ("Hardware", "[bijv. 4 vCPU, 16GB RAM]"),
                    ("Software", "[bijv. Ubuntu 22.04, Docker 24.x]"),
                ),
            ),
        ),
    ),
    "08_concepts": (
        Guidance(
            heading="Domeinmodel",
            purpose="De centrale domeinbegrippen en hun relaties tonen.",
            prompts=("Een klassendiagram van het domeinmodel toevoegen",),
        ),
        Guidance(
            heading="Beveiligingsconcept",
            purpose="Authenticatie en autorisatie in het systeem beschrijven.",
            prompts=("Authenticatie: [JWT, OAuth2, ...]", "Autorisatie: [RBAC, ABAC, ...]"),
        ),
        Guidance(
            heading="Foutafhandeling",
            purpose="Beschrijven hoe fouten in het hele systeem worden afgehandeld.",
            prompts=("[bijv. Globale error handler]", "[bijv. Gestructureerde foutresponses]"),
        ),
        Guidance(
            heading="Logging en Monitoring",
            purpose="Vastleggen hoe het systeem in productie wordt bewaakt.",
            table=(
                ("Aspect", "Aanpak"),
                (
                    ("Logging", "[bijv. Gestructureerde JSON-logs]"),
                    ("Metrics", "[bijv. Prometheus, Grafana]"),
                ),
            ),
        ),
        Guidance(
            heading="Teststrategie",
            purpose="Testniveaus en hun dekkingsdoelen vastleggen.",
            table=(
                ("Soort", "Omvang", "Dekkingsdoel"),
                (
                    ("Unittests", "Afzonderlijke functies/klassen", "80%"),
                    ("Integratietests", "Samenwerking tussen componenten", "Hoofdpaden"),
                ),
            ),
        ),
    ),
    "09_architecture_decisions": (
        Guidance(
            heading="ADR-001: [Titel van de beslissing]",
            purpose="Een belangrijke, kostbare, grootschalige of risicovolle beslissing "
            "documenteren.",
            prompts=(
                "Status: [Voorgesteld | Geaccepteerd | Verouderd | Vervangen]",
                "Context: [Aanleiding voor de beslissing]",
                "Beslissing: [Wat is besloten]",
                "Gevolgen: [Positieve en negatieve effecten]",
            ),
            table=(
                ("Alternatief", "Voordelen", "Nadelen"),
                (("[Optie A]", "[Voordelen]", "[Nadelen]"),),
            ),
        ),
        Guidance(
            heading="ADR-002: [Titel van de beslissing]",
            purpose="Verdere beslissingen volgens hetzelfde schema vastleggen.",
        ),
    ),
    "10_quality_requirements": (
        Guidance(
            heading="Kwaliteitsboom",
            purpose="De kwaliteitsdoelen verfijnen tot meetbare kwaliteitskenmerken.",
            prompts=(
                "Performance: responstijd, doorvoer",
                "Beveiliging: authenticatie, autorisatie",
                "Onderhoudbaarheid: modulariteit, testbaarheid",
            ),
        ),
        Guidance(
            heading="Kwaliteitsscenario's",
            purpose="Kwaliteitseisen concreet en toetsbaar maken.",
            table=(
                ("ID", "Scenario", "Verwachte reactie", "Prioriteit"),
                (
                    ("PERF-1", "Dashboard laden onder normale belasting", "< 200ms", "Hoog"),
                    ("SEC-1", "Ongeldige inlogpoging", "Blokkade na 5 pogingen", "Hoog"),
                ),
            ),
        ),
    ),
    "11_technical_risks": (
        Guidance(
            heading="Technische Risico's",
            purpose="Bekende technische risico's en hun maatregelen benoemen.",
            table=(
                ("Risico", "Beschrijving", "Waarschijnlijkheid", "Maatregel"),
                (
                    (
                        "[bijv. Uitval van een externe API]",
                        "[Externe dienst]",
                        "Gemiddeld",
                        "[Circuit breaker, terugvaloptie]",
                    ),
                ),
            ),
        ),
        Guidance(
            heading="Technische Schuld",
            purpose="Opgebouwde technische schuld bijhouden.",
            table=(
                ("Item", "Beschrijving", "Impact", "Prioriteit"),
                (("[bijv. Ontbrekende tests]", "[Lage dekking in module X]", "Gemiddeld", "Laag"),),
            ),
        ),
        Guidance(
            heading="Risicobewaking",
            purpose="Beschrijven hoe risico's worden bewaakt en herzien.",
            prompts=("[bijv. Wekelijkse risicoreview]",),
        ),
    ),
    "12_glossary": (
        Guidance(
            heading="Domeintermen",
            purpose="De zakelijke termen definiëren die stakeholders gebruiken.",
            table=(
                ("Term", "Definitie"),
                (("[Domeinterm 1]", "[Heldere, beknopte definitie]"),),
            ),
        ),
        Guidance(
            heading="Technische Termen",
            purpose="De technische termen in deze documentatie definiëren.",
            table=(
                ("Term", "Definitie"),
                (("[Technische term 1]", "[Heldere, beknopte definitie]"),),
            ),
        ),
        Guidance(
            heading="Afkortingen",
            purpose="De gebruikte afkortingen uitschrijven.",
            table=(
                ("Afkorting", "Betekenis"),
                (("API", "Application Programming Interface"),),
            ),
        ),
    ),
}

PHRASES = {
    "purpose": "Doel",
    "file": "Bestand",
    "further_information": "Meer informatie",
    "resources": "Bronnen",
    "template_reference": "Template-referentie",
    "source": "Bron",
    "readme_title": "{project} - Architectuurdocumentatie",
    "readme_intro": "Deze map bevat de architectuurdocumentatie van {project}, volgens het "
    "arc42-template.",
    "readme_title_generic": "Architectuurdocumentatie",
    "readme_intro_generic": "Deze map bevat de architectuurdocumentatie, volgens het "
    "arc42-template.",
    "readme_structure": "Structuur",
    "readme_sections": "De 12 arc42-secties",
    "readme_getting_started": "Aan de slag",
    "readme_steps": [
        "Begin met sectie 1: Introductie en Doelen",
        "Werk de secties iteratief uit",
        "Verduidelijk concepten met diagrammen",
        "Richt je op beslissingen, niet op implementatiedetails",
    ],
    "structure_sections": "Afzonderlijke sectiebestanden (12 secties)",
    "structure_images": "Diagrammen en afbeeldingen",
    "structure_document": "Gecombineerde hoofddocumentatie",
    "structure_config": "Configuratie",
    "document_intro": "Dit document beschrijft de architectuur van {project} volgens het "
    "arc42-template.",
    "version": "Versie",
    "date": "Datum",
    "status": "Status",
    "status_draft": "Concept",
    "language": "Taal",
    "table_of_contents": "Inhoudsopgave",
    "about_arc42": "Over arc42",
    "about_arc42_text": "arc42, het template voor de documentatie van software- en "
    "systeemarchitecturen, is ontwikkeld door Dr. Gernot Starke en Dr. Peter Hruschka.",
    "guide_title": "arc42 workflowgids voor architectuurdocumentatie",
    "guide_overview": "Overzicht",
    "guide_intro": "Deze gids helpt bij het documenteren van softwarearchitectuur met het "
    "arc42-template, een beproefd template voor software- en systeemarchitecturen.",
    "guide_languages": "Beschikbare talen",
    "guide_language_headers": ["Code", "Taal", "Eigen naam"],
    "guide_getting_started": "Aan de slag",
    "guide_steps": [
        {
            "title": "Stap 1: Workspace initialiseren",
            "text": "De documentatieworkspace aanmaken:",
            "example": 'arc42docs init "Mijn Project" --language NL',
        },
        {
            "title": "Stap 2: Status controleren",
            "text": "De huidige stand van de documentatie bekijken:",
            "example": "arc42docs status",
        },
        {
            "title": "Stap 3: Sectietemplates genereren",
            "text": "Een uitgebreid template per sectie ophalen:",
            "example": "arc42docs template 01_introduction_and_goals --language NL",
        },
    ],
    "guide_sections": "De 12 arc42-secties",
    "guide_best_practices": "Best practices",
    "guide_practices": [
        "Begin met sectie 1 - de doelen begrijpen is essentieel",
        "Houd het beknopt - arc42 is pragmatisch, niet bureaucratisch",
        "Gebruik diagrammen - een beeld zegt meer dan duizend woorden",
        "Documenteer beslissingen - het toekomstige team zal je dankbaar zijn",
        "Itereer - architectuurdocumentatie is nooit af",
    ],
    "guide_tools": "Beschikbare commando's",
    "guide_tool_descriptions": {
        "init": "Documentatieworkspace initialiseren",
        "status": "Documentatiestatus controleren",
        "template": "Sectietemplate genereren",
        "update": "Sectie-inhoud bijwerken",
        "get": "Sectie-inhoud lezen",
        "guide": "Deze gids tonen",
    },
    "guide_structure": "Bestandsstructuur",
}

CATALOG = LanguageCatalog(
    code="NL",
    name="Dutch",
    native_name="Nederlands",
    titles=TITLES,
    descriptions=DESCRIPTIONS,
    guidance=GUIDANCE,
    phrases=PHRASES,
)
