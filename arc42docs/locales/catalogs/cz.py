"""Czech catalog."""

from __future__ import annotations

from ..base import Guidance, LanguageCatalog

TITLES = {
    "01_introduction_and_goals": "Úvod a cíle",
    "02_architecture_constraints": "Omezení architektury",
    "03_context_and_scope": "Kontext a rozsah",
    "04_solution_strategy": "Strategie řešení",
    "05_building_block_view": "Pohled stavebních bloků",
    "06_runtime_view": "Pohled běhu",
    "07_deployment_view": "Pohled nasazení",
    "08_concepts": "Průřezové koncepty",
    "09_architecture_decisions": "Architektonická rozhodnutí",
    "10_quality_requirements": "Požadavky na kvalitu",
    "11_technical_risks": "Rizika a technický dluh",
    "12_glossary": "Slovník",
}

DESCRIPTIONS = {
    "01_introduction_and_goals": "Popis úlohy, cíle kvality a zainteresované strany",
    "02_architecture_constraints": "Technická a organizační omezení",
    "03_context_and_scope": "Obchodní a technický kontext, externí rozhraní",
    "04_solution_strategy": "Základní rozhodnutí a strategie řešení",
    "05_building_block_view": "Statická dekompozice systému",
    "06_runtime_view": "Dynamické chování a důležité scénáře",
    "07_deployment_view": "Infrastruktura a nasazení",
    "08_concepts": "Průřezová pravidla a přístupy k řešení",
    "09_architecture_decisions": "Důležitá, nákladná, kritická nebo riziková rozhodnutí",
    "10_quality_requirements": "Strom kvality a scénáře kvality",
    "11_technical_risks": "Známé problémy, rizika a technický dluh",
    "12_glossary": "Důležité obchodní a technické pojmy",
}

GUIDANCE = {
    "01_introduction_and_goals": (
        Guidance(
            heading="Přehled požadavků",
            purpose="Popisuje podstatné požadavky a hnací síly, které musí architektura a "
            "vývoj zohlednit.",
            prompts=(
                "Vyjmenovat 3-5 nejdůležitějších funkčních požadavků",
                "Uvést základní funkce systému",
            ),
            table=(
                ("ID", "Požadavek", "Priorita"),
                (
                    ("REQ-1", "[Stručný popis]", "Vysoká"),
                    ("REQ-2", "[Stručný popis]", "Střední"),
                ),
            ),
        ),
        Guidance(
            heading="Cíle kvality",
            purpose="Stanovit 3-5 hlavních cílů kvality nejdůležitějších zainteresovaných stran.",
            prompts=(
                "Seřadit kvality podle ISO 25010: výkon, bezpečnost, spolehlivost, "
                "udržovatelnost, použitelnost",
            ),
            table=(
                ("Priorita", "Cíl kvality", "Motivace"),
                (
                    ("1", "[např. Výkon]", "[Proč je to zásadní]"),
                    ("2", "[např. Bezpečnost]", "[Proč je to zásadní]"),
                    ("3", "[např. Udržovatelnost]", "[Proč je to zásadní]"),
                ),
            ),
        ),
        Guidance(
            heading="Zainteresované strany",
            purpose="Určit všechny osoby a role, které by měly architekturu znát.",
            table=(
                ("Role/Jméno", "Kontakt", "Očekávání"),
                (
                    ("Product Owner", "[Jméno/E-mail]", "[Očekávání od architektury]"),
                    ("Vývojový tým", "[Název týmu]", "[Co tým potřebuje vědět]"),
                    ("Provoz", "[Tým/Osoba]", "[Otázky nasazení a provozu]"),
                ),
            ),
        ),
    ),
    "02_architecture_constraints": (
        Guidance(
            heading="Technická omezení",
            purpose="Zaznamenat technická omezení, která limitují návrh a implementaci.",
            table=(
                ("Omezení", "Vysvětlení"),
                (
                    ("[např. Provoz na Linuxu]", "[Proč toto omezení existuje]"),
                    ("[např. Minimálně Python 3.10]", "[Organizační požadavek]"),
                ),
            ),
        ),
        Guidance(
            heading="Organizační omezení",
            purpose="Zaznamenat omezení daná týmem, harmonogramem, rozpočtem nebo legislativou.",
            table=(
                ("Omezení", "Vysvětlení"),
                (
                    ("[např. Velikost týmu: 5 vývojářů]", "[Dopad na architekturu]"),
                    ("[např. Časový rámec: 6 měsíců]", "[Podmínky dodání]"),
                ),
            ),
        ),
        Guidance(
            heading="Konvence",
            purpose="Vyjmenovat platné programátorské, dokumentační a jmenné konvence.",
            table=(
                ("Konvence", "Vysvětlení"),
                (("[např. Styl kódu: PEP 8]", "[Odkaz na stylovou příručku]"),),
            ),
        ),
    ),
    "03_context_and_scope": (
        Guidance(
            heading="Obchodní kontext",
            purpose="Určit všechny komunikační partnery (uživatele, IT systémy, ...) včetně "
            "obchodních vstupů a výstupů.",
            prompts=("Doplnit kontextový diagram (PlantUML, Mermaid nebo obrázek v images/)",),
            table=(
                ("Partner", "Vstup", "Výstup"),
                (("[Uživatel/Systém]", "[Co se odesílá]", "[Co se přijímá]"),),
            ),
        ),
        Guidance(
            heading="Technický kontext",
            purpose="Určit technické kanály a protokoly mezi systémem a jeho okolím.",
            table=(
                ("Partner", "Kanál", "Protokol"),
                (("[Název systému]", "[např. REST API]", "[např. HTTPS, JSON]"),),
            ),
        ),
    ),
    "04_solution_strategy": (
        Guidance(
            heading="Technologická rozhodnutí",
            purpose="Shrnout základní technologické volby.",
            table=(
                ("Rozhodnutí", "Volba", "Zdůvodnění"),
                (
                    ("Programovací jazyk", "[např. Python]", "[Proč tato volba]"),
                    ("Framework", "[např. FastAPI]", "[Proč tato volba]"),
                    ("Databáze", "[např. PostgreSQL]", "[Proč tato volba]"),
                ),
            ),
        ),
        Guidance(
            heading="Dekompozice na nejvyšší úrovni",
            purpose="Popsat celkovou strukturu systému.",
            prompts=("[např. Vrstvená architektura]", "[např. Mikroslužby]"),
        ),
        Guidance(
            heading="Strategie pro dosažení cílů kvality",
            purpose="Vysvětlit, jak jsou dosaženy cíle kvality ze sekce 1.",
            table=(
                ("Cíl kvality", "Přístup k řešení"),
                (
                    ("[Výkon]", "[např. Cache, asynchronní zpracování]"),
                    ("[Bezpečnost]", "[např. OAuth2, šifrování]"),
                ),
            ),
        ),
    ),
    "05_building_block_view": (
        Guidance(
            heading="Úroveň 1: Whitebox celého systému",
            purpose="Whitebox ukazuje vnitřní strukturu celého systému.",
            prompts=("Doplnit diagram komponent stavebních bloků nejvyšší úrovně",),
            table=(
                ("Stavební blok", "Popis"),
                (
                    ("[Komponenta A]", "[Odpovědnost a účel]"),
                    ("[Komponenta B]", "[Odpovědnost a účel]"),
                ),
            ),
        ),
        Guidance(
            heading="Úroveň 2",
            purpose="Rozložit hlavní komponenty na menší stavební bloky.",
            table=(
                ("Stavební blok", "Popis"),
                (("[Podkomponenta A.1]", "[Odpovědnost]"),),
            ),
        ),
    ),
    "06_runtime_view": (
        Guidance(
            heading="Scénář 1: [např. Přihlášení uživatele]",
            purpose="Popsat chování za běhu pro důležitý scénář.",
            prompts=(
                "Doplnit sekvenční diagram zúčastněných stavebních bloků",
                "Vyjmenovat kroky v pořadí",
            ),
        ),
        Guidance(
            heading="Scénář 2: [např. Zpracování dat]",
            purpose="Zdokumentovat další důležitý scénář za běhu.",
            prompts=("[Popsat kroky a interakce]",),
        ),
    ),
    "07_deployment_view": (
        Guidance(
            heading="Infrastruktura úroveň 1",
            purpose="Přehled infrastruktury, na které systém běží.",
            prompts=(
                "Doplnit diagram nasazení",
                "Motivace: [Proč byla zvolena tato architektura nasazení]",
                "Mapování stavebních bloků na infrastrukturu",
            ),
        ),
        Guidance(
            heading="Infrastruktura úroveň 2",
            purpose="Detailní pohled na jednotlivé uzly infrastruktury.",
            table=(
                ("Aspekt", "Popis"),
                (
                    ("Hardware", "[např. 4 vCPU, 16GB RAM]"),
                    ("Software", "[např. Ubuntu 22.04, Docker 24.x]"),
                ),
            ),
        ),
    ),
    "08_concepts": (
        Guidance(
            heading="Doménový model",
            purpose="Ukázat klíčové doménové pojmy a jejich vztahy.",
            prompts=("Doplnit diagram tříd doménového modelu",),
        ),
        Guidance(
            heading="Bezpečnostní koncept",
            purpose="Popsat autentizaci a autorizaci v systému.",
            prompts=("Autentizace: [JWT, OAuth2, ...]", "Autorizace: [RBAC, ABAC, ...]"),
        ),
        Guidance(
            heading="Zpracování chyb",
            purpose="Popsat, jak jsou chyby zpracovány v celém systému.",
            prompts=("[např. Globální obsluha chyb]", "[např. Strukturované chybové odpovědi]"),
        ),
        Guidance(
            heading="Logování a monitoring",
            purpose="Zaznamenat, jak je systém sledován v provozu.",
            table=(
                ("Aspekt", "Přístup"),
                (
                    ("Logování", "[např. Strukturované JSON logy]"),
                    ("Metriky", "[např. Prometheus, Grafana]"),
                ),
            ),
        ),
        Guidance(
            heading="Strategie testování",
            purpose="Stanovit úrovně testování a jejich cíle pokrytí.",
            table=(
                ("Typ", "Rozsah", "Cíl pokrytí"),
                (
                    ("Jednotkové testy", "Jednotlivé funkce/třídy", "80%"),
                    ("Integrační testy", "Spolupráce komponent", "Hlavní cesty"),
                ),
            ),
        ),
    ),
    "09_architecture_decisions": (
        Guidance(
            heading="ADR-001: [Název rozhodnutí]",
            purpose="Zdokumentovat důležité, nákladné, rozsáhlé nebo rizikové rozhodnutí.",
            prompts=(
                "Stav: [Navrženo | Přijato | Zastaralé | Nahrazeno]",
                "Kontext: [Co rozhodnutí vyvolalo]",
                "Rozhodnutí: [Co bylo rozhodnuto]",
                "Důsledky: [Pozitivní a negativní dopady]",
            ),
            table=(
                ("Alternativa", "Výhody", "Nevýhody"),
                (("[Možnost A]", "[Výhody]", "[Nevýhody]"),),
            ),
        ),
        Guidance(
            heading="ADR-002: [Název rozhodnutí]",
            purpose="Další rozhodnutí zaznamenat podle stejného schématu.",
        ),
    ),
    "10_quality_requirements": (
        Guidance(
            heading="Strom kvality",
            purpose="Zpřesnit cíle kvality na měřitelné atributy kvality.",
            prompts=(
                "Výkon: doba odezvy, propustnost",
                "Bezpečnost: autentizace, autorizace",
                "Udržovatelnost: modularita, testovatelnost",
            ),
        ),
        Guidance(
            heading="Scénáře kvality",
            purpose="Učinit požadavky na kvalitu konkrétními a ověřitelnými.",
            table=(
                ("ID", "Scénář", "Očekávaná reakce", "Priorita"),
                (
                    ("PERF-1", "Načtení dashboardu při běžné zátěži", "< 200ms", "Vysoká"),
                    ("SEC-1", "Neplatný pokus o přihlášení", "Zablokování po 5 pokusech", "Vysoká"),
                ),
            ),
        ),
    ),
    "11_technical_risks": (
        Guidance(
            heading="Technická rizika",
            purpose="Určit známá technická rizika a opatření k jejich zmírnění.",
            table=(
                ("Riziko", "Popis", "Pravděpodobnost", "Opatření"),
                (
                    (
                        "[např. Výpadek externího API]",
                        "[Externí služba]",
                        "Střední",
                        "[Circuit breaker, záložní řešení]",
                    ),
                ),
            ),
        ),
        Guidance(
            heading="Technický dluh",
            purpose="Sledovat nahromaděný technický dluh.",
            table=(
                ("Položka", "Popis", "Dopad", "Priorita"),
                (("[např. Chybějící testy]", "[Nízké pokrytí v modulu X]", "Střední", "Nízká"),),
            ),
        ),
        Guidance(
            heading="Sledování rizik",
            purpose="Popsat, jak jsou rizika sledována a přehodnocována.",
            prompts=("[např. Týdenní revize rizik]",),
        ),
    ),
    "12_glossary": (
        Guidance(
            heading="Doménové pojmy",
            purpose="Definovat obchodní pojmy, které používají zainteresované strany.",
            table=(
                ("Pojem", "Definice"),
                (("[Doménový pojem 1]", "[Jasná a stručná definice]"),),
            ),
        ),
        Guidance(
            heading="Technické pojmy",
            purpose="Definovat technické pojmy použité v této dokumentaci.",
            table=(
                ("Pojem", "Definice"),
                (("[Technický pojem 1]", "[Jasná a stručná definice]"),),
            ),
        ),
        Guidance(
            heading="Zkratky",
            purpose="Rozepsat použité zkratky.",
            table=(
                ("Zkratka", "Význam"),
                (("API", "Application Programming Interface"),),
            ),
        ),
    ),
}

PHRASES = {
    "purpose": "Účel",
    "file": "Soubor",
    "further_information": "Další informace",
    "resources": "Zdroje",
    "template_reference": "Odkaz na šablonu",
    "source": "Zdroj",
    "readme_title": "{project} - Dokumentace architektury",
    "readme_intro": "Tento adresář obsahuje dokumentaci architektury projektu {project} "
    "podle šablony arc42.",
    "readme_title_generic": "Dokumentace architektury",
    "readme_intro_generic": "Tento adresář obsahuje dokumentaci architektury podle šablony arc42.",
    "readme_structure": "Struktura",
    "readme_sections": "12 sekcí arc42",
    "readme_getting_started": "Začínáme",
    "readme_steps": [
        "Začněte sekcí 1: Úvod a cíle",
        "Sekce vyplňujte iterativně",
        "Koncepty znázorněte diagramy",
        "Zaměřte se na rozhodnutí, ne na detaily implementace",
    ],
    "structure_sections": "Jednotlivé soubory sekcí (12 sekcí)",
    "structure_images": "Diagramy a obrázky",
    "structure_document": "Hlavní kombinovaná dokumentace",
    "structure_config": "Konfigurace",
    "document_intro": "Tento dokument popisuje architekturu projektu {project} podle šablony arc42.",
    "version": "Verze",
    "date": "Datum",
    "status": "Stav",
    "status_draft": "Koncept",
    "language": "Jazyk",
    "table_of_contents": "Obsah",
    "about_arc42": "O arc42",
    "about_arc42_text": "arc42, šablonu pro dokumentaci softwarových a systémových "
    "architektur, vytvořili Dr. Gernot Starke a Dr. Peter Hruschka.",
    "guide_title": "Průvodce dokumentací architektury arc42",
    "guide_overview": "Přehled",
    "guide_intro": "Tento průvodce pomáhá dokumentovat softwarovou architekturu pomocí šablony "
    "arc42, osvědčené šablony pro softwarové a systémové architektury.",
    "guide_languages": "Dostupné jazyky",
    "guide_language_headers": ["Kód", "Jazyk", "Nativní název"],
    "guide_getting_started": "Začínáme",
    "guide_steps": [
        {
            "title": "Krok 1: Inicializace pracovního prostoru",
            "text": "Vytvořte pracovní prostor dokumentace:",
            "example": 'arc42docs init "Můj projekt" --language CZ',
        },
        {
            "title": "Krok 2: Kontrola stavu",
            "text": "Zobrazte aktuální stav dokumentace:",
            "example": "arc42docs status",
        },
        {
            "title": "Krok 3: Generování šablon sekcí",
            "text": "Získejte podrobnou šablonu pro každou sekci:",
            "example": "arc42docs template 01_introduction_and_goals --language CZ",
        },
    ],
    "guide_sections": "12 sekcí arc42",
    "guide_best_practices": "Osvědčené postupy",
    "guide_practices": [
        "Začněte sekcí 1 - pochopení cílů je zásadní",
        "Buďte struční - arc42 je pragmatické, ne byrokratické",
        "Používejte diagramy - obrázek řekne víc než tisíc slov",
        "Dokumentujte rozhodnutí - budoucí tým vám poděkuje",
        "Iterujte - dokumentace architektury není nikdy hotová",
    ],
    "guide_tools": "Dostupné příkazy",
    "guide_tool_descriptions": {
        "init": "Inicializovat pracovní prostor dokumentace",
        "status": "Zkontrolovat stav dokumentace",
        "template": "Vygenerovat šablonu sekce",
        "update": "Aktualizovat obsah sekce",
        "get": "Přečíst obsah sekce",
        "guide": "Zobrazit tohoto průvodce",
    },
    "guide_structure": "Struktura souborů",
}

CATALOG = LanguageCatalog(
    code="CZ",
    name="Czech",
    native_name="Čeština",
    titles=TITLES,
    descriptions=DESCRIPTIONS,
    guidance=GUIDANCE,
    phrases=PHRASES,
)
