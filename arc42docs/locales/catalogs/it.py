"""Italian catalog."""

from __future__ import annotations

from ..base import Guidance, LanguageCatalog

TITLES = {
    "01_introduction_and_goals": "Introduzione e Obiettivi",
    "02_architecture_constraints": "Vincoli dell'Architettura",
    "03_context_and_scope": "Contesto e Ambito",
    "04_solution_strategy": "Strategia di Soluzione",
    "05_building_block_view": "Vista dei Building Block",
    "06_runtime_view": "Vista Runtime",
    "07_deployment_view": "Vista di Deployment",
    "08_concepts": "Concetti Trasversali",
    "09_architecture_decisions": "Decisioni Architetturali",
    "10_quality_requirements": "Requisiti di Qualità",
    "11_technical_risks": "Rischi e Debito Tecnico",
    "12_glossary": "Glossario",
}

DESCRIPTIONS = {
    "01_introduction_and_goals": "Requisiti, obiettivi di qualità e stakeholder",
    "02_architecture_constraints": "Vincoli tecnici e organizzativi",
    "03_context_and_scope": "Contesto di business e tecnico, interfacce esterne",
    "04_solution_strategy": "Decisioni e strategie fondamentali della soluzione",
    "05_building_block_view": "Decomposizione statica del sistema",
    "06_runtime_view": "Comportamento dinamico e scenari importanti",
    "07_deployment_view": "Infrastruttura e distribuzione",
    "08_concepts": "Regolamenti e approcci trasversali",
    "09_architecture_decisions": "Decisioni importanti, costose, critiche o rischiose",
    "10_quality_requirements": "Albero della qualità e scenari di qualità",
    "11_technical_risks": "Problemi noti, rischi e debito tecnico",
    "12_glossary": "Termini importanti di business e tecnici",
}

GUIDANCE = {
    "01_introduction_and_goals": (
        Guidance(
            heading="Panoramica dei Requisiti",
            purpose="Descrive i requisiti rilevanti e le forze trainanti che architettura e "
            "sviluppo devono considerare.",
            prompts=(
                "Elencare i 3-5 requisiti funzionali più importanti",
                "Indicare le funzionalità essenziali del sistema",
            ),
            table=(
                ("ID", "Requisito", "Priorità"),
                (
                    ("REQ-1", "[Breve descrizione]", "Alta"),
                    ("REQ-2", "[Breve descrizione]", "Media"),
                ),
            ),
        ),
        Guidance(
            heading="Obiettivi di Qualità",
            purpose="Definire i 3-5 obiettivi di qualità principali degli stakeholder rilevanti.",
            prompts=(
                "Dare priorità alle qualità secondo ISO 25010: prestazioni, sicurezza, "
                "affidabilità, manutenibilità, usabilità",
            ),
            table=(
                ("Priorità", "Obiettivo di qualità", "Motivazione"),
                (
                    ("1", "[es. Prestazioni]", "[Perché è critico]"),
                    ("2", "[es. Sicurezza]", "[Perché è critico]"),
                    ("3", "[es. Manutenibilità]", "[Perché è critico]"),
                ),
            ),
        ),
        Guidance(
            heading="Stakeholder",
            purpose="Identificare tutte le persone e i ruoli che devono conoscere l'architettura.",
            table=(
                ("Ruolo/Nome", "Contatto", "Aspettative"),
                (
                    ("Product Owner", "[Nome/E-mail]", "[Aspettative sull'architettura]"),
                    ("Team di sviluppo", "[Nome del team]", "[Cosa deve sapere il team]"),
                    ("Operations", "[Team/Persona]", "[Aspetti di deployment e gestione]"),
                ),
            ),
        ),
    ),
    "02_architecture_constraints": (
        Guidance(
            heading="Vincoli Tecnici",
            purpose="Registrare i vincoli tecnici che limitano progettazione e implementazione.",
            table=(
                ("Vincolo", "Spiegazione"),
                (
                    ("[es. Esecuzione su Linux]", "[Perché esiste questo vincolo]"),
                    ("[es. Almeno Python 3.10]", "[Requisito organizzativo]"),
                ),
            ),
        ),
        Guidance(
            heading="Vincoli Organizzativi",
            purpose="Registrare i vincoli di team, pianificazione, budget o contesto legale.",
            table=(
                ("Vincolo", "Spiegazione"),
                (
                    ("[es. Dimensione del team: 5 sviluppatori]", "[Impatto sull'architettura]"),
                    ("[es. Tempistica: 6 mesi]", "[Vincoli di consegna]"),
                ),
            ),
        ),
        Guidance(
            heading="Convenzioni",
            purpose="Elencare le convenzioni di programmazione, documentazione e nomenclatura "
            "in vigore.",
            table=(
                ("Convenzione", "Spiegazione"),
                (("[es. Stile del codice: PEP 8]", "[Link alla guida di stile]"),),
            ),
        ),
    ),
    "03_context_and_scope": (
        Guidance(
            heading="Contesto di Business",
            purpose="Identificare tutti i partner di comunicazione (utenti, sistemi, ...) con "
            "input e output di business.",
            prompts=("Aggiungere un diagramma di contesto (PlantUML, Mermaid o immagine in images/)",),
            table=(
                ("Partner", "Input", "Output"),
                (("[Utente/Sistema]", "[Cosa viene inviato]", "[Cosa viene ricevuto]"),),
            ),
        ),
        Guidance(
            heading="Contesto Tecnico",
            purpose="Identificare canali tecnici e protocolli tra il sistema e il suo ambiente.",
            table=(
                ("Partner", "Canale", "Protocollo"),
                (("[Nome del sistema]", "[es. API REST]", "[es. HTTPS, JSON]"),),
            ),
        ),
    ),
    "04_solution_strategy": (
        Guidance(
            heading="Decisioni Tecnologiche",
            purpose="Riassumere le scelte tecnologiche fondamentali.",
            table=(
                ("Decisione", "Scelta", "Motivazione"),
                (
                    ("Linguaggio di programmazione", "[es. Python]", "[Perché questa scelta]"),
                    ("Framework", "[es. FastAPI]", "[Perché questa scelta]"),
                    ("Database", "[es. PostgreSQL]", "[Perché questa scelta]"),
                ),
            ),
        ),
        Guidance(
            heading="Decomposizione di Alto Livello",
            purpose="Descrivere la struttura generale del sistema.",
            prompts=("[es. Architettura a livelli]", "[es. Microservizi]"),
        ),
        Guidance(
            heading="Strategie per gli Obiettivi di Qualità",
            purpose="Spiegare come vengono raggiunti gli obiettivi di qualità della sezione 1.",
            table=(
                ("Obiettivo di qualità", "Approccio risolutivo"),
                (
                    ("[Prestazioni]", "[es. Caching, elaborazione asincrona]"),
                    ("[Sicurezza]", "[es. OAuth2, cifratura]"),
                ),
            ),
        ),
    ),
    "05_building_block_view": (
        Guidance(
            heading="Livello 1: Whitebox del Sistema Complessivo",
            purpose="La whitebox mostra la struttura interna del sistema complessivo.",
            prompts=("Aggiungere un diagramma dei componenti dei building block principali",),
            table=(
                ("Building block", "Descrizione"),
                (
                    ("[Componente A]", "[Responsabilità e scopo]"),
                    ("[Componente B]", "[Responsabilità e scopo]"),
                ),
            ),
        ),
        Guidance(
            heading="Livello 2",
            purpose="Scomporre i componenti principali in building block più piccoli.",
            table=(
                ("Building block", "Descrizione"),
                (("[Sottocomponente A.1]", "[Responsabilità]"),),
            ),
        ),
    ),
    "06_runtime_view": (
        Guidance(
            heading="Scenario 1: [es. Accesso Utente]",
            purpose="Descrivere il comportamento a runtime di uno scenario importante.",
            prompts=(
                "Aggiungere un diagramma di sequenza dei building block coinvolti",
                "Elencare i passi in ordine",
            ),
        ),
        Guidance(
            heading="Scenario 2: [es. Elaborazione Dati]",
            purpose="Documentare un altro scenario di runtime importante.",
            prompts=("[Descrivere passi e interazioni]",),
        ),
    ),
    "07_deployment_view": (
        Guidance(
            heading="Infrastruttura Livello 1",
            purpose="Panoramica dell'infrastruttura su cui gira il sistema.",
            prompts=(
                "Aggiungere un diagramma di deployment",
                "Motivazione: [Perché è stata scelta questa architettura di deployment]",
                "Mappatura dei building block sull'infrastruttura",
            ),
        ),
        Guidance(
            heading="Infrastruttura Livello 2",
            purpose="Vista dettagliata di singoli nodi dell'infrastruttura.",
            table=(
                ("Aspetto", "Descrizione"),
                (
                    ("Hardware", "[es. 4 vCPU, 16GB RAM]"),
                    ("Software", "[es. Ubuntu 22.04, Docker 24.x]"),
                ),
            ),
        ),
    ),
    "08_concepts": (
        Guidance(
            heading="Modello di Dominio",
            purpose="Mostrare i concetti di business centrali e le loro relazioni.",
            prompts=("Aggiungere un diagramma delle classi del modello di dominio",),
        ),
        Guidance(
            heading="Concetto di Sicurezza",
            purpose="Descrivere autenticazione e autorizzazione nel sistema.",
            prompts=("Autenticazione: [JWT, OAuth2, ...]", "Autorizzazione: [RBAC, ABAC, ...]"),
        ),
        Guidance(
            heading="Gestione degli Errori",
            purpose="Descrivere come vengono gestiti gli errori in tutto il sistema.",
            prompts=("[es. Gestore globale degli errori]", "[es. Risposte di errore strutturate]"),
        ),
        Guidance(
            heading="Logging e Monitoraggio",
            purpose="Registrare come il sistema viene osservato in produzione.",
            table=(
                ("Aspetto", "Approccio"),
                (
                    ("Logging", "[es. Log JSON strutturati]"),
                    ("Metriche", "[es. Prometheus, Grafana]"),
                ),
            ),
        ),
        Guidance(
            heading="Strategia di Test",
            purpose="Definire i livelli di test e i relativi obiettivi di copertura.",
            table=(
                ("Tipo", "Ambito", "Obiettivo di copertura"),
                (
                    ("Test unitari", "Singole funzioni/classi", "80%"),
                    ("Test di integrazione", "Interazione tra componenti", "Percorsi principali"),
                ),
            ),
        ),
    ),
    "09_architecture_decisions": (
        Guidance(
            heading="ADR-001: [Titolo della decisione]",
            purpose="Documentare una decisione importante, costosa, di ampia portata o rischiosa.",
            prompts=(
                "Stato: [Proposta | Accettata | Deprecata | Sostituita]",
                "Contesto: [Cosa motiva la decisione]",
                "Decisione: [Cosa è stato deciso]",
                "Conseguenze: [Effetti positivi e negativi]",
            ),
            table=(
                ("Alternativa", "Vantaggi", "Svantaggi"),
                (("[Opzione A]", "[Vantaggi]", "[Svantaggi]"),),
            ),
        ),
        Guidance(
            heading="ADR-002: [Titolo della decisione]",
            purpose="Registrare le decisioni successive con lo stesso schema.",
        ),
    ),
    "10_quality_requirements": (
        Guidance(
            heading="Albero della Qualità",
            purpose="Raffinare gli obiettivi di qualità in attributi di qualità misurabili.",
            prompts=(
                "Prestazioni: tempo di risposta, throughput",
                "Sicurezza: autenticazione, autorizzazione",
                "Manutenibilità: modularità, testabilità",
            ),
        ),
        Guidance(
            heading="Scenari di Qualità",
            purpose="Rendere i requisiti di qualità concreti e verificabili.",
            table=(
                ("ID", "Scenario", "Risposta attesa", "Priorità"),
                (
                    ("PERF-1", "Caricamento della dashboard con carico normale", "< 200ms", "Alta"),
                    ("SEC-1", "Tentativo di accesso non valido", "Blocco dopo 5 tentativi", "Alta"),
                ),
            ),
        ),
    ),
    "11_technical_risks": (
        Guidance(
            heading="Rischi Tecnici",
            purpose="Identificare i rischi tecnici noti e le relative contromisure.",
            table=(
                ("Rischio", "Descrizione", "Probabilità", "Mitigazione"),
                (
                    (
                        "[es. Indisponibilità di un'API esterna]",
                        "[Servizio esterno]",
                        "Media",
                        "[Circuit breaker, fallback]",
                    ),
                ),
            ),
        ),
        Guidance(
            heading="Debito Tecnico",
            purpose="Tenere traccia del debito tecnico accumulato.",
            table=(
                ("Elemento", "Descrizione", "Impatto", "Priorità"),
                (("[es. Test mancanti]", "[Copertura bassa nel modulo X]", "Medio", "Bassa"),),
            ),
        ),
        Guidance(
            heading="Monitoraggio dei Rischi",
            purpose="Descrivere come i rischi vengono monitorati e rivalutati.",
            prompts=("[es. Revisione settimanale dei rischi]",),
        ),
    ),
    "12_glossary": (
        Guidance(
            heading="Termini di Dominio",
            purpose="Definire i termini di business usati dagli stakeholder.",
            table=(
                ("Termine", "Definizione"),
                (("[Termine di dominio 1]", "[Definizione chiara e concisa]"),),
            ),
        ),
        Guidance(
            heading="Termini Tecnici",
            purpose="Definire i termini tecnici usati in questa documentazione.",
            table=(
                ("Termine", "Definizione"),
                (("[Termine tecnico 1]", "[Definizione chiara e concisa]"),),
            ),
        ),
        Guidance(
            heading="Abbreviazioni",
            purpose="Sciogliere le abbreviazioni utilizzate.",
            table=(
                ("Abbreviazione", "Significato"),
                (("API", "Application Programming Interface"),),
            ),
        ),
    ),
}

PHRASES = {
    "purpose": "Scopo",
    "file": "File",
    "further_information": "Ulteriori informazioni",
    "resources": "Risorse",
    "template_reference": "Riferimento al template",
    "source": "Fonte",
    "readme_title": "{project} - Documentazione dell'Architettura",
    "readme_intro": "Questa directory contiene la documentazione dell'architettura di "
    "{project}, secondo il template arc42.",
    "readme_title_generic": "Documentazione dell'Architettura",
    "readme_intro_generic": "Questa directory contiene la documentazione dell'architettura, "
    "secondo il template arc42.",
    "readme_structure": "Struttura",
    "readme_sections": "Le 12 sezioni di arc42",
    "readme_getting_started": "Per iniziare",
    "readme_steps": [
        "Iniziare dalla sezione 1: Introduzione e Obiettivi",
        "Completare le sezioni in modo iterativo",
        "Illustrare i concetti con diagrammi",
        "Concentrarsi sulle decisioni, non sui dettagli implementativi",
    ],
    "structure_sections": "File delle singole sezioni (12 sezioni)",
    "structure_images": "Diagrammi e immagini",
    "structure_document": "Documentazione principale combinata",
    "structure_config": "Configurazione",
    "document_intro": "Questo documento descrive l'architettura di {project} secondo il "
    "template arc42.",
    "version": "Versione",
    "date": "Data",
    "status": "Stato",
    "status_draft": "Bozza",
    "language": "Lingua",
    "table_of_contents": "Indice",
    "about_arc42": "Informazioni su arc42",
    "about_arc42_text": "arc42, il template per la documentazione di architetture software e "
    "di sistema, è stato creato dal Dr. Gernot Starke e dal Dr. Peter Hruschka.",
    "guide_title": "Guida al flusso di lavoro della documentazione arc42",
    "guide_overview": "Panoramica",
    "guide_intro": "Questa guida aiuta a documentare l'architettura software con il template "
    "arc42, un modello collaudato per architetture software e di sistema.",
    "guide_languages": "Lingue disponibili",
    "guide_language_headers": ["Codice", "Lingua", "Nome nativo"],
    "guide_getting_started": "Per iniziare",
    "guide_steps": [
        {
            "title": "Passo 1: Inizializzare il workspace",
            "text": "Creare il workspace della documentazione:",
            "example": 'arc42docs init "Il Mio Progetto" --language IT',
        },
        {
            "title": "Passo 2: Verificare lo stato",
            "text": "Visualizzare lo stato attuale della documentazione:",
            "example": "arc42docs status",
        },
        {
            "title": "Passo 3: Generare i template delle sezioni",
            "text": "Ottenere un template dettagliato per ogni sezione:",
            "example": "arc42docs template 01_introduction_and_goals --language IT",
        },
    ],
    "guide_sections": "Le 12 sezioni di arc42",
    "guide_best_practices": "Buone pratiche",
    "guide_practices": [
        "Iniziare dalla sezione 1 - comprendere gli obiettivi è fondamentale",
        "Essere concisi - arc42 è pragmatico, non burocratico",
        "Usare diagrammi - un'immagine vale più di mille parole",
        "Documentare le decisioni - il team futuro ringrazierà",
        "Iterare - la documentazione dell'architettura non è mai finita",
    ],
    "guide_tools": "Comandi disponibili",
    "guide_tool_descriptions": {
        "init": "Inizializzare il workspace della documentazione",
        "status": "Verificare lo stato della documentazione",
        "template": "Generare il template di una sezione",
        "update": "Aggiornare il contenuto di una sezione",
        "get": "Leggere il contenuto di una sezione",
        "guide": "Mostrare questa guida",
    },
    "guide_structure": "Struttura dei file",
}

CATALOG = LanguageCatalog(
    code="IT",
    name="Italian",
    native_name="Italiano",
    titles=TITLES,
    descriptions=DESCRIPTIONS,
    guidance=GUIDANCE,
    phrases=PHRASES,
)
