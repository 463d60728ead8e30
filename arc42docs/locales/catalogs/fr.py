"""French catalog."""

from __future__ import annotations

from ..base import Guidance, LanguageCatalog

TITLES = {
    "01_introduction_and_goals": "Introduction et Objectifs",
    "02_architecture_constraints": "Contraintes Architecturales",
    "03_context_and_scope": "Portée et Contexte",
    "04_solution_strategy": "Stratégie de Solution",
    "05_building_block_view": "Vue des Blocs de Construction",
    "06_runtime_view": "Vue d'Exécution",
    "07_deployment_view": "Vue de Déploiement",
    "08_concepts": "Concepts Transversaux",
    "09_architecture_decisions": "Décisions d'Architecture",
    "10_quality_requirements": "Exigences de Qualité",
    "11_technical_risks": "Risques et Dette Technique",
    "12_glossary": "Glossaire",
}

DESCRIPTIONS = {
    "01_introduction_and_goals": "Aperçu des spécifications, objectifs de qualité et parties prenantes",
    "02_architecture_constraints": "Contraintes techniques et organisationnelles",
    "03_context_and_scope": "Contexte métier et technique, interfaces externes",
    "04_solution_strategy": "Décisions et stratégies de solution fondamentales",
    "05_building_block_view": "Décomposition statique du système",
    "06_runtime_view": "Comportement dynamique et scénarios importants",
    "07_deployment_view": "Infrastructure et déploiement",
    "08_concepts": "Règles et approches transversales",
    "09_architecture_decisions": "Décisions importantes, coûteuses, critiques ou risquées",
    "10_quality_requirements": "Arbre de qualité et scénarios de qualité",
    "11_technical_risks": "Problèmes connus, risques et dette technique",
    "12_glossary": "Termes métier et techniques importants",
}

GUIDANCE = {
    "01_introduction_and_goals": (
        Guidance(
            heading="Aperçu des spécifications",
            purpose="Décrit les exigences essentielles et les forces motrices que l'architecture "
            "et le développement doivent prendre en compte.",
            prompts=(
                "Lister les 3 à 5 exigences fonctionnelles les plus importantes",
                "Citer les fonctionnalités essentielles du système",
            ),
            table=(
                ("ID", "Exigence", "Priorité"),
                (
                    ("REQ-1", "[Description courte]", "Haute"),
                    ("REQ-2", "[Description courte]", "Moyenne"),
                ),
            ),
        ),
        Guidance(
            heading="Objectifs de Qualité",
            purpose="Définir les 3 à 5 objectifs de qualité principaux des parties prenantes clés.",
            prompts=(
                "Prioriser les qualités selon ISO 25010 : performance, sécurité, fiabilité, "
                "maintenabilité, utilisabilité",
            ),
            table=(
                ("Priorité", "Objectif de qualité", "Motivation"),
                (
                    ("1", "[ex. Performance]", "[Pourquoi c'est critique]"),
                    ("2", "[ex. Sécurité]", "[Pourquoi c'est critique]"),
                    ("3", "[ex. Maintenabilité]", "[Pourquoi c'est critique]"),
                ),
            ),
        ),
        Guidance(
            heading="Parties prenantes",
            purpose="Identifier toutes les personnes et tous les rôles qui doivent connaître "
            "l'architecture.",
            table=(
                ("Rôle/Nom", "Contact", "Attentes"),
                (
                    ("Product Owner", "[Nom/E-mail]", "[Attentes envers l'architecture]"),
                    ("Équipe de développement", "[Nom de l'équipe]", "[Ce que l'équipe doit savoir]"),
                    ("Exploitation", "[Équipe/Personne]", "[Enjeux de déploiement et d'exploitation]"),
                ),
            ),
        ),
    ),
    "02_architecture_constraints": (
        Guidance(
            heading="Contraintes Techniques",
            purpose="Consigner les contraintes techniques qui limitent la conception et la "
            "réalisation.",
            table=(
                ("Contrainte", "Explication"),
                (
                    ("[ex. Exécution sous Linux]", "[Pourquoi cette contrainte existe]"),
                    ("[ex. Python 3.10 minimum]", "[Exigence organisationnelle]"),
                ),
            ),
        ),
        Guidance(
            heading="Contraintes Organisationnelles",
            purpose="Consigner les contraintes liées à l'équipe, au planning, au budget ou au "
            "cadre juridique.",
            table=(
                ("Contrainte", "Explication"),
                (
                    ("[ex. Taille de l'équipe : 5 développeurs]", "[Impact sur l'architecture]"),
                    ("[ex. Délai : 6 mois]", "[Contraintes de livraison]"),
                ),
            ),
        ),
        Guidance(
            heading="Conventions",
            purpose="Lister les conventions de programmation, de documentation et de nommage "
            "en vigueur.",
            table=(
                ("Convention", "Explication"),
                (("[ex. Style de code : PEP 8]", "[Lien vers le guide de style]"),),
            ),
        ),
    ),
    "03_context_and_scope": (
        Guidance(
            heading="Contexte Métier",
            purpose="Identifier tous les partenaires de communication (utilisateurs, systèmes "
            "informatiques, ...) avec les entrées et sorties métier.",
            prompts=("Ajouter un diagramme de contexte (PlantUML, Mermaid ou image dans images/)",),
            table=(
                ("Partenaire", "Entrée", "Sortie"),
                (("[Utilisateur/Système]", "[Ce qui est envoyé]", "[Ce qui est reçu]"),),
            ),
        ),
        Guidance(
            heading="Contexte Technique",
            purpose="Identifier les canaux techniques et les protocoles entre le système et "
            "son environnement.",
            table=(
                ("Partenaire", "Canal", "Protocole"),
                (("[Nom du système]", "[ex. API REST]", "[ex. HTTPS, JSON]"),),
            ),
        ),
    ),
    "04_solution_strategy": (
        Guidance(
            heading="Décisions Technologiques",
            purpose="Résumer les choix technologiques fondamentaux.",
            table=(
                ("Décision", "Choix", "Justification"),
                (
                    ("Langage de programmation", "[ex. Python]", "[Pourquoi ce choix]"),
                    ("Framework", "[ex. FastAPI]", "[Pourquoi ce choix]"),
                    ("Base de données", "[ex. PostgreSQL]", "[Pourquoi ce choix]"),
                ),
            ),
        ),
        Guidance(
            heading="Décomposition de Haut Niveau",
            purpose="Décrire la structure générale du système.",
            prompts=("[ex. Architecture en couches]", "[ex. Microservices]"),
        ),
        Guidance(
            heading="Atteinte des Objectifs de Qualité",
            purpose="Expliquer comment les objectifs de qualité de la section 1 sont atteints.",
            table=(
                ("Objectif de qualité", "Approche de solution"),
                (
                    ("[Performance]", "[ex. Cache, traitement asynchrone]"),
                    ("[Sécurité]", "[ex. OAuth2, chiffrement]"),
                ),
            ),
        ),
    ),
    "05_building_block_view": (
        Guidance(
            heading="Niveau 1 : Boîte Blanche du Système Global",
            purpose="La boîte blanche montre la structure interne du système global.",
            prompts=("Ajouter un diagramme de composants des blocs de premier niveau",),
            table=(
                ("Bloc", "Description"),
                (
                    ("[Composant A]", "[Responsabilité et objectif]"),
                    ("[Composant B]", "[Responsabilité et objectif]"),
                ),
            ),
        ),
        Guidance(
            heading="Niveau 2",
            purpose="Décomposer les composants principaux en blocs plus petits.",
            table=(
                ("Bloc", "Description"),
                (("[Sous-composant A.1]", "[Responsabilité]"),),
            ),
        ),
    ),
    "06_runtime_view": (
        Guidance(
            heading="Scénario 1 : [ex. Connexion Utilisateur]",
            purpose="Décrire le comportement à l'exécution pour un scénario important.",
            prompts=(
                "Ajouter un diagramme de séquence des blocs impliqués",
                "Lister les étapes dans leur ordre",
            ),
        ),
        Guidance(
            heading="Scénario 2 : [ex. Traitement des Données]",
            purpose="Documenter un autre scénario d'exécution important.",
            prompts=("[Décrire les étapes et les interactions]",),
        ),
    ),
    "07_deployment_view": (
        Guidance(
            heading="Infrastructure Niveau 1",
            purpose="Vue d'ensemble de l'infrastructure sur laquelle le système s'exécute.",
            prompts=(
                "Ajouter un diagramme de déploiement",
                "Motivation : [Pourquoi cette architecture de déploiement a été choisie]",
                "Correspondance entre blocs et infrastructure",
            ),
        ),
        Guidance(
            heading="Infrastructure Niveau 2",
            purpose="Vue détaillée de nœuds d'infrastructure particuliers.",
            table=(
                ("Aspect", "Description"),
                (
                    ("Matériel", "[ex. 4 vCPU, 16 Go RAM]"),
                    ("Logiciel", "[ex. Ubuntu 22.04, Docker 24.x]"),
                ),
            ),
        ),
    ),
    "08_concepts": (
        Guidance(
            heading="Modèle de Domaine",
            purpose="Montrer les concepts métier centraux et leurs relations.",
            prompts=("Ajouter un diagramme de classes du modèle de domaine",),
        ),
        Guidance(
            heading="Concept de Sécurité",
            purpose="Décrire l'authentification et l'autorisation dans le système.",
            prompts=("Authentification : [JWT, OAuth2, ...]", "Autorisation : [RBAC, ABAC, ...]"),
        ),
        Guidance(
            heading="Gestion des Erreurs",
            purpose="Décrire comment les erreurs sont traitées dans l'ensemble du système.",
            prompts=("[ex. Gestionnaire d'erreurs global]", "[ex. Réponses d'erreur structurées]"),
        ),
        Guidance(
            heading="Logging et Monitoring",
            purpose="Consigner comment le système est observé en production.",
            table=(
                ("Aspect", "Approche"),
                (
                    ("Logging", "[ex. Logs JSON structurés]"),
                    ("Métriques", "[ex. Prometheus, Grafana]"),
                ),
            ),
        ),
        Guidance(
            heading="Stratégie de Test",
            purpose="Définir les niveaux de test et leurs objectifs de couverture.",
            table=(
                ("Type", "Portée", "Objectif de couverture"),
                (
                    ("Tests unitaires", "Fonctions/classes individuelles", "80%"),
                    ("Tests d'intégration", "Interaction entre composants", "Chemins principaux"),
                ),
            ),
        ),
    ),
    "09_architecture_decisions": (
        Guidance(
            heading="ADR-001 : [Titre de la décision]",
            purpose="Documenter une décision importante, coûteuse, d'envergure ou risquée.",
            prompts=(
                "Statut : [Proposée | Acceptée | Obsolète | Remplacée]",
                "Contexte : [Ce qui motive la décision]",
                "Décision : [Ce qui a été décidé]",
                "Conséquences : [Effets positifs et négatifs]",
            ),
            table=(
                ("Alternative", "Avantages", "Inconvénients"),
                (("[Option A]", "[Avantages]", "[Inconvénients]"),),
            ),
        ),
        Guidance(
            heading="ADR-002 : [Titre de la décision]",
            purpose="Consigner les décisions suivantes selon le même modèle.",
        ),
    ),
    "10_quality_requirements": (
        Guidance(
            heading="Arbre de Qualité",
            purpose="Affiner les objectifs de qualité en attributs de qualité mesurables.",
            prompts=(
                "Performance : temps de réponse, débit",
                "Sécurité : authentification, autorisation",
                "Maintenabilité : modularité, testabilité",
            ),
        ),
        Guidance(
            heading="Scénarios de Qualité",
            purpose="Rendre les exigences de qualité concrètes et vérifiables.",
            table=(
                ("ID", "Scénario", "Réponse attendue", "Priorité"),
                (
                    ("PERF-1", "Chargement du tableau de bord en charge normale", "< 200ms", "Haute"),
                    ("SEC-1", "Tentative de connexion invalide", "Blocage après 5 essais", "Haute"),
                ),
            ),
        ),
    ),
    "11_technical_risks": (
        Guidance(
            heading="Risques Techniques",
            purpose="Identifier les risques techniques connus et leurs mesures d'atténuation.",
            table=(
                ("Risque", "Description", "Probabilité", "Atténuation"),
                (
                    (
                        "[ex. Panne d'une API tierce]",
                        "[Service externe]",
                        "Moyenne",
                        "[Circuit breaker, solution de repli]",
                    ),
                ),
            ),
        ),
        Guidance(
            heading="Dette Technique",
            purpose="Suivre la dette technique accumulée.",
            table=(
                ("Élément", "Description", "Impact", "Priorité"),
                (("[ex. Tests manquants]", "[Couverture faible du module X]", "Moyen", "Basse"),),
            ),
        ),
        Guidance(
            heading="Suivi des Risques",
            purpose="Décrire comment les risques sont surveillés et réévalués.",
            prompts=("[ex. Revue hebdomadaire des risques]",),
        ),
    ),
    "12_glossary": (
        Guidance(
            heading="Termes Métier",
            purpose="Définir les termes métier utilisés par les parties prenantes.",
            table=(
                ("Terme", "Définition"),
                (("[Terme métier 1]", "[Définition claire et concise]"),),
            ),
        ),
        Guidance(
            heading="Termes Techniques",
            purpose="Définir les termes techniques employés dans cette documentation.",
            table=(
                ("Terme", "Définition"),
                (("[Terme technique 1]", "[Définition claire et concise]"),),
            ),
        ),
        Guidance(
            heading="Abréviations",
            purpose="Développer les abréviations utilisées.",
            table=(
                ("Abréviation", "Signification"),
                (("API", "Application Programming Interface"),),
            ),
        ),
    ),
}

PHRASES = {
    "purpose": "Objectif",
    "file": "Fichier",
    "further_information": "Informations complémentaires",
    "resources": "Ressources",
    "template_reference": "Référence du modèle",
    "source": "Source",
    "readme_title": "{project} - Documentation d'Architecture",
    "readme_intro": "Ce répertoire contient la documentation d'architecture de {project}, "
    "selon le modèle arc42.",
    "readme_title_generic": "Documentation d'Architecture",
    "readme_intro_generic": "Ce répertoire contient la documentation d'architecture, "
    "selon le modèle arc42.",
    "readme_structure": "Structure",
    "readme_sections": "Les 12 sections arc42",
    "readme_getting_started": "Pour commencer",
    "readme_steps": [
        "Commencer par la section 1 : Introduction et Objectifs",
        "Compléter les sections de manière itérative",
        "Illustrer les concepts avec des diagrammes",
        "Se concentrer sur les décisions, pas sur les détails d'implémentation",
    ],
    "structure_sections": "Fichiers de section individuels (12 sections)",
    "structure_images": "Diagrammes et images",
    "structure_document": "Documentation combinée principale",
    "structure_config": "Configuration",
    "document_intro": "Ce document décrit l'architecture de {project} selon le modèle arc42.",
    "version": "Version",
    "date": "Date",
    "status": "Statut",
    "status_draft": "Brouillon",
    "language": "Langue",
    "table_of_contents": "Table des matières",
    "about_arc42": "À propos d'arc42",
    "about_arc42_text": "arc42, le modèle de documentation des architectures logicielles et "
    "système, a été créé par Dr. Gernot Starke et Dr. Peter Hruschka.",
    "guide_title": "Guide du workflow de documentation arc42",
    "guide_overview": "Aperçu",
    "guide_intro": "Ce guide aide à documenter l'architecture logicielle avec le modèle arc42, "
    "un modèle éprouvé pour les architectures logicielles et système.",
    "guide_languages": "Langues disponibles",
    "guide_language_headers": ["Code", "Langue", "Nom natif"],
    "guide_getting_started": "Pour commencer",
    "guide_steps": [
        {
            "title": "Étape 1 : Initialiser l'espace de travail",
            "text": "Créer l'espace de travail de la documentation :",
            "example": 'arc42docs init "Mon Projet" --language FR',
        },
        {
            "title": "Étape 2 : Vérifier le statut",
            "text": "Afficher l'état actuel de la documentation :",
            "example": "arc42docs status",
        },
        {
            "title": "Étape 3 : Générer les modèles de section",
            "text": "Obtenir un modèle détaillé pour chaque section :",
            "example": "arc42docs template 01_introduction_and_goals --language FR",
        },
    ],
    "guide_sections": "Les 12 sections arc42",
    "guide_best_practices": "Bonnes pratiques",
    "guide_practices": [
        "Commencer par la section 1 - comprendre les objectifs est fondamental",
        "Rester concis - arc42 est pragmatique, pas bureaucratique",
        "Utiliser des diagrammes - une image vaut mille mots",
        "Documenter les décisions - la future équipe vous en remerciera",
        "Itérer - la documentation d'architecture n'est jamais terminée",
    ],
    "guide_tools": "Commandes disponibles",
    "guide_tool_descriptions": {
        "init": "Initialiser l'espace de travail de la documentation",
        "status": "Vérifier le statut de la documentation",
        "template": "Générer un modèle de section",
        "update": "Mettre à jour le contenu d'une section",
        "get": "Lire le contenu d'une section",
        "guide": "Afficher ce guide",
    },
    "guide_structure": "Structure des fichiers",
}

CATALOG = LanguageCatalog(
    code="FR",
    name="French",
    native_name="Français",
    titles=TITLES,
    descriptions=DESCRIPTIONS,
    guidance=GUIDANCE,
    phrases=PHRASES,
)
