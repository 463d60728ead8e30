"""English catalog; also the fallback for entries other languages leave out."""

from __future__ import annotations

from ..base import Guidance, LanguageCatalog

TITLES = {
    "01_introduction_and_goals": "Introduction and Goals",
    "02_architecture_constraints": "Architecture Constraints",
    "03_context_and_scope": "Context and Scope",
    "04_solution_strategy": "Solution Strategy",
    "05_building_block_view": "Building Block View",
    "06_runtime_view": "Runtime View",
    "07_deployment_view": "Deployment View",
    "08_concepts": "Cross-cutting Concepts",
    "09_architecture_decisions": "Architecture Decisions",
    "10_quality_requirements": "Quality Requirements",
    "11_technical_risks": "Risks and Technical Debt",
    "12_glossary": "Glossary",
}

DESCRIPTIONS = {
    "01_introduction_and_goals": "Requirements overview, quality goals, and stakeholders",
    "02_architecture_constraints": "Technical and organizational constraints",
    "03_context_and_scope": "Business and technical context, external interfaces",
    "04_solution_strategy": "Fundamental solution decisions and strategies",
    "05_building_block_view": "Static decomposition of the system",
    "06_runtime_view": "Dynamic behavior and key scenarios",
    "07_deployment_view": "Infrastructure and deployment",
    "08_concepts": "Overall, principal regulations and solution approaches",
    "09_architecture_decisions": "Important, expensive, critical, or risky decisions",
    "10_quality_requirements": "Quality tree and quality scenarios",
    "11_technical_risks": "Known problems, risks, and technical debt",
    "12_glossary": "Important domain and technical terms",
}

GUIDANCE = {
    "01_introduction_and_goals": (
        Guidance(
            heading="Requirements Overview",
            purpose="Describe the relevant requirements and driving forces that architects "
            "and development teams must consider.",
            prompts=(
                "List the top 3-5 functional requirements",
                "Name the essential features of the system",
            ),
            table=(
                ("ID", "Requirement", "Priority"),
                (
                    ("REQ-1", "[Brief description]", "High"),
                    ("REQ-2", "[Brief description]", "Medium"),
                ),
            ),
        ),
        Guidance(
            heading="Quality Goals",
            purpose="Define the top 3-5 quality goals that are most important for stakeholders.",
            prompts=(
                "Prioritize qualities based on ISO 25010: performance, security, reliability, "
                "maintainability, usability",
            ),
            table=(
                ("Priority", "Quality Goal", "Motivation"),
                (
                    ("1", "[e.g., Performance]", "[Why this is critical]"),
                    ("2", "[e.g., Security]", "[Why this is critical]"),
                    ("3", "[e.g., Maintainability]", "[Why this is critical]"),
                ),
            ),
        ),
        Guidance(
            heading="Stakeholders",
            purpose="Identify everyone who should know about the architecture.",
            table=(
                ("Role/Name", "Contact", "Expectations"),
                (
                    ("Product Owner", "[Name/Email]", "[What they expect from the architecture]"),
                    ("Development Team", "[Team name]", "[What they need to know]"),
                    ("Operations", "[Team/Person]", "[Deployment and operations concerns]"),
                    ("End Users", "[Type]", "[User experience expectations]"),
                ),
            ),
        ),
    ),
    "02_architecture_constraints": (
        Guidance(
            heading="Technical Constraints",
            purpose="Document technical requirements that constrain design and implementation "
            "decisions.",
            table=(
                ("Constraint", "Explanation"),
                (
                    ("[e.g., Must run on Linux]", "[Why this constraint exists]"),
                    ("[e.g., Python 3.10 minimum]", "[Organizational requirement]"),
                ),
            ),
        ),
        Guidance(
            heading="Organizational Constraints",
            purpose="Record constraints that come from the team, schedule, budget, or legal "
            "environment.",
            table=(
                ("Constraint", "Explanation"),
                (
                    ("[e.g., Team size: 5 developers]", "[Impact on architecture]"),
                    ("[e.g., Timeline: 6 months]", "[Delivery constraints]"),
                ),
            ),
        ),
        Guidance(
            heading="Conventions",
            purpose="List the programming, documentation, and naming conventions in force.",
            table=(
                ("Convention", "Explanation"),
                (
                    ("[e.g., Code style: PEP 8]", "[Link to style guide]"),
                    ("[e.g., Documentation: arc42]", "[Documentation requirements]"),
                ),
            ),
        ),
    ),
    "03_context_and_scope": (
        Guidance(
            heading="Business Context",
            purpose="Specify all communication partners (users, IT systems, ...) with "
            "explanations of domain specific inputs and outputs.",
            prompts=("Add a context diagram (PlantUML, Mermaid, or an image in images/)",),
            table=(
                ("Partner", "Input", "Output"),
                (("[User/System name]", "[What they send]", "[What they receive]"),),
            ),
        ),
        Guidance(
            heading="Technical Context",
            purpose="Specify the technical channels and protocols between the system and its "
            "context.",
            table=(
                ("Partner", "Channel", "Protocol"),
                (
                    ("[System name]", "[e.g., REST API]", "[e.g., HTTPS, JSON]"),
                    ("[System name]", "[e.g., Message Queue]", "[e.g., AMQP]"),
                ),
            ),
        ),
    ),
    "04_solution_strategy": (
        Guidance(
            heading="Technology Decisions",
            purpose="Summarize the fundamental technology choices that shape the architecture.",
            table=(
                ("Decision", "Choice", "Rationale"),
                (
                    ("Programming Language", "[e.g., Python]", "[Why this choice]"),
                    ("Framework", "[e.g., FastAPI]", "[Why this choice]"),
                    ("Database", "[e.g., PostgreSQL]", "[Why this choice]"),
                ),
            ),
        ),
        Guidance(
            heading="Top-level Decomposition",
            purpose="Describe the high-level structure of the system.",
            prompts=(
                "[e.g., Layered architecture]",
                "[e.g., Microservices]",
                "[e.g., Event-driven]",
            ),
        ),
        Guidance(
            heading="Quality Achievement Strategies",
            purpose="Explain how the quality goals from section 1 are reached.",
            table=(
                ("Quality Goal", "Achievement Strategy"),
                (
                    ("[Performance]", "[e.g., Caching, async processing]"),
                    ("[Security]", "[e.g., OAuth2, encryption at rest]"),
                    ("[Maintainability]", "[e.g., Clean architecture, comprehensive tests]"),
                ),
            ),
        ),
    ),
    "05_building_block_view": (
        Guidance(
            heading="Level 1: Overall System",
            purpose="The white-box description shows the internal structure of the overall "
            "system.",
            prompts=("Add a component diagram of the top-level building blocks",),
            table=(
                ("Building Block", "Description"),
                (
                    ("[Component A]", "[Responsibility and purpose]"),
                    ("[Component B]", "[Responsibility and purpose]"),
                ),
            ),
        ),
        Guidance(
            heading="Level 2: [Subsystem Name]",
            purpose="Decompose the main components into smaller building blocks.",
            table=(
                ("Building Block", "Description"),
                (
                    ("[Sub-component A.1]", "[Responsibility]"),
                    ("[Sub-component A.2]", "[Responsibility]"),
                ),
            ),
        ),
    ),
    "06_runtime_view": (
        Guidance(
            heading="Scenario 1: [e.g., User Login]",
            purpose="Describe the runtime behavior for a key scenario.",
            prompts=(
                "Add a sequence diagram of the participating building blocks",
                "List the steps in the order they happen",
            ),
        ),
        Guidance(
            heading="Scenario 2: [e.g., Data Processing]",
            purpose="Document another important runtime scenario.",
            prompts=("[Describe the steps and interactions]",),
        ),
    ),
    "07_deployment_view": (
        Guidance(
            heading="Infrastructure Level 1",
            purpose="Overview of the deployment infrastructure.",
            prompts=(
                "Add a deployment diagram",
                "Motivation: [Why this deployment architecture was chosen]",
                "Quality and performance features: [How this deployment supports quality goals]",
            ),
        ),
        Guidance(
            heading="Infrastructure Level 2",
            purpose="Detailed view of specific deployment nodes.",
            table=(
                ("Aspect", "Description"),
                (
                    ("Hardware", "[e.g., 4 vCPU, 16GB RAM]"),
                    ("Software", "[e.g., Ubuntu 22.04, Docker 24.x]"),
                    ("Network", "[e.g., VPC, security groups]"),
                ),
            ),
        ),
    ),
    "08_concepts": (
        Guidance(
            heading="Domain Model",
            purpose="Show the core domain concepts and their relationships.",
            prompts=("Add a class diagram of the domain model",),
        ),
        Guidance(
            heading="Security Concept",
            purpose="Describe authentication and authorization across the system.",
            prompts=(
                "Authentication: [JWT, OAuth2, ...]",
                "Authorization: [RBAC, ABAC, ...]",
            ),
        ),
        Guidance(
            heading="Error Handling",
            purpose="Describe how errors are handled across the system.",
            prompts=(
                "[e.g., Global error handler]",
                "[e.g., Structured error responses]",
                "[e.g., Error logging strategy]",
            ),
        ),
        Guidance(
            heading="Logging and Monitoring",
            purpose="Record how the system is observed in operation.",
            table=(
                ("Aspect", "Approach"),
                (
                    ("Logging", "[e.g., Structured JSON logs, ELK stack]"),
                    ("Metrics", "[e.g., Prometheus, Grafana]"),
                    ("Tracing", "[e.g., OpenTelemetry, Jaeger]"),
                ),
            ),
        ),
        Guidance(
            heading="Testing Strategy",
            purpose="Define the test levels and their coverage targets.",
            table=(
                ("Type", "Scope", "Coverage Target"),
                (
                    ("Unit Tests", "Individual functions/classes", "80%"),
                    ("Integration Tests", "Component interactions", "Key paths"),
                    ("E2E Tests", "Full user journeys", "Critical flows"),
                ),
            ),
        ),
    ),
    "09_architecture_decisions": (
        Guidance(
            heading="ADR-001: [Decision Title]",
            purpose="Document an important, expensive, large-scale, or risky decision.",
            prompts=(
                "Status: [Proposed | Accepted | Deprecated | Superseded]",
                "Context: [Describe the issue motivating this decision]",
                "Decision: [Describe the decision that was made]",
                "Consequences: [Positive and negative effects]",
            ),
            table=(
                ("Alternative", "Pros", "Cons"),
                (
                    ("[Option A]", "[Benefits]", "[Drawbacks]"),
                    ("[Option B]", "[Benefits]", "[Drawbacks]"),
                ),
            ),
        ),
        Guidance(
            heading="ADR-002: [Decision Title]",
            purpose="Use the same structure for additional decisions.",
        ),
    ),
    "10_quality_requirements": (
        Guidance(
            heading="Quality Tree",
            purpose="Refine the quality goals into measurable quality attributes.",
            prompts=(
                "Performance: response time, throughput",
                "Security: authentication, authorization",
                "Maintainability: modularity, testability",
            ),
        ),
        Guidance(
            heading="Quality Scenarios",
            purpose="Make quality requirements concrete and testable.",
            table=(
                ("ID", "Scenario", "Expected Response", "Priority"),
                (
                    ("PERF-1", "User requests dashboard under normal load", "< 200ms", "High"),
                    ("SEC-1", "Invalid login attempt", "Account lockout after 5 attempts", "High"),
                    ("MAINT-1", "Add new entity type", "< 2 days development", "Medium"),
                ),
            ),
        ),
    ),
    "11_technical_risks": (
        Guidance(
            heading="Technical Risks",
            purpose="Identify known technical risks and how they are mitigated.",
            table=(
                ("Risk", "Description", "Probability", "Mitigation"),
                (
                    (
                        "[e.g., Third-party API failure]",
                        "[External service we depend on]",
                        "Medium",
                        "[Circuit breaker, fallback]",
                    ),
                    ("[e.g., Data loss]", "[Database corruption]", "Low", "[Backups, replication]"),
                ),
            ),
        ),
        Guidance(
            heading="Technical Debt",
            purpose="Track accumulated technical debt.",
            table=(
                ("Item", "Description", "Impact", "Priority"),
                (
                    (
                        "[e.g., Legacy authentication]",
                        "[Old auth system needs replacement]",
                        "High",
                        "Medium",
                    ),
                    ("[e.g., Missing tests]", "[Coverage below target in module X]", "Medium", "Low"),
                ),
            ),
        ),
        Guidance(
            heading="Risk Monitoring",
            purpose="Describe how risks are monitored and reviewed.",
            prompts=("[e.g., Weekly risk review meetings]", "[e.g., Automated monitoring alerts]"),
        ),
    ),
    "12_glossary": (
        Guidance(
            heading="Domain Terms",
            purpose="Define the domain terms stakeholders use when talking about the system.",
            table=(
                ("Term", "Definition"),
                (
                    ("[Domain Term 1]", "[Clear, concise definition]"),
                    ("[Domain Term 2]", "[Clear, concise definition]"),
                ),
            ),
        ),
        Guidance(
            heading="Technical Terms",
            purpose="Define the technical terms used in this documentation.",
            table=(
                ("Term", "Definition"),
                (("[Technical Term 1]", "[Clear, concise definition]"),),
            ),
        ),
        Guidance(
            heading="Abbreviations",
            purpose="Expand the abbreviations used in this documentation.",
            table=(
                ("Abbreviation", "Meaning"),
                (
                    ("API", "Application Programming Interface"),
                    ("REST", "Representational State Transfer"),
                ),
            ),
        ),
    ),
}

PHRASES = {
    "purpose": "Purpose",
    "file": "File",
    "further_information": "Further information",
    "resources": "Resources",
    "template_reference": "Template Reference",
    "source": "Source",
    "readme_title": "{project} - Architecture Documentation",
    "readme_intro": "This directory contains the architecture documentation for {project}, "
    "following the arc42 template.",
    "readme_title_generic": "Architecture Documentation",
    "readme_intro_generic": "This directory contains the architecture documentation, "
    "following the arc42 template.",
    "readme_structure": "Structure",
    "readme_sections": "The 12 arc42 Sections",
    "readme_getting_started": "Getting Started",
    "readme_steps": [
        "Start with Section 1: Introduction and Goals",
        "Work through sections iteratively",
        "Use diagrams to illustrate concepts",
        "Keep it focused on decisions, not implementation details",
    ],
    "structure_sections": "Individual section files (12 sections)",
    "structure_images": "Diagrams and images",
    "structure_document": "Main combined documentation",
    "structure_config": "Configuration",
    "document_intro": "This document describes the architecture of {project} following the "
    "arc42 template.",
    "version": "Version",
    "date": "Date",
    "status": "Status",
    "status_draft": "Draft",
    "language": "Language",
    "table_of_contents": "Table of Contents",
    "about_arc42": "About arc42",
    "about_arc42_text": "arc42, the template for documentation of software and system "
    "architectures, was created by Dr. Gernot Starke and Dr. Peter Hruschka.",
    "guide_title": "arc42 Architecture Documentation Workflow Guide",
    "guide_overview": "Overview",
    "guide_intro": "This guide helps you document your software architecture using the arc42 "
    "template, a practical, proven template for documentation of software and system "
    "architectures.",
    "guide_languages": "Available Languages",
    "guide_language_headers": ["Code", "Language", "Native Name"],
    "guide_getting_started": "Getting Started",
    "guide_steps": [
        {
            "title": "Step 1: Initialize Your Workspace",
            "text": "Create the documentation workspace, optionally in another language:",
            "example": 'arc42docs init "My Project" --language EN',
        },
        {
            "title": "Step 2: Check Status",
            "text": "See the current state of your documentation:",
            "example": "arc42docs status",
        },
        {
            "title": "Step 3: Generate Section Templates",
            "text": "Get a detailed template for each section:",
            "example": "arc42docs template 01_introduction_and_goals --language EN",
        },
    ],
    "guide_sections": "The 12 arc42 Sections",
    "guide_best_practices": "Best Practices",
    "guide_practices": [
        "Start with Section 1 - understanding goals is fundamental",
        "Keep it concise - arc42 is pragmatic, not bureaucratic",
        "Use diagrams - a picture is worth a thousand words",
        "Document decisions - future you will thank present you",
        "Iterate - architecture documentation is never done",
    ],
    "guide_tools": "Available Commands",
    "guide_tool_descriptions": {
        "init": "Initialize the documentation workspace",
        "status": "Check documentation status",
        "template": "Generate a section template",
        "update": "Update section content",
        "get": "Read section content",
        "guide": "Show this guide",
    },
    "guide_structure": "File Structure",
}

CATALOG = LanguageCatalog(
    code="EN",
    name="English",
    native_name="English",
    titles=TITLES,
    descriptions=DESCRIPTIONS,
    guidance=GUIDANCE,
    phrases=PHRASES,
)
