"""Spanish catalog."""

from __future__ import annotations

from ..base import Guidance, LanguageCatalog

TITLES = {
    "01_introduction_and_goals": "Introducción y Metas",
    "02_architecture_constraints": "Restricciones de la Arquitectura",
    "03_context_and_scope": "Alcance y Contexto del Sistema",
    "04_solution_strategy": "Estrategia de solución",
    "05_building_block_view": "Vista de Bloques",
    "06_runtime_view": "Vista de Ejecución",
    "07_deployment_view": "Vista de Despliegue",
    "08_concepts": "Conceptos Transversales",
    "09_architecture_decisions": "Decisiones de Diseño",
    "10_quality_requirements": "Requerimientos de Calidad",
    "11_technical_risks": "Riesgos y Deuda Técnica",
    "12_glossary": "Glosario",
}

DESCRIPTIONS = {
    "01_introduction_and_goals": "Vista de requerimientos, metas de calidad y partes interesadas",
    "02_architecture_constraints": "Restricciones técnicas, organizacionales y convenciones",
    "03_context_and_scope": "Contexto de negocio y técnico, interfaces externas",
    "04_solution_strategy": "Decisiones y estrategias fundamentales de solución",
    "05_building_block_view": "Descomposición estática del sistema",
    "06_runtime_view": "Comportamiento dinámico y escenarios importantes",
    "07_deployment_view": "Infraestructura y distribución",
    "08_concepts": "Regulaciones y soluciones transversales",
    "09_architecture_decisions": "Decisiones importantes, costosas, críticas o riesgosas",
    "10_quality_requirements": "Árbol de calidad y escenarios de calidad",
    "11_technical_risks": "Problemas conocidos, riesgos y deuda técnica",
    "12_glossary": "Términos técnicos y de dominio importantes",
}

GUIDANCE = {
    "01_introduction_and_goals": (
        Guidance(
            heading="Vista de Requerimientos",
            purpose="Describe los requerimientos relevantes y las fuerzas que la arquitectura "
            "y el desarrollo deben considerar.",
            prompts=(
                "Listar los 3 a 5 requerimientos funcionales más importantes",
                "Nombrar las funcionalidades esenciales del sistema",
            ),
            table=(
                ("ID", "Requerimiento", "Prioridad"),
                (
                    ("REQ-1", "[Descripción breve]", "Alta"),
                    ("REQ-2", "[Descripción breve]", "Media"),
                ),
            ),
        ),
        Guidance(
            heading="Metas de Calidad",
            purpose="Definir las 3 a 5 metas de calidad principales de las partes interesadas "
            "más relevantes.",
            prompts=(
                "Priorizar las cualidades según ISO 25010: rendimiento, seguridad, "
                "fiabilidad, mantenibilidad, usabilidad",
            ),
            table=(
                ("Prioridad", "Meta de calidad", "Motivación"),
                (
                    ("1", "[p. ej. Rendimiento]", "[Por qué es crítico]"),
                    ("2", "[p. ej. Seguridad]", "[Por qué es crítico]"),
                    ("3", "[p. ej. Mantenibilidad]", "[Por qué es crítico]"),
                ),
            ),
        ),
        Guidance(
            heading="Partes Interesadas",
            purpose="Identificar a todas las personas y roles que deben conocer la arquitectura.",
            table=(
                ("Rol/Nombre", "Contacto", "Expectativas"),
                (
                    ("Product Owner", "[Nombre/Correo]", "[Expectativas sobre la arquitectura]"),
                    ("Equipo de desarrollo", "[Nombre del equipo]", "[Qué necesita saber el equipo]"),
                    ("Operaciones", "[Equipo/Persona]", "[Aspectos de despliegue y operación]"),
                ),
            ),
        ),
    ),
    "02_architecture_constraints": (
        Guidance(
            heading="Restricciones Técnicas",
            purpose="Registrar las restricciones técnicas que limitan el diseño y la "
            "implementación.",
            table=(
                ("Restricción", "Explicación"),
                (
                    ("[p. ej. Ejecución en Linux]", "[Por qué existe esta restricción]"),
                    ("[p. ej. Python 3.10 como mínimo]", "[Requisito organizacional]"),
                ),
            ),
        ),
        Guidance(
            heading="Restricciones Organizacionales",
            purpose="Registrar las restricciones de equipo, calendario, presupuesto o marco legal.",
            table=(
                ("Restricción", "Explicación"),
                (
                    ("[p. ej. Tamaño del equipo: 5 desarrolladores]", "[Impacto en la arquitectura]"),
                    ("[p. ej. Plazo: 6 meses]", "[Condiciones de entrega]"),
                ),
            ),
        ),
        Guidance(
            heading="Convenciones",
            purpose="Listar las convenciones de programación, documentación y nomenclatura "
            "vigentes.",
            table=(
                ("Convención", "Explicación"),
                (("[p. ej. Estilo de código: PEP 8]", "[Enlace a la guía de estilo]"),),
            ),
        ),
    ),
    "03_context_and_scope": (
        Guidance(
            heading="Contexto de Negocio",
            purpose="Identificar todos los socios de comunicación (usuarios, sistemas, ...) con "
            "las entradas y salidas de negocio.",
            prompts=("Añadir un diagrama de contexto (PlantUML, Mermaid o imagen en images/)",),
            table=(
                ("Socio", "Entrada", "Salida"),
                (("[Usuario/Sistema]", "[Qué se envía]", "[Qué se recibe]"),),
            ),
        ),
        Guidance(
            heading="Contexto Técnico",
            purpose="Identificar los canales técnicos y protocolos entre el sistema y su entorno.",
            table=(
                ("Socio", "Canal", "Protocolo"),
                (("[Nombre del sistema]", "[p. ej. API REST]", "[p. ej. HTTPS, JSON]"),),
            ),
        ),
    ),
    "04_solution_strategy": (
        Guidance(
            heading="Decisiones Tecnológicas",
            purpose="Resumir las decisiones tecnológicas fundamentales.",
            table=(
                ("Decisión", "Elección", "Justificación"),
                (
                    ("Lenguaje de programación", "[p. ej. Python]", "[Por qué esta elección]"),
                    ("Framework", "[p. ej. FastAPI]", "[Por qué esta elección]"),
                    ("Base de datos", "[p. ej. PostgreSQL]", "[Por qué esta elección]"),
                ),
            ),
        ),
        Guidance(
            heading="Descomposición de Alto Nivel",
            purpose="Describir la estructura general del sistema.",
            prompts=("[p. ej. Arquitectura en capas]", "[p. ej. Microservicios]"),
        ),
        Guidance(
            heading="Estrategias para Alcanzar las Metas de Calidad",
            purpose="Explicar cómo se alcanzan las metas de calidad de la sección 1.",
            table=(
                ("Meta de calidad", "Enfoque de solución"),
                (
                    ("[Rendimiento]", "[p. ej. Caché, procesamiento asíncrono]"),
                    ("[Seguridad]", "[p. ej. OAuth2, cifrado]"),
                ),
            ),
        ),
    ),
    "05_building_block_view": (
        Guidance(
            heading="Nivel 1: Caja Blanca del Sistema General",
            purpose="La caja blanca muestra la estructura interna del sistema general.",
            prompts=("Añadir un diagrama de componentes de los bloques de primer nivel",),
            table=(
                ("Bloque", "Descripción"),
                (
                    ("[Componente A]", "[Responsabilidad y propósito]"),
                    ("[Componente B]", "[Responsabilidad y propósito]"),
                ),
            ),
        ),
        Guidance(
            heading="Nivel 2",
            purpose="Descomponer los componentes principales en bloques más pequeños.",
            table=(
                ("Bloque", "Descripción"),
                (("[Subcomponente A.1]", "[Responsabilidad]"),),
            ),
        ),
    ),
    "06_runtime_view": (
        Guidance(
            heading="Escenario 1: [p. ej. Inicio de Sesión]",
            purpose="Describir el comportamiento en ejecución de un escenario importante.",
            prompts=(
                "Añadir un diagrama de secuencia de los bloques involucrados",
                "Listar los pasos en orden",
            ),
        ),
        Guidance(
            heading="Escenario 2: [p. ej. Procesamiento de Datos]",
            purpose="Documentar otro escenario de ejecución importante.",
            prompts=("[Describir pasos e interacciones]",),
        ),
    ),
    "07_deployment_view": (
        Guidance(
            heading="Infraestructura Nivel 1",
            purpose="Visión general de la infraestructura en la que se ejecuta el sistema.",
            prompts=(
                "Añadir un diagrama de despliegue",
                "Motivación: [Por qué se eligió esta arquitectura de despliegue]",
                "Asignación de bloques a la infraestructura",
            ),
        ),
        Guidance(
            heading="Infraestructura Nivel 2",
            purpose="Vista detallada de nodos de infraestructura concretos.",
            table=(
                ("Aspecto", "Descripción"),
                (
                    ("Hardware", "[p. ej. 4 vCPU, 16GB RAM]"),
                    ("Software", "[p. ej. Ubuntu 22.04, Docker 24.x]"),
                ),
            ),
        ),
    ),
    "08_concepts": (
        Guidance(
            heading="Modelo de Dominio",
            purpose="Mostrar los conceptos de negocio centrales y sus relaciones.",
            prompts=("Añadir un diagrama de clases del modelo de dominio",),
        ),
        Guidance(
            heading="Concepto de Seguridad",
            purpose="Describir la autenticación y la autorización en el sistema.",
            prompts=("Autenticación: [JWT, OAuth2, ...]", "Autorización: [RBAC, ABAC, ...]"),
        ),
        Guidance(
            heading="Manejo de Errores",
            purpose="Describir cómo se tratan los errores en todo el sistema.",
            prompts=("[p. ej. Manejador global de errores]", "[p. ej. Respuestas de error estructuradas]"),
        ),
        Guidance(
            heading="Logging y Monitoreo",
            purpose="Registrar cómo se observa el sistema en producción.",
            table=(
                ("Aspecto", "Enfoque"),
                (
                    ("Logging", "[p. ej. Logs JSON estructurados]"),
                    ("Métricas", "[p. ej. Prometheus, Grafana]"),
                ),
            ),
        ),
        Guidance(
            heading="Estrategia de Pruebas",
            purpose="Definir los niveles de prueba y sus objetivos de cobertura.",
            table=(
                ("Tipo", "Alcance", "Objetivo de cobertura"),
                (
                    ("Pruebas unitarias", "Funciones/clases individuales", "80%"),
                    ("Pruebas de integración", "Interacción entre componentes", "Rutas principales"),
                ),
            ),
        ),
    ),
    "09_architecture_decisions": (
        Guidance(
            heading="ADR-001: [Título de la decisión]",
            purpose="Documentar una decisión importante, costosa, de gran escala o riesgosa.",
            prompts=(
                "Estado: [Propuesta | Aceptada | Obsoleta | Reemplazada]",
                "Contexto: [Qué motiva la decisión]",
                "Decisión: [Qué se decidió]",
                "Consecuencias: [Efectos positivos y negativos]",
            ),
            table=(
                ("Alternativa", "Ventajas", "Desventajas"),
                (("[Opción A]", "[Ventajas]", "[Desventajas]"),),
            ),
        ),
        Guidance(
            heading="ADR-002: [Título de la decisión]",
            purpose="Registrar las decisiones siguientes con el mismo esquema.",
        ),
    ),
    "10_quality_requirements": (
        Guidance(
            heading="Árbol de Calidad",
            purpose="Refinar las metas de calidad en atributos de calidad medibles.",
            prompts=(
                "Rendimiento: tiempo de respuesta, rendimiento de procesamiento",
                "Seguridad: autenticación, autorización",
                "Mantenibilidad: modularidad, facilidad de prueba",
            ),
        ),
        Guidance(
            heading="Escenarios de Calidad",
            purpose="Hacer concretos y verificables los requerimientos de calidad.",
            table=(
                ("ID", "Escenario", "Respuesta esperada", "Prioridad"),
                (
                    ("PERF-1", "Carga del panel con carga normal", "< 200ms", "Alta"),
                    ("SEC-1", "Intento de inicio de sesión inválido", "Bloqueo tras 5 intentos", "Alta"),
                ),
            ),
        ),
    ),
    "11_technical_risks": (
        Guidance(
            heading="Riesgos Técnicos",
            purpose="Identificar los riesgos técnicos conocidos y sus medidas de mitigación.",
            table=(
                ("Riesgo", "Descripción", "Probabilidad", "Mitigación"),
                (
                    (
                        "[p. ej. Caída de una API externa]",
                        "[Servicio externo]",
                        "Media",
                        "[Circuit breaker, alternativa]",
                    ),
                ),
            ),
        ),
        Guidance(
            heading="Deuda Técnica",
            purpose="Hacer seguimiento de la deuda técnica acumulada.",
            table=(
                ("Elemento", "Descripción", "Impacto", "Prioridad"),
                (("[p. ej. Pruebas faltantes]", "[Baja cobertura en el módulo X]", "Medio", "Baja"),),
            ),
        ),
        Guidance(
            heading="Seguimiento de Riesgos",
            purpose="Describir cómo se supervisan y revisan los riesgos.",
            prompts=("[p. ej. Revisión semanal de riesgos]",),
        ),
    ),
    "12_glossary": (
        Guidance(
            heading="Términos de Dominio",
            purpose="Definir los términos de negocio que usan las partes interesadas.",
            table=(
                ("Término", "Definición"),
                (("[Término de dominio 1]", "[Definición clara y concisa]"),),
            ),
        ),
        Guidance(
            heading="Términos Técnicos",
            purpose="Definir los términos técnicos usados en esta documentación.",
            table=(
                ("Término", "Definición"),
                (("[Término técnico 1]", "[Definición clara y concisa]"),),
            ),
        ),
        Guidance(
            heading="Abreviaturas",
            purpose="Desarrollar las abreviaturas utilizadas.",
            table=(
                ("Abreviatura", "Significado"),
                (("API", "Application Programming Interface"),),
            ),
        ),
    ),
}

PHRASES = {
    "purpose": "Propósito",
    "file": "Archivo",
    "further_information": "Más información",
    "resources": "Recursos",
    "template_reference": "Referencia de la plantilla",
    "source": "Fuente",
    "readme_title": "{project} - Documentación de Arquitectura",
    "readme_intro": "Este directorio contiene la documentación de arquitectura de {project}, "
    "siguiendo la plantilla arc42.",
    "readme_title_generic": "Documentación de Arquitectura",
    "readme_intro_generic": "Este directorio contiene la documentación de arquitectura, "
    "siguiendo la plantilla arc42.",
    "readme_structure": "Estructura",
    "readme_sections": "Las 12 secciones de arc42",
    "readme_getting_started": "Primeros pasos",
    "readme_steps": [
        "Empezar por la sección 1: Introducción y Metas",
        "Completar las secciones de forma iterativa",
        "Ilustrar los conceptos con diagramas",
        "Centrarse en las decisiones, no en los detalles de implementación",
    ],
    "structure_sections": "Archivos individuales de sección (12 secciones)",
    "structure_images": "Diagramas e imágenes",
    "structure_document": "Documentación principal combinada",
    "structure_config": "Configuración",
    "document_intro": "Este documento describe la arquitectura de {project} siguiendo la "
    "plantilla arc42.",
    "version": "Versión",
    "date": "Fecha",
    "status": "Estado",
    "status_draft": "Borrador",
    "language": "Idioma",
    "table_of_contents": "Índice",
    "about_arc42": "Acerca de arc42",
    "about_arc42_text": "arc42, la plantilla para documentar arquitecturas de software y de "
    "sistemas, fue creada por el Dr. Gernot Starke y el Dr. Peter Hruschka.",
    "guide_title": "Guía de flujo de trabajo de documentación arc42",
    "guide_overview": "Resumen",
    "guide_intro": "Esta guía ayuda a documentar la arquitectura de software con la plantilla "
    "arc42, una plantilla probada para arquitecturas de software y de sistemas.",
    "guide_languages": "Idiomas disponibles",
    "guide_language_headers": ["Código", "Idioma", "Nombre nativo"],
    "guide_getting_started": "Primeros pasos",
    "guide_steps": [
        {
            "title": "Paso 1: Inicializar el espacio de trabajo",
            "text": "Crear el espacio de trabajo de la documentación:",
            "example": 'arc42docs init "Mi Proyecto" --language ES',
        },
        {
            "title": "Paso 2: Consultar el estado",
            "text": "Ver el estado actual de la documentación:",
            "example": "arc42docs status",
        },
        {
            "title": "Paso 3: Generar plantillas de sección",
            "text": "Obtener una plantilla detallada para cada sección:",
            "example": "arc42docs template 01_introduction_and_goals --language ES",
        },
    ],
    "guide_sections": "Las 12 secciones de arc42",
    "guide_best_practices": "Buenas prácticas",
    "guide_practices": [
        "Empezar por la sección 1 - entender las metas es fundamental",
        "Ser conciso - arc42 es pragmático, no burocrático",
        "Usar diagramas - una imagen vale más que mil palabras",
        "Documentar las decisiones - el equipo futuro lo agradecerá",
        "Iterar - la documentación de arquitectura nunca está terminada",
    ],
    "guide_tools": "Comandos disponibles",
    "guide_tool_descriptions": {
        "init": "Inicializar el espacio de trabajo de la documentación",
        "status": "Consultar el estado de la documentación",
        "template": "Generar una plantilla de sección",
        "update": "Actualizar el contenido de una sección",
        "get": "Leer el contenido de una sección",
        "guide": "Mostrar esta guía",
    },
    "guide_structure": "Estructura de archivos",
}

CATALOG = LanguageCatalog(
    code="ES",
    name="Spanish",
    native_name="Español",
    titles=TITLES,
    descriptions=DESCRIPTIONS,
    guidance=GUIDANCE,
    phrases=PHRASES,
)
