"""Russian catalog. Section guidance falls back to English."""

from __future__ import annotations

from ..base import LanguageCatalog

CATALOG = LanguageCatalog(
    code="RU",
    name="Russian",
    native_name="Русский",
    titles={
        "01_introduction_and_goals": "Введение и цели",
        "02_architecture_constraints": "Ограничения архитектуры",
        "03_context_and_scope": "Контекст и область",
        "04_solution_strategy": "Стратегия решения",
        "05_building_block_view": "Представление строительных блоков",
        "06_runtime_view": "Представление времени выполнения",
        "07_deployment_view": "Представление развертывания",
        "08_concepts": "Сквозные концепции",
        "09_architecture_decisions": "Архитектурные решения",
        "10_quality_requirements": "Требования к качеству",
        "11_technical_risks": "Риски и технический долг",
        "12_glossary": "Глоссарий",
    },
    descriptions={
        "01_introduction_and_goals": "Постановка задачи, цели качества и заинтересованные стороны",
        "02_architecture_constraints": "Технические и организационные ограничения",
        "03_context_and_scope": "Бизнес-контекст и технический контекст, внешние интерфейсы",
        "04_solution_strategy": "Основные решения и стратегии",
        "05_building_block_view": "Статическая декомпозиция системы",
        "06_runtime_view": "Динамическое поведение и важные сценарии",
        "07_deployment_view": "Инфраструктура и развертывание",
        "08_concepts": "Сквозные правила и подходы к решению",
        "09_architecture_decisions": "Важные, дорогостоящие, критические или рискованные решения",
        "10_quality_requirements": "Дерево качества и сценарии качества",
        "11_technical_risks": "Известные проблемы, риски и технический долг",
        "12_glossary": "Важные бизнес- и технические термины",
    },
    phrases={
        "purpose": "Назначение",
        "file": "Файл",
        "resources": "Ресурсы",
        "readme_title": "{project} - Архитектурная документация",
        "readme_intro": "Этот каталог содержит архитектурную документацию проекта {project} "
        "по шаблону arc42.",
        "readme_title_generic": "Архитектурная документация",
        "readme_intro_generic": "Этот каталог содержит архитектурную документацию по шаблону arc42.",
        "readme_structure": "Структура",
        "readme_sections": "12 разделов arc42",
        "readme_getting_started": "Начало работы",
        "structure_sections": "Отдельные файлы разделов (12 разделов)",
        "structure_images": "Диаграммы и изображения",
        "structure_document": "Основная объединенная документация",
        "structure_config": "Конфигурация",
        "document_intro": "Этот документ описывает архитектуру проекта {project} по шаблону arc42.",
        "version": "Версия",
        "date": "Дата",
        "status": "Статус",
        "status_draft": "Черновик",
        "language": "Язык",
        "table_of_contents": "Содержание",
        "guide_title": "Руководство по документированию архитектуры arc42",
        "guide_overview": "Обзор",
        "guide_sections": "12 разделов arc42",
    },
)
