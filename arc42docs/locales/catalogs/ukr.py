"""Ukrainian catalog. Section guidance falls back to English."""

from __future__ import annotations

from ..base import LanguageCatalog

CATALOG = LanguageCatalog(
    code="UKR",
    name="Ukrainian",
    native_name="Українська",
    titles={
        "01_introduction_and_goals": "Вступ та цілі",
        "02_architecture_constraints": "Обмеження архітектури",
        "03_context_and_scope": "Контекст та обсяг",
        "04_solution_strategy": "Стратегія рішення",
        "05_building_block_view": "Вигляд будівельних блоків",
        "06_runtime_view": "Вигляд часу виконання",
        "07_deployment_view": "Вигляд розгортання",
        "08_concepts": "Наскрізні концепції",
        "09_architecture_decisions": "Архітектурні рішення",
        "10_quality_requirements": "Вимоги до якості",
        "11_technical_risks": "Ризики та технічний борг",
        "12_glossary": "Глосарій",
    },
    descriptions={
        "01_introduction_and_goals": "Постановка завдання, цілі якості та зацікавлені сторони",
        "02_architecture_constraints": "Технічні та організаційні обмеження",
        "03_context_and_scope": "Бізнес та технічний контекст, зовнішні інтерфейси",
        "04_solution_strategy": "Основні рішення та стратегії",
        "05_building_block_view": "Статична декомпозиція системи",
        "06_runtime_view": "Динамічна поведінка та важливі сценарії",
        "07_deployment_view": "Інфраструктура та розгортання",
        "08_concepts": "Наскрізні правила та підходи до рішення",
        "09_architecture_decisions": "Важливі, дорогі, критичні або ризиковані рішення",
        "10_quality_requirements": "Дерево якості та сценарії якості",
        "11_technical_risks": "Відомі проблеми, ризики та технічний борг",
        "12_glossary": "Важливі бізнес та технічні терміни",
    },
    phrases={
        "purpose": "Призначення",
        "file": "Файл",
        "resources": "Ресурси",
        "readme_title": "{project} - Архітектурна документація",
        "readme_intro": "Цей каталог містить архітектурну документацію проєкту {project} "
        "за шаблоном arc42.",
        "readme_title_generic": "Архітектурна документація",
        "readme_intro_generic": "Цей каталог містить архітектурну документацію за шаблоном arc42.",
        "readme_structure": "Структура",
        "readme_sections": "12 розділів arc42",
        "readme_getting_started": "Початок роботи",
        "structure_sections": "Окремі файли розділів (12 розділів)",
        "structure_images": "Діаграми та зображення",
        "structure_document": "Основна об'єднана документація",
        "structure_config": "Конфігурація",
        "document_intro": "Цей документ описує архітектуру проєкту {project} за шаблоном arc42.",
        "version": "Версія",
        "date": "Дата",
        "status": "Статус",
        "status_draft": "Чернетка",
        "language": "Мова",
        "table_of_contents": "Зміст",
        "guide_title": "Посібник з документування архітектури arc42",
        "guide_overview": "Огляд",
        "guide_sections": "12 розділів arc42",
    },
)
