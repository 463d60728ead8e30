"""Portuguese catalog."""

from __future__ import annotations

from ..base import Guidance, LanguageCatalog

TITLES = {
    "01_introduction_and_goals": "Introdução e Objetivos",
    "02_architecture_constraints": "Restrições da Arquitetura",
    "03_context_and_scope": "Contexto e Escopo",
    "04_solution_strategy": "Estratégia de Solução",
    "05_building_block_view": "Visão de Building Blocks",
    "06_runtime_view": "Visão de Runtime",
    "07_deployment_view": "Visão de Implantação",
    "08_concepts": "Conceitos Transversais",
    "09_architecture_decisions": "Decisões de Arquitetura",
    "10_quality_requirements": "Requisitos de Qualidade",
    "11_technical_risks": "Riscos e Dívida Técnica",
    "12_glossary": "Glossário",
}

DESCRIPTIONS = {
    "01_introduction_and_goals": "Requisitos, objetivos de qualidade e stakeholders",
    "02_architecture_constraints": "Restrições técnicas e organizacionais",
    "03_context_and_scope": "Contexto de negócio e técnico, interfaces externas",
    "04_solution_strategy": "Decisões e estratégias fundamentais de solução",
    "05_building_block_view": "Decomposição estática do sistema",
    "06_runtime_view": "Comportamento dinâmico e cenários importantes",
    "07_deployment_view": "Infraestrutura e distribuição",
    "08_concepts": "Regras e abordagens transversais",
    "09_architecture_decisions": "Decisões importantes, custosas, críticas ou arriscadas",
    "10_quality_requirements": "Árvore de qualidade e cenários de qualidade",
    "11_technical_risks": "Problemas conhecidos, riscos e dívida técnica",
    "12_glossary": "Termos importantes de negócio e técnicos",
}

GUIDANCE = {
    "01_introduction_and_goals": (
        Guidance(
            heading="Visão Geral dos Requisitos",
            purpose="Descreve os requisitos relevantes e as forças motrizes que a arquitetura "
            "e o desenvolvimento devem considerar.",
            prompts=(
                "Listar os 3 a 5 requisitos funcionais mais importantes",
                "Indicar as funcionalidades essenciais do sistema",
            ),
            table=(
                ("ID", "Requisito", "Prioridade"),
                (
                    ("REQ-1", "[Descrição breve]", "Alta"),
                    ("REQ-2", "[Descrição breve]", "Média"),
                ),
            ),
        ),
        Guidance(
            heading="Objetivos de Qualidade",
            purpose="Definir os 3 a 5 objetivos de qualidade principais dos stakeholders "
            "mais relevantes.",
            prompts=(
                "Priorizar as qualidades segundo a ISO 25010: desempenho, segurança, "
                "confiabilidade, manutenibilidade, usabilidade",
            ),
            table=(
                ("Prioridade", "Objetivo de qualidade", "Motivação"),
                (
                    ("1", "[ex. Desempenho]", "[Por que é crítico]"),
                    ("2", "[ex. Segurança]", "[Por que é crítico]"),
                    ("3", "[ex. Manutenibilidade]", "[Por que é crítico]"),
                ),
            ),
        ),
        Guidance(
            heading="Stakeholders",
            purpose="Identificar todas as pessoas e papéis que devem conhecer a arquitetura.",
            table=(
                ("Papel/Nome", "Contato", "Expectativas"),
                (
                    ("Product Owner", "[Nome/E-mail]", "[Expectativas sobre a arquitetura]"),
                    ("Equipe de desenvolvimento", "[Nome da equipe]", "[O que a equipe precisa saber]"),
                    ("Operações", "[Equipe/Pessoa]", "[Questões de implantação e operação]"),
                ),
            ),
        ),
    ),
    "02_architecture_constraints": (
        Guidance(
            heading="Restrições Técnicas",
            purpose="Registrar as restrições técnicas que limitam o projeto e a implementação.",
            table=(
                ("Restrição", "Explicação"),
                (
                    ("[ex. Execução em Linux]", "[Por que esta restrição existe]"),
                    ("[ex. Python 3.10 no mínimo]", "[Exigência organizacional]"),
                ),
            ),
        ),
        Guidance(
            heading="Restrições Organizacionais",
            purpose="Registrar as restrições de equipe, cronograma, orçamento ou contexto legal.",
            table=(
                ("Restrição", "Explicação"),
                (
                    ("[ex. Tamanho da equipe: 5 desenvolvedores]", "[Impacto na arquitetura]"),
                    ("[ex. Prazo: 6 meses]", "[Condições de entrega]"),
                ),
            ),
        ),
        Guidance(
            heading="Convenções",
            purpose="Listar as convenções de programação, documentação e nomenclatura em vigor.",
            table=(
                ("Convenção", "Explicação"),
                (("[ex. Estilo de código: PEP 8]", "[Link para o guia de estilo]"),),
            ),
        ),
    ),
    "03_context_and_scope": (
        Guidance(
            heading="Contexto de Negócio",
            purpose="Identificar todos os parceiros de comunicação (usuários, sistemas, ...) com "
            "as entradas e saídas de negócio.",
            prompts=("Adicionar um diagrama de contexto (PlantUML, Mermaid ou imagem em images/)",),
            table=(
                ("Parceiro", "Entrada", "Saída"),
                (("[Usuário/Sistema]", "[O que é enviado]", "[O que é recebido]"),),
            ),
        ),
        Guidance(
            heading="Contexto Técnico",
            purpose="Identificar os canais técnicos e protocolos entre o sistema e seu ambiente.",
            table=(
                ("Parceiro", "Canal", "Protocolo"),
                (("[Nome do sistema]", "[ex. API REST]", "[ex. HTTPS, JSON]"),),
            ),
        ),
    ),
    "04_solution_strategy": (
        Guidance(
            heading="Decisões Tecnológicas",
            purpose="Resumir as escolhas tecnológicas fundamentais.",
            table=(
                ("Decisão", "Escolha", "Justificativa"),
                (
                    ("Linguagem de programação", "[ex. Python]", "[Por que esta escolha]"),
                    ("Framework", "[ex. FastAPI]", "[Por que esta escolha]"),
                    ("Banco de dados", "[ex. PostgreSQL]", "[Por que esta escolha]"),
                ),
            ),
        ),
        Guidance(
            heading="Decomposição de Alto Nível",
            purpose="Descrever a estrutura geral do sistema.",
            prompts=("[ex. Arquitetura em camadas]", "[ex. Microsserviços]"),
        ),
        Guidance(
            heading="Estratégias para os Objetivos de Qualidade",
            purpose="Explicar como os objetivos de qualidade da seção 1 são alcançados.",
            table=(
                ("Objetivo de qualidade", "Abordagem de solução"),
                (
                    ("[Desempenho]", "[ex. Cache, processamento assíncrono]"),
                    ("[Segurança]", "[ex. OAuth2, criptografia]"),
                ),
            ),
        ),
    ),
    "05_building_block_view": (
        Guidance(
            heading="Nível 1: Caixa Branca do Sistema Geral",
            purpose="A caixa branca mostra a estrutura interna do sistema geral.",
            prompts=("Adicionar um diagrama de componentes dos building blocks de primeiro nível",),
            table=(
                ("Building block", "Descrição"),
                (
                    ("[Componente A]", "[Responsabilidade e propósito]"),
                    ("[Componente B]", "[Responsabilidade e propósito]"),
                ),
            ),
        ),
        Guidance(
            heading="Nível 2",
            purpose="Decompor os componentes principais em building blocks menores.",
            table=(
                ("Building block", "Descrição"),
                (("[Subcomponente A.1]", "[Responsabilidade]"),),
            ),
        ),
    ),
    "06_runtime_view": (
        Guidance(
            heading="Cenário 1: [ex. Login de Usuário]",
            purpose="Descrever o comportamento em runtime de um cenário importante.",
            prompts=(
                "Adicionar um diagrama de sequência dos building blocks envolvidos",
                "Listar os passos em ordem",
            ),
        ),
        Guidance(
            heading="Cenário 2: [ex. Processamento de Dados]",
            purpose="Documentar outro cenário de runtime importante.",
            prompts=("[Descrever passos e interações]",),
        ),
    ),
    "07_deployment_view": (
        Guidance(
            heading="Infraestrutura Nível 1",
            purpose="Visão geral da infraestrutura em que o sistema é executado.",
            prompts=(
                "Adicionar um diagrama de implantação",
                "Motivação: [Por que esta arquitetura de implantação foi escolhida]",
                "Mapeamento dos building blocks para a infraestrutura",
            ),
        ),
        Guidance(
            heading="Infraestrutura Nível 2",
            purpose="Visão detalhada de nós específicos da infraestrutura.",
            table=(
                ("Aspecto", "Descrição"),
                (
                    ("Hardware", "[ex. 4 vCPU, 16GB RAM]"),
                    ("Software", "[ex. Ubuntu 22.04, Docker 24.x]"),
                ),
            ),
        ),
    ),
    "08_concepts": (
        Guidance(
            heading="Modelo de Domínio",
            purpose="Mostrar os conceitos de negócio centrais e suas relações.",
            prompts=("Adicionar um diagrama de classes do modelo de domínio",),
        ),
        Guidance(
            heading="Conceito de Segurança",
            purpose="Descrever autenticação e autorização no sistema.",
            prompts=("Autenticação: [JWT, OAuth2, ...]", "Autorização: [RBAC, ABAC, ...]"),
        ),
        Guidance(
            heading="Tratamento de Erros",
            purpose="Descrever como os erros são tratados em todo o sistema.",
            prompts=("[ex. Handler global de erros]", "[ex. Respostas de erro estruturadas]"),
        ),
        Guidance(
            heading="Logging e Monitoramento",
            purpose="Registrar como o sistema é observado em produção.",
            table=(
                ("Aspecto", "Abordagem"),
                (
                    ("Logging", "[ex. Logs JSON estruturados]"),
                    ("Métricas", "[ex. Prometheus, Grafana]"),
                ),
            ),
        ),
        Guidance(
            heading="Estratégia de Testes",
            purpose="Definir os níveis de teste e seus objetivos de cobertura.",
            table=(
                ("Tipo", "Escopo", "Meta de cobertura"),
                (
                    ("Testes unitários", "Funções/classes individuais", "80%"),
                    ("Testes de integração", "Interação entre componentes", "Caminhos principais"),
                ),
            ),
        ),
    ),
    "09_architecture_decisions": (
        Guidance(
            heading="ADR-001: [Título da decisão]",
            purpose="Documentar uma decisão importante, custosa, de grande escala ou arriscada.",
            prompts=(
                "Situação: [Proposta | Aceita | Obsoleta | Substituída]",
                "Contexto: [O que motiva a decisão]",
                "Decisão: [O que foi decidido]",
                "Consequências: [Efeitos positivos e negativos]",
            ),
            table=(
                ("Alternativa", "Vantagens", "Desvantagens"),
                (("[Opção A]", "[Vantagens]", "[Desvantagens]"),),
            ),
        ),
        Guidance(
            heading="ADR-002: [Título da decisão]",
            purpose="Registrar as decisões seguintes com o mesmo esquema.",
        ),
    ),
    "10_quality_requirements": (
        Guidance(
            heading="Árvore de Qualidade",
            purpose="Refinar os objetivos de qualidade em atributos de qualidade mensuráveis.",
            prompts=(
                "Desempenho: tempo de resposta, vazão",
                "Segurança: autenticação, autorização",
                "Manutenibilidade: modularidade, testabilidade",
            ),
        ),
        Guidance(
            heading="Cenários de Qualidade",
            purpose="Tornar os requisitos de qualidade concretos e verificáveis.",
            table=(
                ("ID", "Cenário", "Resposta esperada", "Prioridade"),
                (
                    ("PERF-1", "Carregamento do painel com carga normal", "< 200ms", "Alta"),
                    ("SEC-1", "Tentativa de login inválida", "Bloqueio após 5 tentativas", "Alta"),
                ),
            ),
        ),
    ),
    "11_technical_risks": (
        Guidance(
            heading="Riscos Técnicos",
            purpose="Identificar os riscos técnicos conhecidos e suas medidas de mitigação.",
            table=(
                ("Risco", "Descrição", "Probabilidade", "Mitigação"),
                (
                    (
                        "[ex. Indisponibilidade de uma API externa]",
                        "[Serviço externo]",
                        "Média",
                        "[Circuit breaker, alternativa]",
                    ),
                ),
            ),
        ),
        Guidance(
            heading="Dívida Técnica",
            purpose="Acompanhar a dívida técnica acumulada.",
            table=(
                ("Item", "Descrição", "Impacto", "Prioridade"),
                (("[ex. Testes ausentes]", "[Baixa cobertura no módulo X]", "Médio", "Baixa"),),
            ),
        ),
        Guidance(
            heading="Monitoramento de Riscos",
            purpose="Descrever como os riscos são monitorados e revistos.",
            prompts=("[ex. Revisão semanal de riscos]",),
        ),
    ),
    "12_glossary": (
        Guidance(
            heading="Termos de Domínio",
            purpose="Definir os termos de negócio usados pelos stakeholders.",
            table=(
                ("Termo", "Definição"),
                (("[Termo de domínio 1]", "[Definição clara e concisa]"),),
            ),
        ),
        Guidance(
            heading="Termos Técnicos",
            purpose="Definir os termos técnicos usados nesta documentação.",
            table=(
                ("Termo", "Definição"),
                (("[Termo técnico 1]", "[Definição clara e concisa]"),),
            ),
        ),
        Guidance(
            heading="Abreviações",
            purpose="Explicar as abreviações utilizadas.",
            table=(
                ("Abreviação", "Significado"),
                (("API", "Application Programming Interface"),),
            ),
        ),
    ),
}

PHRASES = {
    "purpose": "Propósito",
    "file": "Arquivo",
    "further_information": "Mais informações",
    "resources": "Recursos",
    "template_reference": "Referência do template",
    "source": "Fonte",
    "readme_title": "{project} - Documentação de Arquitetura",
    "readme_intro": "Este diretório contém a documentação de arquitetura de {project}, "
    "seguindo o template arc42.",
    "readme_title_generic": "Documentação de Arquitetura",
    "readme_intro_generic": "Este diretório contém a documentação de arquitetura, seguindo "
    "o template arc42.",
    "readme_structure": "Estrutura",
    "readme_sections": "As 12 seções do arc42",
    "readme_getting_started": "Primeiros passos",
    "readme_steps": [
        "Começar pela seção 1: Introdução e Objetivos",
        "Preencher as seções de forma iterativa",
        "Ilustrar os conceitos com diagramas",
        "Focar nas decisões, não nos detalhes de implementação",
    ],
    "structure_sections": "Arquivos individuais de seção (12 seções)",
    "structure_images": "Diagramas e imagens",
    "structure_document": "Documentação principal combinada",
    "structure_config": "Configuração",
    "document_intro": "Este documento descreve a arquitetura de {project} seguindo o "
    "template arc42.",
    "version": "Versão",
    "date": "Data",
    "status": "Situação",
    "status_draft": "Rascunho",
    "language": "Idioma",
    "table_of_contents": "Sumário",
    "about_arc42": "Sobre o arc42",
    "about_arc42_text": "O arc42, template para documentação de arquiteturas de software e "
    "de sistemas, foi criado pelo Dr. Gernot Starke e pelo Dr. Peter Hruschka.",
    "guide_title": "Guia de fluxo de trabalho da documentação arc42",
    "guide_overview": "Visão geral",
    "guide_intro": "Este guia ajuda a documentar a arquitetura de software com o template "
    "arc42, um modelo comprovado para arquiteturas de software e de sistemas.",
    "guide_languages": "Idiomas disponíveis",
    "guide_language_headers": ["Código", "Idioma", "Nome nativo"],
    "guide_getting_started": "Primeiros passos",
    "guide_steps": [
        {
            "title": "Passo 1: Inicializar o workspace",
            "text": "Criar o workspace da documentação:",
            "example": 'arc42docs init "Meu Projeto" --language PT',
        },
        {
            "title": "Passo 2: Verificar a situação",
            "text": "Ver o estado atual da documentação:",
            "example": "arc42docs status",
        },
        {
            "title": "Passo 3: Gerar templates de seção",
            "text": "Obter um template detalhado para cada seção:",
            "example": "arc42docs template 01_introduction_and_goals --language PT",
        },
    ],
    "guide_sections": "As 12 seções do arc42",
    "guide_best_practices": "Boas práticas",
    "guide_practices": [
        "Começar pela seção 1 - entender os objetivos é fundamental",
        "Ser conciso - o arc42 é pragmático, não burocrático",
        "Usar diagramas - uma imagem vale mais que mil palavras",
        "Documentar as decisões - a equipe futura agradecerá",
        "Iterar - a documentação de arquitetura nunca está pronta",
    ],
    "guide_tools": "Comandos disponíveis",
    "guide_tool_descriptions": {
        "init": "Inicializar o workspace da documentação",
        "status": "Verificar a situação da documentação",
        "template": "Gerar o template de uma seção",
        "update": "Atualizar o conteúdo de uma seção",
        "get": "Ler o conteúdo de uma seção",
        "guide": "Mostrar este guia",
    },
    "guide_structure": "Estrutura de arquivos",
}

CATALOG = LanguageCatalog(
    code="PT",
    name="Portuguese",
    native_name="Português",
    titles=TITLES,
    descriptions=DESCRIPTIONS,
    guidance=GUIDANCE,
    phrases=PHRASES,
)
