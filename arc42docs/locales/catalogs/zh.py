"""Chinese (Simplified) catalog."""

from __future__ import annotations

from ..base import Guidance, LanguageCatalog

TITLES = {
    "01_introduction_and_goals": "简介和目标",
    "02_architecture_constraints": "架构约束",
    "03_context_and_scope": "上下文和范围",
    "04_solution_strategy": "解决方案策略",
    "05_building_block_view": "构建块视图",
    "06_runtime_view": "运行时视图",
    "07_deployment_view": "部署视图",
    "08_concepts": "横切概念",
    "09_architecture_decisions": "架构决策",
    "10_quality_requirements": "质量要求",
    "11_technical_risks": "风险和技术债务",
    "12_glossary": "术语表",
}

DESCRIPTIONS = {
    "01_introduction_and_goals": "任务陈述、质量目标和利益相关者",
    "02_architecture_constraints": "技术和组织约束",
    "03_context_and_scope": "业务和技术上下文、外部接口",
    "04_solution_strategy": "基本决策和解决方案策略",
    "05_building_block_view": "系统的静态分解",
    "06_runtime_view": "动态行为和重要场景",
    "07_deployment_view": "基础设施和部署",
    "08_concepts": "横切规则和解决方案方法",
    "09_architecture_decisions": "重要的、昂贵的、关键的或有风险的决策",
    "10_quality_requirements": "质量树和质量场景",
    "11_technical_risks": "已知问题、风险和技术债务",
    "12_glossary": "重要的业务和技术术语",
}

GUIDANCE = {
    "01_introduction_and_goals": (
        Guidance(
            heading="需求概述",
            purpose="描述架构和开发必须考虑的相关需求和驱动因素。",
            prompts=(
                "列出 3-5 个最重要的功能需求",
                "说明系统的核心功能",
            ),
            table=(
                ("ID", "需求", "优先级"),
                (
                    ("REQ-1", "[简要描述]", "高"),
                    ("REQ-2", "[简要描述]", "中"),
                ),
            ),
        ),
        Guidance(
            heading="质量目标",
            purpose="确定主要利益相关者最重要的 3-5 个质量目标。",
            prompts=("按 ISO 25010 排列质量优先级：性能、安全性、可靠性、可维护性、易用性",),
            table=(
                ("优先级", "质量目标", "动机"),
                (
                    ("1", "[例如：性能]", "[为什么这很关键]"),
                    ("2", "[例如：安全性]", "[为什么这很关键]"),
                    ("3", "[例如：可维护性]", "[为什么这很关键]"),
                ),
            ),
        ),
        Guidance(
            heading="利益相关者",
            purpose="列出所有应当了解该架构的人员和角色。",
            table=(
                ("角色/姓名", "联系方式", "期望"),
                (
                    ("产品负责人", "[姓名/邮箱]", "[对架构的期望]"),
                    ("开发团队", "[团队名称]", "[团队需要了解的内容]"),
                    ("运维", "[团队/人员]", "[部署和运维方面的关注点]"),
                ),
            ),
        ),
    ),
    "02_architecture_constraints": (
        Guidance(
            heading="技术约束",
            purpose="记录限制设计和实现的技术约束。",
            table=(
                ("约束", "说明"),
                (
                    ("[例如：运行于 Linux]", "[该约束存在的原因]"),
                    ("[例如：至少 Python 3.10]", "[组织要求]"),
                ),
            ),
        ),
        Guidance(
            heading="组织约束",
            purpose="记录来自团队、进度、预算或法律环境的约束。",
            table=(
                ("约束", "说明"),
                (
                    ("[例如：团队规模 5 名开发人员]", "[对架构的影响]"),
                    ("[例如：周期 6 个月]", "[交付条件]"),
                ),
            ),
        ),
        Guidance(
            heading="约定",
            purpose="列出适用的编程、文档和命名约定。",
            table=(
                ("约定", "说明"),
                (("[例如：代码风格 PEP 8]", "[风格指南链接]"),),
            ),
        ),
    ),
    "03_context_and_scope": (
        Guidance(
            heading="业务上下文",
            purpose="确定所有通信伙伴（用户、IT 系统等）及其业务输入和输出。",
            prompts=("添加上下文图（PlantUML、Mermaid 或 images/ 中的图片）",),
            table=(
                ("伙伴", "输入", "输出"),
                (("[用户/系统]", "[发送的内容]", "[接收的内容]"),),
            ),
        ),
        Guidance(
            heading="技术上下文",
            purpose="确定系统与其环境之间的技术通道和协议。",
            table=(
                ("伙伴", "通道", "协议"),
                (("[系统名称]", "[例如：REST API]", "[例如：HTTPS、JSON]"),),
            ),
        ),
    ),
    "04_solution_strategy": (
        Guidance(
            heading="技术决策",
            purpose="总结基础的技术选择。",
            table=(
                ("决策", "选择", "理由"),
                (
                    ("编程语言", "[例如：Python]", "[选择原因]"),
                    ("框架", "[例如：FastAPI]", "[选择原因]"),
                    ("数据库", "[例如：PostgreSQL]", "[选择原因]"),
                ),
            ),
        ),
        Guidance(
            heading="顶层分解",
            purpose="描述系统的整体结构。",
            prompts=("[例如：分层架构]", "[例如：微服务]"),
        ),
        Guidance(
            heading="实现质量目标的策略",
            purpose="说明如何达成第 1 节中的质量目标。",
            table=(
                ("质量目标", "解决方法"),
                (
                    ("[性能]", "[例如：缓存、异步处理]"),
                    ("[安全性]", "[例如：OAuth2、加密]"),
                ),
            ),
        ),
    ),
    "05_building_block_view": (
        Guidance(
            heading="第 1 层：整体系统白盒",
            purpose="白盒描述展示整个系统的内部结构。",
            prompts=("添加顶层构建块的组件图",),
            table=(
                ("构建块", "描述"),
                (
                    ("[组件 A]", "[职责和用途]"),
                    ("[组件 B]", "[职责和用途]"),
                ),
            ),
        ),
        Guidance(
            heading="第 2 层",
            purpose="将主要组件分解为更小的构建块。",
            table=(
                ("构建块", "描述"),
                (("[子组件 A.1]", "[职责]"),),
            ),
        ),
    ),
    "06_runtime_view": (
        Guidance(
            heading="场景 1：[例如：用户登录]",
            purpose="描述一个重要场景的运行时行为。",
            prompts=(
                "添加相关构建块的时序图",
                "按顺序列出各个步骤",
            ),
        ),
        Guidance(
            heading="场景 2：[例如：数据处理]",
            purpose="记录另一个重要的运行时场景。",
            prompts=("[描述步骤和交互]",),
        ),
    ),
    "07_deployment_view": (
        Guidance(
            heading="基础设施第 1 层",
            purpose="概述系统运行所在的基础设施。",
            prompts=(
                "添加部署图",
                "动机：[为什么选择这种部署架构]",
                "构建块到基础设施的映射",
            ),
        ),
        Guidance(
            heading="基础设施第 2 层",
            purpose="单个基础设施节点的详细视图。",
            table=(
                ("方面", "描述"),
                (
                    ("硬件", "[例如：4 vCPU、16GB 内存]"),
                    ("软件", "[例如：Ubuntu 22.04、Docker 24.x]"),
                ),
            ),
        ),
    ),
    "08_concepts": (
        Guidance(
            heading="领域模型",
            purpose="展示核心业务概念及其关系。",
            prompts=("添加领域模型的类图",),
        ),
        Guidance(
            heading="安全概念",
            purpose="描述系统中的认证和授权。",
            prompts=("认证：[JWT、OAuth2 ...]", "授权：[RBAC、ABAC ...]"),
        ),
        Guidance(
            heading="错误处理",
            purpose="描述整个系统如何处理错误。",
            prompts=("[例如：全局错误处理器]", "[例如：结构化错误响应]"),
        ),
        Guidance(
            heading="日志和监控",
            purpose="记录系统在生产环境中如何被观测。",
            table=(
                ("方面", "方法"),
                (
                    ("日志", "[例如：结构化 JSON 日志]"),
                    ("指标", "[例如：Prometheus、Grafana]"),
                ),
            ),
        ),
        Guidance(
            heading="测试策略",
            purpose="确定测试层级及其覆盖率目标。",
            table=(
                ("类型", "范围", "覆盖率目标"),
                (
                    ("单元测试", "单个函数/类", "80%"),
                    ("集成测试", "组件之间的协作", "主要路径"),
                ),
            ),
        ),
    ),
    "09_architecture_decisions": (
        Guidance(
            heading="ADR-001：[决策标题]",
            purpose="记录一项重要、昂贵、大规模或有风险的决策。",
            prompts=(
                "状态：[提议 | 已接受 | 已弃用 | 已取代]",
                "背景：[促成该决策的原因]",
                "决策：[决定了什么]",
                "后果：[正面和负面影响]",
            ),
            table=(
                ("备选方案", "优点", "缺点"),
                (("[方案 A]", "[优点]", "[缺点]"),),
            ),
        ),
        Guidance(
            heading="ADR-002：[决策标题]",
            purpose="按照相同格式记录后续决策。",
        ),
    ),
    "10_quality_requirements": (
        Guidance(
            heading="质量树",
            purpose="将质量目标细化为可度量的质量属性。",
            prompts=(
                "性能：响应时间、吞吐量",
                "安全性：认证、授权",
                "可维护性：模块化、可测试性",
            ),
        ),
        Guidance(
            heading="质量场景",
            purpose="使质量要求具体且可验证。",
            table=(
                ("ID", "场景", "预期响应", "优先级"),
                (
                    ("PERF-1", "正常负载下加载仪表盘", "< 200ms", "高"),
                    ("SEC-1", "无效的登录尝试", "5 次尝试后锁定", "高"),
                ),
            ),
        ),
    ),
    "11_technical_risks": (
        Guidance(
            heading="技术风险",
            purpose="确定已知的技术风险及其缓解措施。",
            table=(
                ("风险", "描述", "可能性", "缓解措施"),
                (("[例如：第三方 API 故障]", "[外部服务]", "中", "[熔断器、降级方案]"),),
            ),
        ),
        Guidance(
            heading="技术债务",
            purpose="跟踪累积的技术债务。",
            table=(
                ("事项", "描述", "影响", "优先级"),
                (("[例如：缺少测试]", "[模块 X 覆盖率低]", "中", "低"),),
            ),
        ),
        Guidance(
            heading="风险监控",
            purpose="描述如何监控和复审风险。",
            prompts=("[例如：每周风险评审]",),
        ),
    ),
    "12_glossary": (
        Guidance(
            heading="领域术语",
            purpose="定义利益相关者使用的业务术语。",
            table=(
                ("术语", "定义"),
                (("[领域术语 1]", "[清晰简洁的定义]"),),
            ),
        ),
        Guidance(
            heading="技术术语",
            purpose="定义本文档中使用的技术术语。",
            table=(
                ("术语", "定义"),
                (("[技术术语 1]", "[清晰简洁的定义]"),),
            ),
        ),
        Guidance(
            heading="缩写",
            purpose="给出所用缩写的全称。",
            table=(
                ("缩写", "含义"),
                (("API", "Application Programming Interface"),),
            ),
        ),
    ),
}

PHRASES = {
    "purpose": "目的",
    "file": "文件",
    "further_information": "更多信息",
    "resources": "资源",
    "template_reference": "模板参考",
    "source": "来源",
    "readme_title": "{project} - 架构文档",
    "readme_intro": "此目录包含 {project} 的架构文档，遵循 arc42 模板。",
    "readme_title_generic": "架构文档",
    "readme_intro_generic": "此目录包含架构文档，遵循 arc42 模板。",
    "readme_structure": "结构",
    "readme_sections": "arc42 的 12 个章节",
    "readme_getting_started": "入门",
    "readme_steps": [
        "从第 1 节开始：简介和目标",
        "迭代地完善各个章节",
        "用图表说明概念",
        "关注决策，而不是实现细节",
    ],
    "structure_sections": "各章节文件（12 个章节）",
    "structure_images": "图表和图片",
    "structure_document": "合并的主文档",
    "structure_config": "配置",
    "document_intro": "本文档按照 arc42 模板描述 {project} 的架构。",
    "version": "版本",
    "date": "日期",
    "status": "状态",
    "status_draft": "草稿",
    "language": "语言",
    "table_of_contents": "目录",
    "about_arc42": "关于 arc42",
    "about_arc42_text": "arc42 是用于记录软件和系统架构的模板，由 Gernot Starke 博士和 "
    "Peter Hruschka 博士创建。",
    "guide_title": "arc42 架构文档工作流程指南",
    "guide_overview": "概述",
    "guide_intro": "本指南帮助您使用 arc42 模板记录软件架构，arc42 是一个经过实践检验的"
    "软件和系统架构模板。",
    "guide_languages": "可用语言",
    "guide_language_headers": ["代码", "语言", "本地名称"],
    "guide_getting_started": "入门",
    "guide_steps": [
        {
            "title": "步骤 1：初始化工作区",
            "text": "创建文档工作区：",
            "example": 'arc42docs init "我的项目" --language ZH',
        },
        {
            "title": "步骤 2：检查状态",
            "text": "查看文档的当前状态：",
            "example": "arc42docs status",
        },
        {
            "title": "步骤 3：生成章节模板",
            "text": "获取每个章节的详细模板：",
            "example": "arc42docs template 01_introduction_and_goals --language ZH",
        },
    ],
    "guide_sections": "arc42 的 12 个章节",
    "guide_best_practices": "最佳实践",
    "guide_practices": [
        "从第 1 节开始 - 理解目标是基础",
        "保持简洁 - arc42 务实而不官僚",
        "使用图表 - 一图胜千言",
        "记录决策 - 未来的团队会感谢你",
        "持续迭代 - 架构文档永远不会完成",
    ],
    "guide_tools": "可用命令",
    "guide_tool_descriptions": {
        "init": "初始化文档工作区",
        "status": "检查文档状态",
        "template": "生成章节模板",
        "update": "更新章节内容",
        "get": "读取章节内容",
        "guide": "显示本指南",
    },
    "guide_structure": "文件结构",
}

CATALOG = LanguageCatalog(
    code="ZH",
    name="Chinese",
    native_name="中文",
    titles=TITLES,
    descriptions=DESCRIPTIONS,
    guidance=GUIDANCE,
    phrases=PHRASES,
)
