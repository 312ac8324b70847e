"""技术栈词典

- TECH_SYNONYMS: 小写别名 -> 标准名称
- TECH_CATEGORIES: 分类 -> 标准名称列表 (反转为 TECH_TO_CATEGORY)
- NOISE_TERMS: 不计入技术栈统计的词 (岗位名、软技能、泛化协议缩写)
"""

from types import MappingProxyType
from typing import Dict, List

# 未收录技术的分类
OTHER_TECH_CATEGORY = "其他"

_SYNONYMS: Dict[str, str] = {
    # 语言
    "typescript": "TypeScript",
    "ts": "TypeScript",
    "javascript": "JavaScript",
    "js": "JavaScript",
    "es6": "JavaScript",
    "python": "Python",
    "python3": "Python",
    "py": "Python",
    "golang": "Go",
    "go": "Go",
    "go语言": "Go",
    "java": "Java",
    "rust": "Rust",
    "c": "C",
    "c语言": "C",
    "c++": "C++",
    "cpp": "C++",
    "c/c++": "C++",
    "c#": "C#",
    "csharp": "C#",
    "php": "PHP",
    "ruby": "Ruby",
    "kotlin": "Kotlin",
    "swift": "Swift",
    "objective-c": "Objective-C",
    "objc": "Objective-C",
    "dart": "Dart",
    "scala": "Scala",
    "elixir": "Elixir",
    "erlang": "Erlang",
    "lua": "Lua",
    "r": "R",
    "sql": "SQL",
    "shell": "Shell",
    "bash": "Shell",
    "solidity": "Solidity",
    "zig": "Zig",
    # 前端
    "react": "React",
    "react.js": "React",
    "reactjs": "React",
    "vue": "Vue",
    "vue.js": "Vue",
    "vuejs": "Vue",
    "vue2": "Vue",
    "vue3": "Vue",
    "angular": "Angular",
    "angular.js": "Angular",
    "angularjs": "Angular",
    "svelte": "Svelte",
    "next": "Next.js",
    "next.js": "Next.js",
    "nextjs": "Next.js",
    "nuxt": "Nuxt.js",
    "nuxt.js": "Nuxt.js",
    "nuxtjs": "Nuxt.js",
    "html": "HTML",
    "html5": "HTML",
    "css": "CSS",
    "css3": "CSS",
    "webpack": "Webpack",
    "vite": "Vite",
    "tailwind": "Tailwind CSS",
    "tailwindcss": "Tailwind CSS",
    "tailwind css": "Tailwind CSS",
    "three.js": "Three.js",
    "threejs": "Three.js",
    "webgl": "WebGL",
    "electron": "Electron",
    "小程序": "小程序",
    "微信小程序": "小程序",
    # 后端
    "node": "Node.js",
    "node.js": "Node.js",
    "nodejs": "Node.js",
    "express": "Express",
    "express.js": "Express",
    "expressjs": "Express",
    "nest": "NestJS",
    "nestjs": "NestJS",
    "nest.js": "NestJS",
    "spring": "Spring",
    "spring boot": "Spring Boot",
    "springboot": "Spring Boot",
    "spring cloud": "Spring Cloud",
    "springcloud": "Spring Cloud",
    "mybatis": "MyBatis",
    "django": "Django",
    "fastapi": "FastAPI",
    "flask": "Flask",
    "gin": "Gin",
    "fiber": "Fiber",
    "laravel": "Laravel",
    "rails": "Rails",
    "ruby on rails": "Rails",
    ".net": ".NET",
    "dotnet": ".NET",
    "asp.net": ".NET",
    "graphql": "GraphQL",
    # 数据库
    "mysql": "MySQL",
    "postgresql": "PostgreSQL",
    "postgres": "PostgreSQL",
    "pg": "PostgreSQL",
    "mongodb": "MongoDB",
    "mongo": "MongoDB",
    "redis": "Redis",
    "elasticsearch": "Elasticsearch",
    "es": "Elasticsearch",
    "sqlite": "SQLite",
    "oracle": "Oracle",
    "sql server": "SQL Server",
    "sqlserver": "SQL Server",
    "cassandra": "Cassandra",
    "clickhouse": "ClickHouse",
    "tidb": "TiDB",
    "hbase": "HBase",
    # 云 / DevOps
    "aws": "AWS",
    "gcp": "GCP",
    "azure": "Azure",
    "阿里云": "阿里云",
    "aliyun": "阿里云",
    "腾讯云": "腾讯云",
    "docker": "Docker",
    "kubernetes": "Kubernetes",
    "k8s": "Kubernetes",
    "linux": "Linux",
    "ci/cd": "CI/CD",
    "cicd": "CI/CD",
    "jenkins": "Jenkins",
    "terraform": "Terraform",
    "ansible": "Ansible",
    "nginx": "Nginx",
    "prometheus": "Prometheus",
    "grafana": "Grafana",
    "git": "Git",
    # AI / ML
    "pytorch": "PyTorch",
    "torch": "PyTorch",
    "tensorflow": "TensorFlow",
    "tf": "TensorFlow",
    "llm": "LLM",
    "llms": "LLM",
    "大模型": "LLM",
    "大语言模型": "LLM",
    "nlp": "NLP",
    "自然语言处理": "NLP",
    "cv": "CV",
    "计算机视觉": "CV",
    "ml": "ML",
    "机器学习": "ML",
    "machine learning": "ML",
    "深度学习": "Deep Learning",
    "deep learning": "Deep Learning",
    "langchain": "LangChain",
    "rag": "RAG",
    "cuda": "CUDA",
    # 移动端
    "react native": "React Native",
    "react-native": "React Native",
    "rn": "React Native",
    "flutter": "Flutter",
    "ios": "iOS",
    "android": "Android",
    "安卓": "Android",
    "swiftui": "SwiftUI",
    "jetpack compose": "Jetpack Compose",
    "uniapp": "uni-app",
    "uni-app": "uni-app",
    # 大数据
    "hadoop": "Hadoop",
    "spark": "Spark",
    "flink": "Flink",
    "hive": "Hive",
    # 中间件
    "grpc": "gRPC",
    "kafka": "Kafka",
    "rabbitmq": "RabbitMQ",
    "rocketmq": "RocketMQ",
    "zookeeper": "ZooKeeper",
    "dubbo": "Dubbo",
    "etcd": "etcd",
    # 测试
    "selenium": "Selenium",
    "pytest": "pytest",
    "jest": "Jest",
    "cypress": "Cypress",
    "playwright": "Playwright",
    "jmeter": "JMeter",
    "appium": "Appium",
}

TECH_SYNONYMS = MappingProxyType(_SYNONYMS)


TECH_CATEGORIES: Dict[str, List[str]] = {
    "语言": [
        "TypeScript", "JavaScript", "Python", "Go", "Java", "Rust", "C", "C++",
        "C#", "PHP", "Ruby", "Kotlin", "Swift", "Objective-C", "Dart", "Scala",
        "Elixir", "Erlang", "Lua", "R", "SQL", "Shell", "Solidity", "Zig",
    ],
    "前端": [
        "React", "Vue", "Angular", "Svelte", "Next.js", "Nuxt.js", "HTML", "CSS",
        "Webpack", "Vite", "Tailwind CSS", "Three.js", "WebGL", "Electron", "小程序",
    ],
    "后端": [
        "Node.js", "Express", "NestJS", "Spring", "Spring Boot", "Spring Cloud",
        "MyBatis", "Django", "FastAPI", "Flask", "Gin", "Fiber", "Laravel",
        "Rails", ".NET", "GraphQL",
    ],
    "数据库": [
        "MySQL", "PostgreSQL", "MongoDB", "Redis", "Elasticsearch", "SQLite",
        "Oracle", "SQL Server", "Cassandra", "ClickHouse", "TiDB", "HBase",
    ],
    "云/DevOps": [
        "AWS", "GCP", "Azure", "阿里云", "腾讯云", "Docker", "Kubernetes", "Linux",
        "CI/CD", "Jenkins", "Terraform", "Ansible", "Nginx", "Prometheus",
        "Grafana", "Git",
    ],
    "AI/ML": [
        "PyTorch", "TensorFlow", "LLM", "NLP", "CV", "ML", "Deep Learning",
        "LangChain", "RAG", "CUDA",
    ],
    "移动端": [
        "React Native", "Flutter", "iOS", "Android", "SwiftUI",
        "Jetpack Compose", "uni-app",
    ],
    "大数据": ["Hadoop", "Spark", "Flink", "Hive"],
    "中间件": ["gRPC", "Kafka", "RabbitMQ", "RocketMQ", "ZooKeeper", "Dubbo", "etcd"],
    "测试": ["Selenium", "pytest", "Jest", "Cypress", "Playwright", "JMeter", "Appium"],
}

TECH_TO_CATEGORY = MappingProxyType({
    tech: category
    for category, techs in TECH_CATEGORIES.items()
    for tech in techs
})


# 岗位名 / 软技能 / 泛化缩写
NOISE_TERMS = frozenset({
    # 岗位 & 方向
    "前端", "后端", "全栈", "前端开发", "后端开发", "全栈开发", "服务端",
    "客户端", "移动端", "算法", "运维", "测试", "架构", "架构师", "开发",
    "工程师", "产品经理", "设计", "ui", "ux", "ui/ux", "frontend",
    "backend", "fullstack", "full stack", "devops", "sre", "qa",
    "web", "web开发", "app", "h5", "ai", "人工智能", "大数据", "数据分析",
    "云原生", "微服务", "分布式", "高并发", "开源",
    # 软技能
    "沟通能力", "团队合作", "团队协作", "学习能力", "责任心", "英语",
    "英文", "抗压能力", "自驱力", "执行力", "领导力",
    # 泛化协议 / 缩写
    "http", "https", "tcp", "udp", "tcp/ip", "ip", "api", "rest",
    "restful", "json", "xml", "ajax", "oop", "mvc", "sdk",
})

