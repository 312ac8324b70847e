"""Mock 招聘帖生成 (前端开发用)

解析结果目录为空时生成 2019-08 ~ 2026-02 的模拟数据:
早期帖数少逐年增长，2023 下半年至 2024 回落，2025 起 AI 岗位增多。
使用独立的 random.Random 实例，相同 seed 生成完全相同的数据。
"""

import random
import re
from typing import List, Optional

from hiring_insight.models.posting import JobPosting

MOCK_START = (2019, 8)
MOCK_END = (2026, 2)

CITIES = ["北京", "上海", "深圳", "杭州", "广州", "成都", "南京", "武汉", "苏州", "厦门", "远程"]

COMPANIES = [
    ("字节跳动", "大厂"),
    ("阿里巴巴", "大厂"),
    ("腾讯", "大厂"),
    ("美团", "大厂"),
    ("拼多多", "大厂"),
    ("小红书", "大厂"),
    ("蚂蚁集团", "大厂"),
    ("快手", "大厂"),
    ("Shopify", "外企"),
    ("Google", "外企"),
    ("Microsoft", "外企"),
    ("Amazon", "外企"),
    ("智谱AI", "创业"),
    ("月之暗面", "创业"),
    ("零一万物", "创业"),
    ("PingCAP", "创业"),
    ("涛思数据", "创业"),
    ("声网", "创业"),
    ("极氪", "创业"),
    ("中国银行软件中心", "国企"),
    ("中兴通讯", "国企"),
]

TECH_STACKS = [
    ["React", "TypeScript", "Node.js", "MySQL"],
    ["Vue", "JavaScript", "Python", "PostgreSQL"],
    ["React", "TypeScript", "Go", "Redis", "Kubernetes"],
    ["Java", "Spring Boot", "MySQL", "Redis", "Docker"],
    ["Python", "Django", "PostgreSQL", "AWS"],
    ["Go", "gRPC", "Kubernetes", "Docker", "Linux"],
    ["React", "Next.js", "TypeScript", "MongoDB"],
    ["Vue", "TypeScript", "Node.js", "Elasticsearch"],
    ["Python", "PyTorch", "TensorFlow", "LLM"],
    ["Rust", "C++", "Linux", "Docker"],
    ["React Native", "TypeScript", "Node.js"],
    ["Flutter", "Dart", "Go", "PostgreSQL"],
    ["Java", "Spring", "Kafka", "Redis", "MySQL"],
    ["Python", "FastAPI", "PostgreSQL", "Docker", "AWS"],
    ["TypeScript", "NestJS", "GraphQL", "MongoDB"],
]

POSITION_SETS = [
    [("高级前端工程师", "前端")],
    [("后端开发工程师", "后端")],
    [("全栈工程师", "全栈")],
    [("AI算法工程师", "AI/ML")],
    [("DevOps工程师", "DevOps")],
    [("iOS开发工程师", "移动端")],
    [("Android开发工程师", "移动端")],
    [("数据工程师", "数据")],
    [("测试工程师", "测试")],
    [("前端开发", "前端"), ("后端开发", "后端")],
]

AI_STACK = ["Python", "PyTorch", "LLM", "TypeScript"]
AI_POSITIONS = [("AI算法工程师", "AI/ML")]

SALARY_RANGES: List[Optional[str]] = [
    "15k-25k", "20k-35k", "25k-40k", "30k-50k", "40k-60k",
    "20-40万/年", "15k-20k", "10k-15k", None, None, "面议",
]
EXPERIENCE_REQS: List[Optional[str]] = ["1-3年", "3-5年", "5年以上", "不限", "1年以上", "2-4年", None]
EDUCATION_REQS: List[Optional[str]] = ["本科", "硕士", "本科及以上", "不限", None]


def mock_months() -> List[str]:
    """MOCK_START ~ MOCK_END 的全部 "YYYY-MM" """
    months = []
    year, month = MOCK_START
    while (year, month) <= MOCK_END:
        months.append(f"{year}-{month:02d}")
        month += 1
        if month > 12:
            year, month = year + 1, 1
    return months


def _posting_count(rng: random.Random, year: int, month: int) -> int:
    count = 15 + (year - 2019) * 5 + rng.randrange(10)
    if (year == 2023 and month >= 7) or year == 2024:
        count = max(10, count - 8)
    if year >= 2025:
        count += 5
    return max(5, count)


def _city_pool(company_type: str) -> List[str]:
    if company_type == "创业":
        return CITIES[:8] + ["远程", "远程"]
    if company_type == "外企":
        return ["上海", "北京", "远程"]
    return CITIES[:6]


def generate_mock_postings(seed: int = 42) -> List[JobPosting]:
    """
    生成模拟招聘帖

    Args:
        seed: 随机种子

    Returns:
        JobPosting 列表 (约 2000 条)
    """
    rng = random.Random(seed)
    postings: List[JobPosting] = []
    id_counter = 1

    for year_month in mock_months():
        year, month = (int(part) for part in year_month.split("-"))
        issue_number = 1000 + (year - 2019) * 100 + month

        for _ in range(_posting_count(rng, year, month)):
            company, company_type = rng.choice(COMPANIES)
            stack = list(rng.choice(TECH_STACKS))
            positions = list(rng.choice(POSITION_SETS))
            salary = rng.choice(SALARY_RANGES)
            experience = rng.choice(EXPERIENCE_REQS)
            education = rng.choice(EDUCATION_REQS)

            location = [rng.choice(_city_pool(company_type))]
            is_remote = location[0] == "远程" or rng.random() < 0.12
            is_overseas = company_type == "外企" and rng.random() < 0.3 and not is_remote

            if year >= 2025 and rng.random() < 0.3:
                stack = list(AI_STACK)
                positions = list(AI_POSITIONS)

            postings.append(JobPosting(
                id=f"{issue_number}-{id_counter}",
                issue_number=issue_number,
                comment_id=id_counter * 100,
                year_month=year_month,
                author=f"user{rng.randrange(500)}",
                raw_content="(mock data)",
                company=company,
                company_type=company_type,
                positions=[{"title": title, "category": category} for title, category in positions],
                location=location,
                is_remote=is_remote,
                is_overseas=is_overseas,
                salary_range=salary,
                tech_stack=stack,
                experience_req=experience,
                education_req=education,
                contact=f"hr@{re.sub(r'[^a-z]', '', company.lower()) or 'company'}.com",
            ))
            id_counter += 1

    return postings
