"""
pytest fixtures for hiring_insight tests
"""
import itertools
import json
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from hiring_insight.models import JobPosting


@pytest.fixture
def make_posting():
    """JobPosting 工厂 (id/commentId 自增，其余字段默认为空)"""
    counter = itertools.count(1)

    def _make(**overrides) -> JobPosting:
        n = next(counter)
        data = {
            "id": f"1000-{n}",
            "issue_number": 1000,
            "comment_id": n,
            "year_month": "2024-01",
            "author": f"user{n}",
            "raw_content": "(test)",
        }
        data.update(overrides)
        return JobPosting(**data)

    return _make


@pytest.fixture
def sample_posting_dict():
    """解析结果文件中的一条招聘帖 (camelCase)"""
    return {
        "id": "1234-5678",
        "issueNumber": 1234,
        "commentId": 5678,
        "yearMonth": "2024-03",
        "author": "hr_zhang",
        "rawContent": "【字节跳动】招聘高级前端工程师，base 北京/上海，25k-40k",
        "company": "字节跳动",
        "companyType": "大厂",
        "positions": [{"title": "高级前端工程师", "category": "前端"}],
        "location": ["北京", "上海"],
        "isRemote": False,
        "isOverseas": False,
        "salaryRange": "25k-40k",
        "techStack": ["React", "TypeScript", "Node.js"],
        "experienceReq": "3-5年",
        "educationReq": "本科及以上",
        "contact": "hr@bytedance.com",
    }


@pytest.fixture
def parsed_dir(tmp_path):
    """空的解析结果目录"""
    directory = tmp_path / "parsed"
    directory.mkdir()
    return directory


@pytest.fixture
def write_issue(parsed_dir):
    """写入一个解析结果文件: write_issue(issue_number, postings, **extra)"""

    def _write(issue_number: int, postings, **extra) -> Path:
        data = {
            "issueNumber": issue_number,
            "yearMonth": extra.pop("year_month", "2024-01"),
            "postings": postings,
            "skipped": extra.pop("skipped", []),
            "errors": extra.pop("errors", []),
        }
        path = parsed_dir / f"{issue_number}.json"
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path

    return _write
