"""分类器输出处理测试"""

import json

import pytest

from hiring_insight.classifier import (
    HiringResult,
    SkipResult,
    build_posting,
    extract_year_month,
    interpret_result,
    merge_parsed_issue,
    parse_batch_response,
    select_pending_comments,
    strip_code_fence,
)
from hiring_insight.exceptions import ClassifierOutputError
from hiring_insight.models import CommentError, ParsedIssue, RawComment, SkippedComment


HIRING = {
    "type": "hiring",
    "company": "PingCAP",
    "companyType": "创业",
    "positions": [{"title": "数据库内核工程师", "category": "后端"}],
    "location": ["北京", "远程"],
    "isRemote": True,
    "isOverseas": False,
    "salaryRange": "30k-50k",
    "techStack": ["Go", "Rust"],
    "experienceReq": "3年以上",
    "educationReq": None,
    "contact": "hire@pingcap.com",
}


class TestInterpretResult:
    """interpret_result 测试"""

    def test_hiring(self):
        result = interpret_result(HIRING)
        assert isinstance(result, HiringResult)
        assert result.company == "PingCAP"
        assert result.is_remote is True
        assert result.positions[0].category == "后端"

    def test_hiring_with_nulls(self):
        result = interpret_result({"type": "hiring", "company": None, "location": None, "isRemote": None})
        assert isinstance(result, HiringResult)
        assert result.company == ""
        assert result.location == []
        assert result.is_remote is False

    @pytest.mark.parametrize("kind", ["job_seeking", "other"])
    def test_skip(self, kind):
        result = interpret_result({"type": kind, "reason": "个人求职"})
        assert isinstance(result, SkipResult)
        assert result.type == kind
        assert result.describe() == f"[{kind}] 个人求职"

    @pytest.mark.parametrize("raw", [
        {"type": "advert"},
        {"company": "无判别字段"},
        {"type": "hiring", "isRemote": "maybe"},
        "hiring",
        None,
        [HIRING],
    ])
    def test_malformed_becomes_other(self, raw):
        result = interpret_result(raw)
        assert isinstance(result, SkipResult)
        assert result.type == "other"


class TestParseBatchResponse:
    """parse_batch_response 测试"""

    def test_plain_array(self):
        text = json.dumps([HIRING, {"type": "other", "reason": "闲聊"}], ensure_ascii=False)
        results = parse_batch_response(text, expected=2)
        assert isinstance(results[0], HiringResult)
        assert isinstance(results[1], SkipResult)

    def test_code_fence_stripped(self):
        text = "好的，结果如下:\n```json\n" + json.dumps([HIRING]) + "\n```\n以上。"
        assert isinstance(parse_batch_response(text, expected=1)[0], HiringResult)

    def test_single_object_wrapped(self):
        results = parse_batch_response(json.dumps({"type": "other", "reason": "x"}), expected=1)
        assert len(results) == 1

    def test_length_mismatch(self):
        with pytest.raises(ClassifierOutputError, match="期望返回 3"):
            parse_batch_response(json.dumps([HIRING]), expected=3)

    def test_not_json(self):
        with pytest.raises(ClassifierOutputError):
            parse_batch_response("抱歉，我无法处理", expected=1)

    def test_strip_code_fence_without_fence(self):
        assert strip_code_fence("  [1]  ") == "[1]"


class TestBuildPosting:
    """build_posting 测试"""

    def test_deterministic_id_and_fields(self):
        comment = RawComment(id=987, author="alice", body="招聘 Go 工程师")
        posting = build_posting(1500, "2024-06", comment, interpret_result(HIRING))

        assert posting.id == "1500-987"
        assert posting.issue_number == 1500
        assert posting.comment_id == 987
        assert posting.year_month == "2024-06"
        assert posting.author == "alice"
        assert posting.raw_content == "招聘 Go 工程师"
        assert posting.tech_stack == ["Go", "Rust"]
        assert posting.education_req is None

    def test_same_comment_same_id(self):
        comment = RawComment(id=1, author="a", body="b")
        result = interpret_result(HIRING)
        assert build_posting(10, "2024-01", comment, result).id == build_posting(10, "2024-01", comment, result).id


class TestIncrementalParsing:
    """select_pending_comments / merge_parsed_issue 测试"""

    @pytest.fixture
    def existing(self, make_posting):
        return ParsedIssue(
            issue_number=1000,
            year_month="2024-01",
            postings=[make_posting(id="1000-1", comment_id=1)],
            skipped=[SkippedComment(comment_id=2, author="bob", reason="[job_seeking] 求职")],
            errors=[
                CommentError(comment_id=3, error="timeout"),
                CommentError(comment_id=4, error="timeout"),
            ],
        )

    def test_select_pending(self, existing):
        comments = [
            RawComment(id=1, author="a", body=""),
            RawComment(id=2, author="bob", body=""),
            RawComment(id=3, author="c", body=""),
            RawComment(id=5, author="d", body="", is_minimized=True),
            RawComment(id=6, author="ruanyf", body="本月汇总"),
            RawComment(id=7, author="e", body=""),
        ]
        pending, author_skipped = select_pending_comments(comments, existing)

        # errors 中的评论会被重试
        assert [c.id for c in pending] == [3, 7]
        assert [s.comment_id for s in author_skipped] == [6]

    def test_select_pending_without_existing(self):
        comments = [RawComment(id=1, author="a", body="")]
        pending, author_skipped = select_pending_comments(comments)
        assert [c.id for c in pending] == [1]
        assert author_skipped == []

    def test_merge_keeps_old_and_resolves_errors(self, existing, make_posting):
        new_posting = make_posting(id="1000-3", comment_id=3)
        merged = merge_parsed_issue(
            existing,
            issue_number=1000,
            year_month="2024-01",
            postings=[new_posting],
            skipped=[SkippedComment(comment_id=6, author="ruanyf", reason="[other] 汇总")],
            errors=[CommentError(comment_id=7, error="bad json")],
        )

        assert [p.id for p in merged.postings] == ["1000-1", "1000-3"]
        assert [s.comment_id for s in merged.skipped] == [2, 6]
        assert [e.comment_id for e in merged.errors] == [4, 7]

    def test_merge_never_duplicates(self, existing, make_posting):
        merged = merge_parsed_issue(
            existing,
            issue_number=1000,
            year_month="2024-01",
            postings=[make_posting(id="1000-1", comment_id=1)],
            skipped=[SkippedComment(comment_id=2, author="bob")],
            errors=[],
        )
        assert len(merged.postings) == 1
        assert len(merged.skipped) == 1

    def test_merge_first_run(self, make_posting):
        merged = merge_parsed_issue(
            None,
            issue_number=2000,
            year_month="2025-03",
            postings=[make_posting(id="2000-1")],
            skipped=[],
            errors=[],
        )
        assert merged.issue_number == 2000
        assert merged.year_month == "2025-03"
        assert len(merged.postings) == 1
        assert merged.errors == []


class TestExtractYearMonth:
    """extract_year_month 测试"""

    @pytest.mark.parametrize("title, expected", [
        ("谁在招人？（2024年1月）", "2024-01"),
        ("谁在招人（2024年12月）", "2024-12"),
        ("谁在招人？(2023 年 7 月)", "2023-07"),
        ("2022 招聘汇总", "2022-01"),
        ("谁在招人", "unknown"),
        (None, "unknown"),
    ])
    def test_titles(self, title, expected):
        assert extract_year_month(title) == expected
