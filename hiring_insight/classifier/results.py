"""分类器输出处理

LLM 对每条评论返回一个带 type 判别字段的 JSON 对象:
    - hiring: 招聘帖，携带结构化字段
    - job_seeking / other: 非招聘，只携带判断理由

这里负责把模型文本还原为结果对象、构建 JobPosting 以及增量合并解析结果文件。
网络调用/并发不在本模块范围内。
"""

import json
import re
from typing import Annotated, Any, Iterable, List, Literal, Optional, Tuple, Union

from pydantic import Field, TypeAdapter, ValidationError, field_validator

from hiring_insight.config import AggregationConfig
from hiring_insight.exceptions import ClassifierOutputError
from hiring_insight.logging_config import get_logger
from hiring_insight.models.posting import (
    CamelModel,
    CommentError,
    JobPosting,
    ParsedIssue,
    Position,
    RawComment,
    SkippedComment,
    coerce_str_list,
)

logger = get_logger(__name__)

# 讨论帖作者的评论是每月汇总，不是招聘内容
DEFAULT_ISSUE_AUTHOR = "ruanyf"

CODE_FENCE_OPEN = re.compile(r"^[\s\S]*?```(?:json)?\s*", re.IGNORECASE)
CODE_FENCE_CLOSE = re.compile(r"\s*```[\s\S]*$")
YEAR_MONTH_PATTERN = re.compile(r"(\d{4})\s*年\s*(\d{1,2})\s*月")
YEAR_PATTERN = re.compile(r"(\d{4})")


class HiringResult(CamelModel):
    """招聘帖提取结果"""
    type: Literal["hiring"]
    company: str = ""
    company_type: Optional[str] = None
    positions: List[Position] = Field(default_factory=list)
    location: List[str] = Field(default_factory=list)
    is_remote: bool = False
    is_overseas: bool = False
    salary_range: Optional[str] = None
    tech_stack: List[str] = Field(default_factory=list)
    experience_req: Optional[str] = None
    education_req: Optional[str] = None
    contact: Optional[str] = None

    @field_validator("company", mode="before")
    @classmethod
    def _company_not_none(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("is_remote", "is_overseas", mode="before")
    @classmethod
    def _bool_not_none(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("location", "tech_stack", mode="before")
    @classmethod
    def _str_list(cls, value: Any) -> List[str]:
        return coerce_str_list(value)

    @field_validator("positions", mode="before")
    @classmethod
    def _position_list(cls, value: Any) -> List[Any]:
        if not isinstance(value, (list, tuple)):
            return []
        return [{"title": item} if isinstance(item, str) else item
                for item in value if isinstance(item, (str, dict))]


class SkipResult(CamelModel):
    """求职帖/其他"""
    type: Literal["job_seeking", "other"]
    reason: str = ""

    @field_validator("reason", mode="before")
    @classmethod
    def _reason_str(cls, value: Any) -> Any:
        return "" if value is None else str(value)

    def describe(self) -> str:
        """SkippedComment.reason 的格式: "[type] reason" """
        return f"[{self.type}] {self.reason}"


ClassifierResult = Annotated[Union[HiringResult, SkipResult], Field(discriminator="type")]
_result_adapter = TypeAdapter(ClassifierResult)


def interpret_result(raw: Any) -> Union[HiringResult, SkipResult]:
    """
    单条分类结果 -> 结果对象

    Args:
        raw: 模型返回数组中的一个元素

    Returns:
        HiringResult 或 SkipResult；判别字段缺失/未知或结构不合法时
        返回 SkipResult(type="other")，不抛异常
    """
    if not isinstance(raw, dict):
        return SkipResult(type="other", reason=f"无法识别的结果: {type(raw).__name__}")

    try:
        return _result_adapter.validate_python(raw)
    except ValidationError as e:
        logger.debug(f"分类结果校验失败: {e.error_count()} errors, type={raw.get('type')!r}")
        return SkipResult(type="other", reason=f"无法识别的结果 (type={raw.get('type')!r})")


def strip_code_fence(text: str) -> str:
    """去掉 ```json ... ``` 包裹；去掉后为空则返回原文"""
    cleaned = CODE_FENCE_CLOSE.sub("", CODE_FENCE_OPEN.sub("", text, count=1), count=1).strip()
    return cleaned or text.strip()


def parse_batch_response(text: str, expected: int) -> List[Union[HiringResult, SkipResult]]:
    """
    批量分类响应文本 -> 结果列表

    Args:
        text: 模型原始输出
        expected: 本批评论数

    Returns:
        与输入评论一一对应的结果列表

    Raises:
        ClassifierOutputError: 非 JSON 或结果数量不一致
    """
    cleaned = strip_code_fence(text or "")
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ClassifierOutputError(f"JSON 解析失败: {e}") from e

    # 单条评论时模型常返回单个对象
    if not isinstance(parsed, list):
        parsed = [parsed]

    if len(parsed) != expected:
        raise ClassifierOutputError(f"期望返回 {expected} 个结果，实际返回 {len(parsed)}")

    return [interpret_result(item) for item in parsed]


def build_posting(
    issue_number: int,
    year_month: str,
    comment: RawComment,
    result: HiringResult,
) -> JobPosting:
    """招聘结果 + 评论 -> JobPosting (id 为 "{issueNumber}-{commentId}")"""
    return JobPosting(
        id=f"{issue_number}-{comment.id}",
        issue_number=issue_number,
        comment_id=comment.id,
        year_month=year_month,
        author=comment.author,
        raw_content=comment.body,
        company=result.company,
        company_type=result.company_type,
        positions=result.positions,
        location=result.location,
        is_remote=result.is_remote,
        is_overseas=result.is_overseas,
        salary_range=result.salary_range,
        tech_stack=result.tech_stack,
        experience_req=result.experience_req,
        education_req=result.education_req,
        contact=result.contact,
    )


def select_pending_comments(
    comments: Iterable[RawComment],
    existing: Optional[ParsedIssue] = None,
    issue_author: str = DEFAULT_ISSUE_AUTHOR,
) -> Tuple[List[RawComment], List[SkippedComment]]:
    """
    筛选需要送去分类的评论

    已解析 (postings/skipped) 和被折叠的评论跳过；errors 中的评论不算已解析，会被重试。
    讨论帖作者的汇总评论直接记为 skipped。

    Returns:
        (待分类评论, 作者汇总评论的 skipped 记录)
    """
    resolved = set()
    if existing:
        resolved.update(p.comment_id for p in existing.postings)
        resolved.update(s.comment_id for s in existing.skipped)

    pending: List[RawComment] = []
    author_skipped: List[SkippedComment] = []
    for comment in comments:
        if comment.id in resolved or comment.is_minimized:
            continue
        if comment.author == issue_author:
            author_skipped.append(SkippedComment(
                comment_id=comment.id,
                author=comment.author,
                reason="[other] Issue 作者汇总帖，跳过",
            ))
            continue
        pending.append(comment)
    return pending, author_skipped


def merge_parsed_issue(
    existing: Optional[ParsedIssue],
    issue_number: int,
    year_month: str,
    postings: List[JobPosting],
    skipped: List[SkippedComment],
    errors: List[CommentError],
) -> ParsedIssue:
    """
    增量合并解析结果

    - 保留已有 postings/skipped，追加本次结果 (同一 id/commentId 不重复)
    - 旧 errors 中本次已解决的评论被移除
    - 本次失败的评论追加到 errors，下次运行重试

    Args:
        existing: 已有解析结果 (首次解析为 None)
        issue_number: 讨论帖编号
        year_month: 讨论帖月份
        postings: 本次新增招聘帖
        skipped: 本次新增非招聘评论
        errors: 本次失败评论

    Returns:
        合并后的 ParsedIssue
    """
    old_postings = list(existing.postings) if existing else []
    old_skipped = list(existing.skipped) if existing else []
    old_errors = list(existing.errors) if existing else []

    seen_ids = {p.id for p in old_postings}
    merged_postings = list(old_postings)
    for posting in postings:
        if posting.id not in seen_ids:
            seen_ids.add(posting.id)
            merged_postings.append(posting)

    seen_skipped = {s.comment_id for s in old_skipped}
    merged_skipped = list(old_skipped)
    for item in skipped:
        if item.comment_id not in seen_skipped:
            seen_skipped.add(item.comment_id)
            merged_skipped.append(item)

    resolved = {p.comment_id for p in postings} | {s.comment_id for s in skipped}
    remaining_errors = [e for e in old_errors if e.comment_id not in resolved]

    return ParsedIssue(
        issue_number=issue_number,
        year_month=year_month,
        postings=merged_postings,
        skipped=merged_skipped,
        errors=remaining_errors + list(errors),
    )


def extract_year_month(title: Any) -> str:
    """
    讨论帖标题 -> "YYYY-MM"

    Examples:
        >>> extract_year_month("谁在招人？（2024年1月）")
        '2024-01'
        >>> extract_year_month("2023 招聘汇总")
        '2023-01'
        >>> extract_year_month("招聘")
        'unknown'
    """
    if not isinstance(title, str):
        return AggregationConfig.UNKNOWN_MONTH

    match = YEAR_MONTH_PATTERN.search(title)
    if match:
        return f"{match.group(1)}-{int(match.group(2)):02d}"

    match = YEAR_PATTERN.search(title)
    if match:
        return f"{match.group(1)}-01"

    return AggregationConfig.UNKNOWN_MONTH
