"""招聘帖数据模型

字段使用 snake_case，序列化/反序列化使用 camelCase 别名 (与前端 JSON 保持一致)。
LLM 输出的字段经常缺失或为 null，这里统一兜底为空值，聚合阶段不再做判空。
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from hiring_insight.config import AggregationConfig


class CamelModel(BaseModel):
    """camelCase 别名基类"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def coerce_str_list(value: Any) -> List[str]:
    """None -> []，单个字符串 -> [字符串]，列表中丢弃非字符串元素"""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [item for item in value if isinstance(item, str)]
    return []


class Position(CamelModel):
    """岗位 (分类为原始值，聚合前需归一化)"""
    title: str = ""
    category: Optional[str] = None

    @field_validator("title", mode="before")
    @classmethod
    def _title_not_none(cls, value: Any) -> Any:
        return "" if value is None else value


class JobPosting(CamelModel):
    """一条被分类为招聘的评论 (创建后只读)"""

    # 标识
    id: str = Field("", description="确定性 ID: '{issueNumber}-{commentId}'")
    issue_number: int = 0
    comment_id: int = 0

    # 时间分组键 ("YYYY-MM"，缺失为 "unknown")
    year_month: str = AggregationConfig.UNKNOWN_MONTH

    # 溯源 (不参与聚合)
    author: str = ""
    raw_content: str = ""

    # 公司
    company: str = ""
    company_type: Optional[str] = None

    # 岗位 / 地点
    positions: List[Position] = Field(default_factory=list)
    location: List[str] = Field(default_factory=list)
    is_remote: bool = False
    is_overseas: bool = False

    # 待遇 / 要求
    salary_range: Optional[str] = None
    tech_stack: List[str] = Field(default_factory=list)
    experience_req: Optional[str] = None
    education_req: Optional[str] = None
    contact: Optional[str] = None

    @field_validator("year_month", mode="before")
    @classmethod
    def _default_month(cls, value: Any) -> Any:
        if value is None or not str(value).strip():
            return AggregationConfig.UNKNOWN_MONTH
        return str(value).strip()

    @field_validator("author", "raw_content", "company", mode="before")
    @classmethod
    def _str_not_none(cls, value: Any) -> Any:
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
        positions = []
        for item in value:
            if isinstance(item, str):
                positions.append({"title": item})
            elif isinstance(item, (dict, Position)):
                positions.append(item)
        return positions

    def to_dict(self) -> dict:
        """JSON 序列化用 (camelCase，省略 None)"""
        return self.model_dump(by_alias=True, exclude_none=True)


class SkippedComment(CamelModel):
    """非招聘评论 (求职/其他)"""
    comment_id: int
    author: str = ""
    reason: str = ""


class CommentError(CamelModel):
    """解析失败的评论 (下次运行自动重试)"""
    comment_id: int
    error: str = ""


class RawComment(CamelModel):
    """讨论帖原始评论"""
    id: int
    author: str = ""
    body: str = ""
    created_at: str = ""
    is_minimized: bool = False


class ParsedIssue(CamelModel):
    """单个讨论帖的解析结果文件 (data/parsed/{issueNumber}.json)"""
    issue_number: int
    year_month: str = AggregationConfig.UNKNOWN_MONTH
    postings: List[JobPosting] = Field(default_factory=list)
    skipped: List[SkippedComment] = Field(default_factory=list)
    errors: List[CommentError] = Field(default_factory=list)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
