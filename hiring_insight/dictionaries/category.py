"""岗位分类词典

CATEGORY_SYNONYMS 的值为标准分类名，或 EXCLUDE (非技术岗位，整条不计入分类统计)。
"""

from enum import Enum
from types import MappingProxyType
from typing import Union


class CategoryExclusion(Enum):
    """非技术岗位标记"""
    EXCLUDE = "exclude"


EXCLUDE = CategoryExclusion.EXCLUDE

OTHER_CATEGORY = "其他"

CANONICAL_CATEGORIES = (
    "前端", "后端", "全栈", "AI/ML", "数据", "DevOps", "移动端", "测试",
    "安全", "嵌入式", "游戏", "产品", "设计", OTHER_CATEGORY,
)

CategoryTarget = Union[str, CategoryExclusion]

# key 为小写
CATEGORY_SYNONYMS = MappingProxyType({
    # 前端
    "frontend": "前端",
    "front-end": "前端",
    "front end": "前端",
    "web前端": "前端",
    "前端开发": "前端",
    "大前端": "前端",
    "h5": "前端",
    # 后端
    "backend": "后端",
    "back-end": "后端",
    "back end": "后端",
    "后端开发": "后端",
    "服务端": "后端",
    "服务器端": "后端",
    "server": "后端",
    "java开发": "后端",
    "go开发": "后端",
    "架构": "后端",
    "架构师": "后端",
    # 全栈
    "fullstack": "全栈",
    "full stack": "全栈",
    "full-stack": "全栈",
    "全栈开发": "全栈",
    # AI/ML
    "ai": "AI/ML",
    "ml": "AI/ML",
    "ai/ml": "AI/ML",
    "算法": "AI/ML",
    "算法工程师": "AI/ML",
    "机器学习": "AI/ML",
    "深度学习": "AI/ML",
    "人工智能": "AI/ML",
    "大模型": "AI/ML",
    "llm": "AI/ML",
    "nlp": "AI/ML",
    "cv": "AI/ML",
    "计算机视觉": "AI/ML",
    # 数据
    "data": "数据",
    "大数据": "数据",
    "数据开发": "数据",
    "数据工程": "数据",
    "数据分析": "数据",
    "数据仓库": "数据",
    "数仓": "数据",
    "bi": "数据",
    "dba": "数据",
    # DevOps
    "devops": "DevOps",
    "运维": "DevOps",
    "sre": "DevOps",
    "运维开发": "DevOps",
    "基础架构": "DevOps",
    "基础设施": "DevOps",
    "infra": "DevOps",
    "云原生": "DevOps",
    # 移动端
    "mobile": "移动端",
    "ios": "移动端",
    "android": "移动端",
    "安卓": "移动端",
    "客户端": "移动端",
    "移动开发": "移动端",
    "flutter": "移动端",
    "app": "移动端",
    # 测试
    "qa": "测试",
    "test": "测试",
    "测试开发": "测试",
    "自动化测试": "测试",
    "质量保障": "测试",
    # 安全
    "security": "安全",
    "信息安全": "安全",
    "网络安全": "安全",
    "安全工程师": "安全",
    # 嵌入式
    "embedded": "嵌入式",
    "嵌入式开发": "嵌入式",
    "硬件": "嵌入式",
    "iot": "嵌入式",
    "物联网": "嵌入式",
    "驱动开发": "嵌入式",
    # 游戏
    "game": "游戏",
    "游戏开发": "游戏",
    "游戏客户端": "游戏",
    "unity": "游戏",
    # 产品
    "product": "产品",
    "产品经理": "产品",
    "pm": "产品",
    # 设计
    "design": "设计",
    "设计师": "设计",
    "ui": "设计",
    "ux": "设计",
    "ui/ux": "设计",
    "ui设计": "设计",
    "交互设计": "设计",
    "视觉设计": "设计",
    # 非技术岗位
    "hr": EXCLUDE,
    "hrbp": EXCLUDE,
    "人事": EXCLUDE,
    "人力资源": EXCLUDE,
    "招聘": EXCLUDE,
    "法务": EXCLUDE,
    "legal": EXCLUDE,
    "律师": EXCLUDE,
    "财务": EXCLUDE,
    "会计": EXCLUDE,
    "finance": EXCLUDE,
    "销售": EXCLUDE,
    "sales": EXCLUDE,
    "商务": EXCLUDE,
    "bd": EXCLUDE,
    "市场": EXCLUDE,
    "marketing": EXCLUDE,
    "运营": EXCLUDE,
    "行政": EXCLUDE,
    "客服": EXCLUDE,
    "编辑": EXCLUDE,
})
