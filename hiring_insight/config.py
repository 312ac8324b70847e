from pydantic_settings import BaseSettings
from typing import Dict, Optional


class Settings(BaseSettings):
    # Paths
    PARSED_DIR: str = "data/parsed"
    OUTPUT_DIR: str = "src/data"

    # Environment
    ENVIRONMENT: str = "development"

    # Logging
    LOG_LEVEL: str = "INFO"  # DEBUG, INFO, WARNING, ERROR
    LOG_FILE: Optional[str] = None  # 文件日志路径 (None 则只输出到控制台)

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()


# ========== 聚合常量 (集中管理) ==========

class AggregationConfig:
    """聚合/归一化相关常量集中管理"""

    # Rankings
    OVERVIEW_TOP_N = 10
    TREND_TOP_N = 20

    # 长尾过滤阈值
    TECH_MIN_COUNT = 3
    CATEGORY_MIN_COUNT = 5

    # 技术栈 token 最大长度 (超过视为描述性短语)
    TECH_MAX_LENGTH = 30

    # 城市归一化递归深度上限
    CITY_MAX_DEPTH = 3

    # 月份缺失时的占位键
    UNKNOWN_MONTH = "unknown"

    # 输出文件
    OUTPUT_FILES: Dict[str, str] = {
        "monthly_stats": "monthly-stats.json",
        "overview": "overview.json",
        "city_stats": "city-stats.json",
        "tech_stats": "tech-stats.json",
        "company_stats": "company-stats.json",
        "trend_stats": "trend-stats.json",
    }
