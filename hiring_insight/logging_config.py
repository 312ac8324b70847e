"""日志配置模块"""

import logging
import sys
import time
import functools
from dataclasses import is_dataclass
from typing import Optional, Any
from contextlib import contextmanager

from hiring_insight.config import settings


# 日志器名称常量
LOGGER_NAME = "hiring_insight"


def setup_logger(
    name: str = LOGGER_NAME,
    level: Optional[int] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    配置日志器

    Args:
        name: 日志器名称
        level: 日志级别 (None 时使用 settings.LOG_LEVEL)
        log_file: 文件输出路径 (None 时使用 settings.LOG_FILE)

    Returns:
        配置好的日志器
    """
    logger = logging.getLogger(name)

    # 已配置过 handler 则跳过
    if logger.handlers:
        return logger

    if level is None:
        level_name = getattr(settings, "LOG_LEVEL", "INFO").upper()
        level = getattr(logging, level_name, logging.INFO)
    logger.setLevel(level)

    if log_file is None:
        log_file = getattr(settings, "LOG_FILE", None)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """返回日志器实例"""
    logger = logging.getLogger(name)
    if not logger.handlers:
        return setup_logger(name)
    return logger


# ========== 装饰器 ==========

def log_function(logger: Optional[logging.Logger] = None):
    """
    函数进入/退出 + 耗时日志装饰器

    Usage:
        @log_function()
        def aggregate(postings):
            ...
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            _logger = logger or get_logger()
            func_name = func.__name__

            _logger.debug(f"[ENTER] {func_name}")
            start_time = time.perf_counter()

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                elapsed = time.perf_counter() - start_time
                _logger.error(f"[ERROR] {func_name} failed: {e} ({elapsed:.2f}s)")
                raise

            elapsed = time.perf_counter() - start_time
            _logger.debug(f"[EXIT] {func_name} -> {_format_result_preview(result)} ({elapsed:.2f}s)")
            return result

        return wrapper

    return decorator


@contextmanager
def log_timing(operation: str, logger: Optional[logging.Logger] = None):
    """
    上下文管理器形式的阶段耗时统计

    Usage:
        with log_timing("加载解析结果"):
            postings = load_all_postings(parsed_dir)
    """
    _logger = logger or get_logger()
    start_time = time.perf_counter()
    _logger.debug(f"[START] {operation}")

    try:
        yield
    finally:
        elapsed = time.perf_counter() - start_time
        _logger.debug(f"[END] {operation} ({elapsed:.2f}s)")


# ========== 汇总日志 ==========

def log_aggregate_summary(logger: logging.Logger, result: Any, source: str):
    """聚合完成后输出统计摘要

    Args:
        logger: 日志器
        result: AggregateResult
        source: 数据来源描述 ("真实数据" / "Mock 数据")
    """
    overview = result.overview
    date_range = overview["dateRange"]

    logger.info("=== 聚合完成 ===")
    logger.info(f"  数据来源: {source}")
    logger.info(f"  招聘帖总数: {overview['totalPostings']}")
    logger.info(f"  覆盖月份: {overview['totalMonths']}")
    if date_range["start"]:
        logger.info(f"  时间范围: {date_range['start']} ~ {date_range['end']}")
    logger.info(f"  城市数: {len(result.city_stats['rankings'])}")
    logger.info(f"  技术栈数: {len(result.tech_stats['rankings'])}")
    logger.info(f"  公司数: {len(result.company_stats['rankings'])}")
    if result.totals.experience:
        logger.info(f"  经验要求分布: {dict(result.totals.experience)}")
    if result.totals.education:
        logger.info(f"  学历要求分布: {dict(result.totals.education)}")


# ========== 工具 ==========

def _format_result_preview(result: Any, max_len: int = 100) -> str:
    """结果预览格式化"""
    if result is None:
        return "None"
    if isinstance(result, (list, tuple)):
        return f"[{len(result)} items]"
    if isinstance(result, dict):
        return f"{{{len(result)} keys}}"
    if is_dataclass(result):
        return f"<{type(result).__name__}>"
    return _truncate(repr(result), max_len)


def _truncate(text: Any, max_len: int) -> str:
    """截断文本"""
    text = str(text)
    if len(text) <= max_len:
        return text
    return text[:max_len - 3] + "..."
