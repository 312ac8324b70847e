#!/usr/bin/env python3
"""招聘趋势聚合 - 解析结果 -> 六份统计 JSON

读取 data/parsed/ 下的解析结果，按月份/城市/技术栈/公司等维度聚合，
生成前端图表所需的 JSON 文件。

用法:
    hiring-insight                          # 使用 .env / 默认目录
    hiring-insight --parsed-dir data/parsed --out-dir src/data
    hiring-insight --mock-if-empty          # 无数据时生成 mock 数据
"""

import argparse
import sys
from typing import List, Optional

from hiring_insight.aggregation import Aggregator
from hiring_insight.config import settings
from hiring_insight.exceptions import OutputWriteError
from hiring_insight.logging_config import get_logger, log_aggregate_summary, log_timing
from hiring_insight.mock_data import generate_mock_postings
from hiring_insight.storage import load_all_postings, write_views

logger = get_logger("hiring_insight.main")


def run(parsed_dir: str, out_dir: str, mock_if_empty: bool = False, seed: int = 42) -> int:
    """
    聚合主流程

    Returns:
        进程退出码 (0 成功，1 输出失败)
    """
    logger.info("=== 招聘趋势数据聚合 ===")

    with log_timing("加载解析结果", logger):
        postings = load_all_postings(parsed_dir)

    source = "真实数据"
    if not postings and mock_if_empty:
        logger.info(f"{parsed_dir} 没有数据，生成 mock 数据用于开发")
        postings = generate_mock_postings(seed)
        source = "Mock 数据"
    else:
        logger.info(f"加载了 {len(postings)} 条招聘帖")

    with log_timing("聚合", logger):
        result = Aggregator().aggregate(postings)

    logger.info("写入聚合数据文件:")
    try:
        with log_timing("写出", logger):
            write_views(result, out_dir)
    except OutputWriteError as e:
        logger.error(f"输出失败: {e}")
        return 1

    log_aggregate_summary(logger, result, source)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """CLI 入口"""
    parser = argparse.ArgumentParser(
        description="招聘趋势聚合 - 解析结果 -> 统计 JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
示例:
  hiring-insight                                   # 默认目录
  hiring-insight --parsed-dir data/parsed          # 指定输入目录
  hiring-insight --mock-if-empty                   # 无数据时使用 mock 数据
        """
    )
    parser.add_argument(
        "--parsed-dir",
        default=settings.PARSED_DIR,
        help=f"解析结果目录 (默认: {settings.PARSED_DIR})",
    )
    parser.add_argument(
        "--out-dir",
        default=settings.OUTPUT_DIR,
        help=f"输出目录 (默认: {settings.OUTPUT_DIR})",
    )
    parser.add_argument(
        "--mock-if-empty",
        action="store_true",
        help="解析结果为空时生成 mock 数据 (前端开发用)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="mock 数据随机种子",
    )

    args = parser.parse_args(argv)
    return run(
        parsed_dir=args.parsed_dir,
        out_dir=args.out_dir,
        mock_if_empty=args.mock_if_empty,
        seed=args.seed,
    )


if __name__ == "__main__":
    sys.exit(main())
