"""统计视图写出"""

import json
from pathlib import Path
from typing import Dict, Union

from hiring_insight.config import AggregationConfig
from hiring_insight.exceptions import OutputWriteError
from hiring_insight.logging_config import get_logger

logger = get_logger(__name__)


def write_views(result, out_dir: Union[str, Path]) -> Dict[str, Path]:
    """
    六份视图写为 JSON (UTF-8，缩进 2，不转义中文)

    Args:
        result: AggregateResult
        out_dir: 输出目录 (不存在时创建)

    Returns:
        视图名 -> 写出的文件路径

    Raises:
        OutputWriteError: 目录无法创建或文件无法写入
    """
    out_path = Path(out_dir)
    try:
        out_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(f"无法创建输出目录 {out_path}: {e}") from e

    written: Dict[str, Path] = {}
    for key, document in result.views().items():
        path = out_path / AggregationConfig.OUTPUT_FILES[key]
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(document, f, ensure_ascii=False, indent=2)
        except OSError as e:
            raise OutputWriteError(f"无法写入 {path}: {e}") from e
        logger.info(f"  写出: {path}")
        written[key] = path

    return written
