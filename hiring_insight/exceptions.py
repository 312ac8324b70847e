"""聚合流程自定义异常模块"""


class InsightError(Exception):
    """基础异常"""
    pass


class SourceFileError(InsightError):
    """单个解析结果文件损坏/无法读取 (跳过该文件)"""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class ClassifierOutputError(InsightError):
    """分类模型返回内容无法解析为预期结构"""
    pass


class OutputWriteError(InsightError):
    """输出目录/文件不可写"""
    pass
