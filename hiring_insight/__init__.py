"""
招聘趋势聚合

"谁在招人" 讨论帖中被分类为招聘的评论 -> 城市/技术栈/公司/趋势等统计视图。
"""

__version__ = "0.1.0"
