"""薪资分桶 (月薪 k)"""

# (上界, 标签): 区间左闭右开，最后一档无上界
SALARY_BANDS = (
    (10, "<10k"),
    (15, "10k-15k"),
    (20, "15k-20k"),
    (25, "20k-25k"),
    (30, "25k-30k"),
    (40, "30k-40k"),
    (50, "40k-50k"),
    (None, "50k+"),
)

SALARY_BAND_ORDER = tuple(label for _, label in SALARY_BANDS)

NEGOTIABLE_PATTERN = r"面议|议|暂无|不限|competitive|negotiable"
