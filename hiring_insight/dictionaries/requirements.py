"""经验/学历要求词典"""

from types import MappingProxyType

# ========== 经验 ==========

EXP_UNLIMITED = "不限"
EXP_NEW_GRAD = "应届/实习"
EXP_1_3 = "1-3年"
EXP_3_5 = "3-5年"
EXP_5_10 = "5-10年"
EXP_10_PLUS = "10年以上"
EXP_OTHER = "其他"

EXPERIENCE_BUCKETS = (
    EXP_UNLIMITED, EXP_NEW_GRAD, EXP_1_3, EXP_3_5, EXP_5_10, EXP_10_PLUS, EXP_OTHER,
)

# (下界年数, 分桶), 按下界降序匹配
EXPERIENCE_YEAR_BOUNDARIES = (
    (10, EXP_10_PLUS),
    (5, EXP_5_10),
    (3, EXP_3_5),
    (1, EXP_1_3),
    (0, EXP_NEW_GRAD),
)

EXPERIENCE_UNLIMITED_KEYWORDS = (
    "不限", "无要求", "无经验要求", "经验不限", "无需经验", "no experience",
)

EXPERIENCE_NEW_GRAD_KEYWORDS = (
    "应届", "实习", "校招", "毕业生", "在校", "intern", "new grad", "graduate",
)

EXPERIENCE_SENIOR_KEYWORDS = (
    "社招", "有经验", "经验丰富", "相关经验", "experienced",
)

# 阿里系职级 P 序列 -> 近似经验分桶
SENIORITY_LEVEL_BUCKETS = MappingProxyType({
    4: EXP_NEW_GRAD,
    5: EXP_1_3,
    6: EXP_3_5,
    7: EXP_5_10,
    8: EXP_10_PLUS,
})

# 十 单独处理 ("十五" -> 15, "二十" -> 20)
CHINESE_DIGITS = MappingProxyType({
    "一": 1, "二": 2, "两": 2, "三": 3, "四": 4, "五": 5,
    "六": 6, "七": 7, "八": 8, "九": 9,
})


# ========== 学历 ==========

EDU_UNLIMITED = "不限"
EDU_ASSOCIATE = "大专及以上"
EDU_BACHELOR = "本科及以上"
EDU_MASTER = "硕士及以上"
EDU_DOCTORATE = "博士"
EDU_OTHER = "其他"

EDUCATION_BUCKETS = (
    EDU_UNLIMITED, EDU_ASSOCIATE, EDU_BACHELOR, EDU_MASTER, EDU_DOCTORATE, EDU_OTHER,
)

# "不限"/"无要求" 修饰这些对象时与学历无关 ("专业不限")
EDUCATION_UNRELATED_SUBJECTS = ("专业", "经验", "年龄", "性别", "行业")

# 按优先级排列: (分桶, 关键词)
EDUCATION_RULES = (
    (EDU_UNLIMITED, ("不限", "无要求", "学历不限", "no requirement")),
    (EDU_DOCTORATE, ("博士", "phd", "ph.d", "doctor")),
    (EDU_MASTER, ("硕士", "研究生", "master", "msc")),
    (EDU_BACHELOR, (
        "本科", "学士", "bachelor", "统招", "985", "211", "双一流", "名校", "qs",
    )),
    (EDU_ASSOCIATE, ("大专", "专科", "高职", "associate")),
)
