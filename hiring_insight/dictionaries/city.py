"""城市词典

- CANONICAL_CITIES: 标准城市名
- CITY_ALIASES: 拼音/英文/俗称 -> 标准城市名 (小写精确匹配)
- CITY_DISTRICTS: 标准城市 -> 区县/商圈/地标关键词
- PROVINCE_CAPITALS: 省份 -> 省会 (只写省份时兜底)
- MULTI_CITY_SHORTHANDS: 多城市简称 -> 展开列表
- INVALID_LOCATIONS: 无效/占位值 (整条丢弃)
- OVERSEAS_CITY_ALIASES: 海外城市别名 (小写精确匹配)
"""

from types import MappingProxyType

REMOTE_CITY = "远程"

REMOTE_MARKERS = (
    "远程",
    "remote",
    "wfh",
    "work from home",
    "居家办公",
    "在家办公",
    "anywhere",
)

CANONICAL_CITIES = (
    "北京", "上海", "广州", "深圳", "杭州", "成都", "南京", "武汉", "苏州",
    "西安", "厦门", "长沙", "重庆", "天津", "合肥", "郑州", "青岛", "济南",
    "大连", "沈阳", "福州", "珠海", "东莞", "佛山", "宁波", "无锡", "昆明",
    "贵阳", "南昌", "石家庄", "太原", "长春", "哈尔滨", "南宁", "海口",
    "三亚", "兰州", "乌鲁木齐", "呼和浩特", "银川", "西宁", "拉萨", "常州",
    "温州", "绍兴", "嘉兴", "中山", "惠州", "烟台", "泉州",
    "香港", "澳门", "台北",
    REMOTE_CITY,
)

CITY_ALIASES = MappingProxyType({
    "beijing": "北京",
    "bj": "北京",
    "帝都": "北京",
    "shanghai": "上海",
    "sh": "上海",
    "魔都": "上海",
    "guangzhou": "广州",
    "gz": "广州",
    "shenzhen": "深圳",
    "sz": "深圳",
    "hangzhou": "杭州",
    "hz": "杭州",
    "chengdu": "成都",
    "nanjing": "南京",
    "wuhan": "武汉",
    "suzhou": "苏州",
    "xi'an": "西安",
    "xian": "西安",
    "xiamen": "厦门",
    "changsha": "长沙",
    "chongqing": "重庆",
    "tianjin": "天津",
})

CITY_DISTRICTS = MappingProxyType({
    "北京": (
        "海淀", "朝阳区", "东城", "西城", "丰台", "昌平", "顺义", "大兴", "通州",
        "亦庄", "中关村", "西二旗", "上地", "望京", "五道口", "回龙观", "国贸",
        "酒仙桥", "后厂村",
    ),
    "上海": (
        "浦东", "徐汇", "静安", "闵行", "杨浦", "长宁", "黄浦", "普陀", "虹口",
        "嘉定", "松江", "宝山", "张江", "漕河泾", "陆家嘴", "虹桥", "五角场",
        "临港", "金桥",
    ),
    "深圳": (
        "南山", "福田", "宝安", "龙华", "龙岗", "罗湖", "前海", "西丽", "坂田",
        "深圳湾", "科兴",
    ),
    "杭州": (
        "西湖区", "滨江", "余杭", "萧山", "拱墅", "未来科技城", "西溪", "钱塘",
    ),
    "广州": (
        "天河", "海珠", "番禺", "越秀", "荔湾", "琶洲", "珠江新城", "黄埔区",
    ),
    "成都": ("武侯", "锦江", "青羊", "天府新区", "天府软件园", "金牛"),
    "南京": ("江宁", "建邺", "玄武", "雨花台", "栖霞", "秦淮"),
    "武汉": ("光谷", "洪山", "武昌", "汉口", "江汉", "东湖高新"),
    "西安": ("雁塔", "未央", "曲江"),
    "苏州": ("工业园区", "姑苏", "吴中", "相城", "昆山"),
    "厦门": ("思明", "湖里", "集美", "海沧"),
    "重庆": ("渝中", "渝北", "江北嘴", "两江新区"),
    "天津": ("滨海新区", "和平区", "南开区"),
    "长沙": ("岳麓", "芙蓉区", "雨花区"),
})

PROVINCE_CAPITALS = MappingProxyType({
    "广东": "广州",
    "浙江": "杭州",
    "江苏": "南京",
    "四川": "成都",
    "湖北": "武汉",
    "湖南": "长沙",
    "福建": "福州",
    "山东": "济南",
    "河南": "郑州",
    "河北": "石家庄",
    "陕西": "西安",
    "山西": "太原",
    "安徽": "合肥",
    "江西": "南昌",
    "辽宁": "沈阳",
    "吉林": "长春",
    "黑龙江": "哈尔滨",
    "云南": "昆明",
    "贵州": "贵阳",
    "广西": "南宁",
    "海南": "海口",
    "甘肃": "兰州",
    "青海": "西宁",
    "宁夏": "银川",
    "新疆": "乌鲁木齐",
    "内蒙古": "呼和浩特",
    "西藏": "拉萨",
    "台湾": "台北",
})

# 省级行政区后缀 (剥离省份名后再去除)
PROVINCE_SUFFIXES = (
    "维吾尔自治区", "壮族自治区", "回族自治区", "自治区", "省",
)

# 地级行政区后缀；省份名后只剩这些时不再当作城市名
CITY_ADMIN_SUFFIXES = ("市", "地区")

MULTI_CITY_SHORTHANDS = MappingProxyType({
    "北上广深": ("北京", "上海", "广州", "深圳"),
    "北上广深杭": ("北京", "上海", "广州", "深圳", "杭州"),
    "一线城市": ("北京", "上海", "广州", "深圳"),
    "北上广": ("北京", "上海", "广州"),
    "北上深": ("北京", "上海", "深圳"),
    "北上杭": ("北京", "上海", "杭州"),
    "京沪": ("北京", "上海"),
    "沪杭": ("上海", "杭州"),
    "广深": ("广州", "深圳"),
    "江浙沪": ("上海", "杭州", "南京"),
    "江浙沪皖": ("上海", "杭州", "南京", "合肥"),
})

INVALID_LOCATIONS = frozenset({
    "",
    "未知",
    "unknown",
    "不限",
    "全国",
    "nationwide",
    "多地",
    "多个城市",
    "待定",
    "不详",
    "暂无",
    "无",
    "其他",
    "见详情",
    "见jd",
    "tbd",
    "n/a",
    "na",
    "null",
    "none",
    "-",
    "城市1",
    "城市2",
})

OVERSEAS_CITY_ALIASES = MappingProxyType({
    "新加坡": "新加坡",
    "singapore": "新加坡",
    "sg": "新加坡",
    "东京": "东京",
    "tokyo": "东京",
    "硅谷": "旧金山湾区",
    "旧金山": "旧金山湾区",
    "旧金山湾区": "旧金山湾区",
    "san francisco": "旧金山湾区",
    "bay area": "旧金山湾区",
    "sf": "旧金山湾区",
    "纽约": "纽约",
    "new york": "纽约",
    "nyc": "纽约",
    "西雅图": "西雅图",
    "seattle": "西雅图",
    "伦敦": "伦敦",
    "london": "伦敦",
    "柏林": "柏林",
    "berlin": "柏林",
    "多伦多": "多伦多",
    "toronto": "多伦多",
    "悉尼": "悉尼",
    "sydney": "悉尼",
    "hong kong": "香港",
    "hongkong": "香港",
    "hk": "香港",
    "taipei": "台北",
})
