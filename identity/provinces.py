"""
省级行政区划代码表 (GB/T 2260)

前两位代码 → 省/直辖市/自治区/特别行政区名称.
未收录的代码返回空字符串, 不报错.
"""
from types import MappingProxyType

PROVINCE_NAMES = MappingProxyType({
    # 华北
    11: '北京市',
    12: '天津市',
    13: '河北省',
    14: '山西省',
    15: '内蒙古自治区',
    # 东北
    21: '辽宁省',
    22: '吉林省',
    23: '黑龙江省',
    # 华东
    31: '上海市',
    32: '江苏省',
    33: '浙江省',
    34: '安徽省',
    35: '福建省',
    36: '江西省',
    37: '山东省',
    # 中南
    41: '河南省',
    42: '湖北省',
    43: '湖南省',
    44: '广东省',
    45: '广西壮族自治区',
    46: '海南省',
    # 西南
    50: '重庆市',
    51: '四川省',
    52: '贵州省',
    53: '云南省',
    54: '西藏自治区',
    # 西北
    61: '陕西省',
    62: '甘肃省',
    63: '青海省',
    64: '宁夏回族自治区',
    65: '新疆维吾尔自治区',
    # 港澳台
    71: '台湾省',
    81: '香港特别行政区',
    82: '澳门特别行政区',
})


def get_province_name(code) -> str:
    """
    省份名称查询
    
    Args:
        code: 两位省份代码 (如 '11') 或整数
        
    Returns:
        str: 省份名称, 未知代码返回 ''
    """
    try:
        province_code = int(code)
    except (TypeError, ValueError):
        return ''
    return PROVINCE_NAMES.get(province_code, '')
