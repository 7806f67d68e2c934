"""
身份证号码解析结果

[作用]
- BitType: 15位 / 18位
- Sex: 女 / 男
- IdentityRecord: 解析后的不可变记录
"""
from dataclasses import dataclass
from datetime import date
from enum import IntEnum

from .provinces import get_province_name


class BitType(IntEnum):
    """身份证位数"""
    BIT15 = 15
    BIT18 = 18


class Sex(IntEnum):
    """性别 (顺序码第3位: 奇数=男, 偶数=女)"""
    FEMALE = 0
    MALE = 1


@dataclass(frozen=True)
class IdentityRecord:
    """身份证号码解析记录 (由 IdentityValidator.parse 一次性构造)"""
    
    value: str
    bit_type: BitType
    province: str
    city: str
    area: str
    birthday: str           # YYYYMMDD (15位已补 '19')
    birthday_date: date
    sequence_code: str
    verify_code: str        # 原样保留, 15位为 ''
    sex: Sex
    
    @property
    def province_name(self) -> str:
        """省份名称 (未知代码为 '')"""
        return get_province_name(self.province)
    
    @property
    def address_code(self) -> str:
        """6位地址码"""
        return self.province + self.city + self.area
    
    def to_dict(self) -> dict:
        return {
            'value': self.value,
            'bit_type': int(self.bit_type),
            'province': self.province,
            'province_name': self.province_name,
            'city': self.city,
            'area': self.area,
            'birthday': self.birthday,
            'birthday_date': self.birthday_date.isoformat(),
            'sequence_code': self.sequence_code,
            'verify_code': self.verify_code,
            'sex': self.sex.name,
        }
