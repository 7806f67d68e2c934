"""
居民身份证号码解析器

[格式]
- 18位: 地址码6 + 出生日期8 (YYYYMMDD) + 顺序码3 + 校验码1 (数字或 X)
- 15位: 地址码6 + 出生日期6 (YYMMDD, 1900年代) + 顺序码3

[解析顺序]
位数 → 省份 → 城市 → 地区 → 出生日期 → 顺序码 → 校验码 → 性别
任一步骤失败立即抛出对应的 IdentityError, 不返回部分结果.

[校验码]
- parse 只保存第18位字符, 不做校验码计算
- verify_checksum / validate_full 另行提供 GB 11643 校验
"""
from datetime import date
from typing import Tuple

from utils.logger import logger, mask_value
from .base_validator import BaseValidator
from .errors import (
    IdentityError,
    InvalidBirthdayError,
    InvalidBodyError,
    InvalidCheckDigitError,
    InvalidLengthError,
)
from .record import BitType, IdentityRecord, Sex


class IdentityValidator(BaseValidator):
    """居民身份证号码解析器"""
    
    # 校验码加权因子 (GB 11643-1999)
    VERIFY_WEIGHTS = [7, 9, 10, 5, 8, 4, 2, 1, 6, 3, 7, 9, 10, 5, 8, 4, 2]
    
    # 加权和 % 11 → 校验码
    VERIFY_CODE_MAP = ['1', '0', 'X', '9', '8', '7', '6', '5', '4', '3', '2']
    
    # 15位号码的年份前缀
    LEGACY_CENTURY = '19'
    
    INFO_TYPE = '居民身份证号码'
    INFO_TYPE_SUSPECT = '居民身份证号码(疑似)'
    
    def parse(self, value: str) -> IdentityRecord:
        """
        解析身份证号码
        
        Args:
            value: 15位或18位身份证号码 (不做去空格等预处理)
            
        Returns:
            IdentityRecord: 解析结果
            
        Raises:
            InvalidLengthError, InvalidBodyError,
            InvalidCheckDigitError, InvalidBirthdayError
        """
        try:
            bit_type = self._parse_bit_type(value)
            
            province = value[0:2]
            city = value[2:4]
            area = value[4:6]
            
            birthday, birthday_date = self._parse_birthday(value, bit_type)
            
            if bit_type == BitType.BIT18:
                sequence_code = value[14:17]
                verify_code = value[17]
            else:
                sequence_code = value[12:15]
                verify_code = ''
            
            sex = self._parse_sex(sequence_code)
        except IdentityError as e:
            logger.debug(f"身份证号码解析失败 ({mask_value(value)}): {e}")
            raise
        
        return IdentityRecord(
            value=value,
            bit_type=bit_type,
            province=province,
            city=city,
            area=area,
            birthday=birthday,
            birthday_date=birthday_date,
            sequence_code=sequence_code,
            verify_code=verify_code,
            sex=sex,
        )
    
    def _parse_bit_type(self, value: str) -> BitType:
        """位数判断 + 本体/校验位字符检查"""
        length = len(value)
        
        if length == BitType.BIT18:
            if not self.is_digits(value[:17]):
                raise InvalidBodyError(
                    "18位身份证号码前17位必须为数字", value)
            if value[17] not in '0123456789Xx':
                raise InvalidCheckDigitError(
                    f"18位身份证号码第18位必须为数字或X (实际: {value[17]!r})", value)
            return BitType.BIT18
        
        if length == BitType.BIT15:
            if not self.is_digits(value):
                raise InvalidBodyError("15位身份证号码必须全部为数字", value)
            return BitType.BIT15
        
        raise InvalidLengthError(f"身份证号码长度必须为15或18位 (实际: {length})", value)
    
    def _parse_birthday(self, value: str, bit_type: BitType) -> Tuple[str, date]:
        """出生日期 (YYYYMMDD) 提取与日期有效性检查"""
        if bit_type == BitType.BIT18:
            birthday = value[6:14]
        else:
            birthday = self.LEGACY_CENTURY + value[6:12]
        
        try:
            birthday_date = self._parse_date(birthday)
        except ValueError as e:
            raise InvalidBirthdayError(
                f"出生日期错误 (birthday: {birthday}, 格式: YYYYMMDD): {e}",
                value, birthday) from e
        
        return birthday, birthday_date
    
    @staticmethod
    def _parse_sex(sequence_code: str) -> Sex:
        """顺序码第3位: 奇数=男, 偶数=女"""
        if int(sequence_code[2]) % 2 == 1:
            return Sex.MALE
        return Sex.FEMALE
    
    def validate(self, value: str) -> bool:
        """基本格式验证 (parse 成功即为 True)"""
        try:
            self.parse(value)
        except IdentityError:
            return False
        return True
    
    def get_birth_date(self, value: str) -> date:
        """出生日期"""
        return self.parse(value).birthday_date
    
    def calculate_verify_code(self, body: str) -> str:
        """
        校验码计算
        
        公式: Σ(各位 × 加权因子) % 11 → VERIFY_CODE_MAP
        """
        if len(body) != 17 or not self.is_digits(body):
            raise ValueError("校验码计算需要17位数字")
        
        total = sum(int(digit) * weight for digit, weight in zip(body, self.VERIFY_WEIGHTS))
        return self.VERIFY_CODE_MAP[total % 11]
    
    def is_checksum_applicable(self, value: str) -> bool:
        """只有18位号码有校验码"""
        return len(value) == BitType.BIT18
    
    def verify_checksum(self, value: str) -> bool:
        """校验码验证 (X 不区分大小写)"""
        if not self.is_checksum_applicable(value) or not self.is_digits(value[:17]):
            return False
        return self.calculate_verify_code(value[:17]) == value[17].upper()
    
    def is_test_identity(self, value: str) -> bool:
        """测试/占位号码 (本体全同或连续数字)"""
        body = value[:17] if len(value) == BitType.BIT18 else value
        if not self.is_digits(body):
            return False
        return self.is_invalid_pattern(body)
    
    def validate_full(self, value: str) -> tuple:
        """
        全面验证 (格式 + 校验码)
        
        Returns:
            (is_valid, info_type)
            - (True, "居民身份证号码"): 18位, 格式 O, 校验码 O
            - (True, "居民身份证号码(疑似)"): 15位, 格式 O (无校验码)
            - (False, ""): 格式 X, 校验码 X 或无效模式
        """
        # 无效模式过滤
        if self.is_test_identity(value):
            return False, ""
        
        # 基本格式
        if not self.validate(value):
            return False, ""
        
        if self.is_checksum_applicable(value):
            if self.verify_checksum(value):
                return True, self.INFO_TYPE
            # 校验码不符 → 排除
            logger.debug(f"校验码不符: {mask_value(value)}")
            return False, ""
        
        return True, self.INFO_TYPE_SUSPECT
    
    def convert_to_18(self, value: str) -> str:
        """15位号码升级为18位 (18位原样返回)"""
        record = self.parse(value)
        if record.bit_type == BitType.BIT18:
            return value
        
        body = value[:6] + self.LEGACY_CENTURY + value[6:]
        return body + self.calculate_verify_code(body)


_default_validator = IdentityValidator()


def parse(value: str) -> IdentityRecord:
    """模块级快捷函数: IdentityValidator().parse(value)"""
    return _default_validator.parse(value)
