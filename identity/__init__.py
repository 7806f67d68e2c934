"""
居民身份证号码解析包

[用法]
    from identity import IdentityValidator, parse
    
    record = parse("110101199003075170")
    record.province_name   # '北京市'
    record.sex             # Sex.MALE
    
    # 格式 + 校验码
    is_valid, info_type = IdentityValidator().validate_full(value)
"""
from .errors import (
    IdentityError,
    InvalidLengthError,
    InvalidBodyError,
    InvalidCheckDigitError,
    InvalidBirthdayError,
)
from .record import BitType, Sex, IdentityRecord
from .provinces import PROVINCE_NAMES, get_province_name
from .base_validator import BaseValidator
from .identity_validator import IdentityValidator, parse

__all__ = [
    # ============================================
    # 解析
    # ============================================
    'IdentityValidator',
    'BaseValidator',
    'parse',
    
    # ============================================
    # 结果
    # ============================================
    'IdentityRecord',
    'BitType',
    'Sex',
    'PROVINCE_NAMES',
    'get_province_name',
    
    # ============================================
    # 错误
    # ============================================
    'IdentityError',
    'InvalidLengthError',
    'InvalidBodyError',
    'InvalidCheckDigitError',
    'InvalidBirthdayError',
]
