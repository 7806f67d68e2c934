"""
身份证号码解析错误

[分类]
- InvalidLengthError: 长度不是 15 或 18
- InvalidBodyError: 本体部分含非数字字符
- InvalidCheckDigitError: 18位第18位不是数字或 X/x
- InvalidBirthdayError: 出生日期不是有效日期

全部继承 ValueError, 解析在第一个失败步骤立即抛出.
"""


class IdentityError(ValueError):
    """身份证号码解析错误基类"""
    
    def __init__(self, message: str, value: str = ""):
        super().__init__(message)
        self.value = value


class InvalidLengthError(IdentityError):
    """长度错误"""


class InvalidBodyError(IdentityError):
    """本体非数字"""


class InvalidCheckDigitError(IdentityError):
    """校验位字符错误"""


class InvalidBirthdayError(IdentityError):
    """出生日期错误"""
    
    def __init__(self, message: str, value: str = "", birthday: str = ""):
        super().__init__(message, value)
        self.birthday = birthday
