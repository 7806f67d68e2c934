"""
验证器基类

[作用]
- 通用无效模式过滤 (全同数字, 连续数字)
- 出生日期解析
- 通用接口定义
"""
import re
from abc import ABC, abstractmethod
from datetime import date


class BaseValidator(ABC):
    """验证器基类"""
    
    # 纯数字 (仅 ASCII)
    DIGITS_PATTERN = re.compile(r'[0-9]+')
    
    def is_digits(self, value: str) -> bool:
        """是否全部为 ASCII 数字"""
        return self.DIGITS_PATTERN.fullmatch(value) is not None
    
    def is_invalid_pattern(self, digits: str) -> bool:
        """
        无效模式 (测试/占位号码) 判断
        
        Args:
            digits: 纯数字字符串
            
        Returns:
            True: 无效模式 (应排除)
            False: 正常
        """
        if not digits:
            return True
        
        if len(digits) < 6:
            return False
        
        # 1. 全部相同 (000000, 1111111, ...)
        if len(set(digits)) == 1:
            return True
        
        # 2. 连续递增/递减
        return self._is_sequential(digits)
    
    def _is_sequential(self, digits: str) -> bool:
        """连续递增或递减 (9 之后为 0, 0 之前为 9)"""
        if len(digits) < 6:
            return False
        
        steps = {(int(curr) - int(prev)) % 10 for prev, curr in zip(digits, digits[1:])}
        return steps == {1} or steps == {9}
    
    @staticmethod
    def _parse_date(yyyymmdd: str) -> date:
        """YYYYMMDD → date, 无效日期抛出 ValueError"""
        year = int(yyyymmdd[0:4])
        month = int(yyyymmdd[4:6])
        day = int(yyyymmdd[6:8])
        return date(year, month, day)
    
    @abstractmethod
    def validate(self, value: str) -> bool:
        """
        基本格式验证
        
        Args:
            value: 待验证的值
            
        Returns:
            bool: 格式正确返回 True
        """
        pass
