"""
Utils 包
"""
from .logger import logger, setup_logger, get_logger, mask_value

__all__ = ['logger', 'setup_logger', 'get_logger', 'mask_value']
