"""
日志配置模块
"""
import logging
from typing import Optional


def setup_logger(name: str = __name__, log_file: Optional[str] = None,
                 level: int = logging.INFO) -> logging.Logger:
    """日志器设置并返回 (传入 log_file 时额外写入文件)"""
    
    logger = logging.getLogger(name)
    
    if logger.handlers:
        return logger
    
    logger.setLevel(level)
    
    # 格式
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    
    # 控制台
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    
    # 文件 (可选)
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    
    return logger


def get_logger(name: str = None) -> logging.Logger:
    """获取日志器 (setup_logger 的别名)"""
    if name is None:
        return logger
    return setup_logger(name)


def mask_value(value: str) -> str:
    """日志脱敏: 保留前4位和后4位"""
    if len(value) <= 8:
        return '*' * len(value)
    return value[:4] + '*' * (len(value) - 8) + value[-4:]


# 默认日志器
logger = setup_logger('IdentityParser')
