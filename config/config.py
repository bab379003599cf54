"""配置文件"""
import logging

# 分词/求值参数
CALCULATOR_CONFIG = {
    "case_insensitive": True,  # 常数和操作符名称不区分大小写
    "reject_non_finite_literals": True,  # nan/inf 不作为数字字面量
}

# 显示参数
DISPLAY_CONFIG = {
    "prompt": "> ",
    "stack_precision": 2,  # 栈显示保留2位小数
    "result_precision": None,  # None: 最短可还原表示
    "show_stack": True,
}

# 日志配置
LOGGING_CONFIG = {
    "level": "WARNING",  # 交互模式下保持输出干净
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert DISPLAY_CONFIG["stack_precision"] >= 0, "stack_precision must be non-negative"
    assert DISPLAY_CONFIG["result_precision"] is None or DISPLAY_CONFIG["result_precision"] >= 0, \
        "result_precision must be None or non-negative"
    assert isinstance(logging.getLevelName(LOGGING_CONFIG["level"]), int), \
        f"Unknown log level: {LOGGING_CONFIG['level']}"
    logging.getLogger(__name__).debug("Configuration validated successfully!")
