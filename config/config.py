"""配置文件"""

# 求值参数
CALCULATOR_CONFIG = {
    "default_angle_mode": "DEGREES",  # 界面默认是角度模式
    "angle_modes": ["DEGREES", "RADIANS"],
}

# 历史记录参数
HISTORY_CONFIG = {
    "max_items": 50,  # 最多保留50条，最新的在前
    "storage_key_prefix": "mod_scicalc_history_v1_",  # 外部存储按实例id拼接
}

# 显示与本地化
DISPLAY_CONFIG = {
    "default_lang": "en",
    "languages": ["en", "pt_br"],
    "exponent_upper": 1e21,  # |x| >= 1e21 用科学计数法
    "exponent_lower": 1e-6,  # |x| < 1e-6 用科学计数法
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert CALCULATOR_CONFIG["default_angle_mode"] in CALCULATOR_CONFIG["angle_modes"], "默认角度模式必须是DEGREES或RADIANS"
    assert HISTORY_CONFIG["max_items"] > 0, "历史记录上限必须为正数"
    assert DISPLAY_CONFIG["default_lang"] in DISPLAY_CONFIG["languages"], "默认语言必须有消息表"
    assert DISPLAY_CONFIG["exponent_lower"] < DISPLAY_CONFIG["exponent_upper"]
    return True
