"""配置文件"""

# 表达式引擎参数
ENGINE_CONFIG = {
    "strict_parentheses": False,  # False：不匹配的括号静默处理，不报错
    # 优先级表镜像（仅用于校验，真正的定义在 core.token_system）
    "precedence": {'+': 1, '-': 1, '*': 2, '/': 2, '%': 2, '^': 3},
    "right_associative": ['^'],
}

# 回放参数
REPLAY_CONFIG = {
    "interval_ms": 1000,  # 每步间隔（毫秒）
    "show_stack": True,  # 每步后打印当前栈
}

# 日志
LOGGING_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置与核心操作符表一致"""
    from core.token_system import OPERATOR_DEFINITIONS, Associativity

    precedence = {symbol: spec.precedence for symbol, spec in OPERATOR_DEFINITIONS.items()}
    assert ENGINE_CONFIG["precedence"] == precedence, "优先级表与 OPERATOR_DEFINITIONS 不一致"
    right_assoc = sorted(symbol for symbol, spec in OPERATOR_DEFINITIONS.items()
                         if spec.associativity == Associativity.RIGHT)
    assert sorted(ENGINE_CONFIG["right_associative"]) == right_assoc, "右结合操作符不一致"
    assert REPLAY_CONFIG["interval_ms"] >= 0, "回放间隔不能为负"
    return True
