"""
基础设施层包。
提供事务管理等基础设施组件。
"""

# 事务管理
from core.infrastructure.transaction import (
    TransactionManager,
    DjangoTransactionManager,
    NoOpTransactionManager
)

__all__ = [
    # 事务管理
    'TransactionManager',
    'DjangoTransactionManager',
    'NoOpTransactionManager',
]
