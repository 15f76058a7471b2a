"""
值对象模块。
包含ValueObject基类，地址等值对象继承自它，以及金额精度处理。
"""
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Tuple

# 金额和积分保留两位小数，与数据库字段精度一致
AMOUNT_QUANTUM = Decimal("0.01")


def quantize_amount(value: Any) -> Decimal:
    """将金额或积分转换为两位小数的Decimal，四舍五入。"""
    return Decimal(str(value)).quantize(AMOUNT_QUANTUM, rounding=ROUND_HALF_UP)


class ValueObject:
    """
    值对象基类。
    值对象没有标识，相等性完全由属性值决定。
    子类通过只读属性暴露字段，构造完成后不再修改。
    """

    def _components(self) -> Tuple[Tuple[str, Any], ...]:
        return tuple(sorted(vars(self).items()))

    def __eq__(self, other: Any) -> bool:
        """
        判断两个值对象是否相等。
        类型不同的值对象永远不相等。

        Args:
            other: 另一个值对象

        Returns:
            类型相同且所有属性值相等时返回True
        """
        if not isinstance(other, self.__class__):
            return False
        return self._components() == other._components()

    def __hash__(self) -> int:
        return hash((self.__class__, self._components()))

    def __repr__(self) -> str:
        fields = ", ".join(f"{name.lstrip('_')}={value!r}" for name, value in self._components())
        return f"{type(self).__name__}({fields})"
