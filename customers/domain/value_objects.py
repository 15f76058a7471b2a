"""
客户领域模型中的值对象。
"""
from typing import Any, Dict

from core.domain import ValueObject, ValidationException


class Address(ValueObject):
    """
    地址值对象。
    创建后不可修改，更换地址需要创建新的Address。
    """

    def __init__(self, street: str, number: int, zip_code: str, city: str):
        """
        初始化地址值对象。

        Args:
            street: 街道
            number: 门牌号
            zip_code: 邮政编码
            city: 城市

        Raises:
            ValidationException: 任一字段为空或门牌号不大于0
        """
        self._street = street
        self._number = number
        self._zip_code = zip_code
        self._city = city
        self._validate()

    def _validate(self) -> None:
        if not self._street:
            raise ValidationException("street", "街道不能为空")
        if self._number is None or self._number <= 0:
            raise ValidationException("number", "门牌号必须大于0")
        if not self._zip_code:
            raise ValidationException("zip_code", "邮政编码不能为空")
        if not self._city:
            raise ValidationException("city", "城市不能为空")

    @property
    def street(self) -> str:
        return self._street

    @property
    def number(self) -> int:
        return self._number

    @property
    def zip_code(self) -> str:
        return self._zip_code

    @property
    def city(self) -> str:
        return self._city

    def to_dict(self) -> Dict[str, Any]:
        return {
            "street": self._street,
            "number": self._number,
            "zip_code": self._zip_code,
            "city": self._city,
        }

    def __str__(self) -> str:
        return f"{self._street}, {self._number}, {self._zip_code}, {self._city}"
