"""
商品基础设施层数据库模型。
定义与商品领域相关的Django ORM模型。
"""
from django.db import models


class Product(models.Model):
    """商品数据库模型"""
    id = models.CharField(primary_key=True, max_length=64, verbose_name="商品ID")
    name = models.CharField(max_length=200, verbose_name="商品名称")
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        verbose_name="价格"
    )
    created_at = models.DateTimeField(auto_now_add=True, verbose_name="创建时间")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="更新时间")

    class Meta:
        db_table = 'product'
        verbose_name = "商品"
        verbose_name_plural = "商品"
        indexes = [
            models.Index(fields=['name'], name='idx_product_name'),
        ]
        constraints = [
            # 确保价格不为负数
            models.CheckConstraint(condition=models.Q(price__gte=0), name='price_gte_0'),
        ]

    def __str__(self):
        return self.name
