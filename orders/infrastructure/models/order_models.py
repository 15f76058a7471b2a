"""
订单基础设施层数据库模型。
订单头一行，订单项每项一行，通过order_id关联。
"""
from django.db import models


class Order(models.Model):
    """订单头数据库模型"""
    id = models.CharField(primary_key=True, max_length=64, verbose_name="订单ID")
    customer = models.ForeignKey(
        'customers.Customer',
        on_delete=models.PROTECT,
        related_name='orders',
        verbose_name="客户"
    )
    # 订单总额是订单项的缓存，每次写入时根据订单项重新计算
    total = models.DecimalField(max_digits=12, decimal_places=2, verbose_name="订单总额")

    class Meta:
        db_table = 'orders'
        verbose_name = "订单"
        verbose_name_plural = "订单"
        indexes = [
            models.Index(fields=['customer'], name='idx_order_customer'),
        ]

    def __str__(self):
        return self.id


class OrderItem(models.Model):
    """订单项数据库模型"""
    id = models.CharField(primary_key=True, max_length=64, verbose_name="订单项ID")
    name = models.CharField(max_length=200, verbose_name="商品名称")
    price = models.DecimalField(max_digits=10, decimal_places=2, verbose_name="单价")
    product = models.ForeignKey(
        'products.Product',
        on_delete=models.PROTECT,
        related_name='order_items',
        verbose_name="商品"
    )
    quantity = models.PositiveIntegerField(verbose_name="数量")
    order = models.ForeignKey(
        Order,
        on_delete=models.CASCADE,
        related_name='items',
        verbose_name="订单"
    )

    class Meta:
        db_table = 'order_items'
        verbose_name = "订单项"
        verbose_name_plural = "订单项"
        indexes = [
            models.Index(fields=['order'], name='idx_order_item_order'),
        ]
        constraints = [
            models.CheckConstraint(condition=models.Q(quantity__gt=0), name='quantity_gt_0'),
        ]

    def __str__(self):
        return f"{self.order_id}: {self.name} × {self.quantity}"
