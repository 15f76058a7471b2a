"""
客户基础设施层数据库模型。
定义与客户领域相关的Django ORM模型。
"""
from django.db import models


class Customer(models.Model):
    """客户数据库模型"""
    id = models.CharField(primary_key=True, max_length=64, verbose_name="客户ID")
    name = models.CharField(max_length=255, verbose_name="客户名称")
    street = models.CharField(max_length=255, null=True, blank=True, verbose_name="街道")
    number = models.PositiveIntegerField(null=True, blank=True, verbose_name="门牌号")
    zipcode = models.CharField(max_length=32, null=True, blank=True, verbose_name="邮政编码")
    city = models.CharField(max_length=128, null=True, blank=True, verbose_name="城市")
    active = models.BooleanField(default=False, verbose_name="是否激活")
    reward_points = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=0,
        verbose_name="积分"
    )
    created_at = models.DateTimeField(auto_now_add=True, verbose_name="创建时间")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="更新时间")

    class Meta:
        db_table = 'customer'
        verbose_name = "客户"
        verbose_name_plural = "客户"
        indexes = [
            models.Index(fields=['name'], name='idx_customer_name'),
        ]
        constraints = [
            # 确保积分不为负数
            models.CheckConstraint(condition=models.Q(reward_points__gte=0), name='reward_points_gte_0'),
        ]

    def __str__(self):
        return self.name
