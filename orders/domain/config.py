"""
订单模块配置文件。
从Django设置中获取订单模块的配置。
"""
from decimal import Decimal

from django.conf import settings

# 获取订单模块配置，如果不存在则使用默认值
ORDER_SETTINGS = getattr(settings, 'ORDER_SETTINGS', {})

# 下单时按订单总额发放的积分比例
REWARD_POINTS_RATE = Decimal(str(ORDER_SETTINGS.get('REWARD_POINTS_RATE', '0.5')))
