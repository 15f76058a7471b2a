"""
基础配置文件。
包含所有环境共享的Django配置，各环境配置文件在此基础上覆盖。
"""
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    # 领域应用
    'customers',
    'products',
    'orders',
]

MIDDLEWARE = []

USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# 订单模块默认配置，各环境可覆盖
ORDER_SETTINGS = {
    'REWARD_POINTS_RATE': '0.5',
}
