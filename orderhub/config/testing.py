"""
测试环境配置文件。
包含测试环境特定的Django配置。
"""
from .base import *
from .env import *

# 测试环境禁用调试模式
DEBUG = False

# 使用内存数据库加速测试
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

# 简化日志配置
LOGGING = {
    'version': 1,
    'disable_existing_loggers': True,
    'handlers': {
        'console': {
            'level': 'ERROR',
            'class': 'logging.StreamHandler',
        },
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'ERROR',
            'propagate': False,
        },
    },
}

# 订单模块测试环境配置，固定积分比例，不受环境变量影响
ORDER_SETTINGS = {
    'REWARD_POINTS_RATE': '0.5',
}
