# 引用基础设施层的模型
from customers.infrastructure.models.customer_models import Customer
