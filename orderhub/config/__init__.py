"""
orderhub 配置包。
按环境拆分的Django配置模块: base / development / testing / production。
"""
