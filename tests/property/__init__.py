"""
牌组属性测试
"""
