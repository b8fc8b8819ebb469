"""
牌组单元测试
"""
