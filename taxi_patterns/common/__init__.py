# taxi_patterns/common/__init__.py
"""
Общие утилиты: константы, логирование, локализация.
"""
