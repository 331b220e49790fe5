# taxi_patterns/__init__.py
"""
Taxi Patterns.
Демонстрация паттернов Observer, State, Strategy и Template Method
на примере заказа такси.
"""

__version__ = "1.0.0"
