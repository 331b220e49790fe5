# taxi_patterns/core/__init__.py
"""
Ядро: компоненты уведомлений, жизненного цикла, расчёта стоимости
и оформления заказа.
"""
