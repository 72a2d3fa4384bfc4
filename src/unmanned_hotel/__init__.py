"""
Ядро событийно-ориентированной системы управления беспилотным отелем.

Контексты:
- booking: бронирования номеров и проверка пересечений;
- access: выдача кодов доступа к номерам;
- housekeeping: планирование уборки после выезда.

Контексты не вызывают друг друга напрямую и общаются только через
доменные события, публикуемые диспетчером.
"""

__version__ = "0.1.0"
