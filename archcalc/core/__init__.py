"""
Core модули archcalc

Ядро вычислений, независимое от оболочки (терминал, история ввода,
коды завершения процесса):
- math: точные рациональные примитивы
- domain: единицы измерения, значения, форматирование
- contracts: модель результата и JSON Schema
- errors: иерархия ошибок калькулятора
"""
