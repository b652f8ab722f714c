"""
Fractal escape-time engine.

Чистое ядро без состояния: комплексные числа фиксированной и
произвольной точности и escape-time тест для множеств Мандельброта и Жюлиа.
"""
