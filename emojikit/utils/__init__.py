"""
Вспомогательные модули: конфигурация, исключения, логирование, работа с текстом
"""
