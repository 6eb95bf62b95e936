"""
Ошибки конвертеров единиц.

Все ошибки возникают синхронно при создании конвертера. Операции
convert / inverse / concatenate ошибок не бросают.
"""


class ConverterError(ValueError):
    """Базовая ошибка конвертера: недопустимый параметр при создании."""

    pass


class InvalidFactorError(ConverterError):
    """
    Недопустимый множитель.

    Возникает, когда множитель после округления до float32 равен 1.0
    (тождественное преобразование должно быть представлено только IDENTITY),
    а также при недопустимых параметрах рационального или
    логарифмического конвертера.
    """

    def __init__(self, message: str, value: object = None):
        super().__init__(message)
        self.value = value


class InvalidOffsetError(ConverterError):
    """Недопустимое смещение: после округления до float32 равно 0.0."""

    def __init__(self, message: str, value: object = None):
        super().__init__(message)
        self.value = value
