"""
Number Theory — простота и НОД

- is_prime: детерминированная проверка пробным делением (колесо 6k±1)
- gcd: итеративный алгоритм Евклида

gcd рассчитан на неотрицательные аргументы. Для отрицательных
используется floored modulo Python (знак результата следует знаку
делителя на последнем шаге); такой результат не является частью контракта.
"""


def is_prime(n: int) -> bool:
    """
    Проверка простоты числа.

    Порядок проверок:
    1. n <= 1 → False
    2. n <= 3 → True (2, 3)
    3. n кратно 2 или 3 → False
    4. Пробное деление на i и i + 2 для i = 5, 11, 17, ... пока i * i <= n

    Examples:
        >>> [i for i in range(2, 18) if is_prime(i)]
        [2, 3, 5, 7, 11, 13, 17]
    """
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False

    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6

    return True


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель (алгоритм Евклида).

    Examples:
        >>> gcd(48, 18)
        6
        >>> gcd(17, 13)
        1
        >>> gcd(7, 0)
        7
    """
    while b != 0:
        a, b = b, a % b

    return a
