"""Counting: binomial coefficients, Catalan numbers, primes and decodings."""

from __future__ import annotations

DEFAULT_MODULUS = 10**9 + 7


def binomial(n: int, k: int) -> int:
    """Return the binomial coefficient C(n, k); 0 when k exceeds n."""
    if n < 0 or k < 0:
        raise ValueError("n and k must not be negative")
    if k > n:
        return 0
    k = min(k, n - k)
    result = 1
    for i in range(k):
        result = result * (n - i) // (i + 1)
    return result


def catalan(n: int) -> int:
    """Return the n-th Catalan number."""
    return binomial(2 * n, n) // (n + 1)


def sieve_of_eratosthenes(n: int) -> list[int]:
    """Return every prime less than or equal to ``n``."""
    if n < 2:
        return []
    prime = bytearray([1]) * (n + 1)
    prime[0] = prime[1] = 0
    p = 2
    while p * p <= n:
        if prime[p]:
            prime[p * p :: p] = bytes(len(range(p * p, n + 1, p)))
        p += 1
    return [value for value, flag in enumerate(prime) if flag]


def count_decodings(digits: str, modulus: int = DEFAULT_MODULUS) -> int:
    """Count the ways to read ``digits`` as letters A=1 .. Z=26, modulo ``modulus``.

    Each adjacent pair whose two-digit value is at most 26 may be read as one letter.
    """
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if any(ch not in "0123456789" for ch in digits):
        raise ValueError("digits must contain only decimal digits")
    before, current = 1 % modulus, 1 % modulus
    for first, second in zip(digits, digits[1:]):
        following = current
        if int(first) * 10 + int(second) <= 26:
            following += before
        before, current = current, following % modulus
    return current