def accuracy_pct(correct: int, total: int) -> int:
    # integer percent, halves rounded up (12.5 -> 13)
    if total <= 0:
        return 0
    return (200 * correct + total) // (2 * total)
