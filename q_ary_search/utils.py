# --- Comparison Counting ---

class CountingPredicate:
    """
    Wraps an ordering predicate and counts how many times it is evaluated.
    Used to compare the number of comparisons made by different search arities.
    """
    def __init__(self, pred):
        self.pred = pred
        self.comparisons = 0

    def __call__(self, element, query) -> bool:
        self.comparisons += 1
        return self.pred(element, query)


class CountingKey:
    """Identity key for bisect, counting one comparison per probed element."""
    def __init__(self):
        self.comparisons = 0

    def __call__(self, element):
        self.comparisons += 1
        return element
