import math


def _ratio(numerator, denominator):
    # an empty denominator gives a non-finite average rather than an error
    return numerator / denominator if denominator else math.nan


class SimulationStatistics:
    """Running totals for one policy run."""

    def __init__(self):
        self.reset()

    def reset(self):
        self.total_calls = 0
        self.successful_calls = 0
        self.blocked_calls = 0
        self.total_hops = 0
        self.total_delay = 0.0

    def record_admission(self, hops, delay):
        self.total_calls += 1
        self.successful_calls += 1
        self.total_hops += hops
        self.total_delay += delay

    def record_block(self):
        self.total_calls += 1
        self.blocked_calls += 1

    def summary(self, policy=None):
        return {
            "policy": policy,
            "total_calls": self.total_calls,
            "successful_calls": self.successful_calls,
            "success_rate": _ratio(self.successful_calls * 100.0, self.total_calls),
            "blocked_calls": self.blocked_calls,
            "blocked_rate": _ratio(self.blocked_calls * 100.0, self.total_calls),
            "total_hops": self.total_hops,
            "total_delay": self.total_delay,
            "avg_hops": _ratio(self.total_hops, self.successful_calls),
            "avg_delay": _ratio(self.total_delay, self.successful_calls),
        }
