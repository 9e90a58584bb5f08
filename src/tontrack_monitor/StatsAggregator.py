import logging

from tontrack_monitor.dataclasses import RoundStats, RoundTypeStats


class StatsAggregator:
    """
    Survival/death counters, global and per round type. Mutated only by the
    round state machine when a round is tallied.
    """

    def __init__(self, stats: RoundStats) -> None:
        self.stats = stats

    def register_round_type(self, round_type: str) -> RoundTypeStats:
        return self.stats.round_types.setdefault(round_type, RoundTypeStats())

    def record_round(self, round_type: str, is_dead: bool) -> None:
        bucket = self.register_round_type(round_type)
        self.stats.total_rounds += 1

        if is_dead:
            self.stats.deaths += 1
            bucket.deaths += 1
            outcome = "death"
        else:
            self.stats.survivals += 1
            bucket.survivals += 1
            outcome = "survival"

        logging.info(
            f"Round ended ({outcome}): {round_type} "
            f"(survivals: {self.stats.survivals}, deaths: {self.stats.deaths})"
        )
