"""
Round lifecycle driven by log lines.

Idle -> Active on a round start, back to Idle either on a verified round end
(tallied) or on a respawn (voided, not tallied). Killers, deaths and
reborns only update the active round. Save codes are recorded regardless of
the round state.
"""
import logging
from typing import Optional

from tontrack_data import TerrorData

from tontrack_monitor.LogPatterns import LogPatterns
from tontrack_monitor.MonitorContext import MonitorState
from tontrack_monitor.StatsAggregator import StatsAggregator
from tontrack_monitor.dataclasses import (
    MAX_HISTORY,
    CodeEntry,
    CurrentRoundInfo,
    LineResult,
)


class RoundStateMachine:
    UNKNOWN_ROUND_TYPE = "Unknown"
    FALLBACK_ROUND_TYPE = "Classic"

    def __init__(
        self,
        terror_data: TerrorData,
        patterns: Optional[LogPatterns] = None,
        history_limit: int = MAX_HISTORY
    ) -> None:
        self.terror_data = terror_data
        self.patterns = patterns or LogPatterns()
        self.history_limit = history_limit

    def process_line(self, line: str, state: MonitorState) -> LineResult:
        """
        Apply every transition the line matches, in a fixed order. The code
        capture runs last so it sees killers set on the same line.
        """
        result = LineResult()

        round_start = self.patterns.round_start(line)
        if round_start:
            if state.current_round.is_active:
                logging.warning("Previous round never finished, starting the next one")

            state.current_round = CurrentRoundInfo(
                is_active=True,
                map_name=round_start.map_name,
                round_type=round_start.round_type,
            )
            state.runtime.current_round_type = round_start.round_type
            StatsAggregator(state.data.stats).register_round_type(round_start.round_type)

            logging.info(f"Round started: {round_start.round_type} at {round_start.map_name}")
            result.changed = True
            result.round_started = True

        killers = self.patterns.killers(line)
        if killers:
            if killers.round_type is not None and state.current_round.round_type is None:
                state.current_round.round_type = killers.round_type
                state.runtime.current_round_type = killers.round_type
                logging.info(f"Round type updated: {killers.round_type}")

            state.current_round.killers = killers.active
            logging.info(f"Killers set: {killers.active}")
            result.changed = True
            if killers.active:
                result.killers_changed = True

        if self.patterns.death(line):
            state.current_round.is_dead = True
            logging.info("Death detected")
            result.changed = True

        if self.patterns.reborn(line):
            state.current_round.is_dead = False
            logging.info("Reborn detected, death cancelled")
            result.changed = True

        if self.patterns.survival(line):
            # Tallied on round end from is_dead
            logging.info("Survival detected")
            result.changed = True

        if self.patterns.respawn(line):
            logging.info("Respawn detected, round voided")
            state.current_round = CurrentRoundInfo()
            state.runtime.current_round_type = None
            result.changed = True
            result.round_ended = True

        if self.patterns.round_end(line):
            round_type = state.runtime.current_round_type or self.UNKNOWN_ROUND_TYPE
            state.runtime.current_round_type = None
            StatsAggregator(state.data.stats).record_round(round_type, state.current_round.is_dead)

            state.current_round = CurrentRoundInfo()
            result.changed = True
            result.round_ended = True

        code = self.patterns.code(line)
        if code:
            self._record_code(code.code, code.timestamp, state)
            result.changed = True

        return result

    def _record_code(self, code: str, timestamp: str, state: MonitorState) -> None:
        round_type = state.runtime.current_round_type
        logging.info(f"New code found: {code} (round: {round_type})")

        terror_names = None
        round_type_english = None
        if state.current_round.is_active:
            lookup_type = round_type or self.FALLBACK_ROUND_TYPE
            names = [
                self.terror_data.lookup(killer, lookup_type).name
                for killer in state.current_round.killers
            ]
            terror_names = names or None

            if round_type is not None:
                round_type_english = self.terror_data.translate_round_type(round_type)

            state.current_round.save_code = code

        state.data.history.append(CodeEntry(
            code=code,
            timestamp=timestamp,
            round_type=round_type,
            terror_names=terror_names,
            round_type_english=round_type_english,
        ))

        overflow = len(state.data.history) - self.history_limit
        if overflow > 0:
            del state.data.history[:overflow]
