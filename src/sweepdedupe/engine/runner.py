"""Deduplication run orchestration.

A run goes through five stages:

    resolve     input records and strategy are resolved and checked
    normalize   each record's strategy fields are run through their mutators
    sweep       every strategy step sorts and sweeps the working records
    aggregate   per-step evidence is folded into one score per record
    dispatch    the configured action produces the output records

Every stage is sequential and a failure in any of them aborts the run.
"""

import time
import traceback
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Any

from sweepdedupe.audit.logger import AuditLogger
from sweepdedupe.engine.aggregate import aggregate, dispatch
from sweepdedupe.engine.config import DedupeSettings, DupeRef
from sweepdedupe.engine.normalize import normalize_records
from sweepdedupe.engine.progress import ProgressFn, Throttle
from sweepdedupe.engine.sweep import sweep
from sweepdedupe.errors import InvalidInputError, StrategyValidationError
from sweepdedupe.models import WorkingRecord
from sweepdedupe.parse import parse_bytes, parse_file
from sweepdedupe.strategies import Step, Strategy, get_strategy, validate_strategy

__all__ = ["Deduper", "resolve_input"]

NormalizedFn = Callable[[list[WorkingRecord]], Any]

PROGRESS_INTERVAL = 0.1


def resolve_input(source: Any) -> Sequence[Mapping[str, Any]]:
    """Turn a run input into a sequence of records.

    Paths (``str`` or ``Path``) and ``bytes`` are parsed as reference
    libraries; any other sequence is used as is.

    Raises
    ------
    InvalidInputError
        If the input, once parsed, is not a sequence of mappings.
    """
    if isinstance(source, str | Path):
        source = parse_file(source)
    elif isinstance(source, bytes | bytearray):
        source = parse_bytes(bytes(source))

    if not isinstance(source, Sequence) or isinstance(source, str | bytes):
        raise InvalidInputError(f"Input is not a sequence of records: {type(source).__name__}")

    for index, record in enumerate(source):
        if not isinstance(record, Mapping):
            raise InvalidInputError(
                f"Input record {index} is not a mapping: {type(record).__name__}"
            )
    return source


class Deduper:
    """Configured duplicate-detection engine.

    Settings can be given at construction time and changed later with
    ``set``; each call to ``run`` reads the settings current at that time
    and builds its own working state, so one instance can be run many
    times.

    Parameters
    ----------
    settings : DedupeSettings | Mapping[str, Any] | None, optional
        Base settings. Defaults are used when omitted.
    on_progress : ProgressFn | None, optional
        Called as ``on_progress(current, maximum)`` during the sweep, at
        most once every 100 ms.
    on_normalized : Callable[[list[WorkingRecord]], Any] | None, optional
        Called once with the working records after normalization.
    logger : AuditLogger | None, optional
        Audit logger receiving run and stage events.
    **overrides : Any
        Individual settings applied on top of ``settings``.

    Examples
    --------
    >>> from sweepdedupe.engine import Deduper
    >>> records = [{"doi": "10.1000/182"}, {"doi": "https://doi.org/10.1000/182"}]
    >>> output = Deduper(strategy="doiOnly").run(records)
    >>> output[1]["dedupe"]
    {'score': 1.0, 'dupeOf': [0]}
    """

    def __init__(
        self,
        settings: DedupeSettings | Mapping[str, Any] | None = None,
        *,
        on_progress: ProgressFn | None = None,
        on_normalized: NormalizedFn | None = None,
        logger: AuditLogger | None = None,
        **overrides: Any,
    ) -> None:
        if settings is None:
            settings = DedupeSettings()
        elif not isinstance(settings, DedupeSettings):
            settings = DedupeSettings().merge(settings)
        self.settings = settings.merge(overrides) if overrides else settings
        self.on_progress = on_progress
        self.on_normalized = on_normalized
        self.logger = logger

    def set(self, option: str | Mapping[str, Any], value: Any = None) -> "Deduper":
        """Change one setting, or merge a mapping of settings.

        Parameters
        ----------
        option : str | Mapping[str, Any]
            Setting name (snake_case or camelCase) or a mapping of them.
        value : Any, optional
            New value when ``option`` is a single name.

        Returns
        -------
        Deduper
            This instance, for chaining.

        Raises
        ------
        InvalidSettingError
            If a name is unknown or a value is invalid.
        """
        options = option if isinstance(option, Mapping) else {option: value}
        self.settings = self.settings.merge(options)
        return self

    def run(self, source: Any) -> list[dict[str, Any]]:
        """Detect duplicates in ``source`` and apply the configured action.

        Parameters
        ----------
        source : Any
            Sequence of record mappings, a library file path, or library
            bytes.

        Returns
        -------
        list[dict[str, Any]]
            Output records in input order (a subsequence for DELETE).

        Raises
        ------
        InvalidInputError
            If the input is not a sequence of records.
        UnknownStrategyError
            If the strategy is not in the catalog.
        StrategyValidationError
            If validation is on and the strategy has problems.
        ParseError
            If a path or bytes input cannot be parsed.
        """
        logger = self.logger
        start_time = time.perf_counter()
        stage = "resolve"

        try:
            records = resolve_input(source)
            strategy = get_strategy(self.settings.strategy)
            if self.settings.validate_strategy:
                result = validate_strategy(strategy)
                if result is not True:
                    raise StrategyValidationError(result)

            if logger:
                logger.run_started(self.settings.strategy, self.settings.to_dict(), len(records))

            stage = "normalize"
            working = self._timed(stage, len(records), lambda: self._normalize(records, strategy))

            stage = "sweep"
            self._timed(stage, len(working), lambda: self._sweep(working, strategy))

            stage = "aggregate"
            self._timed(stage, len(working), lambda: (None, aggregate(working)))

            stage = "dispatch"
            output = self._timed(stage, len(working), lambda: self._dispatch(records, working))

        except Exception as e:
            if logger:
                logger.error(type(e).__name__, str(e), stage=stage, traceback=traceback.format_exc())
                logger.run_finished("failed", time.perf_counter() - start_time)
            raise

        if logger:
            logger.run_finished("success", time.perf_counter() - start_time, records_out=len(output))
        return output

    def _timed(
        self,
        stage: str,
        expected_records: int,
        func: Callable[[], tuple[Any, dict[str, int]]],
    ) -> Any:
        """Run one stage, logging its start, duration and counters."""
        if self.logger:
            self.logger.stage_started(stage, expected_records=expected_records)
        stage_start = time.perf_counter()

        value, counters = func()

        if self.logger:
            self.logger.stage_finished(stage, time.perf_counter() - stage_start, counters)
        return value

    def _normalize(
        self, records: Sequence[Mapping[str, Any]], strategy: Strategy
    ) -> tuple[list[WorkingRecord], dict[str, int]]:
        working = normalize_records(records, strategy)
        if self.on_normalized is not None:
            self.on_normalized(working)
        return working, {"records": len(working), "fields": len(strategy.mutators or {})}

    def _sweep(self, working: list[WorkingRecord], strategy: Strategy) -> tuple[None, dict[str, int]]:
        progress = Throttle(self.on_progress, PROGRESS_INTERVAL) if self.on_progress else None

        on_step = None
        if self.logger:
            logger = self.logger

            def on_step(step_index: int, step: Step, counters: dict[str, int]) -> None:
                logger.step_finished(step_index, step.comparison, counters)

        counters = sweep(
            working,
            strategy,
            field_weight=self.settings.field_weight,
            mark_original=self.settings.mark_original,
            use_rec_number=self.settings.dupe_ref == DupeRef.RECNUMBER,
            progress=progress,
            on_step=on_step,
        )
        return None, counters

    def _dispatch(
        self, records: Sequence[Mapping[str, Any]], working: list[WorkingRecord]
    ) -> tuple[list[dict[str, Any]], dict[str, int]]:
        output = dispatch(records, working, self.settings)
        return output, {"records_in": len(records), "records_out": len(output)}
