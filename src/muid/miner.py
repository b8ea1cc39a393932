"""
Key mining

Mining draws random 16-byte keys until the hash of one starts with a corpus
prefix of exactly the requested difficulty. Each hex character of difficulty
multiplies the expected work by 16:

    expected attempts = 16 ** difficulty / (corpus entries of that length)

Usage:
    from muid.corpus import default_corpus
    from muid.miner import Miner, mine_parallel

    found = Miner(default_corpus()).mine_until(difficulty=6, quota=2)
    found = mine_parallel(default_corpus(), difficulty=8, quota=4, timeout=600)

Mining is blocking and CPU-bound. Pass `timeout` or `stop_event` to bound it;
`mine_parallel` spreads the work over one process per core.
"""

import logging
import math
import multiprocessing
import queue
import secrets
import time
import warnings
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from muid import config
from muid.corpus import Corpus
from muid.digest import bhash
from muid.errors import (
    DifficultyWarning,
    InvalidArgumentError,
    MiningCancelled,
    MiningTimeout,
    MuidError,
)
from muid.log import log
from muid.naming import pretty

logger = logging.getLogger("muid.miner")

# Attempts between checks of the clock and the stop event.
CHECK_INTERVAL = 256


@dataclass(frozen=True)
class FoundKey:
    """A mined key and the animal its hash spells."""

    length: int
    pretty: str
    key: str
    hash: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class Miner:
    """Brute-force search for keys whose hash starts with a corpus entry."""

    def __init__(
        self,
        corpus: Corpus,
        random_bytes: Optional[Callable[[int], bytes]] = None,
    ):
        """
        Args:
            corpus: Prefix table to mine against
            random_bytes: Source of candidate key bytes, called with the
                number of bytes wanted. Defaults to secrets.token_bytes;
                tests pass a seeded random.Random(...).randbytes.
        """
        self.corpus = corpus
        self.random_bytes = random_bytes or secrets.token_bytes

    def expected_attempts(self, difficulty: int) -> float:
        """Average number of random keys needed for one match."""
        matches = self.corpus.count(difficulty)
        if matches == 0:
            return math.inf
        return 16**difficulty / matches

    def check_request(self, difficulty: int, quota: int) -> None:
        """Reject requests that are malformed or could never finish."""
        if not isinstance(difficulty, int) or isinstance(difficulty, bool):
            raise InvalidArgumentError("Difficulty must be an integer")
        if difficulty <= 0:
            raise InvalidArgumentError("Difficulty must be positive")
        if not isinstance(quota, int) or isinstance(quota, bool) or quota < 0:
            raise InvalidArgumentError("Quota must be a non-negative integer")
        if self.corpus.count(difficulty) == 0:
            raise InvalidArgumentError(
                f"No corpus entries have length {difficulty}; "
                f"available lengths: {sorted(self.corpus.lengths)}"
            )

    def warn_if_slow(self, difficulty: int) -> None:
        if difficulty >= config.WARN_DIFFICULTY:
            warnings.warn(
                f"Mining at difficulty {difficulty} may take days or weeks "
                f"(~{self.expected_attempts(difficulty):,.0f} attempts per key)",
                DifficultyWarning,
                stacklevel=3,
            )

    # ------------------------------------------------------------------
    def mine_until(
        self,
        difficulty: int,
        quota: int,
        timeout: Optional[float] = None,
        stop_event=None,
    ) -> List[FoundKey]:
        """
        Mine until `quota` keys of exactly `difficulty` hex characters are found.

        Args:
            difficulty: Length of the corpus prefix the hash must start with
            quota: Number of keys to find
            timeout: Give up after this many seconds
            stop_event: Object with is_set() (threading or multiprocessing
                Event); mining stops once it is set

        Returns:
            List of exactly `quota` FoundKey results

        Raises:
            InvalidArgumentError: Bad difficulty or quota
            MiningTimeout: The timeout expired (partial results attached)
            MiningCancelled: The stop event was set (partial results attached)
        """
        self.check_request(difficulty, quota)
        self.warn_if_slow(difficulty)
        results, _ = self._mine(difficulty, quota, timeout, stop_event)
        return results

    def _mine(
        self,
        difficulty: int,
        quota: int,
        timeout: Optional[float] = None,
        stop_event=None,
    ) -> Tuple[List[FoundKey], int]:
        """Mining loop without request checks; also returns the attempt count."""
        results: List[FoundKey] = []
        attempts = 0
        start_time = time.monotonic()

        while len(results) < quota:
            if attempts % CHECK_INTERVAL == 0:
                if stop_event is not None and stop_event.is_set():
                    raise MiningCancelled(
                        f"Mining cancelled after {attempts:,} attempts",
                        results=results,
                        attempts=attempts,
                    )
                if timeout is not None and time.monotonic() - start_time > timeout:
                    raise MiningTimeout(
                        f"Mining timed out after {timeout}s and {attempts:,} attempts",
                        results=results,
                        attempts=attempts,
                    )

            key = self.random_bytes(config.KEY_BYTES).hex()
            code = bhash(key)
            attempts += 1

            # Exact length only: a longer or shorter match is a different difficulty.
            lengths = self.corpus.exact_lookup(code[:difficulty])
            if lengths is not None:
                found = self.report_finding(key, code, lengths)
                log(logger, "debug", "Key found", pretty=found.pretty, attempts=attempts)
                results.append(found)

        elapsed = time.monotonic() - start_time
        log(
            logger,
            "info",
            "Mining complete",
            difficulty=difficulty,
            found=len(results),
            attempts=attempts,
            elapsed=f"{elapsed:.2f}s",
            rate=f"{attempts / elapsed:,.0f}/s" if elapsed > 0 else "n/a",
        )
        return results, attempts

    def report_finding(self, key: str, code: str, key_lengths: Tuple[int, int]) -> FoundKey:
        len1, len2 = key_lengths
        longest = len1 + len2
        return FoundKey(
            length=longest,
            pretty=pretty(code[:longest], len1, len2),
            key=key,
            hash=bhash(key),
        )


# ----------------------------------------------------------------------
# Parallel mining

# Seconds between attempt-count reports from a worker with nothing to report.
PROGRESS_INTERVAL = 0.25


def mining_worker(
    worker_id: int,
    entries: Dict[str, list],
    difficulty: int,
    result_queue: multiprocessing.Queue,
    stop_event: multiprocessing.Event,
):
    """
    Worker process: push every key found until told to stop.

    Each message is (worker_id, found, attempts) where attempts is the
    worker's running total and found is None for a plain progress report.
    """
    miner = Miner(Corpus(entries))
    attempts = 0
    try:
        while not stop_event.is_set():
            try:
                found, count = miner._mine(
                    difficulty, 1, timeout=PROGRESS_INTERVAL, stop_event=stop_event
                )
            except MiningTimeout as e:
                attempts += e.attempts
                result_queue.put((worker_id, None, attempts))
                continue
            attempts += count
            result_queue.put((worker_id, found[0], attempts))
    except MiningCancelled:
        pass
    except KeyboardInterrupt:
        pass


def mine_parallel(
    corpus: Corpus,
    difficulty: int,
    quota: int,
    workers: Optional[int] = None,
    timeout: Optional[float] = None,
) -> List[FoundKey]:
    """
    Mine with one process per worker, each on its own random stream.

    Workers push results to a shared queue; once `quota` results have arrived
    every worker is stopped. Keys found by two workers are not deduplicated.

    Raises:
        InvalidArgumentError: Bad difficulty, quota or worker count
        MiningTimeout: The timeout expired. Carries the results so far and
            the attempts the workers had reported by then
        MuidError: Every worker died before the quota was met
    """
    miner = Miner(corpus)
    miner.check_request(difficulty, quota)
    miner.warn_if_slow(difficulty)

    num_workers = multiprocessing.cpu_count() if workers is None else workers
    if (
        not isinstance(num_workers, int)
        or isinstance(num_workers, bool)
        or num_workers <= 0
    ):
        raise InvalidArgumentError("Number of workers must be a positive integer")
    if quota == 0:
        return []

    log(
        logger,
        "info",
        "Spawning mining workers",
        workers=num_workers,
        difficulty=difficulty,
        quota=quota,
        expected_attempts=f"{miner.expected_attempts(difficulty):,.0f}",
    )

    result_queue = multiprocessing.Queue()
    stop_event = multiprocessing.Event()
    entries = corpus.to_dict()

    processes = []
    for i in range(num_workers):
        process = multiprocessing.Process(
            target=mining_worker,
            args=(i, entries, difficulty, result_queue, stop_event),
            daemon=True,
        )
        process.start()
        processes.append(process)

    results: List[FoundKey] = []
    worker_attempts: Dict[int, int] = {}
    start_time = time.monotonic()
    try:
        while len(results) < quota:
            wait = 0.5
            if timeout is not None:
                remaining = timeout - (time.monotonic() - start_time)
                if remaining <= 0:
                    attempts = sum(worker_attempts.values())
                    raise MiningTimeout(
                        f"Parallel mining timed out after {timeout}s "
                        f"with {len(results)} of {quota} keys "
                        f"and {attempts:,} attempts",
                        results=results,
                        attempts=attempts,
                    )
                wait = min(wait, remaining)

            try:
                worker_id, found, attempts = result_queue.get(timeout=wait)
            except queue.Empty:
                if not any(p.is_alive() for p in processes):
                    raise MuidError("All mining workers exited before the quota was met")
                continue

            worker_attempts[worker_id] = attempts
            if found is None:
                continue
            log(logger, "debug", "Worker found key", worker=worker_id, pretty=found.pretty)
            results.append(found)
    finally:
        stop_event.set()
        # Drain so workers blocked on a full pipe can exit.
        try:
            while True:
                result_queue.get_nowait()
        except queue.Empty:
            pass
        for process in processes:
            process.join(timeout=5)
            if process.is_alive():
                process.terminate()

    elapsed = time.monotonic() - start_time
    log(
        logger,
        "info",
        "Parallel mining complete",
        difficulty=difficulty,
        found=len(results),
        attempts=sum(worker_attempts.values()),
        elapsed=f"{elapsed:.2f}s",
    )
    return results
