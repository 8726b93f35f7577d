# autocompleter.py
"""
AutoCompleter - application facade around a single Trie.

Purpose:
 - Own the Trie and the config/log/metrics that travel with it
 - Simple public API for CLI/profiling/tests:
     add(entry), add_many(entries), train_lines(lines), exists(entry),
     suggest(prefix, topn), suggest_many(prefixes, topn), render(), stats()
 - Optional coarse locking: with `thread_safe` on, every call holds one
   RLock for its whole duration, so inserts never interleave with reads.
"""

from __future__ import annotations
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from contextlib import nullcontext
from typing import Any, Dict, Iterable, List, Optional

from prefix_autocompleter.core.trie import Candidate, Trie
from prefix_autocompleter.utils.config_manager import Config
from prefix_autocompleter.utils.logger_utils import Log
from prefix_autocompleter.utils.metrics_tracker import Metrics

class AutoCompleter:
    """Application facade exposing small API
    Public API:
      - add(entry: str) -> None
      - add_many(entries: Iterable[str]) -> int
      - train_lines(lines: Iterable[str]) -> int
      - exists(entry: str) -> bool
      - suggest(prefix: str, topn: Optional[int] = None) -> List[(entry, count)]
      - suggest_many(prefixes: Iterable[str], topn=None, max_workers=4) -> Dict[prefix, List[(entry, count)]]
      - apply_config() -> None
      - render() -> str
      - stats() -> Dict[str, Any]
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        log: Optional[Log] = None,
        metrics: Optional[Metrics] = None,
    ):
        self.cfg = config or Config(path=None)
        # a caller-supplied Log is kept as is; one built here follows the config
        self._own_log = log is None
        self.log = log or Log.from_config(self.cfg)
        self.metrics = metrics or Metrics()
        self.trie = Trie()
        self._lock = self._make_lock()
        self._started_at = time.time()
        self.log.info(
            f"[AutoCompleter] booting (thread_safe={self.cfg.get('thread_safe')}, "
            f"max_suggestions={self.cfg.get('max_suggestions')})"
        )

    def _make_lock(self):
        return threading.RLock() if self.cfg.get("thread_safe") else nullcontext()

    @property
    def thread_safe(self) -> bool:
        return not isinstance(self._lock, nullcontext)

    def apply_config(self) -> None:
        """Re-read `thread_safe` and the log settings after the config changed."""
        with self._lock:
            if self.thread_safe != self.cfg.get("thread_safe"):
                self._lock = self._make_lock()
            if self._own_log:
                self.log = Log.from_config(self.cfg)
        self.log.info(f"[AutoCompleter] config applied (thread_safe={self.thread_safe})")

    # Training ------------------------------------------------------------
    def add(self, entry: str) -> None:
        with self._lock:
            self.trie.insert(entry)

    def add_many(self, entries: Iterable[str]) -> int:
        n = 0
        with self._lock:
            for e in entries:
                self.trie.insert(e)
                n += 1
        self.log.debug(f"[AutoCompleter] added {n} entries")
        return n

    def train_lines(self, lines: Iterable[str]) -> int:
        """Insert every whitespace-separated token of each line. Returns the token count."""
        n = 0
        with self.log.time_block("train_lines") as timer, self._lock:
            for line in lines:
                for tok in line.split():
                    self.trie.insert(tok)
                    n += 1
        self.metrics.record("train_time", timer.elapsed)
        self.log.info(f"[AutoCompleter] trained {n} tokens in {timer.elapsed * 1000:.1f} ms")
        return n

    # Queries -------------------------------------------------------------
    def exists(self, entry: str) -> bool:
        with self._lock:
            return self.trie.exists(entry)

    def suggest(self, prefix: str, topn: Optional[int] = None) -> List[Candidate]:
        """Ranked (entry, count) pairs for `prefix`; at most `topn` (config default)."""
        if topn is None:
            topn = self.cfg.get("max_suggestions")
        t0 = time.perf_counter()
        with self._lock:
            out = self.trie.search_with_counts(prefix, limit=topn)
        dt = time.perf_counter() - t0
        self.metrics.record("suggest_time", dt)
        if dt * 1000 > self.cfg.get("slow_query_ms"):
            self.log.warning(f"[AutoCompleter] slow suggest for {prefix!r}: {dt * 1000:.1f} ms")
        return out

    def suggest_many(
        self, prefixes: Iterable[str], topn: Optional[int] = None, max_workers: int = 4
    ) -> Dict[str, List[Candidate]]:
        """
        Run `suggest` for several prefixes on a small thread pool.
        Results are keyed by prefix; the first failing lookup re-raises here.
        """
        prefixes = list(prefixes)
        with ThreadPoolExecutor(max_workers=max_workers) as ex:
            results = list(ex.map(lambda p: self.suggest(p, topn), prefixes))
        return dict(zip(prefixes, results))

    def render(self) -> str:
        with self._lock:
            return self.trie.display()

    def stats(self) -> Dict[str, Any]:
        with self._lock:
            entries = len(self.trie)
        return {
            "entries": entries,
            "thread_safe": self.thread_safe,
            "uptime_s": round(time.time() - self._started_at, 3),
            "avg_suggest_ms": self.metrics.avg("suggest_time") * 1000,
            "avg_train_ms": self.metrics.avg("train_time") * 1000,
        }
