# backend/core/query_logger.py

import logging
import threading
import time
from typing import Any, Dict

from sqlalchemy import event
from sqlalchemy.engine import Engine

from core.config import get_settings

logger = logging.getLogger("sqlalchemy.engine")
query_logger = logging.getLogger("query_performance")

settings = get_settings()


class QueryLogger:
    """SQL query statistics for development and debugging"""

    def __init__(self):
        self.enabled = settings.log_sql_queries
        self.slow_query_threshold = settings.slow_query_threshold_seconds
        self._lock = threading.Lock()
        self.reset_stats()

    def reset_stats(self):
        """Reset query statistics"""
        with self._lock:
            self.query_stats: Dict[str, Any] = {
                "total_queries": 0,
                "slow_queries": 0,
                "total_time": 0.0,
            }

    def record_query(self, duration: float) -> bool:
        """Count one executed query; returns True when it was slow"""
        slow = duration > self.slow_query_threshold
        with self._lock:
            self.query_stats["total_queries"] += 1
            self.query_stats["total_time"] += duration
            if slow:
                self.query_stats["slow_queries"] += 1
        return slow

    def log_query_stats(self):
        """Log accumulated query statistics"""
        if not self.enabled:
            return

        with self._lock:
            stats = dict(self.query_stats)
        total = stats["total_queries"]
        query_logger.info(
            f"Total queries: {total}, "
            f"slow queries (>{self.slow_query_threshold}s): {stats['slow_queries']}, "
            f"average time: {stats['total_time'] / max(total, 1):.3f}s"
        )


# Singleton instance
query_logger_instance = QueryLogger()


def setup_query_logging(engine: Engine):
    """
    Setup query logging for an SQLAlchemy engine

    Args:
        engine: SQLAlchemy engine instance
    """
    if not query_logger_instance.enabled:
        return

    @event.listens_for(engine, "before_cursor_execute")
    def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        conn.info.setdefault("query_start_time", []).append(time.time())
        logger.debug("Start Query: %s", statement)

    @event.listens_for(engine, "after_cursor_execute")
    def after_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        total_time = time.time() - conn.info["query_start_time"].pop(-1)

        if query_logger_instance.record_query(total_time):
            query_logger.warning(f"SLOW QUERY ({total_time:.3f}s): {statement[:200]}...")

        logger.debug("Query Complete in %.3fs", total_time)
