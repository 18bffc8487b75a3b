"""
Utility functions for the basics tour

This module provides helpers for measuring tour sections and for checking
that lazy sequences stay lazy.
"""

import gc
import logging
import time
import tracemalloc
from typing import Any, Callable, Dict

from lazy import LazySeq

logger = logging.getLogger(__name__)


# Global performance tracking
_performance_metrics = {
    "operations": [],
    "total_time_ms": 0.0,
    "total_memory_mb": 0.0,
    "operation_count": 0
}


def measure_performance(operation_name: str, func: Callable, *args, **kwargs) -> Dict[str, Any]:
    """Measure a function call with timing and memory tracking.

    The returned dict carries the call's return value under "result".
    Failures are recorded and then re-raised.
    """
    owns_tracing = not tracemalloc.is_tracing()
    if owns_tracing:
        tracemalloc.start()
    gc.collect()
    tracemalloc.reset_peak()

    start_time = time.perf_counter()
    performance_info = {"operation": operation_name, "timestamp": time.time()}

    try:
        result = func(*args, **kwargs)
        performance_info["success"] = True
        performance_info["result"] = result
        return performance_info
    except Exception as e:
        performance_info["success"] = False
        performance_info["error"] = str(e)
        logger.error(f"{operation_name} failed: {e}")
        raise
    finally:
        execution_time_ms = (time.perf_counter() - start_time) * 1000
        _, peak = tracemalloc.get_traced_memory()
        if owns_tracing:
            tracemalloc.stop()
        memory_mb = peak / 1024 / 1024

        performance_info["execution_time_ms"] = execution_time_ms
        performance_info["memory_usage_mb"] = memory_mb
        _record(performance_info)
        logger.debug(f"{operation_name}: {execution_time_ms:.2f} ms, peak {memory_mb:.3f} MB")


def _record(performance_info: Dict[str, Any]) -> None:
    metrics = {k: v for k, v in performance_info.items() if k != "result"}
    _performance_metrics["operations"].append(metrics)
    _performance_metrics["total_time_ms"] += performance_info["execution_time_ms"]
    _performance_metrics["total_memory_mb"] += performance_info["memory_usage_mb"]
    _performance_metrics["operation_count"] += 1


def get_performance_summary() -> Dict[str, Any]:
    """Get summary of all performance metrics"""
    count = _performance_metrics["operation_count"]
    if count == 0:
        return {
            "total_operations": 0,
            "total_time_ms": 0.0,
            "total_memory_mb": 0.0,
            "avg_time_ms": 0.0,
            "avg_memory_mb": 0.0
        }

    return {
        "total_operations": count,
        "total_time_ms": _performance_metrics["total_time_ms"],
        "total_memory_mb": _performance_metrics["total_memory_mb"],
        "avg_time_ms": _performance_metrics["total_time_ms"] / count,
        "avg_memory_mb": _performance_metrics["total_memory_mb"] / count
    }


def clear_performance_metrics():
    """Clear all performance metrics"""
    global _performance_metrics
    _performance_metrics = {
        "operations": [],
        "total_time_ms": 0.0,
        "total_memory_mb": 0.0,
        "operation_count": 0
    }


def validate_lazy_evaluation(lazy_seq: Any) -> bool:
    """Check that a LazySeq has not realized anything yet"""
    if not isinstance(lazy_seq, LazySeq):
        return False
    return not lazy_seq._cache and not lazy_seq._exhausted and lazy_seq._pipeline is None
