"""Kernel time – Clock port + implementations."""
from listquery.kernel.time.clock import Clock, FrozenClock, SystemClock, as_naive_local

__all__ = ["Clock", "FrozenClock", "SystemClock", "as_naive_local"]
