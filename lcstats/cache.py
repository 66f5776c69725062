# lcstats/cache.py
import time
import asyncio
from dataclasses import dataclass, asdict
from typing import Any, Callable, Dict, Optional, Tuple

DEFAULT_TTL = 3600

@dataclass
class CacheStats:
    hits: int = 0
    misses: int = 0
    sets: int = 0
    deletes: int = 0
    expired: int = 0

class TTLCache:
    """
    Cache w pamięci procesu, wpis widoczny dopóki now - inserted_at < ttl.
    Wygasanie leniwe: sprawdzane przy get().
    """

    def __init__(self, ttl: int = DEFAULT_TTL, clock: Callable[[], float] = time.monotonic) -> None:
        self.ttl = ttl
        self._clock = clock
        self._data: Dict[str, Tuple[float, Any]] = {}
        self._lock = asyncio.Lock()
        self.stats = CacheStats()

    async def get(self, key: str) -> Optional[Any]:
        now = self._clock()
        async with self._lock:
            item = self._data.get(key)
            if not item:
                self.stats.misses += 1
                return None

            expires_at, value = item
            if expires_at <= now:
                self._data.pop(key, None)
                self.stats.expired += 1
                self.stats.misses += 1
                return None

            self.stats.hits += 1
            return value

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        ttl = self.ttl if ttl is None else ttl
        expires_at = self._clock() + max(int(ttl), 1)
        async with self._lock:
            self._data[key] = (expires_at, value)
            self.stats.sets += 1

    async def delete(self, key: str) -> None:
        async with self._lock:
            self._data.pop(key, None)
            self.stats.deletes += 1

    async def clear(self) -> None:
        async with self._lock:
            self._data.clear()

    async def snapshot(self) -> Dict[str, Any]:
        async with self._lock:
            return {
                "items": len(self._data),
                "ttl": self.ttl,
                "stats": asdict(self.stats),
            }

def key(*parts: Any) -> str:
    return ":".join(str(p) for p in parts if p is not None)
