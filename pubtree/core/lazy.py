"""Write-once lazily computed value cell."""
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar('T')


class LazyValue(Generic[T]):
    """
    Holds a value computed on first read and never changed afterwards.
    
    ``None`` means "not computed"; a factory returning ``None`` leaves the
    cell unset so the next read computes again. No lock is taken: racing
    readers may each run the factory, and the first non-None value written
    is the one every reader sees from then on.
    """
    
    __slots__ = ('_value',)
    
    def __init__(self) -> None:
        self._value: Optional[T] = None
    
    @property
    def is_set(self) -> bool:
        return self._value is not None
    
    def get(self) -> Optional[T]:
        """Returns the cached value without computing it."""
        return self._value
    
    def get_or_compute(self, factory: Callable[[], Optional[T]]) -> Optional[T]:
        """
        Return the cached value, computing and storing it on first use.
        
        Args:
            factory: Zero-argument callable producing the value
            
        Returns:
            The cached value, or None if the factory produced nothing
        """
        value = self._value
        if value is not None:
            return value
        
        value = factory()
        if value is None:
            return None
        
        # set-if-unset
        if self._value is None:
            self._value = value
        return self._value
    
    def __repr__(self) -> str:
        return f"<LazyValue set={self.is_set} value={self._value!r}>"
